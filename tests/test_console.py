"""Unit tests for macswitch.utils.console: printable / safe_print helpers."""

import io

import pytest

from macswitch.utils.console import printable, rule, safe_print


class TestPrintable:
    def test_normal_string(self):
        assert printable("hello") == "hello"

    def test_arrow_kept_for_utf8(self):
        assert printable("CPU: ↑ Mac stronger") == "CPU: ↑ Mac stronger"

    def test_arrow_escaped_for_cp1252(self):
        assert printable("CPU: ↑", "cp1252") == "CPU: \\u2191"

    def test_bytes_input(self):
        assert printable(b"hello bytes") == "hello bytes"

    def test_non_string(self):
        assert printable(42) == "42"
        assert printable(None) == "None"


class TestSafePrint:
    def test_prints_to_stream(self):
        stream = io.StringIO()
        safe_print("hello", file=stream)
        assert stream.getvalue() == "hello\n"

    def test_prints_multiple_args(self):
        stream = io.StringIO()
        safe_print("a", "b", "c", file=stream)
        assert "a b c" in stream.getvalue()

    def test_custom_separator(self):
        stream = io.StringIO()
        safe_print("a", "b", sep="-", file=stream)
        assert "a-b" in stream.getvalue()

    def test_custom_end(self):
        stream = io.StringIO()
        safe_print("hello", end="!", file=stream)
        assert stream.getvalue() == "hello!"

    def test_unexpected_kwargs_raises(self):
        with pytest.raises(TypeError, match="unexpected"):
            safe_print("x", bad_arg=True)

    def test_narrow_console(self):
        buf = io.BytesIO()
        stream = io.TextIOWrapper(buf, encoding="ascii")
        safe_print("Storage: ↓ Mac lower", file=stream)
        stream.flush()
        assert buf.getvalue() == b"Storage: \\u2193 Mac lower\n"

    def test_defaults_to_stdout(self, capsys):
        safe_print("AED 3,999")
        assert capsys.readouterr().out == "AED 3,999\n"


class TestRule:
    def test_width(self):
        stream = io.StringIO()
        rule("-", 10, file=stream)
        assert stream.getvalue() == "-" * 10 + "\n"
