import sys
from typing import Any, TextIO

_ERRORS = "backslashreplace"


def _stream_encoding(stream: TextIO) -> str:
    return getattr(stream, "encoding", None) or "utf-8"


def printable(value: Any, encoding: str = "utf-8") -> str:
    """Render ``value`` so that it can be written to a stream using ``encoding``.

    Delta notes carry arrows and the dashboard uses an em dash for unpriced
    models; a cp1252 console would otherwise raise on them.
    """
    text = value.decode("utf-8", errors=_ERRORS) if isinstance(value, bytes) else str(value)
    try:
        text.encode(encoding)
        return text
    except UnicodeEncodeError:
        return text.encode(encoding, errors=_ERRORS).decode(encoding, errors=_ERRORS)


def safe_print(*args: Any, sep: str = " ", end: str = "\n", file: TextIO | None = None) -> None:
    stream = file if file is not None else sys.stdout
    encoding = _stream_encoding(stream)
    stream.write(printable(sep.join(str(a) for a in args) + end, encoding))


def rule(char: str = "=", width: int = 60, file: TextIO | None = None) -> None:
    safe_print(char * width, file=file)
