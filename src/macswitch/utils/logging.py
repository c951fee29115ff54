"""Logging for the macswitch package.

Every module logs through ``get_logger(__name__)``; the ``macswitch`` logger
is configured on first use with a console handler on stderr and a file
handler whose own threshold is DEBUG.

Environment:
    MACSWITCH_LOG_LEVEL  console level name (``DEBUG``, ``WARNING`` ...)
    MACSWITCH_LOG_FILE   log file path, or ``off`` for console-only logging
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

from ..config.settings import LOG_DIR
from .console import printable

_CONFIGURED = False

ROOT_LOGGER = "macswitch"
LOG_FILE = LOG_DIR / "macswitch.log"
LOG_LEVEL_ENV = "MACSWITCH_LOG_LEVEL"
LOG_FILE_ENV = "MACSWITCH_LOG_FILE"
_FILE_DISABLED = ("off", "none", "-")

CONSOLE_FORMAT = "%(asctime)s %(levelname)-7s %(component)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)-7s] %(component)s (pid %(process)d): %(message)s"


def _component(name: str) -> str:
    prefix = ROOT_LOGGER + "."
    return name[len(prefix):] if name.startswith(prefix) else name


class MacSwitchFormatter(logging.Formatter):
    """Formatter exposing ``%(component)s``: the logger name without the package prefix.

    ``macswitch.recommend.ranking`` is shown as ``recommend.ranking``;
    loggers outside the package keep their full name.
    """

    def __init__(self, fmt: str = CONSOLE_FORMAT, datefmt: str = "%H:%M:%S") -> None:
        super().__init__(fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        record.component = _component(record.name)
        return super().format(record)


class SafeStreamHandler(logging.StreamHandler):
    """Console handler that escapes what the stream encoding cannot show (arrows, AED glyphs)."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            encoding = getattr(self.stream, "encoding", None) or "utf-8"
            self.stream.write(printable(self.format(record), encoding) + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def _coerce_level(value: Union[int, str]) -> Optional[int]:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    return level if isinstance(level, int) else None


def _level_from_env(default: int) -> int:
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not raw:
        return default
    level = _coerce_level(raw)
    return default if level is None else level


def _log_file_from_env(default: Path) -> Optional[Path]:
    raw = os.environ.get(LOG_FILE_ENV, "").strip()
    if not raw:
        return default
    if raw.lower() in _FILE_DISABLED:
        return None
    return Path(raw).expanduser()


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
) -> None:
    """Configure the ``macswitch`` logger.

    Only the first call has an effect. ``MACSWITCH_LOG_LEVEL`` overrides
    ``level``; ``log_file`` wins over ``MACSWITCH_LOG_FILE``, which wins over
    ``logs/macswitch.log``.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    level = _level_from_env(level)
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)

    console = SafeStreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(MacSwitchFormatter())
    root.addHandler(console)

    target = Path(log_file) if log_file is not None else _log_file_from_env(LOG_FILE)
    if target is None:
        return
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(target, encoding="utf-8", delay=True)
    except OSError as exc:
        # read-only deployments (hosted dashboard) log to the console only
        root.debug("File logging disabled (%s): %s", target, exc)
        return
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(MacSwitchFormatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(fh)


def set_level(level: Union[int, str]) -> int:
    """Set the ``macswitch`` logger and its console handler to ``level``.

    Accepts a number or a level name such as ``"debug"``. The file handler
    keeps its DEBUG threshold. Returns the numeric level.
    """
    numeric = _coerce_level(level)
    if numeric is None:
        raise ValueError(f"Unknown log level: {level!r}")
    setup_logging()
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(numeric)
    for handler in root.handlers:
        if isinstance(handler, SafeStreamHandler):
            handler.setLevel(numeric)
    return numeric


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring the ``macswitch`` namespace on first use."""
    setup_logging()
    return logging.getLogger(name)
