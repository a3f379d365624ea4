"""Console logging with timestamped lines; errors go to stderr, the rest to stdout."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Union

TRACE = 5

_LEVEL_NAMES = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}


class _Formatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        now = datetime.fromtimestamp(record.created).astimezone()
        stamp = now.isoformat(timespec="milliseconds")
        if stamp.endswith("+00:00"):
            stamp = stamp[: -len("+00:00")] + "Z"
        return f"{stamp} {record.getMessage()}"


class _ConsoleHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stderr if record.levelno >= logging.ERROR else sys.stdout
            stream.write(self.format(record) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


def _resolve(level: Union[int, str]) -> int:
    if isinstance(level, str):
        try:
            return _LEVEL_NAMES[level.lower()]
        except KeyError:
            raise ValueError(f"unknown log level: {level!r}") from None
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    raise ValueError(f"unknown log level: {level!r}")


def init(level: Union[int, str]) -> None:
    """Install the console logger on the root logger at ``level``.

    Raises ``RuntimeError`` if it is already installed.
    """
    numeric = _resolve(level)
    root = logging.getLogger()
    if any(isinstance(h, _ConsoleHandler) for h in root.handlers):
        raise RuntimeError("logger already initialized")
    handler = _ConsoleHandler(numeric)
    handler.setFormatter(_Formatter())
    root.addHandler(handler)
    root.setLevel(numeric)