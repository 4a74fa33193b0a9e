"""Coloured console logging with a wall-clock timestamp."""

from __future__ import annotations

import sys
import time
from enum import Enum


class LogType(Enum):
    """Severity of a log line."""

    MESSAGE = "MESSAGE"
    DEBUG = "DEBUG"
    WARNING = "WARNING"
    ERROR = "ERROR"


_VALUES = {
    LogType.MESSAGE: ("MESSAGE", "\033[36m"),
    LogType.DEBUG: ("DEBUG", "\033[32m"),
    LogType.WARNING: ("WARNING", "\033[33m"),
    LogType.ERROR: ("ERROR", "\033[31m"),
}

_UNKNOWN = ("UNKNOWN", "\033[0m")


def log_values(log_type: object) -> tuple[str, str]:
    """Return the label and ANSI colour used for ``log_type``."""
    return _VALUES.get(log_type, _UNKNOWN)  # type: ignore[arg-type]


def log(log_type: object, message: str) -> None:
    """Write one coloured, timestamped line to standard output."""
    now = time.localtime()
    stamp = f"{now.tm_hour}:{now.tm_min}:{now.tm_sec}"
    label, color = log_values(log_type)
    sys.stdout.write(f"{color}[LOG - {label}] |{stamp}|  -  {message}\n")