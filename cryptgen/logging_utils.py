"""Minimal structured logging helper.

Emits one ``key=value`` line per event with a timestamp, level and logger
name. Set ``CRYPTGEN_LOG_JSON=1`` for compact JSON records instead.

Usage:
    from cryptgen.logging_utils import get_logger
    _log = get_logger("dungeon")
    _log.debug(event="rooms_placed", count=7)

Non-numeric values are str()'d with spaces replaced by underscores. Reserved
keys: level, ts. Records go to stderr so command output on stdout stays
machine readable.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "TRUE", "yes", "on")


def _current_level() -> int:
    return LEVELS.get(os.getenv("CRYPTGEN_LOG_LEVEL", "info").lower(), 20)


def _json_mode() -> bool:
    return os.getenv("CRYPTGEN_LOG_JSON", "0") in _TRUTHY


def _format(level: str, **fields) -> str:
    if _json_mode():
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str):
        self.name = name

    def enabled_for(self, level: str) -> bool:
        return LEVELS[level] >= _current_level()

    def _log(self, level: str, **fields):
        if not self.enabled_for(level):
            return
        fields.setdefault("logger", self.name)
        print(_format(level, **fields), file=sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE: dict = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("cryptgen")
