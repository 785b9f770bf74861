from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Dict, Optional, TextIO


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_UNSET: Any = object()


class ConsoleLogger:
    """Line logger for the package; writes to ``stream`` or, when unset, ``sys.stderr``."""

    def __init__(self, name: str = "optionpy", level: str = "WARN", json_output: bool = False,
                 stream: Optional[TextIO] = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 30)
        self.json_output = json_output
        self.stream = stream

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    @property
    def level_name(self) -> str:
        return next((k for k, v in _LEVELS.items() if v == self.level), "WARN")

    def log(self, level: str, msg: str, **fields: Any) -> None:
        level = level.upper()
        if _LEVELS[level] < self.level:
            return
        out = self.stream if self.stream is not None else sys.stderr
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        if self.json_output:
            rec: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if fields:
                rec["fields"] = fields
            line = json.dumps(rec, separators=(",", ":"), default=repr)
        else:
            line = f"[{ts}] {self.name} {level}: {msg}" + "".join(f" {k}={v}" for k, v in sorted(fields.items()))
        print(line, file=out)

    def debug(self, msg: str, **fields: Any) -> None: self.log("DEBUG", msg, **fields)


_default = ConsoleLogger()


def get_logger() -> ConsoleLogger:
    return _default


def configure_logging(level: Optional[str] = None, json_output: Optional[bool] = None,
                      stream: Optional[TextIO] = _UNSET) -> ConsoleLogger:
    """Adjust the package logger in place.

    ``level`` and ``json_output`` left as None keep their value. ``stream`` left
    out keeps its value; ``stream=None`` sends output back to ``sys.stderr``.
    """
    if level is not None:
        _default.set_level(level)
    if json_output is not None:
        _default.json_output = json_output
    if stream is not _UNSET:
        _default.stream = stream
    return _default
