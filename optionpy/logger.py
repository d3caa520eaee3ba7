from __future__ import annotations
import sys, datetime as _dt, json
from typing import Optional, Dict, Any, TextIO


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _level_of(name: str, default: int) -> int:
    return _LEVELS.get(name.upper(), default)


class ConsoleLogger:
    """Line logger for edge code (demo scripts, CLIs); the Option core never logs."""

    def __init__(self, name: str = "optionpy", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None, stream: Optional[TextIO] = None):
        self.name = name
        self.level = _level_of(level, _LEVELS["INFO"])
        self.json_output = json_output
        self.context = dict(context or {})
        self.stream = stream

    @property
    def level_name(self) -> str:
        return next((k for k, v in _LEVELS.items() if v == self.level), "INFO")

    def set_level(self, level: str) -> None:
        self.level = _level_of(level, self.level)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        return ConsoleLogger(
            self.name,
            level=self.level_name,
            json_output=self.json_output,
            context={**self.context, **fields},
            stream=self.stream,
        )

    def enabled_for(self, level: str) -> bool:
        return _LEVELS[level] >= self.level

    def format(self, level: str, msg: str, fields: Dict[str, Any]) -> str:
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        merged = {**self.context, **fields}
        if self.json_output:
            record: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if merged:
                record["fields"] = merged
            return json.dumps(record, separators=(",", ":"), default=repr)
        extras = "".join(f" {k}={v}" for k, v in sorted(merged.items()))
        return f"[{ts}] {self.name} {level}: {msg}{extras}"

    def log(self, level: str, msg: str, **fields: Any) -> None:
        if not self.enabled_for(level):
            return
        # resolved per call so redirect_stderr() is honoured
        out = sys.stderr if self.stream is None else self.stream
        print(self.format(level, msg, fields), file=out)

    def debug(self, msg: str, **fields: Any) -> None: self.log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self.log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self.log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self.log("ERROR", msg, **fields)
