"""
Runtime settings for modthree, read from MODTHREE_* environment variables.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class Settings(BaseModel):
    log_level: str = Field(default="WARNING", description="Standard logging level name")
    log_dir: Optional[str] = Field(default=None, description="Directory for rotating JSON logs")
    log_console: bool = Field(default=True, description="Mirror logs to stderr")

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return v

    @field_validator("log_dir")
    @classmethod
    def empty_dir_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("log_console", mode="before")
    @classmethod
    def parse_flag(cls, v):
        if isinstance(v, str):
            lowered = v.strip().lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise ValueError(f"Expected a boolean flag, got {v!r}")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {}
        if "MODTHREE_LOG_LEVEL" in env:
            values["log_level"] = env["MODTHREE_LOG_LEVEL"]
        if "MODTHREE_LOG_DIR" in env:
            values["log_dir"] = env["MODTHREE_LOG_DIR"]
        if "MODTHREE_LOG_CONSOLE" in env:
            values["log_console"] = env["MODTHREE_LOG_CONSOLE"]
        return cls(**values)
