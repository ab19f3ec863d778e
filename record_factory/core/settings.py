from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes", "on")

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class FactorySettings:
    # must_* re-raise instead of swallowing errors
    strict_must: bool = False
    # level used when must_* swallow an error
    must_log_level: int = logging.WARNING
    # plain callables (not wrapped in Supplier) are invoked as suppliers
    bare_callables: bool = True

    @classmethod
    def from_env(cls) -> "FactorySettings":
        """
        Reads:
          RECORD_FACTORY_STRICT_MUST      1/true/yes (default off)
          RECORD_FACTORY_MUST_LOG_LEVEL   debug|info|warning|error (default warning)
          RECORD_FACTORY_BARE_CALLABLES   1/true/yes (default on)
        Unknown log levels fall back to warning.
        """
        level_name = (os.getenv("RECORD_FACTORY_MUST_LOG_LEVEL") or "warning").strip().lower()
        return cls(
            strict_must=_env_flag("RECORD_FACTORY_STRICT_MUST", False),
            must_log_level=_LOG_LEVELS.get(level_name, logging.WARNING),
            bare_callables=_env_flag("RECORD_FACTORY_BARE_CALLABLES", True),
        )
