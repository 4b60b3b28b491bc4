from __future__ import annotations

import os
from dataclasses import dataclass, field


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    # Frames kept per stack snapshot; <= 0 keeps the whole stack.
    stack_limit: int = field(default_factory=lambda: _get_int("CAUSERR_STACK_LIMIT", 32))
    log_level: str = field(default_factory=lambda: _get_str("CAUSERR_LOG_LEVEL", "INFO"))


settings = Settings()
