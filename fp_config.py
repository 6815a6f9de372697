"""Runtime configuration for the False Position web server."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_PORT = 8080
TRUTHY = {"1", "true", "yes", "on"}


def _port_from_env() -> int:
    raw = os.getenv("PORT", "")
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_PORT


def _flag_from_env(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in TRUTHY


@dataclass
class ServerConfig:
    """Server settings; environment variables override defaults."""

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=_port_from_env)
    debug: bool = field(default_factory=lambda: _flag_from_env("FP_DEBUG"))
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper()
    )
