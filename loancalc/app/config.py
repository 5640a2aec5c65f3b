"""App-wide settings, overridable through LOANCALC_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

ENV_PREFIX = "LOANCALC_"

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the environment, falling back to the defaults."""
        environ = os.environ if environ is None else environ
        defaults = cls()

        raw_origins = environ.get(f"{ENV_PREFIX}CORS_ORIGINS")
        origins = (
            tuple(origin.strip() for origin in raw_origins.split(",") if origin.strip())
            if raw_origins
            else defaults.cors_origins
        )
        raw_json = environ.get(f"{ENV_PREFIX}LOG_JSON")

        return cls(
            cors_origins=origins,
            log_level=environ.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            log_json=defaults.log_json if raw_json is None else raw_json.lower() in {"1", "true", "yes"},
        )
