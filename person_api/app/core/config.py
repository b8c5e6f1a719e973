"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with an empty in‑memory store and sensible logging.
Tests build their own ``Settings`` instance and hand it to
``create_app`` instead of touching the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Person API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Name reported by the ``/Person/Info`` endpoints, e.g.
    # "You are using PersonAPI Version 1!".
    application_name: str = os.getenv("APPLICATION_NAME", "PersonAPI")

    # When enabled the store is populated with a handful of well known
    # people at startup.  Handy for demos; off by default.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
