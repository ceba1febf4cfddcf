"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started locally without any configuration; in a deployment
the database location and listening port are normally overridden.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "InsureConnect API")
    api_version: str = _env("API_VERSION", "1.0.0")
    log_level: str = _env("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to console output.
    log_file: str = _env("LOG_FILE", "")

    # Path of the SQLite database holding the provider collection.
    # Relative paths are resolved against the project root by the
    # ``db`` module; ``:memory:`` keeps everything in process.
    database_url: str = _env("DATABASE_URL", "insureconnect.db")

    host: str = _env("HOST", "0.0.0.0")
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "5000")))

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  ``*`` allows any origin, which is what the public
    # listing front end expects.
    cors_origins: str = _env("CORS_ORIGINS", "*")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Tests construct their own
# ``Settings`` and pass it to ``create_app``.
settings = Settings()
