"""
Configuration management.

``Settings`` is a plain dataclass read from environment variables once
at process start by :meth:`Settings.from_env` and then handed to
``create_app`` explicitly.  Nothing in the package reads the
environment after startup, so tests can build a ``Settings`` instance
directly without touching ``os.environ``.

Required variables are ``DATABASE_URL`` and ``PORT``.  If either is
missing (or ``PORT`` is not an integer) ``ConfigurationError`` is
raised and the entry point refuses to start.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional


class ConfigurationError(Exception):
    """Raised when the process environment cannot produce valid settings."""


REQUIRED_VARIABLES = ("DATABASE_URL", "PORT")


def _split_origins(raw: str) -> List[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    """Application settings."""

    database_url: str
    port: int
    host: str = "0.0.0.0"
    project_name: str = "Product Catalog API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        All problems are collected before raising so that the operator
        sees every missing variable in a single error message.
        """
        env = os.environ if environ is None else environ
        problems = [name for name in REQUIRED_VARIABLES if not env.get(name, "").strip()]

        port = 0
        raw_port = env.get("PORT", "").strip()
        if raw_port:
            try:
                port = int(raw_port)
            except ValueError:
                problems.append("PORT (not an integer: %r)" % raw_port)

        if problems:
            raise ConfigurationError(
                "Missing or invalid environment variables: " + ", ".join(problems)
            )

        return cls(
            database_url=env["DATABASE_URL"].strip(),
            port=port,
            host=env.get("HOST", "0.0.0.0"),
            project_name=env.get("PROJECT_NAME", "Product Catalog API"),
            api_version=env.get("API_VERSION", "1.0.0"),
            log_level=env.get("LOG_LEVEL", "INFO"),
            log_file=env.get("LOG_FILE") or None,
            cors_origins=_split_origins(env.get("CORS_ORIGINS", "*")),
        )
