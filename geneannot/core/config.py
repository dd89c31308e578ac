"""
Application configuration management.

This module centralizes all configuration settings for the application,
loading values from environment variables with sensible defaults.

Configuration categories:
- Annotation service endpoints and outbound timeout
- Session lifetime
- HTTP server and CORS settings
- Logging
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from geneannot.core.errors import ConfigError

load_dotenv()

DEFAULT_ANNOQ_API_URL = "http://annoq.org/api/query"
DEFAULT_PANTHER_API_URL = "http://pantherdb.org/api/query"


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _parse_timeout(value) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("", "none", "off"):
            return None
        value = text
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"ANNOTATION_TIMEOUT must be a number, got {value!r}") from exc
    if timeout < 0:
        raise ConfigError("ANNOTATION_TIMEOUT must not be negative")
    # Zero disables the timeout entirely
    return timeout or None


def _parse_int(name: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclass
class Config:
    """
    Central configuration for the gene annotation service.

    All configuration values are loaded from environment variables (and a
    ``.env`` file when present). Values passed explicitly take precedence,
    which is how tests build isolated configurations.

    Attributes:
        ANNOQ_API_URL: Base URL of the ANNOq query endpoint.
        PANTHER_API_URL: Base URL of the PANTHER query endpoint.
        ANNOTATION_TIMEOUT: Outbound request timeout in seconds, None for no timeout.
        SESSION_TTL_SECONDS: Lifetime of an uploaded gene list, 0 for no expiry.
        CORS_ALLOW_ORIGINS: Origins allowed to call the API.
        LOG_LEVEL: Root logging level.
        HOST: Interface the server binds to.
        PORT: Port the server listens on.
    """

    ANNOQ_API_URL: str = field(default_factory=lambda: _env("ANNOQ_API_URL", DEFAULT_ANNOQ_API_URL))
    PANTHER_API_URL: str = field(
        default_factory=lambda: _env("PANTHER_API_URL", DEFAULT_PANTHER_API_URL)
    )
    ANNOTATION_TIMEOUT: Optional[float] = field(default_factory=lambda: _env("ANNOTATION_TIMEOUT", "30"))
    SESSION_TTL_SECONDS: int = field(default_factory=lambda: _env("SESSION_TTL_SECONDS", "3600"))
    CORS_ALLOW_ORIGINS: List[str] = field(default_factory=lambda: _env("CORS_ALLOW_ORIGINS", "*"))
    LOG_LEVEL: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    HOST: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    PORT: int = field(default_factory=lambda: _env("PORT", "8080"))

    def __post_init__(self):
        self.ANNOQ_API_URL = self.ANNOQ_API_URL.rstrip("/")
        self.PANTHER_API_URL = self.PANTHER_API_URL.rstrip("/")
        if not self.ANNOQ_API_URL or not self.PANTHER_API_URL:
            raise ConfigError("Annotation service URLs must not be empty")

        self.ANNOTATION_TIMEOUT = _parse_timeout(self.ANNOTATION_TIMEOUT)

        self.SESSION_TTL_SECONDS = _parse_int("SESSION_TTL_SECONDS", self.SESSION_TTL_SECONDS)
        if self.SESSION_TTL_SECONDS < 0:
            raise ConfigError("SESSION_TTL_SECONDS must not be negative")

        self.PORT = _parse_int("PORT", self.PORT)

        if isinstance(self.CORS_ALLOW_ORIGINS, str):
            self.CORS_ALLOW_ORIGINS = [
                origin.strip() for origin in self.CORS_ALLOW_ORIGINS.split(",") if origin.strip()
            ]

        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise ConfigError(f"LOG_LEVEL {self.LOG_LEVEL!r} is not a logging level")


settings = Config()
