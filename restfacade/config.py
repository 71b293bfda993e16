"""Environment-specific configuration loader."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

ALLOWED_ENVS = {"dev", "prod"}
ALLOWED_SCHEMES = {"http", "https"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings shared by every request built with them."""

    environment: str = "dev"
    debug: bool = False
    # Emitted by ``Request.get_base_url`` whatever the transport was.
    base_url_scheme: str = "https"
    charset: str = "utf-8"
    correlation_header: str = "X-Correlation-Id"


DEFAULT_SETTINGS = Settings()


def validate_settings(settings: Settings) -> None:
    """Validate *settings* for safe operation.

    Raises
    ------
    ValueError
        If the environment, scheme or charset is unsupported, or if
        production settings are insecure.
    """

    env = settings.environment
    if env not in ALLOWED_ENVS:
        raise ValueError(f"Unsupported environment: {env}")
    if env == "prod" and settings.debug:
        raise ValueError("Debug must be disabled in production")
    if settings.base_url_scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"Unsupported URL scheme: {settings.base_url_scheme}")
    try:
        codecs.lookup(settings.charset)
    except LookupError as exc:
        raise ValueError(f"Unknown charset: {settings.charset}") from exc
    if not settings.correlation_header:
        raise ValueError("Correlation header name must not be empty")


def load_settings() -> Settings:
    """Return configuration derived from `RESTFACADE_*` variables."""

    env = os.getenv("RESTFACADE_ENV", "dev").lower()
    debug = os.getenv("RESTFACADE_DEBUG", "0").lower() in {"1", "true", "yes"}
    settings = Settings(
        environment=env,
        debug=debug,
        base_url_scheme=os.getenv("RESTFACADE_BASE_URL_SCHEME", "https").lower(),
        charset=os.getenv("RESTFACADE_CHARSET", "utf-8"),
        correlation_header=os.getenv(
            "RESTFACADE_CORRELATION_HEADER", "X-Correlation-Id"
        ),
    )
    validate_settings(settings)
    return settings


__all__ = [
    "ALLOWED_ENVS",
    "ALLOWED_SCHEMES",
    "DEFAULT_SETTINGS",
    "Settings",
    "load_settings",
    "validate_settings",
]
