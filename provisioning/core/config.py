"""
Configuration helpers for the provisioning services.

Settings are read from environment variables once and cached, so routers and
services never touch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

KNOWN_SERVICES = ("accounts", "cards", "loans")


class ConfigurationError(Exception):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    log_file: str
    build_version: str
    enabled_services: tuple[str, ...]
    audit_actor: str
    identifier_max_attempts: int
    auto_create_schema: bool
    contact_message: str
    contact_name: str
    contact_email: str
    on_call_support: str
    host: str
    port: int


def _parse_services(value: str | None) -> tuple[str, ...]:
    if not value or not value.strip():
        return KNOWN_SERVICES
    names = []
    for raw in value.split(","):
        name = raw.strip().lower()
        if not name:
            continue
        if name not in KNOWN_SERVICES:
            raise ConfigurationError(f"Unknown service '{name}' in ENABLED_SERVICES")
        if name not in names:
            names.append(name)
    return tuple(names)


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///provisioning.db"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE", ""),
        build_version=os.getenv("BUILD_VERSION", "1.0.0"),
        enabled_services=_parse_services(os.getenv("ENABLED_SERVICES")),
        audit_actor=os.getenv("AUDIT_ACTOR", "PROVISIONING_MS"),
        identifier_max_attempts=max(1, _int(os.getenv("IDENTIFIER_MAX_ATTEMPTS", "5"), 5)),
        auto_create_schema=_bool(os.getenv("AUTO_CREATE_SCHEMA"), True),
        contact_message=os.getenv(
            "CONTACT_MESSAGE", "Welcome to the provisioning services. Reach out with any question."
        ),
        contact_name=os.getenv("CONTACT_NAME", "Provisioning Support"),
        contact_email=os.getenv("CONTACT_EMAIL", "support@example.com"),
        on_call_support=os.getenv("ON_CALL_SUPPORT", "support-oncall@example.com"),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "8080"), 8080),
    )
