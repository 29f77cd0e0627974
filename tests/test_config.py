from __future__ import annotations

import logging

import pytest

from provisioning import __main__ as entrypoint
from provisioning.core import config as core_config
from provisioning.core.config import ConfigurationError, get_settings
from provisioning.core.logging_config import setup_logging


@pytest.fixture(autouse=True)
def fresh_settings():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("ENABLED_SERVICES", "IDENTIFIER_MAX_ATTEMPTS", "AUTO_CREATE_SCHEMA", "AUDIT_ACTOR"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.enabled_services == ("accounts", "cards", "loans")
    assert settings.identifier_max_attempts == 5
    assert settings.auto_create_schema is True
    assert settings.audit_actor == "PROVISIONING_MS"


def test_enabled_services_are_normalized(monkeypatch):
    monkeypatch.setenv("ENABLED_SERVICES", " Loans, cards,,loans ")
    assert get_settings().enabled_services == ("loans", "cards")


def test_unknown_service_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("ENABLED_SERVICES", "cards,mortgages")
    with pytest.raises(ConfigurationError):
        get_settings()


def test_bad_numbers_and_flags_fall_back(monkeypatch):
    monkeypatch.setenv("IDENTIFIER_MAX_ATTEMPTS", "lots")
    monkeypatch.setenv("AUTO_CREATE_SCHEMA", "off")
    settings = get_settings()
    assert settings.identifier_max_attempts == 5
    assert settings.auto_create_schema is False


def test_setup_logging_leaves_configured_root_alone():
    root = logging.getLogger()
    before = list(root.handlers)
    if not before:
        pytest.skip("root logger has no handlers to preserve")
    setup_logging("DEBUG")
    assert root.handlers == before


def test_run_server_hands_the_app_factory_to_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    entrypoint.run_server()

    target, kwargs = calls[0]
    assert target == "provisioning.app:create_app"
    assert kwargs["factory"] is True
    assert kwargs["port"] == 9090
    assert kwargs["log_level"] == "warning"
