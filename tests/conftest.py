from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the provisioning package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from provisioning.core import config as core_config  # noqa: E402
from provisioning.db.create_tables import create_all, drop_all  # noqa: E402
from provisioning.db import session as db_session  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a throwaway SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.delenv("ENABLED_SERVICES", raising=False)
    monkeypatch.delenv("AUDIT_ACTOR", raising=False)
    _clear_caches()

    engine = db_session.get_engine()
    drop_all(engine)
    create_all(engine)

    yield db_file

    try:
        drop_all(engine)
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    _clear_caches()
    if db_file.exists():
        try:
            db_file.unlink()
        except Exception:
            pass


class ScriptedRandom:
    """Stand-in for random.Random that hands out a fixed sequence of draws."""

    def __init__(self, values):
        self.values = list(values)

    def randint(self, low, high):
        value = self.values.pop(0)
        assert low <= value <= high
        return value


@pytest.fixture()
def scripted_random():
    return ScriptedRandom
