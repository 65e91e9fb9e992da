"""Shared fixtures for all tests."""

import logging

import pytest
import structlog

from investigator.config import get_settings
from investigator.database.engine import create_engine, create_session_factory, init_db
from investigator.models import AttributeSet
from investigator.sheet import new_character
from investigator.storage import LocalStore


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep a developer's environment and .env file out of the tests."""
    for name in ("INVESTIGATOR_API_URL", "INVESTIGATOR_STORAGE_BACKEND", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging so no test logs to another test's captured stream."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    # basicConfig installs a plain StreamHandler; pytest's own handlers are subclasses
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)


@pytest.fixture
def final_attributes():
    """A typical set of final characteristics."""
    return AttributeSet(
        strength=50,
        constitution=60,
        size=65,
        dexterity=70,
        appearance=45,
        intelligence=75,
        power=55,
        education=80,
        luck=40,
    )


@pytest.fixture
def sample_record():
    """A freshly created character."""
    return new_character(name="Harvey Walters", player="Sam", occupation="Journalist", age=42)


@pytest.fixture
async def local_store(tmp_path):
    """A local store on a temporary SQLite file."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test_investigator.db'}")
    await init_db(engine)
    store = LocalStore(create_session_factory(engine), engine=engine)

    yield store

    await store.close()
