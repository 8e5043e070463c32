"""Pytest fixtures for Rapport tests."""

import logging
from collections.abc import Generator

import pytest

from rapport.memory.entities import Person, Relationship
from rapport.memory.ledger import RelationshipLedger
from rapport.services import NetworkService
from rapport.settings import Settings


@pytest.fixture(autouse=True, scope="function")
def cleanup_production_log_handlers():
    """Remove file handlers pointing to the production log after each test.

    Keeps tests from leaving handlers that write to logs/rapport.log while
    still allowing logging tests to install their own handlers.
    """
    yield

    root_logger = logging.getLogger()
    production_log_name = "rapport.log"

    handlers_to_remove = [
        handler
        for handler in root_logger.handlers
        if isinstance(handler, logging.FileHandler)
        and production_log_name in getattr(handler, "baseFilename", "")
    ]
    for handler in handlers_to_remove:
        handler.close()
        root_logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def clear_settings_cache_per_test():
    """Clear Settings cache before and after each test to ensure isolation."""
    Settings.clear_cache()
    yield
    Settings.clear_cache()


@pytest.fixture(autouse=True)
def isolate_settings_file(tmp_path, monkeypatch):
    """Redirect SETTINGS_FILE to a temp path so tests never touch the real one."""
    import rapport.settings._paths as paths_module

    settings_file = tmp_path / "settings.json"
    monkeypatch.setattr(paths_module, "SETTINGS_FILE", settings_file)
    yield settings_file


@pytest.fixture
def settings() -> Settings:
    """Default settings without touching disk."""
    return Settings()


@pytest.fixture
def service(settings) -> NetworkService:
    """NetworkService with default settings."""
    return NetworkService(settings)


@pytest.fixture
def ledger() -> RelationshipLedger:
    """Empty ledger."""
    return RelationshipLedger()


@pytest.fixture
def seeded_ledger() -> RelationshipLedger:
    """Ledger holding the demonstration network."""
    ledger = RelationshipLedger()
    ledger.seed_sample_data()
    return ledger


@pytest.fixture
def triangle_ledger() -> Generator[RelationshipLedger]:
    """People A, B, C, D with relationships A-B, B-C and C-D but no A-C.

    Relationship ids are "ab", "bc" and "cd"; every health score starts at 50.
    """
    ledger = RelationshipLedger()
    for person_id in ("A", "B", "C", "D"):
        ledger.add_person(Person(id=person_id, name=f"Person {person_id}"))
    ledger.add_relationship(Relationship(id="ab", person1_id="A", person2_id="B", type="Friend"))
    ledger.add_relationship(Relationship(id="bc", person1_id="B", person2_id="C", type="Colleague"))
    ledger.add_relationship(Relationship(id="cd", person1_id="C", person2_id="D", type="Family"))
    yield ledger
