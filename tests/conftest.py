"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from person_api.app.core.config import Settings
from person_api.app.core.store import SAMPLE_PERSONS, InMemoryRepository, get_store
from person_api.app.main import create_app
from person_api.app.services.person_service import PersonService


@pytest.fixture
def settings():
    return Settings(log_level="WARNING", application_name="PersonAPI", seed_sample_data=False)


@pytest.fixture
def store():
    """Store holding the five sample people, ids 1 to 5."""
    return InMemoryRepository(key_attr="id", entities=SAMPLE_PERSONS)


@pytest.fixture
def empty_store():
    return InMemoryRepository(key_attr="id")


@pytest.fixture
def service(store):
    return PersonService(store.session())


@pytest.fixture
def app(settings, store):
    application = create_app(settings=settings)
    application.dependency_overrides[get_store] = lambda: store
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
