"""
Shared fixtures: the FastAPI app wired to in-memory collaborators.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Set before the app (and its Settings) are imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from chefconnect.config import Settings  # noqa: E402
from chefconnect.core.dependencies import get_identity_verifier, get_settings, get_supabase  # noqa: E402
from chefconnect.main import app  # noqa: E402
from tests.fakes import FakeSupabase, FakeVerifier  # noqa: E402


@pytest.fixture
def db():
    return FakeSupabase()


@pytest.fixture
def verifier():
    return FakeVerifier()


@pytest.fixture
def app_settings():
    return Settings(enforce_status_transitions=False)


@pytest.fixture
def client(db, verifier, app_settings):
    app.dependency_overrides[get_supabase] = lambda: db
    app.dependency_overrides[get_identity_verifier] = lambda: verifier
    app.dependency_overrides[get_settings] = lambda: app_settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db, verifier):
    """Create a user row and a bearer token that verifies to it."""
    def _make(name: str, role: str = "customer", phone_number: str = "+15550000000"):
        user = db.add(
            "users",
            firebase_uid=f"uid-{name}",
            phone_number=phone_number,
            role=role,
            full_name=name.title(),
        )
        verifier.register(f"token-{name}", f"uid-{name}", phone_number)
        return user
    return _make


@pytest.fixture
def make_chef(db, make_user):
    """Create a chef user with a profile."""
    def _make(name: str, is_available: bool = True, **profile):
        user = make_user(name, role="chef")
        chef = db.add("chefs", user_id=user["id"], is_available=is_available, hourly_rate=50, **profile)
        return user, chef
    return _make
