"""Shared test fixtures.

Provides a global store dependency override so routes can be tested
against an in-memory table instead of a real Supabase project.
"""

from collections.abc import Iterator

import pytest

from backend.main import app
from backend.services.profile_store import ProfileStore, get_profile_store
from tests.fakes import TEST_TABLE, FakeSupabaseClient


@pytest.fixture
def fake_client() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture
def profile_store(fake_client: FakeSupabaseClient) -> ProfileStore:
    return ProfileStore(fake_client, TEST_TABLE)  # type: ignore[arg-type]


@pytest.fixture(autouse=True)
def override_profile_store(profile_store: ProfileStore) -> Iterator[ProfileStore]:
    """Inject the in-memory profile store into every route.

    Tests that need failure behavior set their own override on top.
    """
    app.dependency_overrides[get_profile_store] = lambda: profile_store
    yield profile_store
    app.dependency_overrides.pop(get_profile_store, None)
