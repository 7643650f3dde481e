"""Persistence for the singleton user profile.

The profile lives in a single row of the configured table, keyed by
``user_id = PROFILE_ID``. Reads select that row; writes upsert all four
fields onto it so the table never holds more than one profile.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, cast

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import Client

from backend.config import get_settings
from backend.errors import NotFoundError, StoreError
from backend.schemas.profile import PROFILE_ID, Profile, UpsertOutcome
from backend.supabase_client import get_supabase_client

logger = logging.getLogger(__name__)

_PROFILE_COLUMNS = "user_id, name, email, interests"


def profile_to_document(profile: Profile) -> dict[str, Any]:
    """Build the stored document for a profile.

    The identifier is always the sentinel ``PROFILE_ID``, whatever the
    incoming profile carries.
    """
    return {
        "user_id": PROFILE_ID,
        "name": profile.name,
        "email": profile.email,
        "interests": profile.interests,
    }


def _text_or_empty(document: dict[str, Any], column: str) -> Any:
    value = document.get(column)
    return "" if value is None else value


def profile_from_document(document: dict[str, Any]) -> Profile:
    """Decode a stored document into a Profile.

    Missing or null text columns decode to empty strings.

    Raises:
        StoreError: If the document fields have unexpected types.
    """
    try:
        return Profile.model_validate(
            {
                "id": document.get("user_id"),
                "name": _text_or_empty(document, "name"),
                "email": _text_or_empty(document, "email"),
                "interests": _text_or_empty(document, "interests"),
            },
            strict=True,
        )
    except ValidationError as exc:
        raise StoreError(f"Malformed profile document: {exc}") from exc


class ProfileStore:
    """Reads and writes the single profile document.

    Wraps one long-lived Supabase client; the same instance is shared by
    every request for the lifetime of the process.
    """

    def __init__(self, client: Client, table: str) -> None:
        self._client = client
        self._table_name = table

    @property
    def table(self) -> str:
        return self._table_name

    def fetch(self) -> Profile:
        """Return the stored profile.

        Raises:
            NotFoundError: If no profile has been saved yet.
            StoreError: On transport or decode failure.
        """
        try:
            response = (
                self._client.table(self._table_name)
                .select(_PROFILE_COLUMNS)
                .eq("user_id", PROFILE_ID)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StoreError(f"Failed to fetch profile: {exc}") from exc

        rows = cast(list[dict[str, Any]], response.data)
        if not rows:
            raise NotFoundError(f"No profile with user_id={PROFILE_ID}")

        return profile_from_document(rows[0])

    def upsert(self, profile: Profile) -> UpsertOutcome:
        """Create or fully overwrite the stored profile.

        Args:
            profile: Values to store. Its ``id`` is ignored.

        Returns:
            CREATED if no profile existed before the write, UPDATED otherwise.

        Raises:
            StoreError: On transport failure.
        """
        document = profile_to_document(profile)
        try:
            existing = (
                self._client.table(self._table_name)
                .select("user_id")
                .eq("user_id", PROFILE_ID)
                .limit(1)
                .execute()
            )
            self._client.table(self._table_name).upsert(
                document, on_conflict="user_id"
            ).execute()
        except (APIError, httpx.HTTPError) as exc:
            raise StoreError(f"Failed to save profile: {exc}") from exc

        outcome = UpsertOutcome.UPDATED if existing.data else UpsertOutcome.CREATED
        logger.info("Profile %s in %s", outcome.value, self._table_name)
        return outcome


@lru_cache
def get_profile_store() -> ProfileStore:
    """Return the process-wide profile store."""
    settings = get_settings()
    return ProfileStore(get_supabase_client(), settings.profile_table)
