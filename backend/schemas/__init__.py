"""Pydantic schemas for all entities."""

from backend.schemas.profile import (
    PROFILE_ID,
    Profile,
    UpsertOutcome,
)

__all__ = [
    "PROFILE_ID",
    "Profile",
    "UpsertOutcome",
]
