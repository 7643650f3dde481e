"""Profile schemas."""

from enum import StrEnum

from pydantic import BaseModel

# The store holds exactly one profile; every read and write is keyed on this id.
PROFILE_ID = 1


class Profile(BaseModel):
    """The single user profile edited through the form."""

    id: int = PROFILE_ID
    name: str = ""
    email: str = ""
    interests: str = ""


class UpsertOutcome(StrEnum):
    """Whether an upsert inserted the document or overwrote it."""

    CREATED = "created"
    UPDATED = "updated"
