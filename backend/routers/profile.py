"""Profile form route handlers."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from backend.errors import NotFoundError, StoreError, TemplateError
from backend.rendering import render_profile_form
from backend.schemas.profile import Profile, UpsertOutcome
from backend.services.profile_store import ProfileStore, get_profile_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["profile"])


def _render(
    request: Request,
    profile: Profile,
    *,
    saved: bool = False,
    outcome: UpsertOutcome | None = None,
) -> HTMLResponse:
    try:
        return render_profile_form(request, profile, saved=saved, outcome=outcome)
    except TemplateError as exc:
        logger.exception("Template rendering failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc


@router.get("/", response_class=HTMLResponse)
async def show_profile(
    request: Request,
    store: ProfileStore = Depends(get_profile_store),
) -> HTMLResponse:
    """Render the form pre-filled with the stored profile.

    Before the first save there is nothing stored, so an empty form is shown.
    """
    try:
        profile = await asyncio.to_thread(store.fetch)
    except NotFoundError:
        logger.debug("No profile stored yet, rendering empty form")
        profile = Profile()
    except StoreError as exc:
        logger.exception("Profile fetch failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc

    return _render(request, profile)


@router.post("/", response_class=HTMLResponse)
async def save_profile(
    request: Request,
    name: str = Form(default=""),
    email: str = Form(default=""),
    interests: str = Form(default=""),
    store: ProfileStore = Depends(get_profile_store),
) -> HTMLResponse:
    """Store the submitted form values and render a confirmation.

    Args:
        name: Free-text name.
        email: Free-text email; not validated.
        interests: Free-text interests.
    """
    profile = Profile(name=name, email=email, interests=interests)

    try:
        outcome = await asyncio.to_thread(store.upsert, profile)
    except StoreError as exc:
        logger.exception("Profile save failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc

    return _render(request, profile, saved=True, outcome=outcome)
