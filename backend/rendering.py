"""HTML rendering for the profile form."""

from __future__ import annotations

import logging
from functools import lru_cache

import jinja2
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from backend.config import get_settings
from backend.errors import TemplateError
from backend.schemas.profile import Profile, UpsertOutcome

logger = logging.getLogger(__name__)


@lru_cache
def get_templates() -> Jinja2Templates:
    """Return the cached template environment for the configured directory."""
    settings = get_settings()
    return Jinja2Templates(directory=str(settings.templates_path))


def render_profile_form(
    request: Request,
    profile: Profile,
    *,
    saved: bool = False,
    outcome: UpsertOutcome | None = None,
) -> HTMLResponse:
    """Render the profile form pre-filled with the given values.

    Args:
        request: Incoming request, passed through to the template.
        profile: Values to show in the form fields.
        saved: Show the confirmation banner.
        outcome: Result of the write that produced ``profile``, if any.

    Raises:
        TemplateError: If the template is missing or fails to render.
    """
    template_name = get_settings().web.template_name
    try:
        return get_templates().TemplateResponse(
            request,
            template_name,
            {"profile": profile, "saved": saved, "outcome": outcome},
        )
    except jinja2.TemplateError as exc:
        raise TemplateError(f"Unable to render {template_name}: {exc}") from exc
