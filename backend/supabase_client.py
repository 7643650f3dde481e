"""Supabase client initialization and helpers."""

from functools import lru_cache

from supabase import Client, create_client
from supabase.client import ClientOptions

from backend.config import get_settings


@lru_cache
def get_supabase_client() -> Client:
    """Return a cached Supabase client bound to the configured schema."""
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.effective_supabase_secret_key,
        options=ClientOptions(schema=settings.supabase_schema),
    )


def close_supabase_client() -> None:
    """Close the cached client's HTTP session, if one was opened."""
    if get_supabase_client.cache_info().currsize == 0:
        return
    get_supabase_client().postgrest.session.close()
    get_supabase_client.cache_clear()
