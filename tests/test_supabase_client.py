from unittest.mock import ANY, patch

from backend.supabase_client import close_supabase_client, get_supabase_client


def test_uses_effective_secret_key_and_schema() -> None:
    with (
        patch("backend.supabase_client.get_settings") as mock_settings,
        patch("backend.supabase_client.create_client") as mock_create,
        patch("backend.supabase_client.ClientOptions") as mock_options,
    ):
        mock_settings.return_value.supabase_url = "https://example.supabase.co"
        mock_settings.return_value.effective_supabase_secret_key = "sb_secret_new"
        mock_settings.return_value.supabase_schema = "profiles_db"

        get_supabase_client.cache_clear()
        get_supabase_client()
        get_supabase_client.cache_clear()

        mock_options.assert_called_once_with(schema="profiles_db")
        mock_create.assert_called_once_with(
            "https://example.supabase.co",
            "sb_secret_new",
            options=ANY,
        )


def test_close_shuts_session_and_drops_cached_client() -> None:
    with (
        patch("backend.supabase_client.get_settings"),
        patch("backend.supabase_client.ClientOptions"),
        patch("backend.supabase_client.create_client") as mock_create,
    ):
        get_supabase_client.cache_clear()
        client = get_supabase_client()

        close_supabase_client()

        client.postgrest.session.close.assert_called_once_with()
        assert get_supabase_client.cache_info().currsize == 0
        assert mock_create.call_count == 1


def test_close_without_client_does_not_connect() -> None:
    with patch("backend.supabase_client.create_client") as mock_create:
        get_supabase_client.cache_clear()

        close_supabase_client()

        mock_create.assert_not_called()
