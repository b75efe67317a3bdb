"""
Database client factory for Supabase.

Provides the cached service-role client used for backend table access and
a factory for short-lived clients used during token verification.
"""

from typing import Optional
from supabase import create_client, Client, ClientOptions

from .config import Settings, get_settings

# Module-level client cache
_service_client: Optional[Client] = None


def create_supabase_client(
    url: str,
    key: str,
    access_token: Optional[str] = None,
) -> Client:
    """
    Create a stateless Supabase client.

    Sessions are neither persisted nor refreshed. When an access token is
    given it is attached to every outbound request as a bearer header.

    Args:
        url: Supabase project URL
        key: API key (service role or anon)
        access_token: Optional user JWT to forward

    Returns:
        A new Supabase client
    """
    options = ClientOptions(
        persist_session=False,
        auto_refresh_token=False,
    )
    if access_token:
        options.headers["Authorization"] = f"Bearer {access_token}"
    return create_client(url, key, options=options)


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Use this for backend operations that need full database access,
    such as writing reactions on behalf of a verified user.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = settings or get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
