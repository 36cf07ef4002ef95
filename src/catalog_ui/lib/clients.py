"""
Supabase client factory.

The client is created lazily on first use and shared by the whole process.

Environment variables used:
- SUPABASE_URL: Project URL (https://<project>.supabase.co)
- SUPABASE_KEY: Anon or service key (SUPABASE_ANON_KEY also accepted)
"""

import functools

from supabase import Client, create_client

from catalog_ui import config


@functools.cache
def supabase_client() -> Client:
    """
    Return the shared Supabase client.

    Raises:
        AssertionError: If the project URL or key is not configured.
    """
    assert config.SUPABASE_URL, "SUPABASE_URL is not set"
    assert config.SUPABASE_KEY, "SUPABASE_KEY is not set"
    return create_client(config.SUPABASE_URL, config.SUPABASE_KEY)
