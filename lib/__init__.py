# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# - supabase_client.py: Shared Supabase client for photo storage
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError

__all__ = [
    "SupabaseClient",
    "SupabaseClientError",
]
