"""Remote store and identity providers."""

from tradejournal.providers.remote_data_source import RemoteDataSource
from tradejournal.providers.supabase_provider import SupabaseDataSource
from tradejournal.providers.identity_provider import IdentityProvider, StaticIdentityProvider

__all__ = [
    "RemoteDataSource",
    "SupabaseDataSource",
    "IdentityProvider",
    "StaticIdentityProvider",
]
