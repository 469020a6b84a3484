"""
Factory functions for application-scoped services.

Provides cached singleton providers for settings and the MaxMind client.
"""

from functools import lru_cache

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that change environment variables call get_settings.cache_clear().

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_maxmind_client() -> MaxMindClient:
    """
    Get application-scoped MaxMind client singleton.

    Returns:
        MaxMindClient: Client reading the database at settings.maxmind.MAXMIND_DB_PATH.
    """
    return MaxMindClient(settings=get_settings())
