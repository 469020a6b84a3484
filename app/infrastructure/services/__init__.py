"""
Application-scoped service providers.
"""

from infrastructure.services.providers import (
    get_settings,
    get_maxmind_client,
)

__all__ = [
    "get_settings",
    "get_maxmind_client",
]
