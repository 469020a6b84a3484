"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.smart_ip import SmartIpSettings

__all__ = [
    "SmartIpSettings",
]
