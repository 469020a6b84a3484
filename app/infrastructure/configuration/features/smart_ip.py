"""Smart IP visitor lookup settings."""

import ipaddress
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class SmartIpSettings(FeatureSettings):
    """Visitor geolocation policy.

    Environment Variables:
        SMART_IP_DEBUG_IP: Spoofed IP used in place of the visitor's address,
            for testing lookups from a fixed location
        SMART_IP_EU_VISITOR_DONT_SAVE: Do not store location data for visitors
            in the GDPR scope (default: False)
        SMART_IP_EU_MEMBER_ONLY: Limit the GDPR scope to EU member states,
            excluding overseas territories and EEA-adjacent states
            (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.smart_ip.eu_visitor_dont_save:
            # Skip storage for EU visitors...
        ```
    """

    debug_ip: Optional[str] = Field(
        default=None,
        alias="SMART_IP_DEBUG_IP",
        description="Spoofed IP address used instead of the visitor's address",
    )
    eu_visitor_dont_save: bool = Field(
        default=False,
        alias="SMART_IP_EU_VISITOR_DONT_SAVE",
        description="Skip storing location data for GDPR-scope visitors",
    )
    eu_member_only: bool = Field(
        default=False,
        alias="SMART_IP_EU_MEMBER_ONLY",
        description="Restrict the GDPR scope to EU member states",
    )

    @field_validator("debug_ip", mode="before")
    @classmethod
    def validate_debug_ip(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty value as unset and reject malformed addresses."""
        if v is None or not str(v).strip():
            return None
        v = str(v).strip()
        try:
            ipaddress.ip_address(v)
        except ValueError:
            raise ValueError(f"Invalid SMART_IP_DEBUG_IP address: {v}")
        return v
