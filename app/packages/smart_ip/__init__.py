"""Smart IP package - IP geolocation with DMS coordinates and GDPR flags."""

from packages.smart_ip.coordinates import (
    DMS,
    Axis,
    InvalidInputError,
    format_dms,
    to_dms,
)
from packages.smart_ip.jurisdiction import (
    EU_MEMBER_COUNTRIES,
    GDPR_TERRITORIES,
    classify,
    is_eu_member,
    is_gdpr_country,
)
from packages.smart_ip.schemas import SmartIpLocation

__all__ = [
    "DMS",
    "Axis",
    "InvalidInputError",
    "format_dms",
    "to_dms",
    "EU_MEMBER_COUNTRIES",
    "GDPR_TERRITORIES",
    "classify",
    "is_eu_member",
    "is_gdpr_country",
    "SmartIpLocation",
]
