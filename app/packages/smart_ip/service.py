"""
Business logic for visitor geolocation.

Resolves the address to look up, queries the MaxMind client, and annotates
the result with DMS coordinates and EU/GDPR jurisdiction flags. Storing the
location is left to the host application; should_store_location tells it
whether it may.
"""

import ipaddress
from typing import Any, Dict, Optional

from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from infrastructure.services import get_maxmind_client, get_settings
from packages.smart_ip import jurisdiction
from packages.smart_ip.coordinates import Axis, format_dms
from packages.smart_ip.schemas import SmartIpLocation

logger = get_module_logger()


def resolve_visitor_ip(remote_addr: str, settings: Optional[Settings] = None) -> str:
    """Return the address to geolocate for a visitor.

    A configured SMART_IP_DEBUG_IP replaces the visitor's address.
    """
    settings = settings or get_settings()
    debug_ip = settings.smart_ip.debug_ip
    if debug_ip:
        logger.debug("using_debug_ip", remote_addr=remote_addr, debug_ip=debug_ip)
        return debug_ip
    return remote_addr


def annotate_location(
    ip_address: str, location: Dict[str, Any]
) -> SmartIpLocation:
    """Build a SmartIpLocation from raw lookup data.

    Args:
        ip_address: Queried IP address
        location: GeoLocationData dict from the MaxMind client

    Returns:
        SmartIpLocation with DMS strings (when coordinates are known) and
        jurisdiction flags
    """
    latitude = location.get("latitude")
    longitude = location.get("longitude")
    country_code = location.get("country_code")

    return SmartIpLocation(
        ip_address=ip_address,
        **location,
        latitude_dms=(
            format_dms(latitude, Axis.LATITUDE) if latitude is not None else None
        ),
        longitude_dms=(
            format_dms(longitude, Axis.LONGITUDE) if longitude is not None else None
        ),
        is_eu_country=jurisdiction.is_eu_member(country_code),
        is_gdpr_country=jurisdiction.is_gdpr_country(country_code),
    )


def geolocate_ip(ip_address: str) -> OperationResult:
    """
    Geolocate an IP address and annotate the result.

    Args:
        ip_address: IP address to geolocate

    Returns:
        OperationResult with SmartIpLocation data (as dict) or the client error
    """
    log = logger.bind(ip_address=ip_address, operation="geolocate_ip")
    log.info("geolocating_ip")

    try:
        ipaddress.ip_address(ip_address)
    except ValueError:
        log.warning("invalid_ip_format")
        return OperationResult.permanent_error(
            message=f"Invalid IP address format: {ip_address}",
            error_code="INVALID_IP_FORMAT",
        )

    result = get_maxmind_client().geolocate(ip_address=ip_address)

    if not result.is_success:
        log.warning(
            "geolocation_failed", status=result.status, error=result.message
        )
        return result

    location = annotate_location(ip_address, result.data)
    log.info(
        "geolocation_success",
        country_code=location.country_code,
        is_gdpr_country=location.is_gdpr_country,
    )
    return OperationResult.success(data=location.model_dump(), message=result.message)


def geolocate_visitor(
    remote_addr: str, settings: Optional[Settings] = None
) -> OperationResult:
    """Geolocate a visitor's address, honoring the debug IP override."""
    return geolocate_ip(resolve_visitor_ip(remote_addr, settings))


def should_store_location(
    location: SmartIpLocation, settings: Optional[Settings] = None
) -> bool:
    """Decide whether the host may store a visitor's location.

    With SMART_IP_EU_VISITOR_DONT_SAVE enabled, GDPR-scope visitors are not
    stored. SMART_IP_EU_MEMBER_ONLY narrows that scope to EU member states.
    """
    settings = settings or get_settings()
    if not settings.smart_ip.eu_visitor_dont_save:
        return True

    if settings.smart_ip.eu_member_only:
        in_scope = location.is_eu_country
    else:
        in_scope = location.is_gdpr_country

    if in_scope:
        logger.info(
            "location_not_stored",
            country_code=location.country_code,
            eu_member_only=settings.smart_ip.eu_member_only,
        )
    return not in_scope
