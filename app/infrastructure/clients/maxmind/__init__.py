"""MaxMind GeoIP2 client.

Public API (Package Level):
- MaxMindClient: Client for GeoIP2 City database lookups
- GeoLocationData: Dataclass for geolocation results

Usage:
    from infrastructure.services import get_maxmind_client

    result = get_maxmind_client().geolocate(ip_address="8.8.8.8")
    if result.is_success:
        country_code = result.data["country_code"]
"""

from infrastructure.clients.maxmind.client import GeoLocationData, MaxMindClient

__all__ = [
    "MaxMindClient",
    "GeoLocationData",
]
