"""MaxMind GeoIP2 client for visitor geolocation.

Reads a GeoIP2/GeoLite2 City database and returns OperationResult values
instead of raising, so callers can branch on NOT_FOUND vs. database errors.
"""

from dataclasses import dataclass, asdict
from typing import TYPE_CHECKING, Optional

import geoip2.database
import structlog
from geoip2.errors import AddressNotFoundError, GeoIP2Error
from maxminddb import InvalidDatabaseError

from infrastructure.operations import OperationResult

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()

HEALTHCHECK_IP = "8.8.8.8"


@dataclass
class GeoLocationData:
    """Geolocation data for an IP address."""

    country_code: Optional[str] = None
    country: Optional[str] = None
    region_code: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    time_zone: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


class MaxMindClient:
    """Client for MaxMind GeoIP2 database lookups.

    Args:
        settings: Settings instance with maxmind.MAXMIND_DB_PATH
    """

    def __init__(self, settings: "Settings") -> None:
        self._db_path = settings.maxmind.MAXMIND_DB_PATH
        self._logger = logger.bind(component="maxmind_client")

    def geolocate(self, ip_address: str) -> OperationResult:
        """Geolocate an IP address using the MaxMind City database.

        Args:
            ip_address: IPv4 or IPv6 address to geolocate

        Returns:
            OperationResult with GeoLocationData as a dict, or an error
        """
        log = self._logger.bind(ip_address=ip_address)
        log.debug("geolocating_ip")

        try:
            reader = geoip2.database.Reader(self._db_path)
        except (OSError, InvalidDatabaseError) as e:
            log.error("database_file_error", error=str(e), db_path=self._db_path)
            return OperationResult.transient_error(
                message=f"MaxMind database file error: {str(e)}",
                error_code="DB_FILE_ERROR",
            )

        try:
            response = reader.city(ip_address)
        except AddressNotFoundError:
            log.warning("ip_not_found")
            return OperationResult.not_found(
                message=f"IP address not found in database: {ip_address}",
                error_code="IP_NOT_FOUND",
            )
        except ValueError as e:
            log.warning("invalid_ip_format", error=str(e))
            return OperationResult.permanent_error(
                message=f"Invalid IP address format: {ip_address}",
                error_code="INVALID_IP_FORMAT",
            )
        except GeoIP2Error as e:
            log.error("geoip2_error", error=str(e))
            return OperationResult.transient_error(
                message=f"GeoIP2 database error: {str(e)}",
                error_code="GEOIP2_ERROR",
            )
        except InvalidDatabaseError as e:
            log.error("database_corrupt", error=str(e), db_path=self._db_path)
            return OperationResult.transient_error(
                message=f"MaxMind database file error: {str(e)}",
                error_code="DB_FILE_ERROR",
            )
        finally:
            reader.close()

        subdivision = response.subdivisions.most_specific
        location = GeoLocationData(
            country_code=response.country.iso_code,
            country=response.country.name,
            region_code=subdivision.iso_code,
            region=subdivision.name,
            city=response.city.name,
            postal_code=response.postal.code,
            latitude=response.location.latitude,
            longitude=response.location.longitude,
            time_zone=response.location.time_zone,
        )

        log.debug(
            "geolocation_success",
            country=location.country_code,
            city=location.city,
        )
        return OperationResult.success(
            data=location.to_dict(), message="IP geolocated successfully"
        )

    def healthcheck(self) -> OperationResult:
        """Check that the MaxMind database can be opened and queried."""
        log = self._logger.bind(operation="healthcheck")

        result = self.geolocate(HEALTHCHECK_IP)

        if result.is_success:
            log.info("healthcheck_success")
            return OperationResult.success(
                data={"status": "healthy", "test_ip": HEALTHCHECK_IP},
                message="MaxMind database is accessible",
            )
        log.error("healthcheck_failed", error=result.message)
        return OperationResult.permanent_error(
            message=f"MaxMind healthcheck failed: {result.message}",
            error_code="HEALTHCHECK_FAILED",
        )
