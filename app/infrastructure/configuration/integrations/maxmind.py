"""MaxMind integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class MaxMindSettings(IntegrationSettings):
    """MaxMind GeoIP2 database configuration.

    Environment Variables:
        MAXMIND_DB_PATH: Path to a GeoIP2/GeoLite2 City database file

    Example:
        ```python
        from infrastructure.services import get_settings

        db_path = get_settings().maxmind.MAXMIND_DB_PATH
        ```
    """

    MAXMIND_DB_PATH: str = Field(
        default="./geodb/GeoLite2-City.mmdb", alias="MAXMIND_DB_PATH"
    )
