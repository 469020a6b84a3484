"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    MaxMindSettings: GeoIP database settings class
    SmartIpSettings: Visitor lookup policy settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    db_path = settings.maxmind.MAXMIND_DB_PATH
    dont_save = settings.smart_ip.eu_visitor_dont_save
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import MaxMindSettings
from infrastructure.configuration.features import SmartIpSettings

__all__ = ["Settings", "MaxMindSettings", "SmartIpSettings"]
