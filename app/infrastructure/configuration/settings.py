"""Smart IP configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import MaxMindSettings

# Feature settings
from infrastructure.configuration.features import SmartIpSettings


class Settings(BaseSettings):
    """Smart IP configuration settings - main aggregator.

    Aggregates domain-specific settings into a single configuration object:

    - **Integrations**: GeoIP database location (MaxMind)
    - **Features**: Visitor lookup policy (debug IP, EU storage opt-out)

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        db_path = settings.maxmind.MAXMIND_DB_PATH
        if settings.smart_ip.debug_ip:
            # Lookups use the spoofed address...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    # Integration settings
    maxmind: MaxMindSettings

    # Feature settings
    smart_ip: SmartIpSettings

    @property
    def is_production(self) -> bool:
        """True if PREFIX is empty (production)."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "maxmind": MaxMindSettings,
            "smart_ip": SmartIpSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
