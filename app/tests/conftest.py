"""Shared fixtures for Smart IP tests."""

from unittest.mock import MagicMock, Mock

import pytest

from infrastructure.configuration import MaxMindSettings, Settings, SmartIpSettings
from infrastructure.services.providers import get_maxmind_client, get_settings


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset cached providers so environment changes are picked up."""
    get_settings.cache_clear()
    get_maxmind_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_maxmind_client.cache_clear()


@pytest.fixture
def make_settings():
    """Build a Settings instance with Smart IP policy overrides."""

    def _make(**smart_ip):
        return Settings(
            maxmind=MaxMindSettings(MAXMIND_DB_PATH="/path/to/GeoLite2-City.mmdb"),
            smart_ip=SmartIpSettings(**smart_ip),
        )

    return _make


@pytest.fixture
def mock_settings():
    """Create mock settings for the MaxMind client."""
    settings = MagicMock()
    settings.maxmind.MAXMIND_DB_PATH = "/path/to/GeoLite2-City.mmdb"
    return settings


@pytest.fixture
def make_city_response():
    """Build a mock geoip2 City response."""

    def _make(
        country_code="FR",
        country="France",
        region_code="IDF",
        region="Île-de-France",
        city="Paris",
        postal_code="75001",
        latitude=48.8566,
        longitude=2.3522,
        time_zone="Europe/Paris",
    ):
        response = Mock()
        response.country.iso_code = country_code
        response.country.name = country
        response.subdivisions.most_specific.iso_code = region_code
        response.subdivisions.most_specific.name = region
        response.city.name = city
        response.postal.code = postal_code
        response.location.latitude = latitude
        response.location.longitude = longitude
        response.location.time_zone = time_zone
        return response

    return _make
