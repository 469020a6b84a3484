"""Unit tests for the smart_ip service."""

import pytest
from unittest.mock import Mock

from infrastructure.operations import OperationResult, OperationStatus
from packages.smart_ip.schemas import SmartIpLocation
from packages.smart_ip.service import (
    annotate_location,
    geolocate_ip,
    geolocate_visitor,
    resolve_visitor_ip,
    should_store_location,
)

PARIS = {
    "country_code": "FR",
    "country": "France",
    "region_code": "IDF",
    "region": "Île-de-France",
    "city": "Paris",
    "postal_code": "75001",
    "latitude": 48.8566,
    "longitude": 2.3522,
    "time_zone": "Europe/Paris",
}


@pytest.fixture
def mock_client(monkeypatch):
    """Replace the MaxMind client provider with a mock."""
    client = Mock()
    monkeypatch.setattr("packages.smart_ip.service.get_maxmind_client", lambda: client)
    return client


@pytest.mark.unit
class TestResolveVisitorIp:
    def test_returns_remote_addr_without_debug_ip(self, make_settings):
        assert resolve_visitor_ip("203.0.113.7", make_settings()) == "203.0.113.7"

    def test_debug_ip_overrides_remote_addr(self, make_settings):
        settings = make_settings(SMART_IP_DEBUG_IP="81.2.69.142")
        assert resolve_visitor_ip("203.0.113.7", settings) == "81.2.69.142"

    def test_uses_environment_settings_by_default(self, monkeypatch):
        monkeypatch.setenv("SMART_IP_DEBUG_IP", "81.2.69.142")
        assert resolve_visitor_ip("203.0.113.7") == "81.2.69.142"


@pytest.mark.unit
class TestAnnotateLocation:
    def test_adds_dms_and_jurisdiction(self):
        location = annotate_location("81.2.69.142", PARIS)

        assert location.ip_address == "81.2.69.142"
        assert location.city == "Paris"
        assert location.latitude_dms == "48° 51' 23.76\" N"
        assert location.longitude_dms == "2° 21' 7.92\" E"
        assert location.is_eu_country is True
        assert location.is_gdpr_country is True

    def test_gdpr_territory_is_not_eu(self):
        location = annotate_location(
            "1.2.3.4", {"country_code": "GL", "latitude": 64.1836, "longitude": -51.7214}
        )

        assert location.is_eu_country is False
        assert location.is_gdpr_country is True
        assert location.longitude_dms.endswith(" W")

    def test_missing_coordinates(self):
        location = annotate_location("1.2.3.4", {"country_code": "US"})

        assert location.latitude_dms is None
        assert location.longitude_dms is None
        assert location.is_eu_country is False
        assert location.is_gdpr_country is False

    def test_missing_country(self):
        location = annotate_location("1.2.3.4", {"latitude": 0.0, "longitude": 0.0})

        assert location.latitude_dms == "0° 0' 0\" N"
        assert location.is_gdpr_country is False


@pytest.mark.unit
class TestGeolocateIp:
    def test_success(self, mock_client):
        mock_client.geolocate.return_value = OperationResult.success(data=dict(PARIS))

        result = geolocate_ip("81.2.69.142")

        assert result.is_success
        assert result.data["ip_address"] == "81.2.69.142"
        assert result.data["country_code"] == "FR"
        assert result.data["is_eu_country"] is True
        assert result.data["latitude_dms"] == "48° 51' 23.76\" N"
        mock_client.geolocate.assert_called_once_with(ip_address="81.2.69.142")

    def test_ipv6_success(self, mock_client):
        mock_client.geolocate.return_value = OperationResult.success(data=dict(PARIS))

        result = geolocate_ip("2001:4860:4860::8888")

        assert result.is_success
        mock_client.geolocate.assert_called_once_with(ip_address="2001:4860:4860::8888")

    def test_invalid_format(self, mock_client):
        result = geolocate_ip("not-an-ip")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "INVALID_IP_FORMAT"
        assert "Invalid IP address" in result.message
        mock_client.geolocate.assert_not_called()

    def test_not_found_is_passed_through(self, mock_client):
        not_found = OperationResult.not_found(
            message="IP address not found in database: 192.168.1.1",
            error_code="IP_NOT_FOUND",
        )
        mock_client.geolocate.return_value = not_found

        result = geolocate_ip("192.168.1.1")

        assert result is not_found

    def test_transient_error_is_passed_through(self, mock_client):
        mock_client.geolocate.return_value = OperationResult.transient_error(
            message="MaxMind database file error", error_code="DB_FILE_ERROR"
        )

        result = geolocate_ip("8.8.8.8")

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "DB_FILE_ERROR"


@pytest.mark.unit
def test_geolocate_visitor_uses_debug_ip(mock_client, make_settings):
    mock_client.geolocate.return_value = OperationResult.success(data=dict(PARIS))

    result = geolocate_visitor(
        "203.0.113.7", make_settings(SMART_IP_DEBUG_IP="81.2.69.142")
    )

    assert result.is_success
    mock_client.geolocate.assert_called_once_with(ip_address="81.2.69.142")


@pytest.mark.unit
class TestShouldStoreLocation:
    @pytest.fixture
    def eu_visitor(self):
        return SmartIpLocation(
            ip_address="1.2.3.4", country_code="FR", is_eu_country=True, is_gdpr_country=True
        )

    @pytest.fixture
    def territory_visitor(self):
        return SmartIpLocation(
            ip_address="1.2.3.4", country_code="NO", is_eu_country=False, is_gdpr_country=True
        )

    @pytest.fixture
    def other_visitor(self):
        return SmartIpLocation(ip_address="1.2.3.4", country_code="US")

    def test_stores_everyone_by_default(self, make_settings, eu_visitor, other_visitor):
        settings = make_settings()
        assert should_store_location(eu_visitor, settings) is True
        assert should_store_location(other_visitor, settings) is True

    def test_dont_save_skips_gdpr_scope(
        self, make_settings, eu_visitor, territory_visitor, other_visitor
    ):
        settings = make_settings(SMART_IP_EU_VISITOR_DONT_SAVE=True)
        assert should_store_location(eu_visitor, settings) is False
        assert should_store_location(territory_visitor, settings) is False
        assert should_store_location(other_visitor, settings) is True

    def test_eu_member_only_narrows_scope(
        self, make_settings, eu_visitor, territory_visitor
    ):
        settings = make_settings(
            SMART_IP_EU_VISITOR_DONT_SAVE=True, SMART_IP_EU_MEMBER_ONLY=True
        )
        assert should_store_location(eu_visitor, settings) is False
        assert should_store_location(territory_visitor, settings) is True
