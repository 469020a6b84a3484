"""Pydantic schemas for the smart_ip package."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SmartIpLocation(BaseModel):
    """Geolocation of an IP address annotated for display and GDPR policy."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "ip_address": "81.2.69.142",
                "country": "United Kingdom",
                "country_code": "GB",
                "region": "England",
                "region_code": "ENG",
                "city": "London",
                "postal_code": "SW1A",
                "latitude": 51.5142,
                "longitude": -0.0931,
                "time_zone": "Europe/London",
                "latitude_dms": "51° 30' 51.12\" N",
                "longitude_dms": "0° 5' 35.16\" W",
                "is_eu_country": False,
                "is_gdpr_country": True,
            }
        },
    )

    ip_address: str = Field(..., description="Queried IP address")
    country: Optional[str] = Field(None, description="Country name")
    country_code: Optional[str] = Field(None, description="ISO country code")
    region: Optional[str] = Field(None, description="Region/subdivision name")
    region_code: Optional[str] = Field(None, description="Region ISO code")
    city: Optional[str] = Field(None, description="City name")
    postal_code: Optional[str] = Field(None, description="Postal/ZIP code")
    latitude: Optional[float] = Field(None, description="Latitude")
    longitude: Optional[float] = Field(None, description="Longitude")
    time_zone: Optional[str] = Field(None, description="IANA time zone")
    latitude_dms: Optional[str] = Field(
        None, description="Latitude in degrees/minutes/seconds"
    )
    longitude_dms: Optional[str] = Field(
        None, description="Longitude in degrees/minutes/seconds"
    )
    is_eu_country: bool = Field(False, description="Country is an EU member state")
    is_gdpr_country: bool = Field(
        False, description="Country is an EU member or GDPR-applicable territory"
    )
