"""EU and GDPR jurisdiction lookup by ISO 3166-1 alpha-2 country code."""

from types import MappingProxyType
from typing import Optional

EU_MEMBER_COUNTRIES = MappingProxyType(
    {
        "AT": "Austria",
        "BE": "Belgium",
        "BG": "Bulgaria",
        "CY": "Cyprus",
        "CZ": "Czechia",
        "DE": "Germany",
        "DK": "Denmark",
        "EE": "Estonia",
        "ES": "Spain",
        "FI": "Finland",
        "FR": "France",
        "GR": "Greece",
        "HR": "Croatia",
        "HU": "Hungary",
        "IE": "Ireland",
        "IT": "Italy",
        "LT": "Lithuania",
        "LU": "Luxembourg",
        "LV": "Latvia",
        "MT": "Malta",
        "NL": "Netherlands",
        "PL": "Poland",
        "PT": "Portugal",
        "RO": "Romania",
        "SE": "Sweden",
        "SI": "Slovenia",
        "SK": "Slovakia",
    }
)

# Non-member territories where GDPR (or an equivalent regime) applies:
# overseas territories, EEA states, the UK and crown dependencies.
GDPR_TERRITORIES = MappingProxyType(
    {
        # Overseas countries and territories of member states
        "AW": "Aruba",
        "AX": "Åland Islands",
        "BL": "Saint Barthélemy",
        "BQ": "Caribbean Netherlands",
        "CW": "Curaçao",
        "FO": "Faroe Islands",
        "GF": "French Guiana",
        "GL": "Greenland",
        "GP": "Guadeloupe",
        "MF": "Saint Martin",
        "MQ": "Martinique",
        "NC": "New Caledonia",
        "PF": "French Polynesia",
        "PM": "Saint Pierre and Miquelon",
        "RE": "Réunion",
        "SX": "Sint Maarten",
        "TF": "French Southern Territories",
        "WF": "Wallis and Futuna",
        "YT": "Mayotte",
        # EEA
        "IS": "Iceland",
        "LI": "Liechtenstein",
        "NO": "Norway",
        # UK, crown dependencies and overseas territories
        "AI": "Anguilla",
        "BM": "Bermuda",
        "FK": "Falkland Islands",
        "GB": "United Kingdom",
        "GG": "Guernsey",
        "GI": "Gibraltar",
        "GS": "South Georgia and the South Sandwich Islands",
        "IM": "Isle of Man",
        "IO": "British Indian Ocean Territory",
        "JE": "Jersey",
        "KY": "Cayman Islands",
        "MS": "Montserrat",
        "PN": "Pitcairn Islands",
        "SH": "Saint Helena, Ascension and Tristan da Cunha",
        "TC": "Turks and Caicos Islands",
        "VG": "British Virgin Islands",
    }
)


def classify(country_code: str, eu_member_only: bool = True) -> Optional[str]:
    """Return the display name of the jurisdiction a country belongs to.

    The EU member table is checked first. With ``eu_member_only=False``,
    codes outside the EU fall back to the wider GDPR territory table.
    Matching is case-sensitive; codes are expected in uppercase.

    Args:
        country_code: ISO 3166-1 alpha-2 code, e.g. "FR"
        eu_member_only: Only match EU member states

    Returns:
        Country name, or None when the code is in neither applicable table
    """
    name = EU_MEMBER_COUNTRIES.get(country_code)
    if eu_member_only or name is not None:
        return name
    return GDPR_TERRITORIES.get(country_code)


def is_eu_member(country_code: str) -> bool:
    """True if the country is an EU member state."""
    return classify(country_code, eu_member_only=True) is not None


def is_gdpr_country(country_code: str) -> bool:
    """True if the country is an EU member or a GDPR-applicable territory."""
    return classify(country_code, eu_member_only=False) is not None
