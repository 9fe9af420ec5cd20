"""
Pattern registry for identity and passport numbers.

Static lookup tables keyed by country:
- structural patterns for national identity numbers
- structural patterns for passport numbers
- the inverse of both (pattern text -> countries)
- the colloquial name of each country's identity number

A number matches a country when ANY of that country's patterns match.
Adding a country means adding a CountryCode member and an entry to each
table; no validation logic changes.

Usage:
    from ident_engine.data.patterns import CountryCode, IdentifierType, get_patterns

    for pattern in get_patterns(CountryCode.ZA, IdentifierType.NATIONAL_IDENTITY):
        match = pattern.fullmatch("8001015009087")
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Pattern, Tuple


class CountryCode(Enum):
    """
    Countries with modeled identity numbers.

    Values are ISO 3166-1 alpha-2 codes, except the United Kingdom which keeps
    the colloquial "UK".
    """
    ZA = "ZA"  # South Africa
    UK = "UK"  # United Kingdom
    US = "US"  # United States
    CA = "CA"  # Canada

    @classmethod
    def from_string(cls, value: str) -> Optional["CountryCode"]:
        """
        Convert a country code string to a CountryCode.

        "GB" is accepted as an alias for the United Kingdom.

        Returns:
            CountryCode or None if the code is not modeled
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        code = value.strip().upper()
        if code == "GB":
            code = "UK"
        try:
            return cls(code)
        except ValueError:
            return None


class IdentifierType(Enum):
    """Which pattern table and parser family an identifier belongs to."""
    NATIONAL_IDENTITY = "National Identity"
    PASSPORT = "Passport"

    @classmethod
    def from_string(cls, value: str) -> Optional["IdentifierType"]:
        """Accept the display value or the member name, case-insensitive."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        normalized = value.strip().replace("_", " ").lower()
        for identifier_type in cls:
            if normalized in (identifier_type.value.lower(), identifier_type.name.replace("_", " ").lower()):
                return identifier_type
        # Short aliases used on the command line
        if normalized in ("national", "id", "identity"):
            return cls.NATIONAL_IDENTITY
        return None


# =============================================================================
# NATIONAL IDENTITY NUMBER PATTERNS
# =============================================================================
# Insertion order is the sweep order in auto mode and decides which country
# is "first" when a number matches several.

_IDENTITY_NUMBER_REGEXES: Dict[CountryCode, Tuple[str, ...]] = {
    # South African ID: YYMMDD SSSS C A Z (13 digits, Luhn check digit)
    CountryCode.ZA: (
        r"^(?P<year>\d{2})(?P<month>0[1-9]|1[0-2])(?P<day>0[1-9]|[1-2][0-9]|3[0-1])"
        r"(?P<sequence>\d{4})(?P<citizenship>\d)(?P<race>\d)(?P<checksum>\d)$",
    ),
    # UK National Insurance Number: AB 12 34 56 C
    # First letter not D F I Q U V, second not D F I O Q U V,
    # prefixes BG GB NK KN TN NT ZZ are never allocated
    CountryCode.UK: (
        r"^(?!BG|GB|NK|KN|TN|NT|ZZ)(?P<prefix>[A-CEGHJ-PR-TW-Z][A-CEGHJ-NPR-TW-Z])\s?"
        r"(?P<first>\d{2})\s?(?P<second>\d{2})\s?(?P<third>\d{2})\s?(?P<suffix>[A-D]?)$",
    ),
    # US SSN: AAA-GG-SSSS, area not 000/666/9xx, group not 00, serial not 0000
    CountryCode.US: (
        r"^(?!000|666|9\d{2})(?P<area>\d{3})-(?!00)(?P<group>\d{2})-(?!0000)(?P<serial>\d{4})$",
    ),
    # Canadian SIN: 9 digits in groups of 3, first digit is the region
    CountryCode.CA: (
        r"^(?P<region>\d)(?P<first>\d{2})[\s-]?(?P<second>\d{3})[\s-]?(?P<third>\d{3})$",
    ),
}


# =============================================================================
# PASSPORT NUMBER PATTERNS
# =============================================================================

_PASSPORT_NUMBER_REGEXES: Dict[CountryCode, Tuple[str, ...]] = {
    CountryCode.ZA: (r"^[A-Z]\d{8}$",),
    CountryCode.US: (r"^[A-Z0-9]{9}$",),
    CountryCode.UK: (r"^[0-9]{9}$", r"^[A-Z]{2}[0-9]{7}$"),
    CountryCode.CA: (r"^[A-Z]{2}\d{6}$",),
}


# =============================================================================
# TYPE LABELS
# =============================================================================

TYPE_LABELS: Mapping[CountryCode, str] = MappingProxyType({
    CountryCode.ZA: "National Identity Number",
    CountryCode.UK: "National Insurance Number",
    CountryCode.US: "Social Security Number",
    CountryCode.CA: "Social Insurance Number",
})

PASSPORT_LABEL = "Passport"
OTHER_LABEL = "Other"


def _compile(regexes: Dict[CountryCode, Tuple[str, ...]]) -> Mapping[CountryCode, Tuple[Pattern, ...]]:
    # \d and \s match ASCII only
    return MappingProxyType({
        country: tuple(re.compile(regex, re.ASCII) for regex in patterns)
        for country, patterns in regexes.items()
    })


def _invert(regexes: Dict[CountryCode, Tuple[str, ...]]) -> Mapping[str, Tuple[CountryCode, ...]]:
    inverse: Dict[str, Tuple[CountryCode, ...]] = {}
    for country, patterns in regexes.items():
        for regex in patterns:
            inverse[regex] = inverse.get(regex, ()) + (country,)
    return MappingProxyType(inverse)


IDENTITY_NUMBER_PATTERNS = _compile(_IDENTITY_NUMBER_REGEXES)
PASSPORT_NUMBER_PATTERNS = _compile(_PASSPORT_NUMBER_REGEXES)

IDENTITY_PATTERN_COUNTRIES = _invert(_IDENTITY_NUMBER_REGEXES)
PASSPORT_PATTERN_COUNTRIES = _invert(_PASSPORT_NUMBER_REGEXES)

_PATTERN_TABLES = {
    IdentifierType.NATIONAL_IDENTITY: IDENTITY_NUMBER_PATTERNS,
    IdentifierType.PASSPORT: PASSPORT_NUMBER_PATTERNS,
}

_INVERSE_TABLES = {
    IdentifierType.NATIONAL_IDENTITY: IDENTITY_PATTERN_COUNTRIES,
    IdentifierType.PASSPORT: PASSPORT_PATTERN_COUNTRIES,
}


def get_patterns(country: CountryCode, identifier_type: IdentifierType) -> Tuple[Pattern, ...]:
    """
    Get the structural patterns for a country and identifier type.

    Returns:
        Tuple of compiled patterns, empty if no rule is defined
    """
    return _PATTERN_TABLES[identifier_type].get(country, ())


def get_countries(identifier_type: IdentifierType) -> Tuple[CountryCode, ...]:
    """Countries with patterns for an identifier type, in sweep order."""
    return tuple(_PATTERN_TABLES[identifier_type].keys())


def countries_for_pattern(pattern_text: str, identifier_type: IdentifierType) -> Tuple[CountryCode, ...]:
    """Reverse lookup: which countries list this exact pattern text."""
    return _INVERSE_TABLES[identifier_type].get(pattern_text, ())


def get_type_label(country: CountryCode) -> str:
    """Colloquial name of the country's identity number, "Other" if unknown."""
    return TYPE_LABELS.get(country, OTHER_LABEL)
