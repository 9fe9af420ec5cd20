"""
Data modules for Ident Engine.

Static pattern and label tables for the modeled countries.
"""

from .patterns import (
    CountryCode,
    IdentifierType,
    IDENTITY_NUMBER_PATTERNS,
    PASSPORT_NUMBER_PATTERNS,
    IDENTITY_PATTERN_COUNTRIES,
    PASSPORT_PATTERN_COUNTRIES,
    TYPE_LABELS,
    PASSPORT_LABEL,
    OTHER_LABEL,
    get_patterns,
    get_countries,
    countries_for_pattern,
    get_type_label,
)

__all__ = [
    "CountryCode",
    "IdentifierType",
    "IDENTITY_NUMBER_PATTERNS",
    "PASSPORT_NUMBER_PATTERNS",
    "IDENTITY_PATTERN_COUNTRIES",
    "PASSPORT_PATTERN_COUNTRIES",
    "TYPE_LABELS",
    "PASSPORT_LABEL",
    "OTHER_LABEL",
    "get_patterns",
    "get_countries",
    "countries_for_pattern",
    "get_type_label",
]
