"""
Tests for the pattern registry tables and lookups
"""

import re

import pytest

from ident_engine.data.patterns import (
    CountryCode,
    IdentifierType,
    IDENTITY_NUMBER_PATTERNS,
    IDENTITY_PATTERN_COUNTRIES,
    PASSPORT_NUMBER_PATTERNS,
    PASSPORT_PATTERN_COUNTRIES,
    TYPE_LABELS,
    countries_for_pattern,
    get_countries,
    get_patterns,
    get_type_label,
)


FORWARD_AND_INVERSE = [
    (IdentifierType.NATIONAL_IDENTITY, IDENTITY_NUMBER_PATTERNS, IDENTITY_PATTERN_COUNTRIES),
    (IdentifierType.PASSPORT, PASSPORT_NUMBER_PATTERNS, PASSPORT_PATTERN_COUNTRIES),
]


@pytest.mark.parametrize("identifier_type,forward,inverse", FORWARD_AND_INVERSE)
def test_inverse_table_matches_forward_table(identifier_type, forward, inverse):
    forward_texts = {pattern.pattern for patterns in forward.values() for pattern in patterns}
    assert set(inverse.keys()) == forward_texts

    for pattern_text, countries in inverse.items():
        expected = tuple(
            country for country, patterns in forward.items()
            if pattern_text in [pattern.pattern for pattern in patterns]
        )
        assert countries == expected
        assert countries_for_pattern(pattern_text, identifier_type) == expected


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        IDENTITY_NUMBER_PATTERNS[CountryCode.ZA] = (re.compile(".*"),)
    with pytest.raises(TypeError):
        TYPE_LABELS[CountryCode.ZA] = "Something else"


def test_sweep_order_follows_insertion_order():
    assert get_countries(IdentifierType.NATIONAL_IDENTITY) == (
        CountryCode.ZA, CountryCode.UK, CountryCode.US, CountryCode.CA
    )
    assert get_countries(IdentifierType.PASSPORT) == (
        CountryCode.ZA, CountryCode.US, CountryCode.UK, CountryCode.CA
    )


def test_uk_has_two_passport_formats():
    assert len(get_patterns(CountryCode.UK, IdentifierType.PASSPORT)) == 2


def test_every_identity_country_has_a_label():
    for country in get_countries(IdentifierType.NATIONAL_IDENTITY):
        assert get_type_label(country) == TYPE_LABELS[country]
    assert get_type_label(CountryCode.US) == "Social Security Number"
    assert get_type_label(None) == "Other"


def test_unknown_pattern_text_has_no_countries():
    assert countries_for_pattern("^nothing$", IdentifierType.PASSPORT) == ()


@pytest.mark.parametrize("value,expected", [
    ("ZA", CountryCode.ZA),
    ("za", CountryCode.ZA),
    (" us ", CountryCode.US),
    ("GB", CountryCode.UK),
    (CountryCode.CA, CountryCode.CA),
    ("FR", None),
    ("", None),
    (None, None),
])
def test_country_code_from_string(value, expected):
    assert CountryCode.from_string(value) == expected


@pytest.mark.parametrize("value,expected", [
    ("National Identity", IdentifierType.NATIONAL_IDENTITY),
    ("national identity", IdentifierType.NATIONAL_IDENTITY),
    ("NATIONAL_IDENTITY", IdentifierType.NATIONAL_IDENTITY),
    ("national", IdentifierType.NATIONAL_IDENTITY),
    ("Passport", IdentifierType.PASSPORT),
    ("PASSPORT", IdentifierType.PASSPORT),
    (IdentifierType.PASSPORT, IdentifierType.PASSPORT),
    ("Driving Licence", None),
])
def test_identifier_type_from_string(value, expected):
    assert IdentifierType.from_string(value) == expected


def test_patterns_only_match_ascii_digits():
    # Arabic-Indic digits are \d in unicode mode
    arabic_indic = "٨٠٠١٠١٥٠٠٩٠٨٧"
    for pattern in get_patterns(CountryCode.ZA, IdentifierType.NATIONAL_IDENTITY):
        assert pattern.fullmatch(arabic_indic) is None
