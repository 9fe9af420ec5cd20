"""
Tests for field extraction from identity numbers
"""

from datetime import date

import pytest

from ident_engine.checks.parsers import (
    CA_REGIONS,
    Citizenship,
    Gender,
    ParsedMetadata,
    get_age,
    parse_ca,
    parse_identity_number_for_country,
    parse_short_date,
    parse_uk,
    parse_us,
    parse_za,
)
from ident_engine.data.patterns import CountryCode

from conftest import TODAY, with_check_digit


# =============================================================================
# DATE HELPERS
# =============================================================================

@pytest.mark.parametrize("short_date,expected", [
    ("800101", "1980-01-01"),
    ("991231", "1999-12-31"),
    ("000229", "2000-02-29"),
    ("250615", "2025-06-15"),
    ("260101", "1926-01-01"),   # Equal to the current two digit year reads as 1900s
    ("270101", "1927-01-01"),
])
def test_parse_short_date_uses_rolling_window(short_date, expected):
    assert parse_short_date(short_date, TODAY) == expected


def test_parse_short_date_window_moves_with_reference_year():
    assert parse_short_date("300101", date(2031, 1, 1)) == "2030-01-01"
    assert parse_short_date("300101", date(2030, 1, 1)) == "1930-01-01"


@pytest.mark.parametrize("date_of_birth,expected", [
    ("1980-01-01", 46),
    ("1980-10-17", 46),     # Birthday today
    ("1980-10-18", 45),     # Birthday tomorrow
    ("1980-12-25", 45),
    ("2005-03-15", 21),
    ("1980-02-31", 46),     # Pattern-valid, calendar-invalid
])
def test_get_age(date_of_birth, expected):
    assert get_age(date_of_birth, TODAY) == expected


# =============================================================================
# SOUTH AFRICA
# =============================================================================

def test_parse_za_example():
    meta = parse_za("8001015009087", TODAY)
    assert meta == ParsedMetadata(
        age=46,
        century=1900,
        citizenship=Citizenship.CITIZEN,
        date_of_birth="1980-01-01",
        gender=Gender.MALE,
        parity=7,
        race="Unknown",
        sequence=5009,
    )
    assert meta.area is None


def test_parse_za_female_below_5000():
    meta = parse_za(with_check_digit("800101499908"), TODAY)
    assert meta.gender == Gender.FEMALE
    assert meta.sequence == 4999


def test_parse_za_male_from_5000():
    meta = parse_za(with_check_digit("800101500008"), TODAY)
    assert meta.gender == Gender.MALE
    assert meta.sequence == 5000


def test_parse_za_permanent_resident():
    meta = parse_za(with_check_digit("800101500918"), TODAY)
    assert meta.citizenship == Citizenship.PERMANENT_RESIDENT


def test_parse_za_2000s_birth():
    number = with_check_digit("050315012308")
    meta = parse_za(number, TODAY)
    assert meta.date_of_birth == "2005-03-15"
    assert meta.century == 2000
    assert meta.age == 21
    assert meta.parity == int(number[-1])


def test_parse_za_rejects_non_matching_input():
    assert parse_za("AB123456C", TODAY) is None


# =============================================================================
# CANADA
# =============================================================================

@pytest.mark.parametrize("first_digit,area,citizenship", [
    (0, "Tax Number", Citizenship.OTHER),
    (1, "NS, NB, PE, NL", Citizenship.CITIZEN),
    (2, "QC", Citizenship.CITIZEN),
    (3, "QC", Citizenship.CITIZEN),
    (4, "ON", Citizenship.CITIZEN),
    (5, "ON", Citizenship.CITIZEN),
    (6, "NW ON, MB, SK, AB, NT, NU", Citizenship.CITIZEN),
    (7, "BC, YT", Citizenship.CITIZEN),
    (8, "BN", Citizenship.OTHER),
    (9, "Temporary Resident", Citizenship.TEMPORARY_RESIDENT),
])
def test_parse_ca_regions(first_digit, area, citizenship):
    meta = parse_ca(with_check_digit(f"{first_digit}2345678"))
    assert meta == ParsedMetadata(area=area, citizenship=citizenship)


def test_parse_ca_accepts_separators():
    assert parse_ca("123-456-782").area == "NS, NB, PE, NL"
    assert parse_ca("123 456 782").area == "NS, NB, PE, NL"


def test_ca_regions_cover_one_to_nine():
    assert sorted(CA_REGIONS) == list(range(1, 10))


# =============================================================================
# UNITED KINGDOM / UNITED STATES
# =============================================================================

def test_parse_uk_sequence():
    assert parse_uk("AB123456C") == ParsedMetadata(sequence=123456)
    assert parse_uk("AB 12 34 56 C").sequence == 123456
    assert parse_uk("AB012345").sequence == 12345


def test_parse_us_sequence():
    assert parse_us("219-09-9999") == ParsedMetadata(sequence=9999)
    assert parse_us("123-45-0012").sequence == 12


def test_parse_us_rejects_non_matching_input():
    assert parse_us("219099999") is None


# =============================================================================
# DISPATCH
# =============================================================================

def test_dispatch_parses_first_country():
    meta = parse_identity_number_for_country("8001015009087", [CountryCode.ZA], TODAY)
    assert meta.date_of_birth == "1980-01-01"


def test_dispatch_only_attempts_first_country():
    # The CA decoder would succeed, but US comes first and doesn't match
    assert parse_identity_number_for_country("123456782", [CountryCode.US, CountryCode.CA]) is None
    assert parse_identity_number_for_country("123456782", [CountryCode.CA, CountryCode.US]).area == "NS, NB, PE, NL"


@pytest.mark.parametrize("number,countries", [
    ("", [CountryCode.ZA]),
    ("8001015009087", []),
    ("8001015009087", ["FR"]),
])
def test_dispatch_returns_none(number, countries):
    assert parse_identity_number_for_country(number, countries) is None


def test_dispatch_accepts_country_strings():
    assert parse_identity_number_for_country("219-09-9999", ["US"]).sequence == 9999


# =============================================================================
# SERIALIZATION
# =============================================================================

def test_metadata_to_dict_uses_camel_case_and_skips_missing():
    meta = parse_za("8001015009087", TODAY)
    assert meta.to_dict() == {
        "age": 46,
        "century": 1900,
        "citizenship": "Citizen",
        "dateOfBirth": "1980-01-01",
        "gender": "Male",
        "parity": 7,
        "race": "Unknown",
        "sequence": 5009,
    }
    assert ParsedMetadata(sequence=0).to_dict() == {"sequence": 0}
    assert ParsedMetadata().to_dict() == {}
