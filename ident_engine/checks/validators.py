"""
Identity number validation against the pattern registry

Two axes of operation:
- validate a number for one known country
- sweep every registered country and collect the ones that accept it

Validation is structural (the registry patterns) plus, for national identity
numbers whose scheme carries a check digit, a Luhn checksum.

Libraries used:
- python-stdnum: Luhn checksum calculation and validation

Usage:
    from ident_engine.checks.validators import validate_for_all_countries

    status, countries = validate_for_all_countries("8001015009087", IdentifierType.NATIONAL_IDENTITY)
"""

import logging
import re
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from stdnum import luhn

from ident_engine.data.patterns import (
    CountryCode,
    IdentifierType,
    get_countries,
    get_patterns,
)
from ident_engine.preprocessing.text_normalizer import mask_identifier

logger = logging.getLogger(__name__)


class ValidationStatus(Enum):
    """Outcome of validating a number for a country."""
    VALID = "Valid"
    INVALID = "Invalid"
    UNKNOWN = "Unknown"  # No rule defined for the country/type pair


# National identity schemes that carry a Luhn check digit
PARITY_CHECKED_COUNTRIES = frozenset({CountryCode.ZA, CountryCode.CA})

# National identity schemes where a pattern match is sufficient
PATTERN_ONLY_COUNTRIES = frozenset({CountryCode.UK, CountryCode.US})


# =============================================================================
# CHECKSUM ALGORITHM
# =============================================================================

def checksum_valid(digits: str) -> bool:
    """
    Validate a digit string with the Luhn algorithm.

    From the rightmost digit, every second digit is doubled (subtracting 9
    when the result exceeds 9) and all digits are summed; the string is valid
    when the total is divisible by 10.

    Callers strip separators first; non-digit or empty input is not valid.
    """
    return luhn.is_valid(digits)


def calc_check_digit(digits: str) -> str:
    """Calculate the Luhn check digit to append to a digit string."""
    return luhn.calc_check_digit(digits)


# =============================================================================
# SINGLE COUNTRY VALIDATION
# =============================================================================

def _matches_any(number: str, country: CountryCode, identifier_type: IdentifierType) -> bool:
    for pattern in get_patterns(country, identifier_type):
        if pattern.fullmatch(number):
            return True
    return False


def validate_identity_number_for_country(identity_number: str, country_code: CountryCode) -> ValidationStatus:
    """
    Validate a national identity number against a specific country.

    Args:
        identity_number: The number, separators allowed where the country's pattern allows them
        country_code: Country whose rules apply

    Returns:
        VALID, INVALID, or UNKNOWN when no rule exists for the country
    """
    country = CountryCode.from_string(country_code)
    if country is None or not get_patterns(country, IdentifierType.NATIONAL_IDENTITY):
        logger.debug(f"No identity number rule for country {country_code!r}")
        return ValidationStatus.UNKNOWN

    if not _matches_any(identity_number, country, IdentifierType.NATIONAL_IDENTITY):
        return ValidationStatus.INVALID

    if country in PARITY_CHECKED_COUNTRIES:
        digits = re.sub(r"\D", "", identity_number)
        if checksum_valid(digits):
            return ValidationStatus.VALID
        logger.debug(f"{country.value} checksum failed for {mask_identifier(identity_number)}")
        return ValidationStatus.INVALID

    if country in PATTERN_ONLY_COUNTRIES:
        return ValidationStatus.VALID

    return ValidationStatus.UNKNOWN


def validate_passport_number_for_country(passport_number: str, country_code: CountryCode) -> ValidationStatus:
    """
    Validate a passport number against a specific country.

    Passport numbers carry no check digit here, the pattern alone decides.
    """
    country = CountryCode.from_string(country_code)
    if country is None or not get_patterns(country, IdentifierType.PASSPORT):
        logger.debug(f"No passport rule for country {country_code!r}")
        return ValidationStatus.UNKNOWN

    if _matches_any(passport_number, country, IdentifierType.PASSPORT):
        return ValidationStatus.VALID
    return ValidationStatus.INVALID


def validate_for_country(
    number: str,
    country_code: CountryCode,
    identifier_type: IdentifierType = IdentifierType.NATIONAL_IDENTITY
) -> ValidationStatus:
    """Validate a number for one country, dispatching on the identifier type."""
    if identifier_type == IdentifierType.PASSPORT:
        return validate_passport_number_for_country(number, country_code)
    return validate_identity_number_for_country(number, country_code)


# =============================================================================
# ALL COUNTRY SWEEP
# =============================================================================

def validate_for_all_countries(
    number: str,
    identifier_type: IdentifierType = IdentifierType.NATIONAL_IDENTITY,
    countries: Optional[Iterable[CountryCode]] = None
) -> Tuple[ValidationStatus, List[CountryCode]]:
    """
    Check a number against every registered country.

    Args:
        number: The number to validate
        identifier_type: Which pattern table to sweep
        countries: Optional subset of countries to consider (registry order is kept)

    Returns:
        Tuple of (status, matched_countries)
        - status: VALID if at least one country accepted the number, else INVALID
        - matched_countries: accepting countries in registry order
    """
    allowed = set(countries) if countries is not None else None

    matched: List[CountryCode] = []
    for country in get_countries(identifier_type):
        if allowed is not None and country not in allowed:
            continue
        if validate_for_country(number, country, identifier_type) == ValidationStatus.VALID:
            matched.append(country)

    status = ValidationStatus.VALID if matched else ValidationStatus.INVALID
    logger.debug(
        f"{identifier_type.value} sweep for {mask_identifier(number)}: "
        f"{[country.value for country in matched] or 'no match'}"
    )
    return status, matched


def validate_identity_number_for_all_countries(identity_number: str) -> Tuple[ValidationStatus, List[CountryCode]]:
    """Takes an identity number and checks in which countries it is valid."""
    return validate_for_all_countries(identity_number, IdentifierType.NATIONAL_IDENTITY)


def validate_passport_number_for_all_countries(passport_number: str) -> Tuple[ValidationStatus, List[CountryCode]]:
    """Takes a passport number and checks in which countries it is valid."""
    return validate_for_all_countries(passport_number, IdentifierType.PASSPORT)
