"""
Identity number checks - structural/checksum validation and field parsing

The presidio recognizer lives in .recognizer and is imported on demand.
"""

from .validators import (
    ValidationStatus,
    PARITY_CHECKED_COUNTRIES,
    PATTERN_ONLY_COUNTRIES,
    checksum_valid,
    calc_check_digit,
    validate_for_country,
    validate_for_all_countries,
    validate_identity_number_for_country,
    validate_passport_number_for_country,
    validate_identity_number_for_all_countries,
    validate_passport_number_for_all_countries,
)
from .parsers import (
    Citizenship,
    Gender,
    ParsedMetadata,
    COUNTRY_PARSERS,
    CA_REGIONS,
    parse_short_date,
    get_age,
    parse_identity_number_for_country,
)

__all__ = [
    # Validation
    "ValidationStatus",
    "PARITY_CHECKED_COUNTRIES",
    "PATTERN_ONLY_COUNTRIES",
    "validate_for_country",
    "validate_for_all_countries",
    "validate_identity_number_for_country",
    "validate_passport_number_for_country",
    "validate_identity_number_for_all_countries",
    "validate_passport_number_for_all_countries",
    # Checksum algorithm
    "checksum_valid",
    "calc_check_digit",
    # Parsing
    "Citizenship",
    "Gender",
    "ParsedMetadata",
    "COUNTRY_PARSERS",
    "CA_REGIONS",
    "parse_short_date",
    "get_age",
    "parse_identity_number_for_country",
]
