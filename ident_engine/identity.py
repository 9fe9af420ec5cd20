"""
Identity number validation and parsing - public entry points

Composes the registry sweep, the per-country validators and the field
parsers into one request/response call.

Usage:
    from ident_engine import parse_id, validate_id

    result = parse_id("8001015009087")
    result.status              # ValidationStatus.VALID
    result.country_code_actual # [CountryCode.ZA]
    result.meta.date_of_birth  # "1980-01-01"

    validate_id("123456789", "auto", "Passport").to_dict()
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Union

from ident_engine.checks.parsers import ParsedMetadata, parse_identity_number_for_country
from ident_engine.checks.validators import (
    ValidationStatus,
    validate_for_all_countries,
    validate_for_country,
)
from ident_engine.data.patterns import (
    CountryCode,
    IdentifierType,
    OTHER_LABEL,
    PASSPORT_LABEL,
    get_type_label,
)
from ident_engine.preprocessing.text_normalizer import mask_identifier, normalize_identifier
from ident_engine.validation_config import (
    DEFAULT_COUNTRY_CODE,
    DEFAULT_IDENTIFIER_TYPE,
    ValidationConfig,
)

logger = logging.getLogger(__name__)

AUTO = "auto"


@dataclass
class ValidationResult:
    """
    Outcome of validating (and optionally parsing) one identifier.

    country_code_actual is empty unless the status is Valid, also when a
    specific country was requested.
    """
    # Countries where the number matched and, where required, passed its checksum
    country_code_actual: List[CountryCode]
    # The caller's request: a country or "auto"
    country_code_expected: Union[CountryCode, str]
    # Input after whitespace removal and unicode folding
    identity_number: str
    status: ValidationStatus
    type: IdentifierType
    # In-country name of the identifier, e.g. "Social Security Number"
    type_label: str
    meta: Optional[ParsedMetadata] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys of the JSON interface."""
        expected = self.country_code_expected
        return {
            "countryCodeActual": [country.value for country in self.country_code_actual],
            "countryCodeExpected": expected.value if isinstance(expected, CountryCode) else expected,
            "identityNumber": self.identity_number,
            "meta": self.meta.to_dict() if self.meta is not None else None,
            "status": self.status.value,
            "type": self.type.value,
            "typeLabel": self.type_label,
        }


def _resolve_identifier_type(identifier_type: Union[IdentifierType, str]) -> IdentifierType:
    resolved = IdentifierType.from_string(identifier_type)
    if resolved is None:
        raise ValueError(
            f"Unsupported identifier type {identifier_type!r}, "
            f"expected one of {[t.value for t in IdentifierType]}"
        )
    return resolved


def _is_auto(country_code: Union[CountryCode, str, None]) -> bool:
    return country_code is None or (isinstance(country_code, str) and country_code.strip().lower() == AUTO)


def validate_id(
    identity_number: str,
    country_code: Union[CountryCode, str] = DEFAULT_COUNTRY_CODE,
    identifier_type: Union[IdentifierType, str] = DEFAULT_IDENTIFIER_TYPE,
    config: Optional[ValidationConfig] = None
) -> ValidationResult:
    """
    Validate an identity or passport number.

    Args:
        identity_number: The number to validate, whitespace is ignored
        country_code: A country code to validate against that country only, or
            "auto" to find every country where the number is valid
        identifier_type: "National Identity" (default) or "Passport"
        config: Settings to use. By default the shipped defaults are used and
            nothing is read from disk.

    Returns:
        ValidationResult. Invalid input is reported through the status, never raised.
        identity_number echoes the normalized input: whitespace is removed and,
        unless the normalize_unicode option is off, unicode lookalikes are folded
        (e.g. fullwidth or circled digits become ASCII digits).

    Raises:
        ValueError: If identifier_type is not a known identifier type
    """
    if config is None:
        config = ValidationConfig(persist=False)
    id_type = _resolve_identifier_type(identifier_type)
    normalized = normalize_identifier(identity_number or "", bool(config.get_option("normalize_unicode")))

    if _is_auto(country_code):
        status, countries = validate_for_all_countries(normalized, id_type, config.enabled_countries())
        expected: Union[CountryCode, str] = AUTO
        type_label = OTHER_LABEL
        if countries:
            type_label = get_type_label(countries[0])
    else:
        country = CountryCode.from_string(country_code)
        expected = country or country_code
        if country is None:
            logger.debug(f"Unmodeled country code {country_code!r}")
            status = ValidationStatus.UNKNOWN
        else:
            status = validate_for_country(normalized, country, id_type)
        countries = [country] if status == ValidationStatus.VALID else []
        type_label = get_type_label(country)

    if id_type == IdentifierType.PASSPORT:
        type_label = PASSPORT_LABEL

    logger.debug(f"validate_id {mask_identifier(normalized)} ({id_type.value}, {country_code}): {status.value}")

    return ValidationResult(
        country_code_actual=countries,
        country_code_expected=expected,
        identity_number=normalized,
        status=status,
        type=id_type,
        type_label=type_label,
    )


def parse_id(
    identity_number: str,
    country_code: Union[CountryCode, str] = DEFAULT_COUNTRY_CODE,
    identifier_type: Union[IdentifierType, str] = DEFAULT_IDENTIFIER_TYPE,
    config: Optional[ValidationConfig] = None,
    today: Optional[date] = None
) -> ValidationResult:
    """
    Validate an identity number and extract the information encoded in it.

    Takes the same arguments as validate_id. When the number is valid the
    fields encoded for the first matched country are attached as meta.
    Passport numbers are validated only.

    Args:
        today: Reference date for age and century resolution (default: today)
    """
    result = validate_id(identity_number, country_code, identifier_type, config)
    if result.status != ValidationStatus.VALID or not result.country_code_actual:
        return result
    if result.type != IdentifierType.NATIONAL_IDENTITY:
        return result

    result.meta = parse_identity_number_for_country(result.identity_number, result.country_code_actual, today)
    return result
