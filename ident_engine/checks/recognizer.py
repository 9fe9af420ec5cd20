"""
Presidio recognizer for identity numbers in free text

Builds a PatternRecognizer from the pattern registry so documents can be
scanned for the same identifiers validate_id accepts. Every regex hit is
re-validated through the country sweep, so numbers that only look right
(e.g. a ZA shaped number with a bad check digit) score zero and are dropped.

Usage:
    from presidio_analyzer import AnalyzerEngine
    from ident_engine.checks.recognizer import get_recognizers

    analyzer = AnalyzerEngine()
    for recognizer in get_recognizers():
        analyzer.registry.add_recognizer(recognizer)
"""

from typing import List, Optional

from presidio_analyzer import Pattern, PatternRecognizer

from ident_engine.checks.validators import ValidationStatus, validate_for_all_countries
from ident_engine.data.patterns import CountryCode, IdentifierType, get_countries, get_patterns
from ident_engine.preprocessing.text_normalizer import normalize_identifier

ENTITY_BY_TYPE = {
    IdentifierType.NATIONAL_IDENTITY: "NATIONAL_ID",
    IdentifierType.PASSPORT: "PASSPORT",
}

CONTEXT_BY_TYPE = {
    IdentifierType.NATIONAL_IDENTITY: [
        "id number", "identity", "national id", "south african", "home affairs",
        "ni", "national insurance", "nino", "insurance number",
        "ssn", "social security", "sin", "social insurance",
    ],
    IdentifierType.PASSPORT: [
        "passport", "travel document", "passport number", "passport no",
    ],
}

# Regex hits are confirmed or rejected by validate_result
PATTERN_SCORE = 0.5


def _unanchored(regex: str) -> str:
    """Turn an anchored registry pattern into a word-bounded search pattern."""
    body = regex[1:] if regex.startswith("^") else regex
    body = body[:-1] if body.endswith("$") else body
    return rf"\b{body}\b"


class IdentityNumberRecognizer(PatternRecognizer):
    """
    Recognizes national identity or passport numbers of the modeled countries.

    Args:
        identifier_type: Which registry table to build patterns from
        countries: Restrict to these countries (default: every registered country)
    """

    def __init__(
        self,
        identifier_type: IdentifierType = IdentifierType.NATIONAL_IDENTITY,
        countries: Optional[List[CountryCode]] = None,
        supported_language: str = "en",
    ):
        self.identifier_type = identifier_type
        self.countries = list(countries) if countries else list(get_countries(identifier_type))

        patterns = [
            Pattern(
                name=f"{country.value.lower()}_{identifier_type.name.lower()}_{index}",
                regex=_unanchored(pattern.pattern),
                score=PATTERN_SCORE,
            )
            for country in self.countries
            for index, pattern in enumerate(get_patterns(country, identifier_type))
        ]

        super().__init__(
            supported_entity=ENTITY_BY_TYPE[identifier_type],
            name=f"Ident{identifier_type.name.title().replace('_', '')}Recognizer",
            patterns=patterns,
            context=CONTEXT_BY_TYPE[identifier_type],
            supported_language=supported_language,
        )

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        """Accept a hit only if at least one country validates it."""
        status, _ = validate_for_all_countries(
            normalize_identifier(pattern_text), self.identifier_type, self.countries
        )
        return status == ValidationStatus.VALID


def get_recognizers(countries: Optional[List[CountryCode]] = None) -> List[IdentityNumberRecognizer]:
    """Recognizers for both identifier types."""
    return [IdentityNumberRecognizer(identifier_type, countries) for identifier_type in IdentifierType]
