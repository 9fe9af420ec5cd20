"""
Ident Engine - Local identity number validation

Validates and parses national identity and passport numbers for a fixed set
of countries, and recognizes them in free text through Presidio.
"""

from .validation_config import VERSION
from .data.patterns import CountryCode, IdentifierType
from .checks.validators import ValidationStatus
from .checks.parsers import Citizenship, Gender, ParsedMetadata
from .identity import ValidationResult, parse_id, validate_id

__version__ = VERSION

# Lazy imports so presidio (and spaCy behind it) only load when scanning text
_lazy_imports = {
    "IdentityNumberRecognizer": ".checks.recognizer",
    "get_recognizers": ".checks.recognizer",
}


def __getattr__(name):
    """Lazy import for heavy modules."""
    if name in _lazy_imports:
        import importlib
        module = importlib.import_module(_lazy_imports[name], __package__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CountryCode",
    "IdentifierType",
    "ValidationStatus",
    "Citizenship",
    "Gender",
    "ParsedMetadata",
    "ValidationResult",
    "parse_id",
    "validate_id",
    "IdentityNumberRecognizer",
    "get_recognizers",
]
