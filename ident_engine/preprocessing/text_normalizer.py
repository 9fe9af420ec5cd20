"""
Identifier normalization before validation.

This module provides preprocessing functions to handle:
- Whitespace inside identifiers ("800101 5009 087")
- Unicode normalization (fullwidth digits, zero-width spaces, unicode dashes)
- Masking identifiers before they reach a log line
"""

import re
import unicodedata


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode look-alikes in an identifier.

    Handles:
    - Fullwidth characters (０ → 0, Ａ → A)
    - Zero-width characters that break patterns
    - Unicode hyphens and dashes (– → -)

    Args:
        text: Raw identifier

    Returns:
        Text with ASCII-equivalent characters
    """
    if not text:
        return text

    # NFKC normalization: converts fullwidth to ASCII equivalents
    text = unicodedata.normalize('NFKC', text)

    # U+200B..U+200F zero width and direction marks, U+2060 word joiner, U+FEFF BOM
    text = re.sub(r'[\u200b-\u200f\u2060\ufeff]', '', text)

    # U+2010..U+2015 hyphen, non-breaking hyphen, figure dash, en dash, em dash, bar, U+2212 minus
    text = re.sub(r'[\u2010-\u2015\u2212]', '-', text)

    return text


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character."""
    return re.sub(r'\s+', '', text)


def normalize_identifier(text: str, unicode_normalization: bool = True) -> str:
    """
    Normalize an identifier for validation.

    Args:
        text: Raw identifier as entered
        unicode_normalization: Also fold unicode look-alikes to ASCII

    Returns:
        Identifier with all whitespace removed
    """
    if not text:
        return ""
    if unicode_normalization:
        text = normalize_unicode(text)
    return strip_whitespace(text)


def mask_identifier(text: str, visible: int = 4) -> str:
    """Mask all but the last few characters of an identifier for logging."""
    if not text:
        return ""
    if len(text) <= visible:
        return "*" * len(text)
    return "*" * (len(text) - visible) + text[-visible:]
