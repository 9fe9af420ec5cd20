"""Preprocessing for identifier normalization."""

from .text_normalizer import (
    normalize_unicode,
    normalize_identifier,
    strip_whitespace,
    mask_identifier,
)

__all__ = [
    'normalize_unicode',
    'normalize_identifier',
    'strip_whitespace',
    'mask_identifier',
]
