"""
Tests for identifier normalization and masking
"""

import pytest

from ident_engine.preprocessing.text_normalizer import (
    mask_identifier,
    normalize_identifier,
    normalize_unicode,
    strip_whitespace,
)


@pytest.mark.parametrize("raw,expected", [
    ("800101 5009 087", "8001015009087"),
    ("AB 12 34 56 C", "AB123456C"),
    ("\t219-09-9999\n", "219-09-9999"),
    ("", ""),
])
def test_strip_whitespace(raw, expected):
    assert strip_whitespace(raw) == expected


def test_normalize_unicode_folds_lookalikes():
    assert normalize_unicode("８００１") == "8001"
    assert normalize_unicode("ＡＢ") == "AB"
    assert normalize_unicode("219–09—9999") == "219-09-9999"
    assert normalize_unicode("12\u200b34\ufeff") == "1234"


def test_normalize_identifier():
    assert normalize_identifier(" ８００１０１ ５００９ ０８７ ") == "8001015009087"
    assert normalize_identifier(None) == ""


def test_normalize_identifier_without_unicode_folding():
    assert normalize_identifier("219–09 9999", unicode_normalization=False) == "219–099999"


@pytest.mark.parametrize("raw,expected", [
    ("8001015009087", "*********9087"),
    ("1234", "****"),
    ("12", "**"),
    ("", ""),
])
def test_mask_identifier(raw, expected):
    assert mask_identifier(raw) == expected
