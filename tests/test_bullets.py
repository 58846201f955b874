"""
Tests for the auto-numbering scheme registry.
"""

import pytest

from slidemarkup.bullets import (
    DEFAULT_STYLE_CLASS,
    STYLE_CLASSES,
    BulletType,
    classify,
    style_class_name,
)


def test_registry_covers_every_scheme():
    assert len(BulletType) == 41
    assert set(STYLE_CLASSES) == set(BulletType)
    assert len(set(STYLE_CLASSES.values())) == 41


@pytest.mark.parametrize("bullet_type", list(BulletType))
def test_classify_known_tokens(bullet_type):
    """Every schema token maps to its own variant, on every call."""
    assert classify(bullet_type.value) is bullet_type
    assert classify(bullet_type.value) is classify(bullet_type.value)


def test_classify_unknown_token_returns_default():
    assert classify("klingonPlain") is BulletType.ARABIC_PLAIN
    assert classify("klingonPlain", default=BulletType.ROMAN_UPPER_PERIOD) is BulletType.ROMAN_UPPER_PERIOD
    assert classify(None) is BulletType.ARABIC_PLAIN
    assert classify("") is BulletType.ARABIC_PLAIN


def test_style_class_names_are_stable():
    assert style_class_name(BulletType.ARABIC_PLAIN) == "list_style_arabic_plain"
    assert style_class_name(BulletType.ALPHA_UPPER_PAREN_R) == "list_style_alpha_upper_char_paren_r"
    assert style_class_name(BulletType.EA_JAPANESE_DOUBLE_BYTE_PERIOD) == (
        "list_style_east_asian_japanese_double_byte_period"
    )
    assert style_class_name(BulletType.THAI_NUM_PAREN_BOTH) == "list_style_thai_num_paren_both"
    # published spelling
    assert style_class_name(BulletType.ROMAN_LOWER_PAREN_R) == "list_style_romon_lower_char_paren_r"


def test_style_class_name_without_variant():
    assert style_class_name(None) == DEFAULT_STYLE_CLASS
