"""
Auto-numbered bullet schemes.

Maps the ECMA-376 ``ST_TextAutonumberScheme`` tokens onto an enumeration and
each enumeration member onto the CSS class the renderer puts on ordered
lists. Glyph rendering is left to an external stylesheet, so the class names
are part of the output contract and must not change.
"""

import logging
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class BulletType(str, Enum):
    """Auto-numbering scheme of an ordered list (value = schema token)."""

    ALPHA_LOWER_PAREN_BOTH = "alphaLcParenBoth"
    ALPHA_UPPER_PAREN_BOTH = "alphaUcParenBoth"
    ALPHA_LOWER_PAREN_R = "alphaLcParenR"
    ALPHA_UPPER_PAREN_R = "alphaUcParenR"
    ALPHA_LOWER_PERIOD = "alphaLcPeriod"
    ALPHA_UPPER_PERIOD = "alphaUcPeriod"
    ARABIC_PAREN_BOTH = "arabicParenBoth"
    ARABIC_PAREN_R = "arabicParenR"
    ARABIC_PERIOD = "arabicPeriod"
    ARABIC_PLAIN = "arabicPlain"
    ROMAN_LOWER_PAREN_BOTH = "romanLcParenBoth"
    ROMAN_UPPER_PAREN_BOTH = "romanUcParenBoth"
    ROMAN_LOWER_PAREN_R = "romanLcParenR"
    ROMAN_UPPER_PAREN_R = "romanUcParenR"
    ROMAN_LOWER_PERIOD = "romanLcPeriod"
    ROMAN_UPPER_PERIOD = "romanUcPeriod"
    CIRCLE_NUM_DOUBLE_BYTE_PLAIN = "circleNumDbPlain"
    CIRCLE_NUM_WINGDINGS_BLACK_PLAIN = "circleNumWdBlackPlain"
    CIRCLE_NUM_WINGDINGS_WHITE_PLAIN = "circleNumWdWhitePlain"
    ARABIC_DOUBLE_BYTE_PERIOD = "arabicDbPeriod"
    ARABIC_DOUBLE_BYTE_PLAIN = "arabicDbPlain"
    EA_SIMPLIFIED_CHINESE_PERIOD = "ea1ChsPeriod"
    EA_SIMPLIFIED_CHINESE_PLAIN = "ea1ChsPlain"
    EA_TRADITIONAL_CHINESE_PERIOD = "ea1ChtPeriod"
    EA_TRADITIONAL_CHINESE_PLAIN = "ea1ChtPlain"
    EA_JAPANESE_DOUBLE_BYTE_PERIOD = "ea1JpnChsDbPeriod"
    EA_JAPANESE_KOREAN_PLAIN = "ea1JpnKorPlain"
    EA_JAPANESE_KOREAN_PERIOD = "ea1JpnKorPeriod"
    ARABIC_1_MINUS = "arabic1Minus"
    ARABIC_2_MINUS = "arabic2Minus"
    HEBREW_2_MINUS = "hebrew2Minus"
    THAI_ALPHA_PERIOD = "thaiAlphaPeriod"
    THAI_ALPHA_PAREN_R = "thaiAlphaParenR"
    THAI_ALPHA_PAREN_BOTH = "thaiAlphaParenBoth"
    THAI_NUM_PERIOD = "thaiNumPeriod"
    THAI_NUM_PAREN_R = "thaiNumParenR"
    THAI_NUM_PAREN_BOTH = "thaiNumParenBoth"
    HINDI_ALPHA_PERIOD = "hindiAlphaPeriod"
    HINDI_NUM_PERIOD = "hindiNumPeriod"
    HINDI_NUM_PAREN_R = "hindiNumParenR"
    HINDI_ALPHA_1_PERIOD = "hindiAlpha1Period"


DEFAULT_BULLET_TYPE = BulletType.ARABIC_PLAIN
DEFAULT_STYLE_CLASS = "list_style_default"

_BY_TOKEN: Dict[str, BulletType] = {member.value: member for member in BulletType}

# Published class names; spelling is frozen, typos included.
STYLE_CLASSES: Dict[BulletType, str] = {
    BulletType.ALPHA_LOWER_PAREN_BOTH: "list_style_alpha_lower_char_paren_both",
    BulletType.ALPHA_UPPER_PAREN_BOTH: "list_style_alpha_upper_char_paren_both",
    BulletType.ALPHA_LOWER_PAREN_R: "list_style_alpha_lower_char_paren_r",
    BulletType.ALPHA_UPPER_PAREN_R: "list_style_alpha_upper_char_paren_r",
    BulletType.ALPHA_LOWER_PERIOD: "list_style_alpha_lower_char_period",
    BulletType.ALPHA_UPPER_PERIOD: "list_style_alpha_upper_char_period",
    BulletType.ARABIC_PAREN_BOTH: "list_style_arabic_paren_both",
    BulletType.ARABIC_PAREN_R: "list_style_arabic_paren_r",
    BulletType.ARABIC_PERIOD: "list_style_arabic_period",
    BulletType.ARABIC_PLAIN: "list_style_arabic_plain",
    BulletType.ROMAN_LOWER_PAREN_BOTH: "list_style_roman_lower_char_paren_both",
    BulletType.ROMAN_UPPER_PAREN_BOTH: "list_style_roman_upper_char_paren_both",
    BulletType.ROMAN_LOWER_PAREN_R: "list_style_romon_lower_char_paren_r",
    BulletType.ROMAN_UPPER_PAREN_R: "list_style_roman_upper_char_paren_r",
    BulletType.ROMAN_LOWER_PERIOD: "list_style_roman_lower_char_period",
    BulletType.ROMAN_UPPER_PERIOD: "list_style_roman_upper_char_period",
    BulletType.CIRCLE_NUM_DOUBLE_BYTE_PLAIN: "list_style_circle_num_double_byte_plain",
    BulletType.CIRCLE_NUM_WINGDINGS_BLACK_PLAIN: "list_style_circle_num_wingdings_black_plain",
    BulletType.CIRCLE_NUM_WINGDINGS_WHITE_PLAIN: "list_style_circle_num_wingdings_white_plain",
    BulletType.ARABIC_DOUBLE_BYTE_PERIOD: "list_style_arabic_double_byte_period",
    BulletType.ARABIC_DOUBLE_BYTE_PLAIN: "list_style_arabic_double_byte_plain",
    BulletType.EA_SIMPLIFIED_CHINESE_PERIOD: "list_style_east_asian_simplified_chinese_period",
    BulletType.EA_SIMPLIFIED_CHINESE_PLAIN: "list_style_east_asian_simplified_chinese_plain",
    BulletType.EA_TRADITIONAL_CHINESE_PERIOD: "list_style_east_asian_traditional_chinese_period",
    BulletType.EA_TRADITIONAL_CHINESE_PLAIN: "list_style_east_asian_traditional_chinese_plain",
    BulletType.EA_JAPANESE_DOUBLE_BYTE_PERIOD: "list_style_east_asian_japanese_double_byte_period",
    BulletType.EA_JAPANESE_KOREAN_PLAIN: "list_style_east_asian_japanese_korean_plain",
    BulletType.EA_JAPANESE_KOREAN_PERIOD: "list_style_east_asian_japanese_korean_period",
    BulletType.ARABIC_1_MINUS: "list_style_arabic_1_minus",
    BulletType.ARABIC_2_MINUS: "list_style_arabic_2_minus",
    BulletType.HEBREW_2_MINUS: "list_style_hebrew_2_minus",
    BulletType.THAI_ALPHA_PERIOD: "list_style_thai_alpha_period",
    BulletType.THAI_ALPHA_PAREN_R: "list_style_thai_alpha_paren_r",
    BulletType.THAI_ALPHA_PAREN_BOTH: "list_style_thai_alpha_paren_both",
    BulletType.THAI_NUM_PERIOD: "list_style_thai_num_period",
    BulletType.THAI_NUM_PAREN_R: "list_style_thai_num_paren_r",
    BulletType.THAI_NUM_PAREN_BOTH: "list_style_thai_num_paren_both",
    BulletType.HINDI_ALPHA_PERIOD: "list_style_hindi_alpha_period",
    BulletType.HINDI_NUM_PERIOD: "list_style_hindi_num_period",
    BulletType.HINDI_NUM_PAREN_R: "list_style_hindi_num_paren_r",
    BulletType.HINDI_ALPHA_1_PERIOD: "list_style_hindi_alpha_1_period",
}


def classify(token: Optional[str], default: BulletType = DEFAULT_BULLET_TYPE) -> BulletType:
    """
    Map a ``buAutoNum@type`` token to its BulletType.

    Unknown or missing tokens fall back to ``default``; this never raises.
    """
    if token is None:
        return default

    bullet_type = _BY_TOKEN.get(token.strip())
    if bullet_type is None:
        logger.debug("Unsupported bullet type %r, using %s", token, default.value)
        return default
    return bullet_type


def style_class_name(bullet_type: Optional[BulletType]) -> str:
    """CSS class for an ordered list numbered with ``bullet_type``."""
    if bullet_type is None:
        return DEFAULT_STYLE_CLASS
    return STYLE_CLASSES.get(bullet_type, DEFAULT_STYLE_CLASS)
