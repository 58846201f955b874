"""
Paragraph, paragraph-property and run parsing (DrawingML ``a:`` namespace).

Each parser dispatches on a closed table of child tags. Tags outside the
table are skipped with a debug message, which keeps newer schema
extensions from breaking a conversion.
"""

import logging
import re
from typing import Callable, Dict, Optional

from lxml import etree
from pptx.oxml.ns import qn

from slidemarkup.bullets import classify
from slidemarkup.models import (
    DEFAULT_COLOR,
    Alignment,
    BulletStyle,
    FillStyle,
    Paragraph,
    ParagraphProperty,
    TextRun,
    Underline,
)

logger = logging.getLogger(__name__)

MAX_LEVEL = 8

ALIGNMENTS: Dict[str, Alignment] = {
    "l": Alignment.LEFT,
    "ctr": Alignment.CENTER,
    "r": Alignment.RIGHT,
    "just": Alignment.JUSTIFY,
    "justLow": Alignment.JUSTIFY,
    "dist": Alignment.JUSTIFY,
    "thaiDist": Alignment.JUSTIFY,
}

UNDERLINES: Dict[str, Underline] = {
    "sng": Underline.SINGLE,
    "dbl": Underline.DOUBLE,
}

STRIKES = {"sngStrike", "dblStrike"}
TRUE_VALUES = {"1", "true"}

_HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _skip_unknown(element: etree._Element, context: str) -> None:
    logger.debug("Skipping unknown element <%s> in %s", local_name(element), context)


def _is_true(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in TRUE_VALUES


# --- Paragraph properties ---


class ParagraphPropertyResolver:
    """
    Resolve a ``a:pPr`` (or ``a:lvlNpPr`` / ``a:defPPr``) block.

    Bullet markers other than ``buNone`` and ``buAutoNum`` (character and
    picture bullets, bullet colour/font/size) are recognised but not
    modelled: they leave the bullet style at its constructed default.
    """

    # Children traversed for structure only; their values are not retained.
    UNMODELLED = frozenset(
        qn(tag)
        for tag in (
            "a:buChar",
            "a:buBlip",
            "a:buClr",
            "a:buClrTx",
            "a:buFont",
            "a:buFontTx",
            "a:buSzPct",
            "a:buSzPts",
            "a:buSzTx",
            "a:defRPr",
            "a:lnSpc",
            "a:spcAft",
            "a:spcBef",
            "a:tabLst",
            "a:extLst",
        )
    )

    def resolve(
        self,
        node: Optional[etree._Element],
        inherited_level: int = 0,
        base: Optional[ParagraphProperty] = None,
    ) -> ParagraphProperty:
        """
        Args:
            node: Property element, or None for "no property block"
            inherited_level: Level used unless the node carries ``lvl``
            base: Properties the node refines (e.g. the previous list level)

        Returns:
            The resolved ParagraphProperty
        """
        values = base.model_dump() if base is not None else {}
        values["level"] = self._clamp_level(inherited_level)

        if node is None:
            return ParagraphProperty(**values)

        algn = node.get("algn")
        if algn is not None:
            alignment = ALIGNMENTS.get(algn)
            if alignment is None:
                logger.debug("Unknown alignment %r, keeping default", algn)
            else:
                values["alignment"] = alignment

        lvl = node.get("lvl")
        if lvl is not None:
            try:
                values["level"] = self._clamp_level(int(lvl))
            except ValueError:
                logger.debug("Ignoring non-numeric level %r", lvl)

        handlers: Dict[str, Callable[[etree._Element, dict], None]] = {
            qn("a:buNone"): self._no_bullets,
            qn("a:buAutoNum"): self._auto_numbered,
        }
        for child in node.iterchildren(tag=etree.Element):
            handler = handlers.get(child.tag)
            if handler is not None:
                handler(child, values)
            elif child.tag not in self.UNMODELLED:
                _skip_unknown(child, "paragraph properties")

        return ParagraphProperty(**values)

    @staticmethod
    def _clamp_level(level: int) -> int:
        return min(max(level, 0), MAX_LEVEL)

    @staticmethod
    def _no_bullets(node: etree._Element, values: dict) -> None:
        values["bullet_style"] = BulletStyle.NO_BULLETS

    @staticmethod
    def _auto_numbered(node: etree._Element, values: dict) -> None:
        values["bullet_style"] = BulletStyle.AUTO_NUMBERED
        values["bullet_start_at"] = parse_start_at(node.get("startAt"))
        values["bullet_type"] = classify(node.get("type"))


def parse_start_at(value: Optional[str]) -> int:
    """``buAutoNum@startAt``: defaults to 1 and is never below 1."""
    if value is None or not value.strip():
        return 1
    try:
        start_at = int(value)
    except ValueError:
        logger.debug("Ignoring non-numeric startAt %r", value)
        return 1
    return max(start_at, 1)


# --- Runs ---


def parse_run(node: etree._Element) -> TextRun:
    """Parse a text run (``a:r``) or text field (``a:fld``)."""
    values: dict = {}

    for child in node.iterchildren(tag=etree.Element):
        if child.tag == qn("a:t"):
            values["text"] = child.text or ""
        elif child.tag == qn("a:rPr"):
            values.update(_run_properties(child))
        elif child.tag == qn("a:pPr"):
            # fields may carry their own paragraph properties; not modelled
            pass
        else:
            _skip_unknown(child, "run")

    return TextRun(**values)


def _run_properties(node: etree._Element) -> dict:
    values: dict = {
        "bold": _is_true(node.get("b")),
        "italic": _is_true(node.get("i")),
        "strikethrough": node.get("strike") in STRIKES,
        "underline": UNDERLINES.get(node.get("u", ""), Underline.NONE),
    }

    lang = node.get("lang")
    if lang is not None:
        values["language"] = lang

    for child in node.iterchildren(tag=etree.Element):
        if child.tag == qn("a:solidFill"):
            values["fill_style"] = FillStyle.SOLID
            values["color"] = _solid_fill_color(child)
        elif child.tag == qn("a:noFill"):
            values["fill_style"] = FillStyle.NONE
    return values


def _solid_fill_color(node: etree._Element) -> str:
    for child in node.iterchildren(tag=etree.Element):
        if child.tag == qn("a:srgbClr"):
            val = child.get("val", "")
            if _HEX_COLOR.match(val):
                return val.upper()
            logger.debug("Invalid sRGB colour %r, using default", val)
        else:
            # scheme, system, preset and HSL colours need the theme
            logger.debug("Unsupported colour <%s>, using default", local_name(child))
    return DEFAULT_COLOR


# --- Paragraphs ---


def parse_paragraph(
    node: etree._Element,
    resolver: Optional[ParagraphPropertyResolver] = None,
    inherited_level: int = 0,
) -> Paragraph:
    """Parse an ``a:p`` element into its runs and resolved properties."""
    resolver = resolver or ParagraphPropertyResolver()
    properties: Optional[ParagraphProperty] = None
    runs = []

    for child in node.iterchildren(tag=etree.Element):
        if child.tag in (qn("a:r"), qn("a:fld")):
            runs.append(parse_run(child))
        elif child.tag == qn("a:pPr"):
            properties = resolver.resolve(child, inherited_level)
        elif child.tag in (qn("a:br"), qn("a:endParaRPr")):
            pass
        else:
            _skip_unknown(child, "paragraph")

    if properties is None:
        properties = resolver.resolve(None, inherited_level)
    return Paragraph(runs=runs, properties=properties)
