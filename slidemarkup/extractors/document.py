"""
Build the typed document model from a presentation package.

Construction is two-phase: ``build_outline`` reads only the presentation
part and yields master/slide identities in document order;
``build_master`` / ``build_slide`` parse one referenced part each. ``build``
runs both phases and fails as a whole if any part is malformed or any
relationship id is dangling.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional, Tuple, Type, Union

from lxml import etree
from pptx.opc.constants import RELATIONSHIP_TYPE as RT
from pptx.oxml.ns import qn
from pydantic import ValidationError

from slidemarkup.exceptions import MalformedPart
from slidemarkup.extractors.base import PartSource
from slidemarkup.extractors.paragraphs import (
    ParagraphPropertyResolver,
    local_name,
    parse_paragraph,
)
from slidemarkup.extractors.relationships import RelationshipTable
from slidemarkup.models import (
    BodyProperties,
    Extent,
    LayoutRef,
    Master,
    MasterStub,
    ParagraphProperty,
    Point,
    Presentation,
    PresentationOutline,
    Shape,
    ShapeType,
    Slide,
    SlideStub,
    TextBody,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_TYPES: Dict[str, ShapeType] = {
    "title": ShapeType.TITLE,
    "ctrTitle": ShapeType.TITLE,
    "body": ShapeType.BODY,
    "dt": ShapeType.DATE,
    "ftr": ShapeType.FOOTER,
    "sldNum": ShapeType.SLIDE_NUMBER,
}

# Placeholder sizes that mark a body placeholder (read from `sz` or `size`)
BODY_SIZES = {"half", "quarter", "qtr"}

# Shape tree children that are recognised but not modelled
SKIPPED_SHAPE_TREE_TAGS = frozenset(
    qn(tag)
    for tag in (
        "p:nvGrpSpPr",
        "p:grpSpPr",
        "p:grpSp",
        "p:graphicFrame",
        "p:cxnSp",
        "p:pic",
        "p:contentPart",
        "p:extLst",
    )
)

# (a:bodyPr attribute, BodyProperties field, converter)
_BOOL = "bool"
BODY_PROPERTY_ATTRIBUTES: List[Tuple[str, str, object]] = [
    ("anchor", "anchor", str),
    ("anchorCtr", "anchor_center", _BOOL),
    ("bIns", "bottom_inset", int),
    ("lIns", "left_inset", int),
    ("rIns", "right_inset", int),
    ("tIns", "top_inset", int),
    ("horzOverflow", "horizontal_overflow", str),
    ("vertOverflow", "vertical_overflow", str),
    ("numCol", "column_count", int),
    ("spcCol", "column_spacing", int),
    ("rtlCol", "columns_right_to_left", _BOOL),
    ("rot", "rotation", int),
    ("upright", "upright", _BOOL),
    ("vert", "vertical", str),
    ("wrap", "wrap", str),
    ("fromWordArt", "from_word_art", _BOOL),
    ("forceAA", "force_anti_alias", _BOOL),
    ("compatLnSpc", "compatible_line_spacing", _BOOL),
    ("spcFirstLastPara", "first_last_paragraph_spacing", _BOOL),
]


class DocumentModelBuilder:
    """
    Decode a package into Presentation → Master/Slide → Shape → TextBody.

    Args:
        source: Part source for the package
        max_workers: Slides are built on a thread pool when greater than 1;
            slide order is preserved either way
    """

    def __init__(self, source: PartSource, max_workers: int = 1):
        self.source = source
        self.max_workers = max(1, max_workers)
        self.resolver = ParagraphPropertyResolver()

    # --- Phase one: identities ---

    def build_outline(
        self, presentation: etree._Element, relationships: RelationshipTable
    ) -> PresentationOutline:
        """
        Read master and slide identities from the presentation part.

        Raises:
            UnresolvedRelationship: if an id list entry has no relationship
        """
        outline = PresentationOutline()

        handlers: Dict[str, Callable[[etree._Element], None]] = {
            qn("p:sldMasterIdLst"): lambda node: outline.master_refs.extend(
                self._id_list(node, "p:sldMasterId", MasterStub, RT.SLIDE_MASTER, relationships)
            ),
            qn("p:sldIdLst"): lambda node: outline.slide_refs.extend(
                self._id_list(node, "p:sldId", SlideStub, RT.SLIDE, relationships)
            ),
            # layout and default text styles are out of scope
            qn("p:sldSz"): lambda node: None,
            qn("p:notesSz"): lambda node: None,
            qn("p:defaultTextStyle"): lambda node: None,
        }

        for child in presentation.iterchildren(tag=etree.Element):
            handler = handlers.get(child.tag)
            if handler is None:
                logger.debug("Skipping presentation element <%s>", local_name(child))
                continue
            handler(child)

        logger.info(
            "Presentation outline: %d masters, %d slides",
            len(outline.master_refs),
            len(outline.slide_refs),
        )
        return outline

    def _id_list(
        self,
        node: etree._Element,
        entry_tag: str,
        stub_cls: Type[Union[MasterStub, SlideStub]],
        expected_type: str,
        relationships: RelationshipTable,
    ) -> List[Union[MasterStub, SlideStub]]:
        stubs = []
        for entry in node.iterchildren(qn(entry_tag)):
            rel_id = entry.get(qn("r:id"))
            if rel_id is None:
                raise MalformedPart(relationships.source_part, f"{entry_tag} without r:id")

            relationship = relationships.get(rel_id)
            if relationship.type != expected_type:
                logger.warning(
                    "Relationship %s has type %s, expected %s", rel_id, relationship.type, expected_type
                )
            stubs.append(stub_cls(id=entry.get("id", ""), part_path=relationships.part_path(rel_id)))
        return stubs

    # --- Phase two: content ---

    def build_master(self, stub: MasterStub) -> Master:
        root = self._load_root(stub.part_path, "p:sldMaster")
        relationships = self.source.relationships(stub.part_path)

        layouts = []
        layout_list = root.find(qn("p:sldLayoutIdLst"))
        if layout_list is not None:
            for entry in layout_list.iterchildren(qn("p:sldLayoutId")):
                rel_id = entry.get(qn("r:id"))
                if rel_id is None:
                    continue
                layouts.append(LayoutRef(id=entry.get("id", ""), part_path=relationships.part_path(rel_id)))

        return Master(
            id=stub.id,
            part_path=stub.part_path,
            shapes=self._shape_tree(root, stub.part_path),
            layouts=layouts,
        )

    def build_slide(self, stub: SlideStub) -> Slide:
        root = self._load_root(stub.part_path, "p:sld")
        relationships = self.source.relationships(stub.part_path)

        layout_path = None
        layouts = relationships.by_type(RT.SLIDE_LAYOUT)
        if layouts:
            layout_path = relationships.part_path(layouts[0].id)

        slide = Slide(
            id=stub.id,
            part_path=stub.part_path,
            shapes=self._shape_tree(root, stub.part_path),
            layout_path=layout_path,
        )
        logger.debug("Built slide %s (%d shapes)", stub.part_path, len(slide.shapes))
        return slide

    def build(self) -> Presentation:
        """
        Build the complete document model.

        Raises:
            MalformedPackage: if the package or a required part is unreadable
            UnresolvedRelationship: if a referenced relationship id is missing
        """
        presentation_path = self.source.presentation_part_path()
        relationships = self.source.relationships(presentation_path)
        root = self._load_root(presentation_path, "p:presentation")
        outline = self.build_outline(root, relationships)

        masters = [self.build_master(stub) for stub in outline.master_refs]

        if self.max_workers > 1 and len(outline.slide_refs) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                slides = list(executor.map(self.build_slide, outline.slide_refs))
        else:
            slides = [self.build_slide(stub) for stub in outline.slide_refs]

        logger.info("Built presentation with %d slides", len(slides))
        return Presentation(masters=masters, slides=slides)

    # --- Part structure ---

    def _load_root(self, part_path: str, expected_tag: str) -> etree._Element:
        root = self.source.get_part(part_path)
        if root.tag != qn(expected_tag):
            raise MalformedPart(part_path, f"expected <{expected_tag}>, found <{local_name(root)}>")
        return root

    def _shape_tree(self, root: etree._Element, part_path: str) -> List[Shape]:
        common_slide_data = root.find(qn("p:cSld"))
        if common_slide_data is None:
            raise MalformedPart(part_path, "missing p:cSld")
        shape_tree = common_slide_data.find(qn("p:spTree"))
        if shape_tree is None:
            raise MalformedPart(part_path, "missing p:spTree")

        shapes = []
        for child in shape_tree.iterchildren(tag=etree.Element):
            if child.tag == qn("p:sp"):
                shapes.append(self.build_shape(child))
            elif child.tag not in SKIPPED_SHAPE_TREE_TAGS:
                logger.debug("Skipping shape tree element <%s>", local_name(child))
        return shapes

    def build_shape(self, node: etree._Element) -> Shape:
        values: dict = {}
        text_bodies = []

        for child in node.iterchildren(tag=etree.Element):
            if child.tag == qn("p:nvSpPr"):
                values.update(self._non_visual_properties(child))
            elif child.tag == qn("p:spPr"):
                values.update(self._transform(child))
            elif child.tag == qn("p:txBody"):
                text_bodies.append(self.build_text_body(child))
            elif child.tag not in (qn("p:style"), qn("p:extLst")):
                logger.debug("Skipping shape element <%s>", local_name(child))

        return Shape(text_bodies=text_bodies, **values)

    def _non_visual_properties(self, node: etree._Element) -> dict:
        values: dict = {}

        drawing = node.find(qn("p:cNvPr"))
        if drawing is not None:
            values["shape_id"] = drawing.get("id", "")
            values["name"] = drawing.get("name", "")

        placeholder = node.find(f"{qn('p:nvPr')}/{qn('p:ph')}")
        if placeholder is not None:
            idx = placeholder.get("idx")
            if idx is not None and idx.isdigit():
                values["placeholder_index"] = int(idx)
            if (placeholder.get("sz") or placeholder.get("size")) in BODY_SIZES:
                values["shape_type"] = ShapeType.BODY
            ph_type = PLACEHOLDER_TYPES.get(placeholder.get("type", ""))
            if ph_type is not None:
                values["shape_type"] = ph_type

        return values

    def _transform(self, node: etree._Element) -> dict:
        values: dict = {}
        xfrm = node.find(qn("a:xfrm"))
        if xfrm is None:
            return values

        offset = xfrm.find(qn("a:off"))
        if offset is not None:
            values["position"] = Point(x=_emu(offset.get("x")), y=_emu(offset.get("y")))
        extent = xfrm.find(qn("a:ext"))
        if extent is not None:
            values["extent"] = Extent(cx=_emu(extent.get("cx")), cy=_emu(extent.get("cy")))
        return values

    # --- Text bodies ---

    def build_text_body(self, node: etree._Element) -> TextBody:
        values: dict = {}
        paragraphs = []

        for child in node.iterchildren(tag=etree.Element):
            if child.tag == qn("a:bodyPr"):
                values["body_properties"] = self._body_properties(child)
            elif child.tag == qn("a:lstStyle"):
                values.update(self._list_style(child))
            elif child.tag == qn("a:p"):
                paragraphs.append(parse_paragraph(child, self.resolver))
            else:
                logger.debug("Skipping text body element <%s>", local_name(child))

        return TextBody(paragraphs=paragraphs, **values)

    def _body_properties(self, node: etree._Element) -> BodyProperties:
        values: dict = {}
        for attribute, field, convert in BODY_PROPERTY_ATTRIBUTES:
            raw = node.get(attribute)
            if raw is None:
                continue
            try:
                value = raw in ("1", "true") if convert is _BOOL else convert(raw)
                # checks the field constraints (e.g. numCol 1..16) one attribute at a time
                BodyProperties.model_validate({field: value})
            except (ValueError, ValidationError):
                logger.debug("Ignoring invalid bodyPr@%s=%r", attribute, raw)
                continue
            values[field] = value
        return BodyProperties(**values)

    def _list_style(self, node: etree._Element) -> dict:
        default: Optional[ParagraphProperty] = None
        levels: Dict[int, ParagraphProperty] = {}
        level_tags = {qn(f"a:lvl{n}pPr"): n for n in range(1, 10)}

        for child in node.iterchildren(tag=etree.Element):
            if child.tag == qn("a:defPPr"):
                default = self.resolver.resolve(child)
            elif child.tag in level_tags:
                n = level_tags[child.tag]
                levels[n] = self.resolver.resolve(child, inherited_level=n - 1, base=levels.get(n - 1))
            elif child.tag != qn("a:extLst"):
                logger.debug("Skipping list style element <%s>", local_name(child))

        return {"default_paragraph_property": default, "level_paragraph_properties": levels}


def _emu(value: Optional[str]) -> int:
    if value is None:
        return 0
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        logger.debug("Ignoring invalid EMU value %r", value)
        return 0
