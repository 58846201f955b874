"""
Core data models for SlideMarkup.

Typed document model decoded from a presentation package: presentation →
masters/slides → shapes → text bodies → paragraphs → runs. The graph is
built once per conversion and treated as read-only afterwards.
"""

from enum import Enum
from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from slidemarkup.bullets import DEFAULT_BULLET_TYPE, BulletType


# --- Enumerations ---


class BulletStyle(str, Enum):
    """How a paragraph is bulleted."""

    NO_BULLETS = "none"
    BULLETS = "bullets"
    AUTO_NUMBERED = "auto_numbered"


class Alignment(str, Enum):
    """Horizontal paragraph alignment (value = HTML ``align`` value)."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class Underline(str, Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


class FillStyle(str, Enum):
    SOLID = "solid"
    NONE = "none"


class ShapeType(str, Enum):
    """Placeholder role of a shape."""

    UNSET = "unset"
    TITLE = "title"
    BODY = "body"
    DATE = "date"
    FOOTER = "footer"
    SLIDE_NUMBER = "slide_number"


class TargetMode(str, Enum):
    INTERNAL = "Internal"
    EXTERNAL = "External"


# --- Package relationships ---


class Relationship(BaseModel):
    """One entry of a relationship part."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str
    target: str
    target_mode: TargetMode = TargetMode.INTERNAL

    @property
    def is_external(self) -> bool:
        return self.target_mode is TargetMode.EXTERNAL


# --- Text ---


DEFAULT_COLOR = "000000"


class TextRun(BaseModel):
    """A run of text sharing one character format."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    language: str = ""
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: Underline = Underline.NONE
    color: str = Field(default=DEFAULT_COLOR, pattern=r"^[0-9A-F]{6}$")
    fill_style: FillStyle = FillStyle.SOLID

    @field_validator("color", mode="before")
    @classmethod
    def normalize_color(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ParagraphProperty(BaseModel):
    """
    Resolved paragraph properties.

    ``bullet_start_at`` and ``bullet_type`` only matter when ``bullet_style``
    is AUTO_NUMBERED. An unspecified property block has no bullets.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(default=0, ge=0, le=8)
    bullet_style: BulletStyle = BulletStyle.NO_BULLETS
    bullet_type: BulletType = DEFAULT_BULLET_TYPE
    bullet_start_at: int = Field(default=1, ge=1)
    alignment: Alignment = Alignment.LEFT


class Paragraph(BaseModel):
    """A paragraph: its runs in order plus its resolved properties."""

    runs: List[TextRun] = Field(default_factory=list)
    properties: ParagraphProperty = Field(default_factory=ParagraphProperty)

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


class BodyProperties(BaseModel):
    """Text body properties (``a:bodyPr``); lengths in EMU, rotation in 60000ths of a degree."""

    anchor: str = "t"
    anchor_center: bool = False
    bottom_inset: int = 45720
    left_inset: int = 91440
    right_inset: int = 91440
    top_inset: int = 45720
    horizontal_overflow: str = "overflow"
    vertical_overflow: str = "overflow"
    column_count: int = Field(default=1, ge=1, le=16)
    column_spacing: int = 0
    columns_right_to_left: bool = False
    rotation: int = 0
    upright: bool = False
    vertical: str = "horz"
    wrap: str = "square"
    from_word_art: bool = False
    force_anti_alias: bool = False
    compatible_line_spacing: bool = False
    first_last_paragraph_spacing: bool = False


class TextBody(BaseModel):
    """Text body of a shape; paragraph order is rendering order."""

    body_properties: BodyProperties = Field(default_factory=BodyProperties)
    default_paragraph_property: Optional[ParagraphProperty] = None
    level_paragraph_properties: Dict[int, ParagraphProperty] = Field(default_factory=dict)
    paragraphs: List[Paragraph] = Field(default_factory=list)

    @field_validator("level_paragraph_properties")
    @classmethod
    def validate_levels(cls, v: Dict[int, ParagraphProperty]) -> Dict[int, ParagraphProperty]:
        for level in v:
            if not 1 <= level <= 9:
                raise ValueError(f"List style level must be 1..9, got {level}")
        return v


# --- Shapes ---


class Point(BaseModel):
    x: int = 0
    y: int = 0


class Extent(BaseModel):
    cx: int = 0
    cy: int = 0


class Shape(BaseModel):
    """A ``p:sp`` shape; position and extent are in EMU."""

    shape_id: str = ""
    name: str = ""
    shape_type: ShapeType = ShapeType.UNSET
    placeholder_index: int = 0
    position: Point = Field(default_factory=Point)
    extent: Extent = Field(default_factory=Extent)
    text_bodies: List[TextBody] = Field(default_factory=list)


# --- Masters and slides ---


class MasterStub(BaseModel):
    """Identity of a slide master before its part is parsed."""

    model_config = ConfigDict(frozen=True)

    id: str
    part_path: str


class SlideStub(BaseModel):
    """Identity of a slide before its part is parsed."""

    model_config = ConfigDict(frozen=True)

    id: str
    part_path: str


class LayoutRef(BaseModel):
    """A slide layout referenced by a master (resolved id only)."""

    model_config = ConfigDict(frozen=True)

    id: str
    part_path: str


class Master(BaseModel):
    id: str
    part_path: str
    shapes: List[Shape] = Field(default_factory=list)
    layouts: List[LayoutRef] = Field(default_factory=list)


class Slide(BaseModel):
    id: str
    part_path: str
    shapes: List[Shape] = Field(default_factory=list)
    layout_path: Optional[str] = None

    def text_bodies(self) -> Iterator[TextBody]:
        """Text bodies in shape order."""
        for shape in self.shapes:
            yield from shape.text_bodies


class PresentationOutline(BaseModel):
    """
    Master and slide identities in document order.

    Produced from the presentation part alone; parts are parsed later.
    """

    master_refs: List[MasterStub] = Field(default_factory=list)
    slide_refs: List[SlideStub] = Field(default_factory=list)


class Presentation(BaseModel):
    """The fully built document model."""

    masters: List[Master] = Field(default_factory=list)
    slides: List[Slide] = Field(default_factory=list)

    @property
    def slide_count(self) -> int:
        return len(self.slides)

    def get_slide(self, index: int) -> Slide:
        return self.slides[index]
