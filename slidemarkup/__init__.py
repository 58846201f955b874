"""
SlideMarkup: Convert PowerPoint (.pptx) presentations into HTML.

Decodes the package's relationship graph into a typed document model and
renders each slide's text, folding paragraph bullets into nested lists.
"""

__version__ = "0.1.0"
__author__ = "SlideMarkup Team"

from slidemarkup.config import ConversionSettings
from slidemarkup.exceptions import (
    MalformedPackage,
    MalformedPart,
    SlideMarkupError,
    UnresolvedRelationship,
)
from slidemarkup.models import Presentation, Slide, Shape, TextBody, Paragraph, TextRun
from slidemarkup.pipeline import ConversionPipeline, ConversionResult

__all__ = [
    "ConversionPipeline",
    "ConversionResult",
    "ConversionSettings",
    "Presentation",
    "Slide",
    "Shape",
    "TextBody",
    "Paragraph",
    "TextRun",
    "SlideMarkupError",
    "MalformedPackage",
    "MalformedPart",
    "UnresolvedRelationship",
]
