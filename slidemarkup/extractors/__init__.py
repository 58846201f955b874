"""
Package readers that decode a ``.pptx`` into the SlideMarkup document model.

- ZipPartSource: part access for zipped packages
- RelationshipTable: relationship id resolution
- DocumentModelBuilder: presentation → masters/slides → shapes → text
"""

from slidemarkup.extractors.base import PartSource
from slidemarkup.extractors.document import DocumentModelBuilder
from slidemarkup.extractors.package import ZipPartSource
from slidemarkup.extractors.paragraphs import ParagraphPropertyResolver
from slidemarkup.extractors.relationships import RelationshipTable

__all__ = [
    "PartSource",
    "ZipPartSource",
    "RelationshipTable",
    "ParagraphPropertyResolver",
    "DocumentModelBuilder",
]
