"""
Part source interface.

The document builder never opens files itself; it is handed a PartSource
that can return any part of the package as a parsed element tree.
"""

import logging
from abc import ABC, abstractmethod

from lxml import etree
from pptx.opc.constants import RELATIONSHIP_TYPE as RT
from pptx.opc.packuri import PACKAGE_URI, PackURI

from slidemarkup.extractors.relationships import RelationshipTable

logger = logging.getLogger(__name__)

DEFAULT_PRESENTATION_PART = "/ppt/presentation.xml"


class PartSource(ABC):
    """Abstract access to the parts of one package."""

    @abstractmethod
    def get_part(self, part_path: str) -> etree._Element:
        """
        Return the root element of a part.

        Args:
            part_path: Absolute pack URI, e.g. ``/ppt/slides/slide1.xml``

        Raises:
            MalformedPart: if the part is missing or not well-formed XML
        """
        pass

    @abstractmethod
    def has_part(self, part_path: str) -> bool:
        pass

    def relationships(self, part_path: str = PACKAGE_URI) -> RelationshipTable:
        """Relationship table of ``part_path`` (empty if it has no relationship part)."""
        rels_path = PackURI(part_path).rels_uri
        if not self.has_part(rels_path):
            return RelationshipTable.load(None, part_path)
        return RelationshipTable.load(self.get_part(rels_path), part_path)

    def presentation_part_path(self) -> str:
        """Locate the presentation part through the package relationships."""
        documents = self.relationships(PACKAGE_URI).by_type(RT.OFFICE_DOCUMENT)
        if documents:
            return PackURI.from_rel_ref(PACKAGE_URI, documents[0].target)

        logger.debug("No officeDocument relationship, assuming %s", DEFAULT_PRESENTATION_PART)
        return DEFAULT_PRESENTATION_PART
