"""
Relationship parts (``_rels/*.rels``).

Every cross-part reference in a package goes through a relationship id. A
RelationshipTable is loaded from one relationship part and resolves ids of
the part that owns it.
"""

import logging
from typing import Dict, Iterator, List, Optional

from lxml import etree
from pptx.opc.constants import RELATIONSHIP_TARGET_MODE as RTM
from pptx.opc.packuri import PACKAGE_URI, PackURI
from pptx.oxml.ns import qn

from slidemarkup.exceptions import UnresolvedRelationship
from slidemarkup.models import Relationship, TargetMode

logger = logging.getLogger(__name__)


class RelationshipTable:
    """Relationships of one source part, keyed by id."""

    def __init__(self, source_part: str = PACKAGE_URI):
        self.source_part = PackURI(source_part)
        self._relationships: Dict[str, Relationship] = {}

    @classmethod
    def load(
        cls, element: Optional[etree._Element], source_part: str = PACKAGE_URI
    ) -> "RelationshipTable":
        """
        Build a table from a parsed ``Relationships`` element.

        Duplicate ids overwrite earlier entries. ``None`` gives an empty table
        (a part without a relationship part).
        """
        table = cls(source_part)
        if element is None:
            return table

        for rel in element.iterchildren(qn("pr:Relationship")):
            rel_id = rel.get("Id")
            if not rel_id:
                logger.debug("Skipping relationship without Id in %s", source_part)
                continue
            mode = TargetMode.EXTERNAL if rel.get("TargetMode") == RTM.EXTERNAL else TargetMode.INTERNAL
            table.add(
                Relationship(
                    id=rel_id,
                    type=rel.get("Type", ""),
                    target=rel.get("Target", ""),
                    target_mode=mode,
                )
            )
        return table

    def add(self, relationship: Relationship) -> None:
        if relationship.id in self._relationships:
            logger.debug("Duplicate relationship id %s in %s", relationship.id, self.source_part)
        self._relationships[relationship.id] = relationship

    def get(self, rel_id: str) -> Relationship:
        try:
            return self._relationships[rel_id]
        except KeyError:
            raise UnresolvedRelationship(rel_id, self.source_part) from None

    def resolve(self, rel_id: str) -> str:
        """Target of ``rel_id`` exactly as written in the relationship part."""
        return self.get(rel_id).target

    def part_path(self, rel_id: str) -> str:
        """
        Absolute pack URI of the part ``rel_id`` points to.

        Internal targets are relative to the source part's directory; external
        targets are returned unchanged.
        """
        relationship = self.get(rel_id)
        if relationship.is_external:
            return relationship.target
        return PackURI.from_rel_ref(self.source_part.baseURI, relationship.target)

    def by_type(self, reltype: str) -> List[Relationship]:
        return [rel for rel in self._relationships.values() if rel.type == reltype]

    def __contains__(self, rel_id: object) -> bool:
        return rel_id in self._relationships

    def __len__(self) -> int:
        return len(self._relationships)

    def __iter__(self) -> Iterator[Relationship]:
        return iter(self._relationships.values())
