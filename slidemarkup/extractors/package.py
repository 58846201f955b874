"""
Zip-backed part source for ``.pptx`` files.
"""

import io
import logging
import zipfile
from pathlib import Path
from typing import BinaryIO, Union

from lxml import etree

from slidemarkup.exceptions import MalformedPackage, MalformedPart
from slidemarkup.extractors.base import PartSource

logger = logging.getLogger(__name__)

PackageFile = Union[str, Path, bytes, BinaryIO]


def _xml_parser() -> etree.XMLParser:
    # Package parts come from untrusted uploads; lxml parsers are not shared between threads
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
    )


class ZipPartSource(PartSource):
    """
    Read parts from a zipped package.

    Accepts a filesystem path, the raw package bytes, or a binary file
    object. Use as a context manager, or call ``close()``.
    """

    def __init__(self, package: PackageFile):
        if isinstance(package, bytes):
            package = io.BytesIO(package)
        self.name = str(package) if isinstance(package, (str, Path)) else "<stream>"

        try:
            self._zip = zipfile.ZipFile(package)
        except (zipfile.BadZipFile, OSError) as e:
            raise MalformedPackage(f"Not a readable package: {self.name}", cause=e) from e

        self._members = set(self._zip.namelist())
        logger.debug("Opened package %s (%d members)", self.name, len(self._members))

    def has_part(self, part_path: str) -> bool:
        return part_path.lstrip("/") in self._members

    def get_part(self, part_path: str) -> etree._Element:
        member = part_path.lstrip("/")
        if member not in self._members:
            raise MalformedPart(part_path, "part not found in package")

        try:
            data = self._zip.read(member)
        except (zipfile.BadZipFile, OSError, RuntimeError) as e:
            raise MalformedPart(part_path, "cannot read part", cause=e) from e

        try:
            return etree.fromstring(data, parser=_xml_parser())
        except etree.XMLSyntaxError as e:
            raise MalformedPart(part_path, "not well-formed XML", cause=e) from e

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "ZipPartSource":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
