"""
Tests for reading parts out of a zipped package.
"""

import io

import pytest
from pptx.opc.constants import RELATIONSHIP_TYPE as RT

from slidemarkup.exceptions import MalformedPackage, MalformedPart
from slidemarkup.extractors import ZipPartSource


def test_not_a_zip():
    with pytest.raises(MalformedPackage, match="Not a readable package"):
        ZipPartSource(b"definitely not a zip")


def test_missing_file(tmp_path):
    with pytest.raises(MalformedPackage):
        ZipPartSource(tmp_path / "missing.pptx")


def test_sources(tmp_path, sample_deck):
    path = tmp_path / "deck.pptx"
    path.write_bytes(sample_deck)

    for package in (sample_deck, path, str(path), io.BytesIO(sample_deck)):
        with ZipPartSource(package) as source:
            assert source.has_part("/ppt/presentation.xml")
            assert source.has_part("ppt/slides/slide2.xml")
            assert not source.has_part("/ppt/slides/slide3.xml")


def test_get_part_returns_root_element(sample_deck):
    with ZipPartSource(sample_deck) as source:
        root = source.get_part("/ppt/slides/slide1.xml")
    assert root.tag.endswith("}sld")


def test_missing_part(sample_deck):
    with ZipPartSource(sample_deck) as source:
        with pytest.raises(MalformedPart) as exc:
            source.get_part("/ppt/slides/slide9.xml")
    assert exc.value.part_path == "/ppt/slides/slide9.xml"
    assert "not found" in str(exc.value)


def test_malformed_part(pptx):
    parts = pptx.parts([pptx.slide()])
    parts["ppt/slides/slide1.xml"] = "<p:sld"
    with ZipPartSource(pptx.zip(parts)) as source:
        with pytest.raises(MalformedPart, match="not well-formed") as exc:
            source.get_part("/ppt/slides/slide1.xml")
    assert exc.value.cause is not None
    assert "caused by" in str(exc.value)


def test_entities_are_not_expanded(pptx):
    doctype = '<?xml version="1.0"?><!DOCTYPE t [<!ENTITY x "expanded">]><t>&x;</t>'
    parts = pptx.parts([pptx.slide()])
    parts["ppt/custom.xml"] = doctype
    with ZipPartSource(pptx.zip(parts)) as source:
        root = source.get_part("/ppt/custom.xml")
    assert "expanded" not in (root.text or "")


def test_relationships_and_presentation_part(sample_deck):
    with ZipPartSource(sample_deck) as source:
        assert source.presentation_part_path() == "/ppt/presentation.xml"
        table = source.relationships("/ppt/presentation.xml")
        assert len(table) == 3
        assert table.part_path("rId2") == "/ppt/slides/slide1.xml"
        assert len(source.relationships("/ppt/slideLayouts/slideLayout1.xml")) == 0


def test_presentation_part_from_package_relationships(pptx):
    parts = pptx.parts([pptx.slide()])
    parts["_rels/.rels"] = pptx.rels(
        [("rId1", RT.OFFICE_DOCUMENT, "deck/main.xml")]
    )
    with ZipPartSource(pptx.zip(parts)) as source:
        assert source.presentation_part_path() == "/deck/main.xml"
