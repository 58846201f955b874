"""
Shared fixtures: in-memory .pptx packages built from XML snippets.
"""

import io
import zipfile
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

NS_P = "http://schemas.openxmlformats.org/presentationml/2006/main"
NS_A = "http://schemas.openxmlformats.org/drawingml/2006/main"
NS_R = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
NS_PR = "http://schemas.openxmlformats.org/package/2006/relationships"

NSDECLS = f'xmlns:a="{NS_A}" xmlns:p="{NS_P}" xmlns:r="{NS_R}"'

RT_BASE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/"
RT_OFFICE_DOCUMENT = RT_BASE + "officeDocument"
RT_SLIDE = RT_BASE + "slide"
RT_SLIDE_MASTER = RT_BASE + "slideMaster"
RT_SLIDE_LAYOUT = RT_BASE + "slideLayout"

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
    '<Default Extension="xml" ContentType="application/xml"/>'
    "</Types>"
)


class PackageFactory:
    """Builders for the XML parts of a minimal presentation package."""

    @staticmethod
    def rels(relationships: Sequence[Tuple[str, str, str]]) -> str:
        entries = "".join(
            f'<Relationship Id="{rel_id}" Type="{rel_type}" Target="{target}"/>'
            for rel_id, rel_type, target in relationships
        )
        return (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            f'<Relationships xmlns="{NS_PR}">{entries}</Relationships>'
        )

    @staticmethod
    def run(text: str, rpr: str = "") -> str:
        return f"<a:r>{rpr}<a:t>{text}</a:t></a:r>"

    @classmethod
    def paragraph(cls, text: str = "", ppr: str = "", rpr: str = "") -> str:
        runs = cls.run(text, rpr) if text else ""
        return f"<a:p>{ppr}{runs}</a:p>"

    @staticmethod
    def shape(
        paragraphs: str,
        shape_id: str = "2",
        name: str = "Title 1",
        placeholder: str = "",
        offset: Tuple[int, int] = (838200, 365125),
        extent: Tuple[int, int] = (10515600, 1325563),
        body_pr: str = "<a:bodyPr/>",
        list_style: str = "<a:lstStyle/>",
    ) -> str:
        return (
            "<p:sp>"
            f'<p:nvSpPr><p:cNvPr id="{shape_id}" name="{name}"/><p:cNvSpPr/>'
            f"<p:nvPr>{placeholder}</p:nvPr></p:nvSpPr>"
            f'<p:spPr><a:xfrm><a:off x="{offset[0]}" y="{offset[1]}"/>'
            f'<a:ext cx="{extent[0]}" cy="{extent[1]}"/></a:xfrm></p:spPr>'
            f"<p:txBody>{body_pr}{list_style}{paragraphs}</p:txBody>"
            "</p:sp>"
        )

    @staticmethod
    def slide(shapes: str = "", root: str = "p:sld", extra: str = "") -> str:
        return (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            f"<{root} {NSDECLS}><p:cSld><p:spTree>"
            '<p:nvGrpSpPr><p:cNvPr id="1" name=""/><p:cNvGrpSpPr/><p:nvPr/></p:nvGrpSpPr>'
            "<p:grpSpPr/>"
            f"{shapes}</p:spTree></p:cSld>{extra}</{root}>"
        )

    @classmethod
    def master(cls, shapes: str = "", layout_rids: Sequence[str] = ("rId1",)) -> str:
        entries = "".join(
            f'<p:sldLayoutId id="{2147483649 + i}" r:id="{rid}"/>' for i, rid in enumerate(layout_rids)
        )
        return cls.slide(
            shapes,
            root="p:sldMaster",
            extra=f'<p:clrMap bg1="lt1"/><p:sldLayoutIdLst>{entries}</p:sldLayoutIdLst>',
        )

    @staticmethod
    def presentation(
        slide_entries: Sequence[Tuple[str, str]],
        master_entries: Sequence[Tuple[str, str]] = (("2147483648", "rId1"),),
    ) -> str:
        masters = "".join(f'<p:sldMasterId id="{i}" r:id="{rid}"/>' for i, rid in master_entries)
        slides = "".join(f'<p:sldId id="{i}" r:id="{rid}"/>' for i, rid in slide_entries)
        return (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            f"<p:presentation {NSDECLS}>"
            f"<p:sldMasterIdLst>{masters}</p:sldMasterIdLst>"
            f"<p:sldIdLst>{slides}</p:sldIdLst>"
            '<p:sldSz cx="12192000" cy="6858000"/><p:notesSz cx="6858000" cy="9144000"/>'
            "<p:defaultTextStyle/>"
            "</p:presentation>"
        )

    @staticmethod
    def zip(parts: Dict[str, str]) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
            for name, content in parts.items():
                zf.writestr(name, content)
        return buffer.getvalue()

    def parts(
        self,
        slides: List[str],
        master: Optional[str] = None,
        presentation: Optional[str] = None,
        presentation_rels: Optional[str] = None,
    ) -> Dict[str, str]:
        """
        Parts of a package with one master and ``slides`` in order.

        Slide n (1-based) is ``ppt/slides/slide{n}.xml`` behind ``rId{n + 1}``.
        """
        rels = [("rId1", RT_SLIDE_MASTER, "slideMasters/slideMaster1.xml")]
        rels += [(f"rId{n + 1}", RT_SLIDE, f"slides/slide{n}.xml") for n in range(1, len(slides) + 1)]
        entries = [(str(255 + n), f"rId{n + 1}") for n in range(1, len(slides) + 1)]

        parts = {
            "[Content_Types].xml": CONTENT_TYPES,
            "_rels/.rels": self.rels([("rId1", RT_OFFICE_DOCUMENT, "ppt/presentation.xml")]),
            "ppt/presentation.xml": presentation or self.presentation(entries),
            "ppt/_rels/presentation.xml.rels": presentation_rels or self.rels(rels),
            "ppt/slideMasters/slideMaster1.xml": master or self.master(),
            "ppt/slideMasters/_rels/slideMaster1.xml.rels": self.rels(
                [("rId1", RT_SLIDE_LAYOUT, "../slideLayouts/slideLayout1.xml")]
            ),
        }
        for n, slide in enumerate(slides, start=1):
            parts[f"ppt/slides/slide{n}.xml"] = slide
            parts[f"ppt/slides/_rels/slide{n}.xml.rels"] = self.rels(
                [("rId1", RT_SLIDE_LAYOUT, "../slideLayouts/slideLayout1.xml")]
            )
        return parts

    def build(self, slides: List[str], **kwargs) -> bytes:
        return self.zip(self.parts(slides, **kwargs))


@pytest.fixture
def pptx() -> PackageFactory:
    return PackageFactory()


@pytest.fixture
def sample_deck(pptx: PackageFactory) -> bytes:
    """Two slides: a title slide and a numbered list closed by a plain paragraph."""
    title = pptx.shape(
        pptx.paragraph("Quarterly Review", ppr='<a:pPr algn="ctr"/>', rpr='<a:rPr lang="en-US" b="1"/>'),
        placeholder='<p:ph type="title"/>',
    )
    agenda = pptx.shape(
        pptx.paragraph("Agenda")
        + pptx.paragraph("Revenue", ppr='<a:pPr><a:buAutoNum type="arabicPeriod"/></a:pPr>')
        + pptx.paragraph("Costs", ppr='<a:pPr><a:buAutoNum type="arabicPeriod"/></a:pPr>')
        + pptx.paragraph(""),
        shape_id="3",
        name="Content Placeholder 2",
        placeholder='<p:ph idx="1"/>',
    )
    return pptx.build([pptx.slide(title), pptx.slide(agenda)])
