"""
Main orchestration pipeline for SlideMarkup.

Coordinates package reading, document model building, and HTML rendering.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from slidemarkup.config import ConversionSettings
from slidemarkup.extractors.document import DocumentModelBuilder
from slidemarkup.extractors.package import PackageFile, ZipPartSource
from slidemarkup.models import Presentation
from slidemarkup.renderers import HTMLPageGenerator, ParagraphRenderer, PresentationRenderer

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Output of one conversion."""

    presentation: Presentation
    html: str

    @property
    def slide_count(self) -> int:
        return self.presentation.slide_count


class ConversionPipeline:
    """
    End-to-end conversion of a ``.pptx`` package to HTML.

    Pipeline stages:
    1. Open the package and locate the presentation part
    2. Build the document model (all-or-nothing)
    3. Render every slide (and optionally every master)
    4. (Optional) Wrap the result in a standalone HTML page
    """

    def __init__(self, settings: Optional[ConversionSettings] = None):
        self.settings = settings or ConversionSettings()
        self.renderer = PresentationRenderer(
            ParagraphRenderer(explicit_left_alignment=self.settings.explicit_left_alignment)
        )
        self.page_generator = HTMLPageGenerator() if self.settings.full_page else None

    def build(self, package: PackageFile) -> Presentation:
        """
        Build the document model of a package.

        Raises:
            MalformedPackage: if the package or one of its parts is unreadable
            UnresolvedRelationship: if a master or slide reference dangles
        """
        with ZipPartSource(package) as source:
            builder = DocumentModelBuilder(source, max_workers=self.settings.max_workers)
            return builder.build()

    def render(self, presentation: Presentation, title: str = "Presentation") -> str:
        settings = self.settings
        delimiters = dict(
            page_tag=settings.page_tag,
            tag_left_delim=settings.tag_left_delim,
            tag_right_delim=settings.tag_right_delim,
        )

        html = ""
        if settings.include_masters:
            html += self.renderer.render_masters(presentation, **delimiters)
        html += self.renderer.render(presentation, **delimiters)

        if self.page_generator is not None:
            html = self.page_generator.generate(
                html, title=title, stylesheet_href=settings.stylesheet_href
            )
        return html

    def convert(self, package: PackageFile, title: Optional[str] = None) -> ConversionResult:
        """
        Convert a package to HTML.

        Args:
            package: Path, bytes or binary file object of a ``.pptx``
            title: Page title when ``full_page`` is set (default: file stem)

        Returns:
            ConversionResult with the document model and the HTML
        """
        if title is None:
            title = Path(package).stem if isinstance(package, (str, Path)) else "Presentation"

        presentation = self.build(package)
        html = self.render(presentation, title=title)
        logger.info("Converted %d slides (%d characters of HTML)", presentation.slide_count, len(html))
        return ConversionResult(presentation=presentation, html=html)
