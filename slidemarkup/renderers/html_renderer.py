"""
Render a built Presentation as HTML fragments, one wrapped block per slide.
"""

import logging
from typing import Iterable, Optional

from slidemarkup.models import Master, Presentation, Shape, Slide, TextBody
from slidemarkup.renderers.paragraph_renderer import ParagraphRenderer

logger = logging.getLogger(__name__)


class PresentationRenderer:
    """
    Turn the document model into HTML.

    Each text body is folded on its own, so bodies, shapes and slides can be
    rendered in any order without changing the output.
    """

    def __init__(self, paragraph_renderer: Optional[ParagraphRenderer] = None):
        self.paragraph_renderer = paragraph_renderer or ParagraphRenderer()

    def render(
        self,
        presentation: Presentation,
        page_tag: str = "div",
        tag_left_delim: str = "<",
        tag_right_delim: str = ">",
    ) -> str:
        """
        Render all slides in slide-list order.

        Args:
            presentation: Built document model
            page_tag: Tag wrapping each slide
            tag_left_delim: Left delimiter of the page tag
            tag_right_delim: Right delimiter of the page tag

        Returns:
            ``{left}{tag}{right}{slide}{left}/{tag}{right}`` for every slide
        """
        logger.debug("Rendering %d slides", len(presentation.slides))
        return self._wrap_pages(
            (self.render_slide(slide) for slide in presentation.slides),
            page_tag,
            tag_left_delim,
            tag_right_delim,
        )

    def render_masters(
        self,
        presentation: Presentation,
        page_tag: str = "div",
        tag_left_delim: str = "<",
        tag_right_delim: str = ">",
    ) -> str:
        """Render the masters' placeholder text the same way as slides."""
        return self._wrap_pages(
            (self.render_shapes(master.shapes) for master in presentation.masters),
            page_tag,
            tag_left_delim,
            tag_right_delim,
        )

    def render_slide(self, slide: Slide) -> str:
        return self.render_shapes(slide.shapes)

    def render_master(self, master: Master) -> str:
        return self.render_shapes(master.shapes)

    def render_shapes(self, shapes: Iterable[Shape]) -> str:
        return "".join(
            self.render_text_body(body) for shape in shapes for body in shape.text_bodies
        )

    def render_text_body(self, text_body: TextBody) -> str:
        return self.paragraph_renderer.render(text_body.paragraphs)

    @staticmethod
    def _wrap_pages(fragments: Iterable[str], tag: str, left: str, right: str) -> str:
        open_tag = f"{left}{tag}{right}"
        close_tag = f"{left}/{tag}{right}"
        return "".join(f"{open_tag}{fragment}{close_tag}" for fragment in fragments)
