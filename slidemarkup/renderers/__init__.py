"""
HTML renderers for the presentation document model.

Run formatting, the paragraph/bullet fold, per-slide wrapping, and the
optional standalone page built with jinja2.
"""

from slidemarkup.renderers.html_renderer import PresentationRenderer
from slidemarkup.renderers.page import HTMLPageGenerator
from slidemarkup.renderers.paragraph_renderer import ParagraphRenderer
from slidemarkup.renderers.run_formatter import RunFormatter

__all__ = ["PresentationRenderer", "ParagraphRenderer", "RunFormatter", "HTMLPageGenerator"]
