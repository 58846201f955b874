"""
Wrap rendered slides into a standalone HTML page.

Bullet glyphs for ordered lists come from the ``list_style_*`` classes, so
the page can link an external stylesheet that defines them.
"""

import logging
from pathlib import Path
from typing import Optional

from jinja2 import Template
from markupsafe import Markup

logger = logging.getLogger(__name__)


class HTMLPageGenerator:
    """Generate a complete HTML document around a rendered presentation."""

    HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="{{ lang }}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    {%- if stylesheet_href %}
    <link type="text/css" href="{{ stylesheet_href }}" rel="stylesheet">
    {%- endif %}
</head>
<body>
{{ body }}
</body>
</html>
"""

    def __init__(self):
        # autoescape covers title and href; the body is already markup
        self.template = Template(self.HTML_TEMPLATE, autoescape=True)

    def generate(
        self,
        body_html: str,
        title: str = "Presentation",
        stylesheet_href: Optional[str] = None,
        lang: str = "en",
        output_path: Optional[Path] = None,
    ) -> str:
        """
        Render the page.

        Args:
            body_html: Rendered slides (trusted markup)
            title: Page title
            stylesheet_href: Optional stylesheet defining the list classes
            lang: Document language
            output_path: If given, the page is also written there

        Returns:
            The page as a string
        """
        page = self.template.render(
            body=Markup(body_html),
            title=title,
            stylesheet_href=stylesheet_href,
            lang=lang,
        )

        if output_path is not None:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(page)
            logger.info("Saved HTML page to %s", output_path)

        return page
