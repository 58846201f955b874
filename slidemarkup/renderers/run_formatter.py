"""
Inline markup for a single text run.
"""

from markupsafe import escape

from slidemarkup.models import TextRun, Underline

UNDERLINE_STYLES = {
    Underline.SINGLE: "text-decoration: underline;",
    Underline.DOUBLE: "text-decoration: underline; text-decoration-style: double;",
}


class RunFormatter:
    """
    Render a TextRun as nested inline tags.

    Nesting is fixed: bold, italics, underline, then the colour span around
    the text. Strikethrough is tracked on the run but not rendered.
    """

    def render(self, run: TextRun) -> str:
        opening = []
        closing = []

        if run.bold:
            opening.append("<strong>")
            closing.append("</strong>")
        if run.italic:
            opening.append("<em>")
            closing.append("</em>")
        if run.underline is not Underline.NONE:
            opening.append(f'<span style="{UNDERLINE_STYLES[run.underline]}">')
            closing.append("</span>")

        text = escape(run.text)
        colored = f'<span style="color: #{run.color};">{text}</span>'

        return "".join(opening) + colored + "".join(reversed(closing))
