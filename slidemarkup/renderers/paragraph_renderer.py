"""
Paragraph sequence → HTML with bullet continuation.

Paragraphs carry their bullet settings independently, but HTML lists need
one container per run of list items. The renderer folds left to right over
one text body, carrying only the previous paragraph's properties, and
decides per paragraph whether to close a container, open a new one, or
continue the current one.

A list still open after the last paragraph is left open. Sources end their
lists with a trailing paragraph without bullets, which closes them.
"""

from functools import reduce
from typing import Iterable, NamedTuple, Optional

from slidemarkup.bullets import style_class_name
from slidemarkup.models import Alignment, BulletStyle, Paragraph, ParagraphProperty
from slidemarkup.renderers.run_formatter import RunFormatter

CLOSE_ORDERED = "</ol>"
CLOSE_UNORDERED = "</ul>"
OPEN_UNORDERED = "<ul>"


class FoldState(NamedTuple):
    """Accumulator of the paragraph fold."""

    output: str = ""
    previous: Optional[ParagraphProperty] = None


def open_ordered_list(current: ParagraphProperty) -> str:
    markup = "<ol"
    if current.bullet_start_at != 1:
        markup += f' start="{current.bullet_start_at}"'
    markup += f' class="{style_class_name(current.bullet_type)}">'
    return markup


def transition(previous: Optional[ParagraphProperty], current: ParagraphProperty) -> str:
    """
    Markup emitted before ``current``'s own tag, up to and including the
    unterminated ``<p`` / ``<li`` that opens it.
    """
    prev_style = previous.bullet_style if previous is not None else None
    style = current.bullet_style

    if style is BulletStyle.NO_BULLETS:
        if prev_style is BulletStyle.AUTO_NUMBERED:
            return CLOSE_ORDERED + "<p"
        if prev_style is BulletStyle.BULLETS:
            return CLOSE_UNORDERED + "<p"
        return "<p"

    if style is BulletStyle.AUTO_NUMBERED:
        markup = ""
        restarted = (
            prev_style is BulletStyle.AUTO_NUMBERED
            and previous.bullet_start_at != current.bullet_start_at
        )
        if prev_style is BulletStyle.BULLETS:
            markup += CLOSE_UNORDERED
        elif restarted:
            markup += CLOSE_ORDERED

        if prev_style is not BulletStyle.AUTO_NUMBERED or restarted:
            markup += open_ordered_list(current)
        return markup + "<li"

    # BULLETS
    markup = ""
    if prev_style is BulletStyle.AUTO_NUMBERED:
        markup += CLOSE_ORDERED
    if prev_style is not BulletStyle.BULLETS:
        markup += OPEN_UNORDERED
    return markup + "<li"


class ParagraphRenderer:
    """
    Render the paragraphs of one text body.

    Args:
        run_formatter: Formatter for the runs of each paragraph
        explicit_left_alignment: Also emit ``align="left"`` (left is
            otherwise implied)
    """

    def __init__(
        self,
        run_formatter: Optional[RunFormatter] = None,
        explicit_left_alignment: bool = False,
    ):
        self.run_formatter = run_formatter or RunFormatter()
        self.explicit_left_alignment = explicit_left_alignment

    def render(self, paragraphs: Iterable[Paragraph]) -> str:
        return reduce(self.step, paragraphs, FoldState()).output

    def step(self, state: FoldState, paragraph: Paragraph) -> FoldState:
        """Append one paragraph to the accumulated output."""
        current = paragraph.properties

        markup = transition(state.previous, current)
        markup += self.alignment_attribute(current.alignment)
        markup += ">"
        markup += "".join(self.run_formatter.render(run) for run in paragraph.runs)
        markup += "</p>" if current.bullet_style is BulletStyle.NO_BULLETS else "</li>"

        return FoldState(output=state.output + markup, previous=current)

    def alignment_attribute(self, alignment: Alignment) -> str:
        if alignment is Alignment.LEFT and not self.explicit_left_alignment:
            return ""
        return f' align="{alignment.value}"'
