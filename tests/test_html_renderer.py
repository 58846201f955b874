"""
Tests for presentation-level rendering and the standalone page.
"""

from slidemarkup.models import (
    Master,
    Paragraph,
    ParagraphProperty,
    Presentation,
    BulletStyle,
    Shape,
    Slide,
    TextBody,
    TextRun,
)
from slidemarkup.renderers import HTMLPageGenerator, PresentationRenderer


def text_shape(*texts: str, style: BulletStyle = BulletStyle.NO_BULLETS) -> Shape:
    paragraphs = [
        Paragraph(runs=[TextRun(text=t)], properties=ParagraphProperty(bullet_style=style)) for t in texts
    ]
    return Shape(text_bodies=[TextBody(paragraphs=paragraphs)])


def span(text: str) -> str:
    return f'<span style="color: #000000;">{text}</span>'


def test_each_slide_is_wrapped():
    presentation = Presentation(
        slides=[
            Slide(id="256", part_path="/ppt/slides/slide1.xml", shapes=[text_shape("a")]),
            Slide(id="257", part_path="/ppt/slides/slide2.xml", shapes=[]),
        ]
    )
    html = PresentationRenderer().render(presentation)
    assert html == f"<div><p>{span('a')}</p></div><div></div>"


def test_custom_page_tag_and_delimiters():
    presentation = Presentation(slides=[Slide(id="1", part_path="/s.xml", shapes=[text_shape("a")])])
    html = PresentationRenderer().render(
        presentation, page_tag="page", tag_left_delim="[", tag_right_delim="]"
    )
    assert html == f"[page]<p>{span('a')}</p>[/page]"


def test_text_bodies_are_folded_independently():
    """An open list in one shape does not continue into the next."""
    slide = Slide(
        id="1",
        part_path="/s.xml",
        shapes=[text_shape("x", style=BulletStyle.BULLETS), text_shape("y", style=BulletStyle.BULLETS)],
    )
    html = PresentationRenderer().render_slide(slide)
    assert html == f"<ul><li>{span('x')}</li><ul><li>{span('y')}</li>"


def test_render_masters():
    presentation = Presentation(
        masters=[Master(id="1", part_path="/ppt/slideMasters/slideMaster1.xml", shapes=[text_shape("m")])]
    )
    renderer = PresentationRenderer()
    assert renderer.render_masters(presentation) == f"<div><p>{span('m')}</p></div>"
    assert renderer.render(presentation) == ""


def test_page_generator(tmp_path):
    generator = HTMLPageGenerator()
    output = tmp_path / "out" / "deck.html"
    page = generator.generate(
        "<div><p>x</p></div>", title="Q&A", stylesheet_href="lists.css", output_path=output
    )

    assert page.startswith("<!DOCTYPE html>")
    assert "<title>Q&amp;A</title>" in page
    assert '<link type="text/css" href="lists.css" rel="stylesheet">' in page
    assert "<div><p>x</p></div>" in page
    assert output.read_text(encoding="utf-8") == page


def test_page_without_stylesheet():
    page = HTMLPageGenerator().generate("<div></div>")
    assert "<link" not in page
    assert '<html lang="en">' in page
