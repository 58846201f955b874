"""
Advanced usage examples for SlideMarkup.

Shows how to:
- Inspect the document model before rendering
- Render single slides with a custom paragraph renderer
- Wrap fragments in a page yourself
"""

from pathlib import Path
from slidemarkup import ConversionPipeline
from slidemarkup.models import BulletStyle
from slidemarkup.renderers import HTMLPageGenerator, ParagraphRenderer, PresentationRenderer


def example_inspect_model():
    """Walk the document model: slides → shapes → text bodies → paragraphs."""
    print("\n[Example 1] Inspecting the document model")

    presentation = ConversionPipeline().build(Path("examples/sample_deck.pptx"))

    for number, slide in enumerate(presentation.slides, start=1):
        print(f"Slide {number} ({slide.part_path}, layout {slide.layout_path})")
        for shape in slide.shapes:
            print(f"  {shape.name} [{shape.shape_type.value}]")
            for body in shape.text_bodies:
                for paragraph in body.paragraphs:
                    marker = "  " if paragraph.properties.bullet_style is BulletStyle.NO_BULLETS else "• "
                    indent = "  " * paragraph.properties.level
                    print(f"    {indent}{marker}{paragraph.text}")


def example_render_single_slide():
    """Render one slide with explicit left alignment."""
    print("\n[Example 2] Rendering a single slide")

    presentation = ConversionPipeline().build(Path("examples/sample_deck.pptx"))
    renderer = PresentationRenderer(ParagraphRenderer(explicit_left_alignment=True))

    print(renderer.render_slide(presentation.get_slide(0)))


def example_custom_page():
    """Render masters and slides, then write the page with HTMLPageGenerator."""
    print("\n[Example 3] Custom page")

    presentation = ConversionPipeline().build(Path("examples/sample_deck.pptx"))
    renderer = PresentationRenderer()

    body = renderer.render_masters(presentation, page_tag="aside")
    body += renderer.render(presentation, page_tag="article")

    HTMLPageGenerator().generate(
        body,
        title="Sample deck",
        stylesheet_href="presentation.css",
        output_path=Path("output/sample_deck_custom.html"),
    )
    print("✓ Saved output/sample_deck_custom.html")


if __name__ == "__main__":
    print("SlideMarkup - Advanced Examples")
    print("=" * 50)

    example_inspect_model()
    example_render_single_slide()
    example_custom_page()

    print("\n" + "=" * 50)
    print("All examples complete!")
