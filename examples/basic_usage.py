"""
Basic usage example for SlideMarkup.

This example shows how to convert a .pptx presentation to HTML
using the Python API.
"""

from pathlib import Path
from slidemarkup import ConversionPipeline, ConversionSettings


def main():
    # Initialize pipeline with a standalone page and a bullet stylesheet
    settings = ConversionSettings(
        page_tag="section",  # Wrap each slide in <section>
        full_page=True,  # Emit a complete HTML document
        stylesheet_href="presentation.css",  # Defines the list_style_* classes
        max_workers=4,  # Build slides on 4 threads
    )
    pipeline = ConversionPipeline(settings)

    # Convert the presentation
    pptx_path = Path("examples/sample_deck.pptx")
    output_path = Path("output/sample_deck.html")

    result = pipeline.convert(pptx_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.html, encoding="utf-8")

    print("\n✓ Conversion complete!")
    print(f"  Slides: {result.slide_count}")
    print(f"  HTML: {output_path}")


if __name__ == "__main__":
    main()
