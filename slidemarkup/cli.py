"""
Command-line interface for SlideMarkup.
"""

import sys
import logging
import argparse
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from slidemarkup import __version__
from slidemarkup.config import ConversionSettings
from slidemarkup.exceptions import SlideMarkupError
from slidemarkup.pipeline import ConversionPipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slidemarkup",
        description="SlideMarkup: Convert PowerPoint (.pptx) presentations into HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the slides as HTML fragments
  slidemarkup deck.pptx

  # Write a complete page that links a bullet stylesheet
  slidemarkup deck.pptx --full-page --stylesheet presentation.css -o deck.html

  # Wrap slides in <section> and build slides on 4 threads
  slidemarkup deck.pptx --page-tag section --workers 4

Environment Variables:
  SLIDEMARKUP_PAGE_TAG          Default page tag
  SLIDEMARKUP_STYLESHEET_HREF   Default stylesheet for --full-page
  SLIDEMARKUP_MAX_WORKERS       Default number of build threads
        """,
    )

    parser.add_argument("input", nargs="?", type=Path, help="Input .pptx file")
    parser.add_argument("--version", action="version", version=f"SlideMarkup {__version__}")
    parser.add_argument("--output", "-o", type=Path, help="Output HTML file (default: stdout)")
    parser.add_argument("--page-tag", help="Tag wrapping each slide (default: div)")
    parser.add_argument("--full-page", action="store_true", help="Emit a complete HTML document")
    parser.add_argument("--stylesheet", help="Stylesheet href for --full-page")
    parser.add_argument("--include-masters", action="store_true", help="Render slide masters first")
    parser.add_argument(
        "--explicit-left", action="store_true", help='Emit align="left" on left-aligned paragraphs'
    )
    parser.add_argument("--workers", type=int, help="Threads used to build slides")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    load_dotenv()  # Load .env file if present

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate input
    if not args.input:
        parser.print_help()
        return 1

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        settings = ConversionSettings.from_env(
            page_tag=args.page_tag,
            stylesheet_href=args.stylesheet,
            max_workers=args.workers,
            full_page=args.full_page or None,
            include_masters=args.include_masters or None,
            explicit_left_alignment=args.explicit_left or None,
        )
    except ValidationError as e:
        print(f"Error: Invalid settings: {e}", file=sys.stderr)
        return 1

    try:
        result = ConversionPipeline(settings).convert(args.input)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130
    except SlideMarkupError as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(result.html)
        print(f"✓ Converted {result.slide_count} slides to {args.output}")
    else:
        sys.stdout.write(result.html)
        sys.stdout.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
