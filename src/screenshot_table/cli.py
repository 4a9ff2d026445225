"""Command-line interface for screenshot-table."""

import argparse
import logging
import sys
from pathlib import Path

from screenshot_table.converter import Converter
from screenshot_table.exceptions import EmptyInputError, NoImagesFoundError
from screenshot_table.transformers import TableRenderer
from screenshot_table.transformers.table_renderer import (
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_SUMMARY,
)

STDIO_PATH = Path("-")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _read_input(path: Path | None) -> str:
    if path is None or path == STDIO_PATH:
        return sys.stdin.read()
    return path.read_text()


def _write_output(path: Path | None, content: str) -> None:
    if path is None or path == STDIO_PATH:
        sys.stdout.write(content + "\n")
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


def convert_html(args: argparse.Namespace) -> int:
    """Execute the convert command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if args.input is not None and args.input != STDIO_PATH and not args.input.exists():
        logger.error(f"Input file not found: {args.input}")
        return 1

    if args.width <= 0:
        logger.error(f"Image width must be positive: {args.width}")
        return 1

    try:
        logger.info("Reading input...")
        html = _read_input(args.input)

        renderer = TableRenderer(image_width=args.width, summary=args.summary)
        result = Converter(renderer=renderer).convert(html)

        logger.info("Writing result...")
        _write_output(args.output, result.html)

        logger.info("Successfully converted content to table format!")
        logger.info(f"  {result.summary}")
        if args.output is not None and args.output != STDIO_PATH:
            logger.info(f"  Output: {args.output}")

        return 0

    except EmptyInputError as e:
        logger.error(f"No content: {e.message}")
        return 1

    except NoImagesFoundError as e:
        logger.error(f"No images found: {e.message}")
        return 1

    except Exception as e:
        logger.error(f"Failed to convert input: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="screenshot-table",
        description="Turn HTML image tags into a before/after screenshot table",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert HTML with image tags into a screenshot table",
        description="Read HTML containing labelled <img> tags and write a collapsible HTML table grouping before/after screenshots.",
    )
    convert_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="HTML file to read (default: stdin)",
    )
    convert_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="File to write the table to (default: stdout)",
    )
    convert_parser.add_argument(
        "--summary",
        default=DEFAULT_SUMMARY,
        help=f"Text of the collapsible summary (default: {DEFAULT_SUMMARY})",
    )
    convert_parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_IMAGE_WIDTH,
        help=f"Display width of each image (default: {DEFAULT_IMAGE_WIDTH})",
    )
    convert_parser.set_defaults(func=convert_html)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
