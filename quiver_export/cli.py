"""CLI entry point for the Quiver to Markdown exporter."""

import argparse
import logging
import sys
from pathlib import Path

from quiver_export.converter.index import DEFAULT_INDEX_TITLE, write_indexes
from quiver_export.converter.markdown import MarkdownConverter
from quiver_export.errors import QuiverExportError


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the quiver-export CLI."""
    parser = argparse.ArgumentParser(
        prog="quiver-export",
        description="Export a Quiver library or notebook to Markdown",
    )
    # Optional at the argparse level so a missing path is reported
    # as MissingArgumentError by the converter.
    parser.add_argument(
        "source",
        nargs="?",
        help="Path to a .qvlibrary or .qvnotebook directory",
    )
    parser.add_argument(
        "output",
        nargs="?",
        help="Output directory for Markdown files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (very verbose)",
    )
    parser.add_argument(
        "--no-index",
        action="store_true",
        help="Do not generate README.md table-of-contents files",
    )
    parser.add_argument(
        "--index-title",
        default=DEFAULT_INDEX_TITLE,
        help=f"Title of newly created index files (default: {DEFAULT_INDEX_TITLE})",
    )

    args = parser.parse_args(argv)

    # Configure logging
    if args.debug:
        log_level = logging.DEBUG
    elif args.verbose:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    try:
        converter = MarkdownConverter(args.output)
        created = converter.convert(args.source)

        index_files: list[Path] = []
        if not args.no_index and converter.output_dir.is_dir():
            index_files = write_indexes(converter.output_dir, args.index_title)
    except QuiverExportError as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.debug("Full traceback:", exc_info=True)
        return 1

    # Summary
    print(f"{'=' * 50}")
    print("Export complete:")
    print(f"  Notes written:   {len(created)}")
    print(f"  Index files:     {len(index_files)}")
    print(f"  Output:          {converter.output_dir.resolve()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
