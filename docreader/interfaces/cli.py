from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path
from typing import Optional, Sequence

from ..config import Settings, get_settings
from ..logging import configure_logging
from ..services import AssetNotFoundError, AssetResolver
from ..utils import read_csv, read_file_lines, read_file_text, read_pages


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docreader",
        description="Read text and CSV assets and paginate text for dialogue boxes.",
    )
    parser.add_argument(
        "--data-dir",
        help="Writable data directory searched after the exact path (default: DOCREADER_DATA_DIR).",
    )
    parser.add_argument(
        "--assets-dir",
        help="Bundled assets directory searched after the data directory (default: DOCREADER_ASSETS_DIR).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output, including each lookup location tried.",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    text_parser = subparsers.add_parser("text", help="Print the full content of an asset")
    text_parser.add_argument("name", help="File path or asset name")

    lines_parser = subparsers.add_parser("lines", help="Print the non-empty lines of an asset")
    lines_parser.add_argument("name", help="File path or asset name")

    csv_parser = subparsers.add_parser("csv", help="Print the rows of a delimited asset")
    csv_parser.add_argument("name", help="File path or asset name")
    csv_parser.add_argument(
        "--delimiter",
        default=",",
        help="Single field delimiter character (default: ',').",
    )

    pages_parser = subparsers.add_parser("pages", help="Paginate an asset into dialogue pages")
    pages_parser.add_argument("name", help="File path or asset name")
    pages_parser.add_argument(
        "--max-chars",
        type=int,
        help="Maximum characters per page (default: DOCREADER_PAGE_SIZE, 120).",
    )

    return parser.parse_args(args=argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = _apply_overrides(get_settings(), args)

    configure_logging(log_dir=settings.log_dir, verbose=args.verbose)
    logger = logging.getLogger("docreader")

    resolver = AssetResolver.from_settings(settings)

    try:
        if args.command == "text":
            print(read_file_text(args.name, resolver=resolver))
        elif args.command == "lines":
            for line in read_file_lines(args.name, resolver=resolver):
                print(line)
        elif args.command == "csv":
            for row in read_csv(args.name, args.delimiter, resolver=resolver):
                print("\t".join(row))
        elif args.command == "pages":
            max_chars = args.max_chars if args.max_chars is not None else settings.page_size
            _print_pages(read_pages(args.name, max_chars, resolver=resolver))
        else:
            raise ValueError(f"Unknown command: {args.command}")
    except AssetNotFoundError as exc:
        logger.error("%s (tried: %s)", exc, ", ".join(exc.tried) or "nothing")
        return 1

    return 0


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.data_dir:
        overrides["data_dir"] = Path(args.data_dir).expanduser()
    if args.assets_dir:
        overrides["assets_dir"] = Path(args.assets_dir).expanduser()
    return dataclasses.replace(settings, **overrides) if overrides else settings


def _print_pages(pages: Sequence[str]) -> None:
    total = len(pages)
    for number, page in enumerate(pages, start=1):
        print(f"--- page {number}/{total} ---")
        print(page)


__all__ = ["main", "parse_args"]
