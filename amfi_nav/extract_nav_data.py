"""
One-shot command-line extractor for the AMFI NAV feed.

Usage (from the project root):

    python -m amfi_nav.extract_nav_data            # TSV output (default)
    python -m amfi_nav.extract_nav_data json       # JSON output
    python -m amfi_nav.extract_nav_data --source NAVAll.txt tsv

This will:
1. Validate the requested output format (before touching the network).
2. Download `NAVAll.txt` into a temporary file, or open a local copy.
3. Extract (scheme name, asset value) records.
4. Write `amfi_nav_data.tsv` or `amfi_nav_data.json` and show a short sample.

The temporary download is removed on every exit path.
"""

from __future__ import annotations

import argparse
import sys
from contextlib import nullcontext
from pathlib import Path
from typing import List, Optional

from .config import (
    AMFI_NAV_URL,
    DATA_ROOT,
    DEFAULT_OUTPUT_FORMAT,
    JSON_OUTPUT,
    OUTPUT_FORMATS,
    TSV_OUTPUT,
)
from .console import print_error, print_status, print_warning
from .download_amfi import FeedDownloadError, describe_feed, read_feed_lines, temporary_feed
from .extract_nav import extract_nav_records
from .serialize_nav import format_sample, select_json_formatter, write_json, write_tsv

_EPILOG = f"""\
examples:
  %(prog)s              # Extract to TSV format
  %(prog)s tsv          # Extract to TSV format
  %(prog)s json         # Extract to JSON format

output files:
  {TSV_OUTPUT}   # TSV format output
  {JSON_OUTPUT}  # JSON format output
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amfi-nav",
        description="AMFI NAV Data Extractor: extract scheme name and asset value from the AMFI NAV feed.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "output_format",
        nargs="?",
        default=DEFAULT_OUTPUT_FORMAT,
        choices=OUTPUT_FORMATS,
        help="Output format: 'tsv' (default) or 'json'.",
    )
    parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="Read a local copy of NAVAll.txt instead of downloading it.",
    )
    parser.add_argument("--url", type=str, default=AMFI_NAV_URL, help="Feed URL to download.")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DATA_ROOT,
        help="Directory for the output file.",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Write unindented JSON (skip the pretty-printing step).",
    )
    parser.add_argument("--no-sample", action="store_true", help="Do not print a sample of the output.")
    return parser


def run(args: argparse.Namespace, session=None) -> int:
    """Execute one extraction run for already-validated arguments."""
    print_status("AMFI NAV Data Extractor Starting...")
    print_status(f"Output format: {args.output_format}")
    if args.output_format == "json" and args.compact:
        print_warning("Pretty-printing disabled; writing unindented JSON.")

    if args.source is not None:
        feed_ctx = nullcontext(Path(args.source))
    else:
        feed_ctx = temporary_feed(args.url, session=session)

    with feed_ctx as feed_path:
        if not feed_path.exists():
            raise FileNotFoundError(f"Feed file not found: {feed_path}")
        stats = describe_feed(feed_path)
        print_status(f"File size: {stats.size_bytes} bytes")
        print_status(f"Total lines: {stats.line_count} lines")

        print_status(f"Extracting data to {args.output_format.upper()} format...")
        result = extract_nav_records(read_feed_lines(feed_path))

    print(f"Total records processed: {result.count}", file=sys.stderr, flush=True)

    if args.output_format == "tsv":
        out_path = Path(args.output_dir) / TSV_OUTPUT
        written = write_tsv(result.records, out_path)
        sample_title = "Sample TSV data (first 5 records):"
    else:
        out_path = Path(args.output_dir) / JSON_OUTPUT
        formatter = select_json_formatter(pretty=not args.compact)
        written = write_json(result.records, out_path, formatter=formatter)
        sample_title = "Sample JSON data (first 2 records):"

    print_status(f"{args.output_format.upper()} extraction completed. Records extracted: {written}")
    print_status(f"Output saved to: {out_path}")

    if not args.no_sample:
        print_status(sample_title)
        print(format_sample(result.records, args.output_format), flush=True)

    print_status("Extraction completed successfully!")
    return 0


def main(argv: Optional[List[str]] = None, session=None) -> int:
    """
    Parse arguments and run the extractor.

    Returns the process exit status. Argument errors (including an unknown
    output format) exit with status 2 from argparse before any download;
    `-h/--help` exits with status 0.
    """
    args = build_parser().parse_args(argv)
    try:
        return run(args, session=session)
    except FeedDownloadError as exc:
        print_error(str(exc))
        return 1
    except OSError as exc:
        print_error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
