"""extract-track-ids: collect unique track IDs from a file of URLs, CSV rows or bare IDs."""
import argparse
from typing import List, Optional

from wavecodes.cli.common import add_verbose_flag, run_command
from wavecodes.config import DEFAULT_EXTRACT_OUTPUT
from wavecodes.core.extractor import extract_ids, finalize_ids
from wavecodes.core.loaders import read_text, write_track_ids

PREVIEW_COUNT = 5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extract-track-ids",
        description="Extract Spotify track IDs from various input formats",
    )
    parser.add_argument("-i", "--input", required=True, help="Input file to process")
    parser.add_argument("-o", "--output", default=DEFAULT_EXTRACT_OUTPUT, help="Output file for track IDs")
    parser.add_argument("-f", "--format", default="mixed", help="Input format: csv, urls, or mixed")
    add_verbose_flag(parser)
    return parser


def run(args: argparse.Namespace) -> None:
    content = read_text(args.input)
    track_ids = finalize_ids(extract_ids(content, args.format))
    write_track_ids(args.output, track_ids)

    print(f"Extracted {len(track_ids)} unique track IDs from {args.input} to {args.output}")
    print("First few track IDs:")
    for i, track_id in enumerate(track_ids[:PREVIEW_COUNT], start=1):
        print(f"  {i}: {track_id}")


def main(argv: Optional[List[str]] = None) -> int:
    return run_command(run, build_parser().parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
