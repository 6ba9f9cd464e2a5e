"""wave-gen: write a printable HTML page of Spotify wave codes."""
import argparse
from typing import List, Optional

from wavecodes.cli.common import add_verbose_flag, run_command
from wavecodes.config import DEFAULT_PAGE_OUTPUT
from wavecodes.core.loaders import (
    load_from_json_file,
    load_from_text_file,
    parse_track_list,
    write_page,
)
from wavecodes.core.renderer import render_page
from wavecodes.errors import ParseError, ValidationError
from wavecodes.models.page import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_COLUMNS,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_TITLE,
    PageConfig,
)


# Rendered when no --tracks/--file/--json is given
EXAMPLE_TRACK_IDS = [
    "69Kzq3FMkDwiSFBQzRckFD",
    "3wUMcPzXcmaeW8QxTdyXQO",
    "6LUGvXEAK8WxIBYK43uoTb",
    "0ofHAoxe9vBkTCp2UQIavz",
    "4mn2kNTqiGLwaUR8JdhJ1l",
    "5e9TFTbltYBg2xThimr0rU",
    "7w5AOd6HrDIHewHfpABEss",
    "0oXJQ8CyDcQJXASZiCSNGa",
    "0pUVeEgZuNyFzIMKp67RbS",
    "1FvDJ9KGxcqwv1utyPL3JZ",
    "1cWilR7SC3qyfl6emCvYf0",
    "1YrnDTqvcnUKxAIeXyaEmU",
    "1cHCG42MxckrXNFqyF8Uhr",
    "7n3WO6ESKS1uCI9fgkGs66",
    "2kkvB3RNRzwjFdGhaUA0tz",
    "5QTxFnGygVM4jFQiBovmRo",
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wave-gen",
        description="Generate printable HTML pages with Spotify wave codes",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-t", "--tracks", help="Comma-separated list of Spotify track IDs")
    source.add_argument("-f", "--file", help="Text file with track IDs (one per line)")
    source.add_argument("-j", "--json", help="JSON file with array of track IDs")
    parser.add_argument("-o", "--output", default=DEFAULT_PAGE_OUTPUT, help="Output HTML file path")
    parser.add_argument("--title", default=DEFAULT_TITLE, help="Page title")
    # Numbers are parsed in run() so a bad value exits 1 with an Error: message
    parser.add_argument("-c", "--columns", default=str(DEFAULT_COLUMNS), help="Number of columns in the grid")
    parser.add_argument("-s", "--size", default=str(DEFAULT_IMAGE_SIZE), help="Image size for Spotify codes")
    parser.add_argument("--background", default=DEFAULT_BACKGROUND_COLOR, help="Page background color")
    add_verbose_flag(parser)
    return parser


def parse_count(value: str, name: str) -> int:
    """Unsigned integer flag value: ASCII digits with an optional leading '+'."""
    digits = value[1:] if value.startswith("+") else value
    if not (digits.isascii() and digits.isdigit()):
        raise ParseError(f"Invalid {name}: {value!r}")
    return int(digits)


def load_track_ids(args: argparse.Namespace) -> List[str]:
    if args.tracks is not None:
        return parse_track_list(args.tracks)
    if args.file is not None:
        return load_from_text_file(args.file)
    if args.json is not None:
        return load_from_json_file(args.json)
    print("No input provided, using example track IDs...")
    return list(EXAMPLE_TRACK_IDS)


def run(args: argparse.Namespace) -> None:
    track_ids = load_track_ids(args)
    if not track_ids:
        raise ValidationError("No track IDs provided or found")

    config = PageConfig(
        title=args.title,
        columns=parse_count(args.columns, "columns number"),
        background_color=args.background,
        image_size=parse_count(args.size, "image size"),
    )
    write_page(args.output, render_page(track_ids, config))
    print(
        f"Generated {args.output} with {len(track_ids)} tracks "
        f"in a {config.columns}-column grid"
    )


def main(argv: Optional[List[str]] = None) -> int:
    return run_command(run, build_parser().parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
