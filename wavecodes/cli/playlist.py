"""get-song-ids: save the track IDs of a Spotify playlist to the input directory."""
import argparse
from typing import List, Optional

from wavecodes.cli.common import add_verbose_flag, run_command
from wavecodes.config import (
    DEFAULT_PLAYLIST_OUTPUT,
    SPOTIFY_CLIENT_ID,
    SPOTIFY_CLIENT_SECRET,
    ensure_input_dir,
)
from wavecodes.core.loaders import write_track_ids
from wavecodes.core.playlist_fetcher import PlaylistFetcher, extract_playlist_id
from wavecodes.errors import ValidationError

PREVIEW_COUNT = 5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="get-song-ids",
        description="Extract track IDs from Spotify playlist URLs",
    )
    parser.add_argument("-u", "--url", required=True, help="Spotify playlist URL")
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_PLAYLIST_OUTPUT,
        help="Output text file for track IDs (saved in the input/ folder)",
    )
    # Credentials fall back to SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET from env or .env
    parser.add_argument(
        "--client-id", default=SPOTIFY_CLIENT_ID, required=not SPOTIFY_CLIENT_ID,
        help="Spotify Client ID",
    )
    parser.add_argument(
        "--client-secret", default=SPOTIFY_CLIENT_SECRET, required=not SPOTIFY_CLIENT_SECRET,
        help="Spotify Client Secret",
    )
    add_verbose_flag(parser)
    return parser


def run(args: argparse.Namespace) -> None:
    playlist_id = extract_playlist_id(args.url)
    print(f"Extracted playlist ID: {playlist_id}")

    fetcher = PlaylistFetcher(args.client_id, args.client_secret)
    fetcher.authenticate()
    print("Successfully authenticated with Spotify API")

    track_ids = fetcher.fetch_track_ids(playlist_id)
    if not track_ids:
        raise ValidationError("No tracks found in playlist")
    print(f"Found {len(track_ids)} tracks in playlist")

    output_path = ensure_input_dir() / args.output
    write_track_ids(output_path, track_ids)
    print(f"Saved track IDs to {output_path}")

    print("\nFirst few track IDs:")
    for i, track_id in enumerate(track_ids[:PREVIEW_COUNT], start=1):
        print(f"  {i}: {track_id}")
    print("\nNow you can generate HTML with:")
    print(f'wave-gen --file {output_path} --title "My Playlist"')


def main(argv: Optional[List[str]] = None) -> int:
    return run_command(run, build_parser().parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
