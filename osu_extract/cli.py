# File: osu_extract/cli.py

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from osu_extract.core.config.settings import settings
from osu_extract.features.song_scanner.service.api import extract_songs

logger = logging.getLogger("osu_extract")

SONGS_PROMPT = "Enter osu songs directory:"
OUTPUT_PROMPT = "Enter output songs directory (will be created if it does not exist):"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osu-extract",
        description="Copy the audio of every osu! beatmap into one folder, named and tagged by title/artist",
    )
    parser.add_argument("songs_dir", nargs="?", help="osu! Songs directory")
    parser.add_argument("output_dir", nargs="?",
                        help=f"Output directory, created if missing (default: {settings.DEFAULT_OUTPUT_DIR})")
    parser.add_argument("--workers", type=int, default=None,
                        help=f"Worker threads (default: {settings.MAX_WORKERS})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-file failures too")
    return parser


def prompt(message: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(message)
    stdout.flush()
    return stdin.readline()


def resolve_directories(songs_dir: Optional[str], output_dir: Optional[str],
                        stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
    """
    Applies the interactive fallback and defaults.
    Both values are prompted for only when neither was given.
    """
    if songs_dir is None and output_dir is None:
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        songs_dir = prompt(SONGS_PROMPT, stdin, stdout)
        output_dir = prompt(OUTPUT_PROMPT, stdin, stdout)

    songs_dir = (songs_dir or "").strip()
    output_dir = (output_dir or "").strip()

    output_path = Path(output_dir) if output_dir else settings.DEFAULT_OUTPUT_DIR
    return Path(songs_dir), output_path


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format=settings.LOG_FORMAT,
        stream=sys.stderr,
    )

    if args.workers is not None and args.workers < 1:
        logger.error("--workers must be at least 1")
        return 2

    songs_path, output_path = resolve_directories(args.songs_dir, args.output_dir)

    # A songs root that isn't a directory aborts right away
    if not songs_path.is_dir():
        logger.error(f"Songs directory does not exist: {songs_path}")
        return 1

    try:
        summary = extract_songs(songs_path, output_path, max_workers=args.workers)
    except OSError as e:
        logger.critical(f"Extraction aborted: {e}")
        return 1

    logger.info(
        f"Done. {summary.extracted}/{summary.beatmaps_found} beatmaps extracted to {output_path}"
        f" ({summary.copy_failed} missing audio, {len(summary.diagnostics)} warnings)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
