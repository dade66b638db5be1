#!/usr/bin/env python3
"""
rmtrackers - strip tracker URLs from BitTorrent metainfo files
Main entry point for the application.
"""

import argparse
import sys
from pathlib import Path
from rmtrackers.common.config import DEFAULT_COMMENT, DEFAULT_CREATED_BY, Config
from rmtrackers.common.errors import RmTrackersError
from rmtrackers.common.logging import config_logging
from rmtrackers.report import report
from rmtrackers.torrent.editor import modify_metadata
from rmtrackers.torrent.metainfo import MetaInfo
from rmtrackers.torrent.storage import save_modified_file, validate_input_file
import logging

VERSION = "1.1.0"

logger = logging.getLogger(__name__)


def remove_trackers(torrent: str | Path, output: str | Path, config: Config) -> tuple[MetaInfo, Path]:
    """
    Load a torrent, strip its trackers and write the result.

    Args:
        torrent: Path to the .torrent file
        output: Output file, or directory to write into
        config: Run configuration

    Returns:
        The modified metainfo and the path it was saved to.
    """
    torrent_path = validate_input_file(torrent)
    metainfo = MetaInfo.load(torrent_path)
    modify_metadata(metainfo, config.created_by, config.comment, config)
    saved_path = save_modified_file(metainfo, torrent_path, output)
    return metainfo, saved_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rmtrackers",
        description="Remove tracker URLs from a .torrent file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --verbose example.torrent
  %(prog)s example.torrent ./modified/example.torrent
  %(prog)s example.torrent ./modified/
        """,
    )

    parser.add_argument(
        "torrent",
        help="Path to the .torrent file",
    )

    parser.add_argument(
        "output",
        nargs="?",
        default=".",
        help="Output file or directory (default: current directory)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s version: {VERSION}",
    )

    parser.add_argument(
        "--created-by",
        default=DEFAULT_CREATED_BY,
        help=f"Value written to 'created by' (default: {DEFAULT_CREATED_BY})",
    )

    parser.add_argument(
        "--comment",
        default=DEFAULT_COMMENT,
        help="Value written to 'comment'",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write JSON logs to this file",
    )

    return parser


def main(argv: list[str] | None = None):
    """Main entry point for rmtrackers."""
    args = build_parser().parse_args(argv)
    config = Config.from_args(args)

    config_logging(config)

    try:
        metainfo, saved_path = remove_trackers(args.torrent, args.output, config)
    except RmTrackersError as e:
        logger.debug("Pipeline failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    report(metainfo, saved_path)


if __name__ == "__main__":
    main()
