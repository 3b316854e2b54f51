"""Command-line interface for ID3v1 Reader (id3v1).

This package provides the 'id3v1' command-line tool with two subcommands:
    show: Extract and display the trailing tags of audio files
    probe: Check which files end with an ID3v1 record

Modules:
    commands/: Command implementations
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from ..config import Config
from .utils import ExitCode, setup_logging
from .commands import cmd_show, cmd_probe

__all__ = [
    "main",
    "cmd_show",
    "cmd_probe",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        help="Set logging level (default: from config, disabled otherwise)",
    )
    parent_parser.add_argument("-c", "--config", help="Path to configuration file")

    parser = argparse.ArgumentParser(
        prog="id3v1",
        usage="id3v1 <command> [options]",
        description="ID3v1 Reader - Extract legacy ID3v1 tags from the end of audio files",
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # show
    # ──────────────────────────────
    show_parser = subparsers.add_parser(
        "show",
        help="Show the ID3v1 tags of audio files",
        usage="id3v1 show <files> [options]",
        description="Read the ID3v1 record (and a preceding APEv2 tag) of each file",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    show_parser.add_argument("files", nargs="+", help="Audio files to read")
    show_parser.add_argument("--json", action="store_true", help="Output results as JSON")
    show_parser.add_argument(
        "--no-ape",
        action="store_true",
        help="Ignore an APEv2 tag in front of the ID3v1 record",
    )
    show_parser.set_defaults(func=cmd_show)

    # ──────────────────────────────
    # probe
    # ──────────────────────────────
    probe_parser = subparsers.add_parser(
        "probe",
        help="Check which files end with an ID3v1 record",
        usage="id3v1 probe <files> [options]",
        description="Check the last 128 bytes of each file for the 'TAG' signature",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    probe_parser.add_argument("files", nargs="+", help="Audio files to check")
    probe_parser.add_argument("--json", action="store_true", help="Output results as JSON")
    probe_parser.set_defaults(func=cmd_probe)

    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(ExitCode.ERROR)

    # Logging setup
    log_level = args.log_level
    if not log_level:
        config = Config(args.config)
        log_level = config.get_log_level()
    try:
        setup_logging(log_level)
    except ValueError as e:
        parser.error(str(e))

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(ExitCode.INTERRUPTED)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=log_level == "debug")
        sys.exit(ExitCode.ERROR)


if __name__ == "__main__":
    main()
