"""Show command - Display the trailing tags of audio files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from rich.console import Console
from rich.table import Table

from ...config import Config
from ...reader import read
from ..schemas import ErrorResponse, FileTagsResult, ShowResponse, TagModel
from ..utils import ExitCode, json_output


def _display_value(value) -> str:
    if isinstance(value, bytes):
        return value.hex()
    return value


def cmd_show(args: argparse.Namespace) -> None:
    """Extract and display ID3v1 (and APEv2) tags.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        10: Invalid input (file doesn't exist)
        20: Data error (at least one file could not be read)
    """
    use_json = getattr(args, "json", False)

    # In JSON mode, suppress INFO/DEBUG logs
    if use_json and logging.getLogger().level < logging.WARNING:
        logging.getLogger().setLevel(logging.WARNING)

    console = Console(quiet=use_json)

    missing = [path for path in args.files if not Path(path).is_file()]
    if missing:
        message = f"File not found: {', '.join(missing)}"
        if use_json:
            json_output(ErrorResponse(error="invalid_input", message=message), ExitCode.INVALID_INPUT)
        logging.error(message)
        console.print(f"[red]Error: {message}[/red]")
        sys.exit(ExitCode.INVALID_INPUT)

    config = Config(getattr(args, "config", None))
    if getattr(args, "no_ape", False):
        config.set_parse_ape(False)

    results: List[FileTagsResult] = []
    for path in args.files:
        try:
            collector = read(path, config)
        except (OSError, EOFError, ValueError) as e:
            logging.error(f"Failed to read {path}: {e}")
            results.append(FileTagsResult(path=path, error=str(e)))
            console.print(f"[red]✗ {path}: {e}[/red]")
            continue

        results.append(
            FileTagsResult(
                path=path,
                tags=[
                    TagModel(tag_type=tag.tag_type, key=tag.key, value=_display_value(tag.value))
                    for tag in collector
                ],
                warnings=collector.warnings or None,
            )
        )

        if not collector.has_tags:
            console.print(f"[yellow]No ID3v1 tag found: {path}[/yellow]")
            continue

        table = Table(title=path)
        table.add_column("Type", style="cyan")
        table.add_column("Tag", style="cyan")
        table.add_column("Value", style="magenta")
        for tag in collector:
            table.add_row(tag.tag_type, tag.key, str(_display_value(tag.value)))
        console.print(table)
        for warning in collector.warnings:
            console.print(f"[yellow]Warning: {warning}[/yellow]")

    failed = any(result.error for result in results)
    exit_code = ExitCode.DATA_ERROR if failed else ExitCode.SUCCESS

    if use_json:
        json_output(
            ShowResponse(
                status="completed_with_errors" if failed else "success",
                files=results,
            ),
            exit_code,
        )

    if failed:
        sys.exit(exit_code)
