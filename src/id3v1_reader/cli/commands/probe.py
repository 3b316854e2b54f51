"""Probe command - Check which files end with an ID3v1 record."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from ...reader import probe
from ..schemas import ErrorResponse, ProbeResponse, ProbeResult
from ..utils import ExitCode, json_output


def cmd_probe(args: argparse.Namespace) -> None:
    """Report whether each file carries an ID3v1 record.

    Args:
        args: Parsed command-line arguments
    """
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)

    results = []
    for path in args.files:
        if not Path(path).is_file():
            message = f"File not found: {path}"
            if use_json:
                json_output(ErrorResponse(error="invalid_input", message=message), ExitCode.INVALID_INPUT)
            logging.error(message)
            sys.exit(ExitCode.INVALID_INPUT)

        try:
            found = probe(path)
        except OSError as e:
            if use_json:
                json_output(
                    ErrorResponse(error="data_error", message=f"Failed to read {path}: {e}"),
                    ExitCode.DATA_ERROR,
                )
            logging.error(f"Failed to read {path}: {e}")
            sys.exit(ExitCode.DATA_ERROR)

        results.append(ProbeResult(path=path, has_id3v1=found))
        if found:
            console.print(f"[green]✓[/green] {path}", soft_wrap=True)
        else:
            console.print(f"[dim]✗ {path}[/dim]", soft_wrap=True)

    if use_json:
        json_output(
            ProbeResponse(files=results, found=sum(r.has_id3v1 for r in results)),
            ExitCode.SUCCESS,
        )
