"""Utility functions for CLI operations."""

import json
import logging
import sys
from enum import IntEnum
from typing import Any, NoReturn

from pydantic import BaseModel


class ExitCode(IntEnum):
    """Process exit codes used by all commands."""

    SUCCESS = 0
    ERROR = 1
    INVALID_INPUT = 10
    DATA_ERROR = 20
    INTERRUPTED = 130


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def json_output(data: Any, exit_code: ExitCode = ExitCode.SUCCESS) -> NoReturn:
    """Print data as JSON and exit.

    Args:
        data: A pydantic model or any JSON serializable object
        exit_code: Process exit code
    """
    if isinstance(data, BaseModel):
        print(data.model_dump_json(exclude_none=True, indent=2))
    else:
        print(json.dumps(data, indent=2))
    sys.exit(exit_code)
