"""CLI command implementations.

Each module in this package implements a specific id3v1 subcommand:
    show.py: Extract and display the trailing tags of audio files
    probe.py: Check which files end with an ID3v1 record
"""

from .show import cmd_show
from .probe import cmd_probe

__all__ = [
    "cmd_show",
    "cmd_probe",
]
