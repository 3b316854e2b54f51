"""ID3v1 Reader.

A Python library and command-line tool for reading the legacy 128-byte
ID3v1 / ID3v1.1 record found at the end of audio files. When an APEv2 tag
sits directly before the record, its items are extracted as well.

Main modules:
    cli: Command-line interface (id3v1 command)
    parser: ID3v1 extraction driver and presence probe
    reader: Open a file and run the whole extraction
    apev2: APEv2 footer detection and tag parsing

Core modules:
    collector: Ordered tag sink
    config: Configuration management
    constants: Record layout and tag names
    genres: ID3v1 genre table
    record: Fixed-width field and record decoding
    source: Random access byte source over a file object
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("id3v1-reader")
except (PackageNotFoundError, ImportError):
    # Package not installed, read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
            __version__ = pyproject_data["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        __version__ = "unknown"

from .collector import TagCollector, NativeTag
from .genres import GENRES, get_genre
from .parser import Id3v1Parser, has_id3v1_header
from .reader import read, probe
from .record import Id3v1Record, decode_field
from .source import ByteSource

__all__ = [
    "ByteSource",
    "GENRES",
    "Id3v1Parser",
    "Id3v1Record",
    "NativeTag",
    "TagCollector",
    "decode_field",
    "get_genre",
    "has_id3v1_header",
    "probe",
    "read",
]
