"""Read the trailing tags of a file in one call."""

import logging
from typing import Optional

from .apev2 import find_ape_header
from .collector import TagCollector
from .config import Config
from .parser import Id3v1Parser, has_id3v1_header
from .source import ByteSource


def read(filename: str, config: Optional[Config] = None) -> TagCollector:
    """
    Read the ID3v1 record (and a preceding APEv2 tag) of an audio file.

    Args:
        filename: Path to the audio file
        config: Settings to use; defaults to the user's configuration

    Returns:
        TagCollector holding the extracted tags (empty if the file has none)

    Raises:
        FileNotFoundError: If the file doesn't exist
        EOFError: If the file ends inside a tag
        ValueError: If an APEv2 tag is malformed
    """
    if config is None:
        config = Config()

    collector = TagCollector()
    with open(filename, 'rb') as f:
        source = ByteSource(f)
        ape_header = find_ape_header(source) if config.get_parse_ape() else None
        if ape_header is not None:
            logging.info(f"APEv2 tag found in {filename} at offset {ape_header.offset}")

        Id3v1Parser(
            collector,
            source,
            ape_header=ape_header,
            warn_unknown_genre=config.get_warn_unknown_genre(),
        ).parse()

    return collector


def probe(filename: str) -> bool:
    """Return True if the file ends with an ID3v1 record."""
    with open(filename, 'rb') as f:
        return has_id3v1_header(ByteSource(f))
