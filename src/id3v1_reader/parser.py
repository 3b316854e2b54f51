"""ID3v1 extraction driver and presence probe.

Spec: http://id3.org/ID3v1
Wiki: https://en.wikipedia.org/wiki/ID3
"""

import logging
from typing import Optional

from .apev2 import ApeHeader, ApeTagParser
from .constants import ENCODING, RECORD_SIZE, SIGNATURE, SIGNATURE_LENGTH, TAG_ORDER, TAG_TYPE
from .genres import get_genre
from .record import Id3v1Record


class Id3v1Parser:
    """Extracts the ID3v1 record at the end of a byte source.

    If an APEv2 tag was detected right in front of the record, it is parsed
    first; both tags end up in the collector.
    """

    def __init__(self, collector, source, ape_header: Optional[ApeHeader] = None,
                 warn_unknown_genre: bool = True):
        self.collector = collector
        self.source = source
        self.ape_header = ape_header
        self.warn_unknown_genre = warn_unknown_genre

    def parse(self) -> None:
        if not self.source.size:
            logging.debug("Skip checking for ID3v1 because the file-size is unknown")
            return

        if self.ape_header:
            self.source.skip(self.ape_header.offset - self.source.position)
            ApeTagParser(self.collector, self.source).parse_tags(self.ape_header.footer)

        offset = self.source.size - RECORD_SIZE
        if self.source.position > offset:
            logging.debug("Already consumed the last 128 bytes")
            return

        record = Id3v1Record.from_bytes(self.source.read_bytes(RECORD_SIZE, offset))
        if record is None:
            logging.debug(f"ID3v1 header not found at: pos={offset}")
            return

        logging.debug(f"ID3v1 header found at: pos={offset}")
        for key in TAG_ORDER:
            value = getattr(record, key)
            # A track of 0 means the record carries no track number
            if value:
                self.collector.add_tag(TAG_TYPE, key, value)

        genre = get_genre(record.genre)
        if genre:
            self.collector.add_tag(TAG_TYPE, 'genre', genre)
        elif self.warn_unknown_genre:
            self.collector.add_warning(f"Unknown ID3v1 genre code: {record.genre}")


def has_id3v1_header(source) -> bool:
    """Check whether the source ends with an ID3v1 record.

    The source position is the same afterwards, whatever the outcome.
    """
    if source.size is None or source.size < RECORD_SIZE or not source.seekable:
        return False

    with source.saved_position():
        tag = source.read_bytes(SIGNATURE_LENGTH, source.size - RECORD_SIZE)
    return str(tag, ENCODING) == SIGNATURE
