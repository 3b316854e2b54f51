"""APEv2 tags sitting in front of an ID3v1 record.

Only the footer is decoded here; the items themselves are handed to
mutagen's APEv2 reader.
"""

import io
import logging
import struct
from typing import Optional

import mutagen
from mutagen.apev2 import APEv2, BINARY, EXTERNAL

from .constants import (
    APE_FLAG_HAS_HEADER,
    APE_FOOTER_SIZE,
    APE_PREAMBLE,
    APE_TAG_TYPE,
    RECORD_SIZE,
)

# preamble, version, size, item count, flags, reserved
FOOTER_FORMAT = '<8sIIII8s'


class ApeFooter:
    def __init__(self, version, size, item_count, flags):
        self.version = version
        # Size of the items plus footer, excluding the optional header
        self.size = size
        self.item_count = item_count
        self.flags = flags

    @property
    def has_header(self) -> bool:
        return bool(self.flags & APE_FLAG_HAS_HEADER)

    @property
    def tag_size(self) -> int:
        """Total size of the tag on disk, header included."""
        return self.size + (APE_FOOTER_SIZE if self.has_header else 0)

    def __repr__(self):
        return (f'ApeFooter(version={self.version}, size={self.size}, '
                f'item_count={self.item_count}, flags=0x{self.flags:08x})')

    @staticmethod
    def from_bytes(data: bytes) -> Optional['ApeFooter']:
        """Return an ApeFooter given 32 bytes, or None if it isn't one."""
        if len(data) != APE_FOOTER_SIZE:
            raise ValueError(
                f"APEv2 footer must be {APE_FOOTER_SIZE} bytes, got {len(data)}"
            )
        preamble, version, size, item_count, flags, _ = struct.unpack(FOOTER_FORMAT, data)
        if preamble != APE_PREAMBLE:
            return None
        return ApeFooter(version, size, item_count, flags)


class ApeHeader:
    """Location of a detected APEv2 tag.

    offset is the absolute position where the tag starts (its header when
    it has one, otherwise its first item).
    """

    def __init__(self, offset: int, footer: ApeFooter):
        self.offset = offset
        self.footer = footer

    def __repr__(self):
        return f'ApeHeader(offset={self.offset}, footer={self.footer!r})'


def find_ape_header(source) -> Optional[ApeHeader]:
    """Look for an APEv2 footer ending right before the ID3v1 record.

    When the file has no ID3v1 record, the footer is looked for at the very
    end instead. The source position is left untouched.
    """
    # Avoid a circular import, the parser imports this module
    from .parser import has_id3v1_header

    if source.size is None or not source.seekable:
        return None

    end = source.size - RECORD_SIZE if has_id3v1_header(source) else source.size
    footer_offset = end - APE_FOOTER_SIZE
    if footer_offset < 0:
        return None

    with source.saved_position():
        footer = ApeFooter.from_bytes(source.read_bytes(APE_FOOTER_SIZE, footer_offset))
    if footer is None:
        return None

    offset = end - footer.tag_size
    if offset < 0:
        logging.warning(f"APEv2 tag size {footer.tag_size} exceeds file size, ignoring it")
        return None

    logging.debug(f"APEv2 footer found at: pos={footer_offset}, tag starts at {offset}")
    return ApeHeader(offset, footer)


class ApeTagParser:
    """Extract the items of an APEv2 tag into a collector."""

    def __init__(self, collector, source):
        self.collector = collector
        self.source = source

    def parse_tags(self, footer: ApeFooter) -> None:
        """Parse the tag starting at the current source position.

        Raises:
            EOFError: If the source ends inside the tag
            ValueError: If mutagen rejects the tag data
        """
        start = self.source.position
        data = self.source.read_bytes(footer.tag_size)
        if footer.item_count == 0:
            logging.debug(f"Empty APEv2 tag at offset {start}")
            return

        try:
            tag = APEv2(io.BytesIO(data))
        except mutagen.MutagenError as e:
            raise ValueError(f"Invalid APEv2 tag at offset {start}: {e}") from e

        for key, value in tag.items():
            if value.kind == BINARY:
                self.collector.add_tag(APE_TAG_TYPE, key, value.value)
            elif value.kind == EXTERNAL:
                self.collector.add_tag(APE_TAG_TYPE, key, str(value))
            else:
                for text in value:
                    self.collector.add_tag(APE_TAG_TYPE, key, text)
