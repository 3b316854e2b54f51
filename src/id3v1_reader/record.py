from typing import Optional

from .constants import (
    ENCODING,
    GENRE_OFFSET,
    RECORD_SIZE,
    SIGNATURE,
    SIGNATURE_LENGTH,
    TEXT_FIELDS,
    TRACK_OFFSET,
    ZERO_BYTE_OFFSET,
)


def decode_field(window: bytes, start: int, length: int) -> Optional[str]:
    """Decode one fixed-width text field of an ID3v1 record.

    Everything from the first NUL byte on is dropped, the rest is decoded as
    Latin-1 (one character per byte) and stripped of surrounding whitespace.

    Args:
        window: Buffer holding the field
        start: Offset of the field in the buffer
        length: Width of the field in bytes

    Returns:
        The field text, or None if nothing but padding remains
    """
    raw_data = window[start:start + length].partition(b'\x00')[0]
    value = str(raw_data, ENCODING).strip()
    return value if value else None


class Id3v1Record:
    """Decoded 128-byte ID3v1 / ID3v1.1 record.

    Records are only built from a window whose signature matches; use
    from_bytes() which returns None for anything else.
    """

    size = RECORD_SIZE

    def __init__(self, title=None, artist=None, album=None, year=None,
                 comment=None, zero_byte=0, track=0, genre=0):
        self.title = title
        self.artist = artist
        self.album = album
        self.year = year
        self.comment = comment
        self.zero_byte = zero_byte
        self.track = track
        self.genre = genre

    @property
    def is_v1_1(self) -> bool:
        """True if the record follows the ID3v1.1 track number convention."""
        return self.zero_byte == 0 and self.track != 0

    def __eq__(self, other):
        if not isinstance(other, Id3v1Record):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        fields = ', '.join(f'{k}={v!r}' for k, v in vars(self).items())
        return f'Id3v1Record({fields})'

    @staticmethod
    def from_bytes(window: bytes) -> Optional['Id3v1Record']:
        """Return an Id3v1Record given the last 128 bytes of a file.

        Returns:
            The decoded record, or None if the window does not start with 'TAG'

        Raises:
            ValueError: If the window is not exactly 128 bytes long
        """
        if len(window) != RECORD_SIZE:
            raise ValueError(
                f"ID3v1 record must be {RECORD_SIZE} bytes, got {len(window)}"
            )

        if decode_field(window, 0, SIGNATURE_LENGTH) != SIGNATURE:
            return None

        fields = {name: decode_field(window, offset, length)
                  for name, offset, length in TEXT_FIELDS}
        return Id3v1Record(
            zero_byte=window[ZERO_BYTE_OFFSET],
            track=window[TRACK_OFFSET],
            genre=window[GENRE_OFFSET],
            **fields,
        )

    @staticmethod
    def from_file(f) -> Optional['Id3v1Record']:
        """Return an Id3v1Record read from the current position of a file object.

        Raises:
            EOFError: If fewer than 128 bytes could be read
        """
        window = f.read(RECORD_SIZE)
        if len(window) < RECORD_SIZE:
            raise EOFError(
                f"Incomplete ID3v1 record: expected {RECORD_SIZE} bytes, got {len(window)}"
            )
        return Id3v1Record.from_bytes(window)
