"""Random access byte source over a binary file object."""

import os
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional


class ByteSource:
    """Wraps a binary file object and tracks the read position.

    The position is kept here rather than relying on fileobj.tell(), so the
    file object may be moved by other readers (e.g. mutagen) without
    confusing the parsers sharing this source.
    """

    def __init__(self, fileobj: BinaryIO, size: Optional[int] = None):
        self.fileobj = fileobj
        self.seekable = self._is_seekable(fileobj)
        self.position = fileobj.tell() if self.seekable else 0
        self.size = size if size is not None else self._determine_size()

    @staticmethod
    def _is_seekable(fileobj) -> bool:
        seekable = getattr(fileobj, 'seekable', None)
        return bool(seekable()) if seekable is not None else False

    def _determine_size(self) -> Optional[int]:
        """Return the total size of the file object, None if it can't be known."""
        try:
            return os.fstat(self.fileobj.fileno()).st_size
        except (AttributeError, OSError, ValueError):
            # io.UnsupportedOperation subclasses both OSError and ValueError
            pass

        if not self.seekable:
            return None

        current = self.fileobj.tell()
        try:
            return self.fileobj.seek(0, os.SEEK_END)
        finally:
            self.fileobj.seek(current)

    def read_bytes(self, count: int, position: Optional[int] = None) -> bytes:
        """Read exactly count bytes.

        Args:
            count: Number of bytes to read
            position: Absolute offset to read from (default: current position)

        Returns:
            The bytes read; the position is moved past them

        Raises:
            EOFError: If the source ends before count bytes were read
        """
        if position is not None:
            self.set_position(position)

        if self.seekable:
            self.fileobj.seek(self.position)
        data = self.fileobj.read(count)
        if len(data) < count:
            raise EOFError(
                f"End of stream: expected {count} bytes at offset {self.position}, "
                f"got {len(data)}"
            )

        self.position += count
        return data

    def skip(self, count: int) -> None:
        """Move the position forward by count bytes."""
        if count < 0:
            raise ValueError(f"Cannot skip backwards ({count} bytes)")
        if self.seekable:
            self.position += count
        else:
            self.read_bytes(count)

    def set_position(self, position: int) -> None:
        if position < 0:
            raise ValueError(f"Invalid position: {position}")
        if not self.seekable and position != self.position:
            if position < self.position:
                raise ValueError(
                    f"Cannot move back to {position} on a non-seekable source"
                )
            self.skip(position - self.position)
        self.position = position

    @contextmanager
    def saved_position(self) -> Iterator[int]:
        """Restore the current position when the block exits, even on error."""
        position = self.position
        try:
            yield position
        finally:
            self.position = position
