"""Tests for ByteSource."""

import io

import pytest

from id3v1_reader.source import ByteSource


class NonSeekableStream:
    """Minimal read-only stream without seek support."""

    def __init__(self, data):
        self._buffer = io.BytesIO(data)

    def read(self, count=-1):
        return self._buffer.read(count)

    def seekable(self):
        return False


class TestByteSourceSize:
    """Test size detection."""

    def test_bytes_io_size(self):
        source = ByteSource(io.BytesIO(b'x' * 300))
        assert source.size == 300
        assert source.position == 0

    def test_real_file_size(self, write_audio):
        path = write_audio(b'y' * 1000)
        with open(path, 'rb') as f:
            source = ByteSource(f)
            assert source.size == 1000

    def test_explicit_size(self):
        source = ByteSource(io.BytesIO(b'x' * 10), size=5)
        assert source.size == 5

    def test_non_seekable_size_unknown(self):
        source = ByteSource(NonSeekableStream(b'x' * 300))
        assert source.size is None
        assert not source.seekable

    def test_size_detection_keeps_file_position(self):
        stream = io.BytesIO(b'x' * 50)
        stream.seek(10)
        source = ByteSource(stream)
        assert source.position == 10
        assert stream.tell() == 10


class TestByteSourceReading:
    """Test reading, skipping and positioning."""

    def test_read_advances_position(self):
        source = ByteSource(io.BytesIO(b'abcdef'))
        assert source.read_bytes(2) == b'ab'
        assert source.position == 2
        assert source.read_bytes(2) == b'cd'

    def test_read_at_position(self):
        source = ByteSource(io.BytesIO(b'abcdef'))
        assert source.read_bytes(3, position=2) == b'cde'
        assert source.position == 5

    def test_position_independent_of_file_object(self):
        """Test that moving the underlying file does not move the source."""
        stream = io.BytesIO(b'abcdef')
        source = ByteSource(stream)
        source.read_bytes(1)
        stream.seek(4)
        assert source.read_bytes(1) == b'b'

    def test_short_read_raises(self):
        source = ByteSource(io.BytesIO(b'abc'))
        with pytest.raises(EOFError, match="expected 5 bytes"):
            source.read_bytes(5)

    def test_skip(self):
        source = ByteSource(io.BytesIO(b'abcdef'))
        source.skip(4)
        assert source.read_bytes(2) == b'ef'

    def test_skip_backwards_rejected(self):
        source = ByteSource(io.BytesIO(b'abcdef'))
        with pytest.raises(ValueError):
            source.skip(-1)

    def test_skip_non_seekable(self):
        source = ByteSource(NonSeekableStream(b'abcdef'))
        source.skip(3)
        assert source.position == 3
        assert source.read_bytes(1) == b'd'

    def test_set_position_non_seekable_backwards(self):
        source = ByteSource(NonSeekableStream(b'abcdef'))
        source.skip(3)
        with pytest.raises(ValueError, match="non-seekable"):
            source.set_position(1)

    def test_saved_position_restores(self):
        source = ByteSource(io.BytesIO(b'abcdef'))
        source.skip(1)
        with source.saved_position() as saved:
            assert saved == 1
            source.read_bytes(2, position=3)
        assert source.position == 1

    def test_saved_position_restores_on_error(self):
        source = ByteSource(io.BytesIO(b'abc'))
        with pytest.raises(EOFError):
            with source.saved_position():
                source.read_bytes(10, position=1)
        assert source.position == 0
