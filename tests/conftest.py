"""Pytest configuration and fixtures."""

import struct
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

RECORD_FORMAT = '3s30s30s30s4s28sBBB'

# APEv2 item flags / tag flags
APE_HAS_HEADER = 1 << 31
APE_IS_HEADER = 1 << 29
APE_KIND_BINARY = 1 << 1
APE_KIND_EXTERNAL = 2 << 1


def build_record(signature=b'TAG', title=b'', artist=b'', album=b'', year=b'',
                 comment=b'', zero_byte=0, track=0, genre=255):
    """Pack a 128-byte ID3v1 record; text fields are NUL padded."""
    return struct.pack(RECORD_FORMAT, signature, title, artist, album, year,
                       comment, zero_byte, track, genre)


def build_ape_tag(items, with_header=True):
    """Build an APEv2 tag from (key, value, flags) tuples."""
    body = b''.join(
        struct.pack('<II', len(value), flags) + key.encode('ascii') + b'\x00' + value
        for key, value, flags in items
    )
    size = len(body) + 32
    flags = APE_HAS_HEADER if with_header else 0
    footer = struct.pack('<8sIIII8s', b'APETAGEX', 2000, size, len(items), flags, b'\x00' * 8)
    if not with_header:
        return body + footer
    header = struct.pack('<8sIIII8s', b'APETAGEX', 2000, size, len(items),
                         flags | APE_IS_HEADER, b'\x00' * 8)
    return header + body + footer


@pytest.fixture
def record_builder():
    return build_record


@pytest.fixture
def ape_builder():
    return build_ape_tag


@pytest.fixture
def sample_record():
    """The record used by most end-to-end tests."""
    return build_record(title=b'Title X', artist=b'Artist Y', year=b'2001', track=5, genre=17)


@pytest.fixture
def audio_data():
    """Stand-in for audio frames preceding the trailing tags."""
    return b'\xff\xfb\x90\x00' * 256


@pytest.fixture
def write_audio(tmp_path):
    """Return a function writing bytes to a file under tmp_path."""
    def _write(data, name='track.mp3'):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep Config() away from the real ~/.id3v1 directory."""
    home = tmp_path / 'home'
    home.mkdir()
    monkeypatch.setattr(Path, 'home', lambda: home)
    return home
