"""Tests for the read() and probe() entry points."""

import pytest

from id3v1_reader import read, probe
from id3v1_reader.config import Config


class TestRead:
    """Test reading tags from files on disk."""

    def test_read_id3v1(self, write_audio, audio_data, sample_record):
        path = write_audio(audio_data + sample_record)
        collector = read(str(path))
        assert [(tag.key, tag.value) for tag in collector] == [
            ('title', 'Title X'),
            ('artist', 'Artist Y'),
            ('track', 5),
            ('year', '2001'),
            ('genre', 'Rock'),
        ]

    def test_read_without_tags(self, write_audio, audio_data):
        path = write_audio(audio_data)
        assert not read(str(path)).has_tags

    def test_read_with_ape(self, write_audio, audio_data, sample_record, ape_builder):
        ape = ape_builder([('Title', b'Ape Title', 0)])
        path = write_audio(audio_data + ape + sample_record)

        collector = read(str(path))
        assert collector.tag_types == ['APEv2', 'ID3v1']
        assert collector.get('APEv2', 'Title') == ['Ape Title']

    def test_read_ape_disabled(self, write_audio, audio_data, sample_record, ape_builder, tmp_path):
        ape = ape_builder([('Title', b'Ape Title', 0)])
        path = write_audio(audio_data + ape + sample_record)
        config = Config(tmp_path / 'config.toml')
        config.set_parse_ape(False)

        collector = read(str(path), config)
        assert collector.tag_types == ['ID3v1']

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read(str(tmp_path / 'missing.mp3'))


class TestProbe:

    def test_probe(self, write_audio, audio_data, sample_record):
        assert probe(str(write_audio(audio_data + sample_record, 'a.mp3')))
        assert not probe(str(write_audio(audio_data, 'b.mp3')))
        assert not probe(str(write_audio(b'TAG', 'c.mp3')))
