"""Tests for Config."""

import pytest

from id3v1_reader.config import Config, get_config_path


class TestConfig:
    """Test configuration defaults, setters and persistence."""

    def test_defaults(self):
        config = Config()
        assert config.get_parse_ape() is True
        assert config.get_warn_unknown_genre() is True
        assert config.get_log_level() == "critical"
        assert not config.is_dirty()

    def test_default_path_in_home(self, isolated_home):
        assert get_config_path() == isolated_home / ".id3v1" / "config.toml"
        assert Config().config_path == get_config_path()

    def test_defaults_not_shared(self):
        """Test that instances don't modify the class default."""
        config = Config()
        config.set_parse_ape(False)
        assert Config.DEFAULT_CONFIG["extraction"]["parse_ape"] is True

    def test_setters_mark_dirty(self):
        config = Config()
        config.set_warn_unknown_genre(False)
        assert config.is_dirty()
        assert config.get_warn_unknown_genre() is False

    def test_log_level_validation(self):
        config = Config()
        with pytest.raises(ValueError, match="Invalid log level"):
            config.set_log_level("verbose")
        config.set_log_level("DEBUG")
        assert config.get_log_level() == "debug"

    def test_persistence(self, tmp_path):
        """Test that settings are saved and loaded from TOML."""
        config_path = tmp_path / "nested" / "config.toml"

        config1 = Config(config_path)
        config1.set_parse_ape(False)
        config1.set_log_level("info")
        assert config1.save()
        assert config_path.exists()

        config2 = Config(config_path)
        assert config2.get_parse_ape() is False
        assert config2.get_log_level() == "info"
        assert config2.get_warn_unknown_genre() is True

    def test_save_skipped_when_clean(self, tmp_path):
        config_path = tmp_path / "config.toml"
        config = Config(config_path)
        assert config.save()
        assert not config_path.exists()

    def test_partial_file_merged_with_defaults(self, tmp_path):
        config_path = tmp_path / "config.toml"
        config_path.write_text('[extraction]\nwarn_unknown_genre = false\n')

        config = Config(config_path)
        assert config.get_warn_unknown_genre() is False
        assert config.get_parse_ape() is True

    def test_invalid_file(self, tmp_path):
        config_path = tmp_path / "config.toml"
        config_path.write_text('not = [valid toml')

        config = Config(config_path)
        assert config.load() is False
        assert config.get_parse_ape() is True
