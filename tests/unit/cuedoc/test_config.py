"""Unit tests for converter configuration."""

import pytest

from cuedoc.config import ConverterConfig
from cuedoc.reader import DEFAULT_MAX_FILE_SIZE


class TestConverterConfig:
    def test_defaults(self):
        config = ConverterConfig()

        assert config.encoding == "utf-8"
        assert config.max_file_size_bytes == DEFAULT_MAX_FILE_SIZE
        assert config.pretty is False
        assert config.log_level == "WARNING"
        assert config.log_format == "console"
        assert config.validate() == []

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CUEDOC_ENCODING", "auto")
        monkeypatch.setenv("CUEDOC_MAX_FILE_SIZE_BYTES", "2048")
        monkeypatch.setenv("CUEDOC_PRETTY", "yes")
        monkeypatch.setenv("CUEDOC_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CUEDOC_LOG_FORMAT", "json")

        config = ConverterConfig.from_env()

        assert config.encoding == "auto"
        assert config.max_file_size_bytes == 2048
        assert config.pretty is True
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_without_variables(self):
        assert ConverterConfig.from_env() == ConverterConfig()

    @pytest.mark.parametrize(("value", "expected"), [("true", True), ("1", True), ("False", False), ("no", False)])
    def test_from_env_pretty(self, monkeypatch, value, expected):
        monkeypatch.setenv("CUEDOC_PRETTY", value)

        assert ConverterConfig.from_env().pretty is expected

    def test_from_env_bad_size(self, monkeypatch):
        monkeypatch.setenv("CUEDOC_MAX_FILE_SIZE_BYTES", "lots")

        with pytest.raises(ValueError):
            ConverterConfig.from_env()

    def test_dict_round_trip(self):
        config = ConverterConfig(encoding="latin-1", pretty=True)

        assert ConverterConfig.from_dict(config.to_dict()) == config

    def test_from_dict_ignores_unknown_keys(self):
        config = ConverterConfig.from_dict({"log_level": "INFO", "colour": "blue"})

        assert config.log_level == "INFO"
        assert not hasattr(config, "colour")

    def test_validate(self):
        config = ConverterConfig(max_file_size_bytes=0, log_format="xml", log_level="LOUD")

        assert config.validate() == [
            "max_file_size_bytes must be positive",
            "log_format must be one of console, json",
            "Unknown log_level: LOUD",
        ]

    def test_validate_log_level_is_case_insensitive(self):
        assert ConverterConfig(log_level="debug").validate() == []
