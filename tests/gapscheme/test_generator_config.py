"""
Unit tests for GeneratorConfig and config loading.
"""

import json
import logging

import pytest

from ctest_toolkit.gapscheme import GeneratorConfig, load_generator_config


class TestGeneratorConfig:
    """Tests for GeneratorConfig dataclass."""

    def test_init_when_defaults_then_twenty_gaps_every_second(self):
        """Defaults: 20 gaps, interval 2, both sentences enforced."""
        # Act
        config = GeneratorConfig()

        # Assert
        assert config.gap_limit == 20
        assert config.gap_interval == 2
        assert config.enforce_leading_sentence is True
        assert config.enforce_trailing_sentence is True

    def test_init_when_negative_limit_then_accepted(self):
        """A negative limit is a degenerate configuration, not an error."""
        assert GeneratorConfig(gap_limit=-1).gap_limit == -1

    def test_init_when_zero_limit_then_valid(self):
        assert GeneratorConfig(gap_limit=0).gap_limit == 0

    def test_init_when_zero_interval_then_raises_error(self):
        with pytest.raises(ValueError, match="gap_interval must be positive"):
            GeneratorConfig(gap_interval=0)

    def test_init_when_frozen_then_immutable(self):
        config = GeneratorConfig()
        with pytest.raises(AttributeError):
            config.gap_limit = 5  # type: ignore

    def test_from_dict_when_to_dict_output_then_equal(self):
        config = GeneratorConfig(gap_limit=25, gap_interval=3, enforce_trailing_sentence=False)
        assert GeneratorConfig.from_dict(config.to_dict()) == config

    def test_from_dict_when_unknown_keys_then_ignored(self):
        config = GeneratorConfig.from_dict({"gap_limit": 10, "theme": "dark"})
        assert config == GeneratorConfig(gap_limit=10)


class TestLoadGeneratorConfig:
    """Tests for load_generator_config."""

    def test_load_when_file_missing_then_defaults(self, tmp_path):
        assert load_generator_config(tmp_path / "missing.json") == GeneratorConfig()

    def test_load_when_valid_file_then_values_applied(self, tmp_path):
        # Arrange
        path = tmp_path / "generator.json"
        path.write_text(json.dumps({"gap_limit": 12, "gap_interval": 3}), encoding="utf-8")

        # Act
        config = load_generator_config(path)

        # Assert
        assert config == GeneratorConfig(gap_limit=12, gap_interval=3)

    def test_load_when_corrupted_file_then_defaults_and_warning(self, tmp_path, caplog):
        path = tmp_path / "generator.json"
        path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = load_generator_config(path)

        assert config == GeneratorConfig()
        assert "corrupted" in caplog.text

    def test_load_when_invalid_values_then_defaults_and_warning(self, tmp_path, caplog):
        path = tmp_path / "generator.json"
        path.write_text(json.dumps({"gap_interval": 0}), encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = load_generator_config(path)

        assert config == GeneratorConfig()
        assert "Invalid generator config" in caplog.text

    def test_load_when_not_an_object_then_defaults(self, tmp_path):
        path = tmp_path / "generator.json"
        path.write_text(json.dumps([1, 2]), encoding="utf-8")

        assert load_generator_config(str(path)) == GeneratorConfig()
