"""Unit tests for the Config class and SRTLookupConfig model."""

from pathlib import Path
from typing import Any

import pytest
import yaml
from pydantic import ValidationError

from srt_lookup.config import DEFAULT_CONTEXT_WINDOW, DEFAULT_INIT_WINDOW, Config, SRTLookupConfig


def write_config(tmp_path: Path, data: Any) -> Path:
    """Write a config dict as YAML and return its path."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_path


class TestSRTLookupConfig:
    """Test cases for the SRTLookupConfig Pydantic model."""

    def test_defaults(self) -> None:
        """Test that defaults apply when no values are given."""
        config = SRTLookupConfig()
        assert config.context_window == DEFAULT_CONTEXT_WINDOW
        assert config.init_window == DEFAULT_INIT_WINDOW

    def test_valid_values(self) -> None:
        """Test that integer values are kept as-is."""
        config = SRTLookupConfig.model_validate({"context_window": 3, "init_window": 0})
        assert config.context_window == 3
        assert config.init_window == 0

    def test_float_values_are_floored(self) -> None:
        """Test that fractional window sizes are floored."""
        config = SRTLookupConfig.model_validate({"context_window": 3.9, "init_window": 0.5})
        assert config.context_window == 3
        assert config.init_window == 0

    def test_negative_values_are_clamped(self) -> None:
        """Test that negative window sizes become zero."""
        config = SRTLookupConfig.model_validate({"context_window": -5, "init_window": -0.5})
        assert config.context_window == 0
        assert config.init_window == 0

    def test_boolean_rejected(self) -> None:
        """Test that booleans are not accepted as window sizes."""
        with pytest.raises(ValidationError) as exc_info:
            SRTLookupConfig.model_validate({"context_window": True})
        assert any(error["loc"][0] == "context_window" for error in exc_info.value.errors())

    def test_non_numeric_rejected(self) -> None:
        """Test that non-numeric values raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            SRTLookupConfig.model_validate({"init_window": "wide"})
        assert any(error["loc"][0] == "init_window" for error in exc_info.value.errors())

    def test_extra_fields_forbidden(self) -> None:
        """Test that extra fields are forbidden due to extra='forbid'."""
        with pytest.raises(ValidationError) as exc_info:
            SRTLookupConfig.model_validate({"context_window": 3, "extra_field": 1})
        assert any("extra_field" in str(error) for error in exc_info.value.errors())

    def test_config_is_frozen(self) -> None:
        """Test that window sizes cannot be mutated after construction."""
        config = SRTLookupConfig()
        with pytest.raises(ValidationError):
            config.context_window = 10  # type: ignore[misc]


class TestConfig:
    """Test cases for loading config.yaml."""

    def test_load_valid_config(self, tmp_path: Path) -> None:
        """Test loading a complete configuration file."""
        config_path = write_config(
            tmp_path,
            {"srt_lookup": {"context_window": 3, "init_window": 7}, "logging": {"level": "DEBUG"}},
        )

        config = Config(config_path)

        assert config.get_srt_lookup_config() == SRTLookupConfig(context_window=3, init_window=7)
        assert config.get_logging_config().level == "DEBUG"
        assert config.getConfigPath() == config_path

    def test_empty_section_uses_defaults(self, tmp_path: Path) -> None:
        """Test that an empty srt_lookup section falls back to defaults."""
        config = Config(write_config(tmp_path, {"srt_lookup": None}))

        assert config.get_srt_lookup_config() == SRTLookupConfig()
        assert config.get_logging_config().level == "INFO"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            Config(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty config file raises KeyError."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("", encoding="utf-8")

        with pytest.raises(KeyError, match="srt_lookup"):
            Config(config_path)

    def test_missing_section(self, tmp_path: Path) -> None:
        """Test that a config without srt_lookup raises KeyError."""
        with pytest.raises(KeyError, match="srt_lookup"):
            Config(write_config(tmp_path, {"logging": {"level": "INFO"}}))

    def test_invalid_section(self, tmp_path: Path) -> None:
        """Test that invalid values are reported as ValueError with the field path."""
        with pytest.raises(ValueError, match="context_window"):
            Config(write_config(tmp_path, {"srt_lookup": {"context_window": "many"}}))

    def test_non_mapping_top_level(self, tmp_path: Path) -> None:
        """Test that a YAML list at the top level is rejected."""
        with pytest.raises(ValueError, match="mapping"):
            Config(write_config(tmp_path, ["srt_lookup"]))

    def test_template_is_valid(self) -> None:
        """Test that the shipped config template loads."""
        template_path = Path(__file__).resolve().parent.parent / "config" / "config.yaml.template"

        config = Config(template_path)

        assert config.get_srt_lookup_config() == SRTLookupConfig(context_window=300, init_window=100)
