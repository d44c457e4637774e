"""Configuration loader for the SRT lookup engine."""

import math
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_CONTEXT_WINDOW = 300
DEFAULT_INIT_WINDOW = 100


class SRTLookupConfig(BaseModel):
    """Window sizes used by timestamp resolution and line-window reads."""

    context_window: int = Field(
        DEFAULT_CONTEXT_WINDOW,
        description="Lines returned before/after a reference line by the window readers",
    )
    init_window: int = Field(
        DEFAULT_INIT_WINDOW,
        description="Lines of context returned on each side of a matched timing line",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("context_window", "init_window", mode="before")
    @classmethod
    def _floor_and_clamp(cls, value: Any) -> Any:
        """Floor numeric window sizes and clamp negatives to zero."""
        if isinstance(value, bool):
            raise ValueError("window size must be a number, not a boolean")
        if isinstance(value, int | float):
            if isinstance(value, float) and not math.isfinite(value):
                raise ValueError("window size must be a finite number")
            return max(0, math.floor(value))
        return value


class LoggingConfig(BaseModel):
    """Logging settings used by the command-line entry point."""

    level: str = Field("INFO", description="Root log level name (DEBUG, INFO, WARNING, ...)")

    model_config = ConfigDict(frozen=True, extra="forbid")


def _format_validation_error(e: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors())


class Config:
    """Configuration class that loads and provides access to config.yaml."""

    def __init__(self, config_path: str | Path) -> None:
        """Initialize the Config by loading the YAML file.

        Args:
            config_path: Path to the config.yaml file.

        Raises:
            FileNotFoundError: If the config file doesn't exist.
            yaml.YAMLError: If the YAML file is invalid.
            KeyError: If the srt_lookup section is missing.
            ValueError: If a section contains invalid values.
        """
        self.config_path = Path(config_path)
        self._load(self.config_path)

        self._srt_lookup = self._validate_srt_lookup()
        self._logging = self._validate_logging()

    def _load(self, config_path: Path) -> None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        # Handle empty or None YAML files
        if data is None:
            raise KeyError("Missing required key 'srt_lookup' in config file")
        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the top level")

        self._data = cast(dict[str, Any], data)

    def _validate_srt_lookup(self) -> SRTLookupConfig:
        """Validate the srt_lookup section.

        Returns:
            Validated SRTLookupConfig instance.

        Raises:
            KeyError: If the srt_lookup section is missing.
            ValueError: If the section is invalid.
        """
        if "srt_lookup" not in self._data:
            raise KeyError("Missing required key 'srt_lookup' in config file")

        try:
            return SRTLookupConfig.model_validate(self._data["srt_lookup"] or {})
        except ValidationError as e:
            raise ValueError(f"SRT lookup configuration validation failed: {_format_validation_error(e)}") from e

    def _validate_logging(self) -> LoggingConfig:
        try:
            return LoggingConfig.model_validate(self._data.get("logging") or {})
        except ValidationError as e:
            raise ValueError(f"Logging configuration validation failed: {_format_validation_error(e)}") from e

    def get_srt_lookup_config(self) -> SRTLookupConfig:
        """Get the window configuration for the lookup service."""
        return self._srt_lookup

    def get_logging_config(self) -> LoggingConfig:
        """Get the logging configuration."""
        return self._logging

    def getConfigPath(self) -> Path:
        """Get the path to config.yaml."""
        return self.config_path
