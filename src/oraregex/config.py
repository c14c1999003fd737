"""Handles the parsing and validation of OraRegex settings."""

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

NewlinePolicy = Literal["uniform", "legacy"]


class EmulationSettings(BaseModel):
    """
    Settings that tune how the Oracle dialect is emulated.

    Attributes:
        newline_policy: ``uniform`` applies Oracle's boundary-anchoring default
            whenever neither ``n`` nor ``m`` is requested. ``legacy`` reproduces
            the PostgreSQL port, which only applied it when no match parameter
            string was given at all.
        timeout: Optional per-scan time limit in seconds, enforced by the
            ``regex`` engine.

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    newline_policy: NewlinePolicy = "uniform"
    timeout: float | None = Field(default=None, description="Per-scan engine timeout in seconds.")

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            msg = "timeout must be a positive number of seconds"
            raise ValueError(msg)
        return value

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmulationSettings":
        """
        Create settings from a mapping, accepting an optional ``emulation`` section.

        Raises:
            ValueError: If the mapping contains unknown keys or invalid values.

        """
        section = data.get("emulation", data)
        if not isinstance(section, dict):
            msg = "The 'emulation' section must be a mapping."
            raise TypeError(msg)
        try:
            return cls(**section)
        except ValidationError as e:
            msg = f"Invalid emulation settings: {e}"
            raise ValueError(msg) from e


DEFAULT_SETTINGS = EmulationSettings()


def load_settings(config_path: str | Path) -> EmulationSettings:
    """
    Load, parse, and validate a YAML settings file.

    Args:
        config_path: The path to the settings file.

    Returns:
        An EmulationSettings object representing the validated configuration.

    Raises:
        FileNotFoundError: If the settings file does not exist.
        yaml.YAMLError: If there is a syntax error in the YAML file.
        ValueError: If the configuration is invalid.

    """
    path = Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found at: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)

        # An empty file means "all defaults"
        if data is None:
            data = {}
        if not isinstance(data, dict):
            msg = "Config file must be a YAML mapping (dictionary)."
            raise TypeError(msg)

        settings = EmulationSettings.from_dict(data)
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML config file: {e}"
        raise yaml.YAMLError(msg) from e
    except (TypeError, ValueError) as e:
        msg = f"Invalid or missing configuration: {e}"
        raise ValueError(msg) from e
    else:
        logger.debug("Loaded settings from %s: %s", path, settings.model_dump())
        return settings
