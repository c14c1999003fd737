"""Tests for the settings loading and validation logic."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import mock_open, patch

import pytest
import yaml

from oraregex.config import DEFAULT_SETTINGS, EmulationSettings, load_settings


class TestEmulationSettings(unittest.TestCase):
    """Test suite for the EmulationSettings model."""

    def test_defaults(self) -> None:
        """1. Defaults: Uniform newline policy and no timeout."""
        assert DEFAULT_SETTINGS.newline_policy == "uniform"
        assert DEFAULT_SETTINGS.timeout is None

    def test_from_dict_accepts_emulation_section(self) -> None:
        """2. Section: Values may be nested under an 'emulation' key."""
        settings = EmulationSettings.from_dict({"emulation": {"newline_policy": "legacy", "timeout": 2.5}})
        assert settings.newline_policy == "legacy"
        assert settings.timeout == 2.5

    def test_from_dict_accepts_flat_mapping(self) -> None:
        """3. Flat: Values may also sit at the top level."""
        assert EmulationSettings.from_dict({"timeout": 1}).timeout == 1.0

    def test_unknown_policy_is_rejected(self) -> None:
        """4. Policy: Only 'uniform' and 'legacy' are accepted."""
        with pytest.raises(ValueError, match="Invalid emulation settings"):
            EmulationSettings.from_dict({"newline_policy": "strict"})

    def test_unknown_keys_are_rejected(self) -> None:
        """5. Extra Keys: Typos in setting names are reported."""
        with pytest.raises(ValueError, match="Invalid emulation settings"):
            EmulationSettings.from_dict({"timout": 1})

    def test_non_positive_timeout_is_rejected(self) -> None:
        """6. Timeout: Zero or negative timeouts are rejected."""
        with pytest.raises(ValueError, match="timeout must be a positive number"):
            EmulationSettings.from_dict({"timeout": 0})

    def test_section_must_be_mapping(self) -> None:
        """7. Section Type: A non-mapping 'emulation' section raises TypeError."""
        with pytest.raises(TypeError, match="must be a mapping"):
            EmulationSettings.from_dict({"emulation": ["legacy"]})


class TestLoadSettings(unittest.TestCase):
    """Test suite for load_settings."""

    def test_load_settings_success(self) -> None:
        """1. Success: Correctly loads a valid YAML settings file."""
        yaml_content = """
emulation:
  newline_policy: 'legacy'
  timeout: 0.5
"""
        with patch("pathlib.Path.open", mock_open(read_data=yaml_content)), patch("pathlib.Path.is_file", return_value=True):
            settings = load_settings("dummy_path.yaml")

        assert isinstance(settings, EmulationSettings)
        assert settings.newline_policy == "legacy"
        assert settings.timeout == 0.5

    def test_load_settings_empty_file_gives_defaults(self) -> None:
        """2. Empty File: An empty file yields the default settings."""
        with patch("pathlib.Path.open", mock_open(read_data="")), patch("pathlib.Path.is_file", return_value=True):
            assert load_settings("dummy_path.yaml") == DEFAULT_SETTINGS

    def test_load_settings_file_not_found(self) -> None:
        """3. Missing File: Raises FileNotFoundError."""
        with patch("pathlib.Path.is_file", return_value=False), pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_settings("missing.yaml")

    def test_load_settings_invalid_yaml(self) -> None:
        """4. Malformed YAML: Raises yaml.YAMLError."""
        with patch("pathlib.Path.open", mock_open(read_data="emulation: [unclosed")), patch("pathlib.Path.is_file", return_value=True), pytest.raises(yaml.YAMLError, match="Error parsing YAML config file"):
            load_settings("dummy_path.yaml")

    def test_load_settings_not_a_mapping(self) -> None:
        """5. Wrong Shape: A top-level list raises ValueError."""
        with patch("pathlib.Path.open", mock_open(read_data="- a\n- b\n")), patch("pathlib.Path.is_file", return_value=True), pytest.raises(ValueError, match="must be a YAML mapping"):
            load_settings("dummy_path.yaml")

    def test_load_settings_invalid_values(self) -> None:
        """6. Invalid Values: Validation errors surface as ValueError."""
        with patch("pathlib.Path.open", mock_open(read_data="newline_policy: 'sometimes'\n")), patch("pathlib.Path.is_file", return_value=True), pytest.raises(ValueError, match="Invalid or missing configuration"):
            load_settings("dummy_path.yaml")

    def test_load_settings_real_file(self) -> None:
        """7. Real File: Reads from disk using a Path argument."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "oraregex.yaml"
            path.write_text("emulation:\n  timeout: 3\n", encoding="utf-8")
            assert load_settings(path).timeout == 3.0
