"""
Tests for TheoryConfig and YAML loading.
"""

from pathlib import Path

import pytest

from chuk_music_theory.config import DEFAULT_CONFIG, TheoryConfig, load_config
from chuk_music_theory.core import PitchClass
from chuk_music_theory.errors import ConfigError


class TestTheoryConfig:
    """Tests for the config model."""

    def test_defaults(self) -> None:
        """Defaults match the built-in constants."""
        config = TheoryConfig()
        assert config.reference_c0 == 16.35
        assert config.magnitude_base == 10.0
        assert config.default_description == "C major"
        assert config == DEFAULT_CONFIG

    def test_validation(self) -> None:
        """Out-of-range values are rejected."""
        with pytest.raises(ValueError):
            TheoryConfig(reference_c0=0)
        with pytest.raises(ValueError):
            TheoryConfig(magnitude_base=1)


class TestLoadConfig:
    """Tests for load_config."""

    def test_load(self, temp_dir: Path) -> None:
        """Values come from the YAML file."""
        path = temp_dir / "theory.yaml"
        path.write_text("reference_c0: 20.0\nmagnitude_base: 2\n")

        config = load_config(path)
        assert config.reference_c0 == 20.0
        assert config.magnitude_base == 2.0
        assert config.default_description == "C major"

    def test_reference_flows_into_frequency(self, temp_dir: Path) -> None:
        """A loaded reference changes frequencies."""
        path = temp_dir / "theory.yaml"
        path.write_text("reference_c0: 10\n")

        config = load_config(str(path))
        assert PitchClass.parse("C2").frequency(config.reference_c0) == pytest.approx(40.0)

    def test_empty_file(self, temp_dir: Path) -> None:
        """An empty file gives the defaults."""
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert load_config(path) == DEFAULT_CONFIG

    def test_missing_file(self, temp_dir: Path) -> None:
        """A missing file is a ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            load_config(temp_dir / "missing.yaml")

    def test_invalid_value(self, temp_dir: Path) -> None:
        """Validation failures become ConfigError."""
        path = temp_dir / "bad.yaml"
        path.write_text("reference_c0: -1\n")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)

    def test_not_a_mapping(self, temp_dir: Path) -> None:
        """A YAML list is not a config."""
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_malformed_yaml(self, temp_dir: Path) -> None:
        """Unparseable YAML becomes ConfigError."""
        path = temp_dir / "broken.yaml"
        path.write_text("reference_c0: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(path)
