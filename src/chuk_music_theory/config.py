"""
Engine configuration.

Tunables are a pydantic model so they can be loaded from YAML and validated
in one place. Everything has a default; a config file only needs the keys it
changes.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from chuk_music_theory.constants import DEFAULT_REFERENCE_C0, ErrorMessages
from chuk_music_theory.errors import ConfigError

logger = logging.getLogger(__name__)


class TheoryConfig(BaseModel):
    """Tunable constants for frequency computation and key classification."""

    reference_c0: float = Field(
        default=DEFAULT_REFERENCE_C0,
        gt=0,
        description="Frequency of C0 in Hz",
    )
    magnitude_base: float = Field(
        default=10.0,
        gt=1,
        description="Base for the order-of-magnitude test that decides if a mode is attached",
    )
    default_description: str = Field(
        default="C major",
        description="Key description used when no key is given",
    )

    model_config = {"frozen": True}


DEFAULT_CONFIG = TheoryConfig()


def load_config(path: Path | str) -> TheoryConfig:
    """
    Load a TheoryConfig from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Validated config (defaults for missing keys)

    Raises:
        ConfigError: If the file is missing, not a mapping, or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(ErrorMessages.CONFIG_NOT_FOUND.format(path=path))

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(
                ErrorMessages.CONFIG_INVALID.format(path=path, reason="expected a mapping")
            )
        config = TheoryConfig.model_validate(data)
    except (yaml.YAMLError, ValidationError) as e:
        logger.exception("Failed to load config")
        raise ConfigError(ErrorMessages.CONFIG_INVALID.format(path=path, reason=e)) from e

    logger.info(f"Loaded theory config from {path}")
    return config
