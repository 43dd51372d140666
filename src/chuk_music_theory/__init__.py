"""
chuk-music-theory - pitch classes, scales, keys, chords and key detection.
"""

from chuk_music_theory.analysis import KeyAnalysis, analyze, classify
from chuk_music_theory.config import DEFAULT_CONFIG, TheoryConfig, load_config
from chuk_music_theory.core import (
    MAJOR,
    MINOR,
    Chord,
    Key,
    Mode,
    ModeName,
    PitchClass,
    Scale,
    StavePosition,
)
from chuk_music_theory.errors import (
    ConfigError,
    InvalidDegreeError,
    InvalidInputError,
    ParseError,
    TheoryError,
)

__version__ = "0.1.0"

__all__ = [
    "PitchClass",
    "StavePosition",
    "Scale",
    "MAJOR",
    "MINOR",
    "Mode",
    "ModeName",
    "Key",
    "Chord",
    "KeyAnalysis",
    "analyze",
    "classify",
    "TheoryConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "TheoryError",
    "ParseError",
    "InvalidDegreeError",
    "InvalidInputError",
    "ConfigError",
]
