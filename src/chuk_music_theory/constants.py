"""
Constants for the theory engine.

No magic strings - name tables, the mode table and step patterns live here.
"""

from typing import Literal

# Pitch indices put A at 0, so C (the octave boundary) is 3.
NOTE_NAMES: list[str] = [
    "A",
    "A#",
    "B",
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
]

# Natural, sharp and flat spelling of every letter (lowercase keys)
NOTE_INDEX: dict[str, int] = {
    "a": 0,
    "a#": 1,
    "ab": 11,
    "b": 2,
    "b#": 3,
    "bb": 1,
    "c": 3,
    "c#": 4,
    "cb": 2,
    "d": 5,
    "d#": 6,
    "db": 4,
    "e": 7,
    "e#": 8,
    "eb": 6,
    "f": 8,
    "f#": 9,
    "fb": 7,
    "g": 10,
    "g#": 11,
    "gb": 9,
}

NATURAL_INDICES: frozenset[int] = frozenset({0, 2, 3, 5, 7, 8, 10})
SHARP_INDICES: frozenset[int] = frozenset({1, 4, 6, 9, 11})

# Letters in diatonic order from C, used by the stave decoders
DIATONIC_LETTERS = "CDEFGAB"

DEFAULT_OCTAVE = 4
DEFAULT_REFERENCE_C0 = 16.35  # Hz
SEMITONES_PER_OCTAVE = 12

MAJOR_PATTERN = "W W H W W W H"
MINOR_PATTERN = "W H W W H W W"

ScaleName = Literal["major", "minor"]

# Mode name -> slot. Three aliases share the last slot.
MODE_SLOTS: dict[str, int] = {
    "none": 0,
    "mixolydian": 1,
    "lydian": 2,
    "phrygian": 3,
    "dorian": 4,
    "hypolydian": 5,
    "hypophrygian": 6,
    "common": 7,
    "locrian": 7,
    "hypodorian": 7,
}

DEGREE_NAMES: list[str] = [
    "tonic",
    "supertonic",
    "mediant",
    "subdominant",
    "dominant",
    "submediant",
    "leading",
]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note: '{text}'. Expected a letter A-G, optional '#'/'b' and octave digits."
    INVALID_MODE = "Unknown mode: '{text}'."
    INVALID_STEP = "Unknown scale step '{step}' in pattern '{pattern}'."
    INVALID_SCALE_TOTAL = "Scale steps must sum to 12 semitones, got {total}."
    INVALID_DEGREE = "Degree {degree} out of range for a {length}-note scale."
    EMPTY_OBSERVATIONS = "Cannot classify an empty set of observations."
    CONFIG_NOT_FOUND = "Config file not found: {path}"
    CONFIG_INVALID = "Invalid config file {path}: {reason}"
