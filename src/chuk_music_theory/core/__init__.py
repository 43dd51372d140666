"""
Core music primitives.

- PitchClass: a pitch index (0-11, A = 0) at an octave
- StavePosition: a staff line or space, for clef decoding
- Scale: cumulative semitone offsets (MAJOR, MINOR)
- Mode: flattens one degree of a key
- Key: root + scale + optional mode, resolves degrees to pitches
- Chord: key-independent stack of scale degrees
"""

from chuk_music_theory.core.chord import Chord
from chuk_music_theory.core.key import Key
from chuk_music_theory.core.mode import Mode, ModeName, is_mode
from chuk_music_theory.core.pitch import PitchClass, StavePosition, is_note
from chuk_music_theory.core.scale import MAJOR, MINOR, Scale

__all__ = [
    # Pitch
    "PitchClass",
    "StavePosition",
    "is_note",
    # Scale
    "Scale",
    "MAJOR",
    "MINOR",
    # Mode
    "Mode",
    "ModeName",
    "is_mode",
    # Key
    "Key",
    # Chord
    "Chord",
]
