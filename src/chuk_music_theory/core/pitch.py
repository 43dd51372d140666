"""
Pitch primitives - PitchClass and StavePosition.

A PitchClass is one of the 12 chromatic pitches plus an octave number.
Pitch indices put A at 0 (A, A#, B, C, ... G#), so the "white keys" are
0, 2, 3, 5, 7, 8, 10 rather than the MIDI set. Enharmonic spellings collapse
to a single index; display always uses the sharp name.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from chuk_music_theory.constants import (
    DEFAULT_OCTAVE,
    DEFAULT_REFERENCE_C0,
    DIATONIC_LETTERS,
    NATURAL_INDICES,
    NOTE_INDEX,
    NOTE_NAMES,
    SEMITONES_PER_OCTAVE,
    SHARP_INDICES,
    ErrorMessages,
)
from chuk_music_theory.errors import ParseError

_NOTE_RE = re.compile(r"([A-Ga-g][#b]?)([0-9]*)")

# C sits three semitones above A
_C_OFFSET = 3

# Diatonic index (steps from C0) of line 1 / space 1 on each clef
_TREBLE_LINE_1 = 4 * 7 + 2  # E4
_TREBLE_SPACE_1 = 4 * 7 + 3  # F4
_BASS_LINE_1 = 2 * 7 + 4  # G2
_BASS_SPACE_1 = 2 * 7 + 5  # A2


def is_note(text: str) -> bool:
    """Check whether text is a note name like 'C', 'f#', 'Bb3'."""
    return _NOTE_RE.fullmatch(text) is not None


@dataclass(frozen=True)
class StavePosition:
    """
    A line or space on a five-line staff, counted from the bottom (1-5 / 1-4).

    Exactly one of line or space is set. Zero and negative numbers are
    ledger positions below the staff, numbers above 5 are above it.
    """

    line: int | None = None
    space: int | None = None

    def __post_init__(self) -> None:
        if (self.line is None) == (self.space is None):
            raise ValueError("StavePosition needs exactly one of line or space")


@dataclass(frozen=True)
class PitchClass:
    """
    A pitch class (0-11) at an octave.

    The index is always normalized modulo 12, so PitchClass(-1) is G#4 and
    PitchClass(12) is A4. Immutable; flat() and sharp() return new values.

    Examples:
        PitchClass(3) = C4
        PitchClass.parse("Bb2") = A#2
    """

    index: int
    octave: int = DEFAULT_OCTAVE

    def __post_init__(self) -> None:
        object.__setattr__(self, "index", self.index % SEMITONES_PER_OCTAVE)
        object.__setattr__(self, "octave", int(self.octave))

    @classmethod
    def parse(cls, text: str) -> PitchClass:
        """
        Parse a note name.

        Args:
            text: Letter A-G, optional '#' or 'b', optional octave digits

        Returns:
            Parsed PitchClass (octave 4 when no digits are given)

        Raises:
            ParseError: If text does not match the note grammar
        """
        match = _NOTE_RE.fullmatch(text)
        if match is None:
            raise ParseError(ErrorMessages.INVALID_NOTE.format(text=text))

        name, digits = match.groups()
        octave = int(digits) if digits else DEFAULT_OCTAVE
        return cls(NOTE_INDEX[name.lower()], octave)

    @classmethod
    def coerce(cls, value: PitchClass | str | int) -> PitchClass:
        """Lift a note name or raw index into a PitchClass."""
        if isinstance(value, PitchClass):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise TypeError(f"Cannot make a PitchClass from {value!r}")

    @classmethod
    def from_treble_clef(
        cls, position: StavePosition | Sequence[StavePosition]
    ) -> PitchClass | list[PitchClass]:
        """Decode a treble-clef line/space (or a sequence of them) to pitches."""
        if not isinstance(position, StavePosition):
            return [cls.from_treble_clef(p) for p in position]  # type: ignore[misc]
        return cls._from_stave(position, _TREBLE_LINE_1, _TREBLE_SPACE_1)

    @classmethod
    def from_bass_clef(
        cls, position: StavePosition | Sequence[StavePosition]
    ) -> PitchClass | list[PitchClass]:
        """Decode a bass-clef line/space (or a sequence of them) to pitches."""
        if not isinstance(position, StavePosition):
            return [cls.from_bass_clef(p) for p in position]  # type: ignore[misc]
        return cls._from_stave(position, _BASS_LINE_1, _BASS_SPACE_1)

    @classmethod
    def _from_stave(cls, position: StavePosition, line_1: int, space_1: int) -> PitchClass:
        if position.line is not None:
            from_c0 = line_1 + 2 * (position.line - 1)
        elif position.space is not None:
            from_c0 = space_1 + 2 * (position.space - 1)
        else:
            raise ValueError("StavePosition needs exactly one of line or space")

        octave, letter = divmod(from_c0, 7)
        return cls(NOTE_INDEX[DIATONIC_LETTERS[letter].lower()], octave)

    @property
    def name(self) -> str:
        """Canonical name without octave, e.g. 'C#'."""
        return NOTE_NAMES[self.index]

    def frequency(self, reference_c0: float = DEFAULT_REFERENCE_C0) -> float:
        """
        Frequency in Hz, equal temperament.

        Args:
            reference_c0: Frequency of C0

        Returns:
            reference_c0 * 2^octave * 2^(semitones above C / 12)
        """
        above_c = (self.index - _C_OFFSET) % SEMITONES_PER_OCTAVE
        return reference_c0 * 2.0**self.octave * 2.0 ** (above_c / SEMITONES_PER_OCTAVE)

    def transpose(self, semitones: int) -> PitchClass:
        """Move by semitones, carrying into the octave at the G#/A boundary."""
        octave, index = divmod(
            self.octave * SEMITONES_PER_OCTAVE + self.index + semitones, SEMITONES_PER_OCTAVE
        )
        return PitchClass(index, octave)

    def flat(self) -> PitchClass:
        """One semitone down."""
        return self.transpose(-1)

    def sharp(self) -> PitchClass:
        """One semitone up."""
        return self.transpose(1)

    def natural(self) -> PitchClass:
        """Drop a sharp, if there is one."""
        if self.index in SHARP_INDICES:
            return self.flat()
        return self

    def is_natural(self) -> bool:
        """True for the seven letter names without accidentals."""
        return self.index in NATURAL_INDICES

    def __str__(self) -> str:
        return f"{self.name}{self.octave}"

    def __repr__(self) -> str:
        return f"PitchClass.parse({str(self)!r})"
