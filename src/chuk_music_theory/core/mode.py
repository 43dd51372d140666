"""
Mode primitives - ModeName and Mode.

A mode flattens exactly one degree of a key by a semitone. Mode slot k
(1-7) designates the k-th degree (degree index k - 1); slot 0 is "none"
and leaves every degree alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from chuk_music_theory.constants import MODE_SLOTS, ErrorMessages
from chuk_music_theory.errors import ParseError

from .pitch import PitchClass


class ModeName(IntEnum):
    """The eight mode slots. 'common' and 'locrian' parse to HYPODORIAN."""

    NONE = 0
    MIXOLYDIAN = 1
    LYDIAN = 2
    PHRYGIAN = 3
    DORIAN = 4
    HYPOLYDIAN = 5
    HYPOPHRYGIAN = 6
    HYPODORIAN = 7

    @classmethod
    def parse(cls, text: str) -> ModeName:
        """Parse a mode name, case-insensitively."""
        slot = MODE_SLOTS.get(text.strip().lower())
        if slot is None:
            raise ParseError(ErrorMessages.INVALID_MODE.format(text=text))
        return cls(slot)


def is_mode(text: str) -> bool:
    """Check whether text names a mode."""
    return text.strip().lower() in MODE_SLOTS


@dataclass(frozen=True)
class Mode:
    """
    A single-degree flattening applied on top of a key's scale.

    The mode only ever changes the pitch index of its designated degree;
    octaves are never touched and every other degree passes through.
    """

    name: ModeName

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", ModeName(self.name))

    @classmethod
    def parse(cls, text: str) -> Mode:
        """Parse a mode from its name ('dorian', 'Locrian', ...)."""
        return cls(ModeName.parse(text))

    @property
    def flattened_degree(self) -> int | None:
        """Degree index this mode flattens, or None for NONE."""
        if self.name == ModeName.NONE:
            return None
        return int(self.name) - 1

    def apply(self, degree: int, note: PitchClass) -> PitchClass:
        """
        Apply the mode to the note found at a scale degree.

        Args:
            degree: Degree index (0-based) the note was taken from
            note: The unaltered note at that degree

        Returns:
            The note a semitone lower (same octave) if degree is the
            designated one, otherwise the note unchanged
        """
        if degree != self.flattened_degree:
            return note
        return PitchClass(note.index - 1, note.octave)

    def __str__(self) -> str:
        return self.name.name.lower()

    def __repr__(self) -> str:
        return f"Mode(ModeName.{self.name.name})"
