"""
Scale primitives - Scale, MAJOR, MINOR.

A scale is the list of cumulative semitone offsets of its degrees from the
root. Scales are written as step patterns (W = whole, H = half) and the
offsets are accumulated once at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_music_theory.constants import (
    DEGREE_NAMES,
    MAJOR_PATTERN,
    MINOR_PATTERN,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_music_theory.errors import ParseError

_STEP_SIZES: dict[str, int] = {
    "w": 2,
    "t": 2,
    "2": 2,
    "h": 1,
    "s": 1,
    "1": 1,
}


@dataclass(frozen=True)
class Scale:
    """
    Cumulative semitone offsets of each scale degree, starting at 0.

    Immutable and hashable.
    """

    steps: tuple[int, ...]
    name: str = ""

    MAJOR: ClassVar[Scale]
    MINOR: ClassVar[Scale]

    @classmethod
    def from_pattern(cls, pattern: str, name: str = "") -> Scale:
        """
        Build a scale from a step pattern like 'W W H W W W H'.

        W/T/2 are whole steps, H/S/1 half steps; whitespace is ignored.
        The steps must close the octave; the closing offset (12) is dropped.

        Raises:
            ParseError: On an unknown step or steps that don't sum to 12
        """
        offsets = [0]
        for step in pattern.lower():
            if step.isspace():
                continue
            if step not in _STEP_SIZES:
                raise ParseError(ErrorMessages.INVALID_STEP.format(step=step, pattern=pattern))
            offsets.append(offsets[-1] + _STEP_SIZES[step])

        total = offsets.pop()
        if total != SEMITONES_PER_OCTAVE:
            raise ParseError(ErrorMessages.INVALID_SCALE_TOTAL.format(total=total))
        return cls(tuple(offsets), name)

    def __len__(self) -> int:
        return len(self.steps)

    def contains(self, offset: int) -> bool:
        """Whether a semitone offset from the root is a scale member."""
        return offset % SEMITONES_PER_OCTAVE in self.steps

    def degree_of(self, offset: int) -> int | None:
        """Degree index (0-based) of an offset from the root, or None."""
        offset %= SEMITONES_PER_OCTAVE
        if offset not in self.steps:
            return None
        return self.steps.index(offset)

    def pitch_set(self, root_index: int) -> frozenset[int]:
        """Pitch indices of this scale on a given root."""
        return frozenset((root_index + s) % SEMITONES_PER_OCTAVE for s in self.steps)

    @staticmethod
    def degree_name(degree: int) -> str:
        """Functional name of a degree index (0 = tonic)."""
        return DEGREE_NAMES[degree % len(DEGREE_NAMES)]

    def __str__(self) -> str:
        return self.name or f"Scale({self.steps})"

    def __repr__(self) -> str:
        if self.name:
            return f"Scale.{self.name.upper()}"
        return f"Scale({self.steps!r})"


Scale.MAJOR = Scale.from_pattern(MAJOR_PATTERN, "major")
Scale.MINOR = Scale.from_pattern(MINOR_PATTERN, "minor")

MAJOR = Scale.MAJOR
MINOR = Scale.MINOR
