"""
Chord - a stack of scale degrees.

Chords are key-independent: they store degree indices and only become
pitches when evaluated against a Key.
"""

from __future__ import annotations

from dataclasses import dataclass

from .key import Key
from .pitch import PitchClass


@dataclass(frozen=True)
class Chord:
    """
    Scale-degree offsets (0 = tonic) stacked in thirds or arbitrarily.

    Examples:
        Chord.triad(0) = I (degrees 0, 2, 4)
        Chord.dyad(4) = degrees 4, 6
    """

    degrees: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "degrees", tuple(self.degrees))

    @classmethod
    def dyad(cls, base: int) -> Chord:
        """Base degree plus the third above it."""
        return cls((base, base + 2))

    @classmethod
    def triad(cls, base: int) -> Chord:
        """Base degree plus the third and fifth above it."""
        return cls((base, base + 2, base + 4))

    def chromatic(self, key: Key) -> list[PitchClass]:
        """
        Evaluate the chord in a key.

        Degrees past the end of the scale wrap into the next octave, so a
        triad on the submediant of C major is A4 C5 E5.
        """
        pitches = []
        for degree in self.degrees:
            octaves, within = divmod(degree, len(key.scale))
            pitch = key.get(within)
            pitches.append(PitchClass(pitch.index, pitch.octave + octaves))
        return pitches

    def __len__(self) -> int:
        return len(self.degrees)

    def __str__(self) -> str:
        return "{" + " ".join(str(d) for d in self.degrees) + "}"
