"""
Observations - what the key classifier counts.

An observation is either a single note or a sounded chord (its concrete
pitches). Abstract Chords must be evaluated against a key first.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from chuk_music_theory.core.chord import Chord
from chuk_music_theory.core.pitch import PitchClass


@dataclass(frozen=True)
class SingleNote:
    """One sounded note."""

    note: PitchClass


@dataclass(frozen=True)
class ChordObservation:
    """Several notes sounded together; each one is counted."""

    notes: tuple[PitchClass, ...]

    @classmethod
    def of(cls, notes: Iterable[PitchClass | str | int]) -> ChordObservation:
        return cls(tuple(PitchClass.coerce(n) for n in notes))


Observation = SingleNote | ChordObservation


def to_observation(value: Any) -> Observation:
    """
    Lift a raw value into an Observation.

    PitchClass, note names and indices become SingleNote; any other iterable
    of those becomes a ChordObservation. Existing observations pass through.

    Raises:
        TypeError: For abstract Chords and values that aren't note-like
    """
    if isinstance(value, (SingleNote, ChordObservation)):
        return value
    if isinstance(value, Chord):
        raise TypeError(f"Chord {value} has no pitches until evaluated with chromatic(key)")
    if isinstance(value, (PitchClass, str, int)):
        return SingleNote(PitchClass.coerce(value))
    if isinstance(value, Iterable):
        return ChordObservation.of(value)
    raise TypeError(f"Cannot observe {value!r}")
