"""
Key classification - guess the key of an unordered bag of notes.

The heuristic works on a 12-bin pitch-class histogram:

1. Every candidate root scores the notes its major (and minor) scale
   explains, minus the notes it doesn't.
2. Every pitch class scores as a flattened degree: observing a note
   credits the pitch a semitone above it, and debits the note itself.
3. The best major and best minor root compete; the winner's scale members
   are the only degrees a mode may flatten.
4. A mode is attached only when its evidence is within an order of
   magnitude of the key's own evidence. Weaker off-scale notes are treated
   as accidentals.

Each step is a pure function over plain int lists so it can be tested on
its own.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, Field

from chuk_music_theory.config import DEFAULT_CONFIG, TheoryConfig
from chuk_music_theory.constants import SEMITONES_PER_OCTAVE, ErrorMessages, ScaleName
from chuk_music_theory.core.key import Key
from chuk_music_theory.core.mode import Mode, ModeName
from chuk_music_theory.core.pitch import PitchClass
from chuk_music_theory.core.scale import MAJOR, MINOR, Scale
from chuk_music_theory.errors import InvalidInputError

from .observations import ChordObservation, Observation, SingleNote, to_observation

logger = logging.getLogger(__name__)


class KeyAnalysis(BaseModel):
    """Evidence behind a classification, plus the chosen key."""

    histogram: list[int] = Field(..., description="Occurrences of each pitch index")
    major_evidence: list[int] = Field(..., description="Major-scale score per root")
    minor_evidence: list[int] = Field(..., description="Minor-scale score per root")
    mode_evidence: list[int] = Field(..., description="Flattened-degree score per pitch")
    root: int = Field(..., ge=0, lt=12, description="Winning root pitch index")
    scale: ScaleName = Field(..., description="Winning scale")
    score: int = Field(..., description="Evidence for the winning root and scale")
    mode: ModeName | None = Field(None, description="Attached mode, if any")
    mode_score: int | None = Field(None, description="Evidence for the best mode candidate")

    model_config = {"frozen": True}

    def to_key(self) -> Key:
        """Build the classified Key."""
        scale = MAJOR if self.scale == "major" else MINOR
        mode = Mode(self.mode) if self.mode is not None else None
        return Key(PitchClass(self.root), scale, mode)


def build_histogram(observations: Iterable[Observation]) -> list[int]:
    """Count occurrences of each pitch index; chords count every member."""
    bins = [0] * SEMITONES_PER_OCTAVE
    for observation in observations:
        match observation:
            case SingleNote(note=note):
                bins[note.index] += 1
            case ChordObservation(notes=notes):
                for note in notes:
                    bins[note.index] += 1
    return bins


def scale_evidence(histogram: Sequence[int], scale: Scale) -> list[int]:
    """
    Score every root for a scale.

    For each root, notes on a scale step add their count and notes off the
    scale subtract it.
    """
    evidence = [0] * SEMITONES_PER_OCTAVE
    for root in range(SEMITONES_PER_OCTAVE):
        for step in range(SEMITONES_PER_OCTAVE):
            count = histogram[(root + step) % SEMITONES_PER_OCTAVE]
            evidence[root] += count if scale.contains(step) else -count
    return evidence


def mode_evidence(histogram: Sequence[int]) -> list[int]:
    """
    Score every pitch as a flattened degree.

    A note credits the pitch a semitone above it (flattening that pitch
    would produce the note) and debits itself (a flattened degree would
    not sound).
    """
    evidence = [0] * SEMITONES_PER_OCTAVE
    for pitch, count in enumerate(histogram):
        evidence[(pitch + 1) % SEMITONES_PER_OCTAVE] += count
        evidence[pitch] -= count
    return evidence


def argmax(values: Sequence[int]) -> int:
    """Index of the largest value (first one on ties)."""
    best = 0
    for i in range(1, len(values)):
        if values[i] > values[best]:
            best = i
    return best


def argmax_among(values: Sequence[int], candidates: Iterable[int]) -> int | None:
    """Like argmax, limited to candidate indices; None if there are none."""
    best: int | None = None
    for i in sorted(candidates):
        if best is None or values[i] > values[best]:
            best = i
    return best


def same_order(a: float, b: float, base: float = 10.0) -> bool:
    """Whether two positive values are within one order of magnitude."""
    return abs(math.log(a) - math.log(b)) / math.log(base) < 1


def mode_candidates(key: Key) -> list[int]:
    """
    Pitch indices of the degrees a mode could flatten in this key.

    A degree whose lower neighbour is already diatonic (C and F in C major)
    can't be flattened without doubling that neighbour, so it is excluded.
    """
    members = key.scale.pitch_set(key.root.index)
    return sorted(p for p in members if (p - 1) % SEMITONES_PER_OCTAVE not in members)


def _major_wins(
    major_score: int, minor_score: int, major_tonic: int, minor_tonic: int
) -> bool:
    # Relative major/minor share a pitch set, so ties are common; the more
    # heard tonic of the two argmax roots decides, then major. Ties between
    # roots of the same scale were already settled by lowest index.
    if major_score != minor_score:
        return major_score > minor_score
    return major_tonic >= minor_tonic


def analyze(observations: Iterable[Any], config: TheoryConfig | None = None) -> KeyAnalysis:
    """
    Classify observations and keep the evidence.

    Args:
        observations: Notes (PitchClass, names, indices), sounded chords
            (iterables of notes) or Observation values
        config: Tunables; DEFAULT_CONFIG when omitted

    Returns:
        KeyAnalysis with histogram, evidence arrays and the chosen key

    Raises:
        InvalidInputError: If nothing was observed
        TypeError: If an observation isn't note-like
    """
    config = config or DEFAULT_CONFIG
    histogram = build_histogram(to_observation(v) for v in observations)
    if not any(histogram):
        raise InvalidInputError(ErrorMessages.EMPTY_OBSERVATIONS)

    major = scale_evidence(histogram, MAJOR)
    minor = scale_evidence(histogram, MINOR)
    best_major = argmax(major)
    best_minor = argmax(minor)

    scale_name: ScaleName
    if _major_wins(
        major[best_major], minor[best_minor], histogram[best_major], histogram[best_minor]
    ):
        root, scale_name, score = best_major, "major", major[best_major]
    else:
        root, scale_name, score = best_minor, "minor", minor[best_minor]

    base_key = Key(PitchClass(root), MAJOR if scale_name == "major" else MINOR)
    modes = mode_evidence(histogram)
    best_mode = argmax_among(modes, mode_candidates(base_key))

    mode: ModeName | None = None
    mode_score: int | None = None
    if best_mode is not None:
        mode_score = modes[best_mode]
        if score > 0 and mode_score > 0 and same_order(score, mode_score, config.magnitude_base):
            offset = (best_mode - root) % SEMITONES_PER_OCTAVE
            mode = ModeName(base_key.scale.steps.index(offset) + 1)

    logger.debug(
        f"Classified {sum(histogram)} notes: {base_key} (score {score}), "
        f"mode {mode.name.lower() if mode is not None else 'none'} (score {mode_score})"
    )

    return KeyAnalysis(
        histogram=histogram,
        major_evidence=major,
        minor_evidence=minor,
        mode_evidence=modes,
        root=root,
        scale=scale_name,
        score=score,
        mode=mode,
        mode_score=mode_score,
    )


def classify(observations: Iterable[Any], config: TheoryConfig | None = None) -> Key:
    """Guess the most likely key of a collection of notes and chords."""
    return analyze(observations, config).to_key()
