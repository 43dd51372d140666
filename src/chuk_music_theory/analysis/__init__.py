"""
Key classification from observed notes and chords.
"""

from chuk_music_theory.analysis.classifier import (
    KeyAnalysis,
    analyze,
    build_histogram,
    classify,
    mode_evidence,
    scale_evidence,
)
from chuk_music_theory.analysis.observations import (
    ChordObservation,
    Observation,
    SingleNote,
    to_observation,
)

__all__ = [
    "KeyAnalysis",
    "analyze",
    "classify",
    "build_histogram",
    "scale_evidence",
    "mode_evidence",
    "Observation",
    "SingleNote",
    "ChordObservation",
    "to_observation",
]
