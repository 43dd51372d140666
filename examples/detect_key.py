#!/usr/bin/env python3
"""
Example: Detect the key of a melody and a chord progression.

This demonstrates the full pipeline - parse notes, evaluate chords in a key,
then classify the result back into a key.

Usage:
    python examples/detect_key.py
"""

import logging

from chuk_music_theory import Chord, Key, PitchClass, StavePosition, analyze, classify


def main() -> None:
    """Run the key detection examples."""
    logging.basicConfig(level=logging.DEBUG)

    # Example 1: A melody written as note names
    print("Melody in C major:")
    melody = ["C4", "D4", "E4", "F4", "G4", "A4", "B4", "C4", "E4", "G4", "C4"]
    print(f"  Detected: {classify(melody)}")

    # Example 2: A progression - abstract degree chords realized in D minor
    print("\nProgression i-iv-v-i realized in D minor:")
    d_minor = Key.from_description("d minor")
    progression = [Chord.triad(degree).chromatic(d_minor) for degree in (0, 3, 4, 0)]
    for chord in progression:
        print("  " + " ".join(str(p) for p in chord))
    print(f"  Detected: {classify(progression)}")

    # Example 3: Notes read off a treble staff
    print("\nTreble staff, lines 1-5:")
    notes = PitchClass.from_treble_clef([StavePosition(line=n) for n in range(1, 6)])
    assert isinstance(notes, list)
    print("  " + " ".join(str(n) for n in notes))
    print(f"  Frequencies: {', '.join(f'{n.frequency():.1f}' for n in notes)}")

    # Example 4: Evidence behind a modal detection
    print("\nC major with a heavy flat third:")
    observations = (
        ["C"] * 5 + ["D"] * 2 + ["Eb"] * 3 + ["E"] + ["F"] * 2 + ["G"] * 4 + ["A"] * 2 + ["B"] * 3
    )
    analysis = analyze(observations)
    print(f"  Key score: {analysis.score}, mode score: {analysis.mode_score}")
    key = analysis.to_key()
    print(f"  Detected: {key}")
    print("  Scale: " + " ".join(str(p) for p in key.get_scale()))


if __name__ == "__main__":
    main()
