"""
Key - a scale rooted at a pitch, optionally altered by a mode.

This is the context that turns scale degrees into pitches, and the target
type of key classification.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from chuk_music_theory.constants import ErrorMessages
from chuk_music_theory.errors import InvalidDegreeError

from .mode import Mode, ModeName, is_mode
from .pitch import PitchClass, is_note
from .scale import MAJOR, MINOR, Scale

if TYPE_CHECKING:
    from chuk_music_theory.config import TheoryConfig


@dataclass(frozen=True)
class Key:
    """
    A root pitch plus MAJOR or MINOR, with an optional mode.

    A root that is free text rather than a note name is read as a key
    description; an explicit scale or mode overrides the described one.

    Examples:
        Key(PitchClass.parse("C")) = C major
        Key("a minor dorian") = Key.from_description("a minor dorian")
        Key("C major", MINOR) = C minor
    """

    root: PitchClass
    scale: Scale = None  # type: ignore[assignment]  # MAJOR unless described
    mode: Mode | None = None

    def __post_init__(self) -> None:
        if isinstance(self.root, str) and not is_note(self.root):
            described = Key.from_description(self.root)
            object.__setattr__(self, "root", described.root)
            if self.scale is None:
                object.__setattr__(self, "scale", described.scale)
            if self.mode is None:
                object.__setattr__(self, "mode", described.mode)
        object.__setattr__(self, "root", PitchClass.coerce(self.root))
        if self.scale is None:
            object.__setattr__(self, "scale", MAJOR)
        if self.scale not in (MAJOR, MINOR):
            raise ValueError(f"Key scale must be major or minor, got {self.scale!r}")
        if self.mode is not None and self.mode.name == ModeName.NONE:
            object.__setattr__(self, "mode", None)

    @classmethod
    def from_description(cls, text: str) -> Key:
        """
        Build a key from free text like 'F# minor' or 'dorian in d'.

        Tokens are classified independently: a note name sets the root,
        'major'/'minor' the scale, a mode name the mode. Anything else is
        ignored and later tokens win. Defaults are C, major, no mode.
        """
        root = PitchClass.parse("C")
        scale = MAJOR
        mode: Mode | None = None

        for word in text.lower().split():
            if is_note(word):
                root = PitchClass.parse(word)
            elif word == "major":
                scale = MAJOR
            elif word == "minor":
                scale = MINOR
            elif is_mode(word):
                mode = Mode.parse(word)

        return cls(root, scale, mode)

    parse = from_description

    @classmethod
    def default(cls, config: TheoryConfig | None = None) -> Key:
        """The configured default key (C major unless overridden)."""
        from chuk_music_theory.config import DEFAULT_CONFIG

        return cls.from_description((config or DEFAULT_CONFIG).default_description)

    @classmethod
    def classify(cls, observations: Iterable[Any], config: TheoryConfig | None = None) -> Key:
        """Guess the key of a collection of notes and chords."""
        from chuk_music_theory.analysis.classifier import classify

        return classify(observations, config)

    def get(self, degree: int) -> PitchClass:
        """
        Resolve a degree index to a pitch.

        Args:
            degree: 0-based degree, 0 <= degree < len(scale)

        Returns:
            The pitch at that degree, in the root's octave, mode applied

        Raises:
            InvalidDegreeError: If degree is outside the scale
        """
        if not 0 <= degree < len(self.scale):
            raise InvalidDegreeError(
                ErrorMessages.INVALID_DEGREE.format(degree=degree, length=len(self.scale))
            )

        note = PitchClass(self.root.index + self.scale.steps[degree], self.root.octave)
        if self.mode is not None:
            note = self.mode.apply(degree, note)
        return note

    def get_scale(self) -> list[PitchClass]:
        """All pitches of the key in degree order."""
        return [self.get(degree) for degree in range(len(self.scale))]

    def get_degree(self, note: PitchClass | str | int) -> int | None:
        """
        Get the degree index of a note, if it's diatonic.

        Returns None for notes outside the scale (accidentals).
        """
        pitch = PitchClass.coerce(note)
        return self.scale.degree_of(pitch.index - self.root.index)

    def get_degrees(self, notes: Iterable[PitchClass | str | int]) -> list[int | None]:
        """Degree index of each note (None where not diatonic)."""
        return [self.get_degree(n) for n in notes]

    def contains(self, note: PitchClass | str | int) -> bool:
        """Whether a note is one of the key's (unaltered) scale members."""
        return self.get_degree(note) is not None

    def __str__(self) -> str:
        result = f"{self.root.name} {self.scale.name}"
        if self.mode is not None:
            result += f" {self.mode}"
        return result

    def __repr__(self) -> str:
        return f"Key({self.root!r}, {self.scale!r}, {self.mode!r})"
