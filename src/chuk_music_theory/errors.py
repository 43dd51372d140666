"""
Error types.

All errors are ValueErrors so callers that only care about "bad input"
can catch the builtin.
"""


class TheoryError(ValueError):
    """Base class for theory engine errors."""


class ParseError(TheoryError):
    """Text does not match the note, mode or scale-pattern grammar."""


class InvalidDegreeError(TheoryError):
    """A scale degree outside the scale was requested."""


class InvalidInputError(TheoryError):
    """Classification was asked to rank an empty observation set."""


class ConfigError(TheoryError):
    """A config file is missing or malformed."""
