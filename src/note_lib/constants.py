"""
Constants for the note library.

No magic numbers - the semitone arithmetic is expressed in terms of these.
"""

from typing import TypeAlias

# A signed distance in half-steps. Carried as a plain int.
Semitone: TypeAlias = int

# Frequency in hertz.
Hertz: TypeAlias = float

# Octave number, octave 0 is the reference octave (C0).
Octave: TypeAlias = int

SEMITONES_PER_OCTAVE: Semitone = 12

# Concert pitch: A4 = 440 Hz
DEFAULT_REFERENCE_NOTE = "A4"
DEFAULT_REFERENCE_FREQUENCY: Hertz = 440.0

# Name of the tuning used when none is given
DEFAULT_TUNING_NAME = "concert"


class ErrorMessages:
    """Standardized error messages."""

    EMPTY_INPUT = "Cannot parse a note from empty input."
    INPUT_TOO_LONG = "Note name '{value}' is too long. Expected at most 3 characters."
    INVALID_NOTE = "Invalid note letter '{value}'. Expected one of A-G."
    INVALID_MODIFIER = "Invalid modifier '{value}'. Expected '', '#', 'b', '##', 'x' or 'bb'."
    INVALID_NOTE_CHAR = "Invalid note character '{value}'."
    INVALID_OCTAVE = "Invalid octave in note '{value}'."
    INVALID_INTERVAL = "There is no {quality} {number} interval."
    SEMITONE_RANGE = (
        "Cannot add {semitones} semitones to {note}: the result would be "
        "{result} semitones from C0."
    )
    INCONGRUENT_ARITHMETIC = "Incongruent note ({frequency} Hz) has no letter {operation}."
    NEGATIVE_COMPOUND = "Compound intervals must span a non-negative distance, got {semitones}."
    EMPTY_CHORD_INVERSION = "Cannot invert an empty chord."
    TUNING_NOT_FOUND = "Tuning '{name}' not found."
    TUNING_INVALID = "Invalid tuning file '{path}': {reason}"
    TUNING_EXISTS = "Tuning already exists in project: {name}"
    NO_PROJECT_PATH = "No project path configured"
