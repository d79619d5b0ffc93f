"""
Exceptions raised by the note library.

Parse and construction failures are recoverable and surface as typed errors.
Pitch arithmetic that would fall below C0 is the only arithmetic failure.
"""

from __future__ import annotations

from enum import Enum


class NoteLibError(Exception):
    """Base exception for all note library errors."""

    def __init__(self, message: str, code: str = "NOTE_LIB_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class AbstractNoteParseError(NoteLibError, ValueError):
    """A note name could not be parsed."""

    def __init__(self, message: str, code: str = "PARSE_ERROR") -> None:
        super().__init__(message, code=code)


class EmptyInputError(AbstractNoteParseError):
    """The note name was empty."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="EMPTY_INPUT")


class InvalidNoteError(AbstractNoteParseError):
    """The note letter is not one of A-G."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_NOTE")


class InvalidModifierError(AbstractNoteParseError):
    """The accidental following the letter is not recognized."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_MODIFIER")


class InputTooLongError(AbstractNoteParseError):
    """The note name has more than three characters."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INPUT_TOO_LONG")


class InvalidNoteCharError(NoteLibError, ValueError):
    """A single character does not name a note letter."""

    def __init__(self, message: str, char: str) -> None:
        self.char = char
        super().__init__(message, code="INVALID_NOTE_CHAR")


class InvalidSimpleIntervalKind(str, Enum):
    """Why a quality/number pair does not form a simple interval."""

    INVALID_PERFECT_NUMBER = "invalid_perfect_number"
    INVALID_AUGMENTED_NUMBER = "invalid_augmented_number"
    INVALID_DIMINISHED_NUMBER = "invalid_diminished_number"
    INVALID_MAJOR_NUMBER = "invalid_major_number"
    INVALID_MINOR_NUMBER = "invalid_minor_number"


class InvalidSimpleIntervalError(NoteLibError, ValueError):
    """A quality/number pair has no simple interval (e.g. a perfect third)."""

    def __init__(self, message: str, kind: InvalidSimpleIntervalKind) -> None:
        self.kind = kind
        super().__init__(message, code="INVALID_SIMPLE_INTERVAL")


class SemitoneRangeError(NoteLibError, ArithmeticError):
    """Pitch arithmetic would place a note below C0."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="SEMITONE_RANGE")


class IncongruentNoteError(NoteLibError):
    """Letter arithmetic was attempted on an incongruent note."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INCONGRUENT_NOTE")


class TuningConfigError(NoteLibError):
    """A tuning definition could not be loaded."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="TUNING_CONFIG_ERROR")


class NegativeIntervalError(NoteLibError, ValueError):
    """A compound interval was requested for a negative distance."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="NEGATIVE_INTERVAL")


class EmptyChordError(NoteLibError, ValueError):
    """An operation needs at least one note in the chord."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="EMPTY_CHORD")
