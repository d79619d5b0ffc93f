"""
Pitch primitives - RawNote, Incongruent, NoteModifier, ModifierPreference.

These are the leaf types every other note and interval type is built from.
RawNote is one of the seven natural letters; the semitone gap between
neighbouring letters is irregular (E-F and B-C are half steps).
NoteModifier is the accidental applied to a letter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, TypeAlias

from note_lib.constants import (
    DEFAULT_REFERENCE_FREQUENCY,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
    Hertz,
    Semitone,
)
from note_lib.errors import IncongruentNoteError, InvalidNoteCharError

if TYPE_CHECKING:
    from note_lib.core.note import AbstractNote

# A4 sits 57 semitones above C0
_A4_SEMITONES_FROM_C0: Semitone = 4 * SEMITONES_PER_OCTAVE + 9


def equal_tempered_frequency(
    semitones_from_c0: float,
    reference_semitones: float = _A4_SEMITONES_FROM_C0,
    reference_frequency: Hertz = DEFAULT_REFERENCE_FREQUENCY,
) -> Hertz:
    """
    Frequency of a pitch in 12-tone equal temperament.

    Args:
        semitones_from_c0: Pitch measured in semitones above C0
        reference_semitones: Position of the reference pitch above C0
        reference_frequency: Frequency of the reference pitch

    Returns:
        Frequency in hertz
    """
    offset = semitones_from_c0 - reference_semitones
    return float(reference_frequency * 2.0 ** (offset / SEMITONES_PER_OCTAVE))


class RawNote(Enum):
    """
    The seven natural note letters.

    Ordered C to B. Adjacency wraps (B -> C) and the semitone gap to the
    neighbouring letter is either a whole step or a half step.
    """

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"

    def next_note(self) -> tuple[RawNote, Semitone]:
        """The next letter up and the semitone gap to it."""
        return _NEXT_NOTE[self]

    def prev_note(self) -> tuple[RawNote, Semitone]:
        """The next letter down and the semitone gap to it."""
        return _PREV_NOTE[self]

    def semitones_from_c(self) -> Semitone:
        """Semitones from C up to this letter within one octave."""
        semitones = 0
        current = self
        while current != RawNote.C:
            current, gap = current.prev_note()
            semitones += gap
        return semitones

    def to_hertz(self) -> Hertz:
        """Frequency of this letter in octave 0 (C0 = 16.35 Hz)."""
        return equal_tempered_frequency(self.semitones_from_c())

    @classmethod
    def from_char(cls, char: str) -> RawNote:
        """
        Parse a single note letter (case-insensitive).

        Raises:
            InvalidNoteCharError: If the character is not A-G
        """
        if len(char) != 1 or not char.isalpha():
            raise InvalidNoteCharError(ErrorMessages.INVALID_NOTE_CHAR.format(value=char), char)
        try:
            return cls(char.upper())
        except ValueError:
            raise InvalidNoteCharError(
                ErrorMessages.INVALID_NOTE_CHAR.format(value=char), char
            ) from None

    def __add__(self, modifier: object) -> AbstractNote:
        """RawNote + NoteModifier gives an AbstractNote."""
        if not isinstance(modifier, NoteModifier):
            return NotImplemented
        from note_lib.core.note import AbstractNote

        return AbstractNote(self, modifier)

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        # Letters have no separate verbose form
        if format_spec == "#":
            return self.value
        return format(self.value, format_spec)


_NEXT_NOTE: dict[RawNote, tuple[RawNote, Semitone]] = {
    RawNote.C: (RawNote.D, 2),
    RawNote.D: (RawNote.E, 2),
    RawNote.E: (RawNote.F, 1),
    RawNote.F: (RawNote.G, 2),
    RawNote.G: (RawNote.A, 2),
    RawNote.A: (RawNote.B, 2),
    RawNote.B: (RawNote.C, 1),
}

_PREV_NOTE: dict[RawNote, tuple[RawNote, Semitone]] = {
    note: (prev, gap) for prev, (note, gap) in _NEXT_NOTE.items()
}


@dataclass(frozen=True)
class Incongruent:
    """
    A note that does not fit the 12-tone scale, identified by frequency.

    It carries no letter, so letter arithmetic is not defined for it.
    """

    frequency: Hertz

    def next_note(self) -> tuple[RawNote, Semitone]:
        raise IncongruentNoteError(
            ErrorMessages.INCONGRUENT_ARITHMETIC.format(
                frequency=self.frequency, operation="successor"
            )
        )

    def prev_note(self) -> tuple[RawNote, Semitone]:
        raise IncongruentNoteError(
            ErrorMessages.INCONGRUENT_ARITHMETIC.format(
                frequency=self.frequency, operation="predecessor"
            )
        )

    def semitones_from_c(self) -> Semitone:
        raise IncongruentNoteError(
            ErrorMessages.INCONGRUENT_ARITHMETIC.format(
                frequency=self.frequency, operation="distance from C"
            )
        )

    def to_hertz(self) -> Hertz:
        return self.frequency

    def __str__(self) -> str:
        return "Incongruent"

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return f"Incongruent ({self.frequency} Hz)"
        return format(str(self), format_spec)


# Any raw note, letter or frequency
AnyRawNote: TypeAlias = RawNote | Incongruent


class NoteModifier(IntEnum):
    """
    Accidental applied to a raw note.

    The value is the semitone offset, so ordering matches offset order.
    """

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2

    @property
    def semitones(self) -> Semitone:
        """Semitone offset applied to the raw note."""
        return int(self.value)

    @property
    def symbol(self) -> str:
        return _MODIFIER_SYMBOLS[self]

    @property
    def long_name(self) -> str:
        return _MODIFIER_NAMES[self]

    def preference(self) -> ModifierPreference:
        """The spelling preference implied by this modifier."""
        return ModifierPreference.from_modifier(self)

    def __str__(self) -> str:
        return self.symbol

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return self.long_name
        return format(self.symbol, format_spec)


_MODIFIER_SYMBOLS: dict[NoteModifier, str] = {
    NoteModifier.DOUBLE_FLAT: "bb",
    NoteModifier.FLAT: "b",
    NoteModifier.NATURAL: "",
    NoteModifier.SHARP: "#",
    NoteModifier.DOUBLE_SHARP: "##",
}

_MODIFIER_NAMES: dict[NoteModifier, str] = {
    NoteModifier.DOUBLE_FLAT: "Double Flat",
    NoteModifier.FLAT: "Flat",
    NoteModifier.NATURAL: "Natural",
    NoteModifier.SHARP: "Sharp",
    NoteModifier.DOUBLE_SHARP: "Double Sharp",
}

# Accepted spellings when parsing, "x" is the conventional double sharp glyph
MODIFIER_TOKENS: dict[str, NoteModifier] = {
    "": NoteModifier.NATURAL,
    "#": NoteModifier.SHARP,
    "b": NoteModifier.FLAT,
    "##": NoteModifier.DOUBLE_SHARP,
    "x": NoteModifier.DOUBLE_SHARP,
    "bb": NoteModifier.DOUBLE_FLAT,
}


class ModifierPreference(str, Enum):
    """Whether an ambiguous pitch is spelled with a sharp or a flat."""

    SHARP = "sharp"
    FLAT = "flat"

    @classmethod
    def from_modifier(cls, modifier: NoteModifier) -> ModifierPreference:
        """Naturals and sharps prefer sharps, flats prefer flats."""
        if modifier < NoteModifier.NATURAL:
            return cls.FLAT
        return cls.SHARP
