"""
Note primitives - AbstractNote and Note.

AbstractNote is a letter plus accidental with no octave; it is the unit used
for spelling decisions (enharmonic bias, scale construction). Note places an
AbstractNote at an octave and converts to and from semitones above C0.

Converting a note to semitones is lossy: C# and Db are the same pitch. The
reverse conversion needs a ModifierPreference to pick a spelling.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from note_lib.constants import SEMITONES_PER_OCTAVE, ErrorMessages, Hertz, Octave, Semitone
from note_lib.core.interval import SimpleInterval
from note_lib.core.pitch import (
    MODIFIER_TOKENS,
    AnyRawNote,
    Incongruent,
    ModifierPreference,
    NoteModifier,
    RawNote,
    equal_tempered_frequency,
)
from note_lib.errors import (
    AbstractNoteParseError,
    EmptyInputError,
    InputTooLongError,
    InvalidModifierError,
    InvalidNoteError,
    SemitoneRangeError,
)

if TYPE_CHECKING:
    from note_lib.config.tuning import Tuning
    from note_lib.core.chord import Chord

_MAX_NOTE_NAME_LENGTH = 3
_OCTAVE_SUFFIX = re.compile(r"(-?\d+)$")


@dataclass(frozen=True)
class AbstractNote:
    """
    A note letter with a modifier and no octave, e.g. C#, Bb, Fx.

    Immutable and hashable.
    """

    raw_note: AnyRawNote = RawNote.C
    modifier: NoteModifier = NoteModifier.NATURAL

    @classmethod
    def parse(cls, value: str) -> AbstractNote:
        """
        Parse a note name like 'C', 'c#', 'Bbb' or 'Fx'.

        Args:
            value: Note name, at most 3 characters after trimming

        Returns:
            Parsed AbstractNote

        Raises:
            EmptyInputError: If the input is empty
            InputTooLongError: If the input has more than 3 characters
            InvalidNoteError: If the letter is not A-G
            InvalidModifierError: If the accidental is not recognized
        """
        trimmed = value.strip()
        if not trimmed:
            raise EmptyInputError(ErrorMessages.EMPTY_INPUT)
        if len(trimmed) > _MAX_NOTE_NAME_LENGTH:
            raise InputTooLongError(ErrorMessages.INPUT_TOO_LONG.format(value=trimmed))

        letter, rest = trimmed[0], trimmed[1:]
        try:
            raw_note = RawNote(letter.upper())
        except ValueError:
            raise InvalidNoteError(ErrorMessages.INVALID_NOTE.format(value=letter)) from None

        modifier = MODIFIER_TOKENS.get(rest)
        if modifier is None:
            raise InvalidModifierError(ErrorMessages.INVALID_MODIFIER.format(value=rest))

        return cls(raw_note, modifier)

    # Conversion-style alias
    try_from = parse

    def at_octave(self, octave: Octave) -> Note:
        """Place this note at an octave."""
        return Note(self.raw_note, octave, self.modifier)

    def interval_from_c(self) -> SimpleInterval:
        """
        The interval from C up to this note.

        Cb wraps to a major seventh and B# to a perfect octave.
        """
        semitones = self.raw_note.semitones_from_c() + self.modifier.semitones
        return SimpleInterval.from_semitones(semitones).interval

    @classmethod
    def from_interval_from_c(
        cls, interval: SimpleInterval, modifier_preference: ModifierPreference
    ) -> AbstractNote:
        """
        Spell the note that lies an interval above C.

        Pitches between two letters are spelled as a sharp of the lower
        letter or a flat of the upper one, depending on the preference.
        """
        remaining = interval.semitones()
        note = RawNote.C
        modifier = NoteModifier.NATURAL

        while remaining > 0:
            next_note, gap = note.next_note()
            if remaining >= gap:
                note = next_note
                remaining -= gap
            else:
                if modifier_preference == ModifierPreference.SHARP:
                    modifier = NoteModifier.SHARP
                else:
                    note = next_note
                    modifier = NoteModifier.FLAT
                remaining -= 1

        return cls(note, modifier)

    def add_interval(self, interval: SimpleInterval) -> AbstractNote:
        return self.add_semitones(interval.semitones())

    def add_semitones(self, semitones: Semitone) -> AbstractNote:
        """
        Transpose by a number of semitones, keeping the octave-less spelling.

        The result is spelled with the same kind of accidental as this note
        where an enharmonic spelling allows it.
        """
        if semitones == 0:
            return self

        new_interval = self.interval_from_c().add_semitones(semitones).interval
        respelled = AbstractNote.from_interval_from_c(new_interval, self.modifier.preference())
        return bias_abstract_note_to_enharmonic_equivalent(respelled, self.modifier)

    def _with_modifier_shift(self, modifier: NoteModifier, sign: int) -> AbstractNote:
        shifted = self.interval_from_c() + sign * modifier.semitones
        return AbstractNote.from_interval_from_c(shifted, modifier.preference())

    def __add__(self, other: object) -> AbstractNote:
        if isinstance(other, NoteModifier):
            return self._with_modifier_shift(other, 1)
        if isinstance(other, SimpleInterval):
            return self.add_interval(other)
        if isinstance(other, int):
            return self.add_semitones(other)
        return NotImplemented

    def __sub__(self, other: object) -> AbstractNote:
        if isinstance(other, NoteModifier):
            return self._with_modifier_shift(other, -1)
        if isinstance(other, SimpleInterval):
            return self.add_semitones(-other.semitones())
        if isinstance(other, int):
            return self.add_semitones(-other)
        return NotImplemented

    @property
    def long_name(self) -> str:
        if self.modifier == NoteModifier.NATURAL:
            return str(self.raw_note)
        return f"{self.raw_note} {self.modifier:#}"

    def __str__(self) -> str:
        return f"{self.raw_note}{self.modifier}"

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return self.long_name
        return format(str(self), format_spec)


def bias_abstract_note_to_enharmonic_equivalent(
    note: AbstractNote, bias: NoteModifier
) -> AbstractNote:
    """
    Respell a note with the given modifier, if an enharmonic spelling exists.

    C# biased to flat is Db. C# biased to double flat has no equivalent,
    so C# is returned.

    Walks letter by letter toward the target spelling (down when the target
    modifier is higher, up when it is lower) until the accumulated letter
    distance matches the modifier difference exactly, or overshoots it.

    Args:
        note: Note to respell
        bias: Preferred modifier

    Returns:
        The enharmonically equivalent note with that modifier, or the input
    """
    if note.modifier == bias:
        return note

    descending = note.modifier < bias
    target = abs(bias - note.modifier)
    raw_note = note.raw_note
    distance = 0

    while distance < target:
        raw_note, gap = raw_note.prev_note() if descending else raw_note.next_note()
        distance += gap

    if distance == target:
        return AbstractNote(raw_note, bias)
    return note


@dataclass(frozen=True)
class Note:
    """
    A note placed at an octave, e.g. C#4.

    Octave 0 is the reference: C0 is 0 semitones. Scientific pitch
    numbering, so C4 is middle C and A4 is 440 Hz in concert tuning.
    """

    raw_note: AnyRawNote = RawNote.C
    octave: Octave = 0
    modifier: NoteModifier = NoteModifier.NATURAL

    @classmethod
    def parse(cls, value: str) -> Note:
        """
        Parse a note with octave like 'C4', 'Eb3', 'F#-1'.

        Raises:
            AbstractNoteParseError: If the note name or octave is invalid
        """
        trimmed = value.strip()
        if not trimmed:
            raise EmptyInputError(ErrorMessages.EMPTY_INPUT)

        match = _OCTAVE_SUFFIX.search(trimmed)
        if match is None:
            raise AbstractNoteParseError(
                ErrorMessages.INVALID_OCTAVE.format(value=trimmed), code="INVALID_OCTAVE"
            )

        abstract_note = AbstractNote.parse(trimmed[: match.start()])
        return abstract_note.at_octave(int(match.group(1)))

    @property
    def abstract_note(self) -> AbstractNote:
        return AbstractNote(self.raw_note, self.modifier)

    def with_octave(self, octave: Octave) -> Note:
        """Same spelling at a different octave."""
        return replace(self, octave=octave)

    def to_semitones_from_c0(self) -> Semitone:
        """Semitones above C0. Cb0 is -1."""
        return (
            self.raw_note.semitones_from_c()
            + self.octave * SEMITONES_PER_OCTAVE
            + self.modifier.semitones
        )

    @classmethod
    def from_semitones_from_c0(
        cls,
        semitones: Semitone,
        modifier_preference: ModifierPreference = ModifierPreference.SHARP,
    ) -> Note:
        """
        Build the note a number of semitones above C0.

        Args:
            semitones: Semitones above C0
            modifier_preference: Spell in-between pitches with sharps or flats

        Returns:
            The note, spelled without naming an octave as an interval
        """
        decomposed = SimpleInterval.from_semitones(semitones)
        interval, octave = decomposed.interval, decomposed.octave_overflow

        # An exact octave is a unison in the next octave up
        if interval == SimpleInterval.PERFECT_OCTAVE:
            interval = SimpleInterval.PERFECT_UNISON
            octave += 1

        return AbstractNote.from_interval_from_c(interval, modifier_preference).at_octave(octave)

    def add_semitones(self, semitones: Semitone) -> Note:
        """
        Transpose by a number of semitones.

        Raises:
            SemitoneRangeError: If the result would be below C0
        """
        result = self.to_semitones_from_c0() + semitones
        if result < 0:
            raise SemitoneRangeError(
                ErrorMessages.SEMITONE_RANGE.format(semitones=semitones, note=self, result=result)
            )
        return Note.from_semitones_from_c0(result, self.modifier.preference())

    def to_hertz(self, tuning: Tuning | None = None) -> Hertz:
        """
        Frequency of this note.

        Args:
            tuning: Reference tuning (default: A4 = 440 Hz)

        Returns:
            Frequency in hertz
        """
        if isinstance(self.raw_note, Incongruent):
            return float(self.raw_note.frequency * 2.0**self.octave)
        if tuning is not None:
            return tuning.frequency_of(self)
        return equal_tempered_frequency(self.to_semitones_from_c0())

    def __add__(self, other: object) -> Chord:
        """Note + Note gives a two-note Chord."""
        if not isinstance(other, Note):
            return NotImplemented
        from note_lib.core.chord import Chord

        return Chord([self, other])

    @property
    def long_name(self) -> str:
        return f"{self.abstract_note:#} {self.octave}"

    def __str__(self) -> str:
        return f"{self.abstract_note}{self.octave}"

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return self.long_name
        return format(str(self), format_spec)
