"""
Chord primitives - ChordQuality, Chord, ChordBuilder, ChordContext.

A chord is an ordered list of notes, lowest first by convention.
Qualities are fixed recipes of semitone offsets from the root; the notes
they produce are spelled with the root's sharp/flat preference.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from note_lib.constants import ErrorMessages, Semitone
from note_lib.core.compound import Interval
from note_lib.core.note import Note
from note_lib.errors import EmptyChordError

logger = logging.getLogger(__name__)


class ChordQuality(Enum):
    """
    Named chord recipes. The value is the short chord symbol suffix.

    Offsets are measured from the root, not stacked: a major triad
    is 0, 4, 7.
    """

    MAJOR = "maj"
    MAJOR_6TH = "maj6"
    MAJOR_7TH = "maj7"
    MAJOR_9TH = "maj9"
    MAJOR_11TH = "maj11"
    MAJOR_13TH = "maj13"
    MINOR = "m"
    MINOR_6TH = "m6"
    MINOR_7TH = "m7"
    MINOR_MAJOR_7TH = "mM7"
    MINOR_9TH = "m9"
    MINOR_11TH = "m11"
    MINOR_13TH = "m13"
    MINOR_MAJOR_7TH_FLAT_13TH = "mM7b13"
    AUGMENTED = "aug"
    AUGMENTED_7TH = "aug7"
    AUGMENTED_MAJOR_7TH = "augM7"
    DIMINISHED = "dim"
    DIMINISHED_7TH = "dim7"
    SUSPENDED_2ND = "sus2"
    SUSPENDED_4TH = "sus4"

    @property
    def offsets(self) -> tuple[Semitone, ...]:
        """Semitone offsets from the root, starting with the root itself."""
        return _OFFSETS[self]

    @property
    def short_name(self) -> str:
        return self.value

    @property
    def long_name(self) -> str:
        return _LONG_NAMES[self]

    def to_intervals(self) -> list[Interval]:
        """The chord tones as intervals above the root, e.g. [PU, M3, P5]."""
        return [Interval.from_semitones(offset) for offset in self.offsets]

    def to_notes(self, root: Note) -> list[Note]:
        """
        Build the chord tones above a root.

        The root is kept as given. Every other tone is spelled with the
        root's sharp/flat preference, so C minor seventh is C, D#, G, A#
        while Db minor seventh is Db, E, Ab, B.

        Args:
            root: Lowest note of the chord

        Returns:
            Notes in offset order
        """
        return [root] + [root.add_semitones(offset) for offset in self.offsets[1:]]

    def to_chord(self, root: Note) -> Chord:
        return Chord(self.to_notes(root))

    def __str__(self) -> str:
        return self.short_name

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return self.long_name
        return format(self.short_name, format_spec)


_OFFSETS: dict[ChordQuality, tuple[Semitone, ...]] = {
    ChordQuality.MAJOR: (0, 4, 7),
    ChordQuality.MAJOR_6TH: (0, 4, 7, 9),
    ChordQuality.MAJOR_7TH: (0, 4, 7, 11),
    ChordQuality.MAJOR_9TH: (0, 4, 7, 11, 14),
    ChordQuality.MAJOR_11TH: (0, 4, 7, 11, 14, 17),
    ChordQuality.MAJOR_13TH: (0, 4, 7, 11, 14, 17, 21),
    ChordQuality.MINOR: (0, 3, 7),
    ChordQuality.MINOR_6TH: (0, 3, 7, 9),
    ChordQuality.MINOR_7TH: (0, 3, 7, 10),
    ChordQuality.MINOR_MAJOR_7TH: (0, 3, 7, 11),
    ChordQuality.MINOR_9TH: (0, 3, 7, 10, 14),
    ChordQuality.MINOR_11TH: (0, 3, 7, 10, 14, 17),
    ChordQuality.MINOR_13TH: (0, 3, 7, 10, 14, 17, 21),
    ChordQuality.MINOR_MAJOR_7TH_FLAT_13TH: (0, 3, 7, 11, 20),
    ChordQuality.AUGMENTED: (0, 4, 8),
    ChordQuality.AUGMENTED_7TH: (0, 4, 8, 10),
    ChordQuality.AUGMENTED_MAJOR_7TH: (0, 4, 8, 11),
    ChordQuality.DIMINISHED: (0, 3, 6),
    ChordQuality.DIMINISHED_7TH: (0, 3, 6, 9),
    ChordQuality.SUSPENDED_2ND: (0, 2, 7),
    ChordQuality.SUSPENDED_4TH: (0, 5, 7),
}

_LONG_NAMES: dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "Major",
    ChordQuality.MAJOR_6TH: "Major 6th",
    ChordQuality.MAJOR_7TH: "Major 7th",
    ChordQuality.MAJOR_9TH: "Major 9th",
    ChordQuality.MAJOR_11TH: "Major 11th",
    ChordQuality.MAJOR_13TH: "Major 13th",
    ChordQuality.MINOR: "Minor",
    ChordQuality.MINOR_6TH: "Minor 6th",
    ChordQuality.MINOR_7TH: "Minor 7th",
    ChordQuality.MINOR_MAJOR_7TH: "Minor Major 7th",
    ChordQuality.MINOR_9TH: "Minor 9th",
    ChordQuality.MINOR_11TH: "Minor 11th",
    ChordQuality.MINOR_13TH: "Minor 13th",
    ChordQuality.MINOR_MAJOR_7TH_FLAT_13TH: "Minor Major 7th Flat 13th",
    ChordQuality.AUGMENTED: "Augmented",
    ChordQuality.AUGMENTED_7TH: "Augmented 7th",
    ChordQuality.AUGMENTED_MAJOR_7TH: "Augmented Major 7th",
    ChordQuality.DIMINISHED: "Diminished",
    ChordQuality.DIMINISHED_7TH: "Diminished 7th",
    ChordQuality.SUSPENDED_2ND: "Suspended 2nd",
    ChordQuality.SUSPENDED_4TH: "Suspended 4th",
}


@dataclass
class Chord:
    """
    An ordered collection of notes.

    Order matters: inversion moves the first note to the top. Equality
    compares the note lists, order included.
    """

    notes: list[Note] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.notes = list(self.notes)

    def add_note(self, note: Note) -> None:
        self.notes.append(note)

    def set_notes(self, notes: Iterable[Note]) -> None:
        self.notes = list(notes)

    def apply_inversion(self, inversion: int) -> Chord:
        """
        Invert the chord, returning a new chord.

        A positive inversion moves the lowest note up an octave to the top,
        once per step. A negative inversion moves the highest note down an
        octave to the bottom. C4 E4 G4 inverted once is E4 G4 C5, inverted
        by -1 it is G3 C4 E4.

        Args:
            inversion: Number of steps, sign gives the direction

        Returns:
            The inverted chord

        Raises:
            EmptyChordError: If the chord has no notes and inversion is not 0
        """
        notes = list(self.notes)
        if inversion == 0:
            return Chord(notes)
        if not notes:
            raise EmptyChordError(ErrorMessages.EMPTY_CHORD_INVERSION)

        for _ in range(inversion):
            lowest = notes.pop(0)
            notes.append(lowest.with_octave(lowest.octave + 1))

        for _ in range(-inversion):
            highest = notes.pop()
            notes.insert(0, highest.with_octave(highest.octave - 1))

        return Chord(notes)

    def __add__(self, other: object) -> Chord:
        if isinstance(other, Note):
            return Chord([*self.notes, other])
        if isinstance(other, Chord):
            return Chord([*self.notes, *other.notes])
        return NotImplemented

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __str__(self) -> str:
        return " ".join(str(note) for note in self.notes)

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return ", ".join(f"{note:#}" for note in self.notes)
        return format(str(self), format_spec)


class ChordBuilder:
    """
    Fluent chord construction.

    ChordBuilder(root).quality(ChordQuality.MINOR).add_note(extra).build()
    gives the root, then the quality's tones (which start with the root
    again), then any added notes.
    """

    def __init__(self, root: Note) -> None:
        self._root = root
        self._quality: ChordQuality | None = None
        self._additions: list[Note] = []

    def quality(self, quality: ChordQuality) -> ChordBuilder:
        self._quality = quality
        return self

    def add_note(self, note: Note) -> ChordBuilder:
        self._additions.append(note)
        return self

    def build(self) -> Chord:
        notes = [self._root]
        if self._quality is not None:
            notes.extend(self._quality.to_notes(self._root))
        notes.extend(self._additions)
        return Chord(notes)


class ChordContext:
    """
    A root and quality pair that owns its computed chord.

    The chord is computed on first access and cached until the root or
    quality changes.
    """

    def __init__(self, root: Note | None = None, quality: ChordQuality = ChordQuality.MAJOR):
        self._root = root if root is not None else Note()
        self._quality = quality
        self._calculated_chord: Chord | None = None

    @property
    def root(self) -> Note:
        return self._root

    @property
    def quality(self) -> ChordQuality:
        return self._quality

    def set_root(self, root: Note) -> None:
        self._root = root
        self._calculated_chord = None

    def set_quality(self, quality: ChordQuality) -> None:
        self._quality = quality
        self._calculated_chord = None

    @property
    def calculated_chord(self) -> Chord:
        if self._calculated_chord is None:
            logger.debug(f"Calculating chord for {self}")
            self._calculated_chord = self._quality.to_chord(self._root)
        return self._calculated_chord

    def __str__(self) -> str:
        return f"{self._root} {self._quality.short_name}"

    def __repr__(self) -> str:
        return f"ChordContext(root={self._root!r}, quality={self._quality!r})"
