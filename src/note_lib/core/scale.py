"""
Scale primitives - ScaleDegree, ScaleMode, Scale.

A mode maps each of the eight degrees (first through octave) to an
interval above the root. Scale notes are produced lazily and can be
iterated any number of times.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from note_lib.core.interval import SimpleInterval
from note_lib.core.note import AbstractNote


class ScaleDegree(Enum):
    """Position within a scale, first through octave."""

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    SIXTH = 6
    SEVENTH = 7
    OCTAVE = 8

    @property
    def long_name(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.long_name

    def __format__(self, format_spec: str) -> str:
        return format(self.long_name, "" if format_spec == "#" else format_spec)


class ScaleMode(Enum):
    """
    The seven diatonic modes.

    Ionian is the major scale and Aeolian the natural minor. The others
    differ from those by a single degree:
    Dorian     P1 M2 m3 P4 P5 M6 m7 P8
    Phrygian   P1 m2 m3 P4 P5 m6 m7 P8
    Lydian     P1 M2 M3 A4 P5 M6 M7 P8
    Mixolydian P1 M2 M3 P4 P5 M6 m7 P8
    Locrian    P1 m2 m3 P4 d5 m6 m7 P8
    """

    IONIAN = "ionian"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    AEOLIAN = "aeolian"
    LOCRIAN = "locrian"

    @property
    def long_name(self) -> str:
        return self.name.capitalize()

    def intervals(self) -> tuple[SimpleInterval, ...]:
        """Intervals above the root for every degree, first to octave."""
        return _MODE_INTERVALS[self]

    def interval_at_degree(self, degree: ScaleDegree) -> SimpleInterval:
        """
        The interval from the root to a degree.

        The seventh of Ionian is a major seventh, of Aeolian a minor seventh.
        """
        return _MODE_INTERVALS[self][degree.value - 1]

    def note_at_degree(self, root: AbstractNote, degree: ScaleDegree) -> AbstractNote:
        """The note at a degree, spelled relative to the root."""
        return root.add_interval(self.interval_at_degree(degree))

    def notes(self, root: AbstractNote) -> Iterator[AbstractNote]:
        return scale_notes(root, self)

    def __str__(self) -> str:
        return self.long_name

    def __format__(self, format_spec: str) -> str:
        return format(self.long_name, "" if format_spec == "#" else format_spec)


_P1 = SimpleInterval.PERFECT_UNISON
_P8 = SimpleInterval.PERFECT_OCTAVE

_MODE_INTERVALS: dict[ScaleMode, tuple[SimpleInterval, ...]] = {
    ScaleMode.IONIAN: (
        _P1,
        SimpleInterval.MAJOR_SECOND,
        SimpleInterval.MAJOR_THIRD,
        SimpleInterval.PERFECT_FOURTH,
        SimpleInterval.PERFECT_FIFTH,
        SimpleInterval.MAJOR_SIXTH,
        SimpleInterval.MAJOR_SEVENTH,
        _P8,
    ),
    ScaleMode.DORIAN: (
        _P1,
        SimpleInterval.MAJOR_SECOND,
        SimpleInterval.MINOR_THIRD,
        SimpleInterval.PERFECT_FOURTH,
        SimpleInterval.PERFECT_FIFTH,
        SimpleInterval.MAJOR_SIXTH,
        SimpleInterval.MINOR_SEVENTH,
        _P8,
    ),
    ScaleMode.PHRYGIAN: (
        _P1,
        SimpleInterval.MINOR_SECOND,
        SimpleInterval.MINOR_THIRD,
        SimpleInterval.PERFECT_FOURTH,
        SimpleInterval.PERFECT_FIFTH,
        SimpleInterval.MINOR_SIXTH,
        SimpleInterval.MINOR_SEVENTH,
        _P8,
    ),
    ScaleMode.LYDIAN: (
        _P1,
        SimpleInterval.MAJOR_SECOND,
        SimpleInterval.MAJOR_THIRD,
        SimpleInterval.AUGMENTED_FOURTH,
        SimpleInterval.PERFECT_FIFTH,
        SimpleInterval.MAJOR_SIXTH,
        SimpleInterval.MAJOR_SEVENTH,
        _P8,
    ),
    ScaleMode.MIXOLYDIAN: (
        _P1,
        SimpleInterval.MAJOR_SECOND,
        SimpleInterval.MAJOR_THIRD,
        SimpleInterval.PERFECT_FOURTH,
        SimpleInterval.PERFECT_FIFTH,
        SimpleInterval.MAJOR_SIXTH,
        SimpleInterval.MINOR_SEVENTH,
        _P8,
    ),
    ScaleMode.AEOLIAN: (
        _P1,
        SimpleInterval.MAJOR_SECOND,
        SimpleInterval.MINOR_THIRD,
        SimpleInterval.PERFECT_FOURTH,
        SimpleInterval.PERFECT_FIFTH,
        SimpleInterval.MINOR_SIXTH,
        SimpleInterval.MINOR_SEVENTH,
        _P8,
    ),
    ScaleMode.LOCRIAN: (
        _P1,
        SimpleInterval.MINOR_SECOND,
        SimpleInterval.MINOR_THIRD,
        SimpleInterval.PERFECT_FOURTH,
        SimpleInterval.DIMINISHED_FIFTH,
        SimpleInterval.MINOR_SIXTH,
        SimpleInterval.MINOR_SEVENTH,
        _P8,
    ),
}


def scale_notes(root: AbstractNote, mode: ScaleMode) -> Iterator[AbstractNote]:
    """
    Yield the notes of a mode from the root up to the octave.

    Eight notes, the first and last share a letter. Use itertools.islice
    to take fewer.
    """
    for degree in ScaleDegree:
        yield mode.note_at_degree(root, degree)


@dataclass(frozen=True)
class Scale:
    """
    A mode rooted at a note.

    Iterating gives a fresh generator each time, so a Scale can be
    walked repeatedly.
    """

    root: AbstractNote
    mode: ScaleMode = ScaleMode.IONIAN

    def note_at_degree(self, degree: ScaleDegree) -> AbstractNote:
        return self.mode.note_at_degree(self.root, degree)

    def __iter__(self) -> Iterator[AbstractNote]:
        return scale_notes(self.root, self.mode)

    def __str__(self) -> str:
        return f"{self.root} {self.mode}"
