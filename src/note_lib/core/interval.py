"""
Simple interval primitives - IntervalQuality, SimpleIntervalNumber, SimpleInterval.

A simple interval spans at most one octave (0-12 semitones). Unlike a bare
semitone count, it keeps its spelling: an augmented fourth and a diminished
fifth are both 6 semitones but are different intervals.

Semitone counts are decomposed into (interval, octave_overflow) pairs by
SimpleIntervalFromSemitones. Arithmetic re-biases the result toward the
quality of the left operand, so M3 + m2 lands on P4 rather than on A3.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering

from note_lib.constants import SEMITONES_PER_OCTAVE, ErrorMessages, Semitone
from note_lib.errors import InvalidSimpleIntervalError, InvalidSimpleIntervalKind


class IntervalQuality(Enum):
    """
    Interval quality.

    Partially ordered: diminished < minor < major < augmented and
    diminished < perfect < augmented. Perfect is not comparable with
    major or minor.
    """

    PERFECT = "P"
    MAJOR = "M"
    MINOR = "m"
    AUGMENTED = "A"
    DIMINISHED = "d"

    @property
    def long_name(self) -> str:
        return self.name.capitalize()

    def inverse(self) -> IntervalQuality:
        """The quality an interval takes when inverted."""
        return _QUALITY_INVERSES[self]

    def _comparable(self, other: IntervalQuality) -> bool:
        imperfect = (IntervalQuality.MAJOR, IntervalQuality.MINOR)
        if self == IntervalQuality.PERFECT:
            return other not in imperfect
        if other == IntervalQuality.PERFECT:
            return self not in imperfect
        return True

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IntervalQuality):
            return NotImplemented
        return self._comparable(other) and _QUALITY_RANK[self] < _QUALITY_RANK[other]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, IntervalQuality):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, IntervalQuality):
            return NotImplemented
        return self._comparable(other) and _QUALITY_RANK[self] > _QUALITY_RANK[other]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, IntervalQuality):
            return NotImplemented
        return self == other or self > other

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return self.long_name
        return format(self.value, format_spec)


_QUALITY_RANK: dict[IntervalQuality, float] = {
    IntervalQuality.DIMINISHED: 0,
    IntervalQuality.MINOR: 1,
    IntervalQuality.PERFECT: 1.5,
    IntervalQuality.MAJOR: 2,
    IntervalQuality.AUGMENTED: 3,
}

_QUALITY_INVERSES: dict[IntervalQuality, IntervalQuality] = {
    IntervalQuality.PERFECT: IntervalQuality.PERFECT,
    IntervalQuality.MAJOR: IntervalQuality.MINOR,
    IntervalQuality.MINOR: IntervalQuality.MAJOR,
    IntervalQuality.AUGMENTED: IntervalQuality.DIMINISHED,
    IntervalQuality.DIMINISHED: IntervalQuality.AUGMENTED,
}


class SimpleIntervalNumber(IntEnum):
    """Diatonic number of a simple interval. A unison is 1, not 0."""

    UNISON = 1
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

    def inverse(self) -> SimpleIntervalNumber:
        """Inverted numbers always sum to 9."""
        return SimpleIntervalNumber(9 - self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return self.long_name
        return format(str(self.value), format_spec)


@total_ordering
class SimpleInterval(Enum):
    """
    Every interval spelling within one octave.

    Members are declared smallest to largest, beyond enharmonic equivalence:
    a minor third is "larger" than an augmented second. The value is the
    short notation.
    """

    PERFECT_UNISON = "PU"
    DIMINISHED_SECOND = "d2"

    AUGMENTED_UNISON = "A1"
    MINOR_SECOND = "m2"

    MAJOR_SECOND = "M2"
    DIMINISHED_THIRD = "d3"

    AUGMENTED_SECOND = "A2"
    MINOR_THIRD = "m3"

    MAJOR_THIRD = "M3"
    DIMINISHED_FOURTH = "d4"

    AUGMENTED_THIRD = "A3"
    PERFECT_FOURTH = "P4"

    DIMINISHED_FIFTH = "d5"
    AUGMENTED_FOURTH = "A4"

    PERFECT_FIFTH = "P5"
    DIMINISHED_SIXTH = "d6"

    AUGMENTED_FIFTH = "A5"
    MINOR_SIXTH = "m6"

    MAJOR_SIXTH = "M6"
    DIMINISHED_SEVENTH = "d7"

    AUGMENTED_SIXTH = "A6"
    MINOR_SEVENTH = "m7"

    MAJOR_SEVENTH = "M7"
    DIMINISHED_OCTAVE = "d8"

    AUGMENTED_SEVENTH = "A7"
    PERFECT_OCTAVE = "P8"

    @classmethod
    def from_quality_and_number(
        cls, quality: IntervalQuality, number: SimpleIntervalNumber
    ) -> SimpleInterval:
        """
        Find the interval with the given quality and number.

        Some combinations do not exist, there is no major unison
        or perfect third.

        Args:
            quality: Interval quality
            number: Diatonic number

        Returns:
            The matching SimpleInterval

        Raises:
            InvalidSimpleIntervalError: If no interval has this quality and number
        """
        interval = _BY_SPELLING.get((quality, number))
        if interval is None:
            raise InvalidSimpleIntervalError(
                ErrorMessages.INVALID_INTERVAL.format(
                    quality=format(quality, "#").lower(), number=format(number, "#").lower()
                ),
                _INVALID_KINDS[quality],
            )
        return interval

    @classmethod
    def from_semitones(cls, semitones: Semitone) -> SimpleIntervalFromSemitones:
        """
        Decompose a semitone count into an interval and octave overflow.

        SimpleInterval.from_semitones(5)  -> (P4, 0)
        SimpleInterval.from_semitones(-5) -> (P5, -1)
        SimpleInterval.from_semitones(13) -> (m2, 1)
        """
        return SimpleIntervalFromSemitones.new(semitones)

    def semitones(self) -> Semitone:
        """Number of semitones this interval spans."""
        return _SEMITONES[self]

    def interval_number(self) -> SimpleIntervalNumber:
        """Diatonic number, e.g. THIRD for a minor third."""
        return _SPELLING[self][1]

    def quality(self) -> IntervalQuality:
        """Quality, e.g. MINOR for a minor third."""
        return _SPELLING[self][0]

    def inverse(self) -> SimpleInterval:
        """
        Invert the interval within the octave.

        m3 -> M6, P4 -> P5, A4 -> d5. Numbers of an interval and its
        inverse add to 9; major and minor swap, augmented and diminished
        swap, perfect stays perfect.
        """
        return _INVERSES[self]

    def add_semitones(self, semitones: Semitone) -> SimpleIntervalFromSemitones:
        """
        Add semitones, wrapping past the octave into octave_overflow.

        The result is the canonical spelling for the new distance
        (perfect, major or minor, and d5 for the tritone).
        """
        return SimpleIntervalFromSemitones.new(self.semitones()).add_semitones(semitones)

    @property
    def long_name(self) -> str:
        return f"{self.quality():#} {self.interval_number():#}"

    def __add__(self, other: object) -> SimpleInterval:
        if isinstance(other, SimpleInterval):
            other = other.semitones()
        if not isinstance(other, int):
            return NotImplemented
        return bias_simple_interval_quality(self.add_semitones(other).interval, self.quality())

    def __sub__(self, other: object) -> SimpleInterval:
        if isinstance(other, SimpleInterval):
            other = other.semitones()
        if not isinstance(other, int):
            return NotImplemented
        return bias_simple_interval_quality(self.add_semitones(-other).interval, self.quality())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SimpleInterval):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return self.long_name
        return format(self.value, format_spec)


_ORDER: dict[SimpleInterval, int] = {interval: i for i, interval in enumerate(SimpleInterval)}

_P = IntervalQuality.PERFECT
_M = IntervalQuality.MAJOR
_m = IntervalQuality.MINOR
_A = IntervalQuality.AUGMENTED
_d = IntervalQuality.DIMINISHED
_N = SimpleIntervalNumber

_SPELLING: dict[SimpleInterval, tuple[IntervalQuality, SimpleIntervalNumber]] = {
    SimpleInterval.PERFECT_UNISON: (_P, _N.UNISON),
    SimpleInterval.DIMINISHED_SECOND: (_d, _N.SECOND),
    SimpleInterval.AUGMENTED_UNISON: (_A, _N.UNISON),
    SimpleInterval.MINOR_SECOND: (_m, _N.SECOND),
    SimpleInterval.MAJOR_SECOND: (_M, _N.SECOND),
    SimpleInterval.DIMINISHED_THIRD: (_d, _N.THIRD),
    SimpleInterval.AUGMENTED_SECOND: (_A, _N.SECOND),
    SimpleInterval.MINOR_THIRD: (_m, _N.THIRD),
    SimpleInterval.MAJOR_THIRD: (_M, _N.THIRD),
    SimpleInterval.DIMINISHED_FOURTH: (_d, _N.FOURTH),
    SimpleInterval.AUGMENTED_THIRD: (_A, _N.THIRD),
    SimpleInterval.PERFECT_FOURTH: (_P, _N.FOURTH),
    SimpleInterval.DIMINISHED_FIFTH: (_d, _N.FIFTH),
    SimpleInterval.AUGMENTED_FOURTH: (_A, _N.FOURTH),
    SimpleInterval.PERFECT_FIFTH: (_P, _N.FIFTH),
    SimpleInterval.DIMINISHED_SIXTH: (_d, _N.SIXTH),
    SimpleInterval.AUGMENTED_FIFTH: (_A, _N.FIFTH),
    SimpleInterval.MINOR_SIXTH: (_m, _N.SIXTH),
    SimpleInterval.MAJOR_SIXTH: (_M, _N.SIXTH),
    SimpleInterval.DIMINISHED_SEVENTH: (_d, _N.SEVENTH),
    SimpleInterval.AUGMENTED_SIXTH: (_A, _N.SIXTH),
    SimpleInterval.MINOR_SEVENTH: (_m, _N.SEVENTH),
    SimpleInterval.MAJOR_SEVENTH: (_M, _N.SEVENTH),
    SimpleInterval.DIMINISHED_OCTAVE: (_d, _N.OCTAVE),
    SimpleInterval.AUGMENTED_SEVENTH: (_A, _N.SEVENTH),
    SimpleInterval.PERFECT_OCTAVE: (_P, _N.OCTAVE),
}

_BY_SPELLING: dict[tuple[IntervalQuality, SimpleIntervalNumber], SimpleInterval] = {
    spelling: interval for interval, spelling in _SPELLING.items()
}

_INVALID_KINDS: dict[IntervalQuality, InvalidSimpleIntervalKind] = {
    _P: InvalidSimpleIntervalKind.INVALID_PERFECT_NUMBER,
    _M: InvalidSimpleIntervalKind.INVALID_MAJOR_NUMBER,
    _m: InvalidSimpleIntervalKind.INVALID_MINOR_NUMBER,
    _A: InvalidSimpleIntervalKind.INVALID_AUGMENTED_NUMBER,
    _d: InvalidSimpleIntervalKind.INVALID_DIMINISHED_NUMBER,
}

# Enharmonic pairs are declared next to each other, two per semitone step
_SEMITONES: dict[SimpleInterval, Semitone] = {
    interval: i // 2 for i, interval in enumerate(SimpleInterval)
}

_INVERSES: dict[SimpleInterval, SimpleInterval] = {
    SimpleInterval.PERFECT_UNISON: SimpleInterval.PERFECT_OCTAVE,
    SimpleInterval.MINOR_SECOND: SimpleInterval.MAJOR_SEVENTH,
    SimpleInterval.MAJOR_SECOND: SimpleInterval.MINOR_SEVENTH,
    SimpleInterval.MINOR_THIRD: SimpleInterval.MAJOR_SIXTH,
    SimpleInterval.MAJOR_THIRD: SimpleInterval.MINOR_SIXTH,
    SimpleInterval.PERFECT_FOURTH: SimpleInterval.PERFECT_FIFTH,
    SimpleInterval.AUGMENTED_FOURTH: SimpleInterval.DIMINISHED_FIFTH,
    SimpleInterval.DIMINISHED_FIFTH: SimpleInterval.AUGMENTED_FOURTH,
    SimpleInterval.PERFECT_FIFTH: SimpleInterval.PERFECT_FOURTH,
    SimpleInterval.MINOR_SIXTH: SimpleInterval.MAJOR_THIRD,
    SimpleInterval.MAJOR_SIXTH: SimpleInterval.MINOR_THIRD,
    SimpleInterval.MINOR_SEVENTH: SimpleInterval.MAJOR_SECOND,
    SimpleInterval.MAJOR_SEVENTH: SimpleInterval.MINOR_SECOND,
    SimpleInterval.PERFECT_OCTAVE: SimpleInterval.PERFECT_UNISON,
    SimpleInterval.DIMINISHED_SECOND: SimpleInterval.AUGMENTED_SEVENTH,
    SimpleInterval.AUGMENTED_UNISON: SimpleInterval.DIMINISHED_OCTAVE,
    SimpleInterval.DIMINISHED_THIRD: SimpleInterval.AUGMENTED_SIXTH,
    SimpleInterval.AUGMENTED_SECOND: SimpleInterval.DIMINISHED_SEVENTH,
    SimpleInterval.DIMINISHED_FOURTH: SimpleInterval.AUGMENTED_FIFTH,
    SimpleInterval.AUGMENTED_THIRD: SimpleInterval.DIMINISHED_SIXTH,
    SimpleInterval.DIMINISHED_SIXTH: SimpleInterval.AUGMENTED_THIRD,
    SimpleInterval.AUGMENTED_FIFTH: SimpleInterval.DIMINISHED_FOURTH,
    SimpleInterval.DIMINISHED_SEVENTH: SimpleInterval.AUGMENTED_SECOND,
    SimpleInterval.AUGMENTED_SIXTH: SimpleInterval.DIMINISHED_THIRD,
    SimpleInterval.DIMINISHED_OCTAVE: SimpleInterval.AUGMENTED_UNISON,
    SimpleInterval.AUGMENTED_SEVENTH: SimpleInterval.DIMINISHED_SECOND,
}

# Canonical spelling of each in-octave remainder
_CANONICAL: tuple[SimpleInterval, ...] = (
    SimpleInterval.PERFECT_UNISON,
    SimpleInterval.MINOR_SECOND,
    SimpleInterval.MAJOR_SECOND,
    SimpleInterval.MINOR_THIRD,
    SimpleInterval.MAJOR_THIRD,
    SimpleInterval.PERFECT_FOURTH,
    SimpleInterval.DIMINISHED_FIFTH,
    SimpleInterval.PERFECT_FIFTH,
    SimpleInterval.MINOR_SIXTH,
    SimpleInterval.MAJOR_SIXTH,
    SimpleInterval.MINOR_SEVENTH,
    SimpleInterval.MAJOR_SEVENTH,
)


@dataclass(frozen=True)
class SimpleIntervalFromSemitones:
    """
    A semitone count split into an in-octave interval plus whole octaves.

    octave_overflow * 12 + interval.semitones() always equals the original
    count. Negative counts use floor semantics, so -2 is (m7, -1).
    """

    interval: SimpleInterval
    octave_overflow: int = 0

    @classmethod
    def new(cls, semitones: Semitone) -> SimpleIntervalFromSemitones:
        """
        Decompose a semitone count.

        Exactly 12 stays a perfect octave with no overflow rather than
        becoming a unison one octave up.
        """
        if semitones == 0:
            return cls(SimpleInterval.PERFECT_UNISON, 0)
        if semitones == SEMITONES_PER_OCTAVE:
            return cls(SimpleInterval.PERFECT_OCTAVE, 0)

        octaves, remainder = divmod(semitones, SEMITONES_PER_OCTAVE)
        return cls(_CANONICAL[remainder], octaves)

    def add_semitones(self, semitones: Semitone) -> SimpleIntervalFromSemitones:
        """Add semitones to the interval, accumulating octave overflow."""
        result = SimpleIntervalFromSemitones.new(self.interval.semitones() + semitones)
        return SimpleIntervalFromSemitones(
            result.interval, self.octave_overflow + result.octave_overflow
        )

    def semitones(self) -> Semitone:
        """The flat semitone count this decomposition represents."""
        return self.interval.semitones() + self.octave_overflow * SEMITONES_PER_OCTAVE


_BIAS_TABLES: dict[IntervalQuality, dict[SimpleInterval, SimpleInterval]] = {
    IntervalQuality.PERFECT: {
        SimpleInterval.DIMINISHED_SECOND: SimpleInterval.PERFECT_UNISON,
        SimpleInterval.AUGMENTED_THIRD: SimpleInterval.PERFECT_FOURTH,
        SimpleInterval.DIMINISHED_SIXTH: SimpleInterval.PERFECT_FIFTH,
        SimpleInterval.AUGMENTED_SEVENTH: SimpleInterval.PERFECT_OCTAVE,
    },
    IntervalQuality.MAJOR: {
        SimpleInterval.DIMINISHED_THIRD: SimpleInterval.MAJOR_SECOND,
        SimpleInterval.DIMINISHED_FOURTH: SimpleInterval.MAJOR_THIRD,
        SimpleInterval.DIMINISHED_SEVENTH: SimpleInterval.MAJOR_SIXTH,
        SimpleInterval.DIMINISHED_OCTAVE: SimpleInterval.MAJOR_SEVENTH,
    },
    IntervalQuality.MINOR: {
        SimpleInterval.AUGMENTED_UNISON: SimpleInterval.MINOR_SECOND,
        SimpleInterval.AUGMENTED_SECOND: SimpleInterval.MINOR_THIRD,
        SimpleInterval.AUGMENTED_FIFTH: SimpleInterval.MINOR_SIXTH,
        SimpleInterval.AUGMENTED_SIXTH: SimpleInterval.MINOR_SEVENTH,
    },
    IntervalQuality.AUGMENTED: {
        SimpleInterval.MINOR_SECOND: SimpleInterval.AUGMENTED_UNISON,
        SimpleInterval.MINOR_THIRD: SimpleInterval.AUGMENTED_SECOND,
        SimpleInterval.PERFECT_FOURTH: SimpleInterval.AUGMENTED_THIRD,
        SimpleInterval.MINOR_SIXTH: SimpleInterval.AUGMENTED_FIFTH,
        SimpleInterval.MINOR_SEVENTH: SimpleInterval.AUGMENTED_SIXTH,
        SimpleInterval.PERFECT_OCTAVE: SimpleInterval.AUGMENTED_SEVENTH,
    },
    IntervalQuality.DIMINISHED: {
        SimpleInterval.PERFECT_UNISON: SimpleInterval.DIMINISHED_SECOND,
        SimpleInterval.MAJOR_SECOND: SimpleInterval.DIMINISHED_THIRD,
        SimpleInterval.MAJOR_THIRD: SimpleInterval.DIMINISHED_FOURTH,
        SimpleInterval.PERFECT_FIFTH: SimpleInterval.DIMINISHED_SIXTH,
        SimpleInterval.MAJOR_SIXTH: SimpleInterval.DIMINISHED_SEVENTH,
        SimpleInterval.MAJOR_SEVENTH: SimpleInterval.DIMINISHED_OCTAVE,
    },
}


def bias_simple_interval_quality(
    interval: SimpleInterval, quality: IntervalQuality
) -> SimpleInterval:
    """
    Respell an interval with the given quality, if an enharmonic spelling exists.

    Returns the input unchanged when it already has that quality or when
    no equivalent spelling with that quality exists.

    Args:
        interval: Interval to respell
        quality: Preferred quality

    Returns:
        The enharmonically equivalent interval of that quality, or the input
    """
    if interval.quality() == quality:
        return interval
    return _BIAS_TABLES[quality].get(interval, interval)
