"""
Compound intervals - intervals spanning more than an octave.

The common ones (ninths through fifteenths) are named members of
CompoundInterval. Anything else is an OtherCompoundInterval, a stack of
simple intervals kept in descending order, e.g. 28 semitones is
[P8, P8, M3], a major seventeenth.

Interval wraps either kind so callers can treat distances uniformly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import TypeAlias

from note_lib.constants import SEMITONES_PER_OCTAVE, ErrorMessages, Semitone
from note_lib.core.interval import (
    IntervalQuality,
    SimpleInterval,
    SimpleIntervalFromSemitones,
    bias_simple_interval_quality,
)
from note_lib.errors import NegativeIntervalError

# Largest distance that is still a simple interval
_MAX_SIMPLE_SEMITONES: Semitone = SEMITONES_PER_OCTAVE


def ordinal(number: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 22 -> '22nd'."""
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


@total_ordering
class CompoundInterval(Enum):
    """
    Named intervals between a ninth and a fifteenth.

    Declared smallest to largest with enharmonic pairs adjacent, like
    SimpleInterval. The value is the short notation.
    """

    DIMINISHED_NINTH = "d9"

    MINOR_NINTH = "m9"
    AUGMENTED_OCTAVE = "A8"

    MAJOR_NINTH = "M9"
    DIMINISHED_TENTH = "d10"

    MINOR_TENTH = "m10"
    AUGMENTED_NINTH = "A9"

    MAJOR_TENTH = "M10"
    DIMINISHED_ELEVENTH = "d11"

    PERFECT_ELEVENTH = "P11"
    AUGMENTED_TENTH = "A10"

    DIMINISHED_TWELFTH = "d12"
    AUGMENTED_ELEVENTH = "A11"

    PERFECT_TWELFTH = "P12"
    DIMINISHED_THIRTEENTH = "d13"

    MINOR_THIRTEENTH = "m13"
    AUGMENTED_TWELFTH = "A12"

    MAJOR_THIRTEENTH = "M13"
    DIMINISHED_FOURTEENTH = "d14"

    MINOR_FOURTEENTH = "m14"
    AUGMENTED_THIRTEENTH = "A13"

    MAJOR_FOURTEENTH = "M14"
    DIMINISHED_FIFTEENTH = "d15"

    PERFECT_FIFTEENTH = "P15"
    AUGMENTED_FOURTEENTH = "A14"

    AUGMENTED_FIFTEENTH = "A15"

    @classmethod
    def from_semitones(cls, semitones: Semitone) -> AnyCompoundInterval:
        """
        Build the compound interval spanning a number of semitones.

        13 through 25 map to their common names. Any other non-negative
        count becomes an OtherCompoundInterval stack.

        Args:
            semitones: Distance in semitones, must not be negative

        Returns:
            A CompoundInterval member or an OtherCompoundInterval

        Raises:
            NegativeIntervalError: If semitones is negative
        """
        if semitones < 0:
            raise NegativeIntervalError(ErrorMessages.NEGATIVE_COMPOUND.format(semitones=semitones))

        named = _BY_SEMITONES.get(semitones)
        if named is not None:
            return named
        return OtherCompoundInterval.from_decomposition(SimpleInterval.from_semitones(semitones))

    def semitones(self) -> Semitone:
        return _SEMITONES[self]

    def simple_interval(self) -> SimpleInterval:
        """The interval left after removing whole octaves, e.g. M9 -> M2."""
        return _SIMPLE_INTERVALS[self]

    def quality(self) -> IntervalQuality:
        return IntervalQuality(self.value[0])

    def diatonic_number(self) -> int:
        return int(self.value[1:])

    @property
    def long_name(self) -> str:
        return f"{self.quality():#} {_NUMBER_NAMES[self.diatonic_number()]}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CompoundInterval):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return self.long_name
        return format(self.value, format_spec)


_ORDER: dict[CompoundInterval, int] = {interval: i for i, interval in enumerate(CompoundInterval)}

# Pairs share a semitone count, the lone diminished ninth sits at 12
_SEMITONES: dict[CompoundInterval, Semitone] = {
    interval: SEMITONES_PER_OCTAVE + (i + 1) // 2 for i, interval in enumerate(CompoundInterval)
}

_BY_SEMITONES: dict[Semitone, CompoundInterval] = {
    13: CompoundInterval.MINOR_NINTH,
    14: CompoundInterval.MAJOR_NINTH,
    15: CompoundInterval.MINOR_TENTH,
    16: CompoundInterval.MAJOR_TENTH,
    17: CompoundInterval.PERFECT_ELEVENTH,
    18: CompoundInterval.DIMINISHED_TWELFTH,
    19: CompoundInterval.PERFECT_TWELFTH,
    20: CompoundInterval.MINOR_THIRTEENTH,
    21: CompoundInterval.MAJOR_THIRTEENTH,
    22: CompoundInterval.MINOR_FOURTEENTH,
    23: CompoundInterval.MAJOR_FOURTEENTH,
    24: CompoundInterval.PERFECT_FIFTEENTH,
    25: CompoundInterval.AUGMENTED_FIFTEENTH,
}

_SIMPLE_INTERVALS: dict[CompoundInterval, SimpleInterval] = {
    CompoundInterval.DIMINISHED_NINTH: SimpleInterval.DIMINISHED_SECOND,
    CompoundInterval.MINOR_NINTH: SimpleInterval.MINOR_SECOND,
    CompoundInterval.AUGMENTED_OCTAVE: SimpleInterval.AUGMENTED_UNISON,
    CompoundInterval.MAJOR_NINTH: SimpleInterval.MAJOR_SECOND,
    CompoundInterval.DIMINISHED_TENTH: SimpleInterval.DIMINISHED_THIRD,
    CompoundInterval.MINOR_TENTH: SimpleInterval.MINOR_THIRD,
    CompoundInterval.AUGMENTED_NINTH: SimpleInterval.AUGMENTED_SECOND,
    CompoundInterval.MAJOR_TENTH: SimpleInterval.MAJOR_THIRD,
    CompoundInterval.DIMINISHED_ELEVENTH: SimpleInterval.DIMINISHED_FOURTH,
    CompoundInterval.PERFECT_ELEVENTH: SimpleInterval.PERFECT_FOURTH,
    CompoundInterval.AUGMENTED_TENTH: SimpleInterval.AUGMENTED_THIRD,
    CompoundInterval.DIMINISHED_TWELFTH: SimpleInterval.DIMINISHED_FIFTH,
    CompoundInterval.AUGMENTED_ELEVENTH: SimpleInterval.AUGMENTED_FOURTH,
    CompoundInterval.PERFECT_TWELFTH: SimpleInterval.PERFECT_FIFTH,
    CompoundInterval.DIMINISHED_THIRTEENTH: SimpleInterval.DIMINISHED_SIXTH,
    CompoundInterval.MINOR_THIRTEENTH: SimpleInterval.MINOR_SIXTH,
    CompoundInterval.AUGMENTED_TWELFTH: SimpleInterval.AUGMENTED_FIFTH,
    CompoundInterval.MAJOR_THIRTEENTH: SimpleInterval.MAJOR_SIXTH,
    CompoundInterval.DIMINISHED_FOURTEENTH: SimpleInterval.DIMINISHED_SEVENTH,
    CompoundInterval.MINOR_FOURTEENTH: SimpleInterval.MINOR_SEVENTH,
    CompoundInterval.AUGMENTED_THIRTEENTH: SimpleInterval.AUGMENTED_SIXTH,
    CompoundInterval.MAJOR_FOURTEENTH: SimpleInterval.MAJOR_SEVENTH,
    CompoundInterval.DIMINISHED_FIFTEENTH: SimpleInterval.DIMINISHED_OCTAVE,
    CompoundInterval.PERFECT_FIFTEENTH: SimpleInterval.PERFECT_OCTAVE,
    CompoundInterval.AUGMENTED_FOURTEENTH: SimpleInterval.AUGMENTED_SEVENTH,
    CompoundInterval.AUGMENTED_FIFTEENTH: SimpleInterval.AUGMENTED_UNISON,
}

_NUMBER_NAMES: dict[int, str] = {
    8: "Octave",
    9: "Ninth",
    10: "Tenth",
    11: "Eleventh",
    12: "Twelfth",
    13: "Thirteenth",
    14: "Fourteenth",
    15: "Fifteenth",
}


@dataclass(frozen=True)
class OtherCompoundInterval:
    """
    A compound interval without a common name.

    Stored as a stack of simple intervals sorted largest first, so two
    stacks with the same intervals compare equal regardless of input order.
    The top of the stack is the smallest interval.
    """

    interval_stack: tuple[SimpleInterval, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "interval_stack", tuple(sorted(self.interval_stack, reverse=True))
        )

    @classmethod
    def from_decomposition(cls, decomposed: SimpleIntervalFromSemitones) -> OtherCompoundInterval:
        """One perfect octave per overflowed octave, then the remainder."""
        octaves = max(decomposed.octave_overflow, 0)
        return cls((SimpleInterval.PERFECT_OCTAVE,) * octaves + (decomposed.interval,))

    def top_interval(self) -> SimpleInterval:
        if not self.interval_stack:
            return SimpleInterval.PERFECT_UNISON
        return self.interval_stack[-1]

    def semitones(self) -> Semitone:
        return sum(interval.semitones() for interval in self.interval_stack)

    def diatonic_number(self) -> int:
        """Stacked numbers overlap by one: an octave plus a third is a tenth."""
        return 1 + sum(interval.interval_number() - 1 for interval in self.interval_stack)

    def quality(self) -> IntervalQuality:
        return self.top_interval().quality()

    def simple_interval(self) -> SimpleInterval:
        """
        The stack reduced to within an octave.

        Keeps the quality of the top interval where an enharmonic
        spelling allows it.
        """
        semitones = self.semitones()
        if semitones == 0:
            return SimpleInterval.PERFECT_UNISON

        top = self.top_interval()
        computed = SimpleInterval.from_semitones(semitones).interval
        if computed == top:
            return computed
        return bias_simple_interval_quality(computed, top.quality())

    @property
    def long_name(self) -> str:
        return f"{self.quality():#} {ordinal(self.diatonic_number())}"

    def __str__(self) -> str:
        return f"{self.quality()}{self.diatonic_number()}"

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return self.long_name
        return format(str(self), format_spec)


AnyCompoundInterval: TypeAlias = CompoundInterval | OtherCompoundInterval


@dataclass(frozen=True)
class Interval:
    """
    Either a simple or a compound interval.

    Short notation delegates to the wrapped interval, the verbose form
    is prefixed with 'Simple' or 'Compound'.
    """

    value: SimpleInterval | CompoundInterval | OtherCompoundInterval

    @classmethod
    def from_semitones(cls, semitones: Semitone) -> Interval:
        """Simple up to an octave, compound beyond it."""
        if semitones <= _MAX_SIMPLE_SEMITONES:
            return cls(SimpleInterval.from_semitones(semitones).interval)
        return cls(CompoundInterval.from_semitones(semitones))

    @property
    def is_simple(self) -> bool:
        return isinstance(self.value, SimpleInterval)

    def semitones(self) -> Semitone:
        return self.value.semitones()

    def quality(self) -> IntervalQuality:
        return self.value.quality()

    def simple_interval(self) -> SimpleInterval:
        if isinstance(self.value, SimpleInterval):
            return self.value
        return self.value.simple_interval()

    @property
    def long_name(self) -> str:
        kind = "Simple" if self.is_simple else "Compound"
        return f"{kind} {self.value:#}"

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        if format_spec == "#":
            return self.long_name
        return format(str(self), format_spec)
