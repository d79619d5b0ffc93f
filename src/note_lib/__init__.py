"""
note_lib - notes, intervals, chords and scale modes.

Spelling-aware pitch arithmetic: C# and Db are the same pitch but
different notes, and the library keeps track of which one you meant.
"""

from note_lib.config import CONCERT_PITCH, Tuning, TuningLoader
from note_lib.core import (
    AbstractNote,
    AnyCompoundInterval,
    AnyRawNote,
    Chord,
    ChordBuilder,
    ChordContext,
    ChordQuality,
    CompoundInterval,
    Incongruent,
    Interval,
    IntervalQuality,
    ModifierPreference,
    Note,
    NoteModifier,
    OtherCompoundInterval,
    RawNote,
    Scale,
    ScaleDegree,
    ScaleMode,
    SimpleInterval,
    SimpleIntervalFromSemitones,
    SimpleIntervalNumber,
    bias_abstract_note_to_enharmonic_equivalent,
    bias_simple_interval_quality,
    equal_tempered_frequency,
    scale_notes,
)
from note_lib.errors import (
    AbstractNoteParseError,
    EmptyChordError,
    EmptyInputError,
    IncongruentNoteError,
    InputTooLongError,
    InvalidModifierError,
    InvalidNoteCharError,
    InvalidNoteError,
    InvalidSimpleIntervalError,
    InvalidSimpleIntervalKind,
    NegativeIntervalError,
    NoteLibError,
    SemitoneRangeError,
    TuningConfigError,
)

__version__ = "0.1.0"

__all__ = [
    # Pitch
    "RawNote",
    "Incongruent",
    "AnyRawNote",
    "NoteModifier",
    "ModifierPreference",
    "equal_tempered_frequency",
    # Note
    "AbstractNote",
    "Note",
    "bias_abstract_note_to_enharmonic_equivalent",
    # Interval
    "IntervalQuality",
    "SimpleIntervalNumber",
    "SimpleInterval",
    "SimpleIntervalFromSemitones",
    "bias_simple_interval_quality",
    "CompoundInterval",
    "OtherCompoundInterval",
    "AnyCompoundInterval",
    "Interval",
    # Chord
    "ChordQuality",
    "Chord",
    "ChordBuilder",
    "ChordContext",
    # Scale
    "ScaleDegree",
    "ScaleMode",
    "Scale",
    "scale_notes",
    # Config
    "Tuning",
    "TuningLoader",
    "CONCERT_PITCH",
    # Errors
    "NoteLibError",
    "AbstractNoteParseError",
    "EmptyInputError",
    "InvalidNoteError",
    "InvalidModifierError",
    "InputTooLongError",
    "InvalidNoteCharError",
    "InvalidSimpleIntervalError",
    "InvalidSimpleIntervalKind",
    "SemitoneRangeError",
    "IncongruentNoteError",
    "NegativeIntervalError",
    "EmptyChordError",
    "TuningConfigError",
]
