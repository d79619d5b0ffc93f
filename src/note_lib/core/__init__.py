"""
Core pitch algebra.

Leaf first:
- RawNote, NoteModifier: letters and accidentals
- AbstractNote: a spelled note without an octave
- Note: a spelled note at an octave
- SimpleInterval: interval spellings within an octave
- CompoundInterval, OtherCompoundInterval: intervals beyond an octave
- Interval: either of the above
- ChordQuality, Chord: chord recipes and note collections
- ScaleMode, ScaleDegree, Scale: diatonic modes
"""

from note_lib.core.chord import Chord, ChordBuilder, ChordContext, ChordQuality
from note_lib.core.compound import (
    AnyCompoundInterval,
    CompoundInterval,
    Interval,
    OtherCompoundInterval,
)
from note_lib.core.interval import (
    IntervalQuality,
    SimpleInterval,
    SimpleIntervalFromSemitones,
    SimpleIntervalNumber,
    bias_simple_interval_quality,
)
from note_lib.core.note import AbstractNote, Note, bias_abstract_note_to_enharmonic_equivalent
from note_lib.core.pitch import (
    AnyRawNote,
    Incongruent,
    ModifierPreference,
    NoteModifier,
    RawNote,
    equal_tempered_frequency,
)
from note_lib.core.scale import Scale, ScaleDegree, ScaleMode, scale_notes

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
]
