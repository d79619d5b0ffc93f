"""
Tuning model - the reference pitch that anchors note frequencies.

All tunings are twelve-tone equal temperament; they differ only in
which note is pinned to which frequency.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from note_lib.constants import (
    DEFAULT_REFERENCE_FREQUENCY,
    DEFAULT_REFERENCE_NOTE,
    DEFAULT_TUNING_NAME,
    Hertz,
)
from note_lib.core.note import Note
from note_lib.core.pitch import equal_tempered_frequency


class Tuning(BaseModel):
    """
    A reference note and its frequency.

    Concert pitch is A4 = 440 Hz. Immutable.
    """

    name: str = Field(..., description="Tuning identifier (e.g., 'concert', 'baroque')")
    description: str = Field("", description="Human-readable description")
    reference_note: str = Field(
        DEFAULT_REFERENCE_NOTE, description="Note pinned to the reference frequency (e.g., 'A4')"
    )
    reference_frequency: Hertz = Field(
        DEFAULT_REFERENCE_FREQUENCY, gt=0, description="Frequency of the reference note in Hz"
    )

    model_config = {"frozen": True}

    @field_validator("reference_note")
    @classmethod
    def validate_reference_note(cls, v: str) -> str:
        """Validate and normalize the reference note, e.g. 'a4' -> 'A4'."""
        return str(Note.parse(v))

    def get_reference(self) -> Note:
        """Get the parsed reference Note."""
        return Note.parse(self.reference_note)

    def frequency_of(self, note: Note) -> Hertz:
        """
        Frequency of a note under this tuning.

        Args:
            note: Note to measure

        Returns:
            Frequency in hertz
        """
        return equal_tempered_frequency(
            note.to_semitones_from_c0(),
            reference_semitones=self.get_reference().to_semitones_from_c0(),
            reference_frequency=self.reference_frequency,
        )


CONCERT_PITCH = Tuning(
    name=DEFAULT_TUNING_NAME,
    description="Modern concert pitch, A4 = 440 Hz",
)
