#!/usr/bin/env python3
"""
Example: Notes, intervals and enharmonic spelling.

Shows how notes are parsed, transposed and respelled. C# and Db are the
same pitch but different notes, and transposition keeps the spelling you
started from where it can.

Usage:
    python examples/spell_notes.py
"""

from note_lib import (
    AbstractNote,
    Interval,
    Note,
    NoteModifier,
    SimpleInterval,
    bias_abstract_note_to_enharmonic_equivalent,
)


def main() -> None:
    """Demonstrate note spelling."""
    print("Note Spelling Demo")
    print("=" * 40)
    print()

    # Parsing
    print("Parsing:")
    for text in ["C", "c#", "Bbb", "Fx"]:
        note = AbstractNote.parse(text)
        print(f"  {text!r:>6} -> {note} ({note:#})")
    print()

    # Transposition keeps the accidental family
    print("Transposing by a major third:")
    for text in ["C", "C#", "Db", "Ab"]:
        note = AbstractNote.parse(text)
        print(f"  {note} + M3 = {note + SimpleInterval.MAJOR_THIRD}")
    print()

    # Respelling
    print("Enharmonic respelling:")
    respellings = [
        ("D#", NoteModifier.FLAT),
        ("Fbb", NoteModifier.SHARP),
        ("C#", NoteModifier.DOUBLE_FLAT),
    ]
    for text, bias in respellings:
        note = AbstractNote.parse(text)
        respelled = bias_abstract_note_to_enharmonic_equivalent(note, bias)
        print(f"  {note} biased to {bias:#}: {respelled}")
    print()

    # Notes with octaves
    print("Notes with octaves:")
    for text in ["C4", "A4", "Eb2", "B#3"]:
        note = Note.parse(text)
        print(
            f"  {note:#}: {note.to_semitones_from_c0()} semitones above C0, "
            f"{note.to_hertz():.2f} Hz"
        )
    print()

    # Intervals beyond the octave
    print("Intervals by size:")
    for semitones in [7, 12, 14, 19, 28]:
        interval = Interval.from_semitones(semitones)
        print(f"  {semitones:>2} semitones: {interval} ({interval:#})")


if __name__ == "__main__":
    main()
