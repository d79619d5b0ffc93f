#!/usr/bin/env python3
"""
Example: Chords, inversions and scale modes.

Usage:
    python examples/chords_and_scales.py
"""

from itertools import islice

from note_lib import (
    AbstractNote,
    ChordBuilder,
    ChordContext,
    ChordQuality,
    Note,
    Scale,
    ScaleMode,
)


def main() -> None:
    """Demonstrate chord and scale construction."""
    print("Chords and Scales Demo")
    print("=" * 40)
    print()

    root = Note.parse("C4")

    # Chord qualities
    print(f"Chords on {root}:")
    for quality in [ChordQuality.MAJOR, ChordQuality.MINOR_7TH, ChordQuality.DIMINISHED_7TH]:
        print(f"  {quality:#}: {quality.to_chord(root)}")
    print()

    # Inversions
    triad = ChordQuality.MAJOR.to_chord(root)
    print("Inversions of the major triad:")
    for n in range(-2, 3):
        print(f"  {n:+d}: {triad.apply_inversion(n)}")
    print()

    # Builder with an added tone
    chord = (
        ChordBuilder(Note.parse("G3"))
        .quality(ChordQuality.SUSPENDED_4TH)
        .add_note(Note.parse("F4"))
        .build()
    )
    print(f"Builder: {chord}")
    print()

    # A context caches its chord until root or quality changes
    context = ChordContext(Note.parse("D4"), ChordQuality.MAJOR)
    print(f"{context}: {context.calculated_chord}")
    context.set_quality(ChordQuality.MINOR)
    print(f"{context}: {context.calculated_chord}")
    print()

    # Modes
    d = AbstractNote.parse("D")
    print(f"Modes on {d}:")
    for mode in ScaleMode:
        notes = " ".join(str(note) for note in Scale(d, mode))
        print(f"  {mode:<10} {notes}")
    print()

    e_flat_minor = Scale(AbstractNote.parse("Eb"), ScaleMode.AEOLIAN)
    first_three = " ".join(str(n) for n in islice(e_flat_minor, 3))
    print(f"First three notes of {e_flat_minor}: {first_three}")


if __name__ == "__main__":
    main()
