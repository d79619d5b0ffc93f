"""
Tests for chords.

Tests cover:
- Chord mutation, concatenation and inversion
- ChordQuality recipes and spelling
- ChordBuilder
- ChordContext caching
"""

import logging

import pytest

from note_lib import (
    Chord,
    ChordBuilder,
    ChordContext,
    ChordQuality,
    CompoundInterval,
    EmptyChordError,
    Interval,
    Note,
    NoteModifier,
    RawNote,
    SimpleInterval,
)

C4 = Note(RawNote.C, 4)
E4 = Note(RawNote.E, 4)
G4 = Note(RawNote.G, 4)


class TestChord:
    """Tests for the Chord container."""

    def test_default_is_empty(self) -> None:
        chord = Chord()
        assert chord.notes == []
        assert len(chord) == 0

    def test_input_list_is_copied(self) -> None:
        notes = [C4, E4]
        chord = Chord(notes)
        notes.append(G4)
        assert len(chord) == 2

    def test_add_note(self) -> None:
        chord = Chord([C4])
        chord.add_note(E4)
        assert chord.notes == [C4, E4]

    def test_set_notes(self) -> None:
        chord = Chord([C4])
        chord.set_notes(iter([E4, G4]))
        assert chord.notes == [E4, G4]

    def test_add_operator(self, c_major_triad: Chord) -> None:
        """Chord + Note and Chord + Chord append in order."""
        extended = c_major_triad + Note(RawNote.B, 4)
        assert len(extended) == 4
        assert extended.notes[-1] == Note(RawNote.B, 4)
        assert len(c_major_triad) == 3

        joined = Chord([C4]) + Chord([E4, G4])
        assert joined == c_major_triad

    def test_iteration(self, c_major_triad: Chord) -> None:
        assert list(c_major_triad) == [C4, E4, G4]

    def test_notation(self, c_major_triad: Chord) -> None:
        assert str(c_major_triad) == "C4 E4 G4"
        assert f"{c_major_triad:#}" == "C 4, E 4, G 4"


class TestChordInversion:
    """Tests for Chord.apply_inversion."""

    def test_first_inversion(self, c_major_triad: Chord) -> None:
        inverted = c_major_triad.apply_inversion(1)
        assert str(inverted) == "E4 G4 C5"

    def test_second_inversion(self, c_major_triad: Chord) -> None:
        inverted = c_major_triad.apply_inversion(2)
        assert str(inverted) == "G4 C5 E5"

    def test_negative_inversion(self, c_major_triad: Chord) -> None:
        """Negative steps move the top note down."""
        assert str(c_major_triad.apply_inversion(-1)) == "G3 C4 E4"
        assert str(c_major_triad.apply_inversion(-2)) == "E3 G3 C4"

    def test_full_rotation_raises_octave(self, c_major_triad: Chord) -> None:
        assert str(c_major_triad.apply_inversion(3)) == "C5 E5 G5"

    def test_zero_is_a_copy(self, c_major_triad: Chord) -> None:
        copy = c_major_triad.apply_inversion(0)
        assert copy == c_major_triad
        assert copy is not c_major_triad

    def test_original_untouched(self, c_major_triad: Chord) -> None:
        c_major_triad.apply_inversion(2)
        assert str(c_major_triad) == "C4 E4 G4"

    def test_inversions_undo(self, c_major_triad: Chord) -> None:
        for n in range(-3, 4):
            assert c_major_triad.apply_inversion(n).apply_inversion(-n) == c_major_triad

    def test_keeps_spelling(self) -> None:
        chord = Chord([Note(RawNote.E, 4, NoteModifier.FLAT), Note(RawNote.G, 4)])
        assert str(chord.apply_inversion(1)) == "G4 Eb5"

    def test_empty_chord(self) -> None:
        assert Chord().apply_inversion(0) == Chord()
        with pytest.raises(EmptyChordError) as exc_info:
            Chord().apply_inversion(1)
        assert exc_info.value.code == "EMPTY_CHORD"
        with pytest.raises(ValueError):
            Chord().apply_inversion(-1)


class TestChordQuality:
    """Tests for chord recipes."""

    def test_member_count(self) -> None:
        assert len(ChordQuality) == 21

    def test_offsets_start_at_root_and_ascend(self) -> None:
        for quality in ChordQuality:
            offsets = quality.offsets
            assert offsets[0] == 0
            assert list(offsets) == sorted(set(offsets))

    def test_offsets(self) -> None:
        assert ChordQuality.MAJOR.offsets == (0, 4, 7)
        assert ChordQuality.MINOR.offsets == (0, 3, 7)
        assert ChordQuality.DIMINISHED_7TH.offsets == (0, 3, 6, 9)
        assert ChordQuality.MAJOR_13TH.offsets == (0, 4, 7, 11, 14, 17, 21)
        assert ChordQuality.MINOR_MAJOR_7TH_FLAT_13TH.offsets == (0, 3, 7, 11, 20)

    def test_names(self) -> None:
        assert str(ChordQuality.MAJOR) == "maj"
        assert str(ChordQuality.MINOR_MAJOR_7TH) == "mM7"
        assert f"{ChordQuality.MAJOR:#}" == "Major"
        assert f"{ChordQuality.SUSPENDED_4TH:#}" == "Suspended 4th"
        assert f"{ChordQuality.MINOR_MAJOR_7TH_FLAT_13TH:#}" == "Minor Major 7th Flat 13th"

    def test_names_are_unique(self) -> None:
        assert len({q.long_name for q in ChordQuality}) == len(ChordQuality)

    def test_to_intervals(self) -> None:
        assert ChordQuality.MAJOR.to_intervals() == [
            Interval(SimpleInterval.PERFECT_UNISON),
            Interval(SimpleInterval.MAJOR_THIRD),
            Interval(SimpleInterval.PERFECT_FIFTH),
        ]
        assert ChordQuality.DIMINISHED.to_intervals()[-1] == Interval(
            SimpleInterval.DIMINISHED_FIFTH
        )

    def test_to_intervals_compound(self) -> None:
        """Tones above the octave are compound intervals."""
        assert ChordQuality.MAJOR_9TH.to_intervals()[-1] == Interval(CompoundInterval.MAJOR_NINTH)
        assert ChordQuality.MINOR_MAJOR_7TH_FLAT_13TH.to_intervals()[-1] == Interval(
            CompoundInterval.MINOR_THIRTEENTH
        )

    def test_intervals_match_offsets(self) -> None:
        for quality in ChordQuality:
            semitones = [interval.semitones() for interval in quality.to_intervals()]
            assert semitones == list(quality.offsets)

    def test_to_notes_major(self) -> None:
        assert ChordQuality.MAJOR.to_notes(C4) == [C4, E4, G4]

    def test_to_notes_sharp_root(self) -> None:
        """A natural root spells black keys as sharps."""
        notes = ChordQuality.MINOR_7TH.to_notes(C4)
        assert [str(n) for n in notes] == ["C4", "D#4", "G4", "A#4"]
        assert [n.to_semitones_from_c0() for n in notes] == [48, 51, 55, 58]

    def test_to_notes_flat_root(self) -> None:
        """A flat root spells black keys as flats."""
        root = Note(RawNote.D, 4, NoteModifier.FLAT)
        notes = ChordQuality.MINOR_7TH.to_notes(root)
        assert [str(n) for n in notes] == ["Db4", "E4", "Ab4", "B4"]

    def test_to_notes_root_kept_as_given(self) -> None:
        root = Note(RawNote.B, 3, NoteModifier.SHARP)
        assert ChordQuality.MAJOR.to_notes(root)[0] is root

    def test_to_notes_crosses_octave(self) -> None:
        notes = ChordQuality.MAJOR_9TH.to_notes(C4)
        assert notes[-1] == Note(RawNote.D, 5)

    def test_to_notes_offsets(self) -> None:
        """Every tone sits at its offset above the root."""
        for quality in ChordQuality:
            notes = quality.to_notes(C4)
            assert len(notes) == len(quality.offsets)
            for note, offset in zip(notes, quality.offsets):
                assert note.to_semitones_from_c0() == 48 + offset

    def test_to_chord(self, c_major_triad: Chord) -> None:
        assert ChordQuality.MAJOR.to_chord(C4) == c_major_triad


class TestChordBuilder:
    """Tests for fluent chord construction."""

    def test_root_only(self) -> None:
        assert ChordBuilder(C4).build() == Chord([C4])

    def test_quality_repeats_root(self) -> None:
        """The quality's tones start with the root again."""
        chord = ChordBuilder(C4).quality(ChordQuality.MAJOR).build()
        assert chord.notes == [C4, C4, E4, G4]

    def test_additions_come_last(self) -> None:
        b4 = Note(RawNote.B, 4)
        chord = ChordBuilder(C4).add_note(b4).quality(ChordQuality.MINOR).build()
        assert str(chord) == "C4 C4 D#4 G4 B4"

    def test_last_quality_wins(self) -> None:
        chord = (
            ChordBuilder(C4).quality(ChordQuality.MINOR).quality(ChordQuality.SUSPENDED_4TH).build()
        )
        assert str(chord) == "C4 C4 F4 G4"


class TestChordContext:
    """Tests for the cached root/quality pair."""

    def test_defaults(self) -> None:
        context = ChordContext()
        assert context.root == Note()
        assert context.quality == ChordQuality.MAJOR
        assert str(context) == "C0 maj"

    def test_str(self) -> None:
        context = ChordContext(C4, ChordQuality.MINOR_7TH)
        assert str(context) == "C4 m7"
        assert "ChordContext" in repr(context)

    def test_calculated_chord(self) -> None:
        context = ChordContext(Note(RawNote.D, 4), ChordQuality.MAJOR)
        assert str(context.calculated_chord) == "D4 F#4 A4"

    def test_chord_is_cached(self) -> None:
        context = ChordContext(C4)
        assert context.calculated_chord is context.calculated_chord

    def test_set_quality_recomputes(self) -> None:
        context = ChordContext(Note(RawNote.D, 4))
        first = context.calculated_chord
        context.set_quality(ChordQuality.MINOR)
        second = context.calculated_chord
        assert second is not first
        assert str(second) == "D4 F4 A4"

    def test_set_root_recomputes(self) -> None:
        context = ChordContext(C4)
        assert str(context.calculated_chord) == "C4 E4 G4"
        context.set_root(Note(RawNote.G, 3))
        assert str(context.calculated_chord) == "G3 B3 D4"
        assert str(context) == "G3 maj"

    def test_computes_once(self, caplog: pytest.LogCaptureFixture) -> None:
        context = ChordContext(C4)
        with caplog.at_level(logging.DEBUG, logger="note_lib.core.chord"):
            context.calculated_chord
            context.calculated_chord
        records = [r for r in caplog.records if r.name == "note_lib.core.chord"]
        assert len(records) == 1
        assert "C4 maj" in records[0].getMessage()
