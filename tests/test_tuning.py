"""
Tests for tunings and the tuning loader.
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from note_lib import CONCERT_PITCH, Note, RawNote, Tuning, TuningConfigError, TuningLoader


def write_tuning(directory: Path, filename: str, content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(content)
    return path


class TestTuning:
    """Tests for the Tuning model."""

    def test_concert_pitch(self) -> None:
        assert CONCERT_PITCH.name == "concert"
        assert CONCERT_PITCH.reference_note == "A4"
        assert CONCERT_PITCH.reference_frequency == 440.0
        assert CONCERT_PITCH.get_reference() == Note(RawNote.A, 4)

    def test_defaults(self) -> None:
        tuning = Tuning(name="custom")
        assert tuning.description == ""
        assert tuning.reference_note == "A4"
        assert tuning.reference_frequency == 440.0

    def test_reference_note_normalized(self) -> None:
        tuning = Tuning(name="lower", reference_note="a4", reference_frequency=432.0)
        assert tuning.reference_note == "A4"

    def test_invalid_reference_note(self) -> None:
        with pytest.raises(ValidationError):
            Tuning(name="bad", reference_note="H4")
        with pytest.raises(ValidationError):
            Tuning(name="bad", reference_note="A")

    def test_frequency_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Tuning(name="bad", reference_frequency=0)
        with pytest.raises(ValidationError):
            Tuning(name="bad", reference_frequency=-440.0)

    def test_immutable(self) -> None:
        with pytest.raises(ValidationError):
            CONCERT_PITCH.reference_frequency = 442.0  # type: ignore[misc]

    def test_frequency_of(self) -> None:
        assert CONCERT_PITCH.frequency_of(Note(RawNote.A, 4)) == pytest.approx(440.0)
        assert CONCERT_PITCH.frequency_of(Note(RawNote.C, 4)) == pytest.approx(261.6256, rel=1e-4)

    def test_frequency_of_other_reference(self) -> None:
        """With C4 pinned to 256 Hz every C is a power of two."""
        scientific = Tuning(name="scientific", reference_note="C4", reference_frequency=256.0)
        assert scientific.frequency_of(Note(RawNote.C, 4)) == pytest.approx(256.0)
        assert scientific.frequency_of(Note(RawNote.C, 0)) == pytest.approx(16.0)
        assert scientific.frequency_of(Note(RawNote.A, 4)) == pytest.approx(430.54, rel=1e-4)

    def test_note_to_hertz_uses_tuning(self) -> None:
        scientific = Tuning(name="scientific", reference_note="C4", reference_frequency=256.0)
        assert Note(RawNote.C, 5).to_hertz(scientific) == pytest.approx(512.0)


class TestTuningLoader:
    """Tests for TuningLoader."""

    def test_default_library_path(self) -> None:
        loader = TuningLoader()
        assert (loader.library_path / "concert.yaml").exists()

    def test_list_library_tunings(self, library_path: Path) -> None:
        loader = TuningLoader(library_path=library_path)
        names = [t.name for t in loader.list_tunings()]
        assert names == ["baroque", "concert", "scientific"]

    def test_get_tuning(self, library_path: Path) -> None:
        loader = TuningLoader(library_path=library_path)
        baroque = loader.get_tuning("baroque")
        assert baroque.reference_frequency == 415.0
        assert Note(RawNote.A, 4).to_hertz(baroque) == pytest.approx(415.0)

    def test_library_concert_matches_default(self, library_path: Path) -> None:
        loader = TuningLoader(library_path=library_path)
        concert = loader.get_tuning("concert")
        assert concert.reference_note == CONCERT_PITCH.reference_note
        assert concert.reference_frequency == CONCERT_PITCH.reference_frequency

    def test_get_missing_tuning(self, library_path: Path) -> None:
        loader = TuningLoader(library_path=library_path)
        with pytest.raises(TuningConfigError) as exc_info:
            loader.get_tuning("nonexistent")
        assert "nonexistent" in exc_info.value.message

    def test_get_tuning_is_cached(self, library_path: Path) -> None:
        loader = TuningLoader(library_path=library_path)
        assert loader.get_tuning("concert") is loader.get_tuning("concert")
        loader.clear_cache()
        assert loader._cache == {}

    def test_project_overrides_library(self, library_path: Path, temp_dir: Path) -> None:
        write_tuning(
            temp_dir,
            "concert.yaml",
            "name: concert\nreference:\n  note: A4\n  frequency: 442.0\n",
        )
        loader = TuningLoader(library_path=library_path, project_path=temp_dir)

        assert loader.get_tuning("concert").reference_frequency == 442.0
        listed = {t.name: t for t in loader.list_tunings()}
        assert listed["concert"].reference_frequency == 442.0
        assert "baroque" in listed

    def test_missing_project_dir_is_ignored(self, library_path: Path, temp_dir: Path) -> None:
        loader = TuningLoader(library_path=library_path, project_path=temp_dir / "missing")
        assert len(loader.list_tunings()) == 3

    def test_copy_to_project(self, library_path: Path, temp_dir: Path) -> None:
        project_path = temp_dir / "tunings"
        loader = TuningLoader(library_path=library_path, project_path=project_path)

        copied_path = loader.copy_to_project("baroque")
        assert copied_path is not None
        assert copied_path.exists()
        assert copied_path.name == "baroque.yaml"
        assert loader.get_tuning("baroque").reference_frequency == 415.0

    def test_copy_twice_raises(self, library_path: Path, temp_dir: Path) -> None:
        loader = TuningLoader(library_path=library_path, project_path=temp_dir)
        loader.copy_to_project("concert")
        with pytest.raises(TuningConfigError):
            loader.copy_to_project("concert")

    def test_copy_nonexistent_tuning(self, library_path: Path, temp_dir: Path) -> None:
        loader = TuningLoader(library_path=library_path, project_path=temp_dir)
        assert loader.copy_to_project("nonexistent") is None

    def test_copy_without_project_path(self, library_path: Path) -> None:
        loader = TuningLoader(library_path=library_path)
        with pytest.raises(TuningConfigError):
            loader.copy_to_project("concert")

    def test_name_defaults_to_file_stem(self, temp_dir: Path) -> None:
        write_tuning(temp_dir, "verdi.yaml", "reference:\n  frequency: 432.0\n")
        loader = TuningLoader(library_path=temp_dir)
        tuning = loader.get_tuning("verdi")
        assert tuning.name == "verdi"
        assert tuning.reference_note == "A4"
        assert tuning.reference_frequency == 432.0


class TestInvalidTuningFiles:
    """Tests for malformed tuning files."""

    def test_broken_yaml(self, temp_dir: Path) -> None:
        write_tuning(temp_dir, "broken.yaml", "name: [unclosed\n")
        loader = TuningLoader(library_path=temp_dir)
        with pytest.raises(TuningConfigError):
            loader.get_tuning("broken")

    def test_not_a_mapping(self, temp_dir: Path) -> None:
        write_tuning(temp_dir, "listed.yaml", "- 440\n- 415\n")
        loader = TuningLoader(library_path=temp_dir)
        with pytest.raises(TuningConfigError) as exc_info:
            loader.get_tuning("listed")
        assert "expected a mapping" in exc_info.value.message

    def test_negative_frequency(self, temp_dir: Path) -> None:
        write_tuning(temp_dir, "negative.yaml", "reference:\n  frequency: -1\n")
        loader = TuningLoader(library_path=temp_dir)
        with pytest.raises(TuningConfigError):
            loader.get_tuning("negative")

    def test_bad_reference_note(self, temp_dir: Path) -> None:
        write_tuning(temp_dir, "odd.yaml", "reference:\n  note: H4\n")
        loader = TuningLoader(library_path=temp_dir)
        with pytest.raises(TuningConfigError):
            loader.get_tuning("odd")

    def test_reference_not_a_mapping(self, temp_dir: Path) -> None:
        write_tuning(temp_dir, "flat.yaml", "reference: 440\n")
        loader = TuningLoader(library_path=temp_dir)
        with pytest.raises(TuningConfigError):
            loader.get_tuning("flat")

    def test_list_skips_invalid(self, temp_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        write_tuning(temp_dir, "broken.yaml", "name: [unclosed\n")
        write_tuning(temp_dir, "good.yaml", "name: good\n")
        loader = TuningLoader(library_path=temp_dir)

        with caplog.at_level(logging.WARNING, logger="note_lib.config.loader"):
            tunings = loader.list_tunings()

        assert [t.name for t in tunings] == ["good"]
        assert any("broken.yaml" in r.getMessage() for r in caplog.records)
