"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from note_lib import Chord, Note, NoteModifier, RawNote


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """The tuning library shipped with the package."""
    return Path(__file__).parent.parent / "src" / "note_lib" / "config" / "library"


@pytest.fixture
def c_major_triad() -> Chord:
    """C4 E4 G4."""
    return Chord(
        [
            Note(RawNote.C, 4, NoteModifier.NATURAL),
            Note(RawNote.E, 4, NoteModifier.NATURAL),
            Note(RawNote.G, 4, NoteModifier.NATURAL),
        ]
    )
