#!/usr/bin/env python3
"""
Example: Using tunings.

A tuning pins one note to a frequency. The library ships a few common
ones; copying a tuning into a project directory lets you edit it.

Usage:
    python examples/use_tunings.py
"""

import logging
import tempfile
from pathlib import Path

from note_lib import Note, TuningLoader


def main() -> None:
    """Demonstrate tuning lookup and override."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("Tuning Demo")
    print("=" * 40)
    print()

    a4 = Note.parse("A4")
    c4 = Note.parse("C4")

    with tempfile.TemporaryDirectory() as tmp:
        project_path = Path(tmp) / "tunings"
        loader = TuningLoader(project_path=project_path)

        print("Available tunings:")
        for tuning in loader.list_tunings():
            print(f"  {tuning.name}: {tuning.description}")
            print(f"    A4 = {a4.to_hertz(tuning):.2f} Hz, C4 = {c4.to_hertz(tuning):.2f} Hz")
        print()

        # Copy a tuning to the project and raise it slightly
        copied_path = loader.copy_to_project("concert")
        if copied_path:
            copied_path.write_text(copied_path.read_text().replace("440.0", "442.0"))
            loader.clear_cache()
            concert = loader.get_tuning("concert")
            print(f"Project override: A4 = {a4.to_hertz(concert):.2f} Hz")


if __name__ == "__main__":
    main()
