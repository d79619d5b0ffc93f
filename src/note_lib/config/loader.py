"""
Tuning loader - discovers and loads tuning definitions.

Tunings can come from:
1. Built-in library (shipped with package)
2. Project tunings (user's project/tunings directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from note_lib.config.tuning import Tuning
from note_lib.constants import (
    DEFAULT_REFERENCE_FREQUENCY,
    DEFAULT_REFERENCE_NOTE,
    ErrorMessages,
)
from note_lib.errors import TuningConfigError

logger = logging.getLogger(__name__)


class TuningLoader:
    """
    Discovers and loads tuning definitions.

    Tunings are loaded from YAML files in the library and project directories.
    Project tunings override library tunings with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the tuning loader.

        Args:
            library_path: Path to built-in tuning library
            project_path: Path to project tunings directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, Tuning] = {}

    def list_tunings(self) -> list[Tuning]:
        """
        List all available tunings.

        Returns tunings from both library and project, with project
        tunings taking precedence. Files that fail to load are skipped.
        """
        tunings: dict[str, Tuning] = {}

        for directory in self._search_paths(project_first=False):
            for path in sorted(directory.glob("*.yaml")):
                try:
                    tuning = self._load_tuning_file(path)
                except TuningConfigError as e:
                    logger.warning(f"Skipping tuning file {path}: {e.message}")
                    continue
                tunings[tuning.name] = tuning

        return sorted(tunings.values(), key=lambda t: t.name)

    def get_tuning(self, name: str) -> Tuning:
        """
        Get a tuning by name.

        Project tunings take precedence over library tunings.

        Args:
            name: Tuning name

        Returns:
            The tuning

        Raises:
            TuningConfigError: If no such tuning exists or its file is invalid
        """
        # Check cache
        if name in self._cache:
            return self._cache[name]

        for directory in self._search_paths(project_first=True):
            candidate = directory / f"{name}.yaml"
            if candidate.exists():
                tuning = self._load_tuning_file(candidate)
                self._cache[name] = tuning
                logger.debug(f"Loaded tuning '{name}' from {candidate}")
                return tuning

        raise TuningConfigError(ErrorMessages.TUNING_NOT_FOUND.format(name=name))

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library tuning to the project for customization.

        Args:
            name: Tuning name

        Returns:
            Path to copied file, or None if not found

        Raises:
            TuningConfigError: If no project path is set or the tuning is
                already in the project
        """
        if not self.project_path:
            raise TuningConfigError(ErrorMessages.NO_PROJECT_PATH)

        # Find in library
        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        # Create project tunings directory
        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise TuningConfigError(ErrorMessages.TUNING_EXISTS.format(name=name))

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def clear_cache(self) -> None:
        """Clear the tuning cache."""
        self._cache.clear()

    def _search_paths(self, project_first: bool) -> list[Path]:
        paths = [self.library_path]
        if self.project_path:
            paths.append(self.project_path)
        if project_first:
            paths.reverse()
        return [path for path in paths if path.exists()]

    def _load_tuning_file(self, path: Path) -> Tuning:
        """Load a tuning from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise TuningConfigError(
                ErrorMessages.TUNING_INVALID.format(path=path, reason=e)
            ) from e

        if not isinstance(data, dict):
            raise TuningConfigError(
                ErrorMessages.TUNING_INVALID.format(path=path, reason="expected a mapping")
            )

        return self._parse_tuning(path, data)

    def _parse_tuning(self, path: Path, data: dict[str, Any]) -> Tuning:
        """Parse tuning from YAML data. The file stem is the default name."""
        reference = data.get("reference", {})
        try:
            return Tuning(
                name=data.get("name", path.stem),
                description=data.get("description", ""),
                reference_note=reference.get("note", DEFAULT_REFERENCE_NOTE),
                reference_frequency=reference.get("frequency", DEFAULT_REFERENCE_FREQUENCY),
            )
        except (ValidationError, AttributeError) as e:
            raise TuningConfigError(
                ErrorMessages.TUNING_INVALID.format(path=path, reason=e)
            ) from e
