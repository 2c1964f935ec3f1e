"""Project persistence.

A project is stored as one JSON document ``{metadata, property, rooms,
travaux}`` with the camelCase keys of the quote editor. The metadata header
carries the quote number ("AAMM-N"). Derived surfaces and totals are never
read back: they are recomputed from the raw fields after loading.
"""

from __future__ import annotations

import json
import os
import re
import tempfile
from datetime import date, datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from devis.application.services.naming import generate_devis_number
from devis.core.exceptions import (
    ConfigurationError,
    InvalidParameterError,
    ProjectLoadError,
    ProjectSaveError,
)
from devis.core.logging import get_logger
from devis.core.settings import get_settings
from devis.domain.models.project import ProjectState

log = get_logger(__name__)

_VALID_NAME = re.compile(r"[\w\- ]+")


def project_to_dict(state: ProjectState) -> dict[str, Any]:
    """Serialize a project to its JSON document.

    Args:
        state: Project to serialize

    Returns:
        Dict with keys property, rooms and travaux
    """
    return state.model_dump(mode="json", by_alias=True)


def project_from_dict(data: dict[str, Any]) -> ProjectState:
    """Rebuild a project from its JSON document.

    Args:
        data: Parsed document

    Returns:
        Project state

    Raises:
        ProjectLoadError: If the document does not describe a project
    """
    try:
        return ProjectState.model_validate(data)
    except ValidationError as e:
        raise ProjectLoadError(f"Invalid project document: {e.error_count()} error(s)") from e


class ProjectRepository:
    """Saves and loads project documents in a local directory."""

    def __init__(self, base_dir: str | os.PathLike[str] | None = None):
        """Initialize repository.

        Args:
            base_dir: Directory of the project files. Defaults to the
                DEVIS_PROJECTS_DIR setting.

        Raises:
            ConfigurationError: If `base_dir` exists and is not a directory
        """
        self.base_dir = Path(base_dir or get_settings().projects_dir)
        if self.base_dir.exists() and not self.base_dir.is_dir():
            raise ConfigurationError(f"Projects path is not a directory: {self.base_dir}")

    def _path(self, name: str) -> Path:
        if not name or not _VALID_NAME.fullmatch(name):
            raise InvalidParameterError("name", name, "letters, digits, spaces, '-' and '_' only")
        return self.base_dir / f"{name}.json"

    def _read(self, path: Path) -> Any:
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    def _write(self, path: Path, payload: dict[str, Any]) -> None:
        """Write through a temporary file so a failure never truncates `path`."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.base_dir, prefix=f".{path.stem}-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_metadata(self, name: str) -> dict[str, Any]:
        """Metadata header of a saved project.

        Returns:
            Dict with name, savedAt and devisNumber; empty if the file is
            missing or has no header

        Raises:
            ProjectLoadError: If the file is unreadable
        """
        path = self._path(name)
        try:
            data = self._read(path)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            raise ProjectLoadError(f"Cannot read project '{name}'") from e
        metadata = data.get("metadata") if isinstance(data, dict) else None
        return metadata if isinstance(metadata, dict) else {}

    def devis_numbers(self, exclude: str | None = None) -> dict[str, str]:
        """Quote number of every saved project, by project name.

        Unreadable files are logged and skipped.

        Args:
            exclude: Project name to leave out
        """
        numbers = {}
        for project in self.list_projects():
            if project == exclude or not _VALID_NAME.fullmatch(project):
                continue
            try:
                number = self.get_metadata(project).get("devisNumber")
            except ProjectLoadError:
                log.warning("project_metadata_unreadable", project=project)
                continue
            if number:
                numbers[project] = number
        return numbers

    def next_devis_number(self, today: date | None = None) -> str:
        """Next free quote number of the month."""
        return generate_devis_number(self.devis_numbers().values(), today or date.today())

    def is_devis_number_unique(self, devis_number: str, exclude: str | None = None) -> bool:
        """True if no other saved project carries this quote number."""
        return devis_number not in self.devis_numbers(exclude=exclude).values()

    def save(self, state: ProjectState, name: str, devis_number: str | None = None) -> Path:
        """Write a project document.

        A project keeps the quote number of its previous save; a new project
        gets the next number of the month.

        Args:
            state: Project to save
            name: Project name (file stem)
            devis_number: Quote number to use instead

        Returns:
            Path of the written file

        Raises:
            InvalidParameterError: If `devis_number` belongs to another project
            ProjectSaveError: If the file cannot be written
        """
        path = self._path(name)
        if devis_number is None:
            try:
                devis_number = self.get_metadata(name).get("devisNumber")
            except ProjectLoadError:
                log.warning("project_metadata_unreadable", project=name)
            devis_number = devis_number or self.next_devis_number()
        elif not self.is_devis_number_unique(devis_number, exclude=name):
            raise InvalidParameterError("devis_number", devis_number, "already used by another project")

        payload = {
            "metadata": {
                "name": name,
                "savedAt": datetime.now().isoformat(),
                "devisNumber": devis_number,
            },
            **project_to_dict(state),
        }
        try:
            self._write(path, payload)
        except OSError as e:
            log.error("project_save_failed", path=str(path), error=str(e))
            raise ProjectSaveError(f"Cannot write project '{name}'") from e

        log.info(
            "project_saved",
            path=str(path),
            devis_number=devis_number,
            rooms=len(state.rooms),
            travaux=len(state.travaux),
        )
        return path

    def load(self, name: str) -> ProjectState:
        """Read a project document.

        Args:
            name: Project name (file stem)

        Returns:
            Project state

        Raises:
            ProjectLoadError: If the file is missing, unreadable or invalid
        """
        path = self._path(name)
        try:
            data = self._read(path)
        except FileNotFoundError as e:
            raise ProjectLoadError(f"Project '{name}' not found") from e
        except (OSError, json.JSONDecodeError) as e:
            log.error("project_load_failed", path=str(path), error=str(e))
            raise ProjectLoadError(f"Cannot read project '{name}'") from e

        if not isinstance(data, dict):
            raise ProjectLoadError(f"Project '{name}' is not a JSON object")

        state = project_from_dict(data)
        log.info("project_loaded", path=str(path), rooms=len(state.rooms), travaux=len(state.travaux))
        return state

    def list_projects(self) -> list[str]:
        """Names of the saved projects, sorted."""
        if not self.base_dir.exists():
            return []
        return sorted(p.stem for p in self.base_dir.glob("*.json"))

    def delete(self, name: str) -> bool:
        """Remove a saved project.

        Returns:
            True if a file was removed
        """
        path = self._path(name)
        if not path.exists():
            return False
        path.unlink()
        log.info("project_deleted", path=str(path))
        return True
