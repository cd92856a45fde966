"""Flutter project detection and paths.

A project root is the directory holding ``pubspec.yaml``. The Android
module lives under ``android/`` and Gradle writes its outputs to
``build/app`` unless ship.toml says otherwise.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "Project",
    "ProjectError",
    "PROJECT_ROOT_ENV",
    "detect_project",
    "find_project_upward",
    "is_project_root",
]

PROJECT_ROOT_ENV = "LEGGIO_PROJECT_ROOT"


@dataclass(frozen=True)
class ProjectError:
    """Error when the project root cannot be detected."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Project:
    """A detected Flutter project."""

    root: Path

    @property
    def pubspec_path(self) -> Path:
        return self.root / "pubspec.yaml"

    @property
    def config_path(self) -> Path:
        """Path to the optional ship.toml."""
        return self.root / "ship.toml"

    @property
    def android_dir(self) -> Path:
        return self.root / "android"

    @property
    def local_properties_path(self) -> Path:
        """Path to android/local.properties (written by flutter build)."""
        return self.android_dir / "local.properties"

    def resolve(self, rel: str) -> Path:
        """Resolve a config path against the project root."""
        p = Path(rel).expanduser()
        return p if p.is_absolute() else self.root / p

    def __str__(self) -> str:
        return str(self.root)


def is_project_root(path: Path) -> bool:
    return (path / "pubspec.yaml").is_file()


def find_project_upward(start: Path) -> Path | None:
    """Search upward from start for a directory holding pubspec.yaml."""
    for parent in (start, *start.parents):
        if is_project_root(parent):
            return parent
    return None


def detect_project(
    *,
    start_dir: Path | None = None,
    env_var: str = PROJECT_ROOT_ENV,
) -> Result[Project, ProjectError]:
    """Detect the project root.

    Detection order:
    1. ``env_var`` environment variable (if set it must be valid)
    2. Search upward from start_dir (or cwd)
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir() and is_project_root(env_path):
            return Ok(Project(root=env_path))
        return Err(
            ProjectError(
                message=f"${env_var} is set to '{env_value}' but it is not a Flutter project",
                searched_from=env_path if env_path.is_dir() else None,
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_project_upward(search_start)
    if found is None:
        return Err(
            ProjectError(
                message="Could not find Flutter project (pubspec.yaml not found)",
                searched_from=search_start,
            )
        )
    return Ok(Project(root=found))
