"""Writes a generated ``ProjectStructure`` to disk.

The materializer refuses to touch an existing project directory: the
collision check runs before any directory or file is created.  Failures part
way through are not rolled back.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..errors import ProjectExistsError
from .models import ProjectStructure


class ProjectMaterializer:
    """Creates project directories and files under a projects root."""

    def __init__(self, projects_root: str | Path) -> None:
        self.projects_root = Path(projects_root)

    def project_path(self, name: str) -> Path:
        return self.projects_root / name

    async def materialize(self, name: str, structure: ProjectStructure) -> Path:
        """Create ``<projects_root>/<name>`` from *structure*.

        Args:
            name: Project directory name.
            structure: Directories and files to create, relative to the
                project root.

        Returns:
            Path to the created project root.

        Raises:
            ProjectExistsError: If the project directory already exists.
            OSError: If a directory or file cannot be written.
        """
        root = self.project_path(name)

        await asyncio.to_thread(self.projects_root.mkdir, parents=True, exist_ok=True)

        if await asyncio.to_thread(root.exists):
            raise ProjectExistsError(name, root)

        for directory in structure.directories:
            await asyncio.to_thread(_make_dir, root / directory)

        for entry in structure.files:
            await asyncio.to_thread(_write_file, root / entry.path, entry.content)

        return root


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
