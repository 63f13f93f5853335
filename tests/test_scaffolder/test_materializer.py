"""Tests for writing generated structures to disk.

Covers:
- Directory and file creation (including implied parents)
- Collision detection before any write
- Projects root creation
- Truncate-and-replace writes
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from project_management.errors import ErrorKind, ProjectExistsError
from project_management.scaffolder.generator import StructureGenerator
from project_management.scaffolder.materializer import ProjectMaterializer
from project_management.scaffolder.models import FileEntry, ProjectStructure

pytestmark = pytest.mark.unit


@pytest.fixture
def materializer(projects_root: Path) -> ProjectMaterializer:
    return ProjectMaterializer(projects_root)


class TestMaterialize:
    @pytest.mark.asyncio
    async def test_creates_root_and_projects_root(self, materializer, projects_root):
        assert not projects_root.exists()
        root = await materializer.materialize("demo", ProjectStructure(directories=["src"]))
        assert root == projects_root / "demo"
        assert (root / "src").is_dir()

    @pytest.mark.asyncio
    async def test_writes_generated_structure(self, materializer, demo_cli_config):
        structure = StructureGenerator().generate(demo_cli_config)
        root = await materializer.materialize(demo_cli_config.name, structure)

        for directory in structure.directories:
            assert (root / directory).is_dir()
        for entry in structure.files:
            assert (root / entry.path).read_text(encoding="utf-8") == entry.content

    @pytest.mark.asyncio
    async def test_parent_directories_created_on_demand(self, materializer):
        structure = ProjectStructure(
            files=[FileEntry(path="deep/nested/file.txt", content="x")]
        )
        root = await materializer.materialize("demo", structure)
        assert (root / "deep" / "nested" / "file.txt").read_text() == "x"

    @pytest.mark.asyncio
    async def test_duplicate_directories_are_idempotent(self, materializer):
        structure = ProjectStructure(directories=["src/utils", "src", "src/utils"])
        root = await materializer.materialize("demo", structure)
        assert (root / "src" / "utils").is_dir()

    @pytest.mark.asyncio
    async def test_later_file_entry_replaces_earlier(self, materializer):
        structure = ProjectStructure(
            files=[
                FileEntry(path="a.txt", content="first version, longer"),
                FileEntry(path="a.txt", content="second"),
            ]
        )
        root = await materializer.materialize("demo", structure)
        assert (root / "a.txt").read_text() == "second"

    @pytest.mark.asyncio
    async def test_unicode_content(self, materializer):
        structure = ProjectStructure(files=[FileEntry(path="README.md", content="🚀 ünïcode")])
        root = await materializer.materialize("demo", structure)
        assert (root / "README.md").read_text(encoding="utf-8") == "🚀 ünïcode"


class TestCollision:
    @pytest.mark.asyncio
    async def test_existing_project_rejected(self, materializer, projects_root):
        existing = projects_root / "demo"
        existing.mkdir(parents=True)
        (existing / "keep.txt").write_text("mine")

        structure = ProjectStructure(
            directories=["src"], files=[FileEntry(path="keep.txt", content="theirs")]
        )
        with pytest.raises(ProjectExistsError) as exc_info:
            await materializer.materialize("demo", structure)

        assert exc_info.value.kind is ErrorKind.ALREADY_EXISTS
        assert "already exists" in str(exc_info.value)
        assert (existing / "keep.txt").read_text() == "mine"
        assert not (existing / "src").exists()

    @pytest.mark.asyncio
    async def test_existing_file_with_project_name_rejected(self, materializer, projects_root):
        projects_root.mkdir(parents=True)
        (projects_root / "demo").write_text("not a directory")
        with pytest.raises(ProjectExistsError):
            await materializer.materialize("demo", ProjectStructure(directories=["src"]))

    @pytest.mark.asyncio
    async def test_second_materialize_fails(self, materializer):
        structure = ProjectStructure(directories=["src"])
        await materializer.materialize("demo", structure)
        with pytest.raises(ProjectExistsError):
            await materializer.materialize("demo", structure)


class TestFailures:
    @pytest.mark.asyncio
    async def test_write_error_propagates_and_leaves_partial_tree(self, materializer, projects_root):
        structure = ProjectStructure(
            directories=["src"], files=[FileEntry(path="a.txt", content="x")]
        )
        with patch(
            "project_management.scaffolder.materializer._write_file",
            side_effect=PermissionError("denied"),
        ):
            with pytest.raises(PermissionError):
                await materializer.materialize("demo", structure)

        assert (projects_root / "demo" / "src").is_dir()
        assert not (projects_root / "demo" / "a.txt").exists()
