"""Shared pytest fixtures for the project management test suite.

Provides reusable fixtures for:
- Temporary projects roots and server configuration
- Sample ``create_project`` payloads and parsed ``ProjectConfig`` objects
- Mock subprocess helpers for git
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from project_management.config import Config, GitConfig
from project_management.scaffolder.models import ProjectConfig


# ---------------------------------------------------------------------------
# Paths & Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def projects_root(tmp_path: Path) -> Path:
    """Projects root that does not exist yet (the materializer creates it)."""
    return tmp_path / "projects"


@pytest.fixture
def server_config(projects_root: Path) -> Config:
    """Server configuration pointing at a temp root, with git disabled."""
    return Config(projects_root=projects_root, git=GitConfig(enabled=False))


@pytest.fixture
def git_server_config(projects_root: Path) -> Config:
    """Server configuration with git enabled and a fixed commit identity."""
    return Config(
        projects_root=projects_root,
        git=GitConfig(
            enabled=True,
            timeout=30,
            author_name="PM Test",
            author_email="test@pm.local",
        ),
    )


@pytest.fixture
def git_available() -> bool:
    """Skip the requesting test when no git binary is on PATH."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    return True


# ---------------------------------------------------------------------------
# Project payloads
# ---------------------------------------------------------------------------

@pytest.fixture
def demo_cli_payload() -> dict[str, Any]:
    """The canonical ``demo`` cli project in wire (camelCase) form."""
    return {
        "name": "demo",
        "type": "cli",
        "language": "rust",
        "governance": "minimal",
    }


@pytest.fixture
def webapp_payload() -> dict[str, Any]:
    """A fully populated webapp project in wire form."""
    return {
        "name": "storefront",
        "type": "webapp",
        "language": "typescript",
        "framework": "next",
        "techStack": ["react", "typescript", "node"],
        "features": ["Product catalog", "Shopping cart"],
        "sdlcPhase": "execution",
        "governance": "enterprise",
    }


@pytest.fixture
def demo_cli_config(demo_cli_payload: dict[str, Any]) -> ProjectConfig:
    return ProjectConfig.model_validate(demo_cli_payload)


@pytest.fixture
def webapp_config(webapp_payload: dict[str, Any]) -> ProjectConfig:
    return ProjectConfig.model_validate(webapp_payload)


@pytest.fixture
def make_config():
    """Factory for ``ProjectConfig`` with sensible defaults.

    Usage:
        def test_something(make_config):
            config = make_config(type="api", governance="enterprise")
    """
    def factory(**overrides: Any) -> ProjectConfig:
        data: dict[str, Any] = {"name": "sample", "type": "library", "language": "python"}
        data.update(overrides)
        return ProjectConfig.model_validate(data)

    return factory


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
