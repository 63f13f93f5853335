"""Project management server configuration.

Centralised, typed configuration for the MCP server. All settings use
Pydantic v2 models so they can be validated at construction time and read
from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

DEFAULT_PROJECTS_ROOT = Path("/home/developer/workspace/projects")

_FALSEY = {"0", "false", "no", "off"}


class ServerConfig(BaseModel):
    """Identity reported to MCP clients during initialization."""

    name: str = Field(default="project-management-mcp")
    version: str = Field(default="1.0.0")


class GitConfig(BaseModel):
    """Settings for the best-effort repository bootstrap."""

    enabled: bool = Field(default=True, description="Run git init/add/commit after creation")
    timeout: int = Field(default=60, ge=1, description="Per-command timeout in seconds")
    author_name: Optional[str] = Field(
        default=None, description="Commit author name passed as ``-c user.name``"
    )
    author_email: Optional[str] = Field(
        default=None, description="Commit author email passed as ``-c user.email``"
    )


class Config(BaseModel):
    """Global server configuration.

    Created once at startup (usually via :meth:`from_env`) and handed to the
    dispatcher, materializer and git bootstrapper. Nothing downstream reads
    the environment directly.
    """

    projects_root: Path = Field(default=DEFAULT_PROJECTS_ROOT)
    server: ServerConfig = Field(default_factory=ServerConfig)
    git: GitConfig = Field(default_factory=GitConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PROJECTS_ROOT, PM_GIT_ENABLED, PM_GIT_TIMEOUT,
            PM_GIT_AUTHOR_NAME, PM_GIT_AUTHOR_EMAIL.
        """
        git_kwargs: dict[str, Any] = {}
        if os.environ.get("PM_GIT_ENABLED"):
            git_kwargs["enabled"] = os.environ["PM_GIT_ENABLED"].strip().lower() not in _FALSEY
        if os.environ.get("PM_GIT_TIMEOUT"):
            git_kwargs["timeout"] = int(os.environ["PM_GIT_TIMEOUT"])
        if os.environ.get("PM_GIT_AUTHOR_NAME"):
            git_kwargs["author_name"] = os.environ["PM_GIT_AUTHOR_NAME"]
        if os.environ.get("PM_GIT_AUTHOR_EMAIL"):
            git_kwargs["author_email"] = os.environ["PM_GIT_AUTHOR_EMAIL"]

        return cls(
            projects_root=Path(os.environ.get("PROJECTS_ROOT") or DEFAULT_PROJECTS_ROOT),
            git=GitConfig(**git_kwargs),
        )
