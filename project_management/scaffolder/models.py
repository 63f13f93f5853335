"""Pydantic v2 models for project scaffolding.

Defines the declarative project description accepted by ``create_project``
and the intermediate directory/file structure produced from it.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ProjectType(str, Enum):
    """Kind of project to scaffold."""
    WEBAPP = "webapp"
    CLI = "cli"
    LIBRARY = "library"
    API = "api"
    DATA = "data"
    MOBILE = "mobile"
    DESKTOP = "desktop"


class SdlcPhase(str, Enum):
    """Lifecycle stage tracked in ``.sdlc/config.yaml``."""
    INITIATION = "initiation"
    PLANNING = "planning"
    EXECUTION = "execution"
    MONITORING = "monitoring"
    CLOSURE = "closure"


class GovernanceLevel(str, Enum):
    """Policy strictness tier. Quality gates tighten from minimal to enterprise."""
    MINIMAL = "minimal"
    STANDARD = "standard"
    ENTERPRISE = "enterprise"


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

class ProjectConfig(BaseModel):
    """Declarative description of a project to scaffold.

    Field names follow Python conventions; the camelCase names used on the
    wire (``techStack``, ``sdlcPhase``) are accepted as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Project name, also the root directory name")
    type: ProjectType = Field(..., description="Type of project to create")
    language: str = Field(..., description="Primary programming language")
    tech_stack: list[str] = Field(default_factory=list, alias="techStack")
    framework: Optional[str] = Field(default=None, description="Main framework")
    features: list[str] = Field(default_factory=list)
    sdlc_phase: SdlcPhase = Field(default=SdlcPhase.INITIATION, alias="sdlcPhase")
    governance: GovernanceLevel = Field(default=GovernanceLevel.STANDARD)

    @field_validator("name")
    @classmethod
    def _name_is_single_component(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Project name must not be empty")
        if "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError(f"Project name must be a single directory name: {value!r}")
        return value

    @field_validator("tech_stack", "features", mode="before")
    @classmethod
    def _none_is_empty(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("sdlc_phase", mode="before")
    @classmethod
    def _default_phase(cls, value: object) -> object:
        return SdlcPhase.INITIATION if value is None else value

    @field_validator("governance", mode="before")
    @classmethod
    def _default_governance(cls, value: object) -> object:
        return GovernanceLevel.STANDARD if value is None else value


# ---------------------------------------------------------------------------
# Generated structure
# ---------------------------------------------------------------------------

class FileEntry(BaseModel):
    """A file to write, relative to the project root."""
    path: str
    content: str


class ProjectStructure(BaseModel):
    """Directories and files that make up a freshly generated project.

    Parent directories of files need not be listed; the materializer creates
    them on demand.
    """

    directories: list[str] = Field(default_factory=list)
    files: list[FileEntry] = Field(default_factory=list)
