"""Tool input schemas.

``TOOL_SCHEMAS`` is the contract advertised to MCP clients.  The Pydantic
argument models below mirror it and are what handlers validate against.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from mcp.types import Tool
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..scaffolder.models import GovernanceLevel, ProjectConfig, ProjectType, SdlcPhase


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FeatureType(str, Enum):
    """Kind of feature ``scaffold_feature`` adds."""
    COMPONENT = "component"
    PAGE = "page"
    API = "api"
    SERVICE = "service"
    UTILITY = "utility"


class DependencyAction(str, Enum):
    """Operation ``manage_dependencies`` performs."""
    ADD = "add"
    REMOVE = "remove"
    UPDATE = "update"


def _values(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]


def _string_array(description: str) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


# ---------------------------------------------------------------------------
# JSON schemas
# ---------------------------------------------------------------------------

CREATE_PROJECT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "config": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Project name"},
                "type": {
                    "type": "string",
                    "enum": _values(ProjectType),
                    "description": "Type of project to create",
                },
                "techStack": _string_array(
                    'Technology stack (e.g., ["react", "typescript", "node"])'
                ),
                "framework": {"type": "string", "description": "Main framework (optional)"},
                "language": {"type": "string", "description": "Primary programming language"},
                "features": _string_array("Features to implement"),
                "sdlcPhase": {
                    "type": "string",
                    "enum": _values(SdlcPhase),
                    "description": "Current SDLC phase",
                },
                "governance": {
                    "type": "string",
                    "enum": _values(GovernanceLevel),
                    "description": "Governance level",
                },
            },
            "required": ["name", "type", "language"],
        },
    },
    "required": ["config"],
}

SCAFFOLD_FEATURE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "projectPath": {"type": "string", "description": "Path to the project"},
        "featureName": {"type": "string", "description": "Name of the feature"},
        "featureType": {
            "type": "string",
            "enum": _values(FeatureType),
            "description": "Type of feature to create",
        },
        "dependencies": _string_array("Additional dependencies needed"),
    },
    "required": ["projectPath", "featureName", "featureType"],
}

MANAGE_DEPENDENCIES_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "projectPath": {"type": "string", "description": "Path to the project"},
        "action": {
            "type": "string",
            "enum": _values(DependencyAction),
            "description": "Action to perform",
        },
        "dependencies": _string_array("Dependencies to manage"),
        "devDependencies": {
            "type": "boolean",
            "description": "Whether these are dev dependencies",
        },
    },
    "required": ["projectPath", "action", "dependencies"],
}

MODIFY_PROJECT_STRUCTURE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "projectPath": {"type": "string", "description": "Path to the project"},
        "changes": {
            "type": "object",
            "properties": {
                "addDirectories": _string_array("Directories to add"),
                "addFiles": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "path": {"type": "string"},
                            "content": {"type": "string"},
                        },
                        "required": ["path", "content"],
                    },
                    "description": "Files to add",
                },
                "removeItems": _string_array("Files or directories to remove"),
            },
        },
    },
    "required": ["projectPath", "changes"],
}

TOOL_SCHEMAS: list[dict[str, Any]] = [
    {
        "name": "create_project",
        "description": "Create a new project with specified configuration",
        "inputSchema": CREATE_PROJECT_SCHEMA,
    },
    {
        "name": "scaffold_feature",
        "description": "Add a new feature to an existing project",
        "inputSchema": SCAFFOLD_FEATURE_SCHEMA,
    },
    {
        "name": "manage_dependencies",
        "description": "Add, remove, or update project dependencies",
        "inputSchema": MANAGE_DEPENDENCIES_SCHEMA,
    },
    {
        "name": "modify_project_structure",
        "description": "Modify the structure of an existing project",
        "inputSchema": MODIFY_PROJECT_STRUCTURE_SCHEMA,
    },
]


def list_tools() -> list[Tool]:
    """Return the advertised tools in registry order."""
    return [
        Tool(
            name=schema["name"],
            description=schema["description"],
            inputSchema=schema["inputSchema"],
        )
        for schema in TOOL_SCHEMAS
    ]


# ---------------------------------------------------------------------------
# Argument models
# ---------------------------------------------------------------------------

class _ToolArgs(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class CreateProjectArgs(_ToolArgs):
    config: ProjectConfig


class ScaffoldFeatureArgs(_ToolArgs):
    project_path: str = Field(..., alias="projectPath")
    feature_name: str = Field(..., alias="featureName")
    feature_type: FeatureType = Field(..., alias="featureType")
    dependencies: list[str] = Field(default_factory=list)

    @field_validator("dependencies", mode="before")
    @classmethod
    def _none_is_empty(cls, value: object) -> object:
        return [] if value is None else value


class ManageDependenciesArgs(_ToolArgs):
    project_path: str = Field(..., alias="projectPath")
    action: DependencyAction
    dependencies: list[str]
    dev_dependencies: bool = Field(default=False, alias="devDependencies")

    @field_validator("dev_dependencies", mode="before")
    @classmethod
    def _none_is_false(cls, value: object) -> object:
        return False if value is None else value


class FileSpec(_ToolArgs):
    path: str
    content: str


class StructureChanges(_ToolArgs):
    add_directories: list[str] = Field(default_factory=list, alias="addDirectories")
    add_files: list[FileSpec] = Field(default_factory=list, alias="addFiles")
    remove_items: list[str] = Field(default_factory=list, alias="removeItems")

    @field_validator("add_directories", "add_files", "remove_items", mode="before")
    @classmethod
    def _none_is_empty(cls, value: object) -> object:
        return [] if value is None else value

    def relative_paths(self) -> list[str]:
        """Every path the change set refers to, in declaration order."""
        return [
            *self.add_directories,
            *(spec.path for spec in self.add_files),
            *self.remove_items,
        ]


class ModifyProjectStructureArgs(_ToolArgs):
    project_path: str = Field(..., alias="projectPath")
    changes: StructureChanges
