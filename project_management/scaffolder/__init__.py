"""Project scaffolder -- generates and writes project structures.

This module takes a ``ProjectConfig`` and produces the directory tree and
metadata documents for a new project, then writes them under the configured
projects root.

Quick usage::

    from project_management.scaffolder import (
        ProjectConfig, ProjectMaterializer, StructureGenerator,
    )

    config = ProjectConfig(name="demo", type="cli", language="rust")
    structure = StructureGenerator().generate(config)
    project_path = await ProjectMaterializer("/tmp/projects").materialize(
        config.name, structure
    )
"""

from .documents import DocumentBuilder
from .generator import BASE_DIRECTORIES, TYPE_DIRECTORIES, StructureGenerator
from .materializer import ProjectMaterializer
from .models import (
    FileEntry,
    GovernanceLevel,
    ProjectConfig,
    ProjectStructure,
    ProjectType,
    SdlcPhase,
)
from .templates import TemplateRenderer
from .vcs import GitBootstrapper

__all__ = [
    # Models
    "ProjectConfig",
    "ProjectStructure",
    "FileEntry",
    "ProjectType",
    "SdlcPhase",
    "GovernanceLevel",
    # Generation
    "StructureGenerator",
    "DocumentBuilder",
    "TemplateRenderer",
    "BASE_DIRECTORIES",
    "TYPE_DIRECTORIES",
    # Side effects
    "ProjectMaterializer",
    "GitBootstrapper",
]
