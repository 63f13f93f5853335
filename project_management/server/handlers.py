"""Handlers for the four project management tools.

``create_project`` generates, writes and git-initializes a project.  The
other three tools validate their input and describe the requested change
without touching the filesystem.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..config import Config
from ..scaffolder import (
    GitBootstrapper,
    ProjectConfig,
    ProjectMaterializer,
    StructureGenerator,
)
from ..utils import PathLockRegistry, print_info, print_success
from .dispatcher import ToolDispatcher, ToolHandler, ToolResult
from .schema import (
    CreateProjectArgs,
    DependencyAction,
    ManageDependenciesArgs,
    ModifyProjectStructureArgs,
    ScaffoldFeatureArgs,
)

_ACTION_VERBS: dict[DependencyAction, tuple[str, str]] = {
    DependencyAction.ADD: ("adding", "added"),
    DependencyAction.REMOVE: ("removing", "removed"),
    DependencyAction.UPDATE: ("updating", "updated"),
}


class ProjectHandlers:
    """Implements each tool against an explicit ``Config``."""

    def __init__(
        self,
        config: Config,
        generator: StructureGenerator | None = None,
        materializer: ProjectMaterializer | None = None,
        git: GitBootstrapper | None = None,
    ) -> None:
        self.config = config
        self.generator = generator or StructureGenerator()
        self.materializer = materializer or ProjectMaterializer(config.projects_root)
        self.git = git or GitBootstrapper(config.git)
        self.locks = PathLockRegistry()

    def registry(self) -> dict[str, ToolHandler]:
        """Tool name -> handler, in advertised order."""
        return {
            "create_project": self.create_project,
            "scaffold_feature": self.scaffold_feature,
            "manage_dependencies": self.manage_dependencies,
            "modify_project_structure": self.modify_project_structure,
        }

    # -- create_project ----------------------------------------------------

    async def create_project(self, arguments: dict[str, Any]) -> ToolResult:
        args = CreateProjectArgs.model_validate(arguments)
        config = args.config
        project_path = self.materializer.project_path(config.name)

        print_info(f"🚀 Creating {config.type.value} project: {config.name}")

        # Held across the existence check and the git step so a concurrent
        # call for the same name sees the finished directory.
        async with self.locks.hold(project_path):
            structure = self.generator.generate(config)
            project_path = await self.materializer.materialize(config.name, structure)
            await self.git.bootstrap(project_path, config)

        print_success(f"✅ Project {config.name} created successfully at {project_path}")
        return ToolResult.success(_creation_summary(config, project_path))

    # -- scaffold_feature --------------------------------------------------

    async def scaffold_feature(self, arguments: dict[str, Any]) -> ToolResult:
        args = ScaffoldFeatureArgs.model_validate(arguments)
        print_info(f"🔧 Scaffolding {args.feature_type.value} feature: {args.feature_name}")
        return ToolResult.success(
            f'Feature "{args.feature_name}" scaffolded successfully!\n\n'
            f"Type: {args.feature_type.value}\n"
            f"Project: {args.project_path}\n"
            f"Dependencies: {', '.join(args.dependencies) or 'None'}"
        )

    # -- manage_dependencies -----------------------------------------------

    async def manage_dependencies(self, arguments: dict[str, Any]) -> ToolResult:
        args = ManageDependenciesArgs.model_validate(arguments)
        gerund, past = _ACTION_VERBS[args.action]
        print_info(f"📦 {gerund.capitalize()} dependencies: {', '.join(args.dependencies)}")
        return ToolResult.success(
            f"Dependencies {past} successfully!\n\n"
            f"Project: {args.project_path}\n"
            f"Dependencies: {', '.join(args.dependencies)}\n"
            f"Dev Dependencies: {str(args.dev_dependencies).lower()}"
        )

    # -- modify_project_structure ------------------------------------------

    async def modify_project_structure(self, arguments: dict[str, Any]) -> ToolResult:
        args = ModifyProjectStructureArgs.model_validate(arguments)
        for rel in args.changes.relative_paths():
            _ensure_within(args.project_path, rel)

        print_info("🏗️ Modifying project structure")
        changes = args.changes.model_dump(by_alias=True)
        return ToolResult.success(
            "Project structure modified successfully!\n\n"
            f"Project: {args.project_path}\n"
            f"Changes applied: {json.dumps(changes, indent=2, ensure_ascii=False)}"
        )


def build_dispatcher(config: Config) -> ToolDispatcher:
    """Create a dispatcher wired to fresh handlers for *config*."""
    return ToolDispatcher(ProjectHandlers(config).registry())


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _creation_summary(config: ProjectConfig, project_path: Path) -> str:
    tech_stack = ", ".join(config.tech_stack) or "N/A"
    return (
        f'Project "{config.name}" created successfully!\n\n'
        f"📁 Location: {project_path}\n"
        f"🏗️ Type: {config.type.value}\n"
        f"💻 Language: {config.language}\n"
        f"🛠️ Tech Stack: {tech_stack}\n"
        f"📊 SDLC Phase: {config.sdlc_phase.value}\n"
        f"🏛️ Governance: {config.governance.value}\n\n"
        "Next steps:\n"
        f"1. cd {project_path}\n"
        "2. npm install (if applicable)\n"
        "3. Start development!"
    )


def _ensure_within(project_path: str, relative: str) -> Path:
    """Resolve *relative* under *project_path*.

    Raises:
        ValueError: For absolute paths or paths that escape the project.
    """
    if not relative or Path(relative).is_absolute():
        raise ValueError(f"Path must be relative to the project: {relative!r}")
    base = Path(project_path).resolve()
    resolved = (base / relative).resolve()
    try:
        resolved.relative_to(base)
    except ValueError:
        raise ValueError(f"Path escapes project directory: {relative}") from None
    return resolved
