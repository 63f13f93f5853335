"""Project structure generation.

Turns a ``ProjectConfig`` into a ``ProjectStructure``: the list of
directories to create and the (path, content) pairs to write.  Generation is
pure and deterministic; nothing here touches the filesystem.
"""

from __future__ import annotations

from .documents import DocumentBuilder
from .models import FileEntry, ProjectConfig, ProjectStructure, ProjectType


# ---------------------------------------------------------------------------
# Directory tables
# ---------------------------------------------------------------------------

BASE_DIRECTORIES: tuple[str, ...] = (
    "src",
    "tests",
    "docs",
    ".github/workflows",
    ".ai",
    ".sdlc",
    ".governance",
)

# data, mobile and desktop get the baseline only.
TYPE_DIRECTORIES: dict[ProjectType, tuple[str, ...]] = {
    ProjectType.WEBAPP: (
        "src/components",
        "src/pages",
        "src/api",
        "src/utils",
        "src/types",
        "public",
        "styles",
    ),
    ProjectType.CLI: (
        "src/commands",
        "src/utils",
        "src/types",
        "bin",
    ),
    ProjectType.LIBRARY: (
        "src/core",
        "src/utils",
        "src/types",
        "examples",
    ),
    ProjectType.API: (
        "src/routes",
        "src/middleware",
        "src/models",
        "src/services",
        "src/utils",
        "src/types",
    ),
    ProjectType.DATA: (),
    ProjectType.MOBILE: (),
    ProjectType.DESKTOP: (),
}

_missing = set(ProjectType) - set(TYPE_DIRECTORIES)
if _missing:
    raise RuntimeError(
        "TYPE_DIRECTORIES has no entry for: "
        + ", ".join(sorted(t.value for t in _missing))
    )


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class StructureGenerator:
    """Builds the directory tree and file contents for a new project.

    Files are emitted in a fixed order:
    - ``package.json``
    - ``README.md``
    - ``.gitignore``
    - ``.ai/config.yaml``
    - ``.sdlc/config.yaml``
    - ``.governance/policies.yaml``
    """

    def __init__(self, documents: DocumentBuilder | None = None) -> None:
        self.documents = documents or DocumentBuilder()

    def generate(self, config: ProjectConfig) -> ProjectStructure:
        """Generate the complete structure for *config*."""
        directories = list(BASE_DIRECTORIES) + list(TYPE_DIRECTORIES[config.type])

        docs = self.documents
        files = [
            FileEntry(path="package.json", content=docs.package_json(config)),
            FileEntry(path="README.md", content=docs.readme(config)),
            FileEntry(path=".gitignore", content=docs.gitignore(config)),
            FileEntry(path=".ai/config.yaml", content=docs.ai_config(config)),
            FileEntry(path=".sdlc/config.yaml", content=docs.sdlc_config(config)),
            FileEntry(path=".governance/policies.yaml", content=docs.governance_config(config)),
        ]
        return ProjectStructure(directories=directories, files=files)
