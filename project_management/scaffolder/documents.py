"""Document builders for generated project files.

Each builder is a pure function of a ``ProjectConfig`` that returns the text
of one artifact: the package descriptor, the README, the ignore rules and the
three YAML metadata descriptors under ``.ai/``, ``.sdlc/`` and
``.governance/``.
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from .models import GovernanceLevel, ProjectConfig, ProjectType, SdlcPhase
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Static tables
# ---------------------------------------------------------------------------

BASE_SCRIPTS: dict[str, str] = {
    "dev": "npm run start:dev",
    "build": "npm run build:prod",
    "test": "jest",
    "lint": "eslint src/**/*",
}

# Types without an entry in here keep ``start:dev``/``build:prod`` unresolved.
SCRIPT_OVERRIDES: dict[ProjectType, dict[str, str]] = {
    ProjectType.WEBAPP: {
        "start:dev": "next dev",
        "build:prod": "next build",
        "start": "next start",
    },
    ProjectType.CLI: {
        "start:dev": "ts-node src/index.ts",
        "build:prod": "tsc",
    },
    ProjectType.LIBRARY: {},
    ProjectType.API: {
        "start:dev": "nodemon src/index.ts",
        "build:prod": "tsc",
    },
    ProjectType.DATA: {},
    ProjectType.MOBILE: {},
    ProjectType.DESKTOP: {},
}

# Exact, case-sensitive language match -> extra ignore-rules template.
LANGUAGE_IGNORE_TEMPLATES: dict[str, str] = {
    "python": "gitignore/python.j2",
    "rust": "gitignore/rust.j2",
}

AI_PROVIDER = "claude"
AI_MODEL = "claude-3-sonnet"
AI_CAPABILITIES: tuple[str, ...] = (
    "code-generation",
    "testing",
    "documentation",
    "refactoring",
)
AI_AUTOMATION: dict[str, bool] = {
    "autoCommit": False,
    "autoTest": True,
    "autoDocument": True,
}

PHASE_DELIVERABLES: dict[SdlcPhase, tuple[str, ...]] = {
    SdlcPhase.INITIATION: ("project-charter", "stakeholder-analysis", "feasibility-study"),
    SdlcPhase.PLANNING: ("requirements-document", "architecture-design", "project-plan"),
    SdlcPhase.EXECUTION: ("working-software", "test-results", "documentation"),
    SdlcPhase.MONITORING: ("status-reports", "quality-metrics", "performance-data"),
    SdlcPhase.CLOSURE: ("final-deliverables", "lessons-learned", "project-retrospective"),
}

GOVERNANCE_POLICIES: dict[GovernanceLevel, tuple[str, ...]] = {
    GovernanceLevel.MINIMAL: ("basic-quality-checks",),
    GovernanceLevel.STANDARD: (
        "code-review-required",
        "testing-mandatory",
        "documentation-required",
    ),
    GovernanceLevel.ENTERPRISE: (
        "code-review-required",
        "security-scan-mandatory",
        "documentation-required",
        "compliance-tracking",
    ),
}

QUALITY_GATES: dict[GovernanceLevel, dict[str, Any]] = {
    GovernanceLevel.MINIMAL: {
        "testCoverage": 70,
        "codeQuality": 7.0,
        "securityScan": False,
        "performanceTest": False,
    },
    GovernanceLevel.STANDARD: {
        "testCoverage": 80,
        "codeQuality": 8.0,
        "securityScan": False,
        "performanceTest": True,
    },
    GovernanceLevel.ENTERPRISE: {
        "testCoverage": 90,
        "codeQuality": 9.0,
        "securityScan": True,
        "performanceTest": True,
    },
}


def _check_exhaustive(table: dict[Any, Any], enum_cls: type, table_name: str) -> None:
    missing = set(enum_cls) - set(table)
    if missing:
        names = ", ".join(sorted(m.value for m in missing))
        raise RuntimeError(f"{table_name} has no entry for: {names}")


_check_exhaustive(SCRIPT_OVERRIDES, ProjectType, "SCRIPT_OVERRIDES")
_check_exhaustive(PHASE_DELIVERABLES, SdlcPhase, "PHASE_DELIVERABLES")
_check_exhaustive(GOVERNANCE_POLICIES, GovernanceLevel, "GOVERNANCE_POLICIES")
_check_exhaustive(QUALITY_GATES, GovernanceLevel, "QUALITY_GATES")


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


class DocumentBuilder:
    """Builds the content of every generated document for a project."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    # -- package.json ------------------------------------------------------

    def package_descriptor(self, config: ProjectConfig) -> dict[str, Any]:
        """Return the ``package.json`` record for *config*."""
        project_type = config.type
        return {
            "name": config.name,
            "version": "1.0.0",
            "description": f"AI-Native {project_type.value} project",
            "main": "dist/index.js" if project_type == ProjectType.LIBRARY else "src/index.js",
            "scripts": {**BASE_SCRIPTS, **SCRIPT_OVERRIDES[project_type]},
            "keywords": ["ai-native", project_type.value, *config.tech_stack],
            "author": "AI-Native Platform",
            "license": "MIT",
        }

    def package_json(self, config: ProjectConfig) -> str:
        return json.dumps(self.package_descriptor(config), indent=2, ensure_ascii=False)

    # -- README.md ---------------------------------------------------------

    def readme(self, config: ProjectConfig) -> str:
        """Render the human-readable project overview."""
        return self.renderer.render("README.md.j2", _template_context(config))

    # -- .gitignore --------------------------------------------------------

    def gitignore(self, config: ProjectConfig) -> str:
        """Common ignore rules plus a language block for recognised languages."""
        context = _template_context(config)
        content = self.renderer.render("gitignore/common.j2", context)
        extra = LANGUAGE_IGNORE_TEMPLATES.get(config.language)
        if extra is not None:
            content += self.renderer.render(extra, context)
        return content

    # -- .ai/config.yaml ---------------------------------------------------

    def ai_config(self, config: ProjectConfig) -> str:
        data = {
            "project": {
                "name": config.name,
                "type": config.type.value,
                "language": config.language,
                "techStack": list(config.tech_stack),
                "features": list(config.features),
            },
            "ai": {
                "provider": AI_PROVIDER,
                "model": AI_MODEL,
                "capabilities": list(AI_CAPABILITIES),
            },
            "automation": dict(AI_AUTOMATION),
        }
        return _dump_yaml(data)

    # -- .sdlc/config.yaml -------------------------------------------------

    def sdlc_config(self, config: ProjectConfig) -> str:
        """Describe all five phases; only ``config.sdlc_phase`` is active."""
        data = {
            "project": {
                "name": config.name,
                "phase": config.sdlc_phase.value,
                "governance": config.governance.value,
            },
            "phases": {
                phase.value: {
                    "status": "active" if phase == config.sdlc_phase else "pending",
                    "deliverables": list(PHASE_DELIVERABLES[phase]),
                }
                for phase in SdlcPhase
            },
        }
        return _dump_yaml(data)

    # -- .governance/policies.yaml -----------------------------------------

    def governance_config(self, config: ProjectConfig) -> str:
        level = config.governance
        data = {
            "governance": {
                "level": level.value,
                "policies": list(GOVERNANCE_POLICIES[level]),
            },
            "qualityGates": dict(QUALITY_GATES[level]),
        }
        return _dump_yaml(data)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _template_context(config: ProjectConfig) -> dict[str, Any]:
    return {
        "name": config.name,
        "type": config.type.value,
        "language": config.language,
        "framework": config.framework,
        "tech_stack": list(config.tech_stack),
        "features": list(config.features),
        "sdlc_phase": config.sdlc_phase.value,
        "governance": config.governance.value,
    }


def _dump_yaml(data: dict[str, Any]) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
