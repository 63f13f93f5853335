"""Error taxonomy for tool invocations.

Every failure that reaches a caller carries one of three kinds.  Handlers
raise the ``ToolError`` subclasses below when they know the kind; anything
else is reported as ``InternalError`` by the dispatcher.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Caller-visible failure category."""
    METHOD_NOT_FOUND = "MethodNotFound"
    ALREADY_EXISTS = "AlreadyExists"
    INTERNAL_ERROR = "InternalError"


class ToolError(Exception):
    """Raised when a tool invocation fails with a known error kind."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        if kind is not None:
            self.kind = kind
        super().__init__(message)


class ToolNotFoundError(ToolError):
    """Raised for a tool name that is not in the registry."""

    kind = ErrorKind.METHOD_NOT_FOUND

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ProjectExistsError(ToolError):
    """Raised when the target project directory is already present."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Project {name} already exists at {path}")


class GitError(Exception):
    """Raised when a git command fails during repository bootstrap."""

    def __init__(self, message: str, command: str = "", stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        super().__init__(message)
