"""Tool dispatch and result envelopes.

The dispatcher looks a tool name up in a fixed registry, awaits the handler
and normalizes whatever happens into a ``ToolResult``.  No exception escapes
:meth:`ToolDispatcher.dispatch`.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from ..errors import ErrorKind, ToolError, ToolNotFoundError
from ..utils import print_error


# ---------------------------------------------------------------------------
# Envelope models
# ---------------------------------------------------------------------------

class ContentBlock(BaseModel):
    """A typed, human-readable payload returned by a tool."""
    type: Literal["text"] = "text"
    text: str


class ToolFailure(BaseModel):
    """Structured failure carrying an error kind and a message."""
    kind: ErrorKind
    message: str


class ToolResult(BaseModel):
    """Outcome of one tool invocation: content blocks or a failure, never both."""

    content: list[ContentBlock] = Field(default_factory=list)
    error: Optional[ToolFailure] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def text(self) -> str:
        """All text blocks joined with blank lines."""
        return "\n\n".join(block.text for block in self.content)

    @classmethod
    def success(cls, *texts: str) -> "ToolResult":
        return cls(content=[ContentBlock(text=t) for t in texts])

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "ToolResult":
        return cls(error=ToolFailure(kind=kind, message=message))


ToolHandler = Callable[[dict[str, Any]], Awaitable[ToolResult]]


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

class ToolDispatcher:
    """Routes ``(tool name, arguments)`` pairs to registered handlers.

    Error mapping:
    - unknown name -> ``MethodNotFound``, no handler runs
    - ``ToolError`` from a handler -> the error's own kind
    - any other exception -> ``InternalError`` with the stringified cause
    """

    def __init__(self, handlers: Mapping[str, ToolHandler]) -> None:
        self._handlers: dict[str, ToolHandler] = dict(handlers)

    @property
    def names(self) -> list[str]:
        """Registered tool names, in registration order."""
        return list(self._handlers)

    async def dispatch(self, name: str, arguments: dict[str, Any] | None) -> ToolResult:
        handler = self._handlers.get(name)
        if handler is None:
            exc = ToolNotFoundError(name)
            print_error(str(exc))
            return ToolResult.failure(exc.kind, str(exc))

        try:
            return await handler(arguments or {})
        except ToolError as exc:
            print_error(f"{name} failed: {exc}")
            return ToolResult.failure(exc.kind, str(exc))
        except Exception as exc:
            print_error(f"{name} failed: {exc}")
            return ToolResult.failure(
                ErrorKind.INTERNAL_ERROR, f"Error executing tool: {exc}"
            )
