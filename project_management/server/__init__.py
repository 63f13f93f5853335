"""MCP-facing layer: tool schemas, dispatch, handlers and server wiring.

Key classes:
    ToolDispatcher   - Routes tool calls and normalizes failures
    ToolResult       - Success/failure envelope returned by every tool
    ProjectHandlers  - Implementations of the four tools
"""

from .app import create_server, error_payload, main, run, to_call_result
from .dispatcher import ContentBlock, ToolDispatcher, ToolFailure, ToolResult
from .handlers import ProjectHandlers, build_dispatcher
from .schema import TOOL_SCHEMAS, list_tools

__all__ = [
    # Dispatch
    "ToolDispatcher",
    "ToolResult",
    "ToolFailure",
    "ContentBlock",
    # Handlers
    "ProjectHandlers",
    "build_dispatcher",
    # Schema
    "TOOL_SCHEMAS",
    "list_tools",
    # Server
    "create_server",
    "run",
    "main",
    "to_call_result",
    "error_payload",
]
