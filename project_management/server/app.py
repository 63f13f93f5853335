"""MCP server wiring for the project management tools.

Usage::

    project-management-mcp
    project-management-mcp --projects-root ./projects --no-git
    python -m project_management
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    CallToolResult,
    TextContent,
    Tool,
)

from ..config import Config
from ..errors import ErrorKind
from ..utils import print_success
from .dispatcher import ToolDispatcher, ToolResult
from .handlers import build_dispatcher
from .schema import list_tools

ERROR_CODES: dict[ErrorKind, int] = {
    ErrorKind.METHOD_NOT_FOUND: METHOD_NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: INVALID_PARAMS,
    ErrorKind.INTERNAL_ERROR: INTERNAL_ERROR,
}


def error_payload(result: ToolResult) -> dict[str, Any]:
    """Structured failure body: message, error kind and JSON-RPC code."""
    failure = result.error
    return {
        "error": failure.message,
        "kind": failure.kind.value,
        "code": ERROR_CODES[failure.kind],
    }


def to_call_result(result: ToolResult) -> CallToolResult:
    """Convert a ``ToolResult`` into the MCP ``tools/call`` result.

    Failures come back with ``isError=True``; the text block and
    ``structuredContent`` both carry the payload from :func:`error_payload`.
    """
    if result.error is not None:
        payload = error_payload(result)
        return CallToolResult(
            content=[TextContent(type="text", text=json.dumps(payload, indent=2, ensure_ascii=False))],
            structuredContent=payload,
            isError=True,
        )
    return CallToolResult(
        content=[TextContent(type="text", text=block.text) for block in result.content],
        isError=False,
    )


def create_server(config: Config, dispatcher: ToolDispatcher | None = None) -> Server:
    """Create the low-level MCP server with list/call tool handlers."""
    dispatcher = dispatcher or build_dispatcher(config)
    server = Server(config.server.name, version=config.server.version)

    @server.list_tools()
    async def _list_tools() -> list[Tool]:
        return list_tools()

    # Arguments are validated by the handlers' pydantic models, not the SDK.
    @server.call_tool(validate_input=False)
    async def _call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        result = await dispatcher.dispatch(name, arguments)
        return to_call_result(result)

    return server


async def run(config: Config) -> None:
    """Serve the tools over stdio until the client disconnects."""
    server = create_server(config)
    async with stdio_server() as (read_stream, write_stream):
        print_success(f"🚀 {config.server.name} started (projects root: {config.projects_root})")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """CLI entry point for ``project-management-mcp``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Project management MCP server -- creates project scaffolding over stdio",
    )
    parser.add_argument(
        "--projects-root",
        type=Path,
        default=None,
        help="Directory new projects are created in (default: $PROJECTS_ROOT)",
    )
    parser.add_argument(
        "--no-git",
        action="store_true",
        help="Skip git init and the initial commit",
    )
    args = parser.parse_args()

    config = Config.from_env()
    if args.projects_root is not None:
        config.projects_root = args.projects_root
    if args.no_git:
        config.git.enabled = False

    asyncio.run(run(config))


if __name__ == "__main__":
    main()
