"""Project management MCP server.

Exposes schema-validated tools that create project scaffolding (directories,
package descriptor, README, ignore rules and AI/SDLC/governance metadata)
under a configured projects root.
"""

__version__ = "1.0.0"
