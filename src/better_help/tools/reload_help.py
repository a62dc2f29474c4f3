"""Reload Tool - rebuild the help corpus from script sources."""

from typing import Any

from fastmcp import FastMCP

from better_help.contracts import build_help_data, build_ok
from better_help.tools._snapshot import current_snapshot


def register(mcp: FastMCP) -> None:
    """Register help_reload tool with the MCP server."""

    @mcp.tool()
    async def help_reload() -> dict[str, Any]:
        """Reload script documentation from every source and rebuild the
        search index. Requests already in flight finish on the old index.
        """
        snapshot = await current_snapshot("help_reload", reload=True)
        if isinstance(snapshot, dict):
            return snapshot

        return build_ok(
            build_help_data(
                action="reload",
                reply=None,
                entries=sorted(snapshot.corpus),
                summary={
                    "scripts": len(snapshot.corpus),
                    "commands": len(snapshot.index),
                    "warnings": snapshot.warnings(),
                },
            )
        )
