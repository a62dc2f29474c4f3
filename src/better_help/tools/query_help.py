"""Help Query Tool - answer `<robot> help [query]`."""

from typing import Any

from fastmcp import FastMCP

from better_help.contracts import build_help_data, build_ok
from better_help.tools._snapshot import current_snapshot
from better_help.utils import HelpQuery


def register(mcp: FastMCP) -> None:
    """Register help tool with the MCP server."""

    @mcp.tool()
    async def help(query: HelpQuery = None) -> dict[str, Any]:
        """Show what the bot can do (like `hubot help`).

        Query forms:
        - None, 'me': List scripts with a one-line description each
        - 'all': List every command
        - Script name (e.g., "meme"): That script's commands
        - Anything else: Search commands by substring, regex, then words

        Related tools:
        - help_catch_all: Suggest commands for an unrecognized chat message
        - help_reload: Reload script documentation from disk
        """
        snapshot = await current_snapshot("help")
        if isinstance(snapshot, dict):
            return snapshot

        reply = snapshot.responder.respond(query)
        summary: dict[str, Any] = {
            "count": len(reply.commands),
            "scripts": len(snapshot.corpus),
        }
        if reply.action == "not_found":
            summary["hints"] = [
                "Try a script name from the overview (call help without a query).",
                "Try fewer or different words.",
            ]
        if snapshot.errors:
            summary["warnings"] = snapshot.warnings()

        return build_ok(
            build_help_data(
                action=reply.action,
                reply=reply.text,
                entries=list(reply.commands),
                summary=summary,
            )
        )
