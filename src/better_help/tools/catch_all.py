"""Catch-all Tool - suggest commands for messages no script handled."""

from typing import Any

from fastmcp import FastMCP

from better_help.contracts import build_help_data, build_ok
from better_help.tools._snapshot import current_snapshot
from better_help.utils import ChatMessage, normalize_input


def register(mcp: FastMCP) -> None:
    """Register help_catch_all tool with the MCP server."""

    @mcp.tool()
    async def help_catch_all(message: ChatMessage) -> dict[str, Any]:
        """Suggest commands for a chat message addressed to the bot that no
        script understood.

        Messages that do not start with the bot's name or alias are ignored
        (action "ignored", no reply).
        """
        snapshot = await current_snapshot("help_catch_all")
        if isinstance(snapshot, dict):
            return snapshot

        reply = snapshot.responder.catch_all(normalize_input(message))
        commands = reply.commands if reply is not None else ()
        summary: dict[str, Any] = {"count": len(commands)}
        if snapshot.errors:
            summary["warnings"] = snapshot.warnings()

        if reply is None:
            return build_ok(build_help_data(action="ignored", reply=None, summary=summary))

        return build_ok(
            build_help_data(
                action=reply.action,
                reply=reply.text,
                entries=list(commands),
                summary=summary,
            )
        )
