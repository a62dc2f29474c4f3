"""better-help Server - chat-bot script help exposed over MCP."""

import argparse
import logging
import os

from fastmcp import FastMCP

from better_help import __version__
from better_help.tools import catch_all, query_help, reload_help

mcp = FastMCP(
    "better-help",
    instructions=(
        "Help for a chat bot's scripts. "
        "Lists the scripts and commands the bot knows, searches command "
        "usage strings by free text, and suggests commands for chat "
        "messages the bot did not understand."
    ),
)

logger = logging.getLogger("better-help.server")

# Register help tools
query_help.register(mcp)
catch_all.register(mcp)
reload_help.register(mcp)


def main():
    """Entry point for the better-help server."""
    parser = argparse.ArgumentParser(
        prog="better-help",
        description="better-help Server - chat-bot script help exposed over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"better-help {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Bot directory holding scripts/ and external-scripts.json (default: BETTER_HELP_CWD or .)",
    )
    args = parser.parse_args()

    if args.cwd:
        os.environ["BETTER_HELP_CWD"] = args.cwd

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    logger.info("Starting better-help (transport=%s)", args.transport)
    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
