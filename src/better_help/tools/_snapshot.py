"""Snapshot access shared by the help tools."""

import logging
from typing import Any

from better_help.contracts import build_error
from better_help.errors import format_operation_error
from better_help.help.service import HelpService, HelpSnapshot

logger = logging.getLogger("better-help.tools")


async def current_snapshot(operation: str, reload: bool = False) -> HelpSnapshot | dict[str, Any]:
    """Return the help snapshot, or an error envelope if it cannot be loaded."""
    try:
        if reload:
            return await HelpService.reload()
        return await HelpService.get()
    except Exception as exc:
        logger.exception("Help corpus could not be loaded for %s", operation)
        error = format_operation_error(
            operation,
            status="load_failed",
            message="Help corpus could not be loaded",
            reason=str(exc),
            action="check BETTER_HELP_CWD and the script sources, then call help_reload",
        )
        return build_error("load_failed", error["message"], error)
