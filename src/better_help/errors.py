"""Error types and structured error rendering for help loading."""

from __future__ import annotations


class SourceLoadError(Exception):
    """A script source could not be loaded.

    Raised by individual source loaders and collected by CorpusLoader, so
    one failing source never prevents the others from being aggregated.
    """

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"Error loading help from {source}: {message}")
        self.source = source
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"source": self.source, "message": self.message}


def format_operation_error(
    operation: str,
    status: str,
    message: str,
    reason: str | None = None,
    action: str | None = None,
) -> dict[str, str]:
    """Return structured operation error payload with human-readable display."""
    display_lines = [
        f"{operation} failed",
        f"- status: {status}",
        f"- message: {message}",
    ]
    if reason:
        display_lines.append(f"- reason: {reason}")
    if action:
        display_lines.append(f"- action: {action}")

    return {
        "status": status,
        "operation": operation,
        "message": message,
        "reason": reason or "",
        "action": action or "",
        "display": "\n".join(display_lines),
    }
