"""Validation models and utilities for help tools."""

from typing import Annotated, Optional

from pydantic import Field
from pydantic.functional_validators import AfterValidator

# Chat messages longer than this are not treated as commands
MESSAGE_MAX_LENGTH = 2000


def normalize_input(value: Optional[str], lowercase: bool = False) -> str:
    """Normalize user input: collapse whitespace, optionally lowercase."""
    if value is None:
        return ""
    normalized = " ".join(value.split())
    return normalized.lower() if lowercase else normalized


def validate_non_empty_string(value: str) -> str:
    """Validate that a string is not empty after stripping whitespace."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("Value cannot be empty or whitespace only")
    return stripped


# Help query: script name, "all", or free text
HelpQuery = Annotated[
    Optional[str],
    Field(
        default=None,
        description=(
            "What to get help with. Omit for the list of scripts, 'all' for every "
            "command, a script name for its commands, or free text / a regular "
            "expression to search commands. Examples: 'all', 'meme', 'hangout'."
        ),
    ),
]

# Raw chat message for catch-all suggestions
ChatMessage = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(
        ...,
        min_length=1,
        max_length=MESSAGE_MAX_LENGTH,
        description=(
            "Chat message that no script handled, including the robot name. "
            "Example: 'hubot brace yourself winter'."
        ),
    ),
]
