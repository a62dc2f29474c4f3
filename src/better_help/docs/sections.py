"""Recognized documentation header sections.

Scripts document themselves with a comment header split into sections:

    # Description:
    #   Create hangouts with Hubot.
    #
    # Commands:
    #   hubot hangout me <title> - Creates a Hangout with the given title.

Each header maps to exactly one field of DocumentationRecord.
"""

from enum import Enum


class Section(Enum):
    """Documentation header sections.

    The value is the record field the section's lines are stored in.
    AUTHORS is an alias header for the ``author`` field.
    """

    DESCRIPTION = "description"
    DEPENDENCIES = "dependencies"
    CONFIGURATION = "configuration"
    COMMANDS = "commands"
    NOTES = "notes"
    AUTHOR = "author"
    EXAMPLES = "examples"
    TAGS = "tags"
    URLS = "urls"

    @property
    def field_name(self) -> str:
        return self.value

    @classmethod
    def from_header(cls, line: str) -> "Section | None":
        """Resolve a cleaned comment line to the section it opens.

        Args:
            line: Comment line with the marker and surrounding whitespace removed

        Returns:
            The Section the line opens, or None if it is not a section header

        Example:
            >>> Section.from_header("Commands:")
            <Section.COMMANDS: 'commands'>
            >>> Section.from_header("Authors")
            <Section.AUTHOR: 'author'>
            >>> Section.from_header("hubot help - shows help") is None
            True
        """
        key = line.lower()
        if key.endswith(":"):
            key = key[:-1]
        return _HEADERS.get(key)


_HEADERS: dict[str, Section] = {section.value: section for section in Section}
_HEADERS["authors"] = Section.AUTHOR
