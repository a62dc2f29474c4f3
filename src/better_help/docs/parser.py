"""Parser for the script documentation header convention.

Scripts open with a contiguous block of ``#`` or ``//`` comments holding
their help sections. Parsing stops at the first line outside that block.

Scripts written before the section convention list their commands without
a ``Commands:`` header; when a header block recognizes no section at all,
every comment line containing a hyphen is read as a command instead.
"""

import logging
from pathlib import Path
from typing import Iterator, Union

from better_help.docs.record import DocumentationRecord
from better_help.docs.sections import Section

logger = logging.getLogger("better-help.parser")

COMMENT_MARKERS = ("//", "#")

# Placeholder body some scripts put under empty sections
PLACEHOLDER = "none"


def _is_comment(line: str) -> bool:
    return line.startswith(COMMENT_MARKERS)


def _header_block(raw_text: str) -> Iterator[str]:
    for line in raw_text.split("\n"):
        if not _is_comment(line):
            break
        yield line


def _clean(line: str) -> str:
    for marker in COMMENT_MARKERS:
        if line.startswith(marker):
            return line[len(marker):].strip()
    return line.strip()


def parse(raw_text: str) -> DocumentationRecord:
    """Parse the documentation header of a script.

    Args:
        raw_text: Full text of the script file

    Returns:
        DocumentationRecord with one attribute per populated section. A
        script without a header yields a record with every attribute None.

    Example:
        >>> record = parse("# Commands:\\n#   hubot ping - Reply with pong\\n")
        >>> record.commands
        ('hubot ping - Reply with pong',)
    """
    sections: dict[Section, list[str]] = {}
    current = None

    for line in _header_block(raw_text):
        cleaned = _clean(line)
        if not cleaned or cleaned.lower() == PLACEHOLDER:
            continue

        section = Section.from_header(cleaned)
        if section is not None:
            current = section
            sections[current] = []
        elif current is not None:
            sections[current].append(cleaned)

    if current is None:
        # Legacy header: no sections, one command per hyphenated line
        sections[Section.COMMANDS] = [
            line[2:].strip() for line in _header_block(raw_text) if "-" in line
        ]

    return DocumentationRecord.from_sections(sections)


def parse_file(path: Union[str, Path]) -> DocumentationRecord:
    """Read a script file and parse its documentation header.

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    logger.debug("Parsing help from %s", path)
    return parse(path.read_text(encoding="utf-8"))
