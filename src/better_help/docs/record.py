"""Documentation record model and reduction.

A DocumentationRecord holds the parsed header sections of one logical
script. Script packages that document themselves across several files
produce several records, which are combined with reduce().
"""

from dataclasses import dataclass, fields
from typing import Any, Iterable, Optional

from better_help.docs.sections import Section

Lines = Optional[tuple[str, ...]]


@dataclass(frozen=True)
class DocumentationRecord:
    """Parsed help content of one script.

    Every attribute is either None (section never populated) or a non-empty
    tuple of lines in the order they were read. Consumers treat None and an
    empty sequence the same way.

    Usage:
        >>> record = DocumentationRecord(commands=("hubot foo - does foo",))
        >>> record.get(Section.COMMANDS)
        ('hubot foo - does foo',)
        >>> record.description is None
        True
    """

    description: Lines = None
    dependencies: Lines = None
    configuration: Lines = None
    commands: Lines = None
    notes: Lines = None
    author: Lines = None
    examples: Lines = None
    tags: Lines = None
    urls: Lines = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            normalized = tuple(value)
            # frozen dataclass: assign through object.__setattr__
            object.__setattr__(self, f.name, normalized or None)

    @classmethod
    def from_sections(cls, sections: dict[Section, Iterable[str]]) -> "DocumentationRecord":
        """Build a record from lines collected per section."""
        return cls(**{section.field_name: tuple(lines) for section, lines in sections.items()})

    def get(self, section: Section) -> Lines:
        return getattr(self, section.field_name)

    def is_empty(self) -> bool:
        """True when no section has any content."""
        return all(self.get(section) is None for section in Section)

    def first_description(self) -> str:
        """First description line, or an empty string."""
        return self.description[0] if self.description else ""

    def to_dict(self) -> dict[str, Any]:
        """Convert populated sections to a dictionary of lists."""
        return {
            section.field_name: list(lines)
            for section in Section
            if (lines := self.get(section)) is not None
        }


def _merge_lines(first: Lines, second: Lines) -> Lines:
    merged: list[str] = []
    seen: set[str] = set()
    for line in (first or ()) + (second or ()):
        if line not in seen:
            merged.append(line)
            seen.add(line)
    return tuple(merged) or None


def reduce(
    first: Optional[DocumentationRecord], second: Optional[DocumentationRecord]
) -> Optional[DocumentationRecord]:
    """Merge the documentation of two files describing the same script.

    Each section of the result holds the lines of ``first`` followed by the
    lines of ``second``, each line kept only at its first occurrence. This
    holds whether a section is present on one side or both, so a merged
    record never repeats a line. Operands are not modified.

    Args:
        first: Record accumulated so far, or None
        second: Record to merge in, or None

    Returns:
        The merged record; the other operand if one side is None; None if
        both are None

    Example:
        >>> a = DocumentationRecord(commands=("a", "b"))
        >>> b = DocumentationRecord(commands=("b", "c"))
        >>> reduce(a, b).commands
        ('a', 'b', 'c')
    """
    if first is None:
        return second
    if second is None:
        return first

    return DocumentationRecord(
        **{
            section.field_name: _merge_lines(first.get(section), second.get(section))
            for section in Section
        }
    )
