"""Command search over a loaded help corpus.

The index flattens the ``commands`` of every record in the corpus into a
single list and resolves queries with three matching tiers, tried in
order. The first tier that matches anything decides the result:

1. Substring: the lowercased command contains the lowercased query
2. Regex: the query, compiled case-insensitively, matches the command
3. Term overlap: any command word equals any non-stopword query term

Results keep corpus order and are not deduplicated.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import AbstractSet, Mapping, NamedTuple, Optional

from better_help.docs.record import DocumentationRecord
from better_help.search.stopwords import STOPWORDS

logger = logging.getLogger("better-help.search")


class CommandEntry(NamedTuple):
    """A command string paired with its lowercased form."""

    command: str
    lower: str


@dataclass(frozen=True)
class SearchIndex:
    """Immutable search index over flattened command entries.

    Usage:
        >>> index = build({"ping": DocumentationRecord(commands=("hubot ping - Reply with pong",))})
        >>> index.search("PONG")
        ['hubot ping - Reply with pong']
        >>> len(index)
        1
    """

    entries: tuple[CommandEntry, ...] = ()
    stop_words: AbstractSet[str] = field(default=STOPWORDS, repr=False)

    def __len__(self) -> int:
        return len(self.entries)

    def search(self, query: str) -> list[str]:
        return search(self, query)


def build(
    corpus: Mapping[str, DocumentationRecord],
    stop_words: Optional[AbstractSet[str]] = None,
) -> SearchIndex:
    """Create a search index over every command in the corpus.

    Args:
        corpus: Mapping of script name to its documentation record
        stop_words: Words ignored by term-overlap matching
            (default: built-in English STOPWORDS)

    Returns:
        SearchIndex with one entry per command, in corpus order then
        record order. An empty corpus yields an empty index.
    """
    entries = tuple(
        CommandEntry(command, command.lower())
        for record in corpus.values()
        for command in (record.commands or ())
    )
    if stop_words is None:
        stop_words = STOPWORDS
    else:
        stop_words = frozenset(word.lower() for word in stop_words)
    return SearchIndex(entries=entries, stop_words=stop_words)


def _substring_matches(index: SearchIndex, query: str) -> list[str]:
    query_lower = query.lower()
    return [entry.command for entry in index.entries if query_lower in entry.lower]


def _regex_matches(index: SearchIndex, query: str) -> list[str]:
    try:
        pattern = re.compile(query, re.IGNORECASE)
    except re.error as exc:
        logger.debug("Query %r is not a valid pattern: %s", query, exc)
        return []
    return [entry.command for entry in index.entries if pattern.search(entry.command)]


def _term_matches(index: SearchIndex, query: str) -> list[str]:
    terms = {term for term in query.lower().split() if term not in index.stop_words}
    if not terms:
        return []
    return [
        entry.command
        for entry in index.entries
        if not terms.isdisjoint(entry.lower.split())
    ]


_TIERS = (
    ("substring", _substring_matches),
    ("regex", _regex_matches),
    ("terms", _term_matches),
)


def search(index: SearchIndex, query: str) -> list[str]:
    """Find the commands matching a free-text query.

    Args:
        index: Index built with build()
        query: Free-text query, substring or regular expression

    Returns:
        Matching command strings (original casing) from the first tier
        that matched anything; empty list if no tier matched

    Example:
        >>> index = build({"meme": DocumentationRecord(commands=(
        ...     "hubot Brace yourself <text> - Meme: Ned Stark braces for <text>",
        ...     "hubot ONE DOES NOT SIMPLY <text> - Meme: Boromir",
        ... ))})
        >>> search(index, "does not simply")
        ['hubot ONE DOES NOT SIMPLY <text> - Meme: Boromir']
    """
    for tier, matcher in _TIERS:
        matches = matcher(index, query)
        if matches:
            logger.debug("Query %r matched %d command(s) by %s", query, len(matches), tier)
            return matches
    return []
