"""Command search for the help corpus.

Provides the three-tier command search (substring, regex, term overlap)
and the stopword list it filters query terms with.
"""

from better_help.search.engine import CommandEntry, SearchIndex, build, search
from better_help.search.stopwords import STOPWORDS, is_stopword

__all__ = [
    "CommandEntry",
    "SearchIndex",
    "build",
    "search",
    "STOPWORDS",
    "is_stopword",
]
