"""Script documentation parsing and corpus loading.

Components:
    - parse / parse_file: Read the comment header of a script into a record
    - reduce: Merge two records describing the same logical script
    - CorpusLoader: Load every declared script source into one corpus

Data Models:
    - DocumentationRecord: Parsed help sections of one script
    - Section: The fixed set of recognized header sections
"""

from better_help.docs.loader import Corpus, CorpusLoader, LoadResult
from better_help.docs.parser import parse, parse_file
from better_help.docs.record import DocumentationRecord, reduce
from better_help.docs.sections import Section

__all__ = [
    # Parsing
    "parse",
    "parse_file",
    "reduce",
    # Loading
    "CorpusLoader",
    "LoadResult",
    # Data models
    "Corpus",
    "DocumentationRecord",
    "Section",
]
