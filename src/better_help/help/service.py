"""Help corpus lifecycle.

Holds the current corpus, its search index and the responder built on
them. A reload builds a complete new snapshot and swaps it in; requests
already holding the previous snapshot keep using it unchanged.
"""

import asyncio
import logging
from dataclasses import dataclass

from better_help.config import get_help_config
from better_help.docs.loader import Corpus, CorpusLoader
from better_help.errors import SourceLoadError
from better_help.help.responder import HelpResponder
from better_help.search.engine import SearchIndex, build

logger = logging.getLogger("better-help.service")


@dataclass(frozen=True)
class HelpSnapshot:
    """One fully loaded help corpus with everything derived from it."""

    corpus: Corpus
    index: SearchIndex
    responder: HelpResponder
    errors: tuple[SourceLoadError, ...] = ()

    def warnings(self) -> list[dict[str, str]]:
        return [error.to_dict() for error in self.errors]


class HelpService:
    """Shared access to the current help snapshot.

    Features:
    - Lazy loading on first request
    - Singleton snapshot shared by all tools
    - Reload swaps in a new snapshot without mutating the old one

    Usage:
        >>> snapshot = await HelpService.get()
        >>> snapshot.responder.respond("all").text
    """

    _snapshot: HelpSnapshot | None = None
    _lock: asyncio.Lock | None = None

    @classmethod
    def _get_lock(cls) -> asyncio.Lock:
        if cls._lock is None:
            cls._lock = asyncio.Lock()
        return cls._lock

    @classmethod
    async def get(cls) -> HelpSnapshot:
        """Return the current snapshot, loading it on first use."""
        snapshot = cls._snapshot
        if snapshot is not None:
            return snapshot

        async with cls._get_lock():
            if cls._snapshot is None:
                cls._snapshot = await cls._load()
            return cls._snapshot

    @classmethod
    async def reload(cls) -> HelpSnapshot:
        """Load a fresh snapshot and make it current."""
        async with cls._get_lock():
            cls._snapshot = await cls._load()
            return cls._snapshot

    @classmethod
    def reset(cls) -> None:
        """Drop the current snapshot; the next request loads again."""
        cls._snapshot = None
        cls._lock = None

    @staticmethod
    async def _load() -> HelpSnapshot:
        config = get_help_config()
        result = await CorpusLoader.from_config(config).load()
        index = build(result.corpus)
        logger.info("Help index ready with %d command(s)", len(index))
        responder = HelpResponder(
            result.corpus,
            index,
            robot_name=config.robot_name,
            robot_alias=config.robot_alias,
            catch_all_limit=config.catch_all_limit,
        )
        return HelpSnapshot(corpus=result.corpus, index=index, responder=responder, errors=result.errors)
