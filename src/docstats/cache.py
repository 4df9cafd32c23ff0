"""Single-entry memo slots for document and selection statistics.

Every lookup is keyed by :func:`fingerprint`, which only looks at the length of
the text and its first and last ``FINGERPRINT_WINDOW`` characters. An edit that
keeps the length and touches neither window returns the previous stats. This is
a known limitation traded for constant-time keys on large documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict

from .models import DocumentStats, Scope
from .readtime import estimate_read_time
from .textstats import count_words

logger = logging.getLogger(__name__)

FINGERPRINT_WINDOW = 100


def fingerprint(text: str) -> str:
    """Return the cheap, lossy cache key for ``text``."""
    return f"{len(text)}{text[:FINGERPRINT_WINDOW]}{text[-FINGERPRINT_WINDOW:]}"


@dataclass(slots=True)
class CacheSlot:
    """Holds the stats for the last text seen in one scope."""

    last_fingerprint: str = ""
    last_stats: DocumentStats | None = None

    def lookup(self, key: str) -> DocumentStats | None:
        if self.last_stats is not None and self.last_fingerprint == key:
            return self.last_stats
        return None

    def store(self, key: str, stats: DocumentStats) -> None:
        self.last_fingerprint = key
        self.last_stats = stats

    def clear(self) -> None:
        self.last_fingerprint = ""
        self.last_stats = None


class StatsCache:
    """Two independent memo slots, one per :class:`Scope`."""

    def __init__(self) -> None:
        self._slots: Dict[Scope, CacheSlot] = {scope: CacheSlot() for scope in Scope}
        self.hits = 0
        self.misses = 0

    def for_scope(self, scope: Scope) -> CacheSlot:
        return self._slots[Scope(scope)]

    def get_or_compute(
        self, scope: Scope, text: str, words_per_minute: int
    ) -> DocumentStats:
        """Return cached stats for ``text`` or compute and store fresh ones."""
        scope = Scope(scope)
        slot = self.for_scope(scope)
        key = fingerprint(text)
        cached = slot.lookup(key)
        if cached is not None:
            self.hits += 1
            logger.debug("Stats cache hit for %s scope", scope.value)
            return cached

        self.misses += 1
        logger.debug(
            "Stats cache miss for %s scope (%d chars)", scope.value, len(text)
        )
        word_count = count_words(text)
        stats = DocumentStats(
            word_count=word_count,
            char_count=len(text),
            read_time=estimate_read_time(word_count, words_per_minute),
            is_selection=scope is Scope.SELECTION,
        )
        slot.store(key, stats)
        return stats

    def clear(self) -> None:
        """Forget both slots, e.g. after the reading rate changed."""
        for slot in self._slots.values():
            slot.clear()
