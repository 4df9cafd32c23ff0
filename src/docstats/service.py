from __future__ import annotations

from .cache import StatsCache
from .models import DocumentStats, EditorContext
from .readtime import estimate_read_time
from .textstats import count_words


class StatsService:
    """Cache-aware statistics entry point for one editor integration."""

    def __init__(self, cache: StatsCache | None = None) -> None:
        self.cache = cache or StatsCache()

    def compute_stats(
        self, context: EditorContext, words_per_minute: int
    ) -> DocumentStats:
        """Return stats describing ``context.current_text``."""
        if not context.has_active_view:
            return DocumentStats.empty()
        return self.cache.get_or_compute(
            context.scope, context.current_text, words_per_minute
        )

    def compute_full_document_stats(
        self, full_text: str, words_per_minute: int
    ) -> DocumentStats:
        """Compute whole-document stats without touching the cache."""
        word_count = count_words(full_text)
        return DocumentStats(
            word_count=word_count,
            char_count=len(full_text),
            read_time=estimate_read_time(word_count, words_per_minute),
            is_selection=False,
        )


def compute_stats(
    context: EditorContext,
    words_per_minute: int,
    *,
    service: StatsService | None = None,
) -> DocumentStats:
    """Convenience wrapper; pass ``service`` to keep memoization across calls."""
    service = service or StatsService()
    return service.compute_stats(context, words_per_minute)
