from __future__ import annotations

from typing import List

from pytest import MonkeyPatch

import docstats.cache as cache_module
from docstats.models import DocumentStats, EditorContext
from docstats.service import StatsService, compute_stats
from tests.utils import make_context


def _count_calls(monkeypatch: MonkeyPatch) -> List[str]:
    calls: List[str] = []
    real_count = cache_module.count_words

    def spy(text: str) -> int:
        calls.append(text)
        return real_count(text)

    monkeypatch.setattr(cache_module, "count_words", spy)
    return calls


def test_inactive_view_returns_zero_stats(monkeypatch: MonkeyPatch):
    calls = _count_calls(monkeypatch)
    stats = StatsService().compute_stats(EditorContext.inactive(), 200)
    assert stats == DocumentStats(0, 0, "0:00", False)
    assert calls == []


def test_document_stats_describe_full_text():
    context = make_context("This is test content")
    stats = StatsService().compute_stats(context, 200)
    assert stats.word_count == 4
    assert stats.char_count == context.char_count == 20
    assert stats.read_time == "0:01"
    assert stats.is_selection is False


def test_selection_stats_describe_selected_text():
    context = make_context("This is test content", "test content")
    stats = StatsService().compute_stats(context, 200)
    assert stats.word_count == 2
    assert stats.char_count == 12
    assert stats.is_selection is True


def test_repeated_context_counts_words_once(monkeypatch: MonkeyPatch):
    calls = _count_calls(monkeypatch)
    service = StatsService()
    context = make_context("Hello world this is a test")

    first = service.compute_stats(context, 200)
    second = service.compute_stats(make_context("Hello world this is a test"), 200)

    assert first is second
    assert len(calls) == 1


def test_switching_between_selection_and_document(monkeypatch: MonkeyPatch):
    calls = _count_calls(monkeypatch)
    service = StatsService()
    doc_ctx = make_context("alpha beta gamma delta")
    sel_ctx = make_context("alpha beta gamma delta", "beta gamma")

    service.compute_stats(doc_ctx, 200)
    service.compute_stats(sel_ctx, 200)
    service.compute_stats(doc_ctx, 200)
    service.compute_stats(sel_ctx, 200)

    assert calls == ["alpha beta gamma delta", "beta gamma"]


def test_full_document_stats_bypass_cache(monkeypatch: MonkeyPatch):
    calls = _count_calls(monkeypatch)
    service = StatsService()
    stats = service.compute_full_document_stats("one two three", 200)

    assert stats == DocumentStats(3, 13, "0:01", False)
    assert service.cache.misses == 0
    assert calls == []


def test_module_level_compute_stats_reuses_given_service():
    service = StatsService()
    context = make_context("one two")
    first = compute_stats(context, 200, service=service)
    assert compute_stats(context, 200, service=service) is first
    assert compute_stats(context, 200) == first
