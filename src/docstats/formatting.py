from __future__ import annotations

from typing import List

from .config import StatBarConfig
from .models import DocumentStats, EditorContext


def _shows_selection(context: EditorContext, config: StatBarConfig) -> bool:
    return context.is_selection and config.show_selection_stats


def build_status_text(
    context: EditorContext, stats: DocumentStats, config: StatBarConfig
) -> str:
    """Compose the one-line status text from the enabled stats."""
    parts: List[str] = []
    if config.show_word_count:
        parts.append(f"{config.word_label} {stats.word_count:,}")
    if config.show_char_count:
        parts.append(f"{config.char_label} {stats.char_count:,}")
    if config.show_read_time:
        if config.read_time_label_position == "before":
            parts.append(f"{config.read_time_label} {stats.read_time}")
        else:
            parts.append(f"{stats.read_time} {config.read_time_label}")

    if not parts:
        return ""
    text = f" {config.separator_label} ".join(parts)
    if _shows_selection(context, config):
        text = f"{config.selection_prefix} {text}"
    return text


def build_tooltip(
    context: EditorContext, stats: DocumentStats, config: StatBarConfig
) -> str:
    """Compose the multi-line hover text."""
    if _shows_selection(context, config):
        header = "Selection Stats:"
        scope_line = f"Selected text ({len(context.selected_text):,} chars)"
    else:
        header = "Document Stats:"
        scope_line = "Full document"
    return "\n".join(
        [
            header,
            scope_line,
            f"Words: {stats.word_count:,}",
            f"Characters: {stats.char_count:,} ({context.char_no_spaces:,} no spaces)",
            f"Estimated Read Time: {stats.read_time} minutes",
        ]
    )


def build_detail_report(
    context: EditorContext,
    stats: DocumentStats,
    config: StatBarConfig,
    full_stats: DocumentStats | None = None,
) -> str:
    """
    Plain-text detail view of the current scope. When a selection is active
    and ``full_stats`` is given, whole-document figures follow.
    """
    if not context.has_active_view:
        return "No active document"

    lines: List[str] = []
    if context.is_selection:
        lines.append("Selection Statistics")
        lines.append(
            f"Analyzing selected text ({len(context.selected_text):,} characters)"
        )
    else:
        lines.append("Document Statistics")
        lines.append("Analyzing entire document")
    lines.append("")
    lines.append(f"Words: {stats.word_count:,}")
    lines.append(f"Characters: {stats.char_count:,}")
    lines.append(f"Characters (no spaces): {context.char_no_spaces:,}")
    lines.append(f"Estimated read time: {stats.read_time} minutes")
    lines.append(f"Based on {config.words_per_minute} words per minute")

    if context.is_selection and full_stats is not None:
        lines.append("")
        lines.append("Full Document Statistics")
        lines.append(f"Words: {full_stats.word_count:,}")
        lines.append(f"Characters: {full_stats.char_count:,}")
        lines.append(f"Estimated read time: {full_stats.read_time} minutes")
    return "\n".join(lines)
