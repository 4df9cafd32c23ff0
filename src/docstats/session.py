"""Debounced glue between host change notifications and the stats service.

The host calls :meth:`StatsSession.notify` on every edit and polls
:meth:`StatsSession.process_pending` from its own timer or event loop; nothing
here starts threads or timers. Events that should refresh immediately (file
open, active-view change, selection change) go through ``notify_now``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .config import StatBarConfig
from .formatting import build_status_text, build_tooltip
from .models import DocumentStats, EditorContext
from .service import StatsService

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StatusUpdate:
    """Everything a host needs to refresh its status display."""

    stats: DocumentStats
    status_text: str
    tooltip: str


@dataclass(slots=True)
class PendingUpdate:
    context: EditorContext
    deadline: float


class StatsSession:
    def __init__(
        self,
        config: StatBarConfig | None = None,
        *,
        service: StatsService | None = None,
        on_update: Callable[[StatusUpdate], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = (config or StatBarConfig()).validate()
        self.service = service or StatsService()
        self.on_update = on_update
        self._clock = clock
        self._pending: Optional[PendingUpdate] = None
        self.last_update: Optional[StatusUpdate] = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def notify(self, context: EditorContext) -> None:
        """Schedule a refresh; a newer notification replaces the pending one."""
        deadline = self._clock() + self.config.debounce_ms / 1000.0
        self._pending = PendingUpdate(context=context, deadline=deadline)

    def notify_now(self, context: EditorContext) -> StatusUpdate:
        self._pending = None
        return self._publish(context)

    def process_pending(self) -> StatusUpdate | None:
        """Publish the pending context once its quiet period has elapsed."""
        pending = self._pending
        if pending is None or pending.deadline > self._clock():
            return None
        self._pending = None
        return self._publish(pending.context)

    def flush(self) -> StatusUpdate | None:
        pending = self._pending
        if pending is None:
            return None
        self._pending = None
        return self._publish(pending.context)

    def cancel(self) -> None:
        self._pending = None

    def update_config(self, config: StatBarConfig) -> None:
        """Swap preferences; cached read times are dropped when the rate changes."""
        config.validate()
        if config.words_per_minute != self.config.words_per_minute:
            self.service.cache.clear()
        self.config = config

    def _publish(self, context: EditorContext) -> StatusUpdate:
        stats = self.service.compute_stats(context, self.config.words_per_minute)
        status_text = ""
        if context.has_active_view:
            status_text = build_status_text(context, stats, self.config)
        # The hover text only accompanies a visible status line.
        tooltip = build_tooltip(context, stats, self.config) if status_text else ""
        update = StatusUpdate(stats=stats, status_text=status_text, tooltip=tooltip)
        if update != self.last_update:
            logger.info(
                "Publishing %s stats: %d words, %d chars",
                context.scope.value,
                stats.word_count,
                stats.char_count,
            )
        self.last_update = update
        if self.on_update is not None:
            self.on_update(update)
        return update
