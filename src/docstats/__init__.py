"""
docstats package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .cache import StatsCache, fingerprint
from .config import (
    ConfigError,
    StatBarConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .models import DocumentStats, EditorContext, Scope, build_editor_context
from .readtime import estimate_read_time
from .service import StatsService, compute_stats
from .session import StatsSession, StatusUpdate
from .textstats import count_words

__all__ = [
    "ConfigError",
    "DocumentStats",
    "EditorContext",
    "Scope",
    "StatBarConfig",
    "StatsCache",
    "StatsService",
    "StatsSession",
    "StatusUpdate",
    "build_editor_context",
    "compute_stats",
    "config_from_dict",
    "config_from_yaml",
    "count_words",
    "estimate_read_time",
    "fingerprint",
    "load_config",
]

__version__ = "0.1.0"
