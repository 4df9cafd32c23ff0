from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .readtime import DEFAULT_WORDS_PER_MINUTE

READ_TIME_LABEL_POSITIONS = ("before", "after")


class ConfigError(ValueError):
    """Raised when configuration values are outside their allowed range."""


@dataclass(slots=True)
class StatBarConfig:
    """User preferences for the statistics display."""

    show_word_count: bool = True
    show_char_count: bool = True
    show_read_time: bool = False
    show_selection_stats: bool = True
    word_label: str = "Words:"
    char_label: str = "Characters:"
    read_time_label: str = "min read"
    read_time_label_position: str = "after"
    separator_label: str = "or"
    selection_prefix: str = "[SEL]"
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
    debounce_ms: int = 300

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping accepted back by :func:`config_from_dict`."""
        return asdict(self)

    def validate(self) -> "StatBarConfig":
        """Check the values a host must never pass through unvalidated."""
        wpm = self.words_per_minute
        if isinstance(wpm, bool) or not isinstance(wpm, int) or wpm <= 0:
            raise ConfigError(
                f"words_per_minute must be a positive integer, got {wpm!r}."
            )
        if isinstance(self.debounce_ms, bool) or not isinstance(self.debounce_ms, int):
            raise ConfigError(
                f"debounce_ms must be an integer, got {self.debounce_ms!r}."
            )
        if self.debounce_ms < 0:
            raise ConfigError("debounce_ms must not be negative.")
        if self.read_time_label_position not in READ_TIME_LABEL_POSITIONS:
            raise ConfigError(
                "read_time_label_position must be one of "
                f"{', '.join(READ_TIME_LABEL_POSITIONS)}; "
                f"got {self.read_time_label_position!r}."
            )
        return self


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(StatBarConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> StatBarConfig:
    """Merge a dictionary-like input onto the default configuration."""
    if data is None:
        return StatBarConfig()
    return StatBarConfig(**_build_kwargs(data)).validate()


def config_from_yaml(path: str | Path) -> StatBarConfig:
    """Read a YAML preferences file and validate the merged result.

    Malformed YAML, a top-level value that is not a mapping, and out-of-range
    values all raise :class:`ConfigError` naming the file.
    """
    source = Path(path)
    try:
        parsed = yaml.safe_load(source.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source}: {exc}") from exc
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, MutableMapping):
        raise ConfigError(f"{source} must define a mapping of preferences.")
    try:
        return config_from_dict(parsed)
    except ConfigError as exc:
        raise ConfigError(f"{source}: {exc}") from exc


def load_config(path: str | Path | None = None) -> StatBarConfig:
    """Validated preferences from ``path``, or the defaults when no file is given."""
    if path is None:
        return StatBarConfig()
    return config_from_yaml(path)
