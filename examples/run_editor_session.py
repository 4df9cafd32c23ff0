"""
Tiny helper script that drives a StatsSession the way an editor host would:
a burst of debounced edits, then an immediate selection change.
"""

from __future__ import annotations

import time

from docstats import StatBarConfig, StatsSession, build_editor_context


def main() -> None:
    session = StatsSession(
        StatBarConfig(show_read_time=True, separator_label="|"),
        on_update=lambda update: print(update.status_text),
    )
    text = ""
    for word in "The quick brown fox jumps over the lazy dog.".split():
        text = f"{text} {word}".strip()
        session.notify(build_editor_context(text))
    time.sleep(session.config.debounce_ms / 1000.0)
    session.process_pending()

    session.notify_now(build_editor_context(text, (4, 19)))
    print(session.last_update.tooltip if session.last_update else "")


if __name__ == "__main__":
    main()
