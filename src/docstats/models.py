from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple

from .textstats import count_chars_no_spaces

Selection = Tuple[int, int]


class Scope(str, Enum):
    """Which text the statistics describe."""

    DOCUMENT = "document"
    SELECTION = "selection"

    @classmethod
    def for_context(cls, context: "EditorContext") -> "Scope":
        return cls.SELECTION if context.is_selection else cls.DOCUMENT


@dataclass(frozen=True, slots=True)
class EditorContext:
    """Snapshot of the editor state handed over on every change notification.

    ``current_text`` is always the text the statistics describe: the selected
    text when ``is_selection`` is true, otherwise the full buffer.
    """

    has_active_view: bool
    has_selection: bool
    is_selection: bool
    selected_text: str
    full_text: str
    current_text: str
    char_count: int
    char_no_spaces: int

    @classmethod
    def inactive(cls) -> "EditorContext":
        return cls(
            has_active_view=False,
            has_selection=False,
            is_selection=False,
            selected_text="",
            full_text="",
            current_text="",
            char_count=0,
            char_no_spaces=0,
        )

    @property
    def scope(self) -> Scope:
        return Scope.for_context(self)


@dataclass(frozen=True, slots=True)
class DocumentStats:
    """Statistics for one piece of text."""

    word_count: int
    char_count: int
    read_time: str
    is_selection: bool = False

    @classmethod
    def empty(cls) -> "DocumentStats":
        return cls(word_count=0, char_count=0, read_time="0:00", is_selection=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "word_count": self.word_count,
            "char_count": self.char_count,
            "read_time": self.read_time,
            "is_selection": self.is_selection,
        }


def build_editor_context(
    full_text: str,
    selection: Selection | None = None,
    *,
    has_active_view: bool = True,
) -> EditorContext:
    """Build an EditorContext from a buffer and optional ``(start, end)`` offsets.

    The selection counts as present when the two positions differ; either order
    is accepted. Offsets outside the buffer raise ``ValueError``.
    """
    if not has_active_view:
        return EditorContext.inactive()

    selected_text = ""
    has_selection = False
    if selection is not None:
        start, end = selection
        length = len(full_text)
        for offset in (start, end):
            if offset < 0 or offset > length:
                raise ValueError(
                    f"Selection offset {offset} outside buffer of length {length}."
                )
        has_selection = start != end
        if has_selection:
            low, high = min(start, end), max(start, end)
            selected_text = full_text[low:high]

    is_selection = has_selection and len(selected_text) > 0
    current_text = selected_text if is_selection else full_text
    return EditorContext(
        has_active_view=True,
        has_selection=has_selection,
        is_selection=is_selection,
        selected_text=selected_text,
        full_text=full_text,
        current_text=current_text,
        char_count=len(current_text),
        char_no_spaces=count_chars_no_spaces(current_text),
    )
