from __future__ import annotations

from docstats.models import EditorContext


def make_context(
    full_text: str,
    selected_text: str = "",
    *,
    has_active_view: bool = True,
) -> EditorContext:
    """Build an EditorContext directly, bypassing offset-based selection."""
    is_selection = bool(selected_text)
    current = selected_text if is_selection else full_text
    return EditorContext(
        has_active_view=has_active_view,
        has_selection=is_selection,
        is_selection=is_selection,
        selected_text=selected_text,
        full_text=full_text,
        current_text=current,
        char_count=len(current),
        char_no_spaces=len("".join(current.split())),
    )


def long_text(middle: str = "middle", *, padding: int = 60) -> str:
    """Words around ``middle`` push it outside both fingerprint windows."""
    return "a " * padding + middle + " z" * padding
