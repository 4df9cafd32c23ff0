from __future__ import annotations

import math

DEFAULT_WORDS_PER_MINUTE = 200


def estimate_read_time(word_count: int, words_per_minute: int) -> str:
    """
    Format the time needed to read ``word_count`` words as ``M:SS``.
    Rounding happens once, on total seconds, with halves rounded up.
    """
    total_seconds = math.floor(word_count / words_per_minute * 60 + 0.5)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"
