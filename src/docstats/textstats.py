from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

CODE_FENCE_RE = re.compile(r"```[\s\S]*?```")
INLINE_CODE_RE = re.compile(r"`[^`]*`")
# The interior of [[Target|Display]] is kept whole, pipe included.
WIKI_LINK_RE = re.compile(r"\[\[([^\]]+)\]\]")
MARKDOWN_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
MARKDOWN_SYNTAX_RE = re.compile(r"[#*_~>]")
SENTENCE_PUNCTUATION_RE = re.compile(r"[.,!?;:]")
WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Strip code, links and markdown markers so only countable prose remains.

    Each step works on the output of the previous one. Markdown markers are
    deleted outright, which can fuse words they separated, while sentence
    punctuation becomes a space.
    """
    cleaned = CODE_FENCE_RE.sub("", text)
    cleaned = INLINE_CODE_RE.sub("", cleaned)
    cleaned = WIKI_LINK_RE.sub(r"\1", cleaned)
    cleaned = MARKDOWN_LINK_RE.sub(r"\1", cleaned)
    cleaned = MARKDOWN_SYNTAX_RE.sub("", cleaned)
    cleaned = SENTENCE_PUNCTUATION_RE.sub(" ", cleaned)
    return WHITESPACE_RE.sub(" ", cleaned).strip()


def count_words(text: str) -> int:
    """Return the number of prose words in markdown-flavoured text."""
    logger.debug("Counting words in %d characters", len(text))
    cleaned = clean_text(text)
    logger.debug("After cleaning: %r", cleaned)
    if not cleaned:
        return 0
    words = [word for word in WHITESPACE_RE.split(cleaned) if word]
    logger.debug("Word count: %d", len(words))
    return len(words)


def count_chars_no_spaces(text: str) -> int:
    """Count the characters of ``text`` that are not whitespace."""
    return len(WHITESPACE_RE.sub("", text))
