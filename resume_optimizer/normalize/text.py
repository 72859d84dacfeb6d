"""
Word counting shared by every length decision in the service.

Only ASCII letters/digits and the Arabic block (U+0600-U+06FF) form words.
Text in any other script is invisible to the counter.
"""

from __future__ import annotations

import re

_DECORATION_RE = re.compile(r"[•■▪●◆◇◦\-–—]")
_NON_WORD_RE = re.compile(r"[^A-Za-z0-9\u0600-\u06FF]+")


def normalize_tokens(text: str | None) -> list[str]:
    if not text:
        return []
    cleaned = _DECORATION_RE.sub(" ", text)
    cleaned = _NON_WORD_RE.sub(" ", cleaned)
    return [token for token in cleaned.split() if token]


def count_words(text: str | None) -> int:
    return len(normalize_tokens(text))
