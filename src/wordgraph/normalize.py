from __future__ import annotations
import re
from typing import List, Optional

# anything outside a-z separates tokens
_NON_ALPHA = re.compile(r"[^a-z]+")


def clean_line(text: Optional[str]) -> str:
    """Lowercase, replace every non a-z character by a space, collapse and trim."""
    if not text:
        return ""
    return _NON_ALPHA.sub(" ", text.lower()).strip()


def clean_to_tokens(text: Optional[str]) -> List[str]:
    """
    Convert a raw line to lowercase a-z tokens.
    Digits, punctuation and accented letters all act as separators,
    so "Paul's 2nd" -> ["paul", "s", "nd"].
    """
    cleaned = clean_line(text)
    if not cleaned:
        return []
    return cleaned.split()


def normalize_word(word: Optional[str]) -> str:
    """Query words are only trimmed and lowercased; they are matched verbatim."""
    return (word or "").strip().lower()
