"""Punctuation stripping and whitespace word splitting."""

from __future__ import annotations

import re

CURRENCY_SYMBOLS = "$€£¥₹"

# Anything that is not a word character, whitespace or a currency symbol is a
# token boundary. \w is Unicode-aware, so accented letters survive.
_PUNCT_RE = re.compile(rf"[^\w\s{re.escape(CURRENCY_SYMBOLS)}]")


def strip_punctuation(text: str) -> str:
    """Replace punctuation with spaces, keeping letters, digits and currency."""
    return _PUNCT_RE.sub(" ", text)


def split_words(text: str) -> list[str]:
    """Lowercase, strip punctuation and split on whitespace."""
    return strip_punctuation(text.lower()).split()


def surface_forms(text: str) -> dict[str, str]:
    """Map each lowercased word to the casing of its first occurrence."""
    forms: dict[str, str] = {}
    for word in strip_punctuation(text).split():
        forms.setdefault(word.lower(), word)
    return forms
