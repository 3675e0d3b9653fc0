"""Frequency keywords with Snowball stems and a lexical intent guess."""

from __future__ import annotations

from collections import Counter

import Stemmer

from ._query import COMMERCIAL, INFORMATIONAL, NAVIGATIONAL, TRANSACTIONAL
from ._stop_words import function_words
from ._tokenizer import split_words
from ._types import Keyword

_STEMMER_ALGORITHMS = {
    "en": "english",
    "it": "italian",
    "es": "spanish",
    "fr": "french",
    "de": "german",
}

_QUESTION_WORDS = frozenset({"how", "what", "why", "when", "where", "who"})
_TRANSACTIONAL_WORDS = frozenset({"buy", "purchase", "price", "cost"})
_COMMERCIAL_WORDS = frozenset({"best", "vs", "versus", "compare", "review"})

MIN_KEYWORD_LEN = 3


def stemmer_for(language: str) -> Stemmer.Stemmer:
    """Snowball stemmer for a language tag, English when unsupported."""
    return Stemmer.Stemmer(_STEMMER_ALGORITHMS.get(language.lower()[:2], "english"))


def classify_keyword_intent(keyword: str) -> str:
    """Guess search intent from trigger words in the keyword."""
    words = split_words(keyword)
    if not words:
        return NAVIGATIONAL
    if keyword.rstrip().endswith("?") or words[0] in _QUESTION_WORDS:
        return INFORMATIONAL
    vocab = set(words)
    if vocab & _TRANSACTIONAL_WORDS:
        return TRANSACTIONAL
    if vocab & _COMMERCIAL_WORDS:
        return COMMERCIAL
    if vocab & _QUESTION_WORDS:
        return INFORMATIONAL
    return NAVIGATIONAL


def extract_keywords(
    text: str,
    language: str = "en",
    *,
    max_keywords: int = 20,
    min_frequency: int = 1,
) -> list[Keyword]:
    """Most frequent non-function words of text, most frequent first.

    Words of two characters or fewer are ignored. Each keyword carries its
    Snowball stem; the stem is listed as a variation when it differs.
    """
    if max_keywords < 1:
        raise ValueError("max_keywords must be >= 1")

    skip = function_words(language)
    counts = Counter(
        w for w in split_words(text) if len(w) >= MIN_KEYWORD_LEN and w not in skip
    )
    if not counts:
        return []

    stemmer = stemmer_for(language)
    keywords: list[Keyword] = []
    for word, freq in counts.most_common():
        if freq < min_frequency:
            break
        stem = stemmer.stemWord(word)
        keywords.append(Keyword(
            text=word,
            frequency=freq,
            stem=stem,
            intent=classify_keyword_intent(word),
            variations=(stem,) if stem != word else (),
        ))
        if len(keywords) >= max_keywords:
            break
    return keywords
