"""Corpus-specific stop-word induction plus fixed per-language function words."""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from ._sentence import approximate_sentences

if TYPE_CHECKING:
    import random

logger = logging.getLogger(__name__)

FREQUENCY_THRESHOLD = 0.01   # share of all words
FREQUENT_MAX_LEN = 4
DISPERSION_THRESHOLD = 0.2   # share of sentences
DISPERSED_MAX_LEN = 6


def induce_stop_words(
    words: list[str],
    *,
    window: int = 13,
    rng: random.Random | None = None,
) -> set[str]:
    """Derive stop words from frequency and dispersion alone.

    A word is a stop word when it is short (<= 4 chars) and makes up more
    than 1% of the text, or when it is fairly short (<= 6 chars) and shows
    up in more than 20% of the approximated sentences.
    """
    if not words:
        return set()

    total = len(words)
    freq = Counter(words)

    sentences = approximate_sentences(words, window=window, rng=rng)
    n_sentences = len(sentences)
    dispersion: Counter[str] = Counter()
    for sentence in sentences:
        dispersion.update(set(sentence))

    stop_words: set[str] = set()
    for word, count in freq.items():
        if count / total > FREQUENCY_THRESHOLD and len(word) <= FREQUENT_MAX_LEN:
            stop_words.add(word)
        elif (dispersion[word] / n_sentences > DISPERSION_THRESHOLD
              and len(word) <= DISPERSED_MAX_LEN):
            stop_words.add(word)

    logger.debug(
        "Induced %d stop words from %d words in %d sentences",
        len(stop_words), total, n_sentences,
    )
    return stop_words


# Fixed lists used by keyword extraction, where no induction is run.
FUNCTION_WORDS: dict[str, frozenset[str]] = {
    "en": frozenset({
        "the", "and", "but", "for", "with", "from", "into", "about",
        "through", "during", "before", "after", "above", "below", "over",
        "under", "between", "against", "until",
        "are", "was", "were", "been", "being", "have", "has", "had",
        "does", "did", "doing", "will", "would", "shall", "should", "may",
        "might", "must", "can", "could",
        "this", "that", "these", "those", "what", "which", "who", "whom",
        "whose", "they", "them", "their", "theirs", "she", "her", "his",
        "him", "its", "our", "ours", "your", "yours", "you",
        "not", "nor", "too", "very", "just", "how", "when", "where", "why",
        "than", "then", "now", "here", "there", "also", "only", "still",
        "all", "each", "every", "both", "few", "more", "most", "other",
        "some", "such", "any", "own", "same", "out", "off",
    }),
    "it": frozenset({
        "il", "lo", "la", "gli", "le", "uno", "una", "del", "dello", "della",
        "dei", "degli", "delle", "nel", "nella", "nei", "nelle", "sul",
        "sulla", "con", "per", "tra", "fra", "che", "chi", "non", "come",
        "anche", "più", "sono", "è", "era", "essere", "hanno", "questo",
        "questa", "quello", "quella", "suo", "sua", "loro", "dal", "dalla",
    }),
    "es": frozenset({
        "el", "la", "los", "las", "un", "una", "unos", "unas", "del", "al",
        "con", "por", "para", "que", "como", "más", "pero", "sus", "les",
        "este", "esta", "estos", "estas", "ese", "esa", "son", "fue", "ser",
        "está", "hay", "muy", "sin", "sobre", "entre", "cuando", "también",
    }),
    "fr": frozenset({
        "le", "la", "les", "un", "une", "des", "du", "de", "et", "est",
        "dans", "pour", "par", "sur", "avec", "que", "qui", "pas", "plus",
        "ce", "cette", "ces", "son", "sa", "ses", "leur", "leurs", "nous",
        "vous", "ils", "elles", "sont", "été", "être", "avoir", "mais",
        "comme", "aux", "ont",
    }),
    "de": frozenset({
        "der", "die", "das", "den", "dem", "des", "ein", "eine", "einen",
        "einem", "einer", "und", "oder", "aber", "mit", "von", "für", "auf",
        "aus", "bei", "nach", "über", "unter", "ist", "sind", "war", "wird",
        "werden", "nicht", "auch", "sich", "dass", "wie", "als", "noch",
    }),
}


def function_words(language: str) -> frozenset[str]:
    """Fixed function words for a language tag, English when unknown."""
    return FUNCTION_WORDS.get(language.lower()[:2], FUNCTION_WORDS["en"])
