"""Phrase extraction: 2- and 3-word n-grams scored by coherence and information."""

from __future__ import annotations

import logging
import math
from itertools import combinations

import ahocorasick

from ._types import Phrase, Token
from ._weighting import min_distance

logger = logging.getLogger(__name__)

NGRAM_SIZES = (2, 3)
COHERENCE_SPAN = 10.0
MIN_COHERENCE = 0.1


def count_occurrences(patterns: list[str], text: str) -> dict[str, int]:
    """Count literal occurrences of every pattern in text in one scan.

    Matching is plain substring matching: overlapping and embedded matches
    all count.
    """
    if not patterns:
        return {}
    ac = ahocorasick.Automaton()
    for idx, pattern in enumerate(patterns):
        ac.add_word(pattern, idx)
    ac.make_automaton()

    counts = [0] * len(patterns)
    for _, idx in ac.iter(text):
        counts[idx] += 1
    return dict(zip(patterns, counts))


def coherence(words: tuple[str, ...], token_map: dict[str, Token]) -> float:
    """1 - (mean pairwise minimum position distance) / 10, floored at 0."""
    distances: list[int] = []
    for a, b in combinations(words, 2):
        d = min_distance(token_map[a].positions, token_map[b].positions)
        if d is not None:
            distances.append(d)
    if not distances:
        return 0.0
    avg = sum(distances) / len(distances)
    return max(0.0, 1.0 - avg / COHERENCE_SPAN)


def information_value(words: tuple[str, ...], token_map: dict[str, Token]) -> float:
    """Mean component weight scaled by ln(n + 1)."""
    mean_weight = sum(token_map[w].weight for w in words) / len(words)
    return mean_weight * math.log(len(words) + 1)


def extract_phrases(
    tokens: list[Token],
    stream: list[str],
    text: str,
    max_phrases: int = 20,
) -> list[Phrase]:
    """Build, verify and rank adjacent n-grams of the filtered word stream.

    A phrase is kept only when it appears verbatim (case-insensitive) in
    ``text`` and its coherence exceeds 0.1. Phrases are ranked by
    information value * coherence.
    """
    token_map = {t.word: t for t in tokens}

    starts: dict[tuple[str, ...], list[int]] = {}
    for n in NGRAM_SIZES:
        for i in range(len(stream) - n + 1):
            words = tuple(stream[i:i + n])
            if all(w in token_map for w in words):
                starts.setdefault(words, []).append(i)

    if not starts:
        return []

    texts = [" ".join(words) for words in starts]
    counts = count_occurrences(texts, text.lower())

    phrases: list[Phrase] = []
    for phrase_text, (words, pos) in zip(texts, starts.items()):
        count = counts[phrase_text]
        if count < 1:
            continue
        coh = coherence(words, token_map)
        if coh <= MIN_COHERENCE:
            continue
        phrases.append(Phrase(
            text=phrase_text,
            words=words,
            count=count,
            coherence=coh,
            information_value=information_value(words, token_map),
            positions=tuple(pos),
        ))

    phrases.sort(key=lambda p: p.information_value * p.coherence, reverse=True)
    logger.debug(
        "Kept %d of %d candidate phrases", min(len(phrases), max_phrases), len(starts),
    )
    return phrases[:max_phrases]
