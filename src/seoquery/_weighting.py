"""Term weighting: TF-IDF-style weight, positional entropy, context diversity."""

from __future__ import annotations

import logging
import math
from collections import defaultdict

from ._entropy import shannon_entropy
from ._types import (
    ROLE_CONTENT,
    ROLE_ENTITY,
    ROLE_FUNCTION,
    ROLE_MODIFIER,
    Token,
)

logger = logging.getLogger(__name__)

N_BUCKETS = 10
CONTEXT_RADIUS = 2


def filter_words(words: list[str], stop_words: set[str]) -> list[str]:
    """Drop stop words and single-character words, keeping order."""
    return [w for w in words if len(w) > 1 and w not in stop_words]


def min_distance(a: list[int] | tuple[int, ...], b: list[int] | tuple[int, ...]) -> int | None:
    """Smallest |i - j| between two ascending position lists.

    Returns None when either list is empty.
    """
    if not a or not b:
        return None
    i = j = 0
    best = abs(a[0] - b[0])
    while i < len(a) and j < len(b):
        d = a[i] - b[j]
        if d == 0:
            return 0
        if abs(d) < best:
            best = abs(d)
        if d < 0:
            i += 1
        else:
            j += 1
    return best


def _positional_entropy(positions: list[int], n: int) -> float:
    buckets = [0] * N_BUCKETS
    for pos in positions:
        buckets[min(N_BUCKETS - 1, pos * N_BUCKETS // n)] += 1
    return shannon_entropy(buckets)


def _context_diversity(positions: list[int], stream: list[str]) -> float:
    contexts = {
        " ".join(stream[max(0, p - CONTEXT_RADIUS):p + CONTEXT_RADIUS + 1])
        for p in positions
    }
    return len(contexts) / len(positions)


def assign_role(weight: float, frequency: int, diversity: float) -> str:
    """Coarse statistical role, first matching rule wins."""
    if weight > 0.01 and frequency < 5 and diversity < 0.5:
        return ROLE_ENTITY
    if weight > 0.005 and frequency > 2:
        return ROLE_CONTENT
    if diversity > 0.7 and 1 < frequency < 10:
        return ROLE_MODIFIER
    return ROLE_FUNCTION


def weigh_terms(words: list[str], stop_words: set[str]) -> list[Token]:
    """Filter the word sequence and weight every distinct surviving word.

    weight = (f / N) * ln(N / f), where N is the filtered stream length.
    Positions index into the filtered stream. The result is sorted by weight
    descending; ties keep first-appearance order.
    """
    stream = filter_words(words, stop_words)
    n = len(stream)
    if n == 0:
        return []

    positions: dict[str, list[int]] = defaultdict(list)
    for i, word in enumerate(stream):
        positions[word].append(i)

    tokens: list[Token] = []
    for word, pos in positions.items():
        freq = len(pos)
        tf = freq / n
        weight = tf * math.log(n / freq)
        diversity = _context_diversity(pos, stream)
        tokens.append(Token(
            word=word,
            frequency=freq,
            positions=tuple(pos),
            weight=weight,
            positional_entropy=_positional_entropy(pos, n),
            context_diversity=diversity,
            role=assign_role(weight, freq, diversity),
        ))

    tokens.sort(key=lambda t: t.weight, reverse=True)
    logger.debug("Weighted %d distinct terms over %d words", len(tokens), n)
    return tokens
