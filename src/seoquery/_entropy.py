"""Shannon entropy helpers shared by every pipeline stage."""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable


def shannon_entropy(counts: Iterable[int]) -> float:
    """Entropy in bits of a frequency distribution. Zero counts are ignored."""
    values = [c for c in counts if c > 0]
    total = sum(values)
    if total == 0:
        return 0.0
    entropy = 0.0
    for c in values:
        p = c / total
        entropy -= p * math.log2(p)
    return entropy


def char_bigram_entropy(text: str) -> float:
    """Entropy of overlapping character bigrams, spaces included."""
    if len(text) < 2:
        return 0.0
    return shannon_entropy(
        Counter(text[i:i + 2] for i in range(len(text) - 1)).values()
    )


def length_entropy(words: list[str]) -> float:
    """Entropy of the word-length distribution."""
    return shannon_entropy(Counter(len(w) for w in words).values())
