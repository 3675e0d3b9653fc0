"""Punctuation-free sentence approximation over a word stream."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import random

MIN_RANDOM_SENTENCE = 10
RANDOM_BREAK_THRESHOLD = 0.7


def approximate_sentences(
    words: list[str],
    window: int = 13,
    rng: random.Random | None = None,
) -> list[list[str]]:
    """Group words into pseudo-sentences.

    By default sentences are fixed windows of ``window`` words. When ``rng``
    is given, a sentence closes once it holds at least 10 words and a draw
    from ``rng`` exceeds 0.7, which averages roughly 13 words per sentence.
    """
    if not words:
        return []

    if rng is None:
        return [words[i:i + window] for i in range(0, len(words), window)]

    sentences: list[list[str]] = []
    current: list[str] = []
    for word in words:
        current.append(word)
        if len(current) >= MIN_RANDOM_SENTENCE and rng.random() > RANDOM_BREAK_THRESHOLD:
            sentences.append(current)
            current = []
    if current:
        sentences.append(current)
    return sentences
