"""Greedy single-pass semantic clustering of weighted terms and phrases."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ._tokenizer import CURRENCY_SYMBOLS
from ._types import (
    ROLE_CONTENT,
    ROLE_ENTITY,
    ROLE_MODIFIER,
    Phrase,
    SemanticCluster,
    Token,
)
from ._weighting import min_distance

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.3
PROXIMITY_SPAN = 5

CATEGORY_QUANTITATIVE = "quantitative"
CATEGORY_ENTITY = "entity"
CATEGORY_ACTION = "action"
CATEGORY_DESCRIPTOR = "descriptor"
CATEGORY_CONCEPT = "concept"
CATEGORY_GENERAL = "general"


@dataclass(slots=True, frozen=True)
class Candidate:
    text: str
    words: frozenset[str]
    positions: tuple[int, ...]
    score: float
    role: str | None = None      # tokens only
    weight: float = 0.0          # tokens only
    is_phrase: bool = False

    @classmethod
    def from_token(cls, token: Token) -> Candidate:
        return cls(
            text=token.word,
            words=frozenset((token.word,)),
            positions=token.positions,
            score=token.weight,
            role=token.role,
            weight=token.weight,
        )

    @classmethod
    def from_phrase(cls, phrase: Phrase, token_map: dict[str, Token]) -> Candidate:
        positions = {
            p for w in phrase.words if w in token_map for p in token_map[w].positions
        }
        return cls(
            text=phrase.text,
            words=frozenset(phrase.words),
            positions=tuple(sorted(positions)),
            score=phrase.information_value,
            is_phrase=True,
        )


def similarity(a: Candidate, b: Candidate) -> float:
    """Jaccard word overlap, falling back to positional proximity."""
    shared = a.words & b.words
    if shared:
        return len(shared) / len(a.words | b.words)
    d = min_distance(a.positions, b.positions)
    if d is None or d >= PROXIMITY_SPAN:
        return 0.0
    return (PROXIMITY_SPAN - d) / PROXIMITY_SPAN


def infer_category(centroid: Candidate, surface: str | None = None) -> str:
    """Category of a cluster from its centroid, first matching rule wins.

    ``surface`` is the centroid as written in the source text; the entity
    rule looks at its capitalization.
    """
    text = centroid.text
    if any(ch.isdigit() or ch in CURRENCY_SYMBOLS for ch in text):
        return CATEGORY_QUANTITATIVE
    written = surface or text
    if written[:1].isupper() and centroid.role == ROLE_ENTITY:
        return CATEGORY_ENTITY
    if centroid.role == ROLE_CONTENT and len(text) > 4 and centroid.weight > 0.01:
        return CATEGORY_ACTION
    if centroid.role == ROLE_MODIFIER:
        return CATEGORY_DESCRIPTOR
    if centroid.is_phrase or " " in text:
        return CATEGORY_CONCEPT
    return CATEGORY_GENERAL


def rank_candidates(
    tokens: list[Token],
    phrases: list[Phrase],
    max_tokens: int = 60,
) -> list[Candidate]:
    """Unify tokens and phrases into one list ranked by score."""
    token_map = {t.word: t for t in tokens}
    candidates = [Candidate.from_token(t) for t in tokens[:max_tokens]]
    candidates.extend(Candidate.from_phrase(p, token_map) for p in phrases)
    candidates.sort(key=lambda c: c.score, reverse=True)
    return candidates


def cluster_candidates(
    candidates: list[Candidate],
    surface: dict[str, str] | None = None,
    max_clusters: int = 10,
) -> list[SemanticCluster]:
    """Greedy clustering: each unassigned candidate seeds a cluster and pulls
    in every later unassigned candidate with similarity above 0.3.

    Assignment is final, so every candidate lands in exactly one cluster.
    """
    surface = surface or {}
    assigned = [False] * len(candidates)
    clusters: list[SemanticCluster] = []

    for i, seed in enumerate(candidates):
        if assigned[i]:
            continue
        assigned[i] = True
        members = [seed.text]
        score = seed.score
        for j in range(i + 1, len(candidates)):
            if assigned[j]:
                continue
            other = candidates[j]
            sim = similarity(seed, other)
            if sim > SIMILARITY_THRESHOLD:
                assigned[j] = True
                members.append(other.text)
                score += sim * other.score
        first_word = seed.text.split(" ", 1)[0]
        clusters.append(SemanticCluster(
            centroid=seed.text,
            members=tuple(dict.fromkeys(members)),
            coherence=score,
            category=infer_category(seed, surface.get(first_word)),
        ))

    clusters.sort(key=lambda c: c.coherence, reverse=True)
    logger.debug(
        "Formed %d clusters from %d candidates", len(clusters), len(candidates),
    )
    return clusters[:max_clusters]


def cluster_terms(
    tokens: list[Token],
    phrases: list[Phrase],
    surface: dict[str, str] | None = None,
    *,
    max_tokens: int = 60,
    max_clusters: int = 10,
) -> list[SemanticCluster]:
    """Rank tokens and phrases together and cluster them."""
    candidates = rank_candidates(tokens, phrases, max_tokens=max_tokens)
    return cluster_candidates(candidates, surface, max_clusters=max_clusters)
