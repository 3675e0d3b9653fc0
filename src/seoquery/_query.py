"""Query-type classification and main-query selection."""

from __future__ import annotations

import math

from ._clustering import (
    CATEGORY_ACTION,
    CATEGORY_CONCEPT,
    CATEGORY_DESCRIPTOR,
    CATEGORY_ENTITY,
    CATEGORY_QUANTITATIVE,
)
from ._types import Phrase, SemanticCluster, Token

INFORMATIONAL = "informational"
COMMERCIAL = "commercial"
TRANSACTIONAL = "transactional"
NAVIGATIONAL = "navigational"

# category -> (query type, multiplier); anything else is informational at 0.5
_CATEGORY_INTENT: dict[str, tuple[str, float]] = {
    CATEGORY_QUANTITATIVE: (COMMERCIAL, 2.0),
    CATEGORY_ACTION: (TRANSACTIONAL, 1.5),
    CATEGORY_ENTITY: (NAVIGATIONAL, 1.0),
    CATEGORY_CONCEPT: (INFORMATIONAL, 1.0),
    CATEGORY_DESCRIPTOR: (INFORMATIONAL, 1.0),
}
_DEFAULT_INTENT = (INFORMATIONAL, 0.5)


def classify_query_type(clusters: list[SemanticCluster]) -> str:
    """Pick the query type with the highest category-weighted coherence.

    Ties, including the all-zero case, resolve to informational.
    """
    scores = {INFORMATIONAL: 0.0, COMMERCIAL: 0.0, TRANSACTIONAL: 0.0, NAVIGATIONAL: 0.0}
    for cluster in clusters:
        query_type, factor = _CATEGORY_INTENT.get(cluster.category, _DEFAULT_INTENT)
        scores[query_type] += cluster.coherence * factor

    best = max(scores.values())
    leaders = [qt for qt, s in scores.items() if s == best]
    if len(leaders) > 1:
        return INFORMATIONAL
    return leaders[0]


def select_main_query(
    title: str,
    phrases: list[Phrase],
    tokens: list[Token],
) -> str:
    """Choose the main query, preferring candidates anchored in the title.

    Order: first phrase found in the title, top phrase, first token found in
    the title, top token, then the lowercased title itself.
    """
    title_lower = title.lower()
    for phrase in phrases:
        if phrase.text in title_lower:
            return phrase.text
    if phrases:
        return phrases[0].text
    for token in tokens:
        if token.word in title_lower:
            return token.word
    if tokens:
        return tokens[0].word
    return title_lower


def query_confidence(
    clusters: list[SemanticCluster],
    phrases: list[Phrase],
) -> int:
    """(top cluster coherence + top phrase information value) * 10, as 0-100."""
    top_cluster = clusters[0].coherence if clusters else 0.0
    top_phrase = phrases[0].information_value if phrases else 0.0
    # half-up rounding; both terms are non-negative
    return min(100, math.floor((top_cluster + top_phrase) * 10 + 0.5))
