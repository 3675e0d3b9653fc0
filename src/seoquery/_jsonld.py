"""SEOntology JSON-LD output shapes."""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from ._errors import InvalidInputError

if TYPE_CHECKING:
    from ._types import AnalysisResult

SEONTOLOGY_CONTEXT: dict[str, str] = {
    "seo": "https://seontology.org/vocab#",
    "schema": "https://schema.org/",
}

MAX_ALTERNATIVE_QUERIES = 4

_PARAGRAPH_RE = re.compile(r"\n\s*\n")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def format_query(
    result: AnalysisResult,
    url: str | None = None,
    timestamp: str | None = None,
) -> dict[str, Any]:
    """Render an AnalysisResult as a ``seo:Query`` node."""
    alternatives = [
        p.text for p in result.keyphrases if p.text != result.main_query
    ][:MAX_ALTERNATIVE_QUERIES]
    metrics = result.metrics

    return {
        "@context": dict(SEONTOLOGY_CONTEXT),
        "@type": "seo:Query",
        "schema:name": result.main_query,
        "seo:queryType": result.query_type,
        "seo:language": result.language,
        "seo:queryScore": result.confidence,
        "seo:alternativeQueries": alternatives,
        "seo:relatedEntities": [
            {"@type": "schema:Thing", "schema:name": e.text, "seo:entityType": e.kind}
            for e in result.entities
        ],
        "seo:semanticClusters": [
            {
                "@type": "seo:SemanticCluster",
                "seo:centroid": c.centroid,
                "seo:members": list(c.members),
                "seo:coherence": round(c.coherence, 4),
                "seo:category": c.category,
            }
            for c in result.clusters
        ],
        "seo:keywordDensity": round(metrics.keyword_density, 2),
        "seo:pureNlpAnalysis": {
            "seo:languageConfidence": round(result.language_confidence, 2),
            "seo:tokenCount": metrics.token_count,
            "seo:totalWords": metrics.total_words,
            "seo:averageWeight": round(metrics.mean_weight, 4),
            "seo:vocabularyRichness": round(metrics.vocabulary_richness, 4),
            "seo:averageClusterCoherence": round(metrics.mean_cluster_coherence, 4),
            "seo:keyphrases": [
                {
                    "seo:phrase": p.text,
                    "seo:occurrences": p.count,
                    "seo:coherence": round(p.coherence, 4),
                    "seo:informationValue": round(p.information_value, 4),
                }
                for p in result.keyphrases
            ],
            "seo:topTerms": [
                {
                    "seo:term": t.word,
                    "seo:frequency": t.frequency,
                    "seo:weight": round(t.weight, 4),
                    "seo:semanticRole": t.role,
                }
                for t in result.tokens
            ],
            "seo:stopWords": list(result.stop_words),
        },
        "seo:extractedFrom": url or "provided content",
        "schema:dateCreated": timestamp or _now(),
    }


def split_chunks(body_text: str | None) -> list[dict[str, Any]]:
    """Split body text on blank lines into positioned ``seo:Chunk`` nodes."""
    if not body_text or not body_text.strip():
        return []
    parts = [p.strip() for p in _PARAGRAPH_RE.split(body_text)]
    return [
        {"@type": "seo:Chunk", "seo:chunkPosition": i, "seo:chunkText": text}
        for i, text in enumerate((p for p in parts if p), start=1)
    ]


def wrap_as_webpage(
    url: str,
    title: str,
    meta_description: str,
    primary_query: str,
    body_text: str | None = None,
    language: str = "it",
    timestamp: str | None = None,
) -> dict[str, Any]:
    """Package page metadata and a chosen primary query as a ``seo:WebPage``.

    Raises:
        InvalidInputError: If url, title, meta_description or primary_query
            is missing or blank.
    """
    required = {
        "url": url,
        "title": title,
        "meta_description": meta_description,
        "primary_query": primary_query,
    }
    for name, value in required.items():
        if not isinstance(value, str) or not value.strip():
            raise InvalidInputError(name)

    node: dict[str, Any] = {
        "@context": dict(SEONTOLOGY_CONTEXT),
        "@type": "seo:WebPage",
        "@id": url,
        "schema:url": url,
        "seo:title": title,
        "seo:metaDescription": meta_description,
        "seo:hasPrimaryQuery": {"@type": "seo:Query", "schema:name": primary_query},
        "seo:hasLanguage": {"@type": "schema:Language", "schema:name": language},
    }
    chunks = split_chunks(body_text)
    if chunks:
        node["seo:hasChunk"] = chunks
    node["schema:dateModified"] = timestamp or _now()
    return node


def dumps(node: dict[str, Any]) -> str:
    """Serialize a JSON-LD node, keeping non-ASCII text readable."""
    return json.dumps(node, indent=2, ensure_ascii=False)
