"""QueryExtractor: the end-to-end statistical query extraction pipeline."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._clustering import cluster_terms
from ._config import PipelineConfig
from ._entities import extract_entities
from ._errors import InvalidInputError
from ._language import profile_language
from ._phrases import count_occurrences, extract_phrases
from ._query import classify_query_type, query_confidence, select_main_query
from ._stop_words import induce_stop_words
from ._tokenizer import split_words, surface_forms
from ._types import AnalysisMetrics, AnalysisResult
from ._weighting import filter_words, weigh_terms

if TYPE_CHECKING:
    import random

    from ._types import SemanticCluster, Token

logger = logging.getLogger(__name__)


class QueryExtractor:
    """Runs the pipeline. Holds only an immutable config, so one instance can
    serve any number of concurrent calls.
    """

    __slots__ = ("_config",)

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self._config = config or PipelineConfig()

    @property
    def config(self) -> PipelineConfig:
        return self._config

    # -- Public API --

    def extract_main_query(
        self,
        title: str,
        meta_description: str,
        body_text: str,
        language: str | None = None,
    ) -> AnalysisResult:
        """Validate required fields, then analyze.

        Raises:
            InvalidInputError: If title or body_text is empty or whitespace.
        """
        if not isinstance(title, str) or not title.strip():
            raise InvalidInputError("title")
        if not isinstance(body_text, str) or not body_text.strip():
            raise InvalidInputError("body_text")
        return self.analyze(title, meta_description or "", body_text, language)

    def analyze(
        self,
        title: str,
        meta_description: str,
        body_text: str,
        language: str | None = None,
        *,
        rng: random.Random | None = None,
    ) -> AnalysisResult:
        """Extract the primary query and supporting statistics.

        Never raises on degenerate input: empty text produces empty
        collections, an ``unknown`` language and the lowercased title as
        the main query.

        Args:
            title: Page title. Title-anchored phrases win main-query selection.
            meta_description: Meta description, may be empty.
            body_text: Visible body text, truncated to ``max_body_chars``.
            language: Caller-known language tag; skips detection.
            rng: Switches stop-word induction to random sentence breaks.
        """
        cfg = self._config
        if len(body_text) > cfg.max_body_chars:
            logger.warning(
                "Body text truncated from %d to %d characters",
                len(body_text), cfg.max_body_chars,
            )
            body_text = body_text[:cfg.max_body_chars]

        text = f"{title} {meta_description} {body_text}"
        profile = profile_language(text, language)

        words = split_words(text)
        if len(words) > cfg.max_words:
            logger.warning("Word stream truncated from %d to %d words", len(words), cfg.max_words)
            words = words[:cfg.max_words]

        stop_words = induce_stop_words(words, window=cfg.sentence_window, rng=rng)
        stream = filter_words(words, stop_words)
        tokens = weigh_terms(words, stop_words)
        phrases = extract_phrases(tokens, stream, text, max_phrases=cfg.max_phrases)
        clusters = cluster_terms(
            tokens, phrases, surface_forms(text),
            max_tokens=cfg.max_cluster_tokens,
            max_clusters=cfg.max_clusters,
        )

        main_query = select_main_query(title, phrases, tokens)
        query_type = classify_query_type(clusters)
        confidence = query_confidence(clusters, phrases)

        logger.debug(
            "Main query %r (%s, %d) from %d tokens, %d phrases, %d clusters",
            main_query, query_type, confidence, len(tokens), len(phrases), len(clusters),
        )

        return AnalysisResult(
            main_query=main_query,
            query_type=query_type,
            confidence=confidence,
            language=profile.language,
            language_confidence=profile.confidence,
            metrics=self._metrics(tokens, stream, clusters, main_query, text),
            entities=extract_entities(text, limit=cfg.max_entities),
            keyphrases=phrases[:cfg.max_keyphrases],
            clusters=clusters[:cfg.max_result_clusters],
            tokens=tokens[:cfg.max_result_tokens],
            stop_words=self._rank_stop_words(words, stop_words),
        )

    def analyze_batch(
        self,
        pages: list[tuple[str, str, str]],
        language: str | None = None,
    ) -> list[AnalysisResult]:
        """Analyze several (title, meta_description, body_text) triples."""
        return [self.analyze(t, m, b, language) for t, m, b in pages]

    # -- Internal methods --

    def _rank_stop_words(self, words: list[str], stop_words: set[str]) -> list[str]:
        """Most frequent stop words first, ties alphabetical."""
        counts: dict[str, int] = {}
        for w in words:
            if w in stop_words:
                counts[w] = counts.get(w, 0) + 1
        ranked = sorted(counts, key=lambda w: (-counts[w], w))
        return ranked[:self._config.max_result_stop_words]

    @staticmethod
    def _metrics(
        tokens: list[Token],
        stream: list[str],
        clusters: list[SemanticCluster],
        main_query: str,
        text: str,
    ) -> AnalysisMetrics:
        total = len(stream)
        n_tokens = len(tokens)
        mean_weight = sum(t.weight for t in tokens) / n_tokens if n_tokens else 0.0
        richness = n_tokens / total if total else 0.0
        mean_coherence = (
            sum(c.coherence for c in clusters) / len(clusters) if clusters else 0.0
        )
        density = 0.0
        if total and main_query.strip():
            hits = count_occurrences([main_query], text.lower()).get(main_query, 0)
            density = hits / total * 100
        return AnalysisMetrics(
            token_count=n_tokens,
            total_words=total,
            mean_weight=mean_weight,
            vocabulary_richness=richness,
            mean_cluster_coherence=mean_coherence,
            keyword_density=density,
        )
