"""Pipeline configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields

logger = logging.getLogger(__name__)

ENV_PREFIX = "SEOQUERY_"


@dataclass(slots=True, frozen=True)
class PipelineConfig:
    """Tunables for one QueryExtractor.

    The input caps bound the quadratic steps (pairwise cluster similarity,
    positional distance scans) on oversized pages.
    """

    # Input caps
    max_body_chars: int = 100_000
    max_words: int = 20_000

    # Stop-word induction
    sentence_window: int = 13

    # Stage caps
    max_phrases: int = 20
    max_clusters: int = 10
    max_cluster_tokens: int = 60

    # Result caps
    max_entities: int = 10
    max_keyphrases: int = 5
    max_result_clusters: int = 5
    max_result_tokens: int = 10
    max_result_stop_words: int = 10

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"{f.name} must be a positive integer, got {value!r}")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> PipelineConfig:
        """Build a config from SEOQUERY_* variables, falling back to defaults.

        e.g. SEOQUERY_MAX_BODY_CHARS=50000 sets max_body_chars.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, int] = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None or not raw.strip():
                continue
            try:
                overrides[f.name] = int(raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}"
                ) from None
        if overrides:
            logger.debug("Config overrides from environment: %s", overrides)
        return cls(**overrides)
