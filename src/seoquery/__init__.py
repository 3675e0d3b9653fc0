"""seoquery: statistical primary-query extraction for web pages, as SEOntology JSON-LD."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._config import PipelineConfig
from ._entities import extract_entities
from ._errors import InvalidInputError, SeoQueryError
from ._extractor import QueryExtractor
from ._jsonld import dumps, format_query, wrap_as_webpage
from ._keywords import extract_keywords
from ._language import profile_language
from ._types import (
    AnalysisMetrics,
    AnalysisResult,
    Entity,
    Keyword,
    LanguageProfile,
    Phrase,
    SemanticCluster,
    Token,
)

if TYPE_CHECKING:
    import random

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "analyze",
    "dumps",
    "extract_entities",
    "extract_keywords",
    "extract_main_query",
    "format_query",
    "profile_language",
    "wrap_as_webpage",
    "AnalysisMetrics",
    "AnalysisResult",
    "Entity",
    "InvalidInputError",
    "Keyword",
    "LanguageProfile",
    "Phrase",
    "PipelineConfig",
    "QueryExtractor",
    "SemanticCluster",
    "SeoQueryError",
    "Token",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def analyze(
    title: str,
    meta_description: str,
    body_text: str,
    language: str | None = None,
    *,
    config: PipelineConfig | None = None,
    rng: random.Random | None = None,
) -> AnalysisResult:
    """Run the core pipeline without input validation."""
    return QueryExtractor(config).analyze(
        title, meta_description, body_text, language, rng=rng,
    )


def extract_main_query(
    title: str,
    meta_description: str,
    body_text: str,
    language: str | None = None,
    *,
    config: PipelineConfig | None = None,
) -> AnalysisResult:
    """Validate inputs and extract the page's primary query.

    Raises:
        InvalidInputError: If title or body_text is empty or whitespace.
    """
    return QueryExtractor(config).extract_main_query(
        title, meta_description, body_text, language,
    )
