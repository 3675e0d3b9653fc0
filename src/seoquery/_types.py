"""Data structures for seoquery."""

from __future__ import annotations

from dataclasses import dataclass, field

ROLE_CONTENT = "content"
ROLE_FUNCTION = "function"
ROLE_ENTITY = "entity"
ROLE_MODIFIER = "modifier"


@dataclass(slots=True, frozen=True)
class LanguageProfile:
    language: str
    confidence: float         # 0.0-1.0
    avg_word_length: float = 0.0
    vowel_ratio: float = 0.0
    consonant_clusters: int = 0


@dataclass(slots=True, frozen=True)
class Token:
    word: str
    frequency: int
    positions: tuple[int, ...]   # indices into the filtered word stream
    weight: float
    positional_entropy: float
    context_diversity: float     # distinct contexts / occurrences
    role: str


@dataclass(slots=True, frozen=True)
class Phrase:
    text: str
    words: tuple[str, ...]
    count: int                   # literal occurrences in the source text
    coherence: float
    information_value: float
    positions: tuple[int, ...]   # start indices in the filtered word stream


@dataclass(slots=True, frozen=True)
class SemanticCluster:
    centroid: str
    members: tuple[str, ...]     # centroid first
    coherence: float
    category: str


@dataclass(slots=True, frozen=True)
class Entity:
    text: str
    kind: str


@dataclass(slots=True, frozen=True)
class Keyword:
    text: str
    frequency: int
    stem: str
    intent: str
    variations: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class AnalysisMetrics:
    token_count: int
    total_words: int
    mean_weight: float
    vocabulary_richness: float
    mean_cluster_coherence: float
    keyword_density: float = 0.0   # main-query occurrences per 100 words


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    main_query: str
    query_type: str
    confidence: int              # 0-100
    language: str
    language_confidence: float
    metrics: AnalysisMetrics
    entities: list[Entity] = field(default_factory=list)
    keyphrases: list[Phrase] = field(default_factory=list)
    clusters: list[SemanticCluster] = field(default_factory=list)
    tokens: list[Token] = field(default_factory=list)
    stop_words: list[str] = field(default_factory=list)
