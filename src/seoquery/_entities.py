"""Regex entity extraction: URLs, emails, dates, numbers, capitalized names."""

from __future__ import annotations

import re

from ._types import Entity

_MONTHS = (
    "January|February|March|April|May|June|July|August|September|October|"
    "November|December|Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sep|Sept|Oct|Nov|Dec"
)

# Order matters: each pattern's matches are blanked out before the next runs,
# so the digits of a date are not reported again as a number.
_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("url", re.compile(r"\b(?:https?://|www\.)[^\s<>\"']+[^\s<>\"'.,;:!?)]")),
    ("email", re.compile(r"\b[\w.+-]+@[\w-]+(?:\.[\w-]+)+\b")),
    ("date", re.compile(
        r"\b(?:\d{4}-\d{1,2}-\d{1,2}"
        r"|\d{1,2}[/.]\d{1,2}[/.]\d{2,4}"
        rf"|\d{{1,2}}\s+(?:{_MONTHS})\.?\s+\d{{4}}"
        rf"|(?:{_MONTHS})\.?\s+\d{{1,2}},?\s+\d{{4}})\b",
        re.IGNORECASE,
    )),
    ("number", re.compile(r"[$€£¥₹]?\b\d+(?:[.,]\d+)*%?")),
    ("proper_noun", re.compile(
        r"\b[A-ZÀ-ÖØ-Þ][\w'-]*(?:[ \t]+[A-ZÀ-ÖØ-Þ][\w'-]*)*"
    )),
]

_SENTENCE_END = ".!?"

# Keeps offsets stable without letting a blanked match join two name runs.
_BLANK = "\x00"


def _starts_sentence(text: str, start: int) -> bool:
    head = text[:start].rstrip()
    return not head or head[-1] in _SENTENCE_END


def extract_entities(text: str, limit: int = 10) -> list[Entity]:
    """Pull pattern-shaped entities out of text, first occurrence order per kind.

    A lone capitalized word at the start of a sentence is not reported as a
    proper noun.
    """
    entities: list[Entity] = []
    seen: set[str] = set()
    remaining = text

    for kind, pattern in _PATTERNS:
        for m in pattern.finditer(remaining):
            value = m.group().strip()
            if kind == "proper_noun" and " " not in value and _starts_sentence(remaining, m.start()):
                continue
            if not value or value in seen:
                continue
            seen.add(value)
            entities.append(Entity(text=value, kind=kind))
            if len(entities) >= limit:
                return entities
        remaining = pattern.sub(lambda m: _BLANK * len(m.group()), remaining)

    return entities
