"""Tests for regex entity extraction."""

from seoquery import Entity, extract_entities

TEXT = (
    "Contact sales@example.com or visit https://example.com/deals today. "
    "Released on 2024-03-15 for $499. We met John Smith in New York."
)


def test_entity_kinds():
    assert extract_entities(TEXT) == [
        Entity("https://example.com/deals", "url"),
        Entity("sales@example.com", "email"),
        Entity("2024-03-15", "date"),
        Entity("$499", "number"),
        Entity("John Smith", "proper_noun"),
        Entity("New York", "proper_noun"),
    ]


def test_date_digits_not_repeated_as_numbers():
    kinds = [e.kind for e in extract_entities("Published March 3, 2024 and updated 12/05/2024.")]
    assert kinds.count("date") == 2
    assert "number" not in kinds


def test_sentence_initial_word_skipped():
    assert extract_entities("Laptops are cheap.") == []


def test_duplicates_collapsed():
    entities = extract_entities("We love Acme Corp. They said Acme Corp ships fast.")
    assert [e.text for e in entities] == ["Acme Corp"]


def test_limit():
    assert len(extract_entities("1 2 3 4 5 6", limit=3)) == 3


def test_empty():
    assert extract_entities("") == []
