"""End-to-end tests for the extraction pipeline and its input boundary."""

import random

import pytest

import seoquery
from conftest import (
    ARTICLE_BODY,
    ARTICLE_META,
    ARTICLE_TITLE,
    GPU_LAPTOP_BODY,
    LAPTOP_META,
    LAPTOP_TITLE,
)
from seoquery import InvalidInputError, PipelineConfig, QueryExtractor, SeoQueryError


def test_empty_body_rejected(extractor):
    with pytest.raises(InvalidInputError) as exc:
        extractor.extract_main_query("Best Budget Laptops", "meta", "")
    assert exc.value.field == "body_text"


def test_blank_title_rejected(extractor):
    with pytest.raises(InvalidInputError) as exc:
        extractor.extract_main_query("   ", "meta", "Some body text")
    assert exc.value.field == "title"


def test_invalid_input_hierarchy():
    with pytest.raises(SeoQueryError):
        seoquery.extract_main_query("Title", "", "\n\t ")
    with pytest.raises(ValueError):
        seoquery.extract_main_query("", "", "body")


def test_core_does_not_validate(extractor):
    result = extractor.analyze("Best Budget Laptops", "", "")
    assert isinstance(result, seoquery.AnalysisResult)


def test_degenerate_input():
    result = seoquery.analyze("!!!", "", "")
    assert result.language == "unknown"
    assert result.language_confidence == 0.0
    assert result.tokens == []
    assert result.keyphrases == []
    assert result.clusters == []
    assert result.main_query == "!!!"
    assert result.query_type == "informational"
    assert result.confidence == 0
    assert result.metrics.vocabulary_richness == 0.0


def test_all_words_filtered_falls_back_to_title():
    # two words in one window are both dispersed short words
    result = seoquery.analyze("Hello World", "", "")
    assert result.tokens == []
    assert result.main_query == "hello world"


def test_budget_laptop_page(budget_laptop_result):
    result = budget_laptop_result
    assert result.main_query == "budget laptops"
    assert result.main_query not in result.stop_words
    # price/cheap are not cluster signals; "2024" is too short and too
    # frequent to survive, so no quantitative cluster votes commercial
    assert result.query_type == "transactional"
    assert "2024" in result.stop_words
    assert "price" in result.stop_words
    assert "quantitative" not in [c.category for c in result.clusters]


def test_quantitative_cluster_makes_page_commercial(gpu_laptop_result):
    assert gpu_laptop_result.query_type == "commercial"
    assert "laptops" in gpu_laptop_result.main_query
    assert gpu_laptop_result.main_query not in gpu_laptop_result.stop_words


def test_gpu_laptop_page_details(gpu_laptop_result):
    assert gpu_laptop_result.main_query == "rtx4060 laptops comparison"
    assert gpu_laptop_result.keyphrases[0].text == "rtx4060 laptops comparison"
    assert gpu_laptop_result.clusters[0].category == "quantitative"
    assert "laptops" in gpu_laptop_result.clusters[0].members
    assert [t.word for t in gpu_laptop_result.tokens[:2]] == ["laptops", "rtx4060"]
    assert 0 < gpu_laptop_result.confidence <= 100


def test_main_query_comes_from_the_page(article_result):
    text = f"{ARTICLE_TITLE} {ARTICLE_META} {ARTICLE_BODY}".lower()
    assert article_result.main_query
    assert article_result.main_query in text


def test_result_caps(article_result):
    assert len(article_result.entities) <= 10
    assert len(article_result.keyphrases) <= 5
    assert len(article_result.clusters) <= 5
    assert len(article_result.tokens) <= 10
    assert len(article_result.stop_words) <= 10


def test_metrics(article_result):
    m = article_result.metrics
    assert m.token_count > 0
    assert m.total_words >= m.token_count
    assert 0.0 < m.vocabulary_richness <= 1.0
    assert m.mean_weight > 0.0
    assert m.mean_cluster_coherence > 0.0
    assert m.keyword_density > 0.0


def test_tokens_sorted(article_result):
    weights = [t.weight for t in article_result.tokens]
    assert weights == sorted(weights, reverse=True)
    assert all(w >= 0 for w in weights)


def test_stop_words_ranked(article_result):
    assert "the" in article_result.stop_words
    assert len(set(article_result.stop_words)) == len(article_result.stop_words)


def test_idempotent(extractor):
    a = extractor.analyze(ARTICLE_TITLE, ARTICLE_META, ARTICLE_BODY)
    b = extractor.analyze(ARTICLE_TITLE, ARTICLE_META, ARTICLE_BODY)
    assert a == b
    stamp = "2024-01-01T00:00:00+00:00"
    assert seoquery.dumps(seoquery.format_query(a, timestamp=stamp)) == \
        seoquery.dumps(seoquery.format_query(b, timestamp=stamp))


def test_random_segmentation_runs(extractor):
    result = extractor.analyze(
        ARTICLE_TITLE, ARTICLE_META, ARTICLE_BODY, rng=random.Random(3),
    )
    assert result.main_query
    assert "the" in result.stop_words


def test_preferred_language():
    result = seoquery.analyze(ARTICLE_TITLE, ARTICLE_META, ARTICLE_BODY, language="de")
    assert result.language == "de"
    assert result.language_confidence == 1.0


def test_french_page():
    result = seoquery.analyze("Idée", "", "éducation épopée musée opéra")
    assert result.language == "fr"


def test_english_article(article_result):
    assert article_result.language == "en"


def test_body_truncation():
    config = PipelineConfig(max_body_chars=20)
    body = "coral reefs bleaching " + "volcanoes " * 50
    result = seoquery.analyze("Coral", "", body, config=config)
    assert all(t.word != "volcanoes" for t in result.tokens)


def test_word_cap():
    config = PipelineConfig(max_words=30)
    result = seoquery.analyze(ARTICLE_TITLE, ARTICLE_META, ARTICLE_BODY, config=config)
    assert result.metrics.total_words <= 30


def test_analyze_batch(extractor):
    results = extractor.analyze_batch([
        (LAPTOP_TITLE, LAPTOP_META, GPU_LAPTOP_BODY),
        (ARTICLE_TITLE, ARTICLE_META, ARTICLE_BODY),
    ])
    assert len(results) == 2
    assert results[0].query_type == "commercial"


def test_extractor_config():
    config = PipelineConfig(max_keyphrases=2)
    extractor = QueryExtractor(config)
    assert extractor.config is config
    result = extractor.analyze(ARTICLE_TITLE, ARTICLE_META, ARTICLE_BODY)
    assert len(result.keyphrases) <= 2


def test_keyword_density_counts_overlaps():
    # "go go" occurs at offsets 0 and 3 of "go go go"
    metrics = QueryExtractor._metrics([], ["go", "go", "go"], [], "go go", "Go go go")
    assert metrics.keyword_density == pytest.approx(2 / 3 * 100)


def test_keyword_density_without_query():
    metrics = QueryExtractor._metrics([], ["go"], [], "  ", "go")
    assert metrics.keyword_density == 0.0
