"""Shared fixtures for seoquery tests."""

import pytest

import seoquery

LAPTOP_TITLE = "Best Budget Laptops 2024"
LAPTOP_META = "Compare prices and find cheap laptops"

# Repeated filler; "2024" and "price" are induced as stop words here.
BUDGET_LAPTOP_BODY = "Laptops... laptops... price comparison... " * 20

# Model numbers and resolutions survive stop-word induction and seed a
# quantitative cluster.
GPU_LAPTOP_BODY = (
    "Gaming laptops with rtx4060 graphics. Our rtx4060 laptops comparison "
    "covers pricing, discount deals and 1920x1080 displays. Cheap rtx4060 "
    "laptops start below 700 dollars."
)

ARTICLE_TITLE = "How Coral Reefs Survive Ocean Warming"
ARTICLE_META = "Marine biologists explain coral bleaching and reef recovery"
ARTICLE_BODY = """Coral reefs cover less than one percent of the ocean floor, yet they
shelter a quarter of all marine species. When ocean temperatures rise, corals
expel the algae living in their tissues and turn white. This process, called
coral bleaching, leaves the reef starving and exposed.

Marine biologists at the Great Barrier Reef have tracked bleaching events since
1998. Their surveys show that reef recovery depends on water quality, fishing
pressure and the time between heatwaves. Some coral species recover within a
decade, while slow growing corals may need far longer.

Restoration programs now grow heat tolerant corals in nurseries and plant them
on damaged reefs. Researchers from James Cook University report that restored
reefs attract fish within months. Protecting reefs from local pollution gives
bleached corals the best chance of recovery as ocean warming continues."""


@pytest.fixture(scope="session")
def extractor():
    """One extractor for all tests; it holds no per-call state."""
    return seoquery.QueryExtractor()


@pytest.fixture(scope="session")
def budget_laptop_result(extractor):
    return extractor.extract_main_query(LAPTOP_TITLE, LAPTOP_META, BUDGET_LAPTOP_BODY)


@pytest.fixture(scope="session")
def gpu_laptop_result(extractor):
    return extractor.extract_main_query(LAPTOP_TITLE, LAPTOP_META, GPU_LAPTOP_BODY)


@pytest.fixture(scope="session")
def article_result(extractor):
    return extractor.extract_main_query(ARTICLE_TITLE, ARTICLE_META, ARTICLE_BODY)
