"""Tests for entropy helpers."""

import math

import pytest

from seoquery._entropy import char_bigram_entropy, length_entropy, shannon_entropy


def test_empty_distribution():
    assert shannon_entropy([]) == 0.0
    assert shannon_entropy([0, 0, 0]) == 0.0


def test_single_outcome():
    assert shannon_entropy([7]) == 0.0


def test_uniform_distribution():
    assert shannon_entropy([1, 1]) == pytest.approx(1.0)
    assert shannon_entropy([3, 3, 3, 3]) == pytest.approx(2.0)


def test_zero_counts_ignored():
    assert shannon_entropy([0, 2, 0, 2]) == pytest.approx(1.0)


def test_char_bigram_entropy():
    assert char_bigram_entropy("") == 0.0
    assert char_bigram_entropy("a") == 0.0
    assert char_bigram_entropy("aaaa") == 0.0
    # ab, bc, cd: three equally likely bigrams
    assert char_bigram_entropy("abcd") == pytest.approx(math.log2(3))


def test_length_entropy():
    assert length_entropy([]) == 0.0
    assert length_entropy(["ab", "cd"]) == 0.0
    assert length_entropy(["a", "bb"]) == pytest.approx(1.0)
