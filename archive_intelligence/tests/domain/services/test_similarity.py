"""
Unit Tests for Similarity Scoring

Tests the string, quantity and process components and the weighted
blend produced by SimilarityScorer.
"""

import pytest

from archive_intelligence.domain.archives.services.similarity import (
    SimilarityScorer,
    levenshtein_distance,
    process_overlap,
    quantity_similarity,
    string_similarity,
)
from archive_intelligence.tests.fixtures import ArchiveFactory, OrderItemFactory


class TestStringSimilarity:
    """Test normalized edit-distance similarity."""

    def test_levenshtein_distance(self):
        """Test classic edit distance examples."""
        assert levenshtein_distance("kitten", "sitting") == 3
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("flange", "flange") == 0

    def test_identical_strings_ignore_case(self):
        """Test case differences do not reduce similarity."""
        assert string_similarity("Landing Gear Bracket", "landing gear BRACKET") == 100.0

    def test_both_empty_is_perfect_match(self):
        """Test two missing values count as a vacuous match."""
        assert string_similarity(None, "") == 100.0

    def test_one_empty_is_no_match(self):
        """Test a missing value against a present one scores zero."""
        assert string_similarity("Titanium", None) == 0.0

    def test_partial_similarity(self):
        """Test one substitution in a four-letter word."""
        assert string_similarity("bolt", "boat") == pytest.approx(75.0)


class TestQuantitySimilarity:
    """Test min/max quantity ratio."""

    @pytest.mark.parametrize(
        "a,b,expected",
        [(50, 100, 0.5), (100, 50, 0.5), (7, 7, 1.0), (None, 5, 0.0), (0, 5, 0.0)],
    )
    def test_ratio(self, a, b, expected):
        """Test the ratio is symmetric and zero when a quantity is missing."""
        assert quantity_similarity(a, b) == pytest.approx(expected)


class TestProcessOverlap:
    """Test Jaccard overlap of process sets."""

    def test_overlap_is_case_insensitive(self):
        """Test differently cased names are the same process."""
        assert process_overlap(["Turning", "Grinding"], ["turning"]) == pytest.approx(50.0)

    def test_disjoint_processes(self):
        """Test no shared process scores zero."""
        assert process_overlap(["Anodizing"], ["Turning"]) == 0.0

    def test_one_side_empty(self):
        """Test an empty process list against a populated one scores zero."""
        assert process_overlap([], ["Turning"]) == 0.0


class TestSimilarityScorer:
    """Test the weighted similarity blend."""

    def test_identical_item_scores_100(self):
        """Test an item matching the archive on every field."""
        archive = ArchiveFactory.create()
        item = OrderItemFactory.create()

        assert SimilarityScorer.score(item, archive) == pytest.approx(100.0)

    def test_missing_quantity_loses_quantity_weight(self):
        """Test an absent quantity contributes nothing."""
        archive = ArchiveFactory.create()
        item = OrderItemFactory.create(quantity=None)

        assert SimilarityScorer.score(item, archive) == pytest.approx(80.0)

    def test_half_quantity_scores_half_weight(self):
        """Test quantity term is the ratio scaled to the 20-point weight."""
        archive = ArchiveFactory.create(quantity=100)
        item = OrderItemFactory.create(quantity=50)

        assert SimilarityScorer.score(item, archive) == pytest.approx(90.0)

    def test_description_used_when_part_name_missing(self):
        """Test free-text description stands in for the part name."""
        archive = ArchiveFactory.create()
        item = OrderItemFactory.create(part_name="", description="Landing Gear Bracket")

        assert SimilarityScorer.score(item, archive) == pytest.approx(100.0)

    def test_unrelated_item_scores_low(self):
        """Test a different part, material and routing."""
        archive = ArchiveFactory.create()
        item = OrderItemFactory.create(
            part_name="Hydraulic Manifold",
            material="Stainless 316",
            quantity=None,
            processes=("Grinding",),
        )

        assert SimilarityScorer.score(item, archive) < 30
