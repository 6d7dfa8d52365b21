"""Unit tests for score normalization and span mapping."""

import pytest
from fuzzyfind.core.fuzzy_matcher import WindowMatch
from fuzzyfind.core.normalizer import TextNormalizer
from fuzzyfind.core.scorer import map_span, score_match, score_whole, score_window


class TestScoreWindow:
    """Test cases for windowed scores."""
    
    def test_perfect_score(self):
        """Test that distance zero scores one."""
        assert score_window(0, 5) == 1.0
    
    def test_partial_scores(self):
        """Test exact fractional scores."""
        assert score_window(1, 4) == 0.75
        assert score_window(2, 4) == 0.5
        assert score_window(2, 5) == 0.6
        assert score_window(8, 20) == 0.6
    
    def test_clamped_at_zero(self):
        """Test that distances at or above the query length score zero."""
        assert score_window(5, 5) == 0.0
        assert score_window(7, 5) == 0.0
    
    def test_empty_query(self):
        """Test that an empty query is a perfect match."""
        assert score_window(0, 0) == 1.0


class TestScoreWhole:
    """Test cases for whole-string scores."""
    
    def test_longer_side_is_denominator(self):
        """Test that the longer input bounds the score."""
        assert score_whole(3, 5, 2) == pytest.approx(0.4)
        assert score_whole(3, 2, 5) == pytest.approx(0.4)
    
    def test_empty_query(self):
        """Test that an empty query still scores one."""
        assert score_whole(4, 0, 4) == 1.0


class TestMapSpan:
    """Test cases for mapping unit windows to raw offsets."""
    
    @pytest.fixture
    def normalizer(self):
        """Create a default normalizer."""
        return TextNormalizer()
    
    def test_skipped_characters_inside_window(self, normalizer):
        """Test that dropped symbols inside a window widen the raw span."""
        units = normalizer.normalize("  h..e..l..l  ..o")
        
        assert map_span(units, 0, 4) == (2, 10)
        assert map_span(units, 0, 6) == (2, 15)
    
    def test_collapsed_whitespace_reports_full_run(self, normalizer):
        """Test that a collapsed space maps to the whole original run."""
        units = normalizer.normalize("a    b")
        
        assert map_span(units, 1, 1) == (1, 4)
    
    def test_multi_unit_cluster(self):
        """Test that code units of one character map to that character."""
        units = TextNormalizer(use_separated_unicode=True).normalize("x\U0001F4A9y")
        
        assert map_span(units, 1, 1) == (1, 1)
        assert map_span(units, 1, 2) == (1, 1)
        assert map_span(units, 0, 4) == (0, 3)
    
    def test_empty_window(self, normalizer):
        """Test zero-length windows at the edges and inside."""
        units = normalizer.normalize("  abc")
        
        assert map_span(units, 0, 0) == (2, 0)
        assert map_span(units, 3, 0) == (5, 0)
        assert map_span(normalizer.normalize(""), 0, 0) == (0, 0)
    
    def test_score_match(self, normalizer):
        """Test scoring and mapping in one step."""
        units = normalizer.normalize("xx hello")
        
        score, span = score_match(WindowMatch(1, 3, 4), 5, units)
        
        assert score == 0.8
        assert span == (3, 4)
