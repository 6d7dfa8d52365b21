"""Unit tests for options and settings."""

import pytest
from pydantic import ValidationError

from fuzzyfind.config import Settings, get_settings
from fuzzyfind.models.options import (
    NORMALIZATION_OPTIONS,
    Options,
    SortKind,
    get_default_options,
    resolve_options,
)


class TestOptions:
    """Test cases for the Options model."""
    
    def test_defaults(self):
        """Test the documented default values."""
        options = Options()
        
        assert options.ignore_case is True
        assert options.ignore_symbols is True
        assert options.normalize_whitespace is True
        assert options.use_separated_unicode is False
        assert options.use_damerau is True
        assert options.use_sellers is True
        assert options.return_match_data is False
        assert options.threshold == 0.6
        assert options.sort_by == SortKind.BEST_MATCH
        assert options.key_selector is None
    
    def test_immutable(self):
        """Test that options cannot be changed in place."""
        options = Options()
        
        with pytest.raises(ValidationError):
            options.threshold = 0.1
    
    def test_threshold_bounds(self):
        """Test that the threshold must lie in [0, 1]."""
        with pytest.raises(ValidationError):
            Options(threshold=1.5)
        with pytest.raises(ValidationError):
            Options(threshold=-0.1)
    
    def test_unknown_option(self):
        """Test that misspelled options are rejected."""
        with pytest.raises(ValidationError):
            Options(ignoreCase=False)
    
    def test_sort_by_aliases(self):
        """Test that sort kinds are accepted by value or name."""
        assert Options(sort_by="insertOrder").sort_by == SortKind.INSERT_ORDER
        assert Options(sort_by="best_match").sort_by == SortKind.BEST_MATCH
        assert Options(sort_by=SortKind.INSERT_ORDER).sort_by == SortKind.INSERT_ORDER
        with pytest.raises(ValidationError):
            Options(sort_by="random")
    
    def test_merge(self):
        """Test that merge returns a validated copy."""
        options = Options(threshold=0.3)
        merged = options.merge(sort_by="insertOrder")
        
        assert merged is not options
        assert merged.threshold == 0.3
        assert merged.sort_by == SortKind.INSERT_ORDER
        assert options.merge() is options
        with pytest.raises(ValidationError):
            options.merge(threshold=2)
    
    def test_key_selector_must_be_callable(self):
        """Test that a non-callable key selector is rejected."""
        with pytest.raises(ValidationError):
            Options(key_selector="name")
    
    def test_normalization_options(self):
        """Test the set of options fixed at cache-build time."""
        assert NORMALIZATION_OPTIONS == {
            "ignore_case",
            "ignore_symbols",
            "normalize_whitespace",
            "use_separated_unicode",
            "key_selector",
        }


class TestResolveOptions:
    """Test cases for combining defaults and overrides."""
    
    def test_defaults(self):
        """Test resolution without any input."""
        assert resolve_options() == get_default_options()
    
    def test_mapping_and_keywords(self):
        """Test that keyword overrides win over the mapping."""
        options = resolve_options({"threshold": 0.2, "ignore_case": False}, threshold=0.4)
        
        assert options.threshold == 0.4
        assert options.ignore_case is False
    
    def test_options_instance(self):
        """Test that only explicitly set fields of an instance are applied."""
        options = resolve_options(Options(use_damerau=False), return_match_data=True)
        
        assert options.use_damerau is False
        assert options.return_match_data is True
        assert options.threshold == get_default_options().threshold


class TestSettings:
    """Test cases for environment-driven settings."""
    
    @pytest.fixture(autouse=True)
    def clear_cache(self):
        """Reset the cached settings around each test."""
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()
    
    def test_defaults(self):
        """Test the settings defaults."""
        settings = Settings()
        
        assert settings.threshold == 0.6
        assert settings.sort_by == "bestMatch"
        assert settings.log_level == "INFO"
    
    def test_environment_overrides(self, monkeypatch):
        """Test that environment variables change the default options."""
        monkeypatch.setenv("FUZZYFIND_THRESHOLD", "0.25")
        monkeypatch.setenv("FUZZYFIND_IGNORE_CASE", "false")
        
        options = get_default_options()
        
        assert options.threshold == 0.25
        assert options.ignore_case is False
    
    def test_invalid_environment_value(self, monkeypatch):
        """Test that out-of-range settings are rejected."""
        monkeypatch.setenv("FUZZYFIND_THRESHOLD", "3")
        
        with pytest.raises(ValidationError):
            Settings()
