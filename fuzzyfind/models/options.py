"""Search option models."""

from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import get_settings


class SortKind(str, Enum):
    """Result ordering strategies."""
    
    BEST_MATCH = "bestMatch"
    INSERT_ORDER = "insertOrder"


KeySelector = Callable[[Any], Union[str, Sequence[str]]]

# Options that change the normalized representation stored by a Searcher
NORMALIZATION_OPTIONS = frozenset({
    "ignore_case",
    "ignore_symbols",
    "normalize_whitespace",
    "use_separated_unicode",
    "key_selector",
})


class Options(BaseModel):
    """Immutable configuration consumed by ``fuzzy``, ``search`` and ``Searcher``."""
    
    ignore_case: bool = Field(default=True, description="Case-fold query and candidates")
    ignore_symbols: bool = Field(
        default=True, description="Drop punctuation and ASCII-style symbols before matching"
    )
    normalize_whitespace: bool = Field(
        default=True, description="Collapse whitespace runs and trim both ends"
    )
    use_separated_unicode: bool = Field(
        default=False, description="Compare UTF-16 code units instead of grapheme clusters"
    )
    use_damerau: bool = Field(
        default=True, description="Count an adjacent transposition as a single edit"
    )
    use_sellers: bool = Field(
        default=True, description="Match against the best candidate window instead of the whole candidate"
    )
    return_match_data: bool = Field(
        default=False, description="Return MatchData records instead of bare candidates"
    )
    threshold: float = Field(default=0.6, ge=0.0, le=1.0, description="Minimum score kept by search")
    sort_by: SortKind = Field(default=SortKind.BEST_MATCH, description="Result ordering")
    key_selector: Optional[KeySelector] = Field(
        default=None, description="Extracts one key or a list of keys from a candidate"
    )
    
    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("sort_by", mode="before")
    @classmethod
    def validate_sort_by(cls, v: Any) -> Any:
        """Accept sort kinds by value or by member name."""
        if isinstance(v, str) and not isinstance(v, SortKind):
            for kind in SortKind:
                if v == kind.value or v.upper() == kind.name:
                    return kind
            raise ValueError("sort_by must be 'bestMatch' or 'insertOrder'")
        return v
    
    def merge(self, **overrides: Any) -> "Options":
        """
        Return a copy with the given fields replaced.
        
        Args:
            **overrides: Option values to replace
            
        Returns:
            A validated Options instance (``self`` when nothing changes)
        """
        if not overrides:
            return self
        
        values: Dict[str, Any] = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(overrides)
        return type(self)(**values)
    
    def explicit_values(self) -> Dict[str, Any]:
        """Values of the fields that were set explicitly on construction."""
        return {name: getattr(self, name) for name in self.model_fields_set}


OptionsLike = Union[Options, Mapping[str, Any], None]


def get_default_options() -> Options:
    """Build the default options from the library settings."""
    settings = get_settings()
    return Options(
        ignore_case=settings.ignore_case,
        ignore_symbols=settings.ignore_symbols,
        normalize_whitespace=settings.normalize_whitespace,
        use_separated_unicode=settings.use_separated_unicode,
        use_damerau=settings.use_damerau,
        use_sellers=settings.use_sellers,
        return_match_data=settings.return_match_data,
        threshold=settings.threshold,
        sort_by=settings.sort_by,
    )


def as_overrides(options: OptionsLike, overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Flatten an options argument plus keyword overrides into one dict."""
    if options is None:
        values: Dict[str, Any] = {}
    elif isinstance(options, Options):
        values = options.explicit_values()
    else:
        values = dict(options)
    values.update(overrides)
    return values


def resolve_options(options: OptionsLike = None, **overrides: Any) -> Options:
    """
    Combine the defaults, an options argument and keyword overrides.
    
    Args:
        options: An Options instance, a mapping of option names, or None
        **overrides: Individual option values, applied last
        
    Returns:
        The effective Options
    """
    return get_default_options().merge(**as_overrides(options, overrides))
