"""Data models for fuzzyfind."""

from .options import (
    NORMALIZATION_OPTIONS,
    Options,
    SortKind,
    get_default_options,
    resolve_options,
)
from .response import MatchData, MatchSpan

__all__ = [
    "NORMALIZATION_OPTIONS",
    "Options",
    "SortKind",
    "get_default_options",
    "resolve_options",
    "MatchData",
    "MatchSpan",
]
