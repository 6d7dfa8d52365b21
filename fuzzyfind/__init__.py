"""
fuzzyfind - approximate matching and ranking for search-as-you-type filtering.

This package scores a short query against candidate strings by finding the
candidate window with the smallest edit distance, and ranks candidate lists
by that score. ``Searcher`` keeps the normalized candidates around so repeated
queries against the same list only pay for the query.
"""

__version__ = "1.0.0"

from .core.engine import Searcher, fuzzy, search
from .exceptions import FuzzyFindError, InvalidConfigurationError
from .models.options import Options, SortKind
from .models.response import MatchData, MatchSpan

__all__ = [
    "Searcher",
    "fuzzy",
    "search",
    "FuzzyFindError",
    "InvalidConfigurationError",
    "Options",
    "SortKind",
    "MatchData",
    "MatchSpan",
]
