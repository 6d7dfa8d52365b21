"""Core scoring and search functionality."""

from .engine import Searcher, fuzzy, rank, search
from .fuzzy_matcher import FuzzyMatcher, WindowMatch
from .index import CandidateIndex, CandidateRecord, KeyRecord, extract_keys
from .normalizer import TextNormalizer, UnitSequence
from .scorer import map_span, score_match, score_whole, score_window

__all__ = [
    "Searcher",
    "fuzzy",
    "rank",
    "search",
    "FuzzyMatcher",
    "WindowMatch",
    "CandidateIndex",
    "CandidateRecord",
    "KeyRecord",
    "extract_keys",
    "TextNormalizer",
    "UnitSequence",
    "map_span",
    "score_match",
    "score_whole",
    "score_window",
]
