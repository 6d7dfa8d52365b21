"""Score normalization and span mapping back to raw offsets."""

from typing import Tuple

from .fuzzy_matcher import WindowMatch
from .normalizer import UnitSequence


def score_window(distance: int, query_length: int) -> float:
    """
    Convert a windowed edit distance into a score in [0, 1].

    Args:
        distance: Best window edit distance
        query_length: Number of query units

    Returns:
        1.0 for an empty query, otherwise ``max(0, 1 - distance / query_length)``
    """
    if query_length == 0:
        return 1.0
    return max(0.0, 1.0 - distance / query_length)


def score_whole(distance: int, query_length: int, candidate_length: int) -> float:
    """Score a whole-string edit distance against the longer of the two inputs."""
    if query_length == 0:
        return 1.0
    return max(0.0, 1.0 - distance / max(query_length, candidate_length))


def map_span(units: UnitSequence, start: int, length: int) -> Tuple[int, int]:
    """
    Translate a unit window into ``(index, length)`` in raw string offsets.

    Args:
        units: The candidate unit sequence the window refers to
        start: First unit of the window
        length: Number of units in the window

    Returns:
        Raw offset and raw length of the window
    """
    if length == 0:
        if start < len(units):
            return units.starts[start], 0
        if units.units:
            return units.ends[-1], 0
        return 0, 0

    raw_start = units.starts[start]
    raw_end = units.ends[start + length - 1]
    return raw_start, raw_end - raw_start


def score_match(
    match: WindowMatch,
    query_length: int,
    candidate: UnitSequence
) -> Tuple[float, Tuple[int, int]]:
    """Score a windowed match and map its span onto the raw candidate."""
    return (
        score_window(match.distance, query_length),
        map_span(candidate, match.start, match.length),
    )
