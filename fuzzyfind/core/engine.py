"""Scoring, ranking and the public search entry points."""

import threading
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple, Union

from ..exceptions import InvalidConfigurationError
from ..log_config import get_logger
from ..models.options import (
    NORMALIZATION_OPTIONS,
    Options,
    OptionsLike,
    SortKind,
    as_overrides,
    resolve_options,
)
from ..models.response import MatchData, MatchSpan
from .fuzzy_matcher import FuzzyMatcher
from .index import CandidateIndex, CandidateRecord, KeyRecord, build_record
from .normalizer import TextNormalizer, UnitSequence
from .scorer import map_span, score_match, score_whole

logger = get_logger(__name__)

# Stateless apart from its per-thread scratch table
_matcher = FuzzyMatcher()


@dataclass(frozen=True)
class _Hit:
    """Best-scoring key of one candidate."""

    record: CandidateRecord
    key_index: int
    key: KeyRecord
    score: float
    span: Tuple[int, int]
    length_gap: int

    def sort_key(self) -> Tuple[float, int, int, int, int]:
        return (-self.score, self.span[0], self.key_index, self.length_gap, self.record.index)

    def to_match_data(self) -> MatchData:
        return MatchData(
            item=self.record.item,
            original=self.key.original,
            key=self.key.units.text,
            score=self.score,
            match=MatchSpan(index=self.span[0], length=self.span[1]),
        )


def _score_key(
    query: UnitSequence,
    key: KeyRecord,
    options: Options,
    matcher: FuzzyMatcher
) -> Tuple[float, Tuple[int, int]]:
    candidate = key.units
    if not options.use_sellers:
        distance = matcher.whole_distance(query.units, candidate.units, options.use_damerau)
        score = score_whole(distance, len(query), len(candidate))
        return score, map_span(candidate, 0, len(candidate))

    match = matcher.find_best_window(query.units, candidate.units, options.use_damerau)
    return score_match(match, len(query), candidate)


def _best_hit(
    query: UnitSequence,
    record: CandidateRecord,
    options: Options,
    matcher: FuzzyMatcher
) -> Optional[_Hit]:
    """Score every key of a record and keep the best; ties go to the earlier key."""
    best = None
    for key_index, key in enumerate(record.keys):
        score, span = _score_key(query, key, options, matcher)
        if best is None or score > best.score:
            best = _Hit(
                record=record,
                key_index=key_index,
                key=key,
                score=score,
                span=span,
                length_gap=abs(len(key.units) - len(query)),
            )
    return best


def rank(
    query: UnitSequence,
    records: Iterable[CandidateRecord],
    options: Options,
    matcher: Optional[FuzzyMatcher] = None
) -> List[Any]:
    """
    Score, filter and order candidate records against a normalized query.

    Args:
        query: Normalized query
        records: Candidate records in candidate-list order
        options: Effective options for this call
        matcher: Matcher to use (the module-level one by default)

    Returns:
        Candidate items, or MatchData records when ``return_match_data`` is set
    """
    matcher = matcher or _matcher
    hits = []
    for record in records:
        hit = _best_hit(query, record, options, matcher)
        if hit is not None and hit.score >= options.threshold:
            hits.append(hit)

    if options.sort_by == SortKind.BEST_MATCH:
        hits.sort(key=_Hit.sort_key)

    if options.return_match_data:
        return [hit.to_match_data() for hit in hits]
    return [hit.record.item for hit in hits]


def fuzzy(
    query: str,
    candidate: Any,
    options: OptionsLike = None,
    **overrides: Any
) -> Union[float, MatchData]:
    """
    Score a single candidate against a query.

    Args:
        query: Search query
        candidate: Candidate string, key list, or any value with a key_selector
        options: Options instance or mapping of option names
        **overrides: Individual option values

    Returns:
        The score in [0, 1], or MatchData when ``return_match_data`` is set
    """
    options = resolve_options(options, **overrides)
    normalizer = TextNormalizer.from_options(options)
    record = build_record(0, candidate, normalizer, options.key_selector)
    hit = _best_hit(normalizer.normalize(query), record, options, _matcher)

    if hit is None:
        # A candidate without keys has nothing to match
        if options.return_match_data:
            return MatchData(
                item=candidate, original="", key="", score=0.0,
                match=MatchSpan(index=0, length=0),
            )
        return 0.0

    if options.return_match_data:
        return hit.to_match_data()
    return hit.score


def search(
    query: str,
    candidates: Iterable[Any],
    options: OptionsLike = None,
    **overrides: Any
) -> List[Any]:
    """
    Rank candidates against a query.

    Args:
        query: Search query
        candidates: Candidate values
        options: Options instance or mapping of option names
        **overrides: Individual option values

    Returns:
        Candidates (or MatchData records) that reach the threshold, ordered
        per ``sort_by``
    """
    options = resolve_options(options, **overrides)
    normalizer = TextNormalizer.from_options(options)
    index = CandidateIndex.build(candidates, normalizer, options.key_selector)
    return rank(normalizer.normalize(query), index.records, options, _matcher)


class Searcher:
    """
    Searches a fixed candidate list with precomputed normalization.

    Candidate keys are normalized once, when the searcher is built or the
    candidate list is replaced. Each search only normalizes the query.
    Options that change normalization are fixed at construction; threshold,
    sort order, match data and the distance rules can be overridden per call.

    Writers (``set_candidates``, ``add``) are serialized by a lock and swap in
    a new immutable index; searches read the current index without locking.
    """

    def __init__(
        self,
        candidates: Iterable[Any] = (),
        options: OptionsLike = None,
        **overrides: Any
    ) -> None:
        """
        Initialize the searcher.

        Args:
            candidates: Candidate values
            options: Options instance or mapping of option names
            **overrides: Individual option values
        """
        self._options = resolve_options(options, **overrides)
        self._normalizer = TextNormalizer.from_options(self._options)
        self._matcher = FuzzyMatcher()
        self._write_lock = threading.Lock()
        self._index = CandidateIndex.build(
            candidates, self._normalizer, self._options.key_selector
        )

    @property
    def options(self) -> Options:
        """The options the cache was built with."""
        return self._options

    def __len__(self) -> int:
        return len(self._index)

    def set_candidates(self, candidates: Iterable[Any]) -> None:
        """Replace the candidate list, rebuilding the whole cache."""
        with self._write_lock:
            self._index = CandidateIndex.build(
                candidates, self._normalizer, self._options.key_selector
            )

    def add(self, *candidates: Any) -> None:
        """Append candidates; the cache is replaced by a new, larger one."""
        with self._write_lock:
            self._index = self._index.extend(
                candidates, self._normalizer, self._options.key_selector
            )

    def search(
        self,
        query: str,
        options: OptionsLike = None,
        **overrides: Any
    ) -> List[Any]:
        """
        Rank the cached candidates against a query.

        Args:
            query: Search query
            options: Per-call options (only explicitly set fields are applied)
            **overrides: Individual per-call option values

        Returns:
            Candidates (or MatchData records) that reach the threshold

        Raises:
            InvalidConfigurationError: If a normalization option differs from
                the one the cache was built with
        """
        call_options = self._call_options(as_overrides(options, overrides))
        index = self._index
        results = rank(self._normalizer.normalize(query), index.records, call_options, self._matcher)
        logger.debug(
            "Search completed",
            candidates=len(index),
            results=len(results),
        )
        return results

    def _call_options(self, overrides: dict) -> Options:
        rejected = sorted(
            name for name in NORMALIZATION_OPTIONS.intersection(overrides)
            if overrides[name] != getattr(self._options, name)
        )
        if rejected:
            logger.warning("Rejected per-call normalization override", options=rejected)
            raise InvalidConfigurationError(
                f"Options {', '.join(rejected)} change normalization and are fixed "
                "when the Searcher is built; create a new Searcher instead"
            )
        return self._options.merge(**overrides)
