"""Precomputed candidate store used by Searcher."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from ..exceptions import InvalidConfigurationError
from ..log_config import get_logger
from ..models.options import KeySelector
from .normalizer import TextNormalizer, UnitSequence

logger = get_logger(__name__)


def _as_keys(value: Any) -> Optional[Tuple[str, ...]]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(key, str) for key in value):
        return tuple(value)
    return None


def extract_keys(candidate: Any, key_selector: Optional[KeySelector] = None) -> Tuple[str, ...]:
    """
    Get the key strings of a candidate.

    Without a selector a string is its own single key and a list or tuple of
    strings is a key list. Errors raised by the selector itself propagate.

    Args:
        candidate: The candidate value
        key_selector: Optional callable returning a key or a list of keys

    Returns:
        Tuple of keys in selector order

    Raises:
        InvalidConfigurationError: If no string keys can be obtained
    """
    if key_selector is None:
        keys = _as_keys(candidate)
        if keys is None:
            raise InvalidConfigurationError(
                f"Candidate of type {type(candidate).__name__} is not a string; "
                "pass a key_selector to search non-string candidates"
            )
        return keys

    keys = _as_keys(key_selector(candidate))
    if keys is None:
        raise InvalidConfigurationError(
            "key_selector must return a string or a list of strings"
        )
    return keys


@dataclass(frozen=True)
class KeyRecord:
    """One raw key and its normalized units."""

    original: str
    units: UnitSequence


@dataclass(frozen=True)
class CandidateRecord:
    """A candidate, its position in the candidate list and its normalized keys."""

    index: int
    item: Any
    keys: Tuple[KeyRecord, ...]


def build_record(
    index: int,
    candidate: Any,
    normalizer: TextNormalizer,
    key_selector: Optional[KeySelector] = None
) -> CandidateRecord:
    """Normalize every key of a candidate."""
    keys = tuple(
        KeyRecord(original=key, units=normalizer.normalize(key))
        for key in extract_keys(candidate, key_selector)
    )
    return CandidateRecord(index=index, item=candidate, keys=keys)


class CandidateIndex:
    """
    Immutable collection of normalized candidate records.

    Instances are never modified after construction; ``extend`` returns a new
    index so a reader holding the old one keeps a consistent view.
    """

    def __init__(self, records: Tuple[CandidateRecord, ...] = ()) -> None:
        """
        Initialize the index.

        Args:
            records: Candidate records in candidate-list order
        """
        self._records = records

    @classmethod
    def build(
        cls,
        candidates: Iterable[Any],
        normalizer: TextNormalizer,
        key_selector: Optional[KeySelector] = None
    ) -> "CandidateIndex":
        """
        Normalize a candidate list into a new index.

        Args:
            candidates: Candidate values
            normalizer: Normalizer configured with the cache options
            key_selector: Optional key extractor

        Returns:
            New CandidateIndex
        """
        index = cls(tuple(
            build_record(position, candidate, normalizer, key_selector)
            for position, candidate in enumerate(candidates)
        ))
        logger.debug("Candidate index built", **index.get_stats())
        return index

    def extend(
        self,
        candidates: Iterable[Any],
        normalizer: TextNormalizer,
        key_selector: Optional[KeySelector] = None
    ) -> "CandidateIndex":
        """Return a new index holding these records followed by the new candidates."""
        offset = len(self._records)
        added = tuple(
            build_record(offset + position, candidate, normalizer, key_selector)
            for position, candidate in enumerate(candidates)
        )
        index = type(self)(self._records + added)
        logger.debug("Candidate index extended", added=len(added), **index.get_stats())
        return index

    @property
    def records(self) -> Tuple[CandidateRecord, ...]:
        """Candidate records in candidate-list order."""
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CandidateRecord]:
        return iter(self._records)

    def get_stats(self) -> Dict[str, int]:
        """Get index statistics."""
        return {
            "total_candidates": len(self._records),
            "total_keys": sum(len(record.keys) for record in self._records),
            "total_units": sum(
                len(key.units) for record in self._records for key in record.keys
            ),
        }
