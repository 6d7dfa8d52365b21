"""Text normalization and segmentation into comparison units."""

import unicodedata
from dataclasses import dataclass
from typing import List, Tuple

import regex

# Extended grapheme clusters: combining sequences, ZWJ emoji, conjoined jamo
GRAPHEME_PATTERN = regex.compile(r"\X")

# Dropped by ignore_symbols; "So" (emoji, pictographs) is searchable content
SYMBOL_CATEGORIES = frozenset({"Pc", "Pd", "Ps", "Pe", "Pi", "Pf", "Po", "Sc", "Sk", "Sm"})


@dataclass(frozen=True)
class UnitSequence:
    """
    Comparison units of a string and the map back to raw offsets.

    ``starts[i]``/``ends[i]`` give the raw range that produced unit ``i``.
    Several units may share one raw range (a cluster split into code units),
    and raw ranges that produced no unit at all are listed in ``skipped``.
    """

    original: str
    text: str
    units: Tuple[str, ...]
    starts: Tuple[int, ...]
    ends: Tuple[int, ...]
    skipped: Tuple[Tuple[int, int], ...] = ()

    def __len__(self) -> int:
        return len(self.units)

    def raw_ranges(self) -> List[Tuple[int, int]]:
        """All raw ranges in order, unit ranges deduplicated, skipped ranges included."""
        ranges = set(zip(self.starts, self.ends))
        ranges.update(self.skipped)
        return sorted(ranges)


def utf16_units(text: str) -> List[str]:
    """Split text into UTF-16 code units, astral characters becoming surrogate pairs."""
    units = []
    for char in text:
        code = ord(char)
        if code > 0xFFFF:
            code -= 0x10000
            units.append(chr(0xD800 + (code >> 10)))
            units.append(chr(0xDC00 + (code & 0x3FF)))
        else:
            units.append(char)
    return units


def is_symbol(cluster: str) -> bool:
    """Whether a grapheme cluster is punctuation or a non-pictographic symbol."""
    return unicodedata.category(cluster[0]) in SYMBOL_CATEGORIES


class TextNormalizer:
    """Handles text normalization for consistent unit-level comparison."""

    def __init__(
        self,
        ignore_case: bool = True,
        ignore_symbols: bool = True,
        normalize_whitespace: bool = True,
        use_separated_unicode: bool = False,
    ) -> None:
        """
        Initialize the normalizer.

        Args:
            ignore_case: Case-fold every cluster before comparison
            ignore_symbols: Drop punctuation/symbol clusters
            normalize_whitespace: Collapse whitespace runs and trim both ends
            use_separated_unicode: Emit UTF-16 code units of the compatibility
                decomposition instead of grapheme clusters
        """
        self.ignore_case = ignore_case
        self.ignore_symbols = ignore_symbols
        self.normalize_whitespace = normalize_whitespace
        self.use_separated_unicode = use_separated_unicode
        self._form = "NFKD" if use_separated_unicode else "NFC"

    @classmethod
    def from_options(cls, options) -> "TextNormalizer":
        """Create a normalizer from the normalization fields of an Options value."""
        return cls(
            ignore_case=options.ignore_case,
            ignore_symbols=options.ignore_symbols,
            normalize_whitespace=options.normalize_whitespace,
            use_separated_unicode=options.use_separated_unicode,
        )

    def normalize(self, text: str) -> UnitSequence:
        """
        Normalize text into comparison units.

        The raw string is walked one grapheme cluster at a time so that every
        unit can be traced back to the raw range it came from.

        Args:
            text: Input text to normalize

        Returns:
            UnitSequence for the text
        """
        pieces: List[str] = []
        units: List[str] = []
        starts: List[int] = []
        ends: List[int] = []
        skipped: List[Tuple[int, int]] = []

        # Pending whitespace run and the symbols dropped inside it
        run_start = run_end = -1
        run_symbols: List[Tuple[int, int]] = []

        for found in GRAPHEME_PATTERN.finditer(text):
            cluster = found.group()
            start, end = found.span()

            if self.normalize_whitespace and cluster.isspace():
                if run_start < 0:
                    run_start = start
                else:
                    # Symbols between two whitespace clusters fall inside the run
                    run_symbols = []
                run_end = end
                continue

            if self.ignore_symbols and is_symbol(cluster):
                if run_start < 0:
                    skipped.append((start, end))
                else:
                    run_symbols.append((start, end))
                continue

            if run_start >= 0:
                if units:
                    pieces.append(" ")
                    units.append(" ")
                    starts.append(run_start)
                    ends.append(run_end)
                else:
                    skipped.append((run_start, run_end))
                skipped.extend(run_symbols)
                run_start = run_end = -1
                run_symbols = []

            piece = self._transform(cluster)
            piece_units = self._split(piece)
            if not piece_units:
                skipped.append((start, end))
                continue

            pieces.append(piece)
            units.extend(piece_units)
            starts.extend([start] * len(piece_units))
            ends.extend([end] * len(piece_units))

        # Trailing whitespace is trimmed
        if run_start >= 0:
            skipped.append((run_start, run_end))
            skipped.extend(run_symbols)

        return UnitSequence(
            original=text,
            text="".join(pieces),
            units=tuple(units),
            starts=tuple(starts),
            ends=tuple(ends),
            skipped=tuple(skipped),
        )

    def _transform(self, cluster: str) -> str:
        if self.ignore_case:
            cluster = cluster.casefold()
        return unicodedata.normalize(self._form, cluster)

    def _split(self, piece: str) -> List[str]:
        if self.use_separated_unicode:
            return utf16_units(piece)
        # Case folding can expand one cluster into several ("ß" -> "ss")
        return GRAPHEME_PATTERN.findall(piece)
