"""Edit-distance matching of a query against the best window of a candidate."""

import threading
from typing import List, NamedTuple, Sequence

from rapidfuzz.distance import OSA, Levenshtein


class WindowMatch(NamedTuple):
    """Best alignment of a query inside a candidate, in unit indices."""

    distance: int
    start: int
    length: int


class FuzzyMatcher:
    """
    Approximate substring matcher over unit sequences.

    The dynamic program has ``len(query) + 1`` rows and ``len(candidate) + 1``
    columns. Row 0 is all zeros, so the query may start aligning at any
    candidate position, and the best window ends at the leftmost column of
    the last row holding the minimum distance.

    The table is kept per thread and reused between calls, growing to the
    largest query/candidate pair seen so far.
    """

    def __init__(self) -> None:
        """Initialize the matcher."""
        self._local = threading.local()

    def find_best_window(
        self,
        query: Sequence[str],
        candidate: Sequence[str],
        use_damerau: bool = True
    ) -> WindowMatch:
        """
        Find the candidate window with the smallest edit distance to the query.

        Args:
            query: Query units
            candidate: Candidate units
            use_damerau: Count adjacent transpositions as one edit

        Returns:
            WindowMatch with the distance and the window bounds
        """
        rows = len(query)
        cols = len(candidate)
        if rows == 0:
            return WindowMatch(0, 0, 0)

        table = self._table(rows + 1, cols + 1)
        first = table[0]
        for j in range(cols + 1):
            first[j] = 0

        for i in range(1, rows + 1):
            row = table[i]
            above = table[i - 1]
            unit = query[i - 1]
            row[0] = i
            for j in range(1, cols + 1):
                other = candidate[j - 1]
                best = above[j - 1] + (0 if unit == other else 1)
                cost = above[j] + 1
                if cost < best:
                    best = cost
                cost = row[j - 1] + 1
                if cost < best:
                    best = cost
                if (
                    use_damerau
                    and i > 1
                    and j > 1
                    and unit == candidate[j - 2]
                    and query[i - 2] == other
                ):
                    cost = table[i - 2][j - 2] + 1
                    if cost < best:
                        best = cost
                row[j] = best

        last = table[rows]
        end = 0
        for j in range(1, cols + 1):
            if last[j] < last[end]:
                end = j
        distance = last[end]

        start = self._backtrack(table, query, candidate, rows, end, use_damerau)
        return WindowMatch(distance, start, end - start)

    def whole_distance(
        self,
        query: Sequence[str],
        candidate: Sequence[str],
        use_damerau: bool = True
    ) -> int:
        """
        Edit distance between the query and the entire candidate.

        Uses optimal string alignment when ``use_damerau`` is set, which is
        the same transposition rule as the windowed matcher.
        """
        if use_damerau:
            return OSA.distance(query, candidate)
        return Levenshtein.distance(query, candidate)

    def _backtrack(
        self,
        table: List[List[int]],
        query: Sequence[str],
        candidate: Sequence[str],
        i: int,
        j: int,
        use_damerau: bool
    ) -> int:
        """Walk back to row 0 and return the window start column.

        Ties prefer the diagonal step, then a transposition, then skipping a
        query unit, then consuming a candidate unit.
        """
        while i > 0 and j > 0:
            current = table[i][j]
            unit = query[i - 1]
            other = candidate[j - 1]
            if current == table[i - 1][j - 1] + (0 if unit == other else 1):
                i -= 1
                j -= 1
            elif (
                use_damerau
                and i > 1
                and j > 1
                and unit == candidate[j - 2]
                and query[i - 2] == other
                and current == table[i - 2][j - 2] + 1
            ):
                i -= 2
                j -= 2
            elif current == table[i - 1][j] + 1:
                i -= 1
            else:
                j -= 1
        return j

    def _table(self, rows: int, cols: int) -> List[List[int]]:
        table = getattr(self._local, "table", None)
        if table is None:
            table = []
            self._local.table = table
        if table and len(table[0]) < cols:
            for row in table:
                row.extend([0] * (cols - len(row)))
        width = max(cols, len(table[0]) if table else 0)
        while len(table) < rows:
            table.append([0] * width)
        return table
