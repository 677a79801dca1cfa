from __future__ import annotations

"""
Word Index Data Models.

Defines the per-word aggregate stored in the ordered index: the normalized
word plus every (file, line) location on which it has been seen.
"""

import bisect
from functools import total_ordering
from typing import Dict, List

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@total_ordering
class WordRecord:
    """
    Location aggregate for a single word.

    Records are ordered and compared by word text only, which is what the
    ordered tree relies on to keep one record per word. Line numbers are
    1-based and kept ascending and unique per file, so recording the same
    line twice is a no-op.

    Attributes:
        word: The normalized (lowercase, letters only) word.
    """

    __slots__ = ("word", "_locations")

    def __init__(self, word: str) -> None:
        self.word = word
        self._locations: Dict[str, List[int]] = {}

    # -------------------------------------------------------------------------
    # MUTATION
    # -------------------------------------------------------------------------

    def add_location(self, filename: str, line_number: int) -> bool:
        """
        Record that the word appears on ``line_number`` of ``filename``.

        Args:
            filename: Source file identifier.
            line_number: 1-based line number.

        Returns:
            bool: True if the location was new, False if already recorded.
        """
        lines = self._locations.setdefault(filename, [])
        pos = bisect.bisect_left(lines, line_number)
        if pos < len(lines) and lines[pos] == line_number:
            return False
        lines.insert(pos, line_number)
        return True

    # -------------------------------------------------------------------------
    # ACCESSORS
    # -------------------------------------------------------------------------

    @property
    def occurrences(self) -> int:
        """Number of distinct (file, line) pairs the word was seen on."""
        return sum(len(lines) for lines in self._locations.values())

    @property
    def files(self) -> List[str]:
        """Filenames in the order they were first recorded."""
        return list(self._locations)

    def lines_for(self, filename: str) -> List[int]:
        """Ascending line numbers for ``filename`` (empty if never seen there)."""
        return list(self._locations.get(filename, ()))

    def file_locations(self) -> Dict[str, List[int]]:
        """Copy of the full filename -> lines mapping."""
        return {name: list(lines) for name, lines in self._locations.items()}

    # -------------------------------------------------------------------------
    # ORDERING
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordRecord):
            return NotImplemented
        return self.word == other.word

    def __lt__(self, other: WordRecord) -> bool:
        if not isinstance(other, WordRecord):
            return NotImplemented
        return self.word < other.word

    def __hash__(self) -> int:
        return hash(self.word)

    # -------------------------------------------------------------------------
    # PERSISTENCE
    # -------------------------------------------------------------------------

    def __getstate__(self) -> Dict[str, object]:
        return {"word": self.word, "locations": self._locations}

    def __setstate__(self, state: Dict[str, object]) -> None:
        self.word = state["word"]  # type: ignore[assignment]
        self._locations = state["locations"]  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WordRecord({self.word!r}, occurrences={self.occurrences})"
