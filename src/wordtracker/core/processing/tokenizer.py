from __future__ import annotations

"""
Word Tokenization.

Fixed lexical pre-processing for the indexer: maximal runs of non-alphabetic
characters are separators, tokens are lower-cased and empty tokens are
discarded. Digits, punctuation and non-ASCII letters never form part of a
word.
"""

import re
from typing import Iterable, Iterator, List, Tuple

_SEPARATOR_RE = re.compile(r"[^a-z]+")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_words(line: str) -> List[str]:
    """
    Split a single line of text into normalized words.

    Args:
        line: Raw text (a trailing newline is harmless).

    Returns:
        List[str]: Lowercase alphabetic tokens in reading order,
                   duplicates included.
    """
    return [token for token in _SEPARATOR_RE.split(line.lower()) if token]


def iter_numbered_words(lines: Iterable[str], start: int = 1) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(line_number, word)`` pairs for a sequence of lines.

    Args:
        lines: Text lines in file order.
        start: Number assigned to the first line.
    """
    for line_number, line in enumerate(lines, start=start):
        for word in split_words(line):
            yield line_number, word
