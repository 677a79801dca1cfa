from __future__ import annotations

"""
Word Ingestion Service.

Turns raw text into index entries: every word of every line is resolved to
its WordRecord in the ordered index (created on first sighting) and the
current (file, line) location is recorded on it.
"""

import logging
from typing import Iterable, Optional

from wordtracker.core.pipeline.components.reader import stream_file_lines
from wordtracker.core.processing.tokenizer import iter_numbered_words
from wordtracker.core.structures.ordered_tree import OrderedTree
from wordtracker.domain.word_models import WordRecord

logger = logging.getLogger(__name__)

WordIndex = OrderedTree[WordRecord]


class Indexer:
    """
    Ingestion loop over a shared word index.

    The index is mutated in place and never persisted here; saving is the
    caller's step once ingestion is complete.
    """

    def __init__(self, index: Optional[WordIndex] = None) -> None:
        self.index: WordIndex = index if index is not None else OrderedTree()

    def ingest(self, filename: str, lines: Iterable[str]) -> int:
        """
        Record every word of ``lines`` under ``filename``.

        Line numbers are 1-based. Repeating a word on a line, or ingesting
        the same content again, does not add duplicate locations.

        Args:
            filename: Identifier stored with each location.
            lines: Text lines in file order.

        Returns:
            int: Number of tokens processed.
        """
        tokens = 0
        for line_number, word in iter_numbered_words(lines):
            record = self.index.get_or_insert(WordRecord(word))
            record.add_location(filename, line_number)
            tokens += 1

        logger.debug(f"Indexed {tokens} tokens from {filename}")
        return tokens

    def ingest_file(self, path: str) -> int:
        """
        Stream ``path`` from disk and ingest it under that name.

        Raises:
            OSError: If the file cannot be read.
        """
        logger.info(f"Indexing input file: {path}")
        tokens = self.ingest(path, stream_file_lines(path))
        logger.info(f"Index now holds {self.index.size()} distinct words.")
        return tokens
