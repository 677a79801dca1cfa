from __future__ import annotations

"""
Resilient Input Reading Component.

Streams text files line by line for ingestion. Undecodable byte sequences
are replaced rather than aborting the read, so a stray binary fragment in a
text corpus does not stop indexing.
"""

from typing import Iterator

# -----------------------------------------------------------------------------
# STREAM READING OPERATIONS
# -----------------------------------------------------------------------------

def stream_file_lines(file_path: str) -> Iterator[str]:
    """
    Generate a line-by-line stream of file content.

    Line terminators are stripped.

    Args:
        file_path: Path to the input file.

    Yields:
        str: Lines from the file, in order.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line.rstrip("\r\n")
