from __future__ import annotations

"""
Report Output Component.

Writes rendered report lines to a UTF-8 text file (created or truncated) or
to standard output.
"""

import sys
from typing import Iterable, Optional, TextIO

from wordtracker.infra.fs import ensure_parent_dir

# -----------------------------------------------------------------------------
# OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_report(lines: Iterable[str], output_path: Optional[str] = None) -> int:
    """
    Emit report lines to ``output_path`` or, when it is None, to stdout.

    Args:
        lines: Report lines without trailing newlines.
        output_path: Destination file; truncated if it already exists.

    Returns:
        int: Number of lines written.

    Raises:
        OSError: If the destination file cannot be created or written.
    """
    if output_path is None:
        return _write_lines(lines, sys.stdout)

    ensure_parent_dir(output_path)
    with open(output_path, "w", encoding="utf-8", newline="\n") as out:
        return _write_lines(lines, out)


def _write_lines(lines: Iterable[str], stream: TextIO) -> int:
    count = 0
    for line in lines:
        stream.write(f"{line}\n")
        count += 1
    stream.flush()
    return count
