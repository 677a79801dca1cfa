from __future__ import annotations

"""
Report Emitter.

Renders the word index into text lines, one record per word in ascending
word order. Three layouts are supported: files per word, files with line
numbers, and occurrence count with files and line numbers.
"""

from typing import Iterable, List, Union

from wordtracker.core.structures.ordered_tree import OrderedTree
from wordtracker.domain.report_models import ReportKind
from wordtracker.domain.word_models import WordRecord

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render(kind: Union[ReportKind, str], index: OrderedTree[WordRecord]) -> List[str]:
    """
    Render ``index`` in the layout selected by ``kind``.

    Args:
        kind: A ReportKind, or a flag/name such as ``-pf`` or ``per-word-lines``.
        index: The word index to walk in order.

    Returns:
        List[str]: Report lines without trailing newlines.

    Raises:
        ValueError: If ``kind`` does not name a known report.
    """
    report_kind = ReportKind.parse(kind)
    lines: List[str] = []
    for record in index.inorder():
        lines.extend(render_record(report_kind, record))
    return lines


def render_record(kind: ReportKind, record: WordRecord) -> List[str]:
    """Render the lines contributed by a single word."""
    if kind is ReportKind.FILES:
        return [f"Word: {record.word}, Files: {', '.join(record.files)}"]

    if kind is ReportKind.LINES:
        return [f"Word: {record.word}", *_file_lines(record)]

    if kind is ReportKind.OCCURRENCES:
        return [f"Word: {record.word}, Occurrences: {record.occurrences}", *_file_lines(record)]

    raise ValueError(f"Invalid report type: {kind}")


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _file_lines(record: WordRecord) -> Iterable[str]:
    for filename in record.files:
        numbers = ", ".join(str(n) for n in record.lines_for(filename))
        yield f"  File: {filename}, Lines: [{numbers}]"
