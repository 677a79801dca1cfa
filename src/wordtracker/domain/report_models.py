from __future__ import annotations

"""
Report Domain Models.

Defines the supported report shapes and the command-line flags that select
them.
"""

from enum import Enum
from typing import Dict, Union


class ReportKind(Enum):
    """Available report layouts, one record per word in ascending order."""
    FILES = "per-word-files"
    LINES = "per-word-lines"
    OCCURRENCES = "per-word-occurrences"

    @property
    def flag(self) -> str:
        return _KIND_TO_FLAG[self]

    @classmethod
    def parse(cls, value: Union[str, ReportKind]) -> ReportKind:
        """
        Resolve a report kind from an enum member, a short flag or a name.

        Accepts ``-pf``/``pf``, ``--per-word-files``/``per-word-files`` and
        the equivalents for the other kinds.

        Raises:
            ValueError: If the value does not name a known report kind.
        """
        if isinstance(value, ReportKind):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid report type: {value!r}")

        token = value.strip().lstrip("-").lower()
        for kind in cls:
            if token in (kind.value, kind.flag.lstrip("-")):
                return kind
        raise ValueError(f"Invalid report type: {value}")


_KIND_TO_FLAG: Dict[ReportKind, str] = {
    ReportKind.FILES: "-pf",
    ReportKind.LINES: "-pl",
    ReportKind.OCCURRENCES: "-po",
}
