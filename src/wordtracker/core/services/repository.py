from __future__ import annotations

"""
Index Persistence Service.

Stores the complete word index as a single pickle snapshot so that a new run
augments the index built by earlier runs. Loading is fail-safe: a missing,
unreadable or corrupt snapshot is logged and replaced by an empty index.

Snapshots are only guaranteed to load in the same program version that wrote
them; no schema versioning is attempted.
"""

import logging
import os
import pickle
from typing import Optional

from wordtracker.core.structures.ordered_tree import OrderedTree
from wordtracker.domain.constants import DEFAULT_REPOSITORY_FILE
from wordtracker.domain.word_models import WordRecord
from wordtracker.infra.fs import ensure_parent_dir

logger = logging.getLogger(__name__)


class IndexRepository:
    """
    Whole-index load/save capability backed by a file on disk.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path or DEFAULT_REPOSITORY_FILE

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def load(self) -> OrderedTree[WordRecord]:
        """
        Read the persisted index.

        Returns:
            OrderedTree[WordRecord]: The stored index, or an empty one when
                                     no usable snapshot exists.
        """
        if not self.exists():
            logger.debug(f"IndexRepository: No snapshot at {self.path}. Starting fresh.")
            return OrderedTree()

        try:
            with open(self.path, "rb") as f:
                data = pickle.load(f)
        except Exception as e:
            logger.warning(f"IndexRepository: Error loading repository: {e}. Starting fresh.")
            return OrderedTree()

        if not isinstance(data, OrderedTree):
            logger.warning(
                f"IndexRepository: Unexpected snapshot type {type(data).__name__}. Starting fresh."
            )
            return OrderedTree()

        logger.debug(f"IndexRepository: Loaded {data.size()} words from {self.path}")
        return data

    def save(self, index: OrderedTree[WordRecord]) -> bool:
        """
        Write ``index`` as one snapshot, replacing any previous one.

        The snapshot is written to a sibling temp file and moved into place,
        so a failed write leaves the previous snapshot intact.

        Returns:
            bool: True on success, False if the write failed (logged).
        """
        tmp_path = f"{self.path}.tmp"
        try:
            ensure_parent_dir(self.path)
            with open(tmp_path, "wb") as f:
                pickle.dump(index, f, protocol=pickle.HIGHEST_PROTOCOL)
            os.replace(tmp_path, self.path)
        except (OSError, pickle.PicklingError) as e:
            logger.error(f"IndexRepository: Error saving repository: {e}")
            _discard(tmp_path)
            return False

        logger.debug(f"IndexRepository: Saved {index.size()} words to {self.path}")
        return True


def _discard(path: str) -> None:
    try:
        if os.path.exists(path):
            os.remove(path)
    except OSError:
        pass
