from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample input files and configuration dictionaries.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def cat_file(tmp_path: Path) -> Path:
    """
    Write the two-line sample used by the end-to-end scenarios.

    Returns:
        Path: Location of the input file.
    """
    path = tmp_path / "cats.txt"
    path.write_text("The cat sat.\nThe Cat ran.\n", encoding="utf-8")
    return path


@pytest.fixture
def pipeline_config(tmp_path: Path, cat_file: Path) -> Dict[str, Any]:
    """
    Return a complete pipeline configuration pointing at temporary paths.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        "input_path": str(cat_file),
        "report_kind": "-po",
        "output_path": str(tmp_path / "report.txt"),
        "repository_path": str(tmp_path / "repository.ser"),
        "log_level": "WARNING",
        "log_file": None,
    }
