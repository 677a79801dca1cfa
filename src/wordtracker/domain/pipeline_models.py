from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object and factory functions used to communicate a
tracking run's outcome from the pipeline engine to the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Stages at which a run can fail
STAGE_INGEST = "ingest"
STAGE_RENDER = "render"
STAGE_WRITE = "write"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete tracking run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        failed_stage: Stage that failed (ingest, render or write), empty on success.
        input_path: File that was indexed.
        repository_path: Location of the index snapshot.
        report_kind: Requested report, as given.
        output_path: Report destination file, empty for stdout.
        index_saved: Whether the snapshot was written successfully.
        tokens_processed: Words read from the input file.
        distinct_words: Size of the index after ingestion.
        report_lines: Rendered report content.
        summary: Additional execution metadata.
    """
    ok: bool
    error: str

    input_path: str
    repository_path: str
    report_kind: str
    output_path: str = ""

    failed_stage: str = ""
    index_saved: bool = False
    tokens_processed: int = 0
    distinct_words: int = 0

    report_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        stage: str,
        cfg: Dict[str, Any],
        *,
        index_saved: bool = False,
        tokens_processed: int = 0,
        distinct_words: int = 0,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        stage: Stage identifier where the run stopped.
        cfg: The configuration used during the failed run.
        index_saved: Whether the snapshot had already been written.
        tokens_processed: Words ingested before the failure.
        distinct_words: Index size at the time of failure.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        failed_stage=stage,
        input_path=cfg.get("input_path") or "",
        repository_path=cfg.get("repository_path") or "",
        report_kind=str(cfg.get("report_kind") or ""),
        output_path=cfg.get("output_path") or "",
        index_saved=index_saved,
        tokens_processed=tokens_processed,
        distinct_words=distinct_words,
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        *,
        index_saved: bool,
        tokens_processed: int,
        distinct_words: int,
        report_lines: List[str],
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        cfg: Final configuration used during execution.
        index_saved: Whether the snapshot was written.
        tokens_processed: Words read from the input.
        distinct_words: Index size after ingestion.
        report_lines: Rendered report content.
        summary_extra: Final execution metrics.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        input_path=cfg.get("input_path") or "",
        repository_path=cfg.get("repository_path") or "",
        report_kind=str(cfg.get("report_kind") or ""),
        output_path=cfg.get("output_path") or "",
        index_saved=index_saved,
        tokens_processed=tokens_processed,
        distinct_words=distinct_words,
        report_lines=report_lines,
        summary=summary_extra or {},
    )
