from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates a complete tracking run:
1. Loads the persisted word index (or starts empty).
2. Ingests the input file into the index.
3. Saves the updated index.
4. Renders the requested report.
5. Writes the report to a file or to stdout.
"""

import logging
from typing import Any, Dict, List, Optional

from wordtracker.core.pipeline.components.writer import write_report
from wordtracker.core.reporting.emitter import render
from wordtracker.core.services.indexer import Indexer
from wordtracker.core.services.repository import IndexRepository
from wordtracker.domain.pipeline_models import (
    STAGE_INGEST,
    STAGE_RENDER,
    STAGE_WRITE,
    PipelineResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Dict[str, Any],
        *,
        repository: Optional[IndexRepository] = None,
) -> PipelineResult:
    """
    Execute a full ingest-save-report run.

    Args:
        config: Effective configuration. Uses ``input_path``, ``report_kind``,
                ``output_path`` (None for stdout) and ``repository_path``.
        repository: Optional repository override; built from
                    ``repository_path`` when omitted.

    Returns:
        PipelineResult: Object containing status, metrics, and report lines.
    """
    logger.info("Pipeline execution started.")

    cfg = dict(config)
    repo = repository or IndexRepository(cfg.get("repository_path"))
    cfg["repository_path"] = repo.path

    # -------------------------------------------------------------------------
    # 1) Load
    # -------------------------------------------------------------------------
    index = repo.load()
    words_before = index.size()
    indexer = Indexer(index)

    # -------------------------------------------------------------------------
    # 2) Ingest
    # -------------------------------------------------------------------------
    input_path = cfg.get("input_path") or ""
    try:
        tokens = indexer.ingest_file(input_path)
    except OSError as e:
        msg = f"Error processing file: {e}"
        logger.error(msg)
        return create_error_result(msg, STAGE_INGEST, cfg, distinct_words=words_before)

    # -------------------------------------------------------------------------
    # 3) Save
    # -------------------------------------------------------------------------
    saved = repo.save(index)
    if not saved:
        logger.warning("Index snapshot was not saved; this run's words will not persist.")

    summary = {
        "words_before": words_before,
        "new_words": index.size() - words_before,
    }

    # -------------------------------------------------------------------------
    # 4) Render
    # -------------------------------------------------------------------------
    try:
        lines: List[str] = render(cfg.get("report_kind") or "", index)
    except ValueError as e:
        logger.error(str(e))
        return create_error_result(
            str(e), STAGE_RENDER, cfg,
            index_saved=saved,
            tokens_processed=tokens,
            distinct_words=index.size(),
            summary_extra=summary,
        )

    # -------------------------------------------------------------------------
    # 5) Write
    # -------------------------------------------------------------------------
    output_path = cfg.get("output_path")
    try:
        write_report(lines, output_path)
    except OSError as e:
        msg = f"Error creating output file: {e}"
        logger.error(msg)
        return create_error_result(
            msg, STAGE_WRITE, cfg,
            index_saved=saved,
            tokens_processed=tokens,
            distinct_words=index.size(),
            summary_extra=summary,
        )

    logger.info(f"Pipeline finished: {tokens} tokens, {index.size()} distinct words.")
    return create_success_result(
        cfg,
        index_saved=saved,
        tokens_processed=tokens,
        distinct_words=index.size(),
        report_lines=lines,
        summary_extra=summary,
    )
