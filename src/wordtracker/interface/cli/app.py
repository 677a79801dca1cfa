from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration merging (defaults, user config file, CLI overrides) and
pipeline execution, then maps the result to a process exit code.
"""

import logging
import sys
from typing import Any, Dict, List, Optional

from wordtracker.core.pipeline.engine import run_pipeline
from wordtracker.domain.config import get_default_config, load_config
from wordtracker.domain.constants import DEFAULT_REPOSITORY_FILE, USAGE
from wordtracker.domain.pipeline_models import STAGE_RENDER, PipelineResult
from wordtracker.infra.fs import normalize_path
from wordtracker.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from wordtracker.interface.cli import args as cli_args

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 I/O failure, 2 usage error).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args, extras = cli_args.parse_cli(parser, argv)

    if not args.input_path or not args.report_kind:
        print(USAGE, file=sys.stderr)
        return EXIT_USAGE

    # 2. Resolve configuration (defaults < config file < CLI)
    base_conf = get_default_config() if args.use_defaults else load_config()
    conf = _resolve_paths(_merge_config(base_conf, cli_args.args_to_overrides(args)))

    # 3. Logging bootstrap (stderr, optional rotating file)
    configure_logging(LoggingConfig(level=conf["log_level"], log_file=conf["log_file"]))

    if extras:
        logger.warning(f"Ignoring unexpected arguments: {' '.join(extras)}")

    # 4. Pipeline execution phase
    try:
        result = run_pipeline(conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    finally:
        shutdown_logging()

    return _exit_code(result)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge CLI overrides into the base configuration.

    None values never replace a base value.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    out.setdefault("output_path", None)
    return out


def _resolve_paths(conf: Dict[str, Any]) -> Dict[str, Any]:
    """
    Expand ``~`` and environment variables in the paths the run writes to.

    The input path is left untouched because reports print it as given.
    """
    out = dict(conf)
    out["repository_path"] = normalize_path(out.get("repository_path"), DEFAULT_REPOSITORY_FILE)
    for key in ("output_path", "log_file"):
        if out.get(key):
            out[key] = normalize_path(out[key], out[key])
    return out

# -----------------------------------------------------------------------------
# RESULT MAPPING
# -----------------------------------------------------------------------------

def _exit_code(result: PipelineResult) -> int:
    if result.ok:
        return EXIT_OK
    print(f"ERROR: {result.error}", file=sys.stderr)
    if result.failed_stage == STAGE_RENDER:
        return EXIT_USAGE
    return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
