from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides.

The input file and the report flag are positional: the first two tokens of
the command line, taken verbatim. The report flag is not validated here, so
an unknown one such as ``xyz`` or ``-fo`` still lets the file be indexed and
is only rejected when the report is rendered.
"""

import argparse
import sys
from typing import Any, Dict, List, Optional, Tuple

from wordtracker.domain.constants import APP_NAME, USAGE
from wordtracker.domain.report_models import ReportKind

_HELP_FLAGS = ("-h", "--help")

_REPORT_HELP = "\n".join(
    ["report flags (second argument):"]
    + [f"  {kind.flag}, --{kind.value}" for kind in ReportKind]
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the WordTracker options.

    The two leading positionals are split off by ``parse_cli`` before the
    parser runs; they only appear here in the usage line and epilog.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        usage=USAGE.replace("Usage: ", "", 1),
        description="Track which files and lines every word appears on, and report it.",
        epilog=_REPORT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    # --- Output ---
    p.add_argument(
        "-f", "--file",
        dest="output_path",
        default=None,
        help="Write the report to this file instead of standard output.",
    )

    # --- Persistence and Diagnostics ---
    p.add_argument(
        "--repository",
        dest="repository_path",
        default=None,
        help="Index snapshot file (default: repository.ser).",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the user config file.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Elevate logging verbosity to INFO.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p


def parse_cli(
        parser: argparse.ArgumentParser,
        argv: Optional[List[str]] = None,
) -> Tuple[argparse.Namespace, List[str]]:
    """
    Split off the input path and report flag, then parse the options.

    ``wordtracker cats.txt -fo`` yields ``report_kind == "-fo"``; the flag is
    never reinterpreted as an option. A missing positional is left as None.

    Returns:
        Tuple[argparse.Namespace, List[str]]: The namespace and any leftover
                                              arguments that were not consumed.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)

    input_path: Optional[str] = None
    report_kind: Optional[str] = None
    if tokens and not tokens[0].startswith("-"):
        input_path = tokens.pop(0)
        if tokens and tokens[0] not in _HELP_FLAGS:
            report_kind = tokens.pop(0)

    args, extras = parser.parse_known_args(tokens)
    args.input_path = input_path
    args.report_kind = report_kind
    return args, extras

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["report_kind"] = args.report_kind
    overrides["output_path"] = args.output_path
    overrides["repository_path"] = args.repository_path
    overrides["log_file"] = args.log_file

    if args.debug:
        overrides["log_level"] = "DEBUG"
    elif args.verbose:
        overrides["log_level"] = "INFO"

    return overrides
