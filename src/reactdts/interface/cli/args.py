from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides for the generator.
"""

import argparse
from typing import Any, Dict

from reactdts.domain.constants import VERSION
from reactdts.domain.errors import MissingFlagError

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the reactdts CLI.

    ``--name`` is not marked required here: its absence is reported by the
    application with a dedicated diagnostic and exit status.
    """
    p = argparse.ArgumentParser(
        prog="reactdts",
        description=(
            "Generate a TypeScript ambient module declaration for a React class "
            "component read from standard input."
        ),
    )

    # --- Target module ---
    p.add_argument(
        "--name",
        default=None,
        help="Module name used in the generated 'declare module' block.",
    )

    # --- Input / Output ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Read the component source from a file instead of standard input.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Write the declaration to a file instead of standard output.",
    )

    # --- Generation options ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON file with generation settings.",
    )
    p.add_argument(
        "--prop-types-namespace",
        dest="prop_types_namespaces",
        action="append",
        default=None,
        metavar="NS",
        help="Validator namespace to recognize (repeatable), e.g. 'PropTypes'.",
    )
    p.add_argument(
        "--doc-comments",
        action="store_true",
        help="Copy the component's leading /** */ comment into the declaration.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to a rotating log file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def require_name(args: argparse.Namespace) -> str:
    """
    Return the module name or raise when it was not given.

    Raises:
        MissingFlagError: If ``--name`` is absent or blank.
    """
    name = (args.name or "").strip()
    if not name:
        raise MissingFlagError("name")
    return name


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually set are included, so values loaded from a
    config file survive unless explicitly overridden.
    """
    overrides: Dict[str, Any] = {}

    if args.prop_types_namespaces:
        overrides["prop_types_namespaces"] = list(args.prop_types_namespaces)
    if args.doc_comments:
        overrides["emit_doc_comments"] = True

    return overrides
