from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging,
reading the component source, generation and output. Parse errors are not
handled here; they propagate to the global exception handler.
"""

import sys
from typing import Any, Dict, List, Optional

from reactdts.core.generator import generate
from reactdts.core.validator import validate_config
from reactdts.domain.config import get_default_config, load_config
from reactdts.domain.errors import ConfigError, MissingFlagError
from reactdts.infra.fs import read_source, read_stdin, write_text
from reactdts.infra.logging import LoggingConfig, configure_logging, get_logger
from reactdts.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 missing --name, 2 bad config or input).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr only; stdout carries the declaration)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Mandatory module name
    try:
        name = cli_args.require_name(args)
    except MissingFlagError as e:
        print(str(e), file=sys.stderr)
        return 1

    # 4. Configuration hierarchy: defaults < config file < CLI flags
    try:
        base_conf = load_config(args.config_path) if args.config_path else get_default_config()
    except ConfigError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 5. Source acquisition
    if args.input_path:
        try:
            source = read_source(args.input_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read '{args.input_path}': {e}")
            print(f"ERROR: Cannot read '{args.input_path}': {e}", file=sys.stderr)
            return 2
    else:
        source = read_stdin()

    logger.debug(f"Generating declaration for module '{name}' ({len(source)} characters).")

    # 6. Generation (ParseError propagates)
    declaration = generate(name, source, clean_conf)

    # 7. Output
    if args.output_path:
        write_text(args.output_path, declaration)
        logger.info(f"Declaration written to {args.output_path}")
    else:
        sys.stdout.write(declaration)
        sys.stdout.flush()

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    sys.exit(main())
