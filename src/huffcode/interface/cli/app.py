from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and merging
of configuration sources (defaults, persistent storage, and CLI overrides),
pipeline execution, and result rendering.
"""

import json
import logging
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from huffcode.core.analysis.tree_renderer import format_char
from huffcode.core.pipeline.engine import run_pipeline
from huffcode.core.pipeline.validator import validate_config
from huffcode.domain.config import get_default_config, load_config, save_config
from huffcode.domain.pipeline_models import PipelineResult
from huffcode.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
)
from huffcode.interface.cli import args as cli_args

logger = logging.getLogger(__name__)

_INPUT_KEYS = ("tree_input_path", "tree_bits_path", "encode_input_path", "decode_input_path")

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    log_file = None
    if args.log_file is not None:
        log_file = args.log_file or get_default_log_path()
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Map and merge command-line overrides
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)

    # 5. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 6. Pre-flight input verification
    for key in _INPUT_KEYS:
        path = overrides.get(key)
        if path and not os.path.exists(os.path.expanduser(path)):
            msg = f"Input path does not exist: {path}"
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return 2

    # 7. Pipeline execution phase
    try:
        result = run_pipeline(
            clean_conf,
            overwrite=bool(args.overwrite),
            dry_run=bool(args.dry_run),
        )
    except KeyboardInterrupt:
        msg = "Operation interrupted by user."
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130

    # 8. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, clean_conf)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only keys already known to the base configuration are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult, cfg: Dict[str, Any]) -> None:
    """
    Format and print the execution result to the standard output.

    Args:
        result: The pipeline result to render.
        cfg: Effective configuration (display options).
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    summary = result.summary
    limit = cfg["display_limit"]

    print("=" * 15)
    print("GENERATING TREE")
    print("=" * 15)
    print(f"Tree source: {result.tree_source}")

    for line in result.tree_lines:
        print(line)

    if cfg["show_codes"]:
        for char in sorted(result.codes):
            print(f"  {format_char(char)}: {result.codes[char]}")

    stats = result.stats
    if stats is not None:
        print(f"Leaves: {stats.leaf_count}  Max code length: {stats.max_depth}")
        if stats.unique_characters:
            print(f"Total Unique Characters: {stats.unique_characters}")
            print(f"Total Characters: {stats.total_characters}")
            print(f"Average bits per character: {stats.weighted_code_length:.3f}")

    tree_path = summary.get("generated_files", {}).get("tree")
    if tree_path:
        print(f"Tree bit representation written to {tree_path}")

    if summary.get("encode", {}).get("requested"):
        print()
        print("=" * 13)
        print("ENCODING FILE")
        print("=" * 13)
        _print_step(result.encoded_text, "Encoded", summary.get("generated_files", {}).get("encoded"), limit)

    if summary.get("decode", {}).get("requested"):
        print()
        print("=" * 13)
        print("DECODING FILE")
        print("=" * 13)
        _print_step(result.decoded_text, "Decoded", summary.get("generated_files", {}).get("decoded"), limit)

    for diag in result.diagnostics:
        print(f"Warning ({diag['stage']}): {diag['message']}", file=sys.stderr)

    if summary.get("dry_run"):
        print("\nDry run: no files were written.")


def _print_step(text: str, label: str, path: Optional[str], limit: int) -> None:
    if path is None:
        print(f"{label} step skipped: input could not be read.")
        return

    print(f"{label} Text Length: {len(text)}")
    if len(text) < limit:
        print(f"{label} text:")
        print(text)
    else:
        print(f"{label} text too long to display, see file.")
    print(f"{label} text written to {path}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
