from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Translates raw argparse namespaces into
domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict

from huffcode.domain.constants import TREE_SOURCE_FILE, TREE_SOURCE_TEXT, TREE_SOURCES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the huffcode CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="huffcode",
        description="Build Huffman trees, encode text to bits and decode bits to text.",
    )

    # --- Tree Source ---
    p.add_argument(
        "-t", "--tree-source",
        dest="tree_source",
        choices=TREE_SOURCES,
        default=None,
        help="Where the tree comes from: a text sample, a reference tree or a serialized tree file.",
    )
    p.add_argument(
        "--tree-input",
        dest="tree_input_path",
        default=None,
        help="Text file whose character frequencies build the tree (implies --tree-source text).",
    )
    p.add_argument(
        "--tree-bits",
        dest="tree_bits_path",
        default=None,
        help="Serialized tree file to load (implies --tree-source file).",
    )
    p.add_argument(
        "--no-fill-gaps",
        action="store_true",
        help="Only encode characters found in the tree source text.",
    )

    # --- Inputs ---
    p.add_argument(
        "-e", "--encode",
        dest="encode_input_path",
        default=None,
        help="Text file to encode.",
    )
    p.add_argument(
        "-d", "--decode",
        dest="decode_input_path",
        default=None,
        help="Bit file to decode ('.bin' files are read as packed bits).",
    )

    # --- Outputs ---
    p.add_argument(
        "-o", "--output-dir",
        dest="output_dir",
        default=None,
        help="Directory receiving the generated files.",
    )
    p.add_argument(
        "--no-save-tree",
        action="store_true",
        help="Do not write the serialized tree.",
    )
    p.add_argument(
        "--pack",
        action="store_true",
        help="Also write the encoded bits as a packed binary file.",
    )

    # --- Display ---
    p.add_argument(
        "--display-tree",
        action="store_true",
        help="Print the tree diagram.",
    )
    p.add_argument(
        "--branch-only",
        action="store_true",
        help="In the tree diagram, show each branch bit only once.",
    )
    p.add_argument(
        "--show-codes",
        action="store_true",
        help="Print the character code table.",
    )
    p.add_argument(
        "--display-limit",
        dest="display_limit",
        type=int,
        default=None,
        help="Maximum text length printed to the console.",
    )

    # --- Runtime Constraints and Safety ---
    p.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite existing output files.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Run every step without writing files.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved session configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Store the effective configuration as the last session.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help="Also write logs to a rotating file (default location if no path is given).",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["tree_input_path"] = args.tree_input_path
    overrides["tree_bits_path"] = args.tree_bits_path
    overrides["encode_input_path"] = args.encode_input_path
    overrides["decode_input_path"] = args.decode_input_path
    overrides["output_dir"] = args.output_dir
    overrides["display_limit"] = args.display_limit

    # Tree source inference from the input flags
    if args.tree_source:
        overrides["tree_source"] = args.tree_source
    elif args.tree_input_path:
        overrides["tree_source"] = TREE_SOURCE_TEXT
    elif args.tree_bits_path:
        overrides["tree_source"] = TREE_SOURCE_FILE

    if args.no_fill_gaps:
        overrides["fill_gaps"] = False
    if args.no_save_tree:
        overrides["save_tree"] = False
    if args.pack:
        overrides["pack_encoded"] = True

    if args.display_tree:
        overrides["display_tree"] = True
    if args.branch_only:
        overrides["display_all_bits"] = False
    if args.show_codes:
        overrides["show_codes"] = True

    return overrides
