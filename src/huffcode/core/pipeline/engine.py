from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the whole coding workflow:
1. Validates configuration and output paths.
2. Checks for overwrite conflicts.
3. Obtains a tree (built from text, loaded from bits, or a reference tree).
4. Derives the code table and persists the serialized tree.
5. Encodes the configured input file.
6. Decodes the configured bit file.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from huffcode.core.analysis.frequency import count_frequencies, widen
from huffcode.core.analysis.stats import compute_stats
from huffcode.core.analysis.tree_builder import build_tree
from huffcode.core.analysis.tree_renderer import render_tree
from huffcode.core.codec.code_table import derive_codes
from huffcode.core.codec.decoder import decode
from huffcode.core.codec.encoder import count_unmapped, encode
from huffcode.core.codec.tree_codec import load_reference_tree, load_tree, serialize
from huffcode.core.pipeline.validator import validate_config
from huffcode.domain.codec_models import Diagnostic, DiagnosticKind
from huffcode.domain.constants import (
    PACKED_FILE_SUFFIX,
    TREE_SOURCE_FILE,
    TREE_SOURCE_STANDARD,
    TREE_SOURCE_TEXT,
)
from huffcode.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from huffcode.domain.tree_models import FrequencyTable, Leaf, Node
from huffcode.infra.bitpack import pack_bits, unpack_bits
from huffcode.infra.fs import (
    check_existing_output_files,
    normalize_path,
    read_binary_file,
    read_text_file,
    safe_mkdir,
    write_binary_file,
    write_text_file,
)

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        overwrite: bool = False,
        dry_run: bool = False,
) -> PipelineResult:
    """
    Execute the full coding pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        overwrite: If True, overwrite existing output files.
        dry_run: If True, compute everything without writing to disk.

    Returns:
        PipelineResult: Object containing status, outputs and summary.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cwd = os.getcwd()
    output_dir = normalize_path(cfg["output_dir"], cwd)

    encode_path = _resolve_input(cfg["encode_input_path"], cwd)
    decode_path = _resolve_input(cfg["decode_input_path"], cwd)

    # -------------------------------------------------------------------------
    # 2) Overwrite Check
    # -------------------------------------------------------------------------
    files_to_check: List[str] = []
    if cfg["save_tree"]:
        files_to_check.append(cfg["tree_file_name"])
    if encode_path:
        files_to_check.append(cfg["encoded_file_name"])
        if cfg["pack_encoded"]:
            files_to_check.append(cfg["packed_file_name"])
    if decode_path:
        files_to_check.append(cfg["decoded_file_name"])

    existing_files = check_existing_output_files(output_dir, files_to_check)

    if existing_files and not overwrite and not dry_run:
        msg = "Existing files detected and overwrite=False. Aborting."
        logger.warning(f"{msg} Files: {existing_files}")
        return create_error_result(
            msg, cfg, output_dir, existing_files,
            summary_extra={"existing_files": list(existing_files)}
        )

    if not dry_run:
        created, err = safe_mkdir(output_dir)
        if not created:
            msg = f"Failed to create output directory {output_dir}: {err}"
            logger.critical(msg)
            return create_error_result(msg, cfg, output_dir)

    # -------------------------------------------------------------------------
    # 3) Tree Acquisition
    # -------------------------------------------------------------------------
    diagnostics: List[Dict[str, Any]] = []

    root, source_used, table = _make_tree(cfg, cwd, diagnostics)
    if root is None:
        msg = "No usable tree could be obtained. Encode and decode steps aborted."
        logger.error(msg)
        return create_error_result(msg, cfg, output_dir, diagnostics=diagnostics)

    codes = derive_codes(root)
    tree_bits = serialize(root)
    stats = compute_stats(root, table)
    tree_lines = render_tree(root, all_bits=cfg["display_all_bits"]) if cfg["display_tree"] else []
    logger.info(f"Using {source_used} tree: {stats.leaf_count} characters, {len(tree_bits)} bits.")

    generated: Dict[str, str] = {}

    try:
        if cfg["save_tree"]:
            tree_out = os.path.join(output_dir, cfg["tree_file_name"])
            if not dry_run:
                write_text_file(tree_out, tree_bits)
            generated["tree"] = tree_out

        # ---------------------------------------------------------------------
        # 4) Encode Step
        # ---------------------------------------------------------------------
        encoded_text = ""
        encode_summary: Dict[str, Any] = {"requested": bool(encode_path), "done": False}

        if encode_path:
            logger.info(f"Attempting to encode {encode_path}")
            source_text = read_text_file(encode_path)
            if source_text is None:
                logger.warning(f"Could not read file to encode: {encode_path}")
            else:
                encoded_text = encode(codes, source_text)
                skipped = count_unmapped(codes, source_text)
                if skipped:
                    logger.debug(f"{skipped} character(s) had no code and were skipped.")

                encoded_out = os.path.join(output_dir, cfg["encoded_file_name"])
                if not dry_run:
                    write_text_file(encoded_out, encoded_text)
                generated["encoded"] = encoded_out

                if cfg["pack_encoded"]:
                    packed_out = os.path.join(output_dir, cfg["packed_file_name"])
                    if not dry_run:
                        write_binary_file(packed_out, pack_bits(encoded_text))
                    generated["packed"] = packed_out

                encode_summary.update({
                    "done": True,
                    "input_characters": len(source_text),
                    "unmapped_characters": skipped,
                    "encoded_bits": len(encoded_text),
                })

        # ---------------------------------------------------------------------
        # 5) Decode Step
        # ---------------------------------------------------------------------
        decoded_text = ""
        decode_summary: Dict[str, Any] = {"requested": bool(decode_path), "done": False}

        if decode_path:
            logger.info(f"Attempting to decode {decode_path}")
            bits = _read_bits(decode_path)
            if bits is None:
                logger.warning(f"Could not read file to decode: {decode_path}")
            else:
                if isinstance(root, Leaf):
                    logger.warning(
                        f"Tree holds only {root.character!r}, whose code is empty. "
                        "The decoded text will be empty."
                    )
                result = decode(root, bits)
                decoded_text = result.text
                diagnostics.extend(_stage(d, "decode") for d in result.diagnostics)

                decoded_out = os.path.join(output_dir, cfg["decoded_file_name"])
                if not dry_run:
                    write_text_file(decoded_out, decoded_text)
                generated["decoded"] = decoded_out

                decode_summary.update({
                    "done": True,
                    "input_bits": len(bits),
                    "decoded_characters": len(decoded_text),
                    "diagnostics": len(result.diagnostics),
                })

    except OSError as e:
        msg = f"Failed to write output: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, output_dir, existing_files, diagnostics)

    # -------------------------------------------------------------------------
    # 6) Finalize
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info("Dry run: no files were written.")

    summary = {
        "output_dir": output_dir,
        "dry_run": dry_run,
        "tree": {
            "requested_source": cfg["tree_source"],
            "source": source_used,
            "leaves": stats.leaf_count,
            "bits": len(tree_bits),
            "saved": bool(cfg["save_tree"]) and not dry_run,
        },
        "encode": encode_summary,
        "decode": decode_summary,
        "generated_files": generated,
        "existing_files_before_run": list(existing_files),
    }

    logger.info("Pipeline completed successfully.")
    return create_success_result(
        source_used, output_dir, tree_bits, codes, stats, tree_lines,
        encoded_text, decoded_text, existing_files, diagnostics, summary
    )

# -----------------------------------------------------------------------------
# TREE ACQUISITION
# -----------------------------------------------------------------------------

def _make_tree(
        cfg: Dict[str, Any],
        cwd: str,
        diagnostics: List[Dict[str, Any]],
) -> Tuple[Optional[Node], str, Optional[FrequencyTable]]:
    """
    Obtain the tree requested by the configuration.

    Text and file sources fall back to the standard tree when their input
    cannot be used.

    Returns:
        Tuple[Optional[Node], str, Optional[FrequencyTable]]: Root (None if
        nothing usable was found), source used, and the frequency table the
        tree was built from (text source only).
    """
    source = cfg["tree_source"]

    if source == TREE_SOURCE_TEXT:
        path = _resolve_input(cfg["tree_input_path"], cwd)
        text = read_text_file(path) if path else None
        if text is None:
            logger.warning("Could not read file for tree generation. Using standard tree.")
            return _fallback_tree(diagnostics)

        table = count_frequencies(text)
        if cfg["fill_gaps"]:
            table = widen(table)

        root = build_tree(table)
        if root is None:
            msg = "Failed to generate tree from file: empty alphabet."
            diagnostics.append(_stage(Diagnostic(DiagnosticKind.EMPTY_ALPHABET, msg), "tree"))
            logger.warning(f"{msg} Using standard tree.")
            return _fallback_tree(diagnostics)
        return root, TREE_SOURCE_TEXT, table

    if source == TREE_SOURCE_FILE:
        path = _resolve_input(cfg["tree_bits_path"], cwd)
        bits = read_text_file(path) if path else None
        if bits is None:
            logger.warning("Could not read serialized tree file. Using standard tree.")
            return _fallback_tree(diagnostics)

        loaded = load_tree(bits.strip(), label=os.path.basename(path))
        diagnostics.extend(_stage(d, "tree") for d in loaded.diagnostics)
        if not loaded.ok:
            logger.warning("Serialized tree file is invalid. Using standard tree.")
            return _fallback_tree(diagnostics)
        return loaded.root, TREE_SOURCE_FILE, None

    loaded = load_reference_tree(source)
    diagnostics.extend(_stage(d, "tree") for d in loaded.diagnostics)
    return loaded.root, source, None


def _fallback_tree(
        diagnostics: List[Dict[str, Any]],
) -> Tuple[Optional[Node], str, Optional[FrequencyTable]]:
    loaded = load_reference_tree(TREE_SOURCE_STANDARD)
    diagnostics.extend(_stage(d, "tree") for d in loaded.diagnostics)
    return loaded.root, TREE_SOURCE_STANDARD, None

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _resolve_input(path: str, cwd: str) -> str:
    """Normalize an optional input path; empty stays empty."""
    return normalize_path(path, cwd) if path else ""


def _read_bits(path: str) -> Optional[str]:
    """Read a bit file, unpacking it when it uses the packed binary layout."""
    if path.lower().endswith(PACKED_FILE_SUFFIX):
        data = read_binary_file(path)
        if data is None:
            return None
        try:
            return unpack_bits(data)
        except ValueError as e:
            logger.warning(f"Invalid packed bit file '{path}': {e}")
            return None

    text = read_text_file(path)
    if text is None:
        return None
    # Editors commonly append a final line break
    return text.rstrip("\r\n")


def _stage(diagnostic: Diagnostic, stage: str) -> Dict[str, Any]:
    payload = diagnostic.to_dict()
    payload["stage"] = stage
    return payload
