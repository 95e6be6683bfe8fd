from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate
execution outcomes between the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from huffcode.domain.codec_models import TreeStats
from huffcode.domain.tree_models import CodeTable

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete pipeline execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        tree_source: Tree source actually used, after any fallback.
        output_dir: Directory receiving the generated files.
        tree_bits: Serialized form of the tree in use.
        codes: Character-to-code table of the tree.
        stats: Tree and frequency metrics.
        tree_lines: Tree diagram lines (empty unless display was requested).
        encoded_text: Bits produced by the encode step ("" if skipped).
        decoded_text: Text produced by the decode step ("" if skipped).
        existing_files: Output paths that already existed before the run.
        diagnostics: Serialized non-fatal anomalies reported during the run.
        summary: Technical execution summary and statistics.
    """
    ok: bool
    error: str

    tree_source: str
    output_dir: str

    tree_bits: str = ""
    codes: CodeTable = field(default_factory=dict)
    stats: Optional[TreeStats] = None
    tree_lines: List[str] = field(default_factory=list)

    encoded_text: str = ""
    decoded_text: str = ""

    existing_files: List[str] = field(default_factory=list)
    diagnostics: List[Dict[str, Any]] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        output_dir: str = "",
        existing_files: Optional[List[str]] = None,
        diagnostics: Optional[List[Dict[str, Any]]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        output_dir: Calculated output directory.
        existing_files: Files that caused collision aborts.
        diagnostics: Anomalies collected before the failure.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        tree_source=cfg.get("tree_source", ""),
        output_dir=output_dir or cfg.get("output_dir", ""),
        existing_files=existing_files or [],
        diagnostics=diagnostics or [],
        summary=summary_extra or {},
    )


def create_success_result(
        tree_source: str,
        output_dir: str,
        tree_bits: str,
        codes: CodeTable,
        stats: TreeStats,
        tree_lines: Optional[List[str]] = None,
        encoded_text: str = "",
        decoded_text: str = "",
        existing_files: Optional[List[str]] = None,
        diagnostics: Optional[List[Dict[str, Any]]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        tree_source: Tree source actually used.
        output_dir: Directory receiving the generated files.
        tree_bits: Serialized tree.
        codes: Code table of the tree.
        stats: Tree metrics.
        tree_lines: Rendered tree diagram.
        encoded_text: Encode step output.
        decoded_text: Decode step output.
        existing_files: Collisions that were overwritten.
        diagnostics: Non-fatal anomalies.
        summary_extra: Execution summary.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        tree_source=tree_source,
        output_dir=output_dir,
        tree_bits=tree_bits,
        codes=codes,
        stats=stats,
        tree_lines=tree_lines or [],
        encoded_text=encoded_text,
        decoded_text=decoded_text,
        existing_files=existing_files or [],
        diagnostics=diagnostics or [],
        summary=summary_extra or {},
    )
