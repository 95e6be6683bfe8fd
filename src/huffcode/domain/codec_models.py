from __future__ import annotations

"""
Codec Domain Data Models.

Defines the Data Transfer Objects returned by the tree loading and decoding
seams. Non-fatal anomalies travel alongside the produced value as
Diagnostic records instead of being raised.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from huffcode.domain.tree_models import Node

# -----------------------------------------------------------------------------
# DIAGNOSTICS
# -----------------------------------------------------------------------------

class DiagnosticKind(str, Enum):
    """Classification of anomalies reported by the coding layer."""
    EMPTY_ALPHABET = "empty_alphabet"
    EXHAUSTED_BITS = "exhausted_bits"
    MALFORMED_BIT = "malformed_bit"
    MALFORMED_TREE = "malformed_tree"
    TRAILING_BITS = "trailing_bits"


@dataclass(frozen=True)
class Diagnostic:
    """
    Describes a single anomaly detected while reading bits.

    Attributes:
        kind: Anomaly classification.
        message: Human readable description.
        position: Cursor position where the anomaly was detected, if any.
    """
    kind: DiagnosticKind
    message: str
    position: Optional[int] = None

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "message": self.message, "position": self.position}

# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of loading a tree from its bit representation.

    Attributes:
        root: Loaded tree, or None if the bits did not describe a full tree.
        diagnostics: Anomalies found while loading.
    """
    root: Optional[Node]
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.root is not None


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of decoding a bit string.

    Attributes:
        text: Characters decoded before any truncation.
        diagnostics: Anomalies found while decoding.
    """
    text: str
    diagnostics: List[Diagnostic] = field(default_factory=list)


@dataclass(frozen=True)
class TreeStats:
    """
    Structural and frequency metrics of a tree.

    Attributes:
        leaf_count: Number of leaves (encodable characters).
        max_depth: Longest code length in bits.
        unique_characters: Entries in the source frequency table.
        total_characters: Sum of the positive counts in the frequency table.
        weighted_code_length: Average bits per source character.
    """
    leaf_count: int
    max_depth: int
    unique_characters: int = 0
    total_characters: int = 0
    weighted_code_length: float = 0.0
