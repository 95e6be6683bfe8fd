from __future__ import annotations

"""
Tree Statistics.

Computes structural metrics of a tree and, when the source frequency table
is available, the figures describing the analyzed text.
"""

from typing import Optional

from huffcode.core.codec.code_table import derive_codes
from huffcode.domain.codec_models import TreeStats
from huffcode.domain.tree_models import FrequencyTable, Node


def compute_stats(root: Node, table: Optional[FrequencyTable] = None) -> TreeStats:
    """
    Summarize a tree.

    Args:
        root: Tree root.
        table: Frequency table the tree was built from, if any.

    Returns:
        TreeStats: Computed metrics.
    """
    codes = derive_codes(root)
    max_depth = max((len(code) for code in codes.values()), default=0)

    if not table:
        return TreeStats(leaf_count=len(codes), max_depth=max_depth)

    total = sum(freq for freq in table.values() if freq > 0)
    weighted_bits = sum(freq * len(codes.get(char, "")) for char, freq in table.items() if freq > 0)

    return TreeStats(
        leaf_count=len(codes),
        max_depth=max_depth,
        unique_characters=len(table),
        total_characters=total,
        weighted_code_length=(weighted_bits / total) if total else 0.0,
    )
