from __future__ import annotations

"""
Huffman Tree Construction.

Implements the greedy minimum-frequency merge over a binary heap. Ties are
broken by insertion order: leaves enter in ascending code-point order and
each merged node is sequenced after everything already in the heap, so the
same table always produces the same tree.
"""

import heapq
import logging
from typing import List, Optional, Tuple

from huffcode.domain.tree_models import FrequencyTable, Internal, Leaf, Node

logger = logging.getLogger(__name__)

# (frequency, sequence, node)
_HeapEntry = Tuple[int, int, Node]


def build_tree(table: FrequencyTable) -> Optional[Node]:
    """
    Build a Huffman tree from a frequency table.

    The first node removed from the heap becomes the 'zero' child and the
    second the 'one' child of each merge. A single-entry table yields a
    bare Leaf root.

    Args:
        table: Mapping of character to frequency.

    Returns:
        Optional[Node]: The tree root, or None if the table is empty.
    """
    if not table:
        logger.warning("Cannot build a tree from an empty frequency table.")
        return None

    heap: List[_HeapEntry] = []
    for seq, char in enumerate(sorted(table)):
        heap.append((table[char], seq, Leaf(char, table[char])))
    heapq.heapify(heap)

    seq = len(heap)
    while len(heap) > 1:
        _, _, zero = heapq.heappop(heap)
        _, _, one = heapq.heappop(heap)
        merged = Internal(zero, one)
        heapq.heappush(heap, (merged.frequency, seq, merged))
        seq += 1

    root = heap[0][2]
    logger.debug(f"Tree built from {len(table)} characters (root frequency {root.frequency}).")
    return root
