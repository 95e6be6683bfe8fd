from __future__ import annotations

"""
Code Table Derivation.

Maps every leaf character to the path of branch bits leading to it from the
root. Codes only end at leaves, so the table is prefix-free.
"""

from huffcode.domain.tree_models import CodeTable, Internal, Node


def derive_codes(root: Node) -> CodeTable:
    """
    Build the character-to-code mapping of a tree.

    A degenerate single-leaf tree maps its character to the empty code.

    Args:
        root: Tree root.

    Returns:
        CodeTable: One entry per leaf.
    """
    codes: CodeTable = {}
    _collect(root, "", codes)
    return codes


def _collect(node: Node, prefix: str, codes: CodeTable) -> None:
    if isinstance(node, Internal):
        _collect(node.zero, prefix + "0", codes)
        _collect(node.one, prefix + "1", codes)
        return
    codes[node.character] = prefix
