from __future__ import annotations

"""
Tree Renderer.

Converts a Huffman tree into a textual diagram with the root at the left
and one leaf per line. Each branch is shown as its bit ('0' or '1').
"""

from typing import List

from huffcode.domain.tree_models import Internal, Node

_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Node, all_bits: bool = True) -> List[str]:
    """
    Render the tree as a list of lines, in left-to-right leaf order.

    With all_bits enabled every line carries the full code of its leaf.
    Otherwise bits shared with the previous line are blanked out, so each
    branch bit appears once and the branching structure stands out.

    Args:
        root: Tree to render.
        all_bits: Show every parent bit before each leaf.

    Returns:
        List[str]: Diagram lines.
    """
    lines: List[str] = []
    _render_node(root, "", "", all_bits, lines)
    return lines


def format_char(char: str) -> str:
    """Quote a character for display, escaping line breaks."""
    return f"'{_ESCAPES.get(char, char)}'"

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_node(node: Node, head: str, prefix: str, all_bits: bool, lines: List[str]) -> None:
    """
    Args:
        head: Text already written on the current line.
        prefix: Indentation for subsequent lines at this depth.
    """
    if not isinstance(node, Internal):
        lines.append(f"{head}{format_char(node.character)}")
        return

    zero_pad = "0 " if all_bits else "  "
    one_pad = "1 " if all_bits else "  "

    _render_node(node.zero, head + "0 ", prefix + zero_pad, all_bits, lines)
    _render_node(node.one, prefix + "1 ", prefix + one_pad, all_bits, lines)
