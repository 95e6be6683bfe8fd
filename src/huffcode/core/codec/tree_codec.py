from __future__ import annotations

"""
Tree Bit Representation Codec.

Serializes a tree into its preorder bit form and reads it back:

    tree  := '0' tree tree     (internal node)
           | '1' bits8         (leaf, 8-bit character code, MSB first)

The format is self-delimiting. load_tree() is the caller-facing seam: it
never raises and reports anomalies as diagnostics.
"""

import logging
from typing import List, Set

from huffcode.core.codec.cursor import BitCursor
from huffcode.domain.codec_models import Diagnostic, DiagnosticKind, LoadResult
from huffcode.domain.constants import (
    CHAR_BITS,
    MAX_CHAR_CODE,
    STANDARD_TREE_BITS,
    TEST_TREE_BITS,
    TREE_SOURCE_STANDARD,
    TREE_SOURCE_TEST,
)
from huffcode.domain.errors import ExhaustedBitsError, MalformedBitError, MalformedTreeError
from huffcode.domain.tree_models import Internal, Leaf, Node

logger = logging.getLogger(__name__)

_REFERENCE_TREES = {
    TREE_SOURCE_STANDARD: STANDARD_TREE_BITS,
    TREE_SOURCE_TEST: TEST_TREE_BITS,
}

# -----------------------------------------------------------------------------
# SERIALIZATION
# -----------------------------------------------------------------------------

def serialize(root: Node) -> str:
    """
    Convert a tree into its preorder bit representation.

    Args:
        root: Tree (or subtree) to serialize.

    Returns:
        str: String over {'0', '1'}.
    """
    parts: List[str] = []
    _write_node(root, parts)
    return "".join(parts)


def _write_node(node: Node, parts: List[str]) -> None:
    if isinstance(node, Internal):
        parts.append("0")
        _write_node(node.zero, parts)
        _write_node(node.one, parts)
        return

    parts.append("1")
    parts.append(format(ord(node.character), f"0{CHAR_BITS}b"))

# -----------------------------------------------------------------------------
# DESERIALIZATION
# -----------------------------------------------------------------------------

def deserialize(cursor: BitCursor) -> Node:
    """
    Read exactly one tree from the cursor.

    Leaves are created with frequency 0 since frequencies are not part of
    the representation. A tree of distinct 8-bit characters has at most
    256 leaves, so no leaf sits deeper than MAX_CHAR_CODE. Deeper nesting
    and repeated characters are rejected.

    Args:
        cursor: Bit source positioned at the start of a tree.

    Returns:
        Node: The loaded tree root.

    Raises:
        ExhaustedBitsError: If the bits end before the tree is complete.
        MalformedBitError: If a non-bit character is found.
        MalformedTreeError: If the tree is too deep or repeats a character.
    """
    return _read_node(cursor, 0, set())


def _read_node(cursor: BitCursor, depth: int, seen: Set[str]) -> Node:
    pos = cursor.position
    if _read_bit(cursor) == "0":
        # Children of this node would sit deeper than any leaf can
        if depth >= MAX_CHAR_CODE:
            raise MalformedTreeError(pos, f"nesting exceeds {MAX_CHAR_CODE} levels")
        zero = _read_node(cursor, depth + 1, seen)
        one = _read_node(cursor, depth + 1, seen)
        return Internal(zero, one)

    code = 0
    for _ in range(CHAR_BITS):
        code = (code << 1) | int(_read_bit(cursor))

    char = chr(code)
    if char in seen:
        raise MalformedTreeError(pos, f"character {char!r} appears in more than one leaf")
    seen.add(char)
    return Leaf(char, 0)


def _read_bit(cursor: BitCursor) -> str:
    pos = cursor.position
    bit = cursor.take()
    if bit not in ("0", "1"):
        raise MalformedBitError(pos, bit)
    return bit

# -----------------------------------------------------------------------------
# LOADING API
# -----------------------------------------------------------------------------

def load_tree(bits: str, label: str = "tree") -> LoadResult:
    """
    Load a tree from a bit string, converting failures into diagnostics.

    Leftover bits after a complete tree are reported but do not invalidate
    the loaded tree.

    Args:
        bits: Serialized tree.
        label: Name used in log and diagnostic messages.

    Returns:
        LoadResult: Loaded root (or None) with any diagnostics.
    """
    cursor = BitCursor(bits)

    try:
        root = deserialize(cursor)
    except ExhaustedBitsError as e:
        msg = f"Could not read {label}: ran out of bits at position {e.position}."
        logger.warning(msg)
        return LoadResult(None, [Diagnostic(DiagnosticKind.EXHAUSTED_BITS, msg, e.position)])
    except MalformedBitError as e:
        msg = f"Could not read {label}: malformed bit {e.value!r} at position {e.position}."
        logger.warning(msg)
        return LoadResult(None, [Diagnostic(DiagnosticKind.MALFORMED_BIT, msg, e.position)])
    except MalformedTreeError as e:
        msg = f"Could not read {label}: {e.reason} (position {e.position})."
        logger.warning(msg)
        return LoadResult(None, [Diagnostic(DiagnosticKind.MALFORMED_TREE, msg, e.position)])

    diagnostics: List[Diagnostic] = []
    if cursor.has_more():
        msg = f"{cursor.remaining()} bit(s) were not used while loading {label}."
        logger.warning(msg)
        diagnostics.append(Diagnostic(DiagnosticKind.TRAILING_BITS, msg, cursor.position))

    return LoadResult(root, diagnostics)


def load_reference_tree(kind: str) -> LoadResult:
    """
    Load one of the bundled reference trees.

    Args:
        kind: TREE_SOURCE_STANDARD or TREE_SOURCE_TEST.

    Returns:
        LoadResult: The loaded reference tree.

    Raises:
        KeyError: If the reference tree name is unknown.
    """
    bits = _REFERENCE_TREES[kind]
    logger.debug(f"Loading {kind} reference tree ({len(bits)} bits).")
    return load_tree(bits, label=f"{kind} tree")
