from __future__ import annotations

"""
Bit String Decoder.

Walks the tree from the root for every character, consuming one bit per
internal node, until a leaf is reached. Local anomalies only drop the
affected character; the text decoded so far is always returned.
"""

import logging
from typing import List, Optional

from huffcode.core.codec.cursor import BitCursor
from huffcode.domain.codec_models import DecodeResult, Diagnostic, DiagnosticKind
from huffcode.domain.tree_models import Internal, Leaf, Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def decode(root: Node, bits: str, count: Optional[int] = None) -> DecodeResult:
    """
    Decode a bit string into text using a tree.

    Args:
        root: Tree root used for decoding.
        bits: Encoded bit string.
        count: Expected number of characters. Decoding stops once reached;
               required to recover text from a single-leaf tree, whose
               code is empty.

    Returns:
        DecodeResult: Decoded text and diagnostics.
    """
    cursor = BitCursor(bits)
    diagnostics: List[Diagnostic] = []

    if isinstance(root, Leaf):
        text = root.character * (count or 0)
        _check_trailing(cursor, diagnostics)
        return DecodeResult(text, diagnostics)

    out: List[str] = []
    while cursor.has_more() and (count is None or len(out) < count):
        char = _walk(root, cursor, diagnostics)
        if char is not None:
            out.append(char)

    if count is not None:
        if len(out) < count and not _has_kind(diagnostics, DiagnosticKind.EXHAUSTED_BITS):
            _report(
                diagnostics,
                DiagnosticKind.EXHAUSTED_BITS,
                f"Bits ran out after {len(out)} of {count} expected characters.",
                cursor.position,
            )
        _check_trailing(cursor, diagnostics)

    return DecodeResult("".join(out), diagnostics)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _walk(root: Node, cursor: BitCursor, diagnostics: List[Diagnostic]) -> Optional[str]:
    """Follow bits from the root to a leaf; None if no leaf was reached."""
    node = root
    while isinstance(node, Internal):
        if not cursor.has_more():
            _report(
                diagnostics,
                DiagnosticKind.EXHAUSTED_BITS,
                "Ran out of bits during decode; incomplete trailing code dropped.",
                cursor.position,
            )
            return None

        pos = cursor.position
        bit = cursor.take()
        if bit == "0":
            node = node.zero
        elif bit == "1":
            node = node.one
        else:
            _report(
                diagnostics,
                DiagnosticKind.MALFORMED_BIT,
                f"Malformed bit {bit!r}; character dropped.",
                pos,
            )
            return None

    return node.character


def _check_trailing(cursor: BitCursor, diagnostics: List[Diagnostic]) -> None:
    if cursor.has_more():
        _report(
            diagnostics,
            DiagnosticKind.TRAILING_BITS,
            f"{cursor.remaining()} bit(s) left unread after decoding.",
            cursor.position,
        )


def _has_kind(diagnostics: List[Diagnostic], kind: DiagnosticKind) -> bool:
    return any(d.kind == kind for d in diagnostics)


def _report(
        diagnostics: List[Diagnostic],
        kind: DiagnosticKind,
        message: str,
        position: int,
) -> None:
    logger.warning(f"Decode: {message} (position {position})")
    diagnostics.append(Diagnostic(kind, message, position))
