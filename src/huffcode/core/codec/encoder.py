from __future__ import annotations

"""
Text Encoder.

Translates text into a bit string using a code table. Characters without a
code are skipped; they cannot be recovered on decode.
"""

from typing import Iterable

from huffcode.domain.tree_models import CodeTable


def encode(codes: CodeTable, text: Iterable[str]) -> str:
    """
    Concatenate the code of each character of the text.

    Args:
        codes: Character-to-code mapping derived from a tree.
        text: Characters to encode.

    Returns:
        str: Encoded bit string.
    """
    return "".join(codes[c] for c in text if c in codes)


def count_unmapped(codes: CodeTable, text: Iterable[str]) -> int:
    """Return how many characters of the text have no code."""
    return sum(1 for c in text if c not in codes)
