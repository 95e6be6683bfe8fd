from __future__ import annotations

"""
Character Frequency Analysis.

Builds the frequency tables that drive tree construction, and optionally
widens them with a fixed alphabet so the resulting tree can encode common
characters that were absent from the sample text.
"""

import logging
from collections import Counter
from typing import Iterable

from huffcode.domain.constants import MANDATORY_CHARS, MAX_CHAR_CODE
from huffcode.domain.tree_models import FrequencyTable

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def count_frequencies(text: Iterable[str]) -> FrequencyTable:
    """
    Count the occurrences of each character in the input.

    Characters beyond the 8-bit alphabet cannot be stored in a tree leaf
    and are left out of the table.

    Args:
        text: Character sequence to analyze.

    Returns:
        FrequencyTable: Mapping of character to occurrence count.
    """
    counts = Counter(text)

    out_of_range = [c for c in counts if ord(c) > MAX_CHAR_CODE]
    for c in out_of_range:
        del counts[c]

    if out_of_range:
        logger.warning(
            f"Skipped {len(out_of_range)} character(s) outside the 8-bit alphabet."
        )

    table = dict(counts)
    logger.debug(f"Frequency table built: {len(table)} distinct characters.")
    return table


def widen(
        table: FrequencyTable,
        mandatory_chars: Iterable[str] = MANDATORY_CHARS,
) -> FrequencyTable:
    """
    Ensure every mandatory character has an entry in the table.

    Absent characters are inserted with a frequency of zero. Existing counts
    are preserved. The input table is not modified.

    Args:
        table: Source frequency table.
        mandatory_chars: Characters that must be encodable.

    Returns:
        FrequencyTable: A new, widened table.
    """
    widened = dict(table)
    added = 0
    for c in mandatory_chars:
        if c not in widened:
            widened[c] = 0
            added += 1

    logger.debug(f"Frequency table widened with {added} zero-frequency characters.")
    return widened
