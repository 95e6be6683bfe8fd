from __future__ import annotations

"""
Huffman Tree Structure Data Models.

Provides the recursive type definitions used by the coding subsystem. A
tree node is either a Leaf (one alphabet character) or an Internal node
(exactly two children). Nodes are immutable once created.
"""

from dataclasses import dataclass, field
from typing import Dict, Union

from huffcode.domain.constants import MAX_CHAR_CODE

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf:
    """
    Represents a terminal node holding a single alphabet character.

    Attributes:
        character: One character with a code point in the 0-255 range.
        frequency: Occurrence count. Zero for trees loaded from bits.
    """
    character: str
    frequency: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.character, str) or len(self.character) != 1:
            raise ValueError(f"Leaf character must be a single char, got {self.character!r}.")
        if ord(self.character) > MAX_CHAR_CODE:
            raise ValueError(
                f"Leaf character {self.character!r} is outside the 8-bit alphabet."
            )
        if self.frequency < 0:
            raise ValueError(f"Leaf frequency must be non-negative, got {self.frequency}.")


@dataclass(frozen=True)
class Internal:
    """
    Represents a branching node with a 'zero' and a 'one' child.

    The frequency is always the sum of both children and is derived at
    construction time.

    Attributes:
        zero: Subtree reached by a '0' bit.
        one: Subtree reached by a '1' bit.
        frequency: Sum of the children's frequencies.
    """
    zero: "Node"
    one: "Node"
    frequency: int = field(init=False)

    def __post_init__(self) -> None:
        if self.zero is None or self.one is None:
            raise ValueError("Internal nodes require both children.")
        object.__setattr__(self, "frequency", self.zero.frequency + self.one.frequency)


Node = Union[Leaf, Internal]

# Character -> occurrence count
FrequencyTable = Dict[str, int]

# Character -> bit-string code (path from root)
CodeTable = Dict[str, str]
