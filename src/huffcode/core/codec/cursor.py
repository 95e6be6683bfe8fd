from __future__ import annotations

"""
Forward-only Bit Cursor.

Reads a sequence of bit characters one at a time. The cursor never rewinds;
callers check has_more() before every take().
"""

from huffcode.domain.errors import ExhaustedBitsError


class BitCursor:
    """Index-and-buffer reader over a string of '0'/'1' characters."""

    def __init__(self, bits: str):
        self._bits = bits
        self._pos = 0

    @property
    def position(self) -> int:
        """Index of the next bit to be read."""
        return self._pos

    def has_more(self) -> bool:
        return self._pos < len(self._bits)

    def remaining(self) -> int:
        return len(self._bits) - self._pos

    def take(self) -> str:
        """
        Consume and return the next bit character.

        Raises:
            ExhaustedBitsError: If no bits remain.
        """
        if self._pos >= len(self._bits):
            raise ExhaustedBitsError(self._pos)
        bit = self._bits[self._pos]
        self._pos += 1
        return bit
