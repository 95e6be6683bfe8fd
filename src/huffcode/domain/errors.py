from __future__ import annotations

"""
Coding Domain Exceptions.

Raised inside the codec layer when a bit sequence cannot be read. Callers at
the codec seams (tree loading, decoding) convert them into diagnostics.
"""


class HuffmanError(Exception):
    """Base class for all coding failures."""


class ExhaustedBitsError(HuffmanError):
    """A bit was required but the input has no more bits."""

    def __init__(self, position: int):
        super().__init__(f"Bit input exhausted at position {position}.")
        self.position = position


class MalformedBitError(HuffmanError):
    """A character other than '0' or '1' appeared where a bit was expected."""

    def __init__(self, position: int, value: str):
        super().__init__(f"Malformed bit {value!r} at position {position}.")
        self.position = position
        self.value = value


class MalformedTreeError(HuffmanError):
    """The bits are valid but do not describe a usable tree."""

    def __init__(self, position: int, reason: str):
        super().__init__(f"Invalid tree at position {position}: {reason}.")
        self.position = position
        self.reason = reason
