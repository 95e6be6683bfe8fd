from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application-wide constants: the mandatory
alphabet used to widen frequency tables, the bundled reference trees in
their serialized bit form, tree source identifiers and default file names.
"""

import string
from typing import FrozenSet, Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# Fixed width of a leaf character code in the tree bit representation
CHAR_BITS = 8
MAX_CHAR_CODE = (1 << CHAR_BITS) - 1

# -----------------------------------------------------------------------------
# ALPHABET WIDENING
# -----------------------------------------------------------------------------

MANDATORY_CHARS: FrozenSet[str] = frozenset(
    string.ascii_uppercase
    + string.ascii_lowercase
    + " !\"'(),-./"
    + "\n\r:;?"
)

# -----------------------------------------------------------------------------
# TREE SOURCES
# -----------------------------------------------------------------------------

TREE_SOURCE_TEXT = "text"
TREE_SOURCE_STANDARD = "standard"
TREE_SOURCE_TEST = "test"
TREE_SOURCE_FILE = "file"

TREE_SOURCES: Tuple[str, ...] = (
    TREE_SOURCE_TEXT,
    TREE_SOURCE_STANDARD,
    TREE_SOURCE_TEST,
    TREE_SOURCE_FILE,
)

# -----------------------------------------------------------------------------
# REFERENCE TREES (SERIALIZED)
# -----------------------------------------------------------------------------

# Generated from an English prose passage with the mandatory alphabet filled
# in, so it covers most plain English text (67 leaves).
STANDARD_TREE_BITS = (
    "000010110100000101111001101110000010110001000000000100111111001010100011"
    "010101101010110100001010110000100100001101000100100111010010011101110111"
    "000110101100110101000001010100101010011000101000111010100101110010111101"
    "010000111001011011000011011011001010010111001110110111000101101100000010"
    "010100010010100110111011010000101010110011010111001000010110111110110000"
    "100000010100111010101011110110101110010111010110011110110010010111010000"
    "000000101000101101101010101001001010100001001011110001010001100010100110"
    "110100000110101001110110110101011101110001010101000101001010100100010001"
    "001001111010010000010111101010101010110100111110010110001011010010101110"
    "101101100011100100000"
)

# Characters and frequencies of "a man, a plan, a canal, panama" (8 leaves).
TEST_TREE_BITS = (
    "0010010000001001011000101100011101110000001011011100101101101101101100"
    "101100001"
)

# -----------------------------------------------------------------------------
# OUTPUT DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_TREE_FILE_NAME = "treeBitRep.txt"
DEFAULT_ENCODED_FILE_NAME = "encoded.txt"
DEFAULT_DECODED_FILE_NAME = "decoded.txt"
DEFAULT_PACKED_FILE_NAME = "encoded.bin"
PACKED_FILE_SUFFIX = ".bin"

DEFAULT_DISPLAY_LIMIT = 1000

# Source files are read and written as latin-1 so that every byte maps to
# exactly one character of the 8-bit alphabet.
TEXT_ENCODING = "latin-1"
