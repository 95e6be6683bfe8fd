from __future__ import annotations

"""
Packed Bit Storage.

Converts '0'/'1' strings to compact bytes and back using bitarray. The
packed layout is one header byte holding the number of padding bits,
followed by the bits packed MSB first.
"""

from bitarray import bitarray

_BYTE_BITS = 8


def pack_bits(bits: str) -> bytes:
    """
    Pack a bit string into bytes.

    Args:
        bits: String over {'0', '1'}.

    Returns:
        bytes: Header byte plus packed payload.

    Raises:
        ValueError: If the string contains characters other than '0'/'1'.
    """
    ba = bitarray(bits, endian="big")
    pad = (_BYTE_BITS - len(ba) % _BYTE_BITS) % _BYTE_BITS
    return bytes([pad]) + ba.tobytes()


def unpack_bits(data: bytes) -> str:
    """
    Restore the bit string stored by pack_bits().

    Args:
        data: Packed bytes.

    Returns:
        str: Original bit string.

    Raises:
        ValueError: If the data is empty or the header is invalid.
    """
    if not data:
        raise ValueError("Packed data is empty; missing header byte.")

    pad = data[0]
    payload = data[1:]
    if pad >= _BYTE_BITS or (pad and not payload):
        raise ValueError(f"Invalid padding header: {pad}.")

    ba = bitarray(endian="big")
    ba.frombytes(payload)
    bits = ba.to01()
    return bits[:len(bits) - pad]
