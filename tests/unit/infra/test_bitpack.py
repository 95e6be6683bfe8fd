from __future__ import annotations

"""
Unit tests for Packed Bit Storage.

Verifies the header/padding layout and rejection of invalid data.
"""

import pytest

from huffcode.infra.bitpack import pack_bits, unpack_bits


def test_pack_layout_header_and_payload() -> None:
    """'10001' needs 3 padding bits: 10001000 = 0x88."""
    assert pack_bits("10001") == bytes([3, 0x88])


def test_pack_full_byte_has_no_padding() -> None:
    assert pack_bits("11110000") == bytes([0, 0xF0])


def test_pack_empty_bits() -> None:
    assert pack_bits("") == bytes([0])
    assert unpack_bits(bytes([0])) == ""


@pytest.mark.parametrize("bits", ["1", "10001", "0" * 8, "1011001110001"])
def test_unpack_restores_original(bits: str) -> None:
    assert unpack_bits(pack_bits(bits)) == bits


def test_pack_rejects_non_bits() -> None:
    with pytest.raises(ValueError):
        pack_bits("10a1")


@pytest.mark.parametrize("data", [b"", bytes([8, 0]), bytes([3])])
def test_unpack_rejects_invalid_data(data: bytes) -> None:
    with pytest.raises(ValueError):
        unpack_bits(data)
