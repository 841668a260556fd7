import struct
import sys

import pytest

from wolvlib.core import gib, kib, mib, to_bytes


def test_to_bytes_native_order_round_trip():
    data = to_bytes(0xAABBCCDD, "I")
    assert len(data) == 4
    assert int.from_bytes(data, sys.byteorder) == 0xAABBCCDD


def test_to_bytes_explicit_little_endian():
    assert to_bytes(0xAABBCCDD, "<I") == bytes([0xDD, 0xCC, 0xBB, 0xAA])


def test_to_bytes_explicit_big_endian():
    assert to_bytes(0xAABBCCDD, ">I") == bytes([0xAA, 0xBB, 0xCC, 0xDD])


@pytest.mark.parametrize(
    ("fmt", "size"),
    [("B", 1), ("H", 2), ("I", 4), ("Q", 8), ("b", 1), ("h", 2), ("i", 4), ("q", 8), ("f", 4), ("d", 8)],
)
def test_to_bytes_sizes_match_fixed_width_types(fmt, size):
    assert len(to_bytes(1, fmt)) == size


def test_to_bytes_float_round_trip():
    data = to_bytes(1.5, "d")
    assert struct.unpack("=d", data) == (1.5,)


def test_to_bytes_out_of_range_raises():
    with pytest.raises(struct.error):
        to_bytes(256, "B")


def test_size_literals():
    assert kib(5) == 5 * 1024
    assert mib(5) == 5 * 1024 * 1024
    assert gib(5) == 5 * 1024 * 1024 * 1024


def test_size_literals_scale_consistently():
    assert mib(3) == kib(kib(3))
    assert gib(2) == kib(mib(2))
    assert kib(0) == 0