"""Table-driven CRC calculation with configurable width and parameters."""

from __future__ import annotations

from typing import Iterable

_MAX_BITS = 64


def _reflect(value: int, bits: int) -> int:
    """Reverse the lowest ``bits`` bits of ``value``."""
    out = 0
    for _ in range(bits):
        out = (out << 1) | (value & 1)
        value >>= 1
    return out


_REFLECTED_BYTES = tuple(_reflect(byte, 8) for byte in range(256))


class Crc:
    """A CRC of ``num_bits`` width described by its polynomial and options.

    ``num_bits`` must be a power of two no larger than 64.
    """

    def __init__(
        self,
        num_bits: int,
        polynomial: int,
        init: int,
        xor_out: int,
        reflect_input: bool,
        reflect_output: bool,
    ) -> None:
        if num_bits <= 0 or num_bits & (num_bits - 1) or num_bits > _MAX_BITS:
            raise ValueError(
                f"CRC width must be a power of two up to {_MAX_BITS}, got {num_bits}"
            )
        mask = (1 << num_bits) - 1
        self._num_bits = num_bits
        self._init = init & mask
        self._xor_out = xor_out & mask
        self._reflect_input = reflect_input
        self._reflect_output = reflect_output
        self._table = self._build_table(_reflect(polynomial & mask, num_bits))
        self._value = 0
        self.reset()

    @staticmethod
    def _build_table(reflected_poly: int) -> tuple[int, ...]:
        table = []
        for index in range(256):
            c = index
            for _ in range(8):
                c = reflected_poly ^ (c >> 1) if c & 1 else c >> 1
            table.append(c)
        return tuple(table)

    def reset(self) -> None:
        """Return the register to its initial value."""
        self._value = _reflect(self._init, self._num_bits)

    def process(self, data: bytes | bytearray | memoryview | Iterable[int]) -> None:
        """Feed ``data`` into the running checksum."""
        if isinstance(data, int):
            raise TypeError("data must be a bytes-like object or an iterable of bytes")
        table = self._table
        value = self._value
        for byte in bytes(data):
            if not self._reflect_input:
                byte = _REFLECTED_BYTES[byte]
            value = table[(value ^ byte) & 0xFF] ^ (value >> 8)
        self._value = value

    def result(self) -> int:
        """Return the checksum of everything processed since the last reset."""
        if self._reflect_output:
            return self._value ^ self._xor_out
        return _reflect(self._value, self._num_bits) ^ self._xor_out