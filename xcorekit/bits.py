"""Byte-order conversion, bit reversal and saturating arithmetic helpers."""

from __future__ import annotations

import operator

__all__ = [
    "to_big_endian_16",
    "to_big_endian_32",
    "to_big_endian_64",
    "from_big_endian_16",
    "from_big_endian_32",
    "from_big_endian_64",
    "to_little_endian_16",
    "to_little_endian_32",
    "to_little_endian_64",
    "from_little_endian_16",
    "from_little_endian_32",
    "from_little_endian_64",
    "reverse_bytes_16_pairs",
    "reverse_bytes_signed_16",
    "reverse_bits_32",
    "count_leading_zeros_32",
    "saturated_add",
    "saturated_sub",
]


def _unsigned(value: int, bits: int) -> int:
    value = operator.index(value)
    if not 0 <= value < (1 << bits):
        raise ValueError(f"value does not fit in {bits} unsigned bits")
    return value


def _swap_bytes(value: int, bits: int) -> int:
    value = _unsigned(value, bits)
    return int.from_bytes(value.to_bytes(bits // 8, "little"), "big")


def to_big_endian_16(value: int) -> int:
    """Convert a host (little-endian) 16-bit value to big-endian order."""
    return _swap_bytes(value, 16)


def to_big_endian_32(value: int) -> int:
    """Convert a host (little-endian) 32-bit value to big-endian order."""
    return _swap_bytes(value, 32)


def to_big_endian_64(value: int) -> int:
    """Convert a host (little-endian) 64-bit value to big-endian order."""
    value = _unsigned(value, 64)
    high = value >> 32
    low = value & 0xFFFFFFFF
    return (to_big_endian_32(low) << 32) | to_big_endian_32(high)


def from_big_endian_16(value: int) -> int:
    return to_big_endian_16(value)


def from_big_endian_32(value: int) -> int:
    return to_big_endian_32(value)


def from_big_endian_64(value: int) -> int:
    return to_big_endian_64(value)


def to_little_endian_16(value: int) -> int:
    return _unsigned(value, 16)


def to_little_endian_32(value: int) -> int:
    return _unsigned(value, 32)


def to_little_endian_64(value: int) -> int:
    return _unsigned(value, 64)


def from_little_endian_16(value: int) -> int:
    return _unsigned(value, 16)


def from_little_endian_32(value: int) -> int:
    return _unsigned(value, 32)


def from_little_endian_64(value: int) -> int:
    return _unsigned(value, 64)


def reverse_bytes_16_pairs(value: int) -> int:
    """Swap the two bytes inside each half-word of a 32-bit value."""
    value = _unsigned(value, 32)
    return ((value & 0x00FF00FF) << 8) | ((value >> 8) & 0x00FF00FF)


def reverse_bytes_signed_16(value: int) -> int:
    """Swap the bytes of the low half-word and sign-extend the result."""
    value = _unsigned(value, 32)
    swapped = ((value & 0xFF) << 8) | ((value >> 8) & 0xFF)
    return swapped - 0x10000 if swapped & 0x8000 else swapped


def reverse_bits_32(value: int) -> int:
    """Return the 32-bit value with its bit order reversed."""
    value = _unsigned(value, 32)
    value = ((value >> 1) & 0x55555555) | ((value & 0x55555555) << 1)
    value = ((value >> 2) & 0x33333333) | ((value & 0x33333333) << 2)
    value = ((value >> 4) & 0x0F0F0F0F) | ((value & 0x0F0F0F0F) << 4)
    return to_big_endian_32(value)


def count_leading_zeros_32(value: int) -> int:
    """Return the number of zero bits above the highest set bit."""
    return 32 - _unsigned(value, 32).bit_length()


def _limits(bits: int, signed: bool) -> tuple[int, int]:
    bits = operator.index(bits)
    if bits <= 0:
        raise ValueError("bit width must be positive")
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def _operands(a: int, b: int, bits: int, signed: bool) -> tuple[int, int, int, int]:
    low, high = _limits(bits, signed)
    a = operator.index(a)
    b = operator.index(b)
    for operand in (a, b):
        if not low <= operand <= high:
            raise ValueError("operand does not fit in the given width")
    return a, b, low, high


def saturated_add(a: int, b: int, bits: int = 32, signed: bool = True) -> int:
    """Add two integers, clamping the sum to the range of the given width."""
    a, b, low, high = _operands(a, b, bits, signed)
    return max(low, min(high, a + b))


def saturated_sub(a: int, b: int, bits: int = 32, signed: bool = True) -> int:
    """Subtract two integers, clamping the difference to the given width."""
    a, b, low, high = _operands(a, b, bits, signed)
    return max(low, min(high, a - b))