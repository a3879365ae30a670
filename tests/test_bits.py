import pytest
from hypothesis import given
from hypothesis import strategies as st

from xcorekit import bits

u16 = st.integers(min_value=0, max_value=0xFFFF)
u32 = st.integers(min_value=0, max_value=0xFFFFFFFF)
u64 = st.integers(min_value=0, max_value=0xFFFFFFFFFFFFFFFF)


def test_big_endian_32_pinned():
    assert bits.to_big_endian_32(0x12345678) == 0x78563412


def test_reverse_bits_of_one():
    assert bits.reverse_bits_32(1) == 0x80000000


@given(u16)
def test_big_endian_16_round_trip(value):
    assert bits.from_big_endian_16(bits.to_big_endian_16(value)) == value


@given(u32)
def test_big_endian_32_round_trip(value):
    assert bits.from_big_endian_32(bits.to_big_endian_32(value)) == value


@given(u64)
def test_big_endian_64_round_trip(value):
    assert bits.from_big_endian_64(bits.to_big_endian_64(value)) == value


@given(u64)
def test_big_endian_64_matches_halves(value):
    swapped = bits.to_big_endian_64(value)
    assert swapped >> 32 == bits.to_big_endian_32(value & 0xFFFFFFFF)
    assert swapped & 0xFFFFFFFF == bits.to_big_endian_32(value >> 32)


@given(u16, u32, u64)
def test_little_endian_is_identity(a, b, c):
    assert bits.to_little_endian_16(a) == a
    assert bits.from_little_endian_16(a) == a
    assert bits.to_little_endian_32(b) == b
    assert bits.from_little_endian_32(b) == b
    assert bits.to_little_endian_64(c) == c
    assert bits.from_little_endian_64(c) == c


@pytest.mark.parametrize("func,limit", [
    (bits.to_big_endian_16, 1 << 16),
    (bits.to_big_endian_32, 1 << 32),
    (bits.to_big_endian_64, 1 << 64),
    (bits.to_little_endian_16, 1 << 16),
])
def test_out_of_range_rejected(func, limit):
    with pytest.raises(ValueError):
        func(limit)
    with pytest.raises(ValueError):
        func(-1)


@given(u32)
def test_reverse_bytes_16_pairs_per_halfword(value):
    result = bits.reverse_bytes_16_pairs(value)
    assert result >> 16 == bits.to_big_endian_16(value >> 16)
    assert result & 0xFFFF == bits.to_big_endian_16(value & 0xFFFF)
    assert bits.reverse_bytes_16_pairs(result) == value


@given(u32)
def test_reverse_bytes_signed_16(value):
    result = bits.reverse_bytes_signed_16(value)
    assert result & 0xFFFF == bits.to_big_endian_16(value & 0xFFFF)
    assert (result < 0) == bool(value & 0x80)
    assert -0x8000 <= result <= 0x7FFF


@given(u32)
def test_reverse_bits_is_involution(value):
    assert bits.reverse_bits_32(bits.reverse_bits_32(value)) == value


@given(st.integers(min_value=0, max_value=31))
def test_reverse_bits_moves_single_bit(n):
    assert bits.reverse_bits_32(1 << n) == 1 << (31 - n)


@given(st.integers(min_value=0, max_value=31))
def test_count_leading_zeros_of_powers(n):
    assert bits.count_leading_zeros_32(1 << n) == 31 - n
    assert bits.count_leading_zeros_32((1 << (n + 1)) - 1) == 31 - n


def test_count_leading_zeros_of_zero():
    assert bits.count_leading_zeros_32(0) == 32


def test_saturated_add_clamps_signed():
    top = 2**31 - 1
    assert bits.saturated_add(top, 1) == top
    assert bits.saturated_add(-(2**31), -1) == -(2**31)
    assert bits.saturated_add(127, 1, bits=8) == 127
    assert bits.saturated_add(-128, -5, bits=8) == -128


def test_saturated_add_clamps_unsigned():
    assert bits.saturated_add(255, 1, bits=8, signed=False) == 255
    assert bits.saturated_add(65535, 7, bits=16, signed=False) == 65535


def test_saturated_sub_clamps():
    assert bits.saturated_sub(0, 1, bits=8, signed=False) == 0
    assert bits.saturated_sub(-128, 1, bits=8) == -128
    assert bits.saturated_sub(127, -1, bits=8) == 127
    assert bits.saturated_sub(32767, -32768, bits=16) == 32767


@given(st.integers(min_value=-128, max_value=127),
       st.integers(min_value=-128, max_value=127))
def test_saturated_ops_within_range(a, b):
    total = bits.saturated_add(a, b, bits=8)
    diff = bits.saturated_sub(a, b, bits=8)
    assert -128 <= total <= 127
    assert -128 <= diff <= 127
    if -128 <= a + b <= 127:
        assert total == a + b
    if -128 <= a - b <= 127:
        assert diff == a - b


def test_saturated_rejects_bad_operands():
    with pytest.raises(ValueError):
        bits.saturated_add(256, 0, bits=8, signed=False)
    with pytest.raises(ValueError):
        bits.saturated_sub(-1, 0, bits=8, signed=False)
    with pytest.raises(ValueError):
        bits.saturated_add(1, 1, bits=0)