"""
Tests for the 11-bit packer: header layout, padding bookkeeping and the
failure modes of unpack().
"""

import random

import pytest

from mojipack_bits import (
    HEADER_BITS,
    MAX_PADDING_BITS,
    pack,
    padding_for,
    symbol_count_for,
    unpack,
)
from mojipack_errors import DecodeError, InvalidHeader, TruncatedStream
from mojipack_symbols import SYMBOL_BITS


def _ceil_div(a, b):
    return -(-a // b)


class TestSizes:
    def test_empty(self):
        assert padding_for(0) == 0
        assert symbol_count_for(0) == 0

    @pytest.mark.parametrize("length", range(1, 100))
    def test_symbol_count_matches_density_bound(self, length):
        assert symbol_count_for(length) == _ceil_div(8 * length + HEADER_BITS, 11)
        assert 0 <= padding_for(length) <= MAX_PADDING_BITS

    def test_fewer_symbols_than_bytes_from_five_bytes(self):
        assert symbol_count_for(4) == 4
        for length in range(5, 200):
            assert symbol_count_for(length) < length


class TestPack:
    def test_empty_input_has_no_header(self):
        assert pack(b"") == ([], 0)

    def test_single_byte_layout(self):
        # 1010 | 0100 0001 | 00 0000 0000
        symbols, padding = pack(b"\x41")
        assert padding == 10
        assert symbols == [0b10100100000, 0b10000000000]

    def test_header_in_first_symbol(self):
        for length in range(1, 40):
            symbols, padding = pack(bytes(length))
            assert symbols[0] >> (SYMBOL_BITS - HEADER_BITS) == padding

    def test_bit_length_invariant(self):
        rng = random.Random(1234)
        for length in range(1, 65):
            data = bytes(rng.randrange(256) for _ in range(length))
            symbols, padding = pack(data)
            assert 8 * len(data) == SYMBOL_BITS * len(symbols) - HEADER_BITS - padding
            assert all(0 <= s < 2 ** SYMBOL_BITS for s in symbols)

    def test_accepts_bytearray_and_memoryview(self):
        assert pack(bytearray(b"xyz")) == pack(b"xyz")
        assert pack(memoryview(b"xyz")) == pack(b"xyz")


class TestUnpack:
    def test_round_trip(self):
        rng = random.Random(99)
        for length in range(0, 65):
            data = bytes(rng.randrange(256) for _ in range(length))
            symbols, _ = pack(data)
            assert unpack(symbols) == data
            assert unpack(symbols, original_length=length) == data

    def test_all_byte_values(self):
        data = bytes(range(256))
        assert unpack(pack(data)[0]) == data

    def test_empty(self):
        assert unpack([]) == b""

    def test_empty_with_expected_length(self):
        with pytest.raises(TruncatedStream):
            unpack([], original_length=3)

    @pytest.mark.parametrize("padding", range(0, MAX_PADDING_BITS + 1))
    def test_single_symbol_is_truncated(self, padding):
        with pytest.raises(TruncatedStream):
            unpack([padding << (SYMBOL_BITS - HEADER_BITS)])

    def test_unaligned_remainder(self):
        # 33 bits - 4 header - 0 padding = 29 payload bits
        with pytest.raises(TruncatedStream):
            unpack([0, 0, 0])

    @pytest.mark.parametrize("padding", range(MAX_PADDING_BITS + 1, 16))
    def test_invalid_header(self, padding):
        first = padding << (SYMBOL_BITS - HEADER_BITS)
        with pytest.raises(InvalidHeader) as excinfo:
            unpack([first, 0])
        assert excinfo.value.padding_bits == padding

    def test_length_mismatch(self):
        symbols, _ = pack(b"hello")
        with pytest.raises(TruncatedStream):
            unpack(symbols, original_length=4)

    def test_symbol_out_of_range(self):
        with pytest.raises(ValueError) as excinfo:
            unpack([0, 2048])
        assert not isinstance(excinfo.value, DecodeError)
