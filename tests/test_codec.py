"""
End-to-end tests for encode/decode: round trip, density, error reporting
and the text helpers.
"""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

import mojipack_codec
from mojipack_bits import HEADER_BITS, SYMBOL_BITS
from mojipack_codec import (
    Decoder,
    Encoder,
    MojiCodec,
    decode,
    decode_text,
    encode,
    encode_text,
)
from mojipack_errors import (
    DecodeError,
    InvalidHeader,
    TruncatedStream,
    UnknownGrapheme,
)
from mojipack_graphemes import count_graphemes
from mojipack_symbols import SymbolTable, default_table

FIRST_PAYLOAD_BITS = SYMBOL_BITS - HEADER_BITS


def _random_bytes(rng, length):
    return bytes(rng.randrange(256) for _ in range(length))


class TestRoundTrip:
    def test_empty(self):
        assert encode(b"") == ""
        assert decode("") == b""

    def test_lengths(self):
        rng = random.Random(2024)
        for length in range(0, 65):
            data = _random_bytes(rng, length)
            assert decode(encode(data)) == data

    def test_long_input(self):
        data = _random_bytes(random.Random(5), 4096)
        assert decode(encode(data)) == data

    def test_all_byte_values(self):
        data = bytes(range(256)) * 3
        assert decode(encode(data)) == data

    def test_bytes_like_inputs(self):
        assert encode(bytearray(b"abc")) == encode(b"abc")
        assert encode(memoryview(b"abc")) == encode(b"abc")

    def test_str_input_is_encoded_first(self):
        assert encode("hi") == encode(b"hi")
        assert encode("hé", encoding="latin-1") == encode(b"h\xe9")

    def test_text_helpers(self):
        text = "héllo wörld ✓"
        assert decode_text(encode_text(text)) == text
        assert decode_text(encode_text(text, "utf-16"), "utf-16") == text

    def test_decode_text_is_strict(self):
        with pytest.raises(UnicodeDecodeError):
            decode_text(encode(b"\xff\xfe\xfa"))


class TestDensity:
    def test_grapheme_count(self):
        rng = random.Random(11)
        for length in range(1, 100):
            s = encode(_random_bytes(rng, length))
            assert count_graphemes(s) == -(-(8 * length + HEADER_BITS) // 11)

    def test_fewer_graphemes_than_bytes(self):
        for length in range(5, 64):
            assert count_graphemes(encode(bytes(length))) < length


class TestScenario:
    def test_single_byte(self):
        s = encode(b"\x41")
        assert count_graphemes(s) == 2
        assert decode(s) == b"\x41"

    def test_trailing_ascii_is_unknown(self):
        s = encode(b"\x41")
        with pytest.raises(UnknownGrapheme) as excinfo:
            decode(s + "A")
        assert excinfo.value.grapheme == "A"
        assert excinfo.value.index == 2


class TestDecodeErrors:
    def test_plain_ascii(self):
        with pytest.raises(UnknownGrapheme) as excinfo:
            decode("hello")
        assert excinfo.value.index == 0

    def test_whitespace_is_not_a_separator(self):
        s = encode(b"data")
        with pytest.raises(UnknownGrapheme):
            decode(s[: len(s) // 2] + " " + s[len(s) // 2:])

    @pytest.mark.parametrize("padding", range(0, 11))
    def test_single_grapheme_is_truncated(self, padding):
        table = default_table()
        s = table.sequence_for(padding << FIRST_PAYLOAD_BITS)
        with pytest.raises(TruncatedStream):
            decode(s)

    def test_dropped_trailing_grapheme(self):
        s = encode(b"hello world")
        table = default_table()
        codes = Decoder(table).symbols(s)
        shortened = "".join(table.sequence_for(c) for c in codes[:-1])
        with pytest.raises(TruncatedStream):
            decode(shortened)

    def test_invalid_header(self):
        table = default_table()
        s = table.sequence_for(12 << FIRST_PAYLOAD_BITS) + table.sequence_for(0)
        with pytest.raises(InvalidHeader):
            decode(s)

    def test_decode_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            decode("x")
        assert issubclass(DecodeError, ValueError)


class TestCodecObjects:
    def test_symbols_cover_catalog(self):
        table = default_table()
        text = "".join(table.sequences)
        assert Decoder(table).symbols(text) == list(range(len(table)))

    def test_custom_table(self):
        base = default_table()
        table = SymbolTable(tuple(reversed(base.sequences)), version="reversed")
        codec = MojiCodec(table)
        data = b"custom catalog"
        s = codec.encode(data)
        assert s != encode(data)
        assert codec.decode(s) == data
        assert codec.decode_text(codec.encode_text("abc")) == "abc"

    def test_encoder_decoder_default_to_shipped_table(self):
        assert Encoder().table is default_table()
        assert Decoder().table is default_table()

    def test_parallel_calls(self):
        rng = random.Random(3)
        payloads = [_random_bytes(rng, rng.randrange(0, 200)) for _ in range(64)]
        codec = MojiCodec()

        def round_trip(data):
            return codec.decode(codec.encode(data))

        with ThreadPoolExecutor(max_workers=8) as pool:
            assert list(pool.map(round_trip, payloads)) == payloads

    def test_self_test(self):
        mojipack_codec._self_test()
