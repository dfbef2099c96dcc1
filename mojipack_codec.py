#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MojiPack Codec
==============

Bytes <-> emoji string, one grapheme cluster per 11 bits of payload.

Pipeline
--------
encode:  bytes -> pack -> [u11] -> sequence_for -> concatenated string
decode:  string -> segment -> code_for -> [u11] -> unpack -> bytes

Usage
-----
    from mojipack_codec import encode, decode

    s = encode(b"hello")          # 4 grapheme clusters
    assert decode(s) == b"hello"

Text helpers encode/decode UTF-8 (or another encoding) on the way:

    s = encode_text("hello")
    assert decode_text(s) == "hello"

A custom catalog is passed explicitly:

    table = SymbolTable(tuple(load_catalog(path)), version="my-catalog-2")
    codec = MojiCodec(table)
"""

from __future__ import annotations

from typing import List, Optional, Union

from mojipack_bits import BytesLike, pack, symbol_count_for, unpack
from mojipack_errors import UnknownGrapheme
from mojipack_graphemes import count_graphemes, iter_graphemes
from mojipack_symbols import SymbolTable, default_table

Payload = Union[BytesLike, str]


def _as_bytes(data: Payload, encoding: str) -> bytes:
    if isinstance(data, str):
        return data.encode(encoding)
    return bytes(data)


# ---------------------------------------------------------------------------
# Encoder / Decoder
# ---------------------------------------------------------------------------

class Encoder:
    def __init__(self, table: Optional[SymbolTable] = None) -> None:
        self.table = table if table is not None else default_table()

    def encode(self, data: Payload, encoding: str = "utf-8") -> str:
        """
        Encode bytes (or text, via ``encoding``) into an emoji string.

        Never fails for bytes-like input; b"" encodes to "".
        """
        symbols, _ = pack(_as_bytes(data, encoding))
        return "".join(self.table.sequence_for(sym) for sym in symbols)

    def encode_text(self, text: str, encoding: str = "utf-8") -> str:
        return self.encode(text.encode(encoding))


class Decoder:
    def __init__(self, table: Optional[SymbolTable] = None) -> None:
        self.table = table if table is not None else default_table()

    def symbols(self, text: str) -> List[int]:
        """
        Map each grapheme cluster of ``text`` to its symbol code.

        Raises UnknownGrapheme for the first cluster outside the catalog,
        carrying the cluster and its 0-based position.
        """
        codes: List[int] = []
        for index, cluster in enumerate(iter_graphemes(text)):
            code = self.table.get_code(cluster)
            if code is None:
                raise UnknownGrapheme(cluster, index)
            codes.append(code)
        return codes

    def decode(self, text: str) -> bytes:
        """
        Decode an emoji string back into the original bytes.

        Raises a DecodeError subclass (UnknownGrapheme, TruncatedStream,
        InvalidHeader) on malformed input.
        """
        return unpack(self.symbols(text))

    def decode_text(self, text: str, encoding: str = "utf-8") -> str:
        return self.decode(text).decode(encoding, errors="strict")


class MojiCodec:
    """Encoder and Decoder sharing one SymbolTable."""

    def __init__(self, table: Optional[SymbolTable] = None) -> None:
        self.table = table if table is not None else default_table()
        self.encoder = Encoder(self.table)
        self.decoder = Decoder(self.table)

    def encode(self, data: Payload, encoding: str = "utf-8") -> str:
        return self.encoder.encode(data, encoding)

    def decode(self, text: str) -> bytes:
        return self.decoder.decode(text)

    def encode_text(self, text: str, encoding: str = "utf-8") -> str:
        return self.encoder.encode_text(text, encoding)

    def decode_text(self, text: str, encoding: str = "utf-8") -> str:
        return self.decoder.decode_text(text, encoding)


# ---------------------------------------------------------------------------
# Module-level API (shipped catalog)
# ---------------------------------------------------------------------------

_codec: Optional[MojiCodec] = None


def _default_codec() -> MojiCodec:
    global _codec
    if _codec is None:
        # Shares the process-wide table.
        _codec = MojiCodec(default_table())
    return _codec


def encode(data: Payload, encoding: str = "utf-8") -> str:
    return _default_codec().encode(data, encoding)


def decode(text: str) -> bytes:
    return _default_codec().decode(text)


def encode_text(text: str, encoding: str = "utf-8") -> str:
    return _default_codec().encode_text(text, encoding)


def decode_text(text: str, encoding: str = "utf-8") -> str:
    return _default_codec().decode_text(text, encoding)


# ---------------------------------------------------------------------------
# Self-test (optional)
# ---------------------------------------------------------------------------

def _self_test() -> None:
    """
    Minimal self-test to validate round-trip and density properties.
    """
    msg = "Input, but as emoji"
    s = encode_text(msg)
    assert decode_text(s) == msg, "Text <-> emoji round-trip failed"

    data = bytes(range(256))
    s = encode(data)
    assert decode(s) == data, "Bytes <-> emoji round-trip failed"
    assert count_graphemes(s) == symbol_count_for(len(data)), "Density bound failed"

    assert encode(b"") == "" and decode("") == b"", "Empty input failed"


if __name__ == "__main__":
    _self_test()
    print("✓ mojipack_codec: self-test passed.")
