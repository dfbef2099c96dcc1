#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MojiPack Bit Packer
===================

bytes <-> sequence of 11-bit symbols.

Layout (big-endian bit order, MSB of byte 0 first):

    | pad (4) | data bits (8 * n) ............................ | 0 * pad |
    |<------ symbol 0 ------>|<------ symbol 1 ------>| ... |<- last ->|

The top 4 bits of symbol 0 hold ``pad``, the number of zero bits appended
after the data so the total is a multiple of 11:

    pad = (-(4 + 8 * n)) mod 11          # 0..10
    symbols = (4 + 8 * n + pad) / 11     # == ceil((8n + 4) / 11)

Empty input packs to no symbols at all (no header).
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union

from mojipack_errors import InvalidHeader, TruncatedStream
from mojipack_symbols import SYMBOL_BITS, SYMBOL_COUNT

HEADER_BITS = 4
MAX_PADDING_BITS = SYMBOL_BITS - 1
FIRST_PAYLOAD_BITS = SYMBOL_BITS - HEADER_BITS

BytesLike = Union[bytes, bytearray, memoryview]


def padding_for(length: int) -> int:
    """Zero bits appended after ``length`` bytes of payload."""
    if length == 0:
        return 0
    return -(HEADER_BITS + 8 * length) % SYMBOL_BITS


def symbol_count_for(length: int) -> int:
    """Symbols (and so grapheme clusters) needed for ``length`` bytes."""
    if length == 0:
        return 0
    return (HEADER_BITS + 8 * length + padding_for(length)) // SYMBOL_BITS


def pack(data: BytesLike) -> Tuple[List[int], int]:
    """
    Split ``data`` into 11-bit symbols.

    Returns (symbols, padding_bits). The padding count is already embedded
    in the top 4 bits of symbols[0]; it is returned for bookkeeping only.
    """
    data = bytes(data)
    if not data:
        return [], 0

    padding = padding_for(len(data))
    symbols: List[int] = []

    # Bits waiting to be emitted; always fewer than 19.
    stage = padding
    staged = HEADER_BITS
    for byte in data:
        stage = (stage << 8) | byte
        staged += 8
        if staged >= SYMBOL_BITS:
            staged -= SYMBOL_BITS
            symbols.append(stage >> staged)
            stage &= (1 << staged) - 1

    if staged:
        symbols.append(stage << (SYMBOL_BITS - staged))

    return symbols, padding


def unpack(symbols: Iterable[int], original_length: Optional[int] = None) -> bytes:
    """
    Rebuild the original bytes from a symbol sequence produced by pack().

    Raises:
        InvalidHeader   : header padding field above 10
        TruncatedStream : the symbols do not hold a whole, non-empty number
                          of bytes, or disagree with ``original_length``
        ValueError      : a symbol outside 0..2047
    """
    symbols = list(symbols)
    if not symbols:
        if original_length:
            raise TruncatedStream(
                f"expected {original_length} bytes, got an empty stream"
            )
        return b""

    for pos, sym in enumerate(symbols):
        if not (0 <= sym < SYMBOL_COUNT):
            raise ValueError(f"symbol {sym} at position {pos} out of range")

    padding = symbols[0] >> FIRST_PAYLOAD_BITS
    if padding > MAX_PADDING_BITS:
        raise InvalidHeader(padding, MAX_PADDING_BITS)

    payload_bits = SYMBOL_BITS * len(symbols) - HEADER_BITS - padding
    if payload_bits <= 0 or payload_bits % 8:
        raise TruncatedStream(
            f"{len(symbols)} symbols with {padding} padding bits leave "
            f"{payload_bits} payload bits"
        )

    length = payload_bits // 8
    if original_length is not None and original_length != length:
        raise TruncatedStream(
            f"expected {original_length} bytes, stream holds {length}"
        )

    out = bytearray()
    stage = symbols[0] & ((1 << FIRST_PAYLOAD_BITS) - 1)
    staged = FIRST_PAYLOAD_BITS
    for sym in symbols[1:]:
        stage = (stage << SYMBOL_BITS) | sym
        staged += SYMBOL_BITS
        while staged >= 8 and len(out) < length:
            staged -= 8
            out.append(stage >> staged)
            stage &= (1 << staged) - 1

    # Whatever is left in ``stage`` is the zero padding.
    return bytes(out)
