#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MojiPack Errors
===============

Exception hierarchy shared by the catalog, the bit packer and the codec.

    MojiPackError
    ├── CatalogIntegrityError      (table construction only)
    └── DecodeError (ValueError)
        ├── UnknownGrapheme
        ├── TruncatedStream
        └── InvalidHeader

Encoding never raises any of these.
"""

from __future__ import annotations

from typing import Optional


class MojiPackError(Exception):
    """Base class for every error raised by mojipack."""


class CatalogIntegrityError(MojiPackError):
    """
    The emoji catalog violates a table invariant (too few entries,
    duplicates, or an entry that is not exactly one grapheme cluster).

    Raised once, while a SymbolTable is being built.
    """


# ---------------------------------------------------------------------------
# Decode failures
# ---------------------------------------------------------------------------

class DecodeError(MojiPackError, ValueError):
    """Base class for failures while decoding a glyph string."""


class UnknownGrapheme(DecodeError):
    def __init__(self, grapheme: str, index: Optional[int] = None) -> None:
        self.grapheme = grapheme
        self.index = index
        codepoints = " ".join(f"U+{ord(c):04X}" for c in grapheme)
        where = f" at cluster {index}" if index is not None else ""
        super().__init__(f"unknown grapheme {grapheme!r} ({codepoints}){where}")


class TruncatedStream(DecodeError):
    """Symbol stream does not reconstruct a whole number of bytes."""


class InvalidHeader(DecodeError):
    def __init__(self, padding_bits: int, limit: int) -> None:
        self.padding_bits = padding_bits
        super().__init__(
            f"header padding field {padding_bits} out of range 0..{limit}"
        )
