#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MojiPack Symbol Table
=====================

Immutable bijection between 11-bit symbol codes (0..2047) and emoji
sequences, each of which is exactly one grapheme cluster.

Integrity checks run once, when the table is built:
  - the catalog supplies at least 2048 sequences
  - the 2048 sequences in use are pairwise distinct
  - every sequence segments to exactly one grapheme cluster
  - every sequence is boundary stable: seq + seq segments to two clusters,
    so no sequence can merge with whatever follows it

A violation raises CatalogIntegrityError; the table cannot be used.

Also provided:
  - emoji-sequences.txt style catalog parsing (parse_catalog / load_catalog)
  - JSON export/import of a built table (save_table / load_table)
  - a lazily built, process-wide default table (default_table)
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from hashlib import sha256
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from mojipack_catalog import CATALOG_SOURCE, CATALOG_VERSION
from mojipack_errors import CatalogIntegrityError, UnknownGrapheme
from mojipack_graphemes import segment

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0.0"

SYMBOL_BITS = 11
SYMBOL_COUNT = 1 << SYMBOL_BITS


# ---------------------------------------------------------------------------
# Catalog parsing (emoji-sequences.txt format)
# ---------------------------------------------------------------------------

def _scalar(token: str, lineno: int) -> str:
    try:
        cp = int(token, 16)
        return chr(cp)
    except ValueError:
        raise CatalogIntegrityError(
            f"line {lineno}: invalid code point {token!r}"
        ) from None


def parse_catalog(lines: Iterable[str]) -> List[str]:
    """
    Parse catalog lines into an ordered list of sequences.

        1F600..1F64F ; Basic_Emoji            -> one entry per scalar
        0023 FE0F 20E3 ; Emoji_Keycap_Sequence -> one entry

    Comments (#) and blank lines are skipped.
    """
    sequences: List[str] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue

        points = line.split(";", 1)[0].strip()
        if not points:
            raise CatalogIntegrityError(f"line {lineno}: missing code points")

        if ".." in points:
            start_s, _, end_s = points.partition("..")
            start = ord(_scalar(start_s.strip(), lineno))
            end = ord(_scalar(end_s.strip(), lineno))
            if end < start:
                raise CatalogIntegrityError(
                    f"line {lineno}: empty range {points!r}"
                )
            sequences.extend(chr(cp) for cp in range(start, end + 1))
        else:
            sequences.append(
                "".join(_scalar(tok, lineno) for tok in points.split())
            )
    return sequences


def load_catalog(path: Optional[Path] = None) -> List[str]:
    """
    Load catalog sequences from a text file, or the shipped catalog when
    ``path`` is None.
    """
    if path is None:
        logger.debug("loading shipped catalog %s", CATALOG_VERSION)
        return parse_catalog(CATALOG_SOURCE.splitlines())

    path = Path(path)
    logger.debug("loading catalog from %s", path)
    with path.open("r", encoding="utf-8") as f:
        return parse_catalog(f)


def _codepoints(sequence: str) -> List[str]:
    return [f"U+{ord(c):04X}" for c in sequence]


# ---------------------------------------------------------------------------
# Symbol table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SymbolTable:
    sequences: Tuple[str, ...] = field(repr=False)
    version: str = "custom"
    _index: Mapping[str, int] = field(init=False, repr=False, compare=False)
    fingerprint: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        sequences = tuple(self.sequences)
        if len(sequences) < SYMBOL_COUNT:
            raise CatalogIntegrityError(
                f"catalog has {len(sequences)} sequences, "
                f"need at least {SYMBOL_COUNT}"
            )
        if len(sequences) > SYMBOL_COUNT:
            logger.debug(
                "catalog %s: ignoring %d spare sequences",
                self.version, len(sequences) - SYMBOL_COUNT,
            )
            sequences = sequences[:SYMBOL_COUNT]

        index: Dict[str, int] = {}
        for code, seq in enumerate(sequences):
            _check_sequence(code, seq)
            if seq in index:
                raise CatalogIntegrityError(
                    f"duplicate sequence {' '.join(_codepoints(seq))} "
                    f"at codes {index[seq]} and {code}"
                )
            index[seq] = code

        object.__setattr__(self, "sequences", sequences)
        object.__setattr__(self, "_index", MappingProxyType(index))
        object.__setattr__(self, "fingerprint", _fingerprint(sequences))
        logger.debug(
            "built symbol table %s (%d symbols, fingerprint %s)",
            self.version, len(sequences), self.fingerprint[:16],
        )

    # -- lookups ----------------------------------------------------------

    def sequence_for(self, code: int) -> str:
        if not (0 <= code < SYMBOL_COUNT):
            raise ValueError(f"symbol out of range: {code}")
        return self.sequences[code]

    def code_for(self, sequence: str) -> int:
        code = self._index.get(sequence)
        if code is None:
            raise UnknownGrapheme(sequence)
        return code

    def get_code(self, sequence: str) -> Optional[int]:
        return self._index.get(sequence)

    def __len__(self) -> int:
        return len(self.sequences)

    def __contains__(self, sequence: object) -> bool:
        return sequence in self._index

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(enumerate(self.sequences))

    # -- serialization ----------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": SCHEMA_VERSION,
            "catalog_version": self.version,
            "fingerprint": self.fingerprint,
            "entries": [
                {"code": code, "sequence": seq, "codepoints": _codepoints(seq)}
                for code, seq in self
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SymbolTable":
        entries = sorted(data.get("entries", []), key=lambda e: int(e["code"]))
        codes = [int(e["code"]) for e in entries]
        if codes != list(range(len(codes))):
            raise CatalogIntegrityError("table codes are not dense from 0")

        table = cls(
            sequences=tuple(e["sequence"] for e in entries),
            version=data.get("catalog_version", "custom"),
        )
        expected = data.get("fingerprint")
        if expected and expected != table.fingerprint:
            raise CatalogIntegrityError(
                f"fingerprint mismatch: expected {expected}, "
                f"found {table.fingerprint}"
            )
        return table


def _check_sequence(code: int, seq: str) -> None:
    if not seq:
        raise CatalogIntegrityError(f"empty sequence at code {code}")
    clusters = segment(seq)
    if len(clusters) != 1:
        raise CatalogIntegrityError(
            f"sequence {' '.join(_codepoints(seq))} at code {code} "
            f"segments to {len(clusters)} clusters"
        )
    if len(segment(seq + seq)) != 2:
        raise CatalogIntegrityError(
            f"sequence {' '.join(_codepoints(seq))} at code {code} "
            "merges with a following cluster"
        )


def _fingerprint(sequences: Tuple[str, ...]) -> str:
    listing = "\n".join(
        f"{code}:{' '.join(_codepoints(seq))}"
        for code, seq in enumerate(sequences)
    )
    return sha256(listing.encode("utf-8")).hexdigest()


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------

def save_table(table: SymbolTable, path: Path) -> None:
    payload = table.to_dict()
    with Path(path).open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)


def load_table(path: Path) -> SymbolTable:
    with Path(path).open("r", encoding="utf-8") as f:
        data = json.load(f)
    return SymbolTable.from_dict(data)


# ---------------------------------------------------------------------------
# Process-wide default table
# ---------------------------------------------------------------------------

_default_table: Optional[SymbolTable] = None
_default_lock = threading.Lock()


def default_table() -> SymbolTable:
    """
    Return the table built from the shipped catalog, building it on first
    use. Later calls return the same immutable instance.
    """
    global _default_table
    if _default_table is None:
        with _default_lock:
            if _default_table is None:
                _default_table = SymbolTable(
                    sequences=tuple(load_catalog()),
                    version=CATALOG_VERSION,
                )
    return _default_table
