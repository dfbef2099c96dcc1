"""
Tests for the symbol table: bijection, integrity checks, catalog parsing
and JSON persistence.
"""

import json
import threading

import pytest

from mojipack_catalog import CATALOG_VERSION
from mojipack_errors import CatalogIntegrityError, UnknownGrapheme
from mojipack_symbols import (
    SCHEMA_VERSION,
    SYMBOL_COUNT,
    SymbolTable,
    default_table,
    load_catalog,
    load_table,
    parse_catalog,
    save_table,
)


@pytest.fixture
def table():
    return default_table()


@pytest.fixture
def sequences(table):
    return list(table.sequences)


class TestDefaultTable:
    def test_size_and_version(self, table):
        assert len(table) == SYMBOL_COUNT == 2048
        assert table.version == CATALOG_VERSION
        assert len(table.fingerprint) == 64

    def test_bijection(self, table):
        for code in range(SYMBOL_COUNT):
            assert table.code_for(table.sequence_for(code)) == code

    def test_contains_and_iter(self, table):
        first = table.sequence_for(0)
        assert first in table
        assert "A" not in table
        assert next(iter(table)) == (0, first)

    def test_unknown_sequence(self, table):
        assert table.get_code("A") is None
        with pytest.raises(UnknownGrapheme) as excinfo:
            table.code_for("A")
        assert excinfo.value.grapheme == "A"

    @pytest.mark.parametrize("code", [-1, SYMBOL_COUNT])
    def test_code_out_of_range(self, table, code):
        with pytest.raises(ValueError):
            table.sequence_for(code)

    def test_built_once(self):
        seen = []

        def grab():
            seen.append(default_table())

        threads = [threading.Thread(target=grab) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert all(t is seen[0] for t in seen)

    def test_spare_catalog_entries_are_ignored(self, table):
        catalog = load_catalog()
        assert len(catalog) > SYMBOL_COUNT
        rebuilt = SymbolTable(tuple(catalog), version=CATALOG_VERSION)
        assert rebuilt.fingerprint == table.fingerprint
        assert rebuilt == table


class TestIntegrity:
    def test_too_few_sequences(self, sequences):
        with pytest.raises(CatalogIntegrityError):
            SymbolTable(tuple(sequences[:2047]))

    def test_duplicate_sequences(self, sequences):
        sequences[5] = sequences[4]
        with pytest.raises(CatalogIntegrityError, match="duplicate"):
            SymbolTable(tuple(sequences))

    def test_multi_cluster_sequence(self, sequences):
        sequences[0] = "ab"
        with pytest.raises(CatalogIntegrityError, match="2 clusters"):
            SymbolTable(tuple(sequences))

    def test_empty_sequence(self, sequences):
        sequences[0] = ""
        with pytest.raises(CatalogIntegrityError):
            SymbolTable(tuple(sequences))

    @pytest.mark.parametrize(
        "lone",
        ["\U0001F3FB", "\U0001F1E6", "\ufe0f", "\u20e3"],
    )
    def test_sequences_that_merge_with_neighbours(self, sequences, lone):
        sequences[0] = lone
        with pytest.raises(CatalogIntegrityError, match="merges"):
            SymbolTable(tuple(sequences))

    def test_reordered_catalog_changes_fingerprint(self, table, sequences):
        other = SymbolTable(tuple(reversed(sequences)), version="reversed")
        assert other.fingerprint != table.fingerprint
        assert other != table


class TestParseCatalog:
    def test_ranges_sequences_and_comments(self):
        lines = [
            "# header comment",
            "",
            "1F600..1F602 ; Basic_Emoji",
            "0023 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap # trailing",
            "1F1EF 1F1F5 ; RGI_Emoji_Flag_Sequence ; flag: JP",
        ]
        assert parse_catalog(lines) == [
            "\U0001F600",
            "\U0001F601",
            "\U0001F602",
            "#\ufe0f\u20e3",
            "\U0001F1EF\U0001F1F5",
        ]

    @pytest.mark.parametrize(
        "line,fragment",
        [
            ("ZZZZ ; Basic_Emoji", "line 1"),
            ("1F602..1F600 ; Basic_Emoji", "empty range"),
            ("; Basic_Emoji", "missing"),
            ("110000 ; Basic_Emoji", "invalid code point"),
        ],
    )
    def test_malformed_lines(self, line, fragment):
        with pytest.raises(CatalogIntegrityError, match=fragment):
            parse_catalog([line])

    def test_load_catalog_from_file(self, tmp_path):
        path = tmp_path / "catalog.txt"
        path.write_text("1F600..1F601 ; Basic_Emoji\n2764 FE0F ; Basic_Emoji\n",
                        encoding="utf-8")
        assert load_catalog(path) == ["\U0001F600", "\U0001F601", "\u2764\ufe0f"]


class TestPersistence:
    def test_to_dict_shape(self, table):
        data = table.to_dict()
        assert data["schema_version"] == SCHEMA_VERSION
        assert data["catalog_version"] == CATALOG_VERSION
        assert data["fingerprint"] == table.fingerprint
        assert len(data["entries"]) == SYMBOL_COUNT
        first = data["entries"][0]
        assert first["code"] == 0
        assert first["codepoints"] == [f"U+{ord(c):04X}" for c in first["sequence"]]

    def test_save_and_load(self, table, tmp_path):
        path = tmp_path / "table.json"
        save_table(table, path)
        loaded = load_table(path)
        assert loaded == table
        assert loaded.fingerprint == table.fingerprint
        assert loaded.version == table.version

    def test_fingerprint_mismatch(self, table, tmp_path):
        data = table.to_dict()
        data["fingerprint"] = "0" * 64
        path = tmp_path / "table.json"
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        with pytest.raises(CatalogIntegrityError, match="fingerprint"):
            load_table(path)

    def test_codes_must_be_dense(self, table):
        data = table.to_dict()
        data["entries"][10]["code"] = 5000
        with pytest.raises(CatalogIntegrityError, match="dense"):
            SymbolTable.from_dict(data)
