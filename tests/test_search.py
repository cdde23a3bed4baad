"""
Tests for filename search.
"""

import pytest

from notehome.core import search, NoteEntry


class ExplodingCatalog:
    """Fails if anything tries to read it."""

    def __iter__(self):
        raise AssertionError("catalog was scanned")


CATALOG = [NoteEntry("1.md", "Alpha"), NoteEntry("2.md", "beta")]


class TestSearch:

    @pytest.mark.parametrize("query", ["", "   ", "\t"])
    def test_empty_query_does_not_scan(self, query):
        assert search(ExplodingCatalog(), query) == []

    def test_case_insensitive_keeps_catalog_order(self):
        results = search(CATALOG, "a")
        assert [e.display_name for e in results] == ["Alpha", "beta"]

    def test_uppercase_query(self):
        assert [e.ref for e in search(CATALOG, "BET")] == ["2.md"]

    def test_no_match(self):
        assert search(CATALOG, "zzz") == []

    def test_query_is_trimmed(self):
        assert [e.ref for e in search(CATALOG, "  alp ")] == ["1.md"]

    def test_result_limit(self):
        catalog = [NoteEntry(f"{i}.md", f"note {i}") for i in range(50)]
        results = search(catalog, "note")
        assert len(results) == 20
        assert results[0].ref == "0.md"
        assert len(search(catalog, "note", limit=5)) == 5

    def test_unicode_normalization(self):
        catalog = [NoteEntry("cafe.md", "Cafe\u0301")]
        assert search(catalog, "CAF\u00c9") == catalog
