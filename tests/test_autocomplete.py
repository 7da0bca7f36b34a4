"""Tests for term loading and the autocomplete service."""

from textfill.config import settings
from textfill.services.autocomplete import (
    autocomplete_search,
    build_filler,
    load_terms,
    load_terms_file,
)
from textfill.services.ternary_tree import TernaryTreeTextFiller


def test_load_terms_plain_and_prioritized():
    filler = TernaryTreeTextFiller()
    added = load_terms(filler, ["search engine\t10", "search optimization\t5", "sorting"])
    assert added == 3
    assert filler.get_sorted_list() == [
        "search engine",
        "search optimization",
        "sorting",
    ]
    assert autocomplete_search(filler, "search", premium=True) == "search engine"


def test_load_terms_skips_comments_blanks_and_duplicates():
    filler = TernaryTreeTextFiller()
    lines = ["# header\n", "\n", "apple\n", "Apple\n", "   \n", "banana\n"]
    assert load_terms(filler, lines) == 2
    assert filler.size() == 2


def test_load_terms_skips_blank_terms(caplog):
    filler = TernaryTreeTextFiller()
    lines = ["good\t3", "   \t4"]
    with caplog.at_level("WARNING", logger="textfill.autocomplete"):
        assert load_terms(filler, lines) == 1
    assert filler.get_sorted_list() == ["good"]
    assert "Skipping line 2" in caplog.text


def test_load_terms_keeps_tab_inside_phrase():
    filler = TernaryTreeTextFiller()
    assert load_terms(filler, ["new york\tcity", "new york\tcity\t7"]) == 1
    assert filler.get_sorted_list() == ["new york\tcity"]
    assert filler._find("new york\tcity").terminal_priority == 0


def test_load_terms_default_priority(monkeypatch):
    monkeypatch.setattr(settings, "default_priority", 4)
    filler = TernaryTreeTextFiller()
    load_terms(filler, ["cat", "car\t9"])
    assert filler._find("cat").terminal_priority == 4
    assert filler._find("car").terminal_priority == 9


def test_load_terms_file(tmp_path):
    path = tmp_path / "terms.txt"
    path.write_text("Python Programming\t5\npython tips\t1\n", encoding="utf-8")
    filler = TernaryTreeTextFiller()
    assert load_terms_file(filler, str(path)) == 2
    assert filler.contains("python programming")


def test_build_filler(tmp_path):
    assert build_filler().empty()

    path = tmp_path / "terms.txt"
    path.write_text("a\nb\n", encoding="utf-8")
    assert build_filler(str(path)).size() == 2


def test_autocomplete_search_modes():
    filler = TernaryTreeTextFiller()
    filler.add("cat", 5)
    filler.add("car", 9)
    assert autocomplete_search(filler, "ca") == "cat"
    assert autocomplete_search(filler, "ca", premium=True) == "car"
    assert autocomplete_search(filler, "xyz") is None
