"""Tests for the banned-word filter and its loader."""

import pytest

from reviewdesk.errors import LoadError
from reviewdesk.moderation.word_filter import BannedWordFilter, load_banned_words


def test_contains_is_case_insensitive():
    f = BannedWordFilter.from_lines(["Spam"])
    assert f.contains("buy SPAM now")
    assert f.contains("spam")
    assert not f.contains("lovely ham")


def test_substring_inside_longer_word_matches():
    f = BannedWordFilter.from_lines(["spam"])
    assert f.contains("this is SPAMtastic")


def test_empty_filter_accepts_everything():
    f = BannedWordFilter()
    assert len(f) == 0
    assert not f.contains("anything at all")


def test_blank_and_whitespace_only_lines_are_ignored():
    f = BannedWordFilter.from_lines(["", "scam", "   ", "\t"])
    assert f.words == frozenset({"scam"})
    assert not f.contains("perfectly fine text")
    assert f.contains("a SCAM")


def test_padded_entry_keeps_its_padding():
    f = BannedWordFilter.from_lines([" Ham "])
    assert f.words == frozenset({" ham "})
    assert not f.contains("I love hamburgers")
    assert f.contains("green eggs and HAM please")


def test_find_returns_first_word_in_sorted_order():
    f = BannedWordFilter.from_lines(["zzz", "abc"])
    assert f.find("abc and zzz") == "abc"
    assert f.find("clean") is None


def test_iteration_is_sorted():
    f = BannedWordFilter.from_lines(["b", "a", "B"])
    assert list(f) == ["a", "b"]


def test_load_banned_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Spam\nSCAM\n\nfraud\n", encoding="utf-8")

    f = load_banned_words(path)
    assert len(f) == 3
    assert f.contains("Total FRAUD")


def test_load_missing_file_raises_load_error(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(LoadError) as exc_info:
        load_banned_words(missing)
    assert exc_info.value.path == str(missing)
    assert isinstance(exc_info.value, OSError)
