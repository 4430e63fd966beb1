from __future__ import annotations

import logging

import pytest

from word_exam.core.exceptions import InvalidArgumentError, WordLibraryUnavailableError
from word_exam.core.models import WordEntry
from word_exam.core.word_library import (
    DEFAULT_LIBRARY_PATH,
    WordLibrary,
    fallback_word_library,
    load_word_library,
    load_word_library_or_fallback,
    parse_word_library,
)


def test_parse_splits_on_first_comma_and_skips_bad_lines():
    text = "\n".join(
        [
            "cat, a small feline ",
            "",
            "no comma here",
            "tedious,too long, slow, or dull",
            ",missing word",
            "missing definition,",
        ]
    )

    library = parse_word_library(text)

    assert dict(library) == {
        "cat": "a small feline",
        "tedious": "too long, slow, or dull",
    }


def test_duplicate_word_keeps_last_definition():
    library = parse_word_library("cat,first\ndog,canine\ncat,second")

    assert library["cat"] == "second"
    assert list(library) == ["cat", "dog"]


def test_library_is_read_only_mapping():
    library = WordLibrary({"cat": "feline"})

    with pytest.raises(TypeError):
        library["dog"] = "canine"
    assert library.entries() == [WordEntry("cat", "feline")]


def test_definition_of_unknown_word():
    library = WordLibrary([("cat", "feline")])

    assert library.definition_of("cat") == "feline"
    with pytest.raises(InvalidArgumentError):
        library.definition_of("dog")


def test_load_word_library_reads_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat,feline\ndog,canine\n", encoding="utf-8")

    assert dict(load_word_library(path)) == {"cat": "feline", "dog": "canine"}


def test_missing_file_is_unavailable(tmp_path):
    with pytest.raises(WordLibraryUnavailableError):
        load_word_library(tmp_path / "missing.txt")


def test_file_without_entries_is_unavailable(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n\nnot an entry\n", encoding="utf-8")

    with pytest.raises(WordLibraryUnavailableError):
        load_word_library(path)


def test_fallback_is_used_when_file_is_missing(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        library = load_word_library_or_fallback(tmp_path / "missing.txt")

    assert dict(library) == dict(fallback_word_library())
    assert len(library) == 20
    assert "built-in word library" in caplog.text


def test_bundled_library_loads():
    library = load_word_library(DEFAULT_LIBRARY_PATH)

    assert len(library) >= 20
    assert library["tedious"] == "too long, slow, or dull"
