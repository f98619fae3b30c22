# src/e2e/test_loader_tokenize.py

from pathlib import Path

import pytest

from wordgraph.loader import corpus_from_lines, load_corpus
from wordgraph.normalize import clean_to_tokens, normalize_word


def test_clean_to_tokens_keeps_only_a_to_z():
    assert clean_to_tokens("Paul's 2nd visit -- to ARRAKIS!") == ["paul", "s", "nd", "visit", "to", "arrakis"]
    assert clean_to_tokens("   ") == []
    assert clean_to_tokens(None) == []
    assert clean_to_tokens("12345 ...") == []


def test_normalize_word_lowercases_and_trims():
    assert normalize_word("  Arrakis ") == "arrakis"
    assert normalize_word(None) == ""


def test_load_single_file_skips_empty_lines(tmp_path: Path):
    book = tmp_path / "book.txt"
    book.write_text("The spice must flow.\n\n--\nPaul Atreides\n", encoding="utf-8")
    corpus = load_corpus(str(book))
    assert [s.tokens for s in corpus.sentences] == [("the", "spice", "must", "flow"), ("paul", "atreides")]
    assert [s.line_no for s in corpus.sentences] == [1, 4]
    assert [s.id for s in corpus.sentences] == [0, 1]
    assert corpus.vocab == sorted(corpus.vocab)
    assert corpus.contains("spice") and not corpus.contains("worm")


def test_load_directory_recursively_in_sorted_order(tmp_path: Path):
    root = tmp_path / "books"
    (root / "b").mkdir(parents=True)
    (root / "b" / "two.txt").write_text("second file\n", encoding="utf-8")
    (root / "a.txt").write_text("first file\n", encoding="utf-8")
    (root / "notes.md").write_text("ignored here\n", encoding="utf-8")
    corpus = load_corpus([root])
    assert [s.path for s in corpus.sentences] == ["a.txt", "b/two.txt"]
    assert "ignored" not in corpus.vocab


def test_missing_source_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_corpus([tmp_path / "nope.txt"])


def test_no_sources_raises():
    with pytest.raises(ValueError):
        load_corpus([])


def test_corpus_from_lines():
    corpus = corpus_from_lines(["Hello world", "", "hello again"])
    assert len(corpus.sentences) == 2
    assert corpus.vocab == ["again", "hello", "world"]
