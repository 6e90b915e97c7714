from __future__ import annotations

from pathlib import Path

import pytest
import vocab_extractor.cleaning as cleaning
from vocab_extractor.cleaning import (
    ExtractionOptions,
    build_tokenizer,
    flatten_text,
    load_special_characters,
    load_words,
    normalize_text,
    remove_characters,
)
from pytest import MonkeyPatch


class DummyStopwords:
    def words(self, language: str) -> list[str]:
        assert language == "german"
        return ["und", "der", "die"]


def test_remove_characters_is_literal() -> None:
    text = "a.b*c(d)e[f]g\\h"

    assert remove_characters(text, [".", "*", "(", ")", "[", "]", "\\"]) == "abcdefgh"


def test_flatten_text_puts_each_word_on_its_own_line() -> None:
    assert flatten_text("der  Hund\tbellt\r\nlaut") == "der\nHund\nbellt\nlaut"


def test_normalize_text_lowercases_flattens_and_strips() -> None:
    normalized = normalize_text("Der Hund, die Katze.\nÄPFEL!", [",", ".", "!"])

    assert normalized == "der\nhund\ndie\nkatze\näpfel"


def test_line_tokenizer_discards_empty_entries() -> None:
    tokenizer = build_tokenizer(ExtractionOptions())
    normalized = normalize_text("hallo - welt", ["-"])

    assert tokenizer(normalized) == ["hallo", "welt"]


def test_nltk_tokenizer_drops_punctuation_tokens(monkeypatch: MonkeyPatch) -> None:
    def fake_word_tokenize(text: str, language: str = "english") -> list[str]:
        assert language == "german"
        return ["guten", "tag", ",", "welt", "..."]

    monkeypatch.setattr(cleaning, "word_tokenize", fake_word_tokenize)
    tokenizer = build_tokenizer(ExtractionOptions(pipeline="nltk", language="german"))

    assert tokenizer("guten tag, welt...") == ["guten", "tag", "welt"]


def test_unknown_pipeline_raises() -> None:
    with pytest.raises(ValueError, match="Unknown pipeline"):
        build_tokenizer(ExtractionOptions(pipeline="spacy"))


def test_load_words_handles_crlf_and_blank_lines(tmp_path: Path) -> None:
    word_file = tmp_path / "known-words.txt"
    word_file.write_bytes("haus\r\n\r\nBaum\r\nkatze\n".encode("utf-8"))

    assert load_words(word_file) == ["haus", "Baum", "katze"]


def test_load_special_characters_skips_line_breaks(tmp_path: Path) -> None:
    chars_file = tmp_path / "special-chars.txt"
    chars_file.write_text(".,!?\n«»\n", encoding="utf-8")

    assert load_special_characters(chars_file) == [".", ",", "!", "?", "«", "»"]


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Ignored words file does not exist"):
        load_words(tmp_path / "ignored-words.txt", "Ignored words file")


def test_load_stop_words_uses_nltk_corpus(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(cleaning, "stopwords", DummyStopwords())

    assert cleaning.load_stop_words("german") == {"und", "der", "die"}
