from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Sequence, Set

from nltk import word_tokenize
from nltk.corpus import stopwords

LOGGER = logging.getLogger(__name__)

WHITESPACE_PATTERN = re.compile(r"\s+")
LINE_BREAKS = {"\n", "\r"}


@dataclass(frozen=True)
class ExtractionOptions:
    """Configuration for normalizing and tokenizing input text."""

    pipeline: str = "lines"  # "lines" or "nltk"
    language: str = "english"
    stopwords_language: str | None = None


def env_path(var_name: str, default: str) -> Path:
    return Path(os.getenv(var_name, default))


def _ensure_file_exists(path: Path, description: str) -> None:
    if not path.exists():
        raise FileNotFoundError(f"{description} does not exist: {path}")
    if not path.is_file():
        raise ValueError(f"{description} is not a file: {path}")


def load_text(path: Path, description: str = "Input file") -> str:
    _ensure_file_exists(path, description)
    text = path.read_text(encoding="utf-8")
    LOGGER.debug("Loaded %d characters from %s", len(text), path)
    return text


def load_special_characters(path: Path) -> List[str]:
    """Load the characters to strip, in file order, ignoring line breaks."""

    text = load_text(path, "Special characters file")
    return [char for char in text if char not in LINE_BREAKS]


def load_words(path: Path, description: str = "Word list file") -> List[str]:
    """Load a newline-delimited word list, skipping empty lines."""

    text = load_text(path, description)
    words = [line for line in text.splitlines() if line]
    LOGGER.debug("Loaded %d words from %s", len(words), path)
    return words


def load_stop_words(language: str) -> Set[str]:
    LOGGER.debug("Loading NLTK stop words for %s", language)
    return set(stopwords.words(language))


def flatten_text(text: str) -> str:
    """Put every whitespace-separated word on its own line."""

    return WHITESPACE_PATTERN.sub("\n", text)


def remove_characters(text: str, chars: Sequence[str]) -> str:
    """Remove every literal occurrence of each character, in list order."""

    cleaned = text
    for char in chars:
        cleaned = cleaned.replace(char, "")
    return cleaned


def normalize_text(text: str, special_chars: Sequence[str]) -> str:
    LOGGER.info("...lower-casing input")
    cleaned = text.lower()
    LOGGER.info("...flattening input")
    cleaned = flatten_text(cleaned)
    LOGGER.info("...removing %d special characters", len(special_chars))
    return remove_characters(cleaned, special_chars)


def _line_tokenizer() -> Callable[[str], List[str]]:
    def tokenizer(text: str) -> List[str]:
        return [line for line in text.split("\n") if line]

    return tokenizer


def _nltk_tokenizer(language: str) -> Callable[[str], List[str]]:
    def tokenizer(text: str) -> List[str]:
        tokens = word_tokenize(text, language=language)
        return [token for token in tokens if any(char.isalnum() for char in token)]

    return tokenizer


def build_tokenizer(options: ExtractionOptions) -> Callable[[str], List[str]]:
    if options.pipeline == "lines":
        return _line_tokenizer()
    if options.pipeline == "nltk":
        return _nltk_tokenizer(options.language)
    raise ValueError(f"Unknown pipeline '{options.pipeline}'. Expected 'lines' or 'nltk'.")
