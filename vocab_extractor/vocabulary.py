from __future__ import annotations

import logging
from pathlib import Path
from typing import Collection, Iterable, List, Sequence

from vocab_extractor.cleaning import (
    ExtractionOptions,
    build_tokenizer,
    load_special_characters,
    load_stop_words,
    load_text,
    load_words,
    normalize_text,
)
from vocab_extractor.types import ExtractionReport

LOGGER = logging.getLogger(__name__)


def unique_sorted(words: Iterable[str]) -> List[str]:
    """Deduplicate and order words by code point."""

    return sorted(set(words))


def remove_words(words: Sequence[str], words_to_remove: Collection[str]) -> List[str]:
    excluded = set(words_to_remove)
    return [word for word in words if word not in excluded]


def extract_vocabulary(
    text: str,
    *,
    special_chars: Sequence[str],
    ignored_words: Collection[str],
    known_words: Collection[str],
    options: ExtractionOptions | None = None,
) -> ExtractionReport:
    """Return the sorted unfamiliar words found in ``text``."""

    extraction_options = options or ExtractionOptions()
    tokenizer = build_tokenizer(extraction_options)

    normalized = normalize_text(text, special_chars)
    tokens = tokenizer(normalized)

    LOGGER.info("...sorting and removing duplicates")
    words = unique_sorted(tokens)
    unique_count = len(words)

    LOGGER.info("...removing ignored words")
    words = remove_words(words, ignored_words)
    ignored_removed = unique_count - len(words)

    LOGGER.info("...removing known words")
    remaining = remove_words(words, known_words)
    known_removed = len(words) - len(remaining)

    return {
        "token_count": len(tokens),
        "unique_count": unique_count,
        "ignored_removed": ignored_removed,
        "known_removed": known_removed,
        "words": remaining,
    }


def write_words(words: Iterable[str], output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    LOGGER.info("...writing output to %s", output_path)
    output_path.write_text("\n".join(words), encoding="utf-8")


def run_extraction(
    input_path: Path,
    special_chars_path: Path,
    ignored_words_path: Path,
    known_words_path: Path,
    output_path: Path,
    *,
    options: ExtractionOptions | None = None,
) -> ExtractionReport:
    """Read the input files, extract unfamiliar words and write them out."""

    extraction_options = options or ExtractionOptions()
    LOGGER.info("Process started...")

    special_chars = load_special_characters(special_chars_path)
    ignored_words = set(load_words(ignored_words_path, "Ignored words file"))
    known_words = load_words(known_words_path, "Known words file")
    if extraction_options.stopwords_language:
        ignored_words.update(load_stop_words(extraction_options.stopwords_language))

    LOGGER.info("...reading input")
    text = load_text(input_path, "Input file")

    report = extract_vocabulary(
        text,
        special_chars=special_chars,
        ignored_words=ignored_words,
        known_words=known_words,
        options=extraction_options,
    )
    write_words(report["words"], output_path)

    LOGGER.info(
        "Process ended: %d tokens, %d unique, %d ignored, %d known, %d new",
        report["token_count"],
        report["unique_count"],
        report["ignored_removed"],
        report["known_removed"],
        len(report["words"]),
    )
    return report


def merge_known_words(output_path: Path, known_words_path: Path) -> int:
    """Fold the extracted words into the known-word list and return how many were new."""

    extracted = load_words(output_path, "Output file")
    known = load_words(known_words_path, "Known words file")

    merged = unique_sorted([*known, *extracted])
    added = len(merged) - len(set(known))
    LOGGER.info("Adding %d words to %s", added, known_words_path)
    write_words(merged, known_words_path)
    return added
