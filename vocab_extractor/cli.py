from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .cleaning import ExtractionOptions, env_path
from .vocabulary import merge_known_words, run_extraction

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


def _add_shared_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--known-words",
        type=Path,
        default=env_path("VOCAB_KNOWN_WORDS_PATH", "known-words.txt"),
        help="Newline-delimited list of words already learned (default: %(default)s or VOCAB_KNOWN_WORDS_PATH)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=env_path("VOCAB_OUTPUT_PATH", "output.txt"),
        help="Extracted word list (default: %(default)s or VOCAB_OUTPUT_PATH)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract unfamiliar vocabulary from foreign-language text")
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser("extract", help="Write the words in the input that are not yet known")
    extract_parser.add_argument(
        "--input",
        type=Path,
        default=env_path("VOCAB_INPUT_PATH", "input.txt"),
        help="Text to extract words from (default: %(default)s or VOCAB_INPUT_PATH)",
    )
    extract_parser.add_argument(
        "--special-chars",
        type=Path,
        default=env_path("VOCAB_SPECIAL_CHARS_PATH", "special-chars.txt"),
        help="File whose characters are stripped from the input (default: %(default)s or VOCAB_SPECIAL_CHARS_PATH)",
    )
    extract_parser.add_argument(
        "--ignored-words",
        type=Path,
        default=env_path("VOCAB_IGNORED_WORDS_PATH", "ignored-words.txt"),
        help="Newline-delimited list of words to skip (default: %(default)s or VOCAB_IGNORED_WORDS_PATH)",
    )
    _add_shared_arguments(extract_parser)
    extract_parser.add_argument(
        "--pipeline",
        choices=["lines", "nltk"],
        default=os.getenv("VOCAB_TOKENIZER_PIPELINE", "lines"),
        help="Tokenization pipeline to use (default: %(default)s or VOCAB_TOKENIZER_PIPELINE)",
    )
    extract_parser.add_argument(
        "--language",
        default=os.getenv("VOCAB_LANGUAGE", "english"),
        help="Punkt model used by the nltk pipeline, e.g. 'german' (default: %(default)s or VOCAB_LANGUAGE)",
    )
    extract_parser.add_argument(
        "--stopwords-language",
        default=os.getenv("VOCAB_STOPWORDS_LANGUAGE"),
        help="Also ignore NLTK's stop words for this language, e.g. 'german' (or VOCAB_STOPWORDS_LANGUAGE)",
    )

    learn_parser = subparsers.add_parser("learn", help="Merge the extracted words into the known-word list")
    _add_shared_arguments(learn_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "extract":
        options = ExtractionOptions(
            pipeline=args.pipeline,
            language=args.language,
            stopwords_language=args.stopwords_language,
        )
        run_extraction(
            args.input,
            args.special_chars,
            args.ignored_words,
            args.known_words,
            args.output,
            options=options,
        )
    elif args.command == "learn":
        merge_known_words(args.output, args.known_words)
    else:
        parser.error("No command provided")


def extract_cli() -> None:
    argv = sys.argv[1:]
    main(["extract", *argv])


def learn_cli() -> None:
    argv = sys.argv[1:]
    main(["learn", *argv])


if __name__ == "__main__":
    main()
