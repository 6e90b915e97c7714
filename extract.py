"""Compatibility wrapper for extracting vocabulary from the working directory.

Reads input.txt, special-chars.txt, ignored-words.txt and known-words.txt and
writes output.txt. Use the packaged CLI for other paths:
    python -m vocab_extractor.cli extract --help
or install the package and run `vocab-extractor extract`.
"""

from vocab_extractor.cli import extract_cli


if __name__ == "__main__":
    extract_cli()
