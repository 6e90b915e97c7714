"""Utilities for extracting unfamiliar vocabulary from foreign-language text."""

from .cleaning import ExtractionOptions, normalize_text
from .types import ExtractionReport
from .vocabulary import extract_vocabulary, merge_known_words, run_extraction

__all__ = [
    "ExtractionOptions",
    "normalize_text",
    "extract_vocabulary",
    "run_extraction",
    "merge_known_words",
    "ExtractionReport",
]
