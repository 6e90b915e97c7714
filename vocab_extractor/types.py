from __future__ import annotations

from typing import TypedDict


class ExtractionReport(TypedDict):
    """Summary of a single extraction run."""

    token_count: int
    unique_count: int
    ignored_removed: int
    known_removed: int
    words: list[str]
