"""Classify raw user input before it may trigger a search."""

from __future__ import annotations

from dataclasses import dataclass

MIN_QUERY_LENGTH = 3


@dataclass(frozen=True, slots=True)
class Eligible:
    text: str


@dataclass(frozen=True, slots=True)
class TooShort:
    text: str


class QueryNormalizer:
    def __init__(self, min_length: int = MIN_QUERY_LENGTH) -> None:
        if min_length < 1:
            raise ValueError("min_length must be positive")
        self.min_length = min_length

    def accept(self, raw_text: str | None) -> Eligible | TooShort:
        text = (raw_text or "").strip()
        if len(text) < self.min_length:
            return TooShort(text)
        return Eligible(text)


__all__ = ["Eligible", "MIN_QUERY_LENGTH", "QueryNormalizer", "TooShort"]
