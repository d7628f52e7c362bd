"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Match:
    """A single flagged word found in the original text."""
    word: str              # literal substring of the unnormalized input
    start: int
    end: int               # exclusive


@dataclass(slots=True)
class SanitizedText:
    """Result of sanitizing a piece of text."""
    text: str                                   # text with flagged words replaced
    matches: list[Match] = field(default_factory=list)

    @property
    def profane(self) -> bool:
        return bool(self.matches)
