"""Tokenization patterns shared by the scanners.

A word token is a run of ``[A-Za-z0-9_@!$-]`` anchored on word boundaries,
so trailing punctuation such as the "!" in "bad!" is left in the gap
between tokens. ``re.ASCII`` pins ``\\w`` and ``\\b`` to the ASCII class.
"""

from __future__ import annotations
import re
from typing import Iterator

WORD_REGEX: re.Pattern[str] = re.compile(r"\b[\w@!$-]+\b", re.ASCII)

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def iter_tokens(text: str) -> Iterator[re.Match[str]]:
    """Yield word-token matches of *text*, left to right."""
    return WORD_REGEX.finditer(text)


def strip_non_alnum(text: str) -> str:
    """Drop everything outside ``[a-z0-9]`` (expects lowercased input)."""
    return _NON_ALNUM.sub("", text)
