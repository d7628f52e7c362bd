"""Word list loading: the packaged default list and caller-supplied files."""

from __future__ import annotations
import logging
from importlib import resources
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

_DEFAULT_LIST = "words.txt"


def _parse_lines(lines: Iterable[str]) -> list[str]:
    words: list[str] = []
    for line in lines:
        word = line.strip().lower()
        if word and not word.startswith("#"):
            words.append(word)
    return words


def load_default_words() -> list[str]:
    """Return the packaged default flagged-word list."""
    text = resources.files(__package__).joinpath("data").joinpath(_DEFAULT_LIST).read_text(encoding="utf-8")
    words = _parse_lines(text.splitlines())
    logger.debug("loaded %d default words", len(words))
    return words


def load_word_file(path: str | Path) -> list[str]:
    """Read a newline-delimited word list. Blank lines and ``#`` comments are skipped."""
    with open(path, encoding="utf-8") as f:
        words = _parse_lines(f)
    logger.debug("loaded %d words from %s", len(words), path)
    return words
