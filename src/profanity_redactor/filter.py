"""Filter: the main API.  Detect, locate and redact flagged words.

Usage:
    from profanity_redactor import Filter, FilterConfig

    f = Filter(FilterConfig(replace_with="*", include_words={"badword", "nasty"}))

    f.detect("what a b@dw0rd")            # True
    f.sanitize("badword, nasty! Hello.")   # "*******, *****! Hello."
    f.get_matches("so baaadword")          # [Match(word="baaadword", start=3, end=12)]

Two scanning strategies:

    word_boundaries=True   match whole tokens only ("bad" but not "badly")
    word_boundaries=False  match anywhere in the text, longest entry first

Insertion (``insert_word``) mutates the dictionary in place and is not
synchronized; finish configuring before serving concurrent reads.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from .normalizer import (
    DEFAULT_CHAR_MAP,
    Span,
    lowercase_with_spans,
    normalize_obfuscated,
    normalize_with_spans,
)
from .patterns import iter_tokens, strip_non_alnum
from .trie import Trie
from .types import Match, SanitizedText
from .wordlist import load_default_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterConfig:
    """Configuration for the Filter."""
    word_boundaries: bool = False       # match whole tokens only
    parse_obfuscated: bool = True       # normalize look-alikes and repeats
    replace_with: str = ""              # 1 char = repeated per character, else literal
    disable_default_list: bool = False
    # Removed from the base list only; include_words always wins
    exclude_words: frozenset[str] = field(default_factory=frozenset)
    include_words: frozenset[str] = field(default_factory=frozenset)
    max_repeats: int = 1                # longest run of one character kept
    # Single characters on both sides; mappingproxy is unhashable
    char_map: Mapping[str, str] = field(default_factory=lambda: DEFAULT_CHAR_MAP, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclude_words", frozenset(w.lower() for w in self.exclude_words))
        object.__setattr__(self, "include_words", frozenset(w.lower() for w in self.include_words))
        object.__setattr__(self, "max_repeats", max(1, int(self.max_repeats)))
        for src, dst in self.char_map.items():
            if len(src) != 1 or len(dst) != 1:
                raise ValueError(f"char_map entries must map one character to one character: {src!r} -> {dst!r}")


class Filter:
    """Flagged-word filter over a prefix-tree dictionary.

    The dictionary is ``base - exclude_words + include_words`` where the
    base is *default_words* if given, else the packaged default list.
    """

    def __init__(
        self,
        config: FilterConfig | None = None,
        *,
        default_words: Iterable[str] | None = None,
    ) -> None:
        self.config = config or FilterConfig()
        self._trie = Trie()

        if self.config.disable_default_list:
            base: Iterable[str] = ()
        elif default_words is None:
            base = load_default_words()
        else:
            base = default_words

        excluded = self.config.exclude_words
        self.insert_words(w for w in base if w.lower() not in excluded)
        self.insert_words(self.config.include_words)
        logger.debug(
            "dictionary built: %d words (boundaries=%s, obfuscated=%s)",
            self._trie.size, self.config.word_boundaries, self.config.parse_obfuscated,
        )

    @property
    def words(self) -> Trie:
        """The underlying dictionary (read-only use; insert through the filter)."""
        return self._trie

    # ------------------------------------------------------------------
    # Dictionary
    # ------------------------------------------------------------------

    def insert_word(self, word: str) -> None:
        """Add a flagged word at runtime.

        Words are only lowercased.  With obfuscation parsing on, queries are
        run-collapsed first, so a word spelled with a doubled letter must be
        given already collapsed ("as" rather than "ass") to be matchable.
        """
        word = word.lower()
        if not word:
            logger.warning("ignoring empty dictionary word")
            return
        self._trie.insert(word)

    def insert_words(self, words: Iterable[str]) -> None:
        for word in words:
            self.insert_word(word)

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def detect(self, text: str, word_boundaries: bool | None = None) -> bool:
        """Whether *text* contains a flagged word."""
        if self._boundaries(word_boundaries):
            return any(
                self._trie.contains(self._canonical(m.group()))
                for m in iter_tokens(text)
            )
        # Punctuation and spacing must not split a word to slip it through
        return self._trie.contains_in(strip_non_alnum(self._canonical(text)))

    def get_matches(self, text: str, word_boundaries: bool | None = None) -> list[Match]:
        """All flagged words in *text*, left to right, with original offsets."""
        if self._boundaries(word_boundaries):
            return [
                Match(word=m.group(), start=m.start(), end=m.end())
                for m in iter_tokens(text)
                if self._trie.contains(self._canonical(m.group()))
            ]

        normalized, spans = self._spans(text)
        matches: list[Match] = []
        i = 0
        while i < len(normalized):
            length = self._trie.match_length_at(normalized, i)
            if length:
                start, end = spans[i][0], spans[i + length - 1][1]
                matches.append(Match(word=text[start:end], start=start, end=end))
                i += length
            else:
                i += 1
        return matches

    def sanitize(
        self,
        text: str,
        replace_with: str | None = None,
        word_boundaries: bool | None = None,
    ) -> str:
        """Return *text* with every flagged word replaced."""
        return self.redact(text, replace_with, word_boundaries).text

    def redact(
        self,
        text: str,
        replace_with: str | None = None,
        word_boundaries: bool | None = None,
    ) -> SanitizedText:
        """Sanitize *text* and report what was replaced.

        A one-character *replace_with* is repeated to the length of the
        original span; anything else (including "") is used literally.
        Text between matches is copied through unchanged.
        """
        replacement = self.config.replace_with if replace_with is None else replace_with
        matches = self.get_matches(text, word_boundaries)

        parts: list[str] = []
        last = 0
        for m in matches:
            parts.append(text[last:m.start])
            parts.append(replacement * (m.end - m.start) if len(replacement) == 1 else replacement)
            last = m.end
        parts.append(text[last:])

        return SanitizedText(text="".join(parts), matches=matches)

    def sanitize_messages(
        self,
        messages: list[dict],
        *,
        replace_with: str | None = None,
        word_boundaries: bool | None = None,
        content_key: str = "content",
    ) -> list[dict]:
        """Sanitize a list of OpenAI-format chat messages.

        Returns new message dicts.  Does NOT mutate the originals.
        """
        out: list[dict] = []
        for msg in messages:
            content = msg.get(content_key)
            if isinstance(content, str) and content:
                out.append({**msg, content_key: self.sanitize(content, replace_with, word_boundaries)})
            else:
                out.append(msg)
        return out

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _boundaries(self, override: bool | None) -> bool:
        return self.config.word_boundaries if override is None else override

    def _canonical(self, text: str) -> str:
        if self.config.parse_obfuscated:
            return normalize_obfuscated(text, self.config.max_repeats, self.config.char_map)
        return text.lower()

    def _spans(self, text: str) -> tuple[str, list[Span]]:
        if self.config.parse_obfuscated:
            return normalize_with_spans(text, self.config.max_repeats, self.config.char_map)
        return lowercase_with_spans(text)
