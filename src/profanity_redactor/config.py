"""YAML/dict config loader for profanity-redactor.

Supports loading from a YAML file or a plain dict (for embedding
in a larger application config).

Example YAML:

    profanity_filter:
      enabled: true
      word_boundaries: false
      parse_obfuscated: true
      replace_with: "*"
      max_repeats: 1
      extended_char_map: false   # also map 3 -> e
      disable_default_list: false
      words_file: ~/moderation/words.txt   # replaces the packaged list
      exclude_words:
        - damn
      include_words:
        - frak
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

import yaml

from .filter import Filter, FilterConfig
from .normalizer import DEFAULT_CHAR_MAP, EXTENDED_CHAR_MAP
from .types import Match, SanitizedText
from .wordlist import load_word_file


class _NoopFilter(Filter):
    """Pass-through filter when filtering is disabled."""

    def __init__(self) -> None:
        super().__init__(FilterConfig(disable_default_list=True))

    def insert_word(self, word: str) -> None:
        pass

    def detect(self, text: str, word_boundaries: bool | None = None) -> bool:
        return False

    def get_matches(self, text: str, word_boundaries: bool | None = None) -> list[Match]:
        return []

    def redact(self, text: str, replace_with: str | None = None,
               word_boundaries: bool | None = None) -> SanitizedText:
        return SanitizedText(text=text)


def _as_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    # Environment-style strings ("false", "0") arrive from CLI/env overrides
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "profanity_filter" key or flat
    if "profanity_filter" in data:
        data = data["profanity_filter"] or {}

    words_file = data.get("words_file")
    return {
        "enabled": _as_bool(data.get("enabled"), True),
        "word_boundaries": _as_bool(data.get("word_boundaries")),
        "parse_obfuscated": _as_bool(data.get("parse_obfuscated"), True),
        "replace_with": str(data.get("replace_with") or ""),
        "max_repeats": int(data.get("max_repeats") or 1),
        "extended_char_map": _as_bool(data.get("extended_char_map")),
        "disable_default_list": _as_bool(data.get("disable_default_list")),
        "words_file": str(Path(words_file).expanduser()) if words_file else None,
        "exclude_words": set(data.get("exclude_words") or []),
        "include_words": set(data.get("include_words") or []),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    with open(path, encoding="utf-8") as f:
        return load_config(yaml.safe_load(f))


def build_filter_config(cfg: dict[str, Any]) -> FilterConfig:
    """Turn a normalized config dict into a FilterConfig."""
    return FilterConfig(
        word_boundaries=cfg["word_boundaries"],
        parse_obfuscated=cfg["parse_obfuscated"],
        replace_with=cfg["replace_with"],
        disable_default_list=cfg["disable_default_list"],
        exclude_words=frozenset(cfg["exclude_words"]),
        include_words=frozenset(cfg["include_words"]),
        max_repeats=cfg["max_repeats"],
        char_map=EXTENDED_CHAR_MAP if cfg["extended_char_map"] else DEFAULT_CHAR_MAP,
    )


def create_filter(config: dict[str, Any] | None = None) -> Filter:
    """Create a fully configured filter from a config dict."""
    cfg = load_config(config)

    if not cfg["enabled"]:
        # Return a pass-through filter (never matches)
        return _NoopFilter()

    default_words = load_word_file(cfg["words_file"]) if cfg["words_file"] else None
    return Filter(build_filter_config(cfg), default_words=default_words)
