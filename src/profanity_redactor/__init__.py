"""profanity-redactor: fast, deterministic flagged-word detection and redaction."""

from .filter import Filter, FilterConfig
from .trie import Trie
from .normalizer import DEFAULT_CHAR_MAP, EXTENDED_CHAR_MAP, normalize_obfuscated
from .config import create_filter, load_config, load_from_yaml
from .wordlist import load_default_words, load_word_file
from .types import Match, SanitizedText

__all__ = [
    "Filter", "FilterConfig",
    "Trie",
    "DEFAULT_CHAR_MAP", "EXTENDED_CHAR_MAP", "normalize_obfuscated",
    "create_filter", "load_config", "load_from_yaml",
    "load_default_words", "load_word_file",
    "Match", "SanitizedText",
]
__version__ = "0.1.0"
