"""Tests for the prefix-tree dictionary and the obfuscation normalizer."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from profanity_redactor import Trie, normalize_obfuscated, EXTENDED_CHAR_MAP
from profanity_redactor.normalizer import lowercase_with_spans, normalize_with_spans
from profanity_redactor.patterns import iter_tokens, strip_non_alnum


# ── Trie ─────────────────────────────────────────────────────────────

def test_contains_exact_only():
    t = Trie(["assassin"])
    assert t.contains("assassin")
    assert not t.contains("ass")
    assert not t.contains("assassins")
    assert not t.contains("")


def test_contains_in_finds_words_anywhere():
    t = Trie(["bad"])
    assert t.contains_in("xxbadxx")
    assert t.contains_in("bad")
    assert not t.contains_in("bxaxd")
    assert not t.contains_in("")


def test_match_length_at_prefers_longest():
    t = Trie(["ass", "assassin"])
    assert t.match_length_at("assassins", 0) == 8
    assert t.match_length_at("assa", 0) == 3
    assert t.match_length_at("assassin", 1) == 0
    assert t.match_length_at("xassassin", 1) == 8
    assert t.match_length_at("ass", 5) == 0


def test_empty_trie_matches_nothing():
    t = Trie()
    assert not t.contains_in("anything")
    assert t.match_length_at("anything", 0) == 0
    assert t.size == 0


def test_size_ignores_duplicates():
    t = Trie(["a", "a", "ab"])
    assert t.size == len(t) == 2
    assert "ab" in t
    assert "b" not in t


def test_iteration_is_lexicographic():
    t = Trie(["b", "abc", "ab"])
    assert list(t) == ["ab", "abc", "b"]


def test_lookups_are_case_sensitive():
    t = Trie(["bad"])
    assert not t.contains("BAD")
    assert not t.contains_in("BAD")


# ── Normalizer ───────────────────────────────────────────────────────

def test_normalize_substitutions_and_case():
    assert normalize_obfuscated("B@@@dW0rd") == "badword"
    assert normalize_obfuscated("$h1t") == "shit"
    assert normalize_obfuscated("") == ""


def test_normalize_collapses_runs():
    assert normalize_obfuscated("baaadword") == "badword"
    assert normalize_obfuscated("baaadword", max_repeats=2) == "baadword"
    # Runs are counted on mapped characters
    assert normalize_obfuscated("a@A") == "a"


def test_normalize_char_maps():
    assert normalize_obfuscated("n3rd") == "n3rd"
    assert normalize_obfuscated("n3rd", char_map=EXTENDED_CHAR_MAP) == "nerd"
    assert normalize_obfuscated("b@d", char_map={}) == "b@d"


def test_normalize_spans_fold_collapsed_characters():
    normalized, spans = normalize_with_spans("baaad!")
    assert normalized == "bad!"
    assert spans == [(0, 1), (1, 4), (4, 5), (5, 6)]


def test_lowercase_spans_are_identity():
    normalized, spans = lowercase_with_spans("AaA@")
    assert normalized == "aaa@"
    assert spans == [(0, 1), (1, 2), (2, 3), (3, 4)]


# ── Tokenization ─────────────────────────────────────────────────────

def test_tokens_use_fixed_character_class():
    tokens = [m.group() for m in iter_tokens("b@a@dword, so-so! $hit (ok)")]
    assert tokens == ["b@a@dword", "so-so", "hit", "ok"]


def test_strip_non_alnum():
    assert strip_non_alnum("b.a-d w0rd!") == "badw0rd"
