"""Obfuscation normalizer: undo look-alike substitutions and letter stretching.

    normalize_obfuscated("B@@@dW0rd")   # "badword"

The span-tracking variant also reports, for every output character, the
slice of the input it came from, so matches found in normalized text can
be mapped back onto the original.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

DEFAULT_CHAR_MAP: Mapping[str, str] = MappingProxyType({
    "@": "a",
    "$": "s",
    "1": "i",
    "0": "o",
})

EXTENDED_CHAR_MAP: Mapping[str, str] = MappingProxyType({
    **DEFAULT_CHAR_MAP,
    "3": "e",
})

_NO_MAP: Mapping[str, str] = MappingProxyType({})

Span = tuple[int, int]


def _lower(char: str) -> str:
    lowered = char.lower()
    # Characters whose lowercase form is longer (e.g. "İ") stay as-is so the
    # output keeps one character per kept input character.
    return lowered if len(lowered) == 1 else char


def normalize_with_spans(
    text: str,
    max_repeats: int | None = 1,
    char_map: Mapping[str, str] | None = None,
) -> tuple[str, list[Span]]:
    """Normalize *text* and return ``(normalized, spans)``.

    ``spans[k]`` is the ``(start, end)`` slice of *text* that produced
    ``normalized[k]``; characters dropped by run collapsing are folded into
    the span of the character they repeat. ``max_repeats=None`` disables
    collapsing.
    """
    table = DEFAULT_CHAR_MAP if char_map is None else char_map
    out: list[str] = []
    spans: list[Span] = []
    last = ""
    run = 0

    for i, char in enumerate(text):
        lowered = _lower(char)
        mapped = table.get(lowered, lowered)

        if mapped == last:
            run += 1
            if max_repeats is not None and run > max_repeats:
                start, _ = spans[-1]
                spans[-1] = (start, i + 1)
                continue
        else:
            last = mapped
            run = 1

        out.append(mapped)
        spans.append((i, i + 1))

    return "".join(out), spans


def normalize_obfuscated(
    text: str,
    max_repeats: int = 1,
    char_map: Mapping[str, str] | None = None,
) -> str:
    """Lowercase, substitute look-alikes and collapse repeated characters."""
    return normalize_with_spans(text, max_repeats, char_map)[0]


def lowercase_with_spans(text: str) -> tuple[str, list[Span]]:
    """Per-character lowercasing with identity spans (no substitution, no collapsing)."""
    return normalize_with_spans(text, None, _NO_MAP)
