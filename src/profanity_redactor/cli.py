"""CLI interface for profanity-redactor.

Usage:
    # Is the text profane? (stdin: text, stdout: {"profane": true})
    echo 'what a b@dw0rd' | python -m profanity_redactor.cli detect

    # Sanitize text (stdin: text, stdout: sanitized text + matches as JSON)
    echo 'badword, nasty!' | python -m profanity_redactor.cli --replace-with '*' sanitize

    # Sanitize OpenAI messages (stdin: JSON array, stdout: sanitized JSON)
    echo '[{"role":"user","content":"nasty"}]' | \
        python -m profanity_redactor.cli sanitize-messages

    # List matches with offsets
    echo 'so baaadword' | python -m profanity_redactor.cli matches

    # Dump the dictionary
    python -m profanity_redactor.cli words

Options default to the YAML file named by PROFANITY_REDACTOR_CONFIG, if set.
"""

from __future__ import annotations
import argparse
import json
import os
import sys
from typing import Sequence

from .config import create_filter, load_config, load_from_yaml
from .filter import Filter
from .types import Match


DEFAULT_CONFIG = os.environ.get("PROFANITY_REDACTOR_CONFIG", "")


def _split(value: str) -> set[str]:
    return {w.strip() for w in value.split(",") if w.strip()}


def _build_filter(args: argparse.Namespace) -> Filter:
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    if args.word_boundaries:
        cfg["word_boundaries"] = True
    if args.no_obfuscation:
        cfg["parse_obfuscated"] = False
    if args.no_default_list:
        cfg["disable_default_list"] = True
    if args.replace_with is not None:
        cfg["replace_with"] = args.replace_with
    if args.max_repeats is not None:
        cfg["max_repeats"] = args.max_repeats
    if args.exclude:
        cfg["exclude_words"] |= _split(args.exclude)
    if args.include:
        cfg["include_words"] |= _split(args.include)
    return create_filter(cfg)


def _match_dict(m: Match) -> dict:
    return {"word": m.word, "start": m.start, "end": m.end}


def _emit(data: object) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_detect(args: argparse.Namespace) -> None:
    """Report whether stdin text contains a flagged word."""
    f = _build_filter(args)
    _emit({"profane": f.detect(sys.stdin.read())})


def cmd_sanitize(args: argparse.Namespace) -> None:
    """Sanitize plain text on stdin."""
    f = _build_filter(args)
    result = f.redact(sys.stdin.read())
    _emit({
        "text": result.text,
        "matches": [_match_dict(m) for m in result.matches],
    })


def cmd_sanitize_messages(args: argparse.Namespace) -> None:
    """Sanitize OpenAI-format messages on stdin."""
    f = _build_filter(args)
    messages = json.loads(sys.stdin.read())
    _emit(f.sanitize_messages(messages))


def cmd_matches(args: argparse.Namespace) -> None:
    """List flagged words in stdin text with their offsets."""
    f = _build_filter(args)
    _emit([_match_dict(m) for m in f.get_matches(sys.stdin.read())])


def cmd_words(args: argparse.Namespace) -> None:
    """Dump the resolved dictionary."""
    f = _build_filter(args)
    _emit(list(f.words))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="profanity_redactor",
        description="Flagged-word detection and redaction",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="YAML config path")
    parser.add_argument("--word-boundaries", action="store_true", help="Match whole words only")
    parser.add_argument("--no-obfuscation", action="store_true", help="Disable look-alike/repeat normalization")
    parser.add_argument("--no-default-list", action="store_true", help="Start from an empty dictionary")
    parser.add_argument("--replace-with", default=None, help="Replacement (1 char is repeated per character)")
    parser.add_argument("--max-repeats", type=int, default=None, help="Longest run of one character kept")
    parser.add_argument("--exclude", default="", help="Comma-separated words to drop from the base list")
    parser.add_argument("--include", default="", help="Comma-separated words to add")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("detect", help="Detect flagged words (text stdin)")
    sub.add_parser("sanitize", help="Sanitize plain text (text stdin)")
    sub.add_parser("sanitize-messages", help="Sanitize OpenAI messages (JSON stdin)")
    sub.add_parser("matches", help="List matches with offsets (text stdin)")
    sub.add_parser("words", help="Dump the dictionary")

    args = parser.parse_args(argv)

    cmds = {
        "detect": cmd_detect,
        "sanitize": cmd_sanitize,
        "sanitize-messages": cmd_sanitize_messages,
        "matches": cmd_matches,
        "words": cmd_words,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
