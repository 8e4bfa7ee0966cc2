"""Command-line demo for the Kurdish "did you mean" speller.

Usage:
    python -m kurdish_didyoumean                  # run the built-in demo
    python -m kurdish_didyoumean maal کتب -n 5 -t 2
    python -m kurdish_didyoumean --wordlist words.txt --add کوردستان ئاسان
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import config as cfg_mod
from .exceptions import DidYouMeanError
from .logger import set_log_level
from .speller import SpellSuggester

DEMO_WORDS = (
    "سڵو",  # سڵاو
    "چنی",  # چۆنی
    "سپاس",  # سوپاس
    "maal",  # mal
    "silav",
    "pirtuk",  # pirtûk
    "dayik",
    "کتب",  # کتێب
    "xyz",
)
DEMO_ADDED_WORDS = ("کوردستان", "ئەمن", "ئاسمان")
DEMO_AFTER_ADD = "ئاسان"  # ئاسمان


def build_parser(defaults: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kurdish-didyoumean",
        description="Suggest corrections for misspelled Kurdish words",
    )
    parser.add_argument("words", nargs="*", help="Words to check (default: run the demo)")
    parser.add_argument(
        "--max-suggestions",
        "-n",
        type=int,
        default=defaults["max_suggestions"],
        help=f"Maximum suggestions per word (default: {defaults['max_suggestions']})",
    )
    parser.add_argument(
        "--threshold",
        "-t",
        type=int,
        default=defaults["threshold"],
        help=f"Maximum edit distance (default: {defaults['threshold']})",
    )
    parser.add_argument(
        "--add",
        action="append",
        default=[],
        metavar="WORD",
        help="Add a word to the dictionary before checking (repeatable)",
    )
    parser.add_argument(
        "--wordlist",
        action="append",
        default=[],
        metavar="PATH_OR_URL",
        help="Load extra dictionary words from a file or URL (repeatable)",
    )
    parser.add_argument("--no-seed", action="store_true", help="Start from an empty dictionary")
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Log level, also echoed to stderr (default: {defaults['log_level']}, file only)",
    )
    return parser


def report(speller: SpellSuggester, word: str, max_suggestions: int, threshold: int) -> None:
    word = word.strip()
    print(f'\nInput: "{word}"')
    if speller.contains(word):
        print("✓ Word found in dictionary")
        return
    suggestions = speller.suggest(word, max_suggestions, threshold)
    if suggestions:
        print("Did you mean: " + ", ".join(suggestions))
    else:
        print("✗ No suggestions found")


def main(argv: Optional[List[str]] = None) -> int:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=Path, default=None)
    known, rest = pre.parse_known_args(argv)
    defaults = cfg_mod.get_config(known.config)

    args = build_parser(defaults).parse_args(rest)
    set_log_level(
        cfg_mod.normalize_log_level(args.log_level or defaults["log_level"]),
        console=args.log_level is not None,
    )

    settings = dict(defaults)
    settings["wordlists"] = cfg_mod.normalize_wordlists(defaults["wordlists"] + args.wordlist)
    if args.no_seed:
        settings["include_seed_words"] = False
    try:
        speller = SpellSuggester.from_config(settings)
    except DidYouMeanError as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 1
    if args.add:
        speller.add_words(*args.add)

    if args.words:
        for word in args.words:
            report(speller, word, args.max_suggestions, args.threshold)
        return 0

    print('Kurdish "Did You Mean" Demo')
    print("=" * 37)
    for word in DEMO_WORDS:
        report(speller, word, args.max_suggestions, args.threshold)

    print("\n\nAdding custom words to dictionary: " + ", ".join(DEMO_ADDED_WORDS))
    speller.add_words(*DEMO_ADDED_WORDS)
    report(speller, DEMO_AFTER_ADD, args.max_suggestions, args.threshold)
    return 0


if __name__ == "__main__":
    sys.exit(main())
