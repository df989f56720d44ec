"""CLI command for detecting the language of a text."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Any

from core.config import DetectorConfig
from core.constants import UNKNOWN_LANGUAGE_CODE
from core.types import Token
from store.profile_store import ProfileStore
from transforms.language_detection import LanguageDetector


def add_detect_command(subparsers: Any) -> None:
    """Register detect subcommand."""
    parser = subparsers.add_parser("detect", help="Detect the language of a text")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", help="Text to classify")
    source.add_argument("--file", help="Read text from a file instead of stdin")
    parser.add_argument(
        "--ranking", action="store_true", help="Print every candidate as language=score"
    )


def run_detect_command(store: ProfileStore, config: DetectorConfig, args: argparse.Namespace) -> int:
    """Print the detected language, or ``unknown`` when nothing scored."""
    try:
        raw_text = _read_input(args)
    except OSError as error:
        print(f"error: cannot read input: {error}", file=sys.stderr)
        return 1
    # Whitespace split stands in for the pipeline tokenizer here.
    tokens = [Token(data=word) for word in raw_text.split()]
    wide_tokens = store.converter.to_wide_many(tokens)
    detector = LanguageDetector(
        store, sample_words=config.sample_words, rng=random.Random(config.random_seed)
    )
    verdict = detector.detect(wide_tokens, len(wide_tokens))
    if verdict is None:
        print(UNKNOWN_LANGUAGE_CODE)
        return 0
    print(verdict.language)
    if args.ranking:
        for language, score in verdict.ranking:
            print(f"{language}={score}")
    return 0


def _read_input(args: argparse.Namespace) -> bytes:
    if args.text is not None:
        return args.text.encode("utf-8")
    if args.file is not None:
        return Path(args.file).expanduser().read_bytes()
    return sys.stdin.buffer.read()
