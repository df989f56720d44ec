"""Lingram CLI entry points.

This module exposes commands for detecting languages and inspecting
loaded profiles. It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from cli.detect_command import add_detect_command, run_detect_command
from cli.profiles_command import add_profiles_command, run_profiles_command
from core.config import DetectorConfig, load_detector_config
from core.errors import LangDetectConfigError
from store.profile_store import load_profile_store


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="lingram", description="N-gram language detection")
    parser.add_argument("--config", help="YAML file with a lang_detection section")
    parser.add_argument("--languages-path", help="Override the model file directory")
    parser.add_argument("--short-text-limit", type=int, help="Override the short-text word limit")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_detect_command(subparsers)
    add_profiles_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lingram CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args)
        store = load_profile_store(config.languages_path, config.short_text_limit)
    except LangDetectConfigError as error:
        print(f"error: {error}", file=sys.stderr)
        return 2
    if args.command == "detect":
        return run_detect_command(store, config, args)
    if args.command == "profiles":
        return run_profiles_command(store)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(args: argparse.Namespace) -> DetectorConfig:
    """Build detector config from file or environment plus CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Validated config.
    """
    config = load_detector_config(args.config) if args.config else DetectorConfig.from_env()
    if args.languages_path:
        config = replace(config, languages_path=Path(args.languages_path).expanduser())
    if args.short_text_limit is not None:
        config = DetectorConfig.from_values(
            languages_path=config.languages_path,
            short_text_limit=args.short_text_limit,
            sample_words=config.sample_words,
            random_seed=config.random_seed,
        )
    return config
