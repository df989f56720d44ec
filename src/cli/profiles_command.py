"""CLI command listing loaded language profiles."""

from __future__ import annotations

from typing import Any

from store.profile_store import ProfileStore


def add_profiles_command(subparsers: Any) -> None:
    """Register profiles subcommand."""
    subparsers.add_parser("profiles", help="List loaded language profiles and table sizes")


def run_profiles_command(store: ProfileStore) -> int:
    """Print one ``name unigrams bigrams trigrams`` row per profile."""
    for profile in store:
        print(
            f"{profile.name} unigrams={len(profile.unigrams)} "
            f"bigrams={len(profile.bigrams)} trigrams={len(profile.trigrams)}"
        )
    return 0
