"""
Clearing title generation.

Titles are either deterministic placeholders (``Clearing0``, ``Clearing1``,
...) or town names drawn from a fixed pool with the shared PRNG, so a seeded
generation always names its clearings the same way.
"""

from __future__ import annotations

from typing import List, Optional

from py_clearings.core.alea_prng import AleaPRNG
from py_clearings.core.name_bases import load_default_names

PLACEHOLDER_PREFIX = "Clearing"


class ClearingNameGenerator:
    """Assigns display titles to clearings."""

    def __init__(self, prng: Optional[AleaPRNG] = None, names: Optional[List[str]] = None):
        """Initialize with an optional PRNG and an optional replacement name pool."""
        self.prng = prng or AleaPRNG(seed="default")
        self.names = list(names) if names is not None else load_default_names()
        if not self.names:
            raise ValueError("Name pool must not be empty")

    @staticmethod
    def placeholder(index: int) -> str:
        return f"{PLACEHOLDER_PREFIX}{index}"

    def random_name(self) -> str:
        """Draw a title-cased name from the pool (with replacement)."""
        return self.prng.choice(self.names).title()

    def name_for(self, index: int, use_named_titles: bool) -> str:
        """Title for the clearing at ``index``.

        Args:
            index: Position of the clearing within its layout
            use_named_titles: Draw a town name instead of the placeholder

        Returns:
            Display title
        """
        if use_named_titles:
            return self.random_name()
        return self.placeholder(index)
