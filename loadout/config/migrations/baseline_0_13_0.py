"""
Migration to version 0.13.0.

0.13.0 is the oldest graph layout that can still be upgraded. Graphs saved
by earlier releases are refused whatever their shape.
"""

from typing import Any

from .migrator import Refusal


def refuse_below_0_13_0(graph: dict[str, Any]) -> Refusal:
    """Refuse every graph saved before 0.13.0."""
    return Refusal(message="Cannot migrate loadouts below version 0.13.0", notice=True)
