"""Small helpers shared across the simulation."""

from __future__ import annotations


def parse_arguments(line: str) -> list[str]:
    """Split a command or configuration line into whitespace-separated words."""
    return line.split()