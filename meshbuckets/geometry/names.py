"""
Case-insensitive node name matching against reference name tables.
"""

from typing import Iterable


def _fold(value: str) -> str:
    return value.casefold()


def matches_exact(name: str, table: Iterable[str]) -> bool:
    """
    Check whether a node name equals any table entry, ignoring case.

    Args:
        name: Node name to check
        table: Reference names

    Returns:
        bool: True if at least one entry matches
    """
    folded = _fold(name)
    return any(folded == _fold(entry) for entry in table)


def matches_prefix(name: str, table: Iterable[str]) -> bool:
    """
    Check whether a node name starts with any table entry, ignoring case.

    Args:
        name: Node name to check
        table: Reference name prefixes

    Returns:
        bool: True if at least one entry is a prefix of the name
    """
    folded = _fold(name)
    return any(folded.startswith(_fold(entry)) for entry in table)
