"""Roster editing for meeting setup.

The facilitator types names one at a time or several at once separated by
commas. Names are trimmed and duplicates are dropped here, before the
roster reaches the scheduler.
"""

from collections.abc import Iterable


def parse_names(raw: str) -> list[str]:
    """Split comma-separated input into trimmed, non-empty names."""
    return [name.strip() for name in raw.split(",") if name.strip()]


def add_names(existing: Iterable[str], raw: str) -> list[str]:
    """Append names from raw input that are not on the roster yet.

    Args:
        existing: Current roster in entry order
        raw: New entry, possibly several names separated by commas

    Returns:
        New roster; existing order kept, new names appended in input order
    """
    roster = list(existing)
    seen = set(roster)
    for name in parse_names(raw):
        if name not in seen:
            roster.append(name)
            seen.add(name)
    return roster


def remove_name(existing: Iterable[str], name: str) -> list[str]:
    """Return the roster without name."""
    return [n for n in existing if n != name]
