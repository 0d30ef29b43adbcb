"""Selection-set helpers.

Every helper returns a new set and never mutates its input. Indices outside
``range(count)`` are never added.
"""

from __future__ import annotations

from collections.abc import Iterable

NO_ANCHOR = -1


def toggle_at(selection: Iterable[int], index: int, count: int) -> set[int]:
    """Flip membership of ``index``; out-of-range indices leave the set as is."""
    out = set(selection)
    if not 0 <= index < count:
        return out
    if index in out:
        out.discard(index)
    else:
        out.add(index)
    return out


def select_range(selection: Iterable[int], anchor: int, end: int, count: int) -> set[int]:
    """Add the closed interval between ``anchor`` and ``end`` to the selection.

    Existing members outside the interval stay selected. Without an anchor
    (``anchor < 0``) only ``end`` is added.
    """
    out = set(selection)
    if count <= 0:
        return out
    if anchor < 0:
        anchor = end
    lo, hi = sorted((anchor, end))
    lo = max(0, lo)
    hi = min(count - 1, hi)
    out.update(range(lo, hi + 1))
    return out


def select_all(count: int) -> set[int]:
    return set(range(max(0, count)))


def clear_selection() -> set[int]:
    return set()


def prune_selection(selection: Iterable[int], count: int) -> set[int]:
    """Drop indices that no longer address a record."""
    return {index for index in selection if 0 <= index < count}
