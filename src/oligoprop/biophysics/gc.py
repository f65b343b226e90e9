"""
GC content calculator.

Each ambiguous N contributes half a G/C: the midpoint assumes an even split
and the delta spans "every N is G/C" to "every N is A/T".
"""

from __future__ import annotations

from oligoprop.core.models import BoundedQuantity, SymbolCounts


def calculate_gc(counts: SymbolCounts) -> BoundedQuantity:
    """
    Calculate GC content as a percentage.

    Args:
        counts: Symbol counts of a validated sequence

    Returns:
        BoundedQuantity on the 0-100 scale

    Example:
        >>> calculate_gc(SymbolCounts(a=2, c=1, g=1)).value
        50.0
    """
    total = counts.total
    return BoundedQuantity(
        100 * (counts.gc + counts.n / 2) / total,
        100 * (counts.n / 2) / total,
    )
