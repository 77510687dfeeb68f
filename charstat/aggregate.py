"""
Fold per-code-point counts into per-category and per-script totals.

Aggregation is non-exclusive: a code point that belongs to several categories
(its umbrella class and its subclass) adds its full count to each of them, so
the category totals can sum to more than the number of characters. The work
is one table scan per distinct code point, not per occurrence.
"""

from collections import Counter

from .tables import get_table


def _fold(counts: Counter, memberships) -> Counter:
    totals = Counter()
    for cp, count in counts.items():
        for name in memberships(cp):
            totals[name] += count
    return totals


def category_totals(counts: Counter, table=None) -> Counter:
    table = table or get_table()
    return _fold(counts, table.categories_of)


def script_totals(counts: Counter, table=None) -> Counter:
    table = table or get_table()
    return _fold(counts, table.scripts_of)
