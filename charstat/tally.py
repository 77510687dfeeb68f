"""Frequency tally: one pass over the decoded code points."""

from collections import Counter

from .decoder import iter_code_points


def tally(code_points) -> Counter:
    """Count occurrences of each code point."""
    counts = Counter()
    for cp in code_points:
        counts[cp] += 1
    return counts


def tally_stream(stream) -> Counter:
    return tally(iter_code_points(stream))


def total(counts: Counter) -> int:
    """Number of characters that went into the tally."""
    return sum(counts.values())
