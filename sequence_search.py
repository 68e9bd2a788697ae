"""
Membership tests over sequences: linear scan and binary search.
"""

from typing import Any, Sequence


def linear_contains(items: Sequence[Any], item: Any) -> bool:
    """O(n) scan; works on any sequence of comparable-for-equality items."""
    for element in items:
        if element == item:
            return True
    return False


def binary_contains(items: Sequence[Any], item: Any) -> bool:
    """
    O(log n) search. ``items`` must already be sorted ascending, otherwise
    the answer is meaningless.
    """
    low = 0
    high = len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] < item:
            low = mid + 1
        elif item < items[mid]:
            high = mid - 1
        else:
            return True
    return False
