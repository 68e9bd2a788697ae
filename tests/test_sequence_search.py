"""
Unit tests for linear and binary membership search.
"""

from sequence_search import binary_contains, linear_contains


def test_linear_contains():
    items = [5, 3, 9, 1]

    assert linear_contains(items, 9)
    assert not linear_contains(items, 4)
    assert not linear_contains([], 1)


def test_binary_contains_agrees_with_linear_on_sorted_input():
    items = [1, 5, 10, 15, 15, 15, 20, 27]

    for probe in range(-2, 30):
        assert binary_contains(items, probe) == linear_contains(items, probe)


def test_binary_contains_on_strings():
    names = sorted(["john", "mark", "ronald", "sarah"])

    assert binary_contains(names, "mark")
    assert not binary_contains(names, "sheila")
    assert not binary_contains([], "mark")
