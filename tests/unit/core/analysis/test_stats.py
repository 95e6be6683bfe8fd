from __future__ import annotations

"""
Unit tests for Tree Statistics.
"""

import pytest

from huffcode.core.analysis.stats import compute_stats
from huffcode.core.analysis.tree_builder import build_tree
from huffcode.domain.tree_models import Leaf


def test_stats_without_table_are_structural(abc_tree) -> None:
    stats = compute_stats(abc_tree)

    assert stats.leaf_count == 3
    assert stats.max_depth == 2
    assert stats.unique_characters == 0
    assert stats.total_characters == 0
    assert stats.weighted_code_length == 0.0


def test_stats_with_table() -> None:
    table = {"a": 3, "b": 1, "c": 1}
    stats = compute_stats(build_tree(table), table)

    assert stats.unique_characters == 3
    assert stats.total_characters == 5
    assert stats.weighted_code_length == pytest.approx(7 / 5)


def test_zero_frequency_entries_do_not_count() -> None:
    table = {"a": 2, "b": 2, "z": 0}
    stats = compute_stats(build_tree(table), table)

    assert stats.unique_characters == 3
    assert stats.total_characters == 4


def test_stats_single_leaf() -> None:
    stats = compute_stats(Leaf("q", 0), {"q": 0})

    assert stats.leaf_count == 1
    assert stats.max_depth == 0
    assert stats.weighted_code_length == 0.0
