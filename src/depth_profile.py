"""
Depth profile -- measures how insertion order shapes an OrderedTree.

The tree never rebalances, so its height is decided entirely by the order in
which keys arrive. Random orders give roughly logarithmic height (about
2 ln n on average), while sorted or reversed orders degenerate into a chain
of height n. These helpers build trees from controlled orders and summarize
their shape as NumPy arrays.
"""

import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence

import numpy as np

_src = str(Path(__file__).resolve().parent)
if _src not in sys.path:
    sys.path.insert(0, _src)

from ordered_tree import OrderedTree

ORDERS = ("sorted", "reversed", "random", "zigzag")


def insertion_order(n: int, kind: str, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Keys 0..n-1 arranged in the requested order.

    "zigzag" alternates between the smallest and largest remaining key,
    which also builds a chain.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    keys = np.arange(n)
    if kind == "sorted":
        return keys
    if kind == "reversed":
        return keys[::-1].copy()
    if kind == "random":
        if rng is None:
            rng = np.random.default_rng()
        return rng.permutation(n)
    if kind == "zigzag":
        order = np.empty(n, dtype=keys.dtype)
        order[0::2] = keys[: (n + 1) // 2]
        order[1::2] = keys[::-1][: n // 2]
        return order
    raise ValueError(f"unknown insertion order: {kind!r}")


def build_tree(keys: Iterable) -> OrderedTree:
    tree: OrderedTree = OrderedTree()
    for key in keys:
        key = int(key)
        tree.insert(key, key)
    return tree


def level_widths(tree: OrderedTree) -> np.ndarray:
    """Number of nodes at each depth, root first."""
    return np.array([len(level) for _, level in tree.levels()], dtype=np.int64)


def average_depth(tree: OrderedTree) -> float:
    widths = level_widths(tree)
    if widths.size == 0:
        return 0.0
    depths = np.arange(widths.size)
    return float(np.dot(depths, widths) / widths.sum())


def height_profile(sizes: Sequence[int], kind: str, trials: int = 1, seed: int = 0) -> np.ndarray:
    """Mean height of trees built from each size, over `trials` orders."""
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")
    rng = np.random.default_rng(seed)
    heights = np.zeros(len(sizes), dtype=np.float64)
    for i, n in enumerate(sizes):
        samples = [build_tree(insertion_order(n, kind, rng)).height() for _ in range(trials)]
        heights[i] = np.mean(samples)
    return heights
