"""Utility functions for testing Merkle tree invariants and expected digests."""

import hashlib
from typing import List, Optional

from append_merkle.invariants import TREE_FLAGS
from append_merkle.merkle_tree import MerkleTree
from append_merkle.tree_stats import Stats


def H(data: bytes) -> bytes:
    """Plain SHA-256, kept independent of the package under test."""
    return hashlib.sha256(data).digest()


def key_bytes(key: int) -> bytes:
    return key.to_bytes(8, 'big')


def expected_levels(keys: List[int]) -> List[List[bytes]]:
    """Hand-rolled level construction: pairs hashed, odd tail duplicated."""
    if not keys:
        return []
    levels = [[H(key_bytes(k)) for k in keys]]
    while len(levels[-1]) > 1:
        below = levels[-1]
        if len(below) % 2 == 1:
            below = below + [below[-1]]
        levels.append([H(below[i] + below[i + 1]) for i in range(0, len(below), 2)])
    return levels


def assert_tree_invariants_tc(tc, t: MerkleTree, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    tc.assertEqual(
        t.leaf_count(), stats.leaf_count,
        f"Invariant failed: leaf_count()={t.leaf_count()} ≠ stats.leaf_count={stats.leaf_count}\n\n{err_msg}"
    )

    if t.is_empty():
        tc.assertIsNone(stats.root, f"Invariant failed: empty tree has a root\n\n{err_msg}")
        tc.assertEqual(stats.height, 0, f"Invariant failed: empty tree has levels\n\n{err_msg}")
        return

    tc.assertIsNotNone(
        stats.root,
        f"Invariant failed: root is None for non-empty tree\n\n{err_msg}"
    )
    tc.assertEqual(
        stats.root, t.root(),
        f"Invariant failed: stats.root ≠ t.root()\n\n{err_msg}"
    )
    for lower, upper in zip(stats.level_sizes, stats.level_sizes[1:]):
        tc.assertLess(
            upper, lower,
            f"Invariant failed: level sizes not strictly decreasing: {stats.level_sizes}\n\n{err_msg}"
        )
