"""Shared invariant-checking utilities.

Used by the stats script and the test suite to validate the level
structure of a :class:`MerkleTree`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from append_merkle.hashing import HASH_SIZE
from append_merkle.logging_config import get_logger
from append_merkle.merkle_tree import build_levels
from append_merkle.tree_stats import merkle_stats_

logger = get_logger(__name__)

if TYPE_CHECKING:
    from append_merkle.merkle_tree import MerkleTree
    from append_merkle.tree_stats import Stats

TREE_FLAGS = (
    "hashes_well_formed",
    "sizes_halving",
    "top_is_single",
    "parents_consistent",
)


class InvariantError(Exception):
    """Raised when a Merkle tree invariant is violated."""


def assert_tree_invariants_raise(
    t: MerkleTree,
    stats: Stats | None = None,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    if stats is None:
        stats = merkle_stats_(t)

    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if t.leaf_count() != stats.leaf_count:
        raise InvariantError(
            f"Invariant failed: t.leaf_count()={t.leaf_count()} ≠ stats.leaf_count={stats.leaf_count}"
        )

    if t.is_empty():
        if stats.root is not None:
            raise InvariantError("Invariant failed: empty tree has a root")
        return

    if stats.root is None:
        raise InvariantError("Invariant failed: root is None for non-empty tree")
    if stats.leaf_count <= 0:
        raise InvariantError(f"Invariant failed: leaf_count={stats.leaf_count} ≤ 0 for non-empty tree")
    if stats.leaf_count == 1 and stats.height != 1:
        raise InvariantError(f"Invariant failed: height={stats.height} ≠ 1 for a single leaf")


def verify_integrity(t: MerkleTree) -> bool:
    """Verify the tree by rebuilding every level from the stored leaves."""
    if t.is_empty():
        return True
    stored = t.levels()
    if any(len(h) != HASH_SIZE for h in stored[0]):
        logger.warning("Integrity check failed: malformed leaf hash")
        return False
    rebuilt = build_levels(stored[0])
    if len(rebuilt) != len(stored):
        logger.warning("Integrity check failed: %d stored levels, %d rebuilt", len(stored), len(rebuilt))
        return False
    for index, (old, new) in enumerate(zip(stored, rebuilt)):
        if list(old) != new:
            logger.warning("Integrity check failed at level %d", index)
            return False
    return True
