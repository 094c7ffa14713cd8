"""Statistics and consistency flags for append-only Merkle trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from append_merkle.hashing import HASH_SIZE, Hash, hash_internal
from append_merkle.logging_config import get_logger

if TYPE_CHECKING:
    from append_merkle.merkle_tree import MerkleTree

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for a Merkle tree."""

    leaf_count: int
    height: int
    node_count: int
    duplicated_nodes: int
    root: Hash | None
    sizes_halving: bool
    top_is_single: bool
    parents_consistent: bool
    hashes_well_formed: bool
    level_sizes: list[int] = field(default_factory=list)


def merkle_stats_(t: MerkleTree) -> Stats:
    """
    Returns aggregated statistics for a Merkle tree in **O(n)** time.

    Every stored parent is rehashed from its children, so
    ``parents_consistent`` detects any level that drifted from the leaves.
    """
    # ---------- empty tree return ---------------------------------
    if t is None or t.is_empty():
        return Stats(
            leaf_count=0,
            height=0,
            node_count=0,
            duplicated_nodes=0,
            root=None,
            sizes_halving=True,
            top_is_single=True,
            parents_consistent=True,
            hashes_well_formed=True,
            level_sizes=[],
        )

    levels = t.levels()
    level_sizes = [len(level) for level in levels]

    hashes_well_formed = all(
        isinstance(h, bytes) and len(h) == HASH_SIZE for level in levels for h in level
    )

    sizes_halving = True
    parents_consistent = True
    duplicated_nodes = 0
    for i in range(1, len(levels)):
        child, parent = levels[i - 1], levels[i]
        if len(parent) != (len(child) + 1) // 2 or len(child) < 2:
            sizes_halving = False
        if len(child) % 2 == 1:
            duplicated_nodes += 1
        if not hashes_well_formed or not parents_consistent:
            continue
        for j, stored in enumerate(parent):
            left_index = 2 * j
            if left_index >= len(child):
                parents_consistent = False
                break
            left = child[left_index]
            right = child[left_index + 1] if left_index + 1 < len(child) else left
            if hash_internal(left, right) != stored:
                logger.warning("Parent mismatch at level %d, index %d", i, j)
                parents_consistent = False
                break

    if not hashes_well_formed:
        parents_consistent = False

    return Stats(
        leaf_count=level_sizes[0],
        height=len(levels),
        node_count=sum(level_sizes),
        duplicated_nodes=duplicated_nodes,
        root=t.root(),
        sizes_halving=sizes_halving,
        top_is_single=level_sizes[-1] == 1,
        parents_consistent=parents_consistent,
        hashes_well_formed=hashes_well_formed,
        level_sizes=level_sizes,
    )
