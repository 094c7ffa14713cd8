"""
append_merkle — An append-only SHA-256 Merkle tree over u64 keys.

Quick-start imports::

    from append_merkle import MerkleTree

    tree = MerkleTree()
    tree.append(5)
    tree.root()

See the individual modules for the full public surface.
"""

# Hashing primitives
from append_merkle.hashing import (
    HASH_SIZE,
    MAX_KEY,
    Hash,
    Key,
    hash_internal,
    hash_key,
    hash_to_hex,
    key_to_bytes,
)

# Stats & invariants
from append_merkle.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    verify_integrity,
)

# Tree
from append_merkle.merkle_tree import MerkleTree, build_levels, build_parent_level
from append_merkle.synchronized import SynchronizedMerkleTree
from append_merkle.tree_stats import Stats, merkle_stats_

__all__ = [
    # Hashing
    "HASH_SIZE",
    "Hash",
    "InvariantError",
    "Key",
    "MAX_KEY",
    # Tree
    "MerkleTree",
    # Stats & invariants
    "Stats",
    "SynchronizedMerkleTree",
    "assert_tree_invariants_raise",
    "build_levels",
    "build_parent_level",
    "hash_internal",
    "hash_key",
    "hash_to_hex",
    "key_to_bytes",
    "merkle_stats_",
    "verify_integrity",
]
