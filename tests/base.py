"""Shared test base classes for Merkle tree tests."""

import unittest

from append_merkle.merkle_tree import MerkleTree
from append_merkle.tree_stats import merkle_stats_
from tests.utils import assert_tree_invariants_tc


class BaseTreeTestCase(unittest.TestCase):
    """Base class for tree tests: checks invariants of ``self.tree`` on tearDown."""

    incremental = False

    def create_tree(self, keys=()) -> MerkleTree:
        tree = MerkleTree(incremental=self.incremental)
        for key in keys:
            tree.append(key)
        return tree

    def tearDown(self):
        tree = getattr(self, 'tree', None)
        if tree is None:
            return

        stats = merkle_stats_(tree)
        assert_tree_invariants_tc(self, tree, stats)

        # --- optional expectations ---
        expected_leaf_count = getattr(self, 'expected_leaf_count', None)
        if expected_leaf_count is not None:
            self.assertEqual(
                stats.leaf_count, expected_leaf_count,
                f"Leaf count {stats.leaf_count} does not match expected {expected_leaf_count}\n"
                f"Tree structure:\n{tree.print_structure()}"
            )

        expected_height = getattr(self, 'expected_height', None)
        if expected_height is not None:
            self.assertEqual(
                stats.height, expected_height,
                f"Height {stats.height} does not match expected {expected_height}"
            )

        expected_root = getattr(self, 'expected_root', None)
        if expected_root is not None:
            self.assertEqual(
                tree.root(), expected_root,
                f"Root {tree.root_hex()} does not match expected {expected_root.hex()}"
            )
