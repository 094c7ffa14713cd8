"""Append-only Merkle tree stored as a list of hash levels.

``levels[0]`` holds the leaf hashes in append order and every higher level
is built from the one below by hashing adjacent pairs. When a level has an
odd length its last hash is paired with itself. The top level always holds
exactly one hash: the root.

Example for the keys 4, 8, 10::

    levels[2] = [ H(p0 || p1) ]                    <- root
    levels[1] = [ p0 = H(h4 || h8), p1 = H(h10 || h10) ]
    levels[0] = [ h4, h8, h10 ]
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from append_merkle.hashing import Hash, Key, hash_internal, hash_key, hash_to_hex
from append_merkle.logging_config import get_logger

logger = get_logger(__name__)


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)


def build_parent_level(child: Sequence[Hash]) -> List[Hash]:
    """
    Build the parent level of ``child`` by hashing adjacent pairs.

    If ``child`` has an odd length, its last hash is duplicated to pair
    with itself.

    Parameters:
        child (Sequence[Hash]): A level with at least two hashes.

    Returns:
        List[Hash]: ``ceil(len(child) / 2)`` parent hashes.

    Raises:
        ValueError: If ``child`` has fewer than two hashes. A single hash
            is already the root and has no parent level.
    """
    n = len(child)
    if n < 2:
        raise ValueError(f"cannot build a parent level from {n} hash(es)")

    parents = []
    for i in range(0, n, 2):
        left = child[i]
        right = child[i + 1] if i + 1 < n else left
        parents.append(hash_internal(left, right))
    return parents


def build_levels(leaves: Sequence[Hash]) -> List[List[Hash]]:
    """Build all levels bottom-up from ``leaves`` until a single root remains."""
    if not leaves:
        return []
    levels = [list(leaves)]
    while len(levels[-1]) > 1:
        levels.append(build_parent_level(levels[-1]))
    return levels


class MerkleTree:
    """
    An append-only Merkle tree over unsigned 64-bit keys.

    By default every append discards and rebuilds all levels above the
    leaves. With ``incremental=True`` only the rightmost path is rehashed,
    which yields the same levels in O(log n) per append.

    Attributes:
        incremental (bool): Whether appends update only the rightmost path.
    """
    __slots__ = ("_levels", "incremental")

    def __init__(self, incremental: bool = False):
        self._levels: List[List[Hash]] = []
        self.incremental = incremental

    def __len__(self) -> int:
        return self.leaf_count()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(leaves={self.leaf_count()}, "
            f"height={self.height()}, root={self.root_hex()})"
        )

    def is_empty(self) -> bool:
        return not self._levels

    def leaf_count(self) -> int:
        """Number of keys appended so far."""
        return len(self._levels[0]) if self._levels else 0

    def height(self) -> int:
        """Number of stored levels, including the leaf level."""
        return len(self._levels)

    def append(self, key: Key) -> None:
        """
        Append ``key`` as a new leaf and recompute the levels above it.

        Parameters:
            key (int): An unsigned 64-bit integer.

        Raises:
            TypeError, ValueError: If ``key`` is not a valid unsigned 64-bit
                integer. The tree is left unchanged.
        """
        leaf = hash_key(key)
        self._push_leaf(leaf)
        if self.incremental:
            self._update_right_path()
        else:
            self._rebuild_upper_levels()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Appended key %d as leaf #%d, root=%s", key, self.leaf_count() - 1, self.root_hex())

    def extend(self, keys: Iterable[Key]) -> None:
        """
        Append every key of ``keys`` in order.

        All keys are hashed before the tree is touched, so an invalid key
        leaves the tree unchanged.
        """
        leaves = [hash_key(key) for key in keys]
        if not leaves:
            return
        if self.incremental:
            for leaf in leaves:
                self._push_leaf(leaf)
                self._update_right_path()
        else:
            for leaf in leaves:
                self._push_leaf(leaf)
            self._rebuild_upper_levels()
        debug_log("Extended tree by %d leaves", len(leaves))

    def root(self) -> Optional[Hash]:
        """Return the root hash, or ``None`` if nothing has been appended."""
        if not self._levels:
            return None
        top = self._levels[-1]
        return top[0] if top else None

    def root_hex(self) -> Optional[str]:
        root = self.root()
        return hash_to_hex(root) if root is not None else None

    def levels(self) -> Tuple[Tuple[Hash, ...], ...]:
        """Snapshot of all levels, leaves first."""
        return tuple(tuple(level) for level in self._levels)

    def level(self, index: int) -> Tuple[Hash, ...]:
        """Snapshot of a single level. Raises ``IndexError`` if it does not exist."""
        return tuple(self._levels[index])

    def leaf(self, index: int) -> Hash:
        """Return the leaf hash at ``index``."""
        if not self._levels:
            raise IndexError("leaf index out of range: tree is empty")
        return self._levels[0][index]

    def print_structure(self, width: int = 8) -> str:
        from append_merkle.display import print_pretty
        return print_pretty(self, width=width)

    # ------------------------------------------------------------------
    # internal maintenance
    # ------------------------------------------------------------------

    def _push_leaf(self, leaf: Hash) -> None:
        if not self._levels:
            self._levels.append([leaf])
        else:
            self._levels[0].append(leaf)

    def _rebuild_upper_levels(self) -> None:
        """Discard every level above the leaves and rebuild them bottom-up."""
        del self._levels[1:]
        below = self._levels[0]
        while len(below) > 1:
            below = build_parent_level(below)
            self._levels.append(below)

    def _update_right_path(self) -> None:
        """
        Rehash the rightmost path after a leaf was pushed.

        Only the last hash of each level can change when a leaf is appended:
        its parent is either replaced (the pair gained a right sibling) or
        appended (a new pair started), and a new top level appears when the
        old top grows to two hashes.
        """
        index = len(self._levels[0]) - 1
        level_index = 1
        while True:
            below = self._levels[level_index - 1]
            if len(below) == 1:
                del self._levels[level_index:]
                return

            parent_index = index // 2
            left = below[2 * parent_index]
            right_index = 2 * parent_index + 1
            right = below[right_index] if right_index < len(below) else left
            parent = hash_internal(left, right)

            if level_index == len(self._levels):
                self._levels.append([parent])
            else:
                level = self._levels[level_index]
                if parent_index < len(level):
                    level[parent_index] = parent
                else:
                    level.append(parent)

            index = parent_index
            level_index += 1
