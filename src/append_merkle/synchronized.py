"""Thread-safe handle around a :class:`MerkleTree`.

``MerkleTree`` itself is not synchronized: an append reads and rewrites
every upper level. This wrapper serializes all access through a single
lock, held for the whole append and briefly for reads.
"""

from __future__ import annotations

import threading
from typing import Iterable, Optional, Tuple

from append_merkle.hashing import Hash, Key
from append_merkle.merkle_tree import MerkleTree
from append_merkle.tree_stats import Stats, merkle_stats_


class SynchronizedMerkleTree:
    """A ``MerkleTree`` guarded by one exclusive lock.

    Either wraps an existing ``tree`` (keeping its update policy) or creates
    a new one with the given ``incremental`` policy, never both.
    """

    def __init__(self, tree: Optional[MerkleTree] = None, incremental: Optional[bool] = None):
        if tree is not None and incremental is not None:
            raise ValueError("pass either an existing tree or incremental, not both")
        if tree is None:
            tree = MerkleTree(incremental=bool(incremental))
        self._tree = tree
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self.leaf_count()

    def __repr__(self) -> str:
        with self._lock:
            return f"{type(self).__name__}({self._tree!r})"

    def append(self, key: Key) -> None:
        with self._lock:
            self._tree.append(key)

    def extend(self, keys: Iterable[Key]) -> None:
        keys = list(keys)
        with self._lock:
            self._tree.extend(keys)

    def append_and_root(self, key: Key) -> Hash:
        """Append ``key`` and return the root it produced, atomically."""
        with self._lock:
            self._tree.append(key)
            return self._tree.root()

    def root(self) -> Optional[Hash]:
        with self._lock:
            return self._tree.root()

    def root_hex(self) -> Optional[str]:
        with self._lock:
            return self._tree.root_hex()

    def leaf_count(self) -> int:
        with self._lock:
            return self._tree.leaf_count()

    def height(self) -> int:
        with self._lock:
            return self._tree.height()

    def levels(self) -> Tuple[Tuple[Hash, ...], ...]:
        with self._lock:
            return self._tree.levels()

    def stats(self) -> Stats:
        with self._lock:
            return merkle_stats_(self._tree)
