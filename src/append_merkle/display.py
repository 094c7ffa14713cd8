"""Pretty-printing utilities for Merkle tree levels."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from append_merkle.hashing import hash_to_hex

if TYPE_CHECKING:
    from append_merkle.merkle_tree import MerkleTree


# ANSI colour codes
PRIMARY = '\033[32m'    # green
SECONDARY = '\033[33m'  # yellow
RESET = '\033[0m'

DUPLICATE_MARK = "*"


def print_pretty(tree: Optional[MerkleTree], width: int = 8) -> str:
    """
    Prints a Merkle tree so:
      • Lines go from the root level down to the leaves (level 0).
      • Each hash is shortened to its first ``width`` hex characters.
      • Parents built from a duplicated last child carry a ``*`` mark.
      • Every line is centred over the leaf line.
    """
    from append_merkle.merkle_tree import MerkleTree

    if tree is None:
        return "MerkleTree: None"

    if not isinstance(tree, MerkleTree):
        raise TypeError(f"print_pretty() expects MerkleTree, got {type(tree).__name__}")

    tree_type = type(tree).__name__
    if tree.is_empty():
        return f"{tree_type}: Empty"

    if width < 1:
        raise ValueError(f"width must be positive, got {width}")

    levels = tree.levels()
    column_width = width + len(DUPLICATE_MARK)
    leaf_line_len = len(levels[0]) * (column_width + 1)

    out_lines = []
    for index in reversed(range(len(levels))):
        level = levels[index]
        below = levels[index - 1] if index > 0 else ()
        texts = []
        for j, digest in enumerate(level):
            text = hash_to_hex(digest)[:width]
            duplicated = index > 0 and 2 * j + 1 >= len(below)
            mark = DUPLICATE_MARK if duplicated else " "
            if index == len(levels) - 1:
                text = f"{PRIMARY}{text}{RESET}"
            elif duplicated:
                text = f"{SECONDARY}{text}{RESET}"
            texts.append(text + mark)
        line = " ".join(texts)
        visible_len = len(level) * (column_width + 1)
        indent = int(math.floor((leaf_line_len - visible_len) / 2))
        out_lines.append(f"Level {index}: " + " " * indent + line)

    return tree_type + "\n" + "\n".join(out_lines) + "\n"
