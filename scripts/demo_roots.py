#!/usr/bin/env python3
"""
Print Merkle roots while appending keys.

Without arguments this appends 5 and 10, prints the root, then appends 30
and prints the new root.
"""

import argparse

from append_merkle.merkle_tree import MerkleTree


def run(keys, then_keys, incremental=False):
    """Append ``keys``, report the root, append ``then_keys``, report again."""
    tree = MerkleTree(incremental=incremental)
    tree.extend(keys)
    lines = [f"Root: {tree.root_hex()}"]
    if then_keys:
        tree.extend(then_keys)
        lines.append(f"New root: {tree.root_hex()}")
    return lines


def main(argv=None):
    parser = argparse.ArgumentParser(description="Append keys to a Merkle tree and print the roots.")
    parser.add_argument("--keys", type=int, nargs="*", default=[5, 10], help="Keys appended first.")
    parser.add_argument("--then", type=int, nargs="*", default=[30], help="Keys appended afterwards.")
    parser.add_argument("--incremental", action="store_true", help="Update only the rightmost path.")
    parser.add_argument("--show-levels", action="store_true", help="Print the level structure at the end.")
    args = parser.parse_args(argv)

    for line in run(args.keys, args.then, incremental=args.incremental):
        print(line)

    if args.show_levels:
        tree = MerkleTree()
        tree.extend(args.keys + args.then)
        print(tree.print_structure())


if __name__ == "__main__":
    main()
