"""
Benchmarks package for the append-only Merkle tree.

This package contains ASV benchmarks for performance testing of:
- MerkleTree.append under the full-recompute and incremental policies
- MerkleTree.root lookups
- SynchronizedMerkleTree lock overhead

The benchmarks use deterministic test data so results are comparable
across runs and commits.
"""

from .benchmark_utils import BaseBenchmark, BenchmarkUtils

__all__ = ["BaseBenchmark", "BenchmarkUtils"]
