"""
ASV benchmarks for MerkleTree operations.

Covers sequential appends under both update policies, root lookups and
single appends on a prebuilt tree, and the overhead of the lock-guarded
handle. Sizes come from ``BENCHMARK_SIZES``.
"""

import gc

from append_merkle.merkle_tree import MerkleTree
from append_merkle.synchronized import SynchronizedMerkleTree
from benchmarks.benchmark_utils import CONFIG, BaseBenchmark, BenchmarkUtils


class MerkleAppendBenchmarks(BaseBenchmark):
    """Benchmarks for building a tree through repeated ``append`` calls."""

    params = [
        CONFIG.sizes,
        CONFIG.incremental_modes(),
    ]
    param_names = ['size', 'incremental']

    def setup(self, size, incremental):
        super().setup(size, incremental)
        self.keys = BenchmarkUtils.generate_deterministic_keys(size, seed=CONFIG.seed + size)
        gc.collect()
        gc.disable()

    def time_sequential_append(self, size, incremental):
        tree = MerkleTree(incremental=incremental)
        append = tree.append
        for key in self.keys:
            append(key)

    def time_extend(self, size, incremental):
        tree = MerkleTree(incremental=incremental)
        tree.extend(self.keys)


class MerkleRootBenchmarks(BaseBenchmark):
    """Benchmarks for ``root`` on a prebuilt tree."""

    params = [CONFIG.sizes]
    param_names = ['size']

    def setup(self, size):
        super().setup(size)
        keys = BenchmarkUtils.generate_deterministic_keys(size, distribution='sequential')
        self.tree = BenchmarkUtils.build_tree(keys, incremental=True)
        gc.collect()
        gc.disable()

    def time_root(self, size):
        self.tree.root()


class MerkleSingleAppendBenchmarks(BaseBenchmark):
    """One append onto a tree of ``size`` leaves, rebuilt before every sample."""

    params = [
        CONFIG.sizes,
        CONFIG.incremental_modes(),
    ]
    param_names = ['size', 'incremental']

    # One call per sample, so every sample sees exactly ``size`` leaves
    number = 1
    warmup_time = 0

    def setup(self, size, incremental):
        super().setup(size, incremental)
        keys = BenchmarkUtils.generate_deterministic_keys(size, distribution='sequential')
        self.tree = BenchmarkUtils.build_tree(keys, incremental=incremental)
        gc.collect()
        gc.disable()

    def time_single_append(self, size, incremental):
        self.tree.append(size)


class SynchronizedAppendBenchmarks(BaseBenchmark):
    """Lock overhead of ``SynchronizedMerkleTree.append``."""

    params = [CONFIG.sizes]
    param_names = ['size']

    def setup(self, size):
        super().setup(size)
        self.keys = BenchmarkUtils.generate_deterministic_keys(size, seed=CONFIG.seed)
        gc.collect()
        gc.disable()

    def time_locked_append(self, size):
        handle = SynchronizedMerkleTree(incremental=True)
        for key in self.keys:
            handle.append(key)
