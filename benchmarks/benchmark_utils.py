"""
Benchmarking utilities for the append-only Merkle tree.

This module provides deterministic key generation and a base class for ASV
benchmarks.

Reproducibility:
    All random data generation uses deterministic seeds by default.
    The default seed can be overridden via the BENCHMARK_SEED environment variable.

Logging:
    Benchmarks should be run with logging at INFO level or higher to avoid
    performance contamination from verbose debug output.
"""

import gc
import logging
from typing import List

import numpy as np

from append_merkle.hashing import MAX_KEY
from append_merkle.logging_config import setup_logging
from append_merkle.merkle_tree import MerkleTree
from benchmarks.config import BenchmarkConfig

# Read once so ASV params and setup agree within a run
CONFIG = BenchmarkConfig.from_env()

# Default seed for deterministic benchmarking - can be overridden via environment variable
DEFAULT_BENCHMARK_SEED = CONFIG.seed


class BenchmarkUtils:
    """Utility class for ASV benchmarking operations."""

    @staticmethod
    def check_logging_level(log_level: str = None):
        """
        Apply the configured level to the library logger and check it.

        Raises if DEBUG logging is enabled, as this contaminates append
        timings with formatting and I/O overhead.
        """
        if log_level is None:
            log_level = CONFIG.log_level
        lib_logger = setup_logging(log_level)
        effective_level = lib_logger.getEffectiveLevel()
        if effective_level <= logging.DEBUG:
            raise ValueError(
                f"Logging level is set to {logging.getLevelName(effective_level)}. "
                "Benchmarks require logging to be at INFO level or higher to avoid "
                "performance contamination from verbose debug output."
            )

    @staticmethod
    def generate_deterministic_keys(size: int,
                                    seed: int = None,
                                    distribution: str = 'uniform') -> List[int]:
        """
        Generate deterministic u64 keys for benchmarking.

        Args:
            size: Number of keys to generate
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            distribution: 'uniform' over the full u64 range or 'sequential'

        Returns:
            List of Python ints
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        if distribution == 'uniform':
            rng = np.random.default_rng(seed)
            keys = rng.integers(0, MAX_KEY, size=size, dtype=np.uint64, endpoint=True)
            return [int(k) for k in keys]
        elif distribution == 'sequential':
            return list(range(size))
        else:
            raise ValueError(f"Unknown distribution: {distribution}")

    @staticmethod
    def build_tree(keys: List[int], incremental: bool = False) -> MerkleTree:
        """Build a tree from ``keys``. Setup phase, not timed."""
        tree = MerkleTree(incremental=incremental)
        tree.extend(keys)
        return tree


class BaseBenchmark:
    """Base class for ASV benchmarks.

    Ensures logging is quiet enough and garbage collection is disabled
    during timed sections.
    """

    params = []
    param_names = []

    warmup_time = 0.1
    sample_time = 0.4
    repeat = CONFIG.repetitions

    def setup(self, *params):
        BenchmarkUtils.check_logging_level()

    def teardown(self, *params):
        if not gc.isenabled():
            gc.enable()
