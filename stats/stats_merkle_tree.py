"""Statistics for append-only Merkle trees."""

import argparse
import logging
import math
import os
import time
from datetime import datetime

import numpy as np
from tqdm import tqdm

from append_merkle.hashing import MAX_KEY
from append_merkle.invariants import assert_tree_invariants_raise
from append_merkle.logging_config import setup_logging
from append_merkle.merkle_tree import MerkleTree
from append_merkle.tree_stats import merkle_stats_

logger = logging.getLogger(__name__)


def random_keys(n: int, rng: np.random.Generator) -> list:
    """Draw ``n`` keys uniformly from the full u64 range."""
    keys = rng.integers(0, MAX_KEY, size=n, dtype=np.uint64, endpoint=True)
    return [int(k) for k in keys]


def build_tree(keys, incremental: bool = False):
    """
    Build a tree by appending every key, timing each append.

    Returns:
        (tree, append_times)
    """
    tree = MerkleTree(incremental=incremental)
    tree_append = tree.append
    append_times = np.empty(len(keys))
    for i, key in enumerate(keys):
        t0 = time.perf_counter()
        tree_append(key)
        append_times[i] = time.perf_counter() - t0
    return tree, append_times


def repeated_experiment(
    size: int,
    repetitions: int,
    rng: np.random.Generator,
    incremental: bool = False,
) -> None:
    """
    Repeatedly builds random trees of ``size`` leaves, checks their invariants
    and logs averaged structural statistics and timings.
    """
    t_all_0 = time.perf_counter()

    results = []
    times_build = []
    times_append_last = []
    times_root = []
    times_stats = []

    for _ in tqdm(range(repetitions), desc=f"n={size}", leave=False):
        keys = random_keys(size, rng)

        t0 = time.perf_counter()
        tree, append_times = build_tree(keys, incremental=incremental)
        times_build.append(time.perf_counter() - t0)
        times_append_last.append(float(append_times[-1]) if size else 0.0)

        t0 = time.perf_counter()
        tree.root()
        times_root.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        stats = merkle_stats_(tree)
        times_stats.append(time.perf_counter() - t0)

        assert_tree_invariants_raise(tree, stats)
        results.append(stats)

    # Perfect height of a binary tree over ``size`` leaves, counting the leaf level
    perfect_height = math.ceil(math.log2(size)) + 1 if size > 0 else 0

    heights = np.array([s.height for s in results], dtype=float)
    node_counts = np.array([s.node_count for s in results], dtype=float)
    duplicated = np.array([s.duplicated_nodes for s in results], dtype=float)

    rows = [
        ("Leaf count", float(size), None),
        ("Height", heights.mean(), heights.var()),
        ("Perfect height", perfect_height, None),
        ("Node count", node_counts.mean(), node_counts.var()),
        ("Duplicated nodes", duplicated.mean(), duplicated.var()),
    ]

    header = f"{'Metric':<20} {'Avg':>15} {'(Var)':>15}"
    sep_line = "-" * len(header)

    logger.info(header)
    logger.info(sep_line)
    for name, avg, var in rows:
        if var is None:
            logger.info(f"{name:<20} {avg:>15}")
        else:
            var_str = f"({var:.2f})"
            avg_fmt = f"{avg:15.2f}"
            logger.info(f"{name:<20} {avg_fmt} {var_str:>15}")

    perf_rows = []
    timings = [
        ("Build time (s)", times_build),
        ("Last append (s)", times_append_last),
        ("Root time (s)", times_root),
        ("Stats time (s)", times_stats),
    ]
    total_sum = sum(sum(values) for _, values in timings)
    for name, values in timings:
        arr = np.array(values, dtype=float)
        total = float(arr.sum())
        pct = (total / total_sum * 100) if total_sum else 0
        perf_rows.append((name, arr.mean(), arr.var(), total, pct))

    header = f"{'Metric':<20}{'Avg(s)':>13}{'Var(s)':>13}{'Total(s)':>13}{'%Total':>10}"
    sep = "-" * len(header)

    logger.info("")
    logger.info("Performance summary:")
    logger.info(header)
    logger.info(sep)
    for name, avg, var, total, pct in perf_rows:
        logger.info(f"{name:<20}{avg:13.6f}{var:13.6f}{total:13.6f}{pct:10.2f}%")

    logger.info(sep)
    t_all_1 = time.perf_counter() - t_all_0
    logger.info("Execution time: %.3f seconds", t_all_1)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run statistics experiments for append-only Merkle trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000, 5000], help="List of tree sizes to test."
    )
    parser.add_argument("--repetitions", type=int, default=5, help="Number of repetitions for each experiment.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--incremental", action="store_true", help="Update only the rightmost path on append."
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )

    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)

    log_dir = os.path.join(os.getcwd(), "stats/logs/merkle_tree_logs")
    os.makedirs(log_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler(),
        ],
        force=True,
    )

    # Also apply the chosen level to the library logger
    setup_logging(log_level)

    for n in args.sizes:
        logger.info("")
        logger.info(
            f"---------------- NOW RUNNING EXPERIMENT: n = {n}, incremental = {args.incremental}, "
            f"repetitions = {args.repetitions} ----------------"
        )
        t0 = time.perf_counter()
        repeated_experiment(size=n, repetitions=args.repetitions, rng=rng, incremental=args.incremental)
        elapsed = time.perf_counter() - t0
        logger.info(f"Total experiment time: {elapsed:.3f} seconds")
