"""Benchmark configuration read from the environment."""

import os
from dataclasses import dataclass


def _parse_sizes(raw: str) -> list[int]:
    return [int(part) for part in raw.replace(",", " ").split()]


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""

    # Reproducibility
    seed: int = 42

    # Benchmark parameters
    sizes: list[int] = None
    repetitions: int = 20
    incremental: bool = False

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.sizes is None:
            self.sizes = [16, 256, 1024]

    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        """Create config from environment variables."""
        raw_sizes = os.environ.get("BENCHMARK_SIZES")
        return cls(
            seed=int(os.environ.get("BENCHMARK_SEED", "42")),
            sizes=_parse_sizes(raw_sizes) if raw_sizes else None,
            repetitions=int(os.environ.get("BENCHMARK_REPETITIONS", "20")),
            incremental=os.environ.get("BENCHMARK_INCREMENTAL", "").lower() == "true",
            log_level=os.environ.get("BENCHMARK_LOG_LEVEL", "INFO"),
        )

    def incremental_modes(self) -> list[bool]:
        """Update policies to benchmark: only incremental when requested, else both."""
        return [True] if self.incremental else [False, True]
