"""Benchmark configuration and validation for pibench."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional


TOTAL_POINTS = 1_000_000
WORKER_COUNTS = (2, 4, 8, 16, 32, 64)
DEFAULT_BATCH = 65_536


@dataclass
class BenchConfig:
    total_points: int = TOTAL_POINTS
    worker_counts: List[int] = field(default_factory=lambda: list(WORKER_COUNTS))
    seed: Optional[int] = None
    batch_size: int = DEFAULT_BATCH
    max_parallelism: Optional[int] = None
    progress_to_terminal: bool = False

_CONFIG: Optional[BenchConfig] = None

class ConfigError(ValueError):
    pass

#user-supplied values are validated here and put in an instance of BenchConfig
def configure_bench(
    *,
    total_points: int = TOTAL_POINTS,
    worker_counts: Optional[Iterable[int]] = None,
    seed: Optional[int] = None,
    batch_size: int = DEFAULT_BATCH,
    max_parallelism: Optional[int] = None,
    progress_to_terminal: bool = False,
) -> BenchConfig:
    """Configure a benchmark run.

    Worker counts are run in ascending order whatever order they are given in;
    duplicates are dropped. ``max_parallelism`` caps the thread pool of every
    parallel run; when unset each run gets one thread per worker.
    """
    if total_points is None or total_points <= 0:
        raise ConfigError("total_points must be positive")
    if batch_size is None or batch_size <= 0:
        raise ConfigError("batch_size must be positive")
    if max_parallelism is not None and max_parallelism <= 0:
        raise ConfigError("max_parallelism must be positive if set")

    counts = list(WORKER_COUNTS) if worker_counts is None else list(worker_counts)
    if not counts:
        raise ConfigError("worker_counts cannot be empty")
    for count in counts:
        if count <= 0:
            raise ConfigError(f"worker counts must be positive, got {count}")

    cfg = BenchConfig(
        total_points=total_points,
        worker_counts=sorted(set(counts)),
        seed=seed,
        batch_size=batch_size,
        max_parallelism=max_parallelism,
        progress_to_terminal=progress_to_terminal,
    )

    global _CONFIG
    _CONFIG = cfg
    return cfg

def get_config() -> Optional[BenchConfig]:
    return _CONFIG

def clear_config() -> None:
    global _CONFIG
    _CONFIG = None
