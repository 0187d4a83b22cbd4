"""Sequential and thread-parallel Monte Carlo estimates of pi."""

from __future__ import annotations

import logging
import queue
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Callable, Iterable, Optional

import numpy as np

from .config import DEFAULT_BATCH
from .sampling import generator_pool, is_inside, sample_points

logger = logging.getLogger(__name__)

WorkerFn = Callable[[int, np.random.Generator], int]


@dataclass(frozen=True)
class ParallelEstimate:
    pi: float
    elapsed_s: float
    inside: int
    partitions: list[int]


def partition_counts(total: int, parts: int) -> list[int]:
    if parts <= 0:
        raise ValueError("parts must be positive")
    if total < 0:
        raise ValueError("total must be non-negative")
    base = total // parts
    remainder = total % parts
    return [base + (1 if i < remainder else 0) for i in range(parts)]


def count_inside(samples: int, rng: np.random.Generator, batch_size: int = DEFAULT_BATCH) -> int:
    """Draw ``samples`` points from ``rng`` and count those inside the circle.

    Points are drawn ``batch_size`` at a time to bound memory use.
    """
    if samples < 0:
        raise ValueError("samples must be non-negative")
    if batch_size <= 0:
        raise ValueError("batch_size must be positive")
    inside = 0
    remaining = samples
    while remaining > 0:
        n = min(batch_size, remaining)
        xs, ys = sample_points(rng, n)
        inside += int(np.count_nonzero(is_inside(xs, ys)))
        remaining -= n
    return inside


def combine_counts(results: Iterable[int]) -> int:
    return sum(results)


def sequential_pi(total: int, seed: Optional[int] = None, batch_size: int = DEFAULT_BATCH) -> float:
    if total <= 0:
        raise ValueError("total must be positive")
    (rng,) = generator_pool(1, seed)
    inside = count_inside(total, rng, batch_size)
    logger.debug("sequential run: %d of %d points inside", inside, total)
    return 4.0 * inside / total


def _run_worker(
    index: int,
    samples: int,
    rng: np.random.Generator,
    worker_fn: WorkerFn,
    results: "queue.Queue[tuple[int, int]]",
) -> None:
    inside = worker_fn(samples, rng)
    logger.debug("worker %d: %d of %d points inside", index, inside, samples)
    results.put((index, inside))


def parallel_pi(
    total: int,
    workers: int,
    *,
    max_parallelism: Optional[int] = None,
    seed: Optional[int] = None,
    worker_fn: Optional[WorkerFn] = None,
    batch_size: int = DEFAULT_BATCH,
) -> ParallelEstimate:
    """Estimate pi by splitting ``total`` samples across ``workers`` threads.

    Every worker owns one generator from the pool and reports its count on a
    shared queue. Results are drained only after all workers have joined.
    ``max_parallelism`` sizes the thread pool for this call alone; it defaults
    to ``workers``.

    ``worker_fn`` maps ``(samples, rng)`` to an inside count and defaults to
    ``count_inside``.
    """
    if total <= 0:
        raise ValueError("total must be positive")
    if workers <= 0:
        raise ValueError("workers must be positive")
    if max_parallelism is not None and max_parallelism <= 0:
        raise ValueError("max_parallelism must be positive if set")
    if worker_fn is None:
        worker_fn = partial(count_inside, batch_size=batch_size)

    start = time.perf_counter()
    counts = partition_counts(total, workers)
    # keyed by worker count so each configuration draws its own streams
    rngs = generator_pool(workers, seed, key=(workers,))
    results: "queue.Queue[tuple[int, int]]" = queue.Queue(maxsize=workers)

    with ThreadPoolExecutor(max_workers=max_parallelism or workers) as executor:
        futures = [
            executor.submit(_run_worker, i, counts[i], rngs[i], worker_fn, results)
            for i in range(workers)
        ]
    # join barrier; re-raises anything a worker raised
    for future in futures:
        future.result()

    reported = [results.get_nowait() for _ in range(workers)]
    inside = combine_counts(count for _, count in reported)
    elapsed = time.perf_counter() - start
    logger.debug("aggregated %d workers: %d of %d points inside", workers, inside, total)
    return ParallelEstimate(pi=4.0 * inside / total, elapsed_s=elapsed, inside=inside, partitions=counts)
