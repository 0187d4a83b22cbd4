"""Runs the sequential baseline and every configured worker count."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .config import BenchConfig, get_config
from .estimate import parallel_pi, sequential_pi
from .report import ReportBuilder, format_duration

logger = logging.getLogger(__name__)


def print_header(cfg: BenchConfig, out: Callable[[str], None] = print) -> None:
    out("Estimating pi with the Monte Carlo method")
    out(f"Total points: {cfg.total_points}")
    out("")


def run_benchmark(cfg: Optional[BenchConfig] = None, out: Callable[[str], None] = print) -> ReportBuilder:
    """Time the sequential run, then one parallel run per worker count.

    Falls back to the active config from ``configure_bench`` and then to the
    defaults. Per-run lines go to ``out``; the filled builder is returned.
    """
    if cfg is None:
        cfg = get_config() or BenchConfig()
    builder = ReportBuilder()

    out("--- Sequential (single thread) ---")
    start = time.perf_counter()
    pi = sequential_pi(cfg.total_points, seed=cfg.seed, batch_size=cfg.batch_size)
    elapsed = time.perf_counter() - start
    builder.add_sequential(pi, elapsed)
    out(f"Pi estimate: {pi:.6f}")
    out(f"Elapsed: {format_duration(elapsed)}")
    logger.info("sequential: pi=%.6f in %.2fms", pi, elapsed * 1000.0)

    out("")
    out("--- Parallel (varying worker counts) ---")
    for workers in sorted(set(cfg.worker_counts)):
        if cfg.progress_to_terminal:
            out(f"[pibench] starting {workers} workers over {cfg.total_points} points")
        result = parallel_pi(
            cfg.total_points,
            workers,
            max_parallelism=cfg.max_parallelism,
            seed=cfg.seed,
            batch_size=cfg.batch_size,
        )
        builder.add_parallel(workers, result.pi, result.elapsed_s)
        out(f"Workers: {workers}")
        out(f"Pi estimate: {result.pi:.6f}")
        out(f"Elapsed: {format_duration(result.elapsed_s)}")
        logger.info("%d workers: pi=%.6f in %.2fms", workers, result.pi, result.elapsed_s * 1000.0)
    return builder
