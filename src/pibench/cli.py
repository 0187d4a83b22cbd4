"""Command-line entry point: ``pibench`` / ``python -m pibench``."""

from __future__ import annotations

import logging
from argparse import ArgumentParser
from typing import Optional, Sequence

from .bench import print_header, run_benchmark
from .config import DEFAULT_BATCH, TOTAL_POINTS, WORKER_COUNTS, ConfigError, configure_bench


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="pibench", description="Compare sequential and threaded Monte Carlo estimates of pi.")
    parser.add_argument("--points", type=int, default=TOTAL_POINTS, help="total sample count")
    parser.add_argument("--workers", type=int, nargs="+", default=list(WORKER_COUNTS), help="worker counts to test")
    parser.add_argument("--seed", type=int, default=None, help="fixed seed for reproducible runs")
    parser.add_argument("--batch-size", type=int, default=DEFAULT_BATCH)
    parser.add_argument("--max-parallelism", type=int, default=None, help="thread pool cap per run")
    parser.add_argument("--progress", action="store_true", help="print [pibench] progress lines")
    parser.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    try:
        cfg = configure_bench(
            total_points=args.points,
            worker_counts=args.workers,
            seed=args.seed,
            batch_size=args.batch_size,
            max_parallelism=args.max_parallelism,
            progress_to_terminal=args.progress,
        )
    except ConfigError as exc:
        parser.error(str(exc))

    print_header(cfg)
    builder = run_benchmark(cfg)

    print("")
    print("--- Summary ---")
    print("**Elapsed time by worker count:**")
    print("")
    print(builder.render_table())
    return 0
