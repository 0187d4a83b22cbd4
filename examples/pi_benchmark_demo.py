"""Example of configuring a benchmark and reading the reports programmatically."""
import math

from pibench import configure_bench
from pibench.bench import print_header, run_benchmark


if __name__ == "__main__":
    cfg = configure_bench(
        total_points=2_000_000,
        worker_counts=[1, 2, 4, 8],
        seed=1234,
        max_parallelism=4,
        progress_to_terminal=True,
    )

    print_header(cfg)
    builder = run_benchmark(cfg)
    print(builder.render_table())

    best = min(builder.reports, key=lambda r: r.elapsed_s)
    print(f"fastest: {best.worker_count} workers, error {abs(best.pi - math.pi):.6f}")
