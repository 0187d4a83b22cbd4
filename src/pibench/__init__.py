"""Public package API for pibench."""

from .config import ConfigError, clear_config, configure_bench, get_config
from .estimate import ParallelEstimate, parallel_pi, partition_counts, sequential_pi
from .report import EstimateReport, ReportBuilder

__all__ = [
    "configure_bench",
    "get_config",
    "clear_config",
    "ConfigError",
    "sequential_pi",
    "parallel_pi",
    "partition_counts",
    "ParallelEstimate",
    "EstimateReport",
    "ReportBuilder",
]
