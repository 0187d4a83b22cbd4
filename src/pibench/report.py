"""Estimate records and the summary table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


HEADERS = ("Workers", "Pi estimate", "Elapsed (ms)")


@dataclass(frozen=True)
class EstimateReport:
    worker_count: int
    pi: float
    elapsed_s: float
    sequential: bool = False

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_s * 1000.0


def format_duration(elapsed_s: float) -> str:
    if elapsed_s < 1e-3:
        return f"{elapsed_s * 1e6:.3f}µs"
    if elapsed_s < 1.0:
        return f"{elapsed_s * 1e3:.3f}ms"
    return f"{elapsed_s:.3f}s"


class ReportBuilder:
    """Collects reports in run order and renders them as a Markdown table."""

    def __init__(self) -> None:
        self._reports: List[EstimateReport] = []

    def add(self, report: EstimateReport) -> EstimateReport:
        self._reports.append(report)
        return report

    def add_sequential(self, pi: float, elapsed_s: float) -> EstimateReport:
        return self.add(EstimateReport(worker_count=1, pi=pi, elapsed_s=elapsed_s, sequential=True))

    def add_parallel(self, workers: int, pi: float, elapsed_s: float) -> EstimateReport:
        return self.add(EstimateReport(worker_count=workers, pi=pi, elapsed_s=elapsed_s))

    @property
    def reports(self) -> List[EstimateReport]:
        return list(self._reports)

    def rows(self) -> List[tuple[str, str, str]]:
        rows = []
        for report in self._reports:
            workers = f"{report.worker_count} (sequential)" if report.sequential else str(report.worker_count)
            rows.append((workers, f"{report.pi:.6f}", f"{report.elapsed_ms:.2f}"))
        return rows

    def render_table(self) -> str:
        rows = self.rows()
        widths = [len(h) for h in HEADERS]
        for row in rows:
            widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

        def line(cells) -> str:
            return "| " + " | ".join(cell.ljust(w) for cell, w in zip(cells, widths)) + " |"

        out = [line(HEADERS), "|" + "|".join("-" * (w + 2) for w in widths) + "|"]
        out.extend(line(row) for row in rows)
        return "\n".join(out)
