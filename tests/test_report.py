"""Unit tests for the summary table."""

from pibench.report import EstimateReport, ReportBuilder, format_duration


def test_two_rows_in_order():
    builder = ReportBuilder()
    builder.add(EstimateReport(worker_count=1, pi=3.141, elapsed_s=0.01234))
    builder.add(EstimateReport(worker_count=4, pi=3.1405, elapsed_s=0.00567))
    lines = builder.render_table().splitlines()
    assert len(lines) == 4
    data = lines[2:]
    assert [cell.strip() for cell in data[0].strip("|").split("|")] == ["1", "3.141000", "12.34"]
    assert [cell.strip() for cell in data[1].strip("|").split("|")] == ["4", "3.140500", "5.67"]


def test_header_and_separator():
    builder = ReportBuilder()
    builder.add_parallel(2, 3.14, 0.5)
    header, separator = builder.render_table().splitlines()[:2]
    assert "Workers" in header and "Pi estimate" in header and "Elapsed (ms)" in header
    assert set(separator) <= {"|", "-"}


def test_sequential_row_label():
    builder = ReportBuilder()
    builder.add_sequential(3.14159, 0.02)
    builder.add_parallel(8, 3.1416, 0.005)
    assert builder.rows() == [
        ("1 (sequential)", "3.141590", "20.00"),
        ("8", "3.141600", "5.00"),
    ]
    assert [r.worker_count for r in builder.reports] == [1, 8]
    assert builder.reports[0].sequential is True


def test_elapsed_ms():
    assert EstimateReport(worker_count=2, pi=3.0, elapsed_s=0.25).elapsed_ms == 250.0


def test_format_duration():
    assert format_duration(0.0000125) == "12.500µs"
    assert format_duration(0.0125) == "12.500ms"
    assert format_duration(2.5) == "2.500s"
