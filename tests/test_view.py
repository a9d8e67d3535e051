"""Tests for table rendering (view.py)."""

from __future__ import annotations

import io

from goverreport.models import Report, Summary
from goverreport.view import format_coverage, make_row, print_table


def _summary(name: str, blocks: int, covered_blocks: int, stmts: int, covered_stmts: int) -> Summary:
    return Summary(
        name=name,
        blocks=blocks,
        stmts=stmts,
        covered_blocks=covered_blocks,
        covered_stmts=covered_stmts,
        block_coverage=covered_blocks / blocks * 100 if blocks else None,
        stmt_coverage=covered_stmts / stmts * 100 if stmts else None,
    )


REPORT = Report(
    total=_summary("Total", 77, 62, 104, 84),
    files=(
        _summary("/main.go", 30, 20, 44, 29),
        _summary("/report/report.go", 47, 42, 60, 55),
    ),
)


def _render(report: Report, packages: bool = False) -> str:
    buf = io.StringIO()
    print_table(report, buf, packages)
    return buf.getvalue()


class TestPrintTable:
    def test_file_mode(self) -> None:
        output = _render(REPORT)
        assert "File" in output
        assert "Package" not in output
        for header in ("Blocks", "Missing", "Stmts", "Block cover %", "Stmt cover %"):
            assert header in output
        assert "/main.go" in output
        assert "/report/report.go" in output
        assert "66.67" in output
        assert "65.91" in output

    def test_total_footer(self) -> None:
        output = _render(REPORT)
        lines = output.splitlines()
        total_line = next(line for line in lines if "Total" in line)
        assert lines.index(total_line) > max(idx for idx, line in enumerate(lines) if "/report/report.go" in line)
        assert "80.52" in total_line
        assert "80.77" in total_line

    def test_ascii_borders(self) -> None:
        output = _render(REPORT)
        assert "+---" in output
        assert "|" in output

    def test_package_mode_header(self) -> None:
        report = Report(total=REPORT.total, files=(_summary("./report", 47, 42, 60, 55),))
        output = _render(report, packages=True)
        header = next(line for line in output.splitlines() if "Blocks" in line)
        assert "Package" in header
        assert "File" not in header

    def test_empty_report(self) -> None:
        empty = Report(total=_summary("Total", 0, 0, 0, 0), files=())
        output = _render(empty)
        total_line = next(line for line in output.splitlines() if "Total" in line)
        assert "-" in total_line
        assert "nan" not in output.lower()

    def test_long_names_are_not_wrapped(self) -> None:
        name = "github.com/some/really/long/module/path/" + "x" * 60 + ".go"
        report = Report(total=REPORT.total, files=(_summary(name, 1, 1, 1, 1),))
        assert name in _render(report)


class TestMakeRow:
    def test_row_cells(self) -> None:
        assert make_row(_summary("/main.go", 30, 20, 44, 29)) == [
            "/main.go",
            "30",
            "10",
            "44",
            "15",
            "66.67",
            "65.91",
        ]

    def test_undefined_coverage(self) -> None:
        assert format_coverage(None) == "-"
        assert format_coverage(100.0) == "100.00"
