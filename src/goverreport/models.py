from __future__ import annotations

from dataclasses import dataclass

TOTAL_NAME = "Total"


@dataclass(frozen=True)
class ProfileBlock:
    """One coverage-tracked region of a source unit."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int
    num_stmt: int
    count: int

    @property
    def is_covered(self) -> bool:
        return self.count > 0

    @property
    def span(self) -> tuple[int, int, int, int]:
        return (self.start_line, self.start_col, self.end_line, self.end_col)


@dataclass(frozen=True)
class ProfileUnit:
    name: str
    blocks: tuple[ProfileBlock, ...]


@dataclass(frozen=True)
class Summary:
    """
    Coverage summary for a file, a package or the whole profile.

    Coverage percentages are None when their denominator is zero.
    """

    name: str
    blocks: int
    stmts: int
    covered_blocks: int
    covered_stmts: int
    block_coverage: float | None
    stmt_coverage: float | None

    @property
    def missing_blocks(self) -> int:
        return self.blocks - self.covered_blocks

    @property
    def missing_stmts(self) -> int:
        return self.stmts - self.covered_stmts


@dataclass(frozen=True)
class Report:
    total: Summary
    files: tuple[Summary, ...]


def coverage_percent(covered: int, total: int) -> float | None:
    if total == 0:
        return None
    return covered * 100 / total
