from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import ProfileBlock, Summary, coverage_percent


@dataclass
class Accumulator:
    """Running block/statement totals for one report key."""

    name: str
    blocks: int = 0
    stmts: int = 0
    covered_blocks: int = 0
    covered_stmts: int = 0

    def add_block(self, block: ProfileBlock) -> None:
        self.blocks += 1
        self.stmts += block.num_stmt
        if block.is_covered:
            self.covered_blocks += 1
            self.covered_stmts += block.num_stmt

    def add_all(self, blocks: Iterable[ProfileBlock]) -> None:
        for block in blocks:
            self.add_block(block)

    def results(self) -> Summary:
        return Summary(
            name=self.name,
            blocks=self.blocks,
            stmts=self.stmts,
            covered_blocks=self.covered_blocks,
            covered_stmts=self.covered_stmts,
            block_coverage=coverage_percent(self.covered_blocks, self.blocks),
            stmt_coverage=coverage_percent(self.covered_stmts, self.stmts),
        )
