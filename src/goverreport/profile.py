"""Go cover profile parsing.

A profile starts with a ``mode: set|count|atomic`` line followed by one line
per block: ``name:startLine.startCol,endLine.endCol numStmt count``.
"""

from __future__ import annotations

import re
from dataclasses import replace
from pathlib import Path

from .errors import ProfileParseError
from .models import ProfileBlock, ProfileUnit

PROFILE_MODES = ("set", "count", "atomic")
MODE_LINE_PATTERN = re.compile(r"^mode: (\S+)$")
BLOCK_LINE_PATTERN = re.compile(r"^(.+):(\d+)\.(\d+),(\d+)\.(\d+) (\d+) (\d+)$")


def parse_block_line(line: str, line_no: int) -> tuple[str, ProfileBlock]:
    matched = BLOCK_LINE_PATTERN.match(line)
    if matched is None:
        raise ProfileParseError(f"line {line_no}: malformed profile block {line!r}")

    name = matched.group(1)
    start_line, start_col, end_line, end_col, num_stmt, count = (
        int(value) for value in matched.groups()[1:]
    )
    block = ProfileBlock(
        start_line=start_line,
        start_col=start_col,
        end_line=end_line,
        end_col=end_col,
        num_stmt=num_stmt,
        count=count,
    )
    return name, block


def merge_duplicate_blocks(name: str, blocks: list[ProfileBlock], mode: str) -> tuple[ProfileBlock, ...]:
    """
    Sort blocks by position and fold blocks that cover the same span.

    The same span shows up more than once when profiles of several test
    binaries are concatenated. Set-mode counts are OR-ed, others are summed.
    """
    ordered = sorted(blocks, key=lambda block: block.span)
    merged: list[ProfileBlock] = []
    for block in ordered:
        if not merged or merged[-1].span != block.span:
            merged.append(block)
            continue

        previous = merged[-1]

        if previous.num_stmt != block.num_stmt:
            raise ProfileParseError(
                f"inconsistent statement count for {name}:{block.start_line}.{block.start_col}: "
                f"{previous.num_stmt} vs {block.num_stmt}"
            )
        if mode == "set":
            count = 1 if previous.count or block.count else 0
        else:
            count = previous.count + block.count
        merged[-1] = replace(previous, count=count)
    return tuple(merged)


def parse_profile_text(text: str) -> list[ProfileUnit]:
    """Parse profile text into units sorted by name."""
    mode: str | None = None
    blocks_by_name: dict[str, list[ProfileBlock]] = {}

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue

        mode_match = MODE_LINE_PATTERN.match(line)
        if mode_match is not None:
            line_mode = mode_match.group(1)
            if line_mode not in PROFILE_MODES:
                raise ProfileParseError(f"line {line_no}: unknown profile mode '{line_mode}'")
            if mode is not None and line_mode != mode:
                raise ProfileParseError(
                    f"line {line_no}: profile mode '{line_mode}' conflicts with '{mode}'"
                )
            mode = line_mode
            continue

        if mode is None:
            raise ProfileParseError(f"line {line_no}: expected 'mode:' line, got {line!r}")

        name, block = parse_block_line(line, line_no)
        blocks_by_name.setdefault(name, []).append(block)

    if mode is None:
        raise ProfileParseError("empty profile, missing 'mode:' line")

    return [
        ProfileUnit(name=name, blocks=merge_duplicate_blocks(name, blocks, mode))
        for name, blocks in sorted(blocks_by_name.items())
    ]


def parse_profile(profile_path: Path) -> list[ProfileUnit]:
    try:
        text = profile_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ProfileParseError(f"Coverage profile not found: {profile_path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise ProfileParseError(f"Failed to read coverage profile {profile_path}: {exc}") from exc

    try:
        return parse_profile_text(text)
    except ProfileParseError as exc:
        raise ProfileParseError(f"{profile_path}: {exc}") from exc
