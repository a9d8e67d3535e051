from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .accumulator import Accumulator
from .config import Configuration
from .models import TOTAL_NAME, ProfileUnit, Report
from .paths import is_excluded, normalize_name
from .profile import parse_profile
from .sorting import SortKey, SortOrder, parse_sort_key, parse_sort_order, sort_summaries


def accumulate_units(
    units: Iterable[ProfileUnit],
    configuration: Configuration,
    packages: bool,
) -> tuple[Accumulator, dict[str, Accumulator]]:
    """Fold non-excluded units into per-key accumulators and one global total."""
    total = Accumulator(name=TOTAL_NAME)
    by_key: dict[str, Accumulator] = {}

    for unit in units:
        key = normalize_name(unit.name, configuration.root, packages)
        if is_excluded(key, configuration.exclusions):
            continue
        accumulator = by_key.get(key)
        if accumulator is None:
            accumulator = Accumulator(name=key)
            by_key[key] = accumulator
        total.add_all(unit.blocks)
        accumulator.add_all(unit.blocks)

    return total, by_key


def build_report(
    units: Iterable[ProfileUnit],
    configuration: Configuration,
    sort_by: str | SortKey = SortKey.FILENAME,
    order: str | SortOrder = SortOrder.ASC,
    packages: bool = False,
) -> Report:
    """
    Aggregate profile units into a sorted report.

    Sort settings are validated before anything is aggregated.
    """
    sort_key = parse_sort_key(sort_by)
    sort_order = parse_sort_order(order)

    total, by_key = accumulate_units(units, configuration, packages)
    files = sort_summaries((acc.results() for acc in by_key.values()), sort_key, sort_order)
    return Report(total=total.results(), files=tuple(files))


def generate_report(
    profile_path: Path,
    configuration: Configuration,
    sort_by: str | SortKey = SortKey.FILENAME,
    order: str | SortOrder = SortOrder.ASC,
    packages: bool = False,
) -> Report:
    sort_key = parse_sort_key(sort_by)
    sort_order = parse_sort_order(order)
    units = parse_profile(profile_path)
    return build_report(units, configuration, sort_key, sort_order, packages)
