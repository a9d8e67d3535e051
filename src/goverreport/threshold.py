from __future__ import annotations

from enum import Enum

from .errors import InvalidMetric, UndefinedCoverage
from .models import Summary


class Metric(Enum):
    BLOCK = "block"
    STMT = "stmt"


def parse_metric(value: str | Metric) -> Metric:
    if isinstance(value, Metric):
        return value
    try:
        return Metric(value)
    except ValueError:
        raise InvalidMetric(f"Invalid threshold type '{value}', use block or stmt") from None


def selected_coverage(total: Summary, metric: Metric) -> float | None:
    if metric is Metric.BLOCK:
        return total.block_coverage
    return total.stmt_coverage


def evaluate_threshold(total: Summary, metric: str | Metric, threshold: float) -> bool:
    """
    Check whether the total coverage reaches threshold (inclusive).

    A threshold of 0 or less disables the check, metric included. An active
    threshold on a metric without any blocks or statements raises
    UndefinedCoverage.
    """
    if threshold <= 0:
        return True

    selected_metric = parse_metric(metric)
    coverage = selected_coverage(total, selected_metric)
    if coverage is None:
        raise UndefinedCoverage(
            f"{selected_metric.value} coverage is undefined (no data in profile), "
            f"cannot check threshold {threshold:g}"
        )
    return coverage >= threshold
