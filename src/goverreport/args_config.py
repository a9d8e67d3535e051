from __future__ import annotations

import argparse
import sys

from .config import CONFIG_FILE, Configuration
from .sorting import SortKey, SortOrder
from .threshold import Metric

DEFAULT_COVERPROFILE = "coverage.out"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    raw_argv = sys.argv[1:] if argv is None else argv

    parser = argparse.ArgumentParser(
        prog="goverreport",
        description="Summarize a Go coverage profile by file or package and check a coverage threshold.",
    )
    parser.add_argument(
        "--config",
        default=CONFIG_FILE,
        metavar="FILE",
        help=(
            f"YAML configuration with keys {{root,exclusions,threshold,thresholdType}} "
            f"(default: {CONFIG_FILE}, ignored when missing)."
        ),
    )
    parser.add_argument(
        "--coverprofile",
        default=DEFAULT_COVERPROFILE,
        metavar="FILE",
        help=f"Coverage profile produced by 'go test -coverprofile' (default: {DEFAULT_COVERPROFILE}).",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Fail when total coverage is below this percentage; 0 disables the check.",
    )
    parser.add_argument(
        "--metric",
        default=None,
        help=f"Coverage used for the threshold: {', '.join(m.value for m in Metric)} (default: block).",
    )
    parser.add_argument(
        "--sort",
        default=SortKey.FILENAME.value,
        help="Column to sort by: " + ", ".join(key.value for key in SortKey) + ".",
    )
    parser.add_argument(
        "--order",
        default=SortOrder.ASC.value,
        help="Sort order: asc, desc.",
    )
    parser.add_argument(
        "--packages",
        action="store_true",
        help="Report coverage by package instead of by file.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print the coverage table.",
    )
    return parser.parse_args(raw_argv)


def resolve_threshold(args: argparse.Namespace, configuration: Configuration) -> tuple[float, str]:
    """Command-line threshold settings win over the configuration file."""
    threshold = configuration.threshold if args.threshold is None else args.threshold
    metric = configuration.metric if args.metric is None else args.metric
    return threshold, metric
