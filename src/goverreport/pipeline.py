from __future__ import annotations

import argparse
from pathlib import Path
from typing import TextIO

from .args_config import parse_args, resolve_threshold
from .command_utils import EXIT_PASSED, EXIT_THRESHOLD_FAILED, fail, log
from .config import Configuration, load_config
from .errors import ReportError
from .report import generate_report
from .threshold import evaluate_threshold, parse_metric
from .view import print_table


def run(configuration: Configuration, args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Build and print the report, then check the threshold."""
    if configuration.exclusions and not args.quiet:
        log(f"Exclusion patterns: {len(configuration.exclusions)}")
        for pattern in configuration.exclusions:
            log(f"      - {pattern}")

    report = generate_report(
        Path(args.coverprofile),
        configuration,
        sort_by=args.sort,
        order=args.order,
        packages=args.packages,
    )
    if not args.quiet:
        unit_label = "package(s)" if args.packages else "file(s)"
        log(f"Loaded {args.coverprofile}: {len(report.files)} {unit_label}, {report.total.blocks} block(s)")
    print_table(report, stream, args.packages)

    # The table is already out when the metric turns out to be invalid.
    threshold, metric = resolve_threshold(args, configuration)
    passed = evaluate_threshold(report.total, metric, threshold)
    if threshold > 0 and not args.quiet:
        status = "passed" if passed else "failed"
        log(f"Coverage threshold {threshold:g}% ({parse_metric(metric).value}): {status}")
    return passed


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        configuration = load_config(Path(args.config))
        passed = run(configuration, args)
    except ReportError as exc:
        fail(str(exc))

    return EXIT_PASSED if passed else EXIT_THRESHOLD_FAILED
