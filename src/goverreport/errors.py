from __future__ import annotations


class ReportError(Exception):
    """Base class for every error raised while building or checking a report."""


class ProfileParseError(ReportError):
    """The coverage profile is unreadable or malformed."""


class ConfigError(ReportError):
    """The YAML configuration or an exclusion pattern is invalid."""


class InvalidSortKey(ReportError):
    pass


class InvalidSortOrder(ReportError):
    pass


class InvalidMetric(ReportError):
    pass


class UndefinedCoverage(ReportError):
    """A threshold is active but the selected metric has a zero denominator."""
