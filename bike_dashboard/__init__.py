"""Used bike listings dashboard: record parsing, filtering and aggregation."""

from bike_dashboard.aggregate import Metrics, distribution, distribution_frame, fmt_inr, metrics, numeric_values
from bike_dashboard.controller import DashboardController
from bike_dashboard.filters import FilterState, apply_filters, filter_options
from bike_dashboard.records import (
    MalformedRowError,
    ParseResult,
    RecordError,
    SchemaError,
    load_records,
    parse_records,
)

__all__ = [
    "DashboardController",
    "FilterState",
    "MalformedRowError",
    "Metrics",
    "ParseResult",
    "RecordError",
    "SchemaError",
    "apply_filters",
    "distribution",
    "distribution_frame",
    "filter_options",
    "fmt_inr",
    "load_records",
    "metrics",
    "numeric_values",
    "parse_records",
]
