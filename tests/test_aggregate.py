"""Tests for bike_dashboard/aggregate.py: distributions, metrics and formatting."""
import math

import pytest

from bike_dashboard.aggregate import distribution, distribution_frame, fmt_inr, metrics, numeric_values, parse_price
from bike_dashboard.config import MISSING_LABEL
from bike_dashboard.filters import FilterState, apply_filters
from bike_dashboard.records import parse_records, to_frame


def prices_frame(prices):
    return to_frame([{"price": p, "brand": "Hero"} for p in prices])


# ---------------------------------------------------------------------------
# distribution
# ---------------------------------------------------------------------------

def test_distribution_by_city(scenario):
    assert distribution(scenario, "city") == {"Delhi": 2, "Mumbai": 1}


def test_distribution_by_brand(scenario):
    assert distribution(scenario, "brand") == {"Hero": 1, "Honda": 2}


def test_distribution_keeps_first_occurrence_order():
    records = parse_records("city\nPune\nDelhi\nPune\nAgra\n").records
    assert list(distribution(records, "city")) == ["Pune", "Delhi", "Agra"]


@pytest.mark.parametrize("name", ["city", "brand", "owner", "price"])
def test_distribution_counts_sum_to_size(listings, name):
    assert sum(distribution(listings, name).values()) == len(listings)


def test_distribution_counts_missing_values():
    records = parse_records("city,brand\nDelhi,\nDelhi,Hero\n").records
    assert distribution(records, "brand") == {MISSING_LABEL: 1, "Hero": 1}


def test_literal_unknown_kept_apart_from_missing():
    """A real value that reads "Unknown" is its own bucket, and filtering on it agrees with its count."""
    records = parse_records("city,brand\nDelhi,Unknown\nDelhi,\n").records
    dist = distribution(records, "brand")
    assert dist == {"Unknown": 1, MISSING_LABEL: 1}
    assert len(apply_filters(records, FilterState({"brand": "Unknown"}))) == dist["Unknown"]


def test_distribution_of_empty_set(scenario):
    empty = apply_filters(scenario, FilterState({"city": "Agra"}))
    assert distribution(empty, "city") == {}


def test_distribution_frame_columns(scenario):
    frame = distribution_frame(scenario, "city")
    assert list(frame.columns) == ["name", "value"]
    assert frame["name"].tolist() == ["Delhi", "Mumbai"]
    assert frame["value"].tolist() == [2, 1]


# ---------------------------------------------------------------------------
# metrics
# ---------------------------------------------------------------------------

def test_average_price():
    assert metrics(prices_frame(["100", "200", "300"])).average_price == 200


def test_non_numeric_prices_excluded_from_mean():
    m = metrics(prices_frame(["100", "n/a", None, "300"]))
    assert m.average_price == 200
    assert m.total_bikes == 4


def test_metrics_on_listings(listings):
    m = metrics(listings)
    assert m.total_bikes == 5
    assert m.total_brands == 4
    assert m.average_price == pytest.approx((45000 + 39000 + 85000 + 119900) / 4)


def test_metrics_on_empty_set(scenario):
    empty = apply_filters(scenario, FilterState({"city": "Agra"}))
    m = metrics(empty)
    assert m.total_bikes == 0
    assert m.total_brands == 0
    assert m.average_price is None
    assert m.average_price_display == "N/A"


def test_metrics_without_price_column(scenario):
    m = metrics(scenario)
    assert m.average_price is None
    assert m.total_brands == 2
    assert m.total_bikes == 3


def test_missing_brand_not_counted():
    records = parse_records("price,brand\n100,\n200,Hero\n").records
    assert metrics(records).total_brands == 1


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("45000", 45000.0),
        (" 1,20,000 ", 120000.0),
        ("₹999.5", 999.5),
    ],
)
def test_parse_price(raw, expected):
    assert parse_price(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "nan", "inf"])
def test_parse_price_rejects(raw):
    assert math.isnan(parse_price(raw))


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "₹0.00"),
        (999, "₹999.00"),
        (1000, "₹1,000.00"),
        (123456, "₹1,23,456.00"),
        (12345678.9, "₹1,23,45,678.90"),
        (-1500, "-₹1,500.00"),
        (None, "N/A"),
        (float("nan"), "N/A"),
    ],
)
def test_fmt_inr(value, expected):
    assert fmt_inr(value) == expected


# ---------------------------------------------------------------------------
# numeric_values
# ---------------------------------------------------------------------------

def test_numeric_values_for_numeric_fields(listings):
    assert numeric_values(listings, "kms_driven").sum() == 12645 + 18000 + 8200 + 11000 + 31000
    assert len(numeric_values(listings, "price")) == 4


@pytest.mark.parametrize("name", ["city", "brand", "bike_name"])
def test_numeric_values_rejects_text_fields(listings, name):
    with pytest.raises(ValueError):
        numeric_values(listings, name)
