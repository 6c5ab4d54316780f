"""Tests for bike_dashboard/sample_sales.py."""
import pytest

from bike_dashboard import sample_sales


def test_all_categories_by_default():
    assert sample_sales.sales_by_category()["value"].sum() == 11800


def test_single_category():
    out = sample_sales.sales_by_category("road")
    assert out.to_dict("records") == [{"name": "Road Bikes", "value": 3000}]


def test_all_regions_by_default():
    assert sample_sales.sales_by_region()["name"].tolist() == ["North", "South", "East", "West"]


def test_single_region():
    assert sample_sales.sales_by_region("west")["value"].tolist() == [4100]


def test_last_three_months():
    assert sample_sales.monthly_units("3m")["month"].tolist() == ["Apr", "May", "Jun"]


@pytest.mark.parametrize("time_range", ["6m", "1y"])
def test_longer_ranges_keep_all_months(time_range):
    assert len(sample_sales.monthly_units(time_range)) == 6


def test_monthly_units_does_not_touch_source():
    sample_sales.monthly_units("3m").loc[0, "mountain"] = -1
    assert sample_sales.MONTHLY_UNITS["mountain"].min() > 0


@pytest.mark.parametrize(
    "func, value",
    [
        (sample_sales.sales_by_category, "bmx"),
        (sample_sales.sales_by_region, "central"),
        (sample_sales.monthly_units, "2y"),
    ],
)
def test_unknown_option_rejected(func, value):
    with pytest.raises(ValueError):
        func(value)


def test_trend_columns():
    assert list(sample_sales.monthly_trend().columns) == ["month", "sales", "service", "accessories"]
