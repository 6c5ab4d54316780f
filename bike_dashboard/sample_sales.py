"""Hard-coded sales series behind the Sales Overview page, with their filter rules."""

import pandas as pd

from bike_dashboard.config import WILDCARD

SALES_BY_CATEGORY = [
    ("Mountain Bikes", 4000),
    ("Road Bikes", 3000),
    ("Hybrid Bikes", 2000),
    ("Electric Bikes", 2800),
]

SALES_BY_REGION = [
    ("North", 3500),
    ("South", 2800),
    ("East", 3200),
    ("West", 4100),
]

MONTHLY_UNITS = pd.DataFrame(
    [
        ("Jan", 400, 240, 200, 280),
        ("Feb", 300, 380, 250, 300),
        ("Mar", 600, 420, 210, 380),
        ("Apr", 550, 380, 260, 420),
        ("May", 700, 490, 280, 460),
        ("Jun", 750, 540, 300, 490),
    ],
    columns=["month", "mountain", "road", "hybrid", "electric"],
)

MONTHLY_TREND = pd.DataFrame(
    [
        ("Jan", 1120, 400, 200),
        ("Feb", 1230, 420, 210),
        ("Mar", 1610, 460, 230),
        ("Apr", 1610, 480, 250),
        ("May", 1930, 500, 270),
        ("Jun", 2080, 520, 290),
    ],
    columns=["month", "sales", "service", "accessories"],
)

# Option value -> label, in display order
TIME_RANGE_OPTIONS = {"3m": "Last 3 Months", "6m": "Last 6 Months", "1y": "Last Year"}
REGION_OPTIONS = {WILDCARD: "All Regions", "north": "North", "south": "South", "east": "East", "west": "West"}
CATEGORY_OPTIONS = {
    WILDCARD: "All Categories",
    "mountain": "Mountain Bikes",
    "road": "Road Bikes",
    "hybrid": "Hybrid Bikes",
    "electric": "Electric Bikes",
}
TIME_RANGE_MONTHS = {"3m": 3, "6m": 6, "1y": 12}

HEADLINE_CARDS = [
    ("Cities we distribute", "45+"),
    ("Average Price", "$1,250"),
    ("Brands we offer", "12"),
    ("Total no. of bikes", "2,500+"),
]


def _check(value: str, options: dict, what: str):
    if value not in options:
        raise ValueError(f"unknown {what} {value!r}; expected one of {list(options)}")


def _select(rows, value: str, options: dict) -> pd.DataFrame:
    if value != WILDCARD:
        rows = [r for r in rows if r[0] == options[value]]
    return pd.DataFrame(rows, columns=["name", "value"])


def sales_by_category(category: str = WILDCARD) -> pd.DataFrame:
    _check(category, CATEGORY_OPTIONS, "category")
    return _select(SALES_BY_CATEGORY, category, CATEGORY_OPTIONS)


def sales_by_region(region: str = WILDCARD) -> pd.DataFrame:
    _check(region, REGION_OPTIONS, "region")
    return _select(SALES_BY_REGION, region, REGION_OPTIONS)


def monthly_units(time_range: str = "6m") -> pd.DataFrame:
    """Most recent months of per-category units; ranges longer than the data keep everything."""
    _check(time_range, TIME_RANGE_OPTIONS, "time range")
    return MONTHLY_UNITS.tail(TIME_RANGE_MONTHS[time_range]).reset_index(drop=True).copy()


def monthly_trend() -> pd.DataFrame:
    return MONTHLY_TREND.copy()
