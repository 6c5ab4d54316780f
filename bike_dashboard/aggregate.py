from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np
import pandas as pd

from bike_dashboard.config import MISSING_LABEL
from bike_dashboard.records import NUMERIC_FIELDS

# =============================
# Helpers
# =============================
def parse_price(x):
    if x is None or (isinstance(x, float) and np.isnan(x)):
        return np.nan
    s = str(x).strip().replace("₹", "").replace(",", "")
    try:
        val = float(s)
    except ValueError:
        return np.nan
    return val if np.isfinite(val) else np.nan


def numeric_values(df: pd.DataFrame, name: str) -> pd.Series:
    """Numeric readings of a numeric schema field, with unparsable values dropped."""
    if name not in NUMERIC_FIELDS:
        raise ValueError(f"{name!r} is not a numeric listing field; expected one of {NUMERIC_FIELDS}")
    return df[name].map(parse_price).dropna().astype(float)


def fmt_inr(x):
    """Format as Indian Rupees with lakh/crore digit grouping, e.g. ₹1,23,456.00."""
    if x is None or (isinstance(x, float) and np.isnan(x)):
        return "N/A"
    sign = "-" if x < 0 else ""
    whole, frac = f"{abs(x):.2f}".split(".")
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])
    return f"{sign}₹{whole}.{frac}"


# =============================
# Distributions
# =============================
def distribution(df: pd.DataFrame, name: str) -> Dict[str, int]:
    """
    Count rows per distinct value of ``name``.

    Keys come out in order of first occurrence; missing values are counted
    under MISSING_LABEL so the counts always add up to len(df).
    """
    col = df[name].fillna(MISSING_LABEL).astype(str)
    counts = col.groupby(col, sort=False).size()
    return {k: int(v) for k, v in counts.items()}


def distribution_frame(df: pd.DataFrame, name: str) -> pd.DataFrame:
    dist = distribution(df, name)
    return pd.DataFrame({"name": list(dist.keys()), "value": list(dist.values())})


# =============================
# Metrics
# =============================
@dataclass(frozen=True)
class Metrics:
    average_price: Optional[float]
    total_brands: int
    total_bikes: int

    @property
    def average_price_display(self) -> str:
        return fmt_inr(self.average_price)


def metrics(df: pd.DataFrame) -> Metrics:
    # Missing or non-numeric prices are left out of both the sum and the count.
    prices = numeric_values(df, "price")
    avg_price = float(prices.mean()) if not prices.empty else None
    return Metrics(
        average_price=avg_price,
        total_brands=int(df["brand"].nunique(dropna=True)),
        total_bikes=len(df),
    )
