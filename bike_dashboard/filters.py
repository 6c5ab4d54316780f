from dataclasses import dataclass, field
from typing import Dict, List

import pandas as pd

from bike_dashboard.config import WILDCARD
from bike_dashboard.records import FIELD_NAMES


@dataclass
class FilterState:
    """Equality constraints per field; WILDCARD (or an absent field) means no constraint."""

    values: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        for name in self.values:
            self._check(name)

    @staticmethod
    def _check(name: str):
        if name not in FIELD_NAMES:
            raise KeyError(f"unknown listing field: {name!r}")

    def get(self, name: str) -> str:
        self._check(name)
        return self.values.get(name, WILDCARD)

    def set(self, name: str, value: str):
        self._check(name)
        self.values[name] = value

    def reset(self):
        self.values.clear()

    def active(self) -> Dict[str, str]:
        return {k: v for k, v in self.values.items() if v != WILDCARD}


def apply_filters(df: pd.DataFrame, state: FilterState) -> pd.DataFrame:
    """Rows matching every non-wildcard constraint, in their original order."""
    mask = pd.Series(True, index=df.index)
    for name, value in state.active().items():
        mask &= df[name] == value
    return df.loc[mask].copy()


def filter_options(df: pd.DataFrame, name: str) -> List[str]:
    return df[name].dropna().drop_duplicates().tolist()
