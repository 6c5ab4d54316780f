from typing import Dict, List

import pandas as pd

from bike_dashboard.aggregate import Metrics, distribution, distribution_frame, metrics
from bike_dashboard.filters import FilterState, apply_filters, filter_options


class DashboardController:
    """
    Owns one listing set and the filter selection made against it.

    The listing set is never modified; every read recomputes the filtered
    view from the current selection, so charts and cards always agree.
    """

    def __init__(self, records: pd.DataFrame, state: FilterState = None):
        self._records = records
        self.state = state if state is not None else FilterState()

    @property
    def records(self) -> pd.DataFrame:
        return self._records

    @property
    def filtered(self) -> pd.DataFrame:
        return apply_filters(self._records, self.state)

    def set_filter(self, name: str, value: str):
        self.state.set(name, value)

    def reset_filters(self):
        self.state.reset()

    def options(self, name: str) -> List[str]:
        # Offered choices come from the full set so a narrow selection can be widened again.
        return filter_options(self._records, name)

    def distribution(self, name: str) -> Dict[str, int]:
        return distribution(self.filtered, name)

    def distribution_frame(self, name: str) -> pd.DataFrame:
        return distribution_frame(self.filtered, name)

    def metrics(self) -> Metrics:
        return metrics(self.filtered)
