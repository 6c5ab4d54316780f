import logging
import os

# =============================
# Paths & runtime settings
# =============================
DATA_PATH = os.environ.get("BIKE_DASHBOARD_DATA", os.path.join("data", "bikes.csv"))
LOG_LEVEL = os.environ.get("BIKE_DASHBOARD_LOG_LEVEL", "INFO").upper()

# =============================
# Dashboard constants
# =============================
WILDCARD = "all"
# Holds a comma, so no parsed field value can ever equal it.
MISSING_LABEL = "(blank, not listed)"
FILTER_FIELDS = ("city", "brand", "power")

MODEL_URL = "https://bimodelprediction.onrender.com"

COLORS = [
    "#FF6384",
    "#36A2EB",
    "#FFCE56",
    "#4BC0C0",
    "#9966FF",
    "#FF9F40",
    "#4BC0C0",
    "#36A2EB",
    "#FF6384",
    "#FFB1C1",
]
SALES_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042"]


def configure_logging(level=None):
    """Set up root logging once; later calls only adjust the level."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO))
