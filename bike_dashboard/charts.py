import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from bike_dashboard.config import COLORS, SALES_COLORS

LAYOUT = dict(height=400, margin=dict(l=10, r=10, t=40, b=10))


def _finish(fig: go.Figure, height: int = None) -> go.Figure:
    fig.update_layout(**LAYOUT)
    if height:
        fig.update_layout(height=height)
    return fig


# =============================
# Listings dashboard
# =============================
def fig_distribution_pie(dist: pd.DataFrame, colors=COLORS) -> go.Figure:
    fig = px.pie(
        dist,
        values="value",
        names="name",
        color_discrete_sequence=colors,
        template="plotly_white",
    )
    fig.update_traces(textinfo="value+percent")
    return _finish(fig)


def fig_distribution_bar(dist: pd.DataFrame, label: str) -> go.Figure:
    fig = px.bar(
        dist,
        x="name",
        y="value",
        labels={"name": label, "value": "Listings"},
        color_discrete_sequence=["#36A2EB"],
        template="plotly_white",
    )
    return _finish(fig)


def fig_distribution_line(dist: pd.DataFrame, label: str) -> go.Figure:
    fig = px.line(
        dist,
        x="name",
        y="value",
        markers=True,
        labels={"name": label, "value": "Listings"},
        color_discrete_sequence=["#8884d8"],
        template="plotly_white",
    )
    return _finish(fig)


# =============================
# Sales overview
# =============================
def fig_category_pie(sales: pd.DataFrame) -> go.Figure:
    return _finish(fig_distribution_pie(sales, colors=SALES_COLORS), height=300)


def fig_region_bar(sales: pd.DataFrame) -> go.Figure:
    fig = px.bar(
        sales,
        x="name",
        y="value",
        labels={"name": "Region", "value": "Sales"},
        color_discrete_sequence=["#8884d8"],
        template="plotly_white",
    )
    return _finish(fig, height=300)


def fig_monthly_area(monthly: pd.DataFrame) -> go.Figure:
    fig = px.area(
        monthly,
        x="month",
        y=["mountain", "road"],
        labels={"month": "Month", "value": "Units", "variable": "Category"},
        color_discrete_sequence=["#8884d8", "#82ca9d"],
        template="plotly_white",
    )
    return _finish(fig, height=300)


def fig_trend_bars(trend: pd.DataFrame) -> go.Figure:
    fig = px.bar(
        trend,
        x="month",
        y=["sales", "service", "accessories"],
        barmode="group",
        labels={"month": "Month", "value": "Amount", "variable": "Stream"},
        color_discrete_sequence=["#8884d8", "#82ca9d", "#ffc658"],
        template="plotly_white",
    )
    return _finish(fig, height=300)
