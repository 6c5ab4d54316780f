import logging

import streamlit as st

from bike_dashboard import charts, content, sample_sales
from bike_dashboard.config import DATA_PATH, FILTER_FIELDS, MODEL_URL, WILDCARD, configure_logging
from bike_dashboard.controller import DashboardController
from bike_dashboard.records import ParseResult, load_records

configure_logging()
logger = logging.getLogger(__name__)

# =============================
# Page config
# =============================
st.set_page_config(
    page_title="Bike Sales Dashboard",
    page_icon="🏍️",
    layout="wide",
)

# =============================
# Theme (CSS)
# =============================
st.markdown(
    """
    <style>
      .stApp {
        background: linear-gradient(180deg, #f3f6ff 0%, #ffffff 55%, #f6f4ff 100%);
      }

      section[data-testid="stSidebar"] {
        background: #1e2a5a;
      }
      section[data-testid="stSidebar"] * { color: #ffffff; }

      h1, h2, h3, h4, h5, h6 { color: #1f2a44; }
      .subtle { color: #4b5563; opacity: 0.9; }

      /* Metric cards */
      .kpi {
        background: #ffffff;
        border-radius: 12px;
        padding: 18px 14px;
        text-align: center;
        box-shadow: 0 1px 10px rgba(20, 30, 80, 0.08);
      }
      .kpi .label { font-size: 13px; color: #4b5563; font-weight: 500; }
      .kpi .value { font-size: 26px; font-weight: 750; margin-top: 4px; color: #1f2937; }

      /* Section cards */
      .card {
        background: #ffffff;
        border-radius: 12px;
        padding: 16px 18px;
        margin-bottom: 14px;
        box-shadow: 0 1px 12px rgba(20, 30, 80, 0.06);
      }
      .card h3 { color: #1e3a8a; }
      .hint { font-size: 12px; color: #4b5563; opacity: 0.9; }
    </style>
    """,
    unsafe_allow_html=True,
)


# =============================
# Helpers
# =============================
@st.cache_data(show_spinner=False)
def load_data(path: str) -> ParseResult:
    return load_records(path)


def get_controller() -> DashboardController:
    # One controller per browser session; the cached frame is shared read-only.
    if "controller" not in st.session_state:
        records = load_data(DATA_PATH).records
        logger.info("Starting dashboard session with %d listings", len(records))
        st.session_state["controller"] = DashboardController(records)
    return st.session_state["controller"]


def on_filter_change(name):
    get_controller().set_filter(name, st.session_state[f"filter_{name}"])


def on_reset_filters():
    get_controller().reset_filters()
    for name in FILTER_FIELDS:
        st.session_state.pop(f"filter_{name}", None)


def kpi(label, value):
    st.markdown(
        f"""
        <div class="kpi">
          <div class="label">{label}</div>
          <div class="value">{value}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def card(title, body):
    st.markdown(f"<div class='card'><h3>{title}</h3>{body}</div>", unsafe_allow_html=True)


# =============================
# Pages
# =============================
def page_overview():
    st.markdown("# Project Overview")
    st.markdown("<div class='subtle'>Understanding the Dataset and Objectives</div>", unsafe_allow_html=True)
    st.markdown("")
    card("Problem Statement", f"<p>{content.PROBLEM_STATEMENT}</p>")
    items = "".join(f"<li>{line}</li>" for line in content.dataset_fields())
    card("Dataset Overview", f"<ul>{items}</ul>")


def page_model_info():
    st.markdown("# Model Information")
    st.markdown("<div class='subtle'>Output Variables and Model Details</div>", unsafe_allow_html=True)
    st.markdown("")
    card("Output Variables", f"<p>{content.OUTPUT_VARIABLES}</p>")

    st.subheader("Model Architecture")
    for key, detail in content.MODEL_DETAILS.items():
        with st.expander(key, expanded=True):
            st.markdown(f"**{detail['title']}**")
            st.markdown(detail["description"])

    st.link_button("Visit Model ↗", MODEL_URL)


def page_dashboard():
    ctrl = get_controller()
    result = load_data(DATA_PATH)

    st.markdown("# Bike Sales Dashboard")
    if result.is_fallback:
        st.info(f"Could not read `{DATA_PATH}`; showing built-in sample listings.")
    elif result.errors:
        st.warning(
            f"{len(result.errors)} malformed row(s) at line(s) "
            + ", ".join(str(n) for n in result.malformed_lines)
            + "; missing fields are shown as blank."
        )

    # Filters
    cols = st.columns(len(FILTER_FIELDS))
    for col, name in zip(cols, FILTER_FIELDS):
        opts = [WILDCARD] + ctrl.options(name)
        current = ctrl.state.get(name)
        with col:
            st.selectbox(
                f"Select {name}",
                opts,
                index=opts.index(current) if current in opts else 0,
                format_func=lambda v, n=name: f"All {n}s" if v == WILDCARD else v,
                key=f"filter_{name}",
                on_change=on_filter_change,
                args=(name,),
            )

    st.sidebar.button("Reset filters", on_click=on_reset_filters)

    # Metric cards
    m = ctrl.metrics()
    c1, c2, c3 = st.columns(3)
    with c1:
        kpi("Average Price", m.average_price_display)
    with c2:
        kpi("Total Brands", f"{m.total_brands:,}")
    with c3:
        kpi("Total Bikes", f"{m.total_bikes:,}")
    st.markdown("")

    if m.total_bikes == 0:
        st.info("No listings match the current filters.")
        return

    # Charts
    left, right = st.columns(2, gap="large")
    with left:
        st.subheader("Power Distribution")
        st.plotly_chart(charts.fig_distribution_pie(ctrl.distribution_frame("power")), use_container_width=True)
    with right:
        st.subheader("Owner Distribution")
        st.plotly_chart(charts.fig_distribution_pie(ctrl.distribution_frame("owner")), use_container_width=True)

    left, right = st.columns(2, gap="large")
    with left:
        st.subheader("Listings by Brand")
        st.plotly_chart(charts.fig_distribution_bar(ctrl.distribution_frame("brand"), "Brand"),
                        use_container_width=True)
    with right:
        st.subheader("Listings by City")
        st.plotly_chart(charts.fig_distribution_line(ctrl.distribution_frame("city"), "City"),
                        use_container_width=True)

    if st.sidebar.checkbox("Show filtered table", value=False):
        st.markdown("### Filtered Listings")
        out = ctrl.filtered
        st.dataframe(out, use_container_width=True, hide_index=True)
        csv_bytes = out.to_csv(index=False).encode("utf-8")
        st.download_button("Download filtered CSV", data=csv_bytes, file_name="filtered_bikes.csv", mime="text/csv")


def page_sales_overview():
    st.markdown("# Bike Sales Overview")
    st.markdown("<div class='hint'>Illustrative sample figures.</div>", unsafe_allow_html=True)

    f1, f2, f3 = st.columns(3)
    with f1:
        time_range = st.selectbox("Time range", list(sample_sales.TIME_RANGE_OPTIONS),
                                  index=1, format_func=sample_sales.TIME_RANGE_OPTIONS.get)
    with f2:
        region = st.selectbox("Region", list(sample_sales.REGION_OPTIONS),
                              format_func=sample_sales.REGION_OPTIONS.get)
    with f3:
        category = st.selectbox("Category", list(sample_sales.CATEGORY_OPTIONS),
                                format_func=sample_sales.CATEGORY_OPTIONS.get)

    for col, (label, value) in zip(st.columns(len(sample_sales.HEADLINE_CARDS)), sample_sales.HEADLINE_CARDS):
        with col:
            kpi(label, value)
    st.markdown("")

    c1, c2 = st.columns(2, gap="large")
    with c1:
        st.subheader("Sales by Category")
        st.plotly_chart(charts.fig_category_pie(sample_sales.sales_by_category(category)), use_container_width=True)
    with c2:
        st.subheader("Sales by Region")
        st.plotly_chart(charts.fig_region_bar(sample_sales.sales_by_region(region)), use_container_width=True)

    c3, c4 = st.columns(2, gap="large")
    with c3:
        st.subheader("Monthly Sales (Bikes)")
        st.plotly_chart(charts.fig_monthly_area(sample_sales.monthly_units(time_range)), use_container_width=True)
    with c4:
        st.subheader("Sales Trends")
        st.plotly_chart(charts.fig_trend_bars(sample_sales.monthly_trend()), use_container_width=True)


PAGES = {
    "Overview": page_overview,
    "Model Info": page_model_info,
    "Dashboard": page_dashboard,
    "Sales Overview": page_sales_overview,
}

# =============================
# Navigation
# =============================
st.sidebar.markdown("## Navigation")
page = st.sidebar.radio("Go to", list(PAGES), label_visibility="collapsed")
PAGES[page]()
