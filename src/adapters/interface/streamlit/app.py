"""Streamlit dashboard entry point."""

from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.ports.expenses_repository import UserContext
from src.application.use_cases.get_dashboard_summary import (
    DashboardSummary,
    GetDashboardSummaryUseCase,
)
from src.domain.errors import ValidationError
from src.infrastructure.container import build_expenses_repository
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import DashboardSettings

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "BRL": "R$", "GBP": "£"}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy/pandas are usable for Altair rendering."""
    import numpy
    import pandas

    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (no ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (no Timestamp)."
    return True, None


def _fetch_dashboard_summary(
    user_id: str,
    as_of: date,
) -> DashboardSummary:
    """Fetch expenses for the user and compute the dashboard summary."""
    use_case = GetDashboardSummaryUseCase(
        expenses_repository=build_expenses_repository(),
    )
    return use_case.execute(UserContext(user_id=user_id), as_of=as_of)


@st.cache_data(show_spinner=False, ttl=30)
def _load_dashboard_summary(
    user_id: str,
    as_of: date,
    schema_version: int = 1,
) -> DashboardSummary:
    """Cached wrapper around _fetch_dashboard_summary."""
    _ = schema_version
    return _fetch_dashboard_summary(user_id, as_of)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = CURRENCY_SYMBOLS.get(currency_code, currency_code)
    return f"{value:,.2f} {symbol}"


def _prepare_category_chart_data(
    summary: DashboardSummary,
    currency_code: str,
) -> list[dict[str, str | float | int]]:
    """Prepare chart rows for each category, keeping engine order.

    Args:
        summary: Dashboard summary computed by the aggregation engine.
        currency_code: Currency code used for labels.

    Returns:
        Altair-ready rows with amount, color, icon and share labels.
    """
    data: list[dict[str, str | float | int]] = []
    for item, share in summary.category_shares():
        data.append(
            {
                "category": item.name,
                "amount": float(item.accumulated_amount),
                "color": item.color,
                "icon": item.icon or "",
                "transactions": item.transaction_count,
                "amount_label": _format_currency(
                    item.accumulated_amount,
                    currency_code,
                ),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_metrics(
    summary: DashboardSummary,
    currency_code: str,
) -> None:
    """Render the four headline metric cards."""
    total_col, month_col, count_col, average_col = st.columns(4)
    total_col.metric(
        "Total Expenses",
        _format_currency(summary.total_amount, currency_code),
        help="All time",
    )
    month_label = summary.as_of.strftime("%B %Y") if summary.as_of else ""
    month_col.metric(
        "This Month",
        _format_currency(summary.monthly_amount, currency_code),
        help=month_label,
    )
    count_col.metric(
        "Transactions",
        f"{summary.transaction_count}",
        help="Total recorded",
    )
    average_col.metric(
        "Average",
        _format_currency(summary.average_amount, currency_code),
        help="Per transaction",
    )


def _render_category_donut(
    data: list[dict[str, str | float | int]],
    chart_size: int = 300,
) -> None:
    """Render a donut chart colored with each category's own color."""
    domain = [row["category"] for row in data]
    colors = [row["color"] for row in data]
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(domain=domain, range=colors),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader("Expenses by Category")
    st.altair_chart(chart, width="stretch")


def _render_top_categories(
    data: list[dict[str, str | float | int]],
    limit: int,
) -> None:
    """Render a bar chart of the first ``limit`` categories."""
    top_rows = data[:limit]
    chart = alt.Chart(alt.Data(values=top_rows)).mark_bar().encode(
        x=alt.X("category:N", sort=None, title=None),
        y=alt.Y("amount:Q", title=None),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.subheader("Top Categories")
    st.altair_chart(chart, width="stretch")


def _render_breakdown(data: list[dict[str, str | float | int]]) -> None:
    """Render the category breakdown table."""
    st.subheader("Category Breakdown")
    rows = [
        {
            "Category": f"{row['icon']} {row['category']}".strip(),
            "Transactions": row["transactions"],
            "Amount": row["amount_label"],
            "Share": row["share_label"],
        }
        for row in data
    ]
    st.dataframe(rows, width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Expense Dashboard", layout="wide")
    st.title("Expense Dashboard")

    settings = DashboardSettings.from_env()
    if not settings.user_id:
        st.warning("Set EXPENSES_USER_ID to choose whose expenses to show.")
        return

    get_usage_logger().info(f"Dashboard viewed by user={settings.user_id}")
    try:
        summary = _load_dashboard_summary(
            settings.user_id,
            date.today(),
            schema_version=1,
        )
    except ValidationError as exc:
        st.error(f"Cannot build the dashboard: {exc}")
        return

    _render_metrics(summary, settings.currency_code)
    if not summary.category_totals:
        st.info("Start adding expenses to see your spending breakdown.")
        return

    ok, message = _check_altair_dependencies()
    data = _prepare_category_chart_data(summary, settings.currency_code)
    if ok:
        chart_left, chart_right = st.columns(2)
        with chart_left:
            _render_category_donut(data)
        with chart_right:
            _render_top_categories(data, settings.top_categories)
    else:
        st.warning(f"Charts unavailable: {message}")
    _render_breakdown(data)


if __name__ == "__main__":  # pragma: no cover
    main()
