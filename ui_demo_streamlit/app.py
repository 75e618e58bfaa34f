"""Streamlit dashboard demo for bizops-engine."""

from __future__ import annotations

import tempfile
from datetime import datetime, time
from pathlib import Path
from typing import Any

from bizops_engine.adapters.loader import load_tasks, load_transactions
from bizops_engine.logging_setup import configure_logging
from bizops_engine.report import build_report

DEMO_TRANSACTIONS = "examples/sample_transactions.csv"
DEMO_TASKS = "examples/sample_tasks.csv"


def _save_uploaded(uploaded_file) -> str:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        return handle.name


def _fmt_money(value: float) -> str:
    return f"${value:,.2f}"


def run_dashboard(transactions: list, tasks: list, now: datetime) -> dict[str, Any]:
    """Run all engine steps and return a UI-friendly result payload."""

    report = build_report(transactions, tasks, now)
    revenue = report["dashboard"]["revenue"]
    return {
        "headline": {
            "revenue": _fmt_money(revenue["total"]),
            "expenses": _fmt_money(revenue["expenses"]),
            "net": _fmt_money(revenue["net"]),
            "open_tasks": len(report["priorities"]),
        },
        "categories": report["categories"],
        "anomalies": [
            {"description": f.transaction.description, "date": f.transaction.date.isoformat(), "reason": f.reason}
            for f in report["anomalies"]
        ],
        "priorities": [
            {"title": r.task.title, "priority": r.task.priority, "score": r.score, "suggestion": r.suggestion}
            for r in report["priorities"]
        ],
        "chart_data": report["dashboard"]["chart_data"],
        "category_breakdown": report["dashboard"]["category_breakdown"],
        "task_stats": report["dashboard"]["task_stats"],
        "notifications": [n.message for n in report["notifications"]],
    }


def main() -> None:
    import streamlit as st

    configure_logging()

    st.set_page_config(page_title="Business Operations Dashboard", layout="wide")
    st.title("Business Operations Dashboard")

    with st.sidebar:
        st.header("Controls")
        uploaded_transactions = st.file_uploader("Transactions", type=["csv", "json"])
        uploaded_tasks = st.file_uploader("Tasks", type=["csv", "json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        as_of = st.date_input("As of", value=datetime.now().date())
        run = st.button("Run engine", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Run engine**.")
        return

    try:
        if use_demo:
            transactions = load_transactions(DEMO_TRANSACTIONS)
            tasks = load_tasks(DEMO_TASKS)
        elif uploaded_transactions is not None and uploaded_tasks is not None:
            transactions = load_transactions(_save_uploaded(uploaded_transactions))
            tasks = load_tasks(_save_uploaded(uploaded_tasks))
        else:
            st.error("Please upload both files or enable 'Load demo dataset'.")
            return

        result = run_dashboard(transactions, tasks, datetime.combine(as_of, time.min))

        headline = result["headline"]
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Revenue", headline["revenue"])
        c2.metric("Expenses", headline["expenses"])
        c3.metric("Net income", headline["net"])
        c4.metric("Open tasks", headline["open_tasks"])

        st.subheader("Monthly revenue")
        if result["chart_data"]:
            st.bar_chart(result["chart_data"], x="month", y=["revenue", "expenses"])

        st.subheader("Category breakdown")
        st.table(result["category_breakdown"])

        st.subheader("Suggested categories")
        st.table(result["categories"])

        st.subheader("Anomalies")
        if result["anomalies"]:
            st.table(result["anomalies"])
        else:
            st.write("No unusual transactions.")

        st.subheader("Task priorities")
        st.table(result["priorities"])
        st.table([result["task_stats"]])

        for message in result["notifications"]:
            st.warning(message)

    except ValueError as exc:
        st.error(f"Input error: {exc}")


if __name__ == "__main__":
    main()
