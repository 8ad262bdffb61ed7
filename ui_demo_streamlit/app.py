"""Streamlit demo UI for productivity-insights."""

from __future__ import annotations

import json
import tempfile
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any

from productivity_insights.adapters import json_adapter
from productivity_insights.config import InsightConfig, load_config
from productivity_insights.engine import generate_insights
from productivity_insights.schema import ActivityDataset, InsightType


BADGES = {
    InsightType.ACHIEVEMENT: "🏆",
    InsightType.WARNING: "⚠️",
    InsightType.RECOMMENDATION: "💡",
    InsightType.PATTERN: "📈",
}


def _parse_uploaded(uploaded_file) -> ActivityDataset:
    return json_adapter.load_dataset(json.loads(uploaded_file.getvalue().decode("utf-8")))


def _load_uploaded_config(uploaded_file) -> tuple[InsightConfig, str]:
    with tempfile.NamedTemporaryFile(delete=False, suffix=".toml") as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return load_config(Path(temp_path))


def _build_summary(dataset: ActivityDataset) -> dict[str, Any]:
    total = len(dataset.tasks)
    done = sum(1 for task in dataset.tasks if task.completed)
    return {
        "tasks": total,
        "goals": len(dataset.goals),
        "habits": len(dataset.habits),
        "time_entries": len(dataset.time_entries),
        "done_pct": (done / total * 100.0) if total else 0.0,
    }


def run_engine(dataset: ActivityDataset, now: datetime, config: InsightConfig) -> dict[str, Any]:
    """Run the insight engine and return a UI-friendly result payload."""

    insights = generate_insights(dataset, now=now, config=config)
    return {
        "summary": _build_summary(dataset),
        "insights": insights,
        "type_counts": dict(Counter(insight.type.value for insight in insights)),
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Productivity Insights Demo", layout="wide")
    st.title("Productivity Insights: Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload activity dataset", type=["json"])
        config_file = st.file_uploader("Upload insight config", type=["toml"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        ref_date = st.date_input("Reference date", value=datetime(2025, 3, 12).date())
        ref_hour = st.slider("Reference hour", min_value=0, max_value=23, value=17)
        only_actionable = st.checkbox("Only actionable insights", value=False)
        run = st.button("Run engine", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Run engine**.")
        return

    try:
        if use_demo:
            dataset = json_adapter.parse("examples/sample_dataset.json")
            data_source = "demo dataset (examples/sample_dataset.json)"
        elif uploaded is not None:
            dataset = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a JSON file or enable 'Load demo dataset'.")
            return

        config = InsightConfig()
        if config_file is not None:
            config, warning = _load_uploaded_config(config_file)
            if warning:
                st.warning(warning)

        now = datetime(ref_date.year, ref_date.month, ref_date.day, int(ref_hour))
        result = run_engine(dataset, now, config)

        st.success(f"Loaded {data_source}.")

        st.subheader("A) Data Summary")
        summary = result["summary"]
        c1, c2, c3, c4, c5 = st.columns(5)
        c1.metric("Tasks", summary["tasks"])
        c2.metric("Goals", summary["goals"])
        c3.metric("Habits", summary["habits"])
        c4.metric("Time entries", summary["time_entries"])
        c5.metric("% done", f"{summary['done_pct']:.2f}%")

        st.subheader("B) Insights")
        insights = [i for i in result["insights"] if i.actionable or not only_actionable]
        if not insights:
            st.write("No insights for this dataset.")
        for insight in insights:
            with st.expander(f"{BADGES[insight.type]} {insight.title} ({insight.confidence:.0%})"):
                st.write(insight.description)
                for action in insight.suggested_actions:
                    st.markdown(f"- {action}")
                st.json(insight.data)

        st.subheader("C) Breakdown")
        st.table([result["type_counts"]])

    except ValueError as exc:
        st.error(f"Input error: {exc}")
    except Exception:
        st.error("Something went wrong while running the demo. Please verify the input format.")


if __name__ == "__main__":
    main()
