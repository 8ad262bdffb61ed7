"""Today's outstanding workload versus a working day."""

from __future__ import annotations

from datetime import datetime

from productivity_insights.config import DEFAULT_CONFIG, InsightConfig
from productivity_insights.schema import ActivityDataset, Insight, InsightType
from productivity_insights.windows import start_of_day

OVERLOAD_ACTIONS = (
    "Move non-urgent tasks to tomorrow",
    "Delegate tasks if possible",
    "Focus on your top 3 priorities only",
)


def analyze_workload_capacity(
    dataset: ActivityDataset, now: datetime, config: InsightConfig = DEFAULT_CONFIG
) -> list[Insight]:
    """Warn when open tasks created today add up to more than a working day.

    Tasks without an estimate count as ``default_estimate_minutes``.
    """

    today = start_of_day(now)
    open_today = [task for task in dataset.tasks if task.created_at >= today and not task.completed]

    minutes = sum(task.estimated_time or config.default_estimate_minutes for task in open_today)
    hours = minutes / 60

    if hours <= config.workday_hours:
        return []

    return [
        Insight(
            type=InsightType.WARNING,
            title="Overloaded Schedule",
            description=(
                f"You have {hours:.1f} hours of estimated work today. Consider rescheduling some tasks."
            ),
            data={"estimated_hours": hours, "task_count": len(open_today)},
            confidence=0.8,
            actionable=True,
            suggested_actions=OVERLOAD_ACTIONS,
        )
    ]
