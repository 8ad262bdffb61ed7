"""Recent task completion and priority-mix analysis."""

from __future__ import annotations

from collections import Counter
from datetime import datetime

from productivity_insights.config import DEFAULT_CONFIG, InsightConfig
from productivity_insights.formatting import percent
from productivity_insights.schema import ActivityDataset, Insight, InsightType, Priority
from productivity_insights.windows import window_start

LOW_COMPLETION_ACTIONS = (
    "Break large tasks into smaller, manageable pieces",
    "Set more realistic deadlines",
    "Focus on 3-5 priority tasks per day",
)

PRIORITY_OVERLOAD_ACTIONS = (
    "Review and reprioritize your tasks",
    "Delegate or defer some high priority items",
    "Use the Eisenhower Matrix for better prioritization",
)


def analyze_task_patterns(
    dataset: ActivityDataset, now: datetime, config: InsightConfig = DEFAULT_CONFIG
) -> list[Insight]:
    """Evaluate the recent completion rate and the share of high priority tasks."""

    insights: list[Insight] = []
    cutoff = window_start(now, config.recent_window_days)

    recent = [task for task in dataset.tasks if task.created_at >= cutoff]
    completed = [task for task in recent if task.completed]
    completion_rate = len(completed) / len(recent) if recent else 0.0

    if recent and len(recent) >= config.min_recent_tasks:
        evidence = {"completion_rate": completion_rate, "tasks_completed": len(completed)}
        if completion_rate >= config.high_completion_rate:
            insights.append(
                Insight(
                    type=InsightType.ACHIEVEMENT,
                    title="Excellent Task Completion",
                    description=(
                        f"You've completed {percent(completion_rate)}% of your tasks this week. "
                        "Keep up the great work!"
                    ),
                    data=evidence,
                    confidence=0.9,
                    actionable=False,
                )
            )
        elif completion_rate < config.low_completion_rate:
            insights.append(
                Insight(
                    type=InsightType.WARNING,
                    title="Low Task Completion Rate",
                    description=(
                        f"Your task completion rate is {percent(completion_rate)}%. "
                        "Consider breaking down large tasks or reducing your workload."
                    ),
                    data=evidence,
                    confidence=0.8,
                    actionable=True,
                    suggested_actions=LOW_COMPLETION_ACTIONS,
                )
            )

    counts = Counter(Priority(task.priority) for task in recent)
    priority_counts = {priority.value: counts[priority] for priority in (Priority.HIGH, Priority.MEDIUM, Priority.LOW)}
    total = sum(priority_counts.values())
    if total:
        high_share = priority_counts["high"] / total
        if high_share > config.high_priority_share:
            insights.append(
                Insight(
                    type=InsightType.WARNING,
                    title="Too Many High Priority Tasks",
                    description=(
                        f"{percent(high_share)}% of your tasks are high priority. "
                        "This can lead to burnout and decision fatigue."
                    ),
                    data=priority_counts,
                    confidence=0.7,
                    actionable=True,
                    suggested_actions=PRIORITY_OVERLOAD_ACTIONS,
                )
            )

    return insights
