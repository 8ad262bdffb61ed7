"""Habit consistency over the last month."""

from __future__ import annotations

from datetime import datetime

from productivity_insights.config import DEFAULT_CONFIG, InsightConfig
from productivity_insights.formatting import percent
from productivity_insights.schema import ActivityDataset, Habit, Insight, InsightType
from productivity_insights.windows import as_datetime, window_start

CONSISTENCY_ACTIONS = (
    "Reduce the habit frequency to build consistency",
    "Add a trigger or reminder to your routine",
    "Pair this habit with an existing routine",
)


def daily_rates(habit: Habit, now: datetime, window_days: int) -> tuple[float, float]:
    """Return (completion_rate, target_rate), both as completions per day."""

    cutoff = window_start(now, window_days)
    recent = [day for day in habit.completions if as_datetime(day, now) >= cutoff]
    return len(recent) / window_days, habit.target / 7


def analyze_habit_effectiveness(
    dataset: ActivityDataset, now: datetime, config: InsightConfig = DEFAULT_CONFIG
) -> list[Insight]:
    insights: list[Insight] = []

    for habit in dataset.habits:
        completion_rate, target_rate = daily_rates(habit, now, config.habit_window_days)
        evidence = {"habit_id": habit.id, "completion_rate": completion_rate, "target_rate": target_rate}

        if completion_rate >= target_rate * config.habit_strong_ratio:
            insights.append(
                Insight(
                    type=InsightType.ACHIEVEMENT,
                    title=f'Habit "{habit.title}" Going Strong',
                    description=f"You're maintaining a {percent(completion_rate)}% completion rate on this habit.",
                    data=evidence,
                    confidence=0.8,
                    actionable=False,
                )
            )
        elif completion_rate < target_rate * config.habit_weak_ratio:
            insights.append(
                Insight(
                    type=InsightType.RECOMMENDATION,
                    title=f'Improve "{habit.title}" Consistency',
                    description=(
                        f"Your completion rate is {percent(completion_rate)}%. Consider adjusting your approach."
                    ),
                    data=evidence,
                    confidence=0.7,
                    actionable=True,
                    suggested_actions=CONSISTENCY_ACTIONS,
                )
            )

    return insights
