"""Deadline risk and near-completion checks for goals."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from productivity_insights.config import DEFAULT_CONFIG, InsightConfig
from productivity_insights.schema import ActivityDataset, Insight, InsightType
from productivity_insights.windows import as_datetime

AT_RISK_ACTIONS = (
    "Dedicate more time to this goal",
    "Break the goal into smaller milestones",
    "Consider extending the deadline if possible",
)


def days_remaining(deadline: datetime, now: datetime) -> int:
    """Whole days until ``deadline``, rounding any partial day up."""

    return math.ceil((deadline - now) / timedelta(days=1))


def analyze_goal_progress(
    dataset: ActivityDataset, now: datetime, config: InsightConfig = DEFAULT_CONFIG
) -> list[Insight]:
    insights: list[Insight] = []

    for goal in dataset.goals:
        if goal.deadline is None:
            continue

        remaining = days_remaining(as_datetime(goal.deadline, now), now)
        if not 0 < remaining <= config.goal_horizon_days:
            continue

        daily_needed = (100 - goal.progress) / remaining
        if daily_needed > config.goal_daily_progress_limit:
            insights.append(
                Insight(
                    type=InsightType.WARNING,
                    title=f'Goal "{goal.title}" at Risk',
                    description=(
                        f"You need {daily_needed:.1f}% daily progress to meet your deadline "
                        f"in {remaining} days."
                    ),
                    data={"goal_id": goal.id, "daily_progress_needed": daily_needed, "days_remaining": remaining},
                    confidence=0.8,
                    actionable=True,
                    suggested_actions=AT_RISK_ACTIONS,
                )
            )
        elif goal.progress >= config.goal_near_complete:
            insights.append(
                Insight(
                    type=InsightType.ACHIEVEMENT,
                    title=f'Goal "{goal.title}" Almost Complete!',
                    description=(
                        f"You're {goal.progress:g}% complete with {remaining} days remaining. "
                        "You're on track to succeed!"
                    ),
                    data={"goal_id": goal.id, "progress": goal.progress},
                    confidence=0.9,
                    actionable=False,
                )
            )

    return insights
