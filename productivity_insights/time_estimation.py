"""Systematic over/under-estimation of task durations."""

from __future__ import annotations

from datetime import datetime

import numpy as np

from productivity_insights.config import DEFAULT_CONFIG, InsightConfig
from productivity_insights.formatting import percent
from productivity_insights.schema import ActivityDataset, Insight, InsightType


def estimation_errors(dataset: ActivityDataset) -> np.ndarray:
    """Relative error ``(actual - estimated) / estimated`` of completed, timed tasks."""

    pairs = [
        (task.estimated_time, task.actual_time)
        for task in dataset.tasks
        if task.completed and task.estimated_time and task.actual_time
    ]
    if not pairs:
        return np.array([], dtype=float)

    estimated, actual = np.asarray(pairs, dtype=float).T
    return (actual - estimated) / estimated


def analyze_time_estimation(
    dataset: ActivityDataset, now: datetime, config: InsightConfig = DEFAULT_CONFIG
) -> list[Insight]:
    errors = estimation_errors(dataset)
    if not len(errors) or len(errors) < config.min_estimated_tasks:
        return []

    avg_error = float(np.mean(errors))
    if abs(avg_error) <= config.estimation_bias_threshold:
        return []

    direction = "underestimate" if avg_error > 0 else "overestimate"
    percentage = percent(abs(avg_error))
    adjustment = "Add" if direction == "underestimate" else "Reduce"

    return [
        Insight(
            type=InsightType.PATTERN,
            title="Time Estimation Bias Detected",
            description=(
                f"You typically {direction} task duration by {percentage}%. Adjust your estimates accordingly."
            ),
            data={"avg_error": avg_error, "direction": direction, "percentage": percentage, "sample_size": len(errors)},
            confidence=0.7,
            actionable=True,
            suggested_actions=(
                f"{adjustment} 20-30% buffer time to estimates",
                "Track time more closely for better estimation",
                "Review past similar tasks before estimating",
            ),
        )
    ]
