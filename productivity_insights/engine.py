"""Insight engine: runs every analyzer over one dataset and ranks the results."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable, Optional

from productivity_insights.config import DEFAULT_CONFIG, InsightConfig
from productivity_insights.goal_progress import analyze_goal_progress
from productivity_insights.habits import analyze_habit_effectiveness
from productivity_insights.peak_hours import analyze_peak_hours
from productivity_insights.schema import ActivityDataset, Insight
from productivity_insights.task_patterns import analyze_task_patterns
from productivity_insights.time_estimation import analyze_time_estimation
from productivity_insights.workload import analyze_workload_capacity
from productivity_insights.windows import to_local_naive

logger = logging.getLogger(__name__)

Analyzer = Callable[[ActivityDataset, datetime, InsightConfig], list[Insight]]

# Emission order; equal-confidence insights keep this order after ranking.
ANALYZERS: tuple[Analyzer, ...] = (
    analyze_peak_hours,
    analyze_task_patterns,
    analyze_goal_progress,
    analyze_workload_capacity,
    analyze_habit_effectiveness,
    analyze_time_estimation,
)


def _clamp01(value: float) -> float:
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


def rank_insights(insights: Iterable[Insight]) -> list[Insight]:
    """Clamp confidences into [0, 1] and stable-sort by descending confidence."""

    clamped = [replace(insight, confidence=_clamp01(float(insight.confidence))) for insight in insights]
    return sorted(clamped, key=lambda insight: insight.confidence, reverse=True)


def generate_insights(
    dataset: ActivityDataset,
    now: Optional[datetime] = None,
    config: Optional[InsightConfig] = None,
) -> list[Insight]:
    """Derive ranked insights from a user's activity records.

    ``now`` anchors every lookback window and defaults to the current local
    time; pass it explicitly for reproducible results. An offset-aware
    ``now`` is converted to naive local time, matching the adapters.
    """

    now = to_local_naive(now) if now is not None else datetime.now()
    config = config or DEFAULT_CONFIG

    combined: list[Insight] = []
    for analyzer in ANALYZERS:
        produced = analyzer(dataset, now, config)
        logger.debug("%s produced %d insight(s)", analyzer.__name__, len(produced))
        combined.extend(produced)

    ranked = rank_insights(combined)
    logger.debug("generated %d insight(s)", len(ranked))
    return ranked
