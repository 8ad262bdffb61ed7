from datetime import datetime, timedelta

from productivity_insights.schema import ActivityDataset, InsightType, Priority, Task
from productivity_insights.time_estimation import analyze_time_estimation, estimation_errors

NOW = datetime.fromisoformat("2025-03-12T15:00:00")


def timed(pairs, completed=True):
    created = NOW - timedelta(days=3)
    return [
        Task(
            f"t{i}",
            "timed",
            completed,
            created,
            Priority.MEDIUM,
            completed_at=created + timedelta(hours=2) if completed else None,
            estimated_time=estimated,
            actual_time=actual,
        )
        for i, (estimated, actual) in enumerate(pairs)
    ]


def test_underestimation_bias():
    insights = analyze_time_estimation(ActivityDataset(tasks=timed([(60, 90)] * 5)), NOW)
    assert len(insights) == 1
    insight = insights[0]
    assert insight.type is InsightType.PATTERN
    assert insight.title == "Time Estimation Bias Detected"
    assert insight.data["direction"] == "underestimate"
    assert insight.data["percentage"] == 50
    assert insight.confidence == 0.7
    assert insight.suggested_actions[0] == "Add 20-30% buffer time to estimates"
    assert "underestimate task duration by 50%" in insight.description


def test_overestimation_bias():
    insight = analyze_time_estimation(ActivityDataset(tasks=timed([(100, 40)] * 6)), NOW)[0]
    assert insight.data["direction"] == "overestimate"
    assert insight.data["percentage"] == 60
    assert insight.suggested_actions[0] == "Reduce 20-30% buffer time to estimates"


def test_accurate_estimates_are_silent():
    assert analyze_time_estimation(ActivityDataset(tasks=timed([(60, 70)] * 5)), NOW) == []


def test_requires_five_samples():
    assert analyze_time_estimation(ActivityDataset(tasks=timed([(30, 90)] * 4)), NOW) == []


def test_open_and_untimed_tasks_are_excluded():
    tasks = timed([(30, 90)] * 5, completed=False) + timed([(30, None), (0, 45), (None, 20)])
    assert len(estimation_errors(ActivityDataset(tasks=tasks))) == 0
    assert analyze_time_estimation(ActivityDataset(tasks=tasks), NOW) == []
