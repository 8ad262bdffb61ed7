from datetime import datetime, timedelta, timezone

import pytest

from productivity_insights.config import InsightConfig
from productivity_insights.engine import ANALYZERS, generate_insights, rank_insights
from productivity_insights.schema import ActivityDataset, Goal, Habit, Insight, InsightType, Priority, Task, TimeEntry

NOW = datetime.fromisoformat("2025-03-12T15:00:00")


def busy_dataset():
    tasks = [Task(f"open{i}", "open", False, NOW - timedelta(hours=2), priority=Priority.MEDIUM) for i in range(17)]
    goals = [
        Goal("g1", "Ship v2", 10, "work", NOW + timedelta(days=3)),
        Goal("g2", "Read 12 books", 90, "personal", NOW + timedelta(days=5)),
    ]
    habits = [Habit("h1", "Meditate", tuple(NOW.date() - timedelta(days=n) for n in range(28)), 7)]
    entries = [TimeEntry("e1", NOW - timedelta(hours=1), 45, "work", task_id="open0")]
    return ActivityDataset(tasks=tasks, goals=goals, habits=habits, time_entries=entries)


def test_empty_dataset_yields_nothing():
    assert generate_insights(ActivityDataset(), now=NOW) == []


def test_analyzer_order():
    names = [analyzer.__name__ for analyzer in ANALYZERS]
    assert names == [
        "analyze_peak_hours",
        "analyze_task_patterns",
        "analyze_goal_progress",
        "analyze_workload_capacity",
        "analyze_habit_effectiveness",
        "analyze_time_estimation",
    ]


def test_ranked_by_confidence_with_stable_ties():
    insights = generate_insights(busy_dataset(), now=NOW)
    assert [insight.title for insight in insights] == [
        'Goal "Read 12 books" Almost Complete!',
        "Low Task Completion Rate",
        'Goal "Ship v2" at Risk',
        "Overloaded Schedule",
        'Habit "Meditate" Going Strong',
    ]
    confidences = [insight.confidence for insight in insights]
    assert confidences == sorted(confidences, reverse=True)
    assert all(0.0 <= value <= 1.0 for value in confidences)


def test_deterministic_for_same_input():
    dataset = busy_dataset()
    assert generate_insights(dataset, now=NOW) == generate_insights(dataset, now=NOW)


def test_dataset_is_not_modified():
    dataset = busy_dataset()
    snapshot = (list(dataset.tasks), list(dataset.goals), list(dataset.habits), list(dataset.time_entries))
    generate_insights(dataset, now=NOW)
    assert (list(dataset.tasks), list(dataset.goals), list(dataset.habits), list(dataset.time_entries)) == snapshot


def test_rank_insights_clamps_confidence():
    ranked = rank_insights(
        [
            Insight(InsightType.PATTERN, "low", "", confidence=-0.2),
            Insight(InsightType.WARNING, "high", "", confidence=1.4),
            Insight(InsightType.ACHIEVEMENT, "mid", "", confidence=0.5),
        ]
    )
    assert [(i.title, i.confidence) for i in ranked] == [("high", 1.0), ("mid", 0.5), ("low", 0.0)]


def test_defaults_to_current_time():
    recent = [Task(f"t{i}", "t", True, datetime.now() - timedelta(hours=1), Priority.LOW) for i in range(5)]
    titles = [i.title for i in generate_insights(ActivityDataset(tasks=recent))]
    assert "Excellent Task Completion" in titles


def test_empty_dataset_with_zero_minimums():
    config = InsightConfig(peak_min_samples=0, min_recent_tasks=0, min_estimated_tasks=0)
    assert generate_insights(ActivityDataset(), now=NOW, config=config) == []


def test_aware_now_is_converted_to_local_time():
    aware_now = NOW.astimezone(timezone.utc)
    assert generate_insights(busy_dataset(), now=aware_now) == generate_insights(busy_dataset(), now=NOW)


def test_priority_is_required():
    with pytest.raises(TypeError):
        Task("t1", "no priority", False, NOW)
