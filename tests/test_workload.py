from datetime import datetime, timedelta

from productivity_insights.config import InsightConfig
from productivity_insights.schema import ActivityDataset, InsightType, Priority, Task
from productivity_insights.workload import analyze_workload_capacity

NOW = datetime.fromisoformat("2025-03-12T15:00:00")


def open_tasks(count, estimate=None, created=NOW - timedelta(hours=3)):
    return [Task(f"t{i}", "open", False, created, Priority.MEDIUM, estimated_time=estimate) for i in range(count)]


def test_overloaded_with_default_estimates():
    insights = analyze_workload_capacity(ActivityDataset(tasks=open_tasks(17)), NOW)
    assert len(insights) == 1
    assert insights[0].type is InsightType.WARNING
    assert insights[0].title == "Overloaded Schedule"
    assert insights[0].data == {"estimated_hours": 8.5, "task_count": 17}
    assert "8.5 hours" in insights[0].description


def test_exactly_a_working_day_is_fine():
    assert analyze_workload_capacity(ActivityDataset(tasks=open_tasks(16)), NOW) == []


def test_explicit_estimates():
    assert analyze_workload_capacity(ActivityDataset(tasks=open_tasks(3, estimate=180)), NOW)[0].confidence == 0.8


def test_completed_and_older_tasks_are_excluded():
    tasks = open_tasks(4, estimate=240, created=NOW - timedelta(days=1))
    tasks += [Task("done", "done", True, NOW - timedelta(hours=1), Priority.LOW, completed_at=NOW, estimated_time=600)]
    assert analyze_workload_capacity(ActivityDataset(tasks=tasks), NOW) == []


def test_workday_is_configurable():
    config = InsightConfig(workday_hours=1.0)
    assert len(analyze_workload_capacity(ActivityDataset(tasks=open_tasks(3)), NOW, config)) == 1
