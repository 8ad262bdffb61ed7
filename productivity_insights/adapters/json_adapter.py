"""JSON adapter for activity datasets and insight reports."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Callable, TypeVar

from productivity_insights.schema import ActivityDataset, Goal, Habit, Insight, Priority, Task, TimeEntry
from productivity_insights.windows import to_local_naive

logger = logging.getLogger(__name__)

T = TypeVar("T")

_VALID_PRIORITIES = {priority.value for priority in Priority}


def _require(item: dict, fields: tuple[str, ...], where: str) -> None:
    missing = [field for field in fields if item.get(field) in (None, "")]
    if missing:
        raise ValueError(f"{where}: missing required fields {missing}")


def _iso(raw: Any, where: str, key: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(str(raw))
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{where}: malformed {key}") from exc
    return to_local_naive(parsed)


def _timestamp(item: dict, key: str, where: str) -> datetime | None:
    raw = item.get(key)
    if raw in (None, ""):
        return None
    return _iso(raw, where, key)


def _number(item: dict, key: str, where: str) -> float | None:
    raw = item.get(key)
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValueError(f"{where}: invalid {key}")
    try:
        return float(raw)
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{where}: invalid {key}") from exc


def _parse_task(item: dict, where: str) -> Task:
    _require(item, ("id", "title", "createdAt"), where)

    priority = str(item.get("priority") or Priority.MEDIUM.value).strip().lower()
    if priority not in _VALID_PRIORITIES:
        raise ValueError(f"{where}: invalid priority '{priority}'")

    category_raw = item.get("category")
    return Task(
        id=str(item["id"]).strip(),
        title=str(item["title"]),
        completed=bool(item.get("completed", False)),
        created_at=_timestamp(item, "createdAt", where),
        priority=Priority(priority),
        completed_at=_timestamp(item, "completedAt", where),
        category=str(category_raw).strip() if category_raw else None,
        estimated_time=_number(item, "estimatedTime", where),
        actual_time=_number(item, "actualTime", where),
    )


def _parse_goal(item: dict, where: str) -> Goal:
    _require(item, ("id", "title"), where)
    progress = _number(item, "progress", where)
    if progress is None or not 0 <= progress <= 100:
        raise ValueError(f"{where}: progress must be between 0 and 100")

    return Goal(
        id=str(item["id"]).strip(),
        title=str(item["title"]),
        progress=progress,
        category=str(item.get("category") or "").strip(),
        deadline=_timestamp(item, "deadline", where),
    )


def _parse_habit(item: dict, where: str) -> Habit:
    _require(item, ("id", "title", "target"), where)
    completions_raw = item.get("completions") or []
    if not isinstance(completions_raw, list):
        raise ValueError(f"{where}: completions must be a list")

    completions = {_iso(raw, where, f"completions[{index}]") for index, raw in enumerate(completions_raw)}

    return Habit(
        id=str(item["id"]).strip(),
        title=str(item["title"]),
        completions=tuple(sorted(completions)),
        target=_number(item, "target", where),
    )


def _parse_time_entry(item: dict, where: str) -> TimeEntry:
    _require(item, ("id", "startTime", "duration"), where)
    task_id = item.get("taskId")
    return TimeEntry(
        id=str(item["id"]).strip(),
        start_time=_timestamp(item, "startTime", where),
        duration=_number(item, "duration", where),
        category=str(item.get("category") or "").strip(),
        task_id=str(task_id).strip() if task_id else None,
        end_time=_timestamp(item, "endTime", where),
    )


def _parse_section(payload: dict, key: str, parser: Callable[[dict, str], T]) -> tuple[T, ...]:
    items = payload.get(key) or []
    if not isinstance(items, list):
        raise ValueError(f"{key}: expected a list of objects")

    records = []
    for index, item in enumerate(items):
        where = f"{key}[{index}]"
        if not isinstance(item, dict):
            raise ValueError(f"{where}: expected an object")
        records.append(parser(item, where))
    return tuple(records)


def load_dataset(payload: Any) -> ActivityDataset:
    """Build an activity dataset from a decoded JSON object."""

    if not isinstance(payload, dict):
        raise ValueError("JSON payload must be an object with tasks, goals, habits and timeEntries")

    dataset = ActivityDataset(
        tasks=_parse_section(payload, "tasks", _parse_task),
        goals=_parse_section(payload, "goals", _parse_goal),
        habits=_parse_section(payload, "habits", _parse_habit),
        time_entries=_parse_section(payload, "timeEntries", _parse_time_entry),
    )
    logger.debug(
        "loaded %d tasks, %d goals, %d habits, %d time entries",
        len(dataset.tasks),
        len(dataset.goals),
        len(dataset.habits),
        len(dataset.time_entries),
    )
    return dataset


def parse(file_path: str) -> ActivityDataset:
    """Parse a JSON file into an activity dataset."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    return load_dataset(payload)


def dump_insights(insights: list[Insight]) -> list[dict]:
    """Render insights as JSON-ready dictionaries."""

    return [
        {
            "type": insight.type.value,
            "title": insight.title,
            "description": insight.description,
            "data": insight.data,
            "confidence": insight.confidence,
            "actionable": insight.actionable,
            "suggestedActions": list(insight.suggested_actions),
        }
        for insight in insights
    ]
