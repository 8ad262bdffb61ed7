"""Core data schema for activity records and insights."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Union


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InsightType(str, Enum):
    """Closed set of insight kinds rendered by downstream consumers."""

    PATTERN = "pattern"
    RECOMMENDATION = "recommendation"
    WARNING = "warning"
    ACHIEVEMENT = "achievement"


@dataclass(frozen=True)
class Task:
    """A task record; durations are in minutes."""

    id: str
    title: str
    completed: bool
    created_at: datetime
    priority: Priority
    completed_at: Optional[datetime] = None
    category: Optional[str] = None
    estimated_time: Optional[float] = None
    actual_time: Optional[float] = None


@dataclass(frozen=True)
class Goal:
    id: str
    title: str
    progress: float
    category: str
    deadline: Optional[Union[date, datetime]] = None


@dataclass(frozen=True)
class Habit:
    """A habit with its completion dates and a weekly target frequency."""

    id: str
    title: str
    completions: tuple[Union[date, datetime], ...]
    target: float


@dataclass(frozen=True)
class TimeEntry:
    id: str
    start_time: datetime
    duration: float
    category: str
    task_id: Optional[str] = None
    end_time: Optional[datetime] = None


@dataclass(frozen=True)
class ActivityDataset:
    """Read-only snapshot of a user's activity passed into the engine."""

    tasks: tuple[Task, ...] = ()
    goals: tuple[Goal, ...] = ()
    habits: tuple[Habit, ...] = ()
    time_entries: tuple[TimeEntry, ...] = ()


@dataclass(frozen=True)
class Insight:
    """A single typed, confidence-scored finding."""

    type: InsightType
    title: str
    description: str
    data: dict[str, Any] = field(default_factory=dict)
    confidence: float = 0.0
    actionable: bool = False
    suggested_actions: tuple[str, ...] = ()
