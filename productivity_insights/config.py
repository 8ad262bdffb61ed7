"""Analyzer thresholds, windows and minimum sample sizes."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path


def _as_float(value, *, default: float) -> float:
    try:
        return float(value)
    except Exception:  # noqa: BLE001
        return float(default)


def _as_int(value, *, default: int) -> int:
    if isinstance(value, bool):
        return int(default)
    try:
        return int(value)
    except Exception:  # noqa: BLE001
        return int(default)


@dataclass(frozen=True)
class InsightConfig:
    # peak hours
    peak_min_samples: int = 3
    peak_confidence_cap: float = 0.9
    peak_confidence_divisor: float = 10.0

    # task completion patterns
    recent_window_days: int = 7
    min_recent_tasks: int = 5
    high_completion_rate: float = 0.8
    low_completion_rate: float = 0.5
    high_priority_share: float = 0.6

    # goal progress
    goal_horizon_days: int = 30
    goal_daily_progress_limit: float = 10.0
    goal_near_complete: float = 80.0

    # workload capacity
    workday_hours: float = 8.0
    default_estimate_minutes: float = 30.0

    # habit effectiveness
    habit_window_days: int = 30
    habit_strong_ratio: float = 0.8
    habit_weak_ratio: float = 0.5

    # time estimation
    min_estimated_tasks: int = 5
    estimation_bias_threshold: float = 0.3

    def __post_init__(self) -> None:
        for name in DIVISOR_FIELDS:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")


# Windows, divisors and minimum sample sizes; zero is never meaningful.
DIVISOR_FIELDS = ("peak_confidence_divisor", "habit_window_days")
POSITIVE_FIELDS = DIVISOR_FIELDS + (
    "peak_min_samples",
    "recent_window_days",
    "min_recent_tasks",
    "goal_horizon_days",
    "min_estimated_tasks",
)

DEFAULT_CONFIG = InsightConfig()


def load_config(path: Path) -> tuple[InsightConfig, str]:
    """Load analyzer settings from the ``[insights]`` table of a TOML file.

    Returns (config, warning). Warning is empty on success. Values that
    cannot be coerced or are out of range fall back to their defaults.
    """

    if not path.exists():
        return InsightConfig(), ""

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        return InsightConfig(), f"{path.name} parse failed: {exc}"

    section = data.get("insights")
    if section is None:
        return InsightConfig(), ""
    if not isinstance(section, dict):
        return InsightConfig(), f"{path.name} parse failed: [insights] is not a table"

    values = {}
    invalid = []
    unknown = sorted(set(section) - {f.name for f in fields(InsightConfig)})
    for spec in fields(InsightConfig):
        default = spec.default
        raw = section.get(spec.name, default)
        if isinstance(default, int):
            value = _as_int(raw, default=default)
        else:
            value = _as_float(raw, default=default)

        floor_ok = value > 0 if spec.name in POSITIVE_FIELDS else value >= 0
        if not floor_ok:
            invalid.append(spec.name)
            value = default
        values[spec.name] = value

    warnings = []
    if unknown:
        warnings.append(f"ignoring unknown keys {unknown}")
    if invalid:
        warnings.append(f"using defaults for out-of-range keys {invalid}")
    warning = f"{path.name}: {'; '.join(warnings)}" if warnings else ""
    return InsightConfig(**values), warning
