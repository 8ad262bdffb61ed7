"""Human-readable rendering helpers for insight text."""

from __future__ import annotations

import math


def format_hour(hour: int) -> str:
    """Render an hour of day on the 12-hour clock (``12 AM``, ``1 PM``)."""

    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


def time_range(hour: int) -> str:
    """Render the one-hour window starting at ``hour``."""

    return f"{format_hour(hour)} - {format_hour((hour + 1) % 24)}"


def percent(ratio: float) -> int:
    """Ratio as a whole percentage, rounding halves up."""

    return int(math.floor(ratio * 100 + 0.5))
