from __future__ import annotations

"""Date-to-angle projection on the fixed 365-day circle.

"Today" always sits at 0° (12 o'clock). Earlier dates run counter-clockwise
into negative angles, later dates clockwise into positive ones. The circle is
exactly ``FULL_VIEW_DAYS`` long regardless of leap years, so a leap day moves
the angle by the same step as any other day.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Tuple

from .errors import require

FULL_VIEW_DAYS = 365
DEGREES_PER_DAY = 360.0 / FULL_VIEW_DAYS
DEFAULT_WINDOW_HALF_WIDTH_DAYS = 182

Point = Tuple[float, float]


def as_date(value: Any) -> date:
    """Return ``value`` as a plain ``date`` (datetimes are truncated)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date, got {type(value).__name__}.")


def days_between(start: date, end: date) -> int:
    """Signed number of calendar days from ``start`` to ``end``."""
    return (as_date(end) - as_date(start)).days


def polar_to_cartesian(cx: float, cy: float, radius: float, angle_deg: float) -> Point:
    """Convert a wheel angle to canvas coordinates with 0° pointing up."""
    rad = math.radians(angle_deg - 90.0)
    return cx + radius * math.cos(rad), cy + radius * math.sin(rad)


@dataclass(frozen=True)
class TimeAxisMapper:
    """Maps calendar dates onto the circular axis anchored at ``today``.

    ``today`` is captured once when the mapper is built, so every angle
    produced during one layout pass shares the same anchor.
    """

    today: date
    """Anchor date rendered at 0°."""
    center: Point = (500.0, 500.0)
    """Canvas coordinates of the wheel center."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "today", as_date(self.today))
        cx, cy = self.center
        object.__setattr__(self, "center", (float(cx), float(cy)))

    def angle_of(self, day: date) -> float:
        """Angle in degrees of ``day`` relative to ``today``."""
        return days_between(self.today, day) * DEGREES_PER_DAY

    def point_of(self, angle: float, radius: float) -> Point:
        """Canvas point at ``angle`` degrees and ``radius`` from the center."""
        cx, cy = self.center
        return polar_to_cartesian(cx, cy, radius, angle)

    def window(self, half_width_days: int = DEFAULT_WINDOW_HALF_WIDTH_DAYS) -> Tuple[date, date]:
        """Inclusive ``(start, end)`` dates visible around ``today``."""
        require(half_width_days >= 0, "Window half width must be non-negative.")
        span = timedelta(days=int(half_width_days))
        return self.today - span, self.today + span


# ---------------------------------------------------------------------------
# Calendar helpers
# ---------------------------------------------------------------------------


def effective_end(start: date, end: date) -> date:
    """End date used for layout; an inverted range collapses onto ``start``."""
    return end if end >= start else start


def iso_week_number(day: date) -> int:
    """ISO-8601 week number (weeks start Monday, week 1 holds the first Thursday)."""
    day = as_date(day)
    thursday = day + timedelta(days=3 - day.weekday())
    year_start = date(thursday.year, 1, 1)
    return (thursday - year_start).days // 7 + 1


def day_of_year(day: date) -> int:
    """1-based ordinal of ``day`` within its year."""
    day = as_date(day)
    return (day - date(day.year, 1, 1)).days + 1


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def activity_duration_days(activity: Any) -> int:
    """Inclusive length of an activity in days; inverted ranges count as one day."""
    start = as_date(activity.start_date)
    end = effective_end(start, as_date(activity.end_date))
    return (end - start).days + 1


__all__ = [
    "DEFAULT_WINDOW_HALF_WIDTH_DAYS",
    "DEGREES_PER_DAY",
    "FULL_VIEW_DAYS",
    "Point",
    "TimeAxisMapper",
    "activity_duration_days",
    "as_date",
    "day_of_year",
    "days_between",
    "days_in_year",
    "effective_end",
    "is_leap_year",
    "iso_week_number",
    "polar_to_cartesian",
]
