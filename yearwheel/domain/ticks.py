from __future__ import annotations

"""Day, month, and ISO-week markers around the wheel."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Sequence, Tuple

from .entities import DayTick, MonthTick, WeekTick
from .errors import require
from .locale import MONTH_NAMES
from .time_axis import TimeAxisMapper, as_date, iso_week_number

DAY_TICK_STEP = 5
MONTH_LABEL_ANCHOR_DAY = 15


def upright_rotation(angle: float, rotation_offset: float = 0.0) -> float:
    """Label rotation for ``angle``, flipped 180° on the bottom half of the wheel.

    ``rotation_offset`` is the whole-diagram rotation; it decides which half
    the label ends up on but is not added to the result.
    """
    normalized = (angle + rotation_offset) % 360.0
    if 90.0 < normalized < 270.0:
        return angle + 180.0
    return angle


def _month_starts(start: date, end: date) -> List[date]:
    months: List[date] = []
    cursor = date(start.year, start.month, 1)
    while cursor <= end:
        months.append(cursor)
        if cursor.month == 12:
            cursor = date(cursor.year + 1, 1, 1)
        else:
            cursor = date(cursor.year, cursor.month + 1, 1)
    return months


@dataclass(frozen=True)
class TickGenerator:
    """Builds axis markers for an inclusive ``[start, end]`` date range."""

    axis: TimeAxisMapper
    month_names: Sequence[str] = MONTH_NAMES["en"]

    def __post_init__(self) -> None:
        names = tuple(str(name) for name in self.month_names)
        require(len(names) == 12, "month_names must hold exactly 12 labels.")
        object.__setattr__(self, "month_names", names)

    def day_ticks(self, start: date, end: date) -> Tuple[DayTick, ...]:
        """Ticks for month starts, ``today``, and every fifth day of a month."""
        start, end = as_date(start), as_date(end)
        today = self.axis.today
        ticks: List[DayTick] = []
        day = start
        while day <= end:
            is_month_start = day.day == 1
            is_today = day == today
            if is_month_start or is_today or day.day % DAY_TICK_STEP == 0:
                ticks.append(
                    DayTick(
                        day=day,
                        angle=self.axis.angle_of(day),
                        is_month_start=is_month_start,
                        is_today=is_today,
                    )
                )
            day += timedelta(days=1)
        return tuple(ticks)

    def month_label(self, month_start: date) -> str:
        name = self.month_names[month_start.month - 1]
        if month_start.year != self.axis.today.year:
            return f"{name} '{month_start.year % 100:02d}"
        return name

    def month_ticks(self, start: date, end: date, rotation_offset: float = 0.0) -> Tuple[MonthTick, ...]:
        """One label per calendar month overlapping the range, anchored mid-month."""
        ticks: List[MonthTick] = []
        for month_start in _month_starts(as_date(start), as_date(end)):
            anchor = month_start.replace(day=MONTH_LABEL_ANCHOR_DAY)
            angle = self.axis.angle_of(anchor)
            ticks.append(
                MonthTick(
                    month_start=month_start,
                    angle=angle,
                    label=self.month_label(month_start),
                    rotation=upright_rotation(angle, rotation_offset),
                )
            )
        return tuple(ticks)

    def week_ticks(self, start: date, end: date) -> Tuple[WeekTick, ...]:
        """Seven-day bands from the Monday on or before ``start`` through ``end``."""
        start, end = as_date(start), as_date(end)
        monday = start - timedelta(days=start.weekday())
        ticks: List[WeekTick] = []
        while monday <= end:
            week_number = iso_week_number(monday)
            ticks.append(
                WeekTick(
                    week_number=week_number,
                    week_start=monday,
                    start_angle=self.axis.angle_of(monday),
                    end_angle=self.axis.angle_of(monday + timedelta(days=7)),
                    is_odd_week=week_number % 2 == 1,
                )
            )
            monday += timedelta(days=7)
        return tuple(ticks)


__all__ = ["DAY_TICK_STEP", "MONTH_LABEL_ANCHOR_DAY", "TickGenerator", "upright_rotation"]
