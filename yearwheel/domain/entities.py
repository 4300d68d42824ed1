"""Domain value objects shared by the layout engine, use cases, and view models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Mapping, Optional, Tuple

from .arc_geometry import Path, RING_FILL_RULE
from .errors import require
from .time_axis import Point, as_date

ScopeFilters = Mapping[str, bool]
"""Layer id -> whether activities of that layer take part in a layout pass."""

LAYER_TYPES: Tuple[str, ...] = ("holidays", "organization", "custom")
COMPACT_BREAKPOINT_PX = 768


def _require_text(owner: str, field_name: str, value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{owner}.{field_name} must be a non-empty string.")
    return value.strip()


@dataclass(frozen=True)
class Activity:
    """A dated item on the wheel, owned by exactly one layer ("scope")."""

    id: str
    """Opaque unique identifier."""
    title: str
    """Display title; the engine only copies it into the layout."""
    start_date: date
    """First day of the activity (inclusive)."""
    end_date: date
    """Last day of the activity (inclusive)."""
    layer_id: str
    """Identifier of the layer whose ring the activity is drawn in."""
    type_key: str = "other"
    """Categorical activity type (meeting, deadline, holiday, ...)."""
    color: str = "#7A7574"
    """Fill color hint, opaque to the engine."""
    highlight_color: str = "#494645"
    """Border/highlight color hint, opaque to the engine."""
    description: Optional[str] = None
    repeat_group_id: Optional[str] = None
    """Links occurrences of a repeated activity; irrelevant to layout."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", _require_text("Activity", "id", self.id))
        object.__setattr__(self, "layer_id", _require_text("Activity", "layer_id", self.layer_id))
        object.__setattr__(self, "start_date", as_date(self.start_date))
        object.__setattr__(self, "end_date", as_date(self.end_date))

    @property
    def is_inverted(self) -> bool:
        return self.end_date < self.start_date


@dataclass(frozen=True)
class Layer:
    """A concentric ring grouping activities; ``ring_index`` is a sort key only."""

    id: str
    name: str
    ring_index: int
    """Inner-to-outer position; gaps and ties are allowed."""
    color: str = "#7A7574"
    is_visible: bool = True
    """Default visibility offered to users."""
    layer_type: str = "custom"
    description: Optional[str] = None
    holiday_country_code: Optional[str] = None
    """ISO 3166-1 alpha-2 code for ``holidays`` layers."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", _require_text("Layer", "id", self.id))
        if isinstance(self.ring_index, bool) or not isinstance(self.ring_index, int):
            raise TypeError("Layer.ring_index must be an integer.")
        if self.layer_type not in LAYER_TYPES:
            raise ValueError(f"Layer.layer_type must be one of {', '.join(LAYER_TYPES)}.")
        if self.holiday_country_code is not None:
            object.__setattr__(self, "holiday_country_code", self.holiday_country_code.strip().upper() or None)

    @property
    def is_holiday_layer(self) -> bool:
        return self.layer_type == "holidays" and bool(self.holiday_country_code)


class ViewportClass(Enum):
    """Coarse display-size class driving view box and focus thresholds."""

    COMPACT = "compact"
    FULL = "full"

    @classmethod
    def from_width(cls, width: float, breakpoint: float = COMPACT_BREAKPOINT_PX) -> "ViewportClass":
        """Classify an available display width (presentation-side helper)."""
        return cls.COMPACT if width < breakpoint else cls.FULL


@dataclass(frozen=True)
class WheelGeometry:
    """Drawing constants for one wheel; construct a custom instance to override."""

    canvas_size: float = 1000.0
    center: Point = (500.0, 500.0)
    inner_radius: float = 110.0
    """Inner edge of the innermost layer band."""
    outer_radius: float = 360.0
    """Outer edge of the outermost layer band."""
    week_ring_inner: float = 360.0
    week_ring_outer: float = 385.0
    day_tick_inner: float = 385.0
    day_tick_outer: float = 395.0
    month_tick_outer: float = 400.0
    month_label_radius: float = 420.0
    sub_lane_gap: float = 2.0
    min_arc_degrees: float = 3.0
    max_sub_lanes: int = 3
    compact_zoom: float = 1.6
    compact_top_margin: float = 40.0

    def __post_init__(self) -> None:
        require(self.inner_radius >= 0 and self.outer_radius >= 0, "Radii must be non-negative.")
        require(self.outer_radius >= self.inner_radius, "Outer radius must not be smaller than inner radius.")
        require(self.max_sub_lanes >= 1, "max_sub_lanes must be at least 1.")
        require(self.compact_zoom > 1.0, "compact_zoom must be greater than 1.")
        require(self.canvas_size > 0, "canvas_size must be positive.")


@dataclass(frozen=True)
class LayoutAssignment:
    """Where one activity lands: band, sub-lane, angular span, and radii."""

    activity_id: str
    band_index: int
    sub_lane: int
    start_angle: float
    end_angle: float
    inner_radius: float
    outer_radius: float

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2.0


@dataclass(frozen=True)
class FocusState:
    """Highlighted activity (if any) and the whole-diagram rotation it implies."""

    activity_id: Optional[str] = None
    rotation: float = 0.0

    @property
    def is_rotated(self) -> bool:
        return self.rotation != 0.0


@dataclass(frozen=True)
class ViewBox:
    x: float
    y: float
    width: float
    height: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.x, self.y, self.width, self.height

    def __str__(self) -> str:
        return " ".join(f"{value:g}" for value in self.as_tuple())


@dataclass(frozen=True)
class DayTick:
    day: date
    angle: float
    is_month_start: bool
    is_today: bool


@dataclass(frozen=True)
class MonthTick:
    month_start: date
    angle: float
    label: str
    rotation: float
    """Text rotation in degrees, already flipped for the bottom half."""


@dataclass(frozen=True)
class WeekTick:
    week_number: int
    week_start: date
    start_angle: float
    end_angle: float
    is_odd_week: bool
    path: Path = ()
    """Band outline in the week ring; filled in by the layout pass."""


@dataclass(frozen=True)
class RingBackground:
    layer_id: str
    name: str
    color: str
    band_index: int
    inner_radius: float
    outer_radius: float
    path: Path
    fill_rule: str = RING_FILL_RULE


@dataclass(frozen=True)
class ActivityArc:
    activity_id: str
    title: str
    layer_id: str
    type_key: str
    color: str
    highlight_color: str
    assignment: LayoutAssignment
    path: Path


@dataclass(frozen=True)
class TodayMarker:
    angle: float
    inner_point: Point
    outer_point: Point


@dataclass(frozen=True)
class WheelLayout:
    """Every geometric artifact needed to render one frame."""

    today: date
    window_start: date
    window_end: date
    ring_backgrounds: Tuple[RingBackground, ...]
    day_ticks: Tuple[DayTick, ...]
    month_ticks: Tuple[MonthTick, ...]
    week_ticks: Tuple[WeekTick, ...]
    activity_arcs: Tuple[ActivityArc, ...]
    today_marker: TodayMarker

    def arc_for(self, activity_id: str) -> Optional[ActivityArc]:
        for arc in self.activity_arcs:
            if arc.activity_id == activity_id:
                return arc
        return None


__all__ = [
    "Activity",
    "ActivityArc",
    "COMPACT_BREAKPOINT_PX",
    "DayTick",
    "FocusState",
    "LAYER_TYPES",
    "Layer",
    "LayoutAssignment",
    "MonthTick",
    "RingBackground",
    "ScopeFilters",
    "TodayMarker",
    "ViewBox",
    "ViewportClass",
    "WeekTick",
    "WheelGeometry",
    "WheelLayout",
]
