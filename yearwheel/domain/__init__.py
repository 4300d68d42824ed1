"""Domain package exports for the wheel value objects and layout components."""

from .arc_geometry import build_annular_sector, build_full_annulus, to_svg_d
from .band_allocator import LayerBandAllocator
from .entities import (
    Activity,
    ActivityArc,
    DayTick,
    FocusState,
    Layer,
    LayoutAssignment,
    MonthTick,
    RingBackground,
    ScopeFilters,
    TodayMarker,
    ViewBox,
    ViewportClass,
    WeekTick,
    WheelGeometry,
    WheelLayout,
)
from .errors import LayoutPreconditionError
from .focus import FocusRotationController
from .ticks import TickGenerator
from .time_axis import FULL_VIEW_DAYS, TimeAxisMapper
from .viewport import ViewportAdapter

__all__ = [
    "Activity",
    "ActivityArc",
    "DayTick",
    "FULL_VIEW_DAYS",
    "FocusRotationController",
    "FocusState",
    "Layer",
    "LayerBandAllocator",
    "LayoutAssignment",
    "LayoutPreconditionError",
    "MonthTick",
    "RingBackground",
    "ScopeFilters",
    "TickGenerator",
    "TimeAxisMapper",
    "TodayMarker",
    "ViewBox",
    "ViewportAdapter",
    "ViewportClass",
    "WeekTick",
    "WheelGeometry",
    "WheelLayout",
    "build_annular_sector",
    "build_full_annulus",
    "to_svg_d",
]
