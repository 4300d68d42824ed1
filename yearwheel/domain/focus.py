from __future__ import annotations

"""Whole-diagram rotation that brings a highlighted activity into view."""

from dataclasses import dataclass
from typing import Iterable, Optional

from .entities import Activity, FocusState, ViewportClass
from .time_axis import TimeAxisMapper, effective_end

VISIBLE_RANGE_DEGREES = {
    ViewportClass.COMPACT: 70.0,
    ViewportClass.FULL: 90.0,
}
RECENTER_FACTOR = {
    ViewportClass.COMPACT: 1.0,
    ViewportClass.FULL: 0.85,
}


@dataclass(frozen=True)
class FocusRotationController:
    """Two states: centered (rotation 0) or rotated toward the activity midpoint.

    Stateless; every call decides from scratch. Animating between rotations is
    left to the presentation layer.
    """

    axis: TimeAxisMapper

    def mid_angle(self, activity: Activity) -> float:
        start = activity.start_date
        end = effective_end(start, activity.end_date)
        return (self.axis.angle_of(start) + self.axis.angle_of(end)) / 2.0

    def compute_rotation(self, activity: Optional[Activity], viewport: ViewportClass) -> float:
        if activity is None:
            return 0.0
        viewport = ViewportClass(viewport)
        mid = self.mid_angle(activity)
        if abs(mid) <= VISIBLE_RANGE_DEGREES[viewport]:
            return 0.0
        return -mid * RECENTER_FACTOR[viewport]

    def focus_state(
        self,
        highlighted_id: Optional[str],
        activities: Iterable[Activity],
        viewport: ViewportClass,
    ) -> FocusState:
        """Resolve ``highlighted_id`` against ``activities`` and compute the rotation."""
        if not highlighted_id:
            return FocusState()
        activity = next((item for item in activities if item.id == highlighted_id), None)
        if activity is None:
            return FocusState()
        return FocusState(activity_id=activity.id, rotation=self.compute_rotation(activity, viewport))


__all__ = ["FocusRotationController", "RECENTER_FACTOR", "VISIBLE_RANGE_DEGREES"]
