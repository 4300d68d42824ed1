from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from ..domain.entities import Activity, FocusState, ViewportClass, WheelGeometry
from ..domain.focus import FocusRotationController
from ..domain.time_axis import TimeAxisMapper, as_date


@dataclass
class ComputeFocusRotation:
    """Resolve the highlighted activity and the rotation that brings it into view."""

    geometry: WheelGeometry = field(default_factory=WheelGeometry)

    def __call__(
        self,
        highlighted_id: Optional[str],
        activities: Iterable[Activity],
        viewport: ViewportClass,
        today: date,
    ) -> FocusState:
        controller = FocusRotationController(TimeAxisMapper(as_date(today), self.geometry.center))
        return controller.focus_state(highlighted_id, list(activities), viewport)


def rotation_for(
    highlighted_id: Optional[str],
    activities: Iterable[Activity],
    viewport: ViewportClass,
    today: date,
) -> float:
    """Rotation in degrees for ``highlighted_id``; 0 when nothing needs to move."""
    return ComputeFocusRotation()(highlighted_id, activities, viewport, today).rotation


__all__ = ["ComputeFocusRotation", "rotation_for"]
