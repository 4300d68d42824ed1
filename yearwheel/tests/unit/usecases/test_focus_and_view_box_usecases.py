from __future__ import annotations

from datetime import date

import pytest

from yearwheel.domain.entities import Activity, ViewBox, ViewportClass, WheelGeometry
from yearwheel.domain.time_axis import DEGREES_PER_DAY
from yearwheel.usecases.compute_focus_rotation import ComputeFocusRotation, rotation_for
from yearwheel.usecases.resolve_view_box import ResolveViewBox, view_box_for

TODAY = date(2025, 6, 15)
ACTIVITIES = [
    Activity("near", "Near", date(2025, 6, 20), date(2025, 6, 22), "L1"),
    Activity("far", "Far", date(2025, 11, 12), date(2025, 11, 14), "L1"),
]


def test_rotation_for_near_and_far_activities() -> None:
    assert rotation_for("near", ACTIVITIES, ViewportClass.FULL, TODAY) == 0.0
    assert rotation_for(None, ACTIVITIES, ViewportClass.FULL, TODAY) == 0.0
    assert rotation_for("far", ACTIVITIES, ViewportClass.COMPACT, TODAY) == pytest.approx(-151 * DEGREES_PER_DAY)


def test_compute_focus_rotation_returns_state() -> None:
    state = ComputeFocusRotation()("far", ACTIVITIES, ViewportClass.FULL, TODAY)

    assert state.activity_id == "far"
    assert state.rotation == pytest.approx(-151 * DEGREES_PER_DAY * 0.85)


def test_view_box_for_viewports() -> None:
    assert view_box_for(ViewportClass.FULL) == ViewBox(0.0, 0.0, 1000.0, 1000.0)
    assert view_box_for(ViewportClass.COMPACT).as_tuple() == pytest.approx((187.5, 40.0, 625.0, 625.0))
    assert ResolveViewBox(WheelGeometry(canvas_size=800.0, center=(400.0, 400.0)))(
        ViewportClass.FULL
    ) == ViewBox(0.0, 0.0, 800.0, 800.0)
