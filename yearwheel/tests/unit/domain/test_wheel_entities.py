from __future__ import annotations

from datetime import date, datetime

import pytest

from yearwheel.domain.entities import Activity, FocusState, Layer, LayoutAssignment, WheelGeometry
from yearwheel.domain.errors import LayoutPreconditionError


def test_activity_normalizes_fields() -> None:
    activity = Activity(" a1 ", "Kickoff", datetime(2025, 3, 1, 9, 30), date(2025, 2, 27), "L1")

    assert activity.id == "a1"
    assert activity.start_date == date(2025, 3, 1)
    assert activity.is_inverted is True


@pytest.mark.parametrize("field", ["id", "layer_id"])
def test_activity_requires_identifiers(field: str) -> None:
    values = {"id": "a", "title": "A", "start_date": date(2025, 1, 1), "end_date": date(2025, 1, 1), "layer_id": "L"}
    values[field] = "  "

    with pytest.raises(ValueError):
        Activity(**values)


def test_layer_validation() -> None:
    layer = Layer("h", "Holidays", 0, layer_type="holidays", holiday_country_code="se")

    assert layer.holiday_country_code == "SE"
    assert layer.is_holiday_layer
    with pytest.raises(TypeError):
        Layer("x", "X", "0")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Layer("x", "X", True)
    with pytest.raises(ValueError):
        Layer("x", "X", 0, layer_type="team")


def test_geometry_preconditions() -> None:
    with pytest.raises(LayoutPreconditionError):
        WheelGeometry(inner_radius=300.0, outer_radius=200.0)
    with pytest.raises(LayoutPreconditionError):
        WheelGeometry(max_sub_lanes=0)
    with pytest.raises(LayoutPreconditionError):
        WheelGeometry(compact_zoom=1.0)


def test_small_value_objects() -> None:
    assignment = LayoutAssignment("a", 0, 0, -10.0, 30.0, 110.0, 150.0)

    assert assignment.mid_angle == 10.0
    assert FocusState().is_rotated is False
    assert FocusState("a", -12.0).is_rotated is True
