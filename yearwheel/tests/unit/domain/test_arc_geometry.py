from __future__ import annotations

import pytest

from yearwheel.domain.arc_geometry import (
    ArcTo,
    ClosePath,
    LineTo,
    MoveTo,
    build_annular_sector,
    build_full_annulus,
    to_svg_d,
)
from yearwheel.domain.errors import LayoutPreconditionError

CENTER = (500.0, 500.0)


def _xy(segment) -> tuple:
    return segment.x, segment.y


def test_quarter_sector_outline() -> None:
    path = build_annular_sector(0.0, 90.0, 100.0, 200.0, CENTER)

    assert [type(segment) for segment in path] == [MoveTo, ArcTo, LineTo, ArcTo, ClosePath]
    assert _xy(path[0]) == pytest.approx((500.0, 300.0))
    assert _xy(path[1]) == pytest.approx((700.0, 500.0))
    assert path[1].sweep is True and path[1].large_arc is False
    assert _xy(path[2]) == pytest.approx((600.0, 500.0))
    assert _xy(path[3]) == pytest.approx((500.0, 400.0))
    assert path[3].sweep is False


def test_large_arc_flag_only_above_half_turn() -> None:
    half = build_annular_sector(-90.0, 90.0, 100.0, 200.0, CENTER)
    wide = build_annular_sector(-100.0, 90.0, 100.0, 200.0, CENTER)

    assert half[1].large_arc is False
    assert wide[1].large_arc is True
    assert wide[3].large_arc is True


def test_full_turn_sector_becomes_annulus() -> None:
    assert build_annular_sector(-180.0, 180.0, 100.0, 200.0, CENTER) == build_full_annulus(
        100.0, 200.0, CENTER
    )


def test_full_annulus_winds_inner_circle_the_other_way() -> None:
    path = build_full_annulus(100.0, 200.0, CENTER)

    arcs = [segment for segment in path if isinstance(segment, ArcTo)]
    assert len(path) == 8
    assert [arc.rx for arc in arcs] == [200.0, 200.0, 100.0, 100.0]
    assert [arc.sweep for arc in arcs] == [True, True, False, False]


def test_full_annulus_without_inner_radius_is_a_disk() -> None:
    path = build_full_annulus(0.0, 50.0, CENTER)

    assert len(path) == 4
    assert isinstance(path[-1], ClosePath)


def test_negative_radius_is_rejected() -> None:
    with pytest.raises(LayoutPreconditionError):
        build_annular_sector(0.0, 10.0, -1.0, 10.0, CENTER)


def test_svg_serialization_trims_noise() -> None:
    path = build_annular_sector(0.0, 90.0, 100.0, 200.0, CENTER)

    assert to_svg_d(path) == "M 500 300 A 200 200 0 0 1 700 500 L 600 500 A 100 100 0 0 0 500 400 Z"


def test_svg_serialization_rejects_unknown_segments() -> None:
    with pytest.raises(TypeError):
        to_svg_d((MoveTo(0.0, 0.0), "L 1 1"))  # type: ignore[arg-type]
