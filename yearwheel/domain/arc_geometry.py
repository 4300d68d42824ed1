"""Annular-sector and full-ring outlines as renderer-neutral path segments.

Call context:
    ``yearwheel.usecases.build_wheel_layout`` turns every activity assignment
    and every layer band into a path here. Presentation layers serialize the
    result with :func:`to_svg_d` or walk the segments themselves.

Responsibilities:
    - Build closed annular-sector outlines (outer arc, radial line, inner arc
      back, closing radial line).
    - Build full rings as two opposite-winding circles so the band, not the
      inner disk, is filled under either even-odd or non-zero rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .errors import require
from .time_axis import Point, polar_to_cartesian

FULL_CIRCLE_DEGREES = 360.0
RING_FILL_RULE = "evenodd"


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class ArcTo:
    """Elliptical arc to ``(x, y)``; the wheel only ever emits circles (rx == ry)."""

    rx: float
    ry: float
    large_arc: bool
    sweep: bool
    x: float
    y: float
    x_axis_rotation: float = 0.0


@dataclass(frozen=True)
class ClosePath:
    pass


Segment = Union[MoveTo, LineTo, ArcTo, ClosePath]
Path = Tuple[Segment, ...]


def build_annular_sector(
    start_angle: float,
    end_angle: float,
    inner_radius: float,
    outer_radius: float,
    center: Point = (500.0, 500.0),
) -> Path:
    """Closed outline of the ring slice between two angles and two radii.

    The outer arc runs clockwise from ``start_angle`` to ``end_angle``; the
    large-arc flag is set only when the swept angle exceeds 180°. A sweep of a
    full turn or more degenerates to :func:`build_full_annulus`.
    """
    require(inner_radius >= 0 and outer_radius >= 0, "Radii must be non-negative.")
    sweep = end_angle - start_angle
    if sweep >= FULL_CIRCLE_DEGREES:
        return build_full_annulus(inner_radius, outer_radius, center)

    cx, cy = center
    large_arc = sweep > 180.0
    outer_start = polar_to_cartesian(cx, cy, outer_radius, start_angle)
    outer_end = polar_to_cartesian(cx, cy, outer_radius, end_angle)
    inner_end = polar_to_cartesian(cx, cy, inner_radius, end_angle)
    inner_start = polar_to_cartesian(cx, cy, inner_radius, start_angle)
    return (
        MoveTo(*outer_start),
        ArcTo(outer_radius, outer_radius, large_arc, True, *outer_end),
        LineTo(*inner_end),
        ArcTo(inner_radius, inner_radius, large_arc, False, *inner_start),
        ClosePath(),
    )


def build_full_annulus(
    inner_radius: float,
    outer_radius: float,
    center: Point = (500.0, 500.0),
) -> Path:
    """Full ring: clockwise outer circle plus counter-clockwise inner circle."""
    require(inner_radius >= 0 and outer_radius >= 0, "Radii must be non-negative.")
    segments = list(_circle(center, outer_radius, clockwise=True))
    if inner_radius > 0:
        segments.extend(_circle(center, inner_radius, clockwise=False))
    return tuple(segments)


def _circle(center: Point, radius: float, *, clockwise: bool) -> Iterable[Segment]:
    # Two half-circle arcs; a single arc cannot start and end on the same point.
    cx, cy = center
    top = polar_to_cartesian(cx, cy, radius, 0.0)
    bottom = polar_to_cartesian(cx, cy, radius, 180.0)
    yield MoveTo(*top)
    yield ArcTo(radius, radius, False, clockwise, *bottom)
    yield ArcTo(radius, radius, False, clockwise, *top)
    yield ClosePath()


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in {"-0", ""}:
        return "0"
    return text


def to_svg_d(path: Path, precision: int = 3) -> str:
    """Serialize ``path`` to an SVG ``d`` attribute string."""
    parts = []
    for segment in path:
        if isinstance(segment, MoveTo):
            parts.append(f"M {_fmt(segment.x, precision)} {_fmt(segment.y, precision)}")
        elif isinstance(segment, LineTo):
            parts.append(f"L {_fmt(segment.x, precision)} {_fmt(segment.y, precision)}")
        elif isinstance(segment, ArcTo):
            parts.append(
                "A {rx} {ry} {rot} {large} {sweep} {x} {y}".format(
                    rx=_fmt(segment.rx, precision),
                    ry=_fmt(segment.ry, precision),
                    rot=_fmt(segment.x_axis_rotation, precision),
                    large=int(segment.large_arc),
                    sweep=int(segment.sweep),
                    x=_fmt(segment.x, precision),
                    y=_fmt(segment.y, precision),
                )
            )
        elif isinstance(segment, ClosePath):
            parts.append("Z")
        else:
            raise TypeError(f"Unsupported path segment: {segment!r}")
    return " ".join(parts)


__all__ = [
    "ArcTo",
    "ClosePath",
    "LineTo",
    "MoveTo",
    "Path",
    "RING_FILL_RULE",
    "Segment",
    "build_annular_sector",
    "build_full_annulus",
    "to_svg_d",
]
