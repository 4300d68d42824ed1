"""Use case for computing one renderable frame of the wheel."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Iterable, Optional, Sequence

from yearwheel.domain.arc_geometry import build_annular_sector, build_full_annulus
from yearwheel.domain.band_allocator import LayerBandAllocator, band_bounds
from yearwheel.domain.entities import (
    Activity,
    ActivityArc,
    Layer,
    RingBackground,
    ScopeFilters,
    TodayMarker,
    WheelGeometry,
    WheelLayout,
)
from yearwheel.domain.layers import is_activity_in_scope, order_layers
from yearwheel.domain.locale import MONTH_NAMES
from yearwheel.domain.ticks import TickGenerator
from yearwheel.domain.time_axis import DEFAULT_WINDOW_HALF_WIDTH_DAYS, TimeAxisMapper, as_date

log = logging.getLogger(__name__)


@dataclass
class BuildWheelLayout:
    """Turn an activity/layer snapshot into every artifact needed to draw a frame."""

    geometry: WheelGeometry = field(default_factory=WheelGeometry)
    month_names: Sequence[str] = MONTH_NAMES["en"]

    def __call__(
        self,
        activities: Iterable[Activity],
        layers: Sequence[Layer],
        scope_filters: Optional[ScopeFilters],
        today: date,
        window_half_width_days: int = DEFAULT_WINDOW_HALF_WIDTH_DAYS,
        *,
        rotation_offset: float = 0.0,
        default_visible: bool = True,
    ) -> WheelLayout:
        """Build the layout for ``today``.

        Args:
            activities: Snapshot of activities already filtered to what the
                current user may see.
            layers: Layers present in this pass; they are ring-sorted here.
            scope_filters: Layer id -> include flag. ``None`` includes all.
            today: Anchor date rendered at 0°. Never read from a clock here.
            window_half_width_days: Days shown on each side of ``today``.
            rotation_offset: Whole-diagram rotation, only used to keep month
                labels upright.
            default_visible: Filter value for layers absent from
                ``scope_filters``.

        Returns:
            WheelLayout: Pure function of the arguments; identical input gives
            an identical layout.

        Raises:
            LayoutPreconditionError: For negative window widths or inconsistent
                geometry.
        """
        geo = self.geometry
        axis = TimeAxisMapper(as_date(today), geo.center)
        window_start, window_end = axis.window(window_half_width_days)
        filters = scope_filters or {}

        ordered = order_layers(layers)
        included = [
            activity for activity in activities if is_activity_in_scope(activity, filters, default_visible)
        ]

        allocator = LayerBandAllocator(
            axis,
            window=(window_start, window_end),
            min_arc_degrees=geo.min_arc_degrees,
            sub_lane_gap=geo.sub_lane_gap,
        )
        assignments = allocator.allocate(
            included, ordered, geo.inner_radius, geo.outer_radius, geo.max_sub_lanes
        )

        by_id = {activity.id: activity for activity in included}
        arcs = []
        for activity_id, assignment in assignments.items():
            activity = by_id[activity_id]
            arcs.append(
                ActivityArc(
                    activity_id=activity_id,
                    title=activity.title,
                    layer_id=activity.layer_id,
                    type_key=activity.type_key,
                    color=activity.color,
                    highlight_color=activity.highlight_color,
                    assignment=assignment,
                    path=build_annular_sector(
                        assignment.start_angle,
                        assignment.end_angle,
                        assignment.inner_radius,
                        assignment.outer_radius,
                        geo.center,
                    ),
                )
            )

        rings = []
        for index, layer in enumerate(ordered):
            inner, outer = band_bounds(index, len(ordered), geo.inner_radius, geo.outer_radius)
            rings.append(
                RingBackground(
                    layer_id=layer.id,
                    name=layer.name,
                    color=layer.color,
                    band_index=index,
                    inner_radius=inner,
                    outer_radius=outer,
                    path=build_full_annulus(inner, outer, geo.center),
                )
            )

        ticks = TickGenerator(axis, self.month_names)
        week_ticks = tuple(
            replace(
                tick,
                path=build_annular_sector(
                    tick.start_angle, tick.end_angle, geo.week_ring_inner, geo.week_ring_outer, geo.center
                ),
            )
            for tick in ticks.week_ticks(window_start, window_end)
        )
        today_marker = TodayMarker(
            angle=0.0,
            inner_point=axis.point_of(0.0, geo.inner_radius),
            outer_point=axis.point_of(0.0, geo.month_tick_outer),
        )

        log.debug(
            "Wheel layout for %s: %d layers, %d/%d activities placed.",
            axis.today.isoformat(),
            len(ordered),
            len(arcs),
            len(included),
        )
        return WheelLayout(
            today=axis.today,
            window_start=window_start,
            window_end=window_end,
            ring_backgrounds=tuple(rings),
            day_ticks=ticks.day_ticks(window_start, window_end),
            month_ticks=ticks.month_ticks(window_start, window_end, rotation_offset),
            week_ticks=week_ticks,
            activity_arcs=tuple(arcs),
            today_marker=today_marker,
        )


def layout(
    activities: Iterable[Activity],
    layers: Sequence[Layer],
    scope_filters: Optional[ScopeFilters],
    today: date,
    window_half_width_days: int = DEFAULT_WINDOW_HALF_WIDTH_DAYS,
    **options,
) -> WheelLayout:
    """Functional entry point using the default geometry and English month labels."""
    return BuildWheelLayout()(activities, layers, scope_filters, today, window_half_width_days, **options)


__all__ = ["BuildWheelLayout", "layout"]
