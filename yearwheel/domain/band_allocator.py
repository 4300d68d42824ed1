from __future__ import annotations

"""Radial band allocation and overlap resolution into sub-lanes."""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .entities import Activity, Layer, LayoutAssignment
from .errors import require
from .layers import order_layers
from .time_axis import DEFAULT_WINDOW_HALF_WIDTH_DAYS, TimeAxisMapper, effective_end

log = logging.getLogger(__name__)

MIN_ARC_DEGREES = 3.0
SUB_LANE_GAP = 2.0
DEFAULT_MAX_SUB_LANES = 3

DateRange = Tuple[date, date]


def ranges_overlap(a: DateRange, b: DateRange) -> bool:
    """Inclusive overlap test for two ``(start, end)`` date ranges."""
    return a[0] <= b[1] and a[1] >= b[0]


def band_bounds(
    band_index: int, layer_count: int, inner_radius: float, outer_radius: float
) -> Tuple[float, float]:
    """Inner and outer radius of band ``band_index`` out of ``layer_count``."""
    thickness = (outer_radius - inner_radius) / max(1, layer_count)
    start = inner_radius + band_index * thickness
    return start, start + thickness


def widen_to_minimum(start_angle: float, end_angle: float, minimum: float) -> Tuple[float, float]:
    """Expand a short span symmetrically around its midpoint to ``minimum`` degrees."""
    if end_angle - start_angle >= minimum:
        return start_angle, end_angle
    start = (start_angle + end_angle) / 2.0 - minimum / 2.0
    end = start + minimum
    # Rounding may leave the span a few ulps short.
    while end - start < minimum:
        end = math.nextafter(end, math.inf)
    return start, end


@dataclass(frozen=True)
class LayerBandAllocator:
    """Assigns every in-window activity a (band, sub-lane) slot and its geometry.

    Bands follow ring order. Within a band, activities are placed in start-date
    order (input order breaks ties) into the lowest sub-lane where nothing
    already placed overlaps them; when every lane is taken they collapse into
    the outermost lane.
    """

    axis: TimeAxisMapper
    window: Optional[DateRange] = None
    """Visible ``(start, end)``; defaults to ``axis.window()``."""
    min_arc_degrees: float = MIN_ARC_DEGREES
    sub_lane_gap: float = SUB_LANE_GAP

    def __post_init__(self) -> None:
        if self.window is None:
            object.__setattr__(self, "window", self.axis.window(DEFAULT_WINDOW_HALF_WIDTH_DAYS))

    def in_window(self, activity: Activity) -> bool:
        window_start, window_end = self.window
        start = activity.start_date
        end = effective_end(start, activity.end_date)
        return not (end < window_start or start > window_end)

    def allocate(
        self,
        activities: Iterable[Activity],
        layers: Sequence[Layer],
        inner_radius: float,
        outer_radius: float,
        max_sub_lanes: int = DEFAULT_MAX_SUB_LANES,
    ) -> Dict[str, LayoutAssignment]:
        """Return assignments keyed by activity id, in band then placement order.

        Activities outside the window, or whose layer is not in ``layers``,
        are left out. Zero layers or zero activities yield an empty mapping.

        Raises:
            LayoutPreconditionError: ``max_sub_lanes`` < 1, negative radii, or
                ``outer_radius`` < ``inner_radius``.
        """
        require(max_sub_lanes >= 1, "max_sub_lanes must be at least 1.")
        require(inner_radius >= 0 and outer_radius >= 0, "Radii must be non-negative.")
        require(outer_radius >= inner_radius, "Outer radius must not be smaller than inner radius.")

        ordered = order_layers(layers)
        band_of: Dict[str, int] = {}
        for index, layer in enumerate(ordered):
            band_of.setdefault(layer.id, index)
        layer_count = max(1, len(ordered))

        per_band: Dict[int, List[Tuple[int, Activity]]] = {}
        skipped = 0
        for position, activity in enumerate(activities):
            band = band_of.get(activity.layer_id)
            if band is None or not self.in_window(activity):
                skipped += 1
                continue
            per_band.setdefault(band, []).append((position, activity))

        assignments: Dict[str, LayoutAssignment] = {}
        for band in sorted(per_band):
            band_start, band_end = band_bounds(band, layer_count, inner_radius, outer_radius)
            lane_thickness = (band_end - band_start) / max_sub_lanes
            entries = sorted(per_band[band], key=lambda item: (item[1].start_date, item[0]))
            lanes: List[List[DateRange]] = [[] for _ in range(max_sub_lanes)]

            for _, activity in entries:
                span = (activity.start_date, effective_end(activity.start_date, activity.end_date))
                lane = self._pick_lane(lanes, span)
                lanes[lane].append(span)

                lane_inner = band_start + lane * lane_thickness
                lane_outer = max(lane_inner, band_start + (lane + 1) * lane_thickness - self.sub_lane_gap)
                start_angle, end_angle = widen_to_minimum(
                    self.axis.angle_of(span[0]),
                    self.axis.angle_of(span[1]),
                    self.min_arc_degrees,
                )
                assignments[activity.id] = LayoutAssignment(
                    activity_id=activity.id,
                    band_index=band,
                    sub_lane=lane,
                    start_angle=start_angle,
                    end_angle=end_angle,
                    inner_radius=lane_inner,
                    outer_radius=lane_outer,
                )

        if skipped:
            log.debug("Band allocation skipped %d activities (outside window or unknown layer).", skipped)
        return assignments

    @staticmethod
    def _pick_lane(lanes: List[List[DateRange]], span: DateRange) -> int:
        for index, occupied in enumerate(lanes):
            if not any(ranges_overlap(span, existing) for existing in occupied):
                return index
        log.debug("All %d sub-lanes busy for %s..%s; collapsing into the last lane.", len(lanes), *span)
        return len(lanes) - 1


__all__ = [
    "DEFAULT_MAX_SUB_LANES",
    "LayerBandAllocator",
    "MIN_ARC_DEGREES",
    "SUB_LANE_GAP",
    "band_bounds",
    "ranges_overlap",
    "widen_to_minimum",
]
