from __future__ import annotations

from dataclasses import dataclass, field

from .entities import ViewBox, ViewportClass, WheelGeometry


@dataclass(frozen=True)
class ViewportAdapter:
    """Visible coordinate window per viewport class.

    The full window shows the whole canvas. The compact window zooms in by
    ``geometry.compact_zoom``, stays horizontally centered on the wheel, and
    starts just above the month labels so "today" (always at the top) is in
    view without panning.
    """

    geometry: WheelGeometry = field(default_factory=WheelGeometry)

    def view_box(self, viewport: ViewportClass) -> ViewBox:
        geo = self.geometry
        if ViewportClass(viewport) is ViewportClass.FULL:
            return ViewBox(0.0, 0.0, geo.canvas_size, geo.canvas_size)
        side = geo.canvas_size / geo.compact_zoom
        cx, cy = geo.center
        top = cy - geo.month_label_radius - geo.compact_top_margin
        return ViewBox(cx - side / 2.0, top, side, side)


__all__ = ["ViewportAdapter"]
