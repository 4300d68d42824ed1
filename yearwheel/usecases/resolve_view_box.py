from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..domain.entities import ViewBox, ViewportClass, WheelGeometry
from ..domain.viewport import ViewportAdapter


@dataclass
class ResolveViewBox:
    geometry: WheelGeometry = field(default_factory=WheelGeometry)

    def __call__(self, viewport: ViewportClass) -> ViewBox:
        return ViewportAdapter(self.geometry).view_box(viewport)


def view_box_for(viewport: ViewportClass, geometry: Optional[WheelGeometry] = None) -> ViewBox:
    return ResolveViewBox(geometry or WheelGeometry())(viewport)


__all__ = ["ResolveViewBox", "view_box_for"]
