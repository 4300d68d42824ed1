from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..domain.entities import (
    COMPACT_BREAKPOINT_PX,
    Activity,
    FocusState,
    Layer,
    ViewBox,
    ViewportClass,
    WheelGeometry,
    WheelLayout,
)
from ..domain.layers import (
    apply_user_layer_order,
    apply_visibility_overrides,
    default_scope_filters,
)
from ..domain.locale import month_names as locale_month_names
from ..domain.time_axis import DEFAULT_WINDOW_HALF_WIDTH_DAYS, as_date
from ..usecases.build_wheel_layout import BuildWheelLayout
from ..usecases.compute_focus_rotation import ComputeFocusRotation
from ..usecases.resolve_view_box import ResolveViewBox
from .settings_vm import WheelSettings

log = logging.getLogger(__name__)


@dataclass
class WheelVM:
    """Owns wheel inputs and recomputes layout, rotation, and view box on change.

    Every setter triggers :meth:`refresh`. Each derived artifact is memoized on
    the inputs it depends on, so a resize only recomputes the view box and a
    highlight change only recomputes the rotation (plus the month labels that
    depend on it).
    """

    on_update_layout: Optional[Callable[[WheelLayout], None]] = None
    on_update_rotation: Optional[Callable[[FocusState], None]] = None
    on_update_view_box: Optional[Callable[[ViewBox], None]] = None

    geometry: WheelGeometry = field(default_factory=WheelGeometry)
    today: Optional[date] = None
    activities: Tuple[Activity, ...] = ()
    layers: Tuple[Layer, ...] = ()
    scope_filters: Dict[str, bool] = field(default_factory=dict)
    layer_order: Tuple[str, ...] = ()
    highlighted_id: Optional[str] = None
    viewport_class: ViewportClass = ViewportClass.FULL
    month_names: Tuple[str, ...] = field(default_factory=lambda: locale_month_names("en"))
    window_half_width_days: int = DEFAULT_WINDOW_HALF_WIDTH_DAYS

    last_layout: Optional[WheelLayout] = None
    last_focus: FocusState = field(default_factory=FocusState)
    last_view_box: Optional[ViewBox] = None

    _layout_key: Optional[tuple] = field(default=None, init=False, repr=False)
    _focus_key: Optional[tuple] = field(default=None, init=False, repr=False)
    _view_box_key: Optional[tuple] = field(default=None, init=False, repr=False)

    # ------------------------------------------------------------------
    # Input setters
    # ------------------------------------------------------------------
    def set_snapshot(self, activities: Iterable[Activity], layers: Iterable[Layer]) -> None:
        """Replace the activity/layer snapshot and fan out the new frame."""
        activities = tuple(activities)
        layers = tuple(layers)
        for activity in activities:
            if not isinstance(activity, Activity):
                raise TypeError("WheelVM.set_snapshot requires Activity instances.")
        for layer in layers:
            if not isinstance(layer, Layer):
                raise TypeError("WheelVM.set_snapshot requires Layer instances.")

        self.activities = activities
        self.layers = layers
        # New layers start at their own default; existing choices survive.
        defaults = default_scope_filters(layers)
        defaults.update({key: value for key, value in self.scope_filters.items() if key in defaults})
        self.scope_filters = defaults
        self.refresh()

    def set_today(self, today: date) -> None:
        self.today = as_date(today)
        self.refresh()

    def set_scope_filters(self, filters: Dict[str, bool]) -> None:
        self.scope_filters = apply_visibility_overrides(self.scope_filters, filters)
        self.refresh()

    def toggle_scope(self, layer_id: str) -> bool:
        """Flip the filter for ``layer_id`` and return its new state."""
        current = self._scope_value(layer_id)
        self.scope_filters = apply_visibility_overrides(self.scope_filters, {layer_id: not current})
        self.refresh()
        return not current

    def set_highlighted(self, activity_id: Optional[str]) -> None:
        self.highlighted_id = activity_id or None
        self.refresh()

    def clear_highlight(self) -> None:
        self.set_highlighted(None)

    def set_viewport_class(self, viewport: ViewportClass) -> None:
        if not isinstance(viewport, ViewportClass):
            raise TypeError("WheelVM.set_viewport_class requires a ViewportClass.")
        self.viewport_class = viewport
        self.refresh()

    def set_viewport_width(self, width: float, breakpoint: float = COMPACT_BREAKPOINT_PX) -> ViewportClass:
        viewport = ViewportClass.from_width(width, breakpoint)
        self.set_viewport_class(viewport)
        return viewport

    def set_locale(self, locale: Optional[str]) -> None:
        self.month_names = locale_month_names(locale)
        self.refresh()

    def apply_settings(self, settings: WheelSettings) -> None:
        """Fold persisted user preferences into the wheel inputs."""
        self.layer_order = tuple(settings.layer_order)
        self.scope_filters = apply_visibility_overrides(self.scope_filters, settings.layer_visibility)
        self.month_names = locale_month_names(settings.locale)
        self.window_half_width_days = int(settings.window_half_width_days)
        self.refresh()

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    def shown_layers(self) -> List[Layer]:
        """Layers in user ring order whose scope filter is on."""
        ordered = apply_user_layer_order(self.layers, self.layer_order)
        return [layer for layer in ordered if self._scope_value(layer.id)]

    def refresh(self, force: bool = False) -> bool:
        """Recompute stale artifacts and notify listeners. Returns True if anything changed."""
        if self.today is None:
            return False

        shown = tuple(self.shown_layers())
        shown_ids = {layer.id for layer in shown}
        included = tuple(activity for activity in self.activities if activity.layer_id in shown_ids)
        changed = False

        focus_key = (self.today, self.highlighted_id, self.viewport_class, included, self.geometry)
        if force or focus_key != self._focus_key:
            self._focus_key = focus_key
            focus = ComputeFocusRotation(self.geometry)(
                self.highlighted_id, included, self.viewport_class, self.today
            )
            if force or focus != self.last_focus:
                self.last_focus = focus
                changed = True
                if self.on_update_rotation:
                    self.on_update_rotation(focus)

        layout_key = (
            self.today,
            included,
            shown,
            self.month_names,
            self.window_half_width_days,
            self.last_focus.rotation,
            self.geometry,
        )
        if force or layout_key != self._layout_key:
            self._layout_key = layout_key
            filters = {layer.id: True for layer in shown}
            self.last_layout = BuildWheelLayout(self.geometry, self.month_names)(
                included,
                shown,
                filters,
                self.today,
                self.window_half_width_days,
                rotation_offset=self.last_focus.rotation,
            )
            changed = True
            log.debug("WheelVM layout refreshed (%d arcs).", len(self.last_layout.activity_arcs))
            if self.on_update_layout:
                self.on_update_layout(self.last_layout)

        view_box_key = (self.viewport_class, self.geometry)
        if force or view_box_key != self._view_box_key:
            self._view_box_key = view_box_key
            self.last_view_box = ResolveViewBox(self.geometry)(self.viewport_class)
            changed = True
            if self.on_update_view_box:
                self.on_update_view_box(self.last_view_box)

        return changed

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _scope_value(self, layer_id: str) -> bool:
        if layer_id in self.scope_filters:
            return bool(self.scope_filters[layer_id])
        for layer in self.layers:
            if layer.id == layer_id:
                return bool(layer.is_visible)
        return True
