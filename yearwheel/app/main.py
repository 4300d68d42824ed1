# yearwheel/app/main.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

# ---- Domain ----
from ..domain.activity_types import type_color, type_highlight_color
from ..domain.arc_geometry import to_svg_d
from ..domain.entities import Activity, FocusState, Layer, ViewBox, ViewportClass, WheelLayout
from ..domain.layers import DEFAULT_LAYERS
from ..domain.locale import resolve_locale
from ..domain.ports import UseCaseError

# ---- ViewModels ----
from ..viewmodels.settings_vm import WheelSettingsVM
from ..viewmodels.wheel_vm import WheelVM

# ---- UseCases & Adapters ----
from ..adapters.holiday_rest import NagerHolidayAdapter
from ..adapters.storage_local import StorageLocal
from ..usecases.load_holiday_activities import LoadHolidayActivities
from ..usecases.manage_user_settings import LoadUserSettings

from ..utils.logging import configure_root

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Snapshot parsing
# ---------------------------------------------------------------------------
def _parse_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as exc:
        raise ValueError(f"{field_name} must be an ISO date (YYYY-MM-DD), got {value!r}.") from exc


def activity_from_dict(payload: Mapping[str, Any]) -> Activity:
    type_key = str(payload.get("type_key") or "other")
    return Activity(
        id=str(payload.get("id") or ""),
        title=str(payload.get("title") or ""),
        start_date=_parse_date(payload.get("start_date"), "start_date"),
        end_date=_parse_date(payload.get("end_date"), "end_date"),
        layer_id=str(payload.get("layer_id") or ""),
        type_key=type_key,
        color=str(payload.get("color") or type_color(type_key)),
        highlight_color=str(payload.get("highlight_color") or type_highlight_color(type_key)),
        description=payload.get("description"),
        repeat_group_id=payload.get("repeat_group_id"),
    )


def layer_from_dict(payload: Mapping[str, Any]) -> Layer:
    return Layer(
        id=str(payload.get("id") or ""),
        name=str(payload.get("name") or payload.get("id") or ""),
        ring_index=int(payload.get("ring_index", 0)),
        color=str(payload.get("color") or "#7A7574"),
        is_visible=bool(payload.get("is_visible", True)),
        layer_type=str(payload.get("layer_type") or "custom"),
        description=payload.get("description"),
        holiday_country_code=payload.get("holiday_country_code"),
    )


def load_snapshot(path: Optional[str]) -> Tuple[List[Activity], List[Layer]]:
    """Read ``{"activities": [...], "layers": [...]}`` from ``path``.

    Without a path the built-in layers are used and no activities are loaded.
    """
    if not path:
        return [], list(DEFAULT_LAYERS)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Snapshot {path} must hold a JSON object.")
    activities = [activity_from_dict(item) for item in data.get("activities") or []]
    raw_layers = data.get("layers")
    layers = [layer_from_dict(item) for item in raw_layers] if raw_layers else list(DEFAULT_LAYERS)
    return activities, layers


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
def layout_to_dict(
    layout: WheelLayout,
    focus: Optional[FocusState] = None,
    view_box: Optional[ViewBox] = None,
    *,
    precision: int = 3,
) -> Dict[str, Any]:
    """JSON-ready summary of a frame with SVG path data."""
    focus = focus or FocusState()
    return {
        "today": layout.today.isoformat(),
        "window": [layout.window_start.isoformat(), layout.window_end.isoformat()],
        "view_box": str(view_box) if view_box else None,
        "rotation": focus.rotation,
        "highlighted": focus.activity_id,
        "rings": [
            {
                "layer_id": ring.layer_id,
                "name": ring.name,
                "color": ring.color,
                "radii": [ring.inner_radius, ring.outer_radius],
                "fill_rule": ring.fill_rule,
                "d": to_svg_d(ring.path, precision),
            }
            for ring in layout.ring_backgrounds
        ],
        "arcs": [
            {
                "activity_id": arc.activity_id,
                "title": arc.title,
                "layer_id": arc.layer_id,
                "color": arc.color,
                "band": arc.assignment.band_index,
                "sub_lane": arc.assignment.sub_lane,
                "angles": [arc.assignment.start_angle, arc.assignment.end_angle],
                "d": to_svg_d(arc.path, precision),
            }
            for arc in layout.activity_arcs
        ],
        "months": [
            {"label": tick.label, "angle": tick.angle, "rotation": tick.rotation}
            for tick in layout.month_ticks
        ],
        "weeks": [
            {
                "week": tick.week_number,
                "start": tick.week_start.isoformat(),
                "odd": tick.is_odd_week,
                "d": to_svg_d(tick.path, precision),
            }
            for tick in layout.week_ticks
        ],
        "day_tick_count": len(layout.day_ticks),
    }


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI args for a single layout run."""
    parser = argparse.ArgumentParser(description="Compute a year wheel layout and print it as JSON.")
    parser.add_argument("snapshot", nargs="?", help="JSON file with 'activities' and 'layers'.")
    parser.add_argument("--today", help="Anchor date (YYYY-MM-DD); defaults to the local date.")
    parser.add_argument("--viewport", choices=[item.value for item in ViewportClass], default=None)
    parser.add_argument("--width", type=float, help="Display width in px; picks the viewport class.")
    parser.add_argument("--locale", default=None, help="Month label language (nb, nn, se, en).")
    parser.add_argument("--highlight", default=None, help="Activity id to bring into view.")
    parser.add_argument("--holidays", action="store_true", help="Fetch public holidays for holiday layers.")
    parser.add_argument("--settings-dir", default=None, help="Directory holding per-user settings files.")
    parser.add_argument("--user", default=None, help="User id whose stored settings apply.")
    parser.add_argument("--indent", type=int, default=2)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entrypoint; returns a process exit code."""
    args = _parse_args(argv)
    configure_root(logging.WARNING)

    try:
        today = _parse_date(args.today, "--today") if args.today else date.today()
        activities, layers = load_snapshot(args.snapshot)

        settings_vm = WheelSettingsVM()
        if args.settings_dir and args.user:
            stored = LoadUserSettings(StorageLocal(args.settings_dir))(args.user)
            if stored:
                settings_vm.apply_dict(stored)
        if args.locale:
            settings_vm.locale = resolve_locale(args.locale)

        if args.holidays:
            holidays = LoadHolidayActivities(NagerHolidayAdapter())(layers, today)
            activities = [*activities, *holidays]

        wheel_vm = WheelVM()
        wheel_vm.apply_settings(settings_vm.settings)
        wheel_vm.set_snapshot(activities, layers)
        if args.width is not None:
            wheel_vm.set_viewport_width(args.width)
        elif args.viewport:
            wheel_vm.set_viewport_class(ViewportClass(args.viewport))
        wheel_vm.set_highlighted(args.highlight)
        wheel_vm.set_today(today)
    except (OSError, ValueError, TypeError, UseCaseError) as exc:
        log.error("Layout failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    payload = layout_to_dict(wheel_vm.last_layout, wheel_vm.last_focus, wheel_vm.last_view_box)
    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
