"""Default activity type catalogue and color helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

FALLBACK_COLOR = "#7A7574"
FALLBACK_HIGHLIGHT_COLOR = "#494645"


@dataclass(frozen=True)
class ActivityTypeConfig:
    key: str
    label: str
    color: str
    highlight_color: str


DEFAULT_ACTIVITY_TYPES: tuple[ActivityTypeConfig, ...] = (
    ActivityTypeConfig("meeting", "Meeting", "#0078D4", "#00487f"),
    ActivityTypeConfig("deadline", "Deadline", "#D13438", "#7d1f22"),
    ActivityTypeConfig("event", "Event", "#107C10", "#094a09"),
    ActivityTypeConfig("planning", "Planning", "#8764B8", "#513c6e"),
    ActivityTypeConfig("review", "Review", "#FF8C00", "#995400"),
    ActivityTypeConfig("training", "Training", "#008272", "#004e44"),
    ActivityTypeConfig("holiday", "Holiday", "#E3008C", "#880054"),
    ActivityTypeConfig("other", "Other", FALLBACK_COLOR, FALLBACK_HIGHLIGHT_COLOR),
)


def find_type(
    key: str, types: Sequence[ActivityTypeConfig] = DEFAULT_ACTIVITY_TYPES
) -> Optional[ActivityTypeConfig]:
    return next((config for config in types if config.key == key), None)


def type_color(key: str, types: Sequence[ActivityTypeConfig] = DEFAULT_ACTIVITY_TYPES) -> str:
    config = find_type(key, types)
    return config.color if config else FALLBACK_COLOR


def type_highlight_color(key: str, types: Sequence[ActivityTypeConfig] = DEFAULT_ACTIVITY_TYPES) -> str:
    config = find_type(key, types)
    return config.highlight_color if config else FALLBACK_HIGHLIGHT_COLOR


def darken_color(color: str, percent: float = 40) -> str:
    """Darken a ``#RRGGBB`` (or ``#RGB``) color by ``percent``."""
    hex_value = color.strip().lstrip("#")
    if len(hex_value) == 3:
        hex_value = "".join(ch * 2 for ch in hex_value)
    if len(hex_value) != 6:
        raise ValueError(f"Unsupported color value: {color!r}")
    factor = 1 - percent / 100
    channels = [int(hex_value[i : i + 2], 16) for i in (0, 2, 4)]
    return "#" + "".join(f"{max(0, int(channel * factor)):02x}" for channel in channels)


def generate_highlight_color(color: str) -> str:
    return darken_color(color, 40)


__all__ = [
    "ActivityTypeConfig",
    "DEFAULT_ACTIVITY_TYPES",
    "darken_color",
    "find_type",
    "generate_highlight_color",
    "type_color",
    "type_highlight_color",
]
