from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .entities import Activity, Layer, ScopeFilters

DEFAULT_LAYERS: tuple[Layer, ...] = (
    Layer(
        id="layer-holidays-no",
        name="Norwegian Holidays",
        description="Norwegian public holidays (helligdager)",
        layer_type="holidays",
        color="#E74C3C",
        ring_index=0,
        holiday_country_code="NO",
    ),
    Layer(
        id="layer-org",
        name="Organization",
        description="Organization-wide events and activities",
        layer_type="organization",
        color="#9B59B6",
        ring_index=1,
    ),
    Layer(
        id="layer-groups",
        name="Groups",
        description="Team and group activities",
        layer_type="custom",
        color="#2ECC71",
        ring_index=2,
    ),
)


def order_layers(layers: Iterable[Layer]) -> List[Layer]:
    """Sort layers inner-to-outer by ring index; ties keep input order."""
    return sorted(layers, key=lambda layer: layer.ring_index)


def visible_layers(layers: Iterable[Layer]) -> List[Layer]:
    """Return only layers flagged visible, in ring order."""
    return order_layers(layer for layer in layers if layer.is_visible)


def default_scope_filters(layers: Iterable[Layer]) -> Dict[str, bool]:
    """Filter map that mirrors each layer's default visibility."""
    return {layer.id: bool(layer.is_visible) for layer in layers}


def apply_visibility_overrides(
    filters: ScopeFilters, overrides: Optional[Mapping[str, bool]]
) -> Dict[str, bool]:
    merged = dict(filters)
    for layer_id, visible in (overrides or {}).items():
        merged[str(layer_id)] = bool(visible)
    return merged


def apply_user_layer_order(layers: Sequence[Layer], order: Optional[Sequence[str]]) -> List[Layer]:
    """Re-index layers named in ``order`` by their position in it.

    Layers missing from ``order`` keep their own ring index. An empty order
    leaves the input untouched.
    """
    if not order:
        return list(layers)
    positions = {layer_id: index for index, layer_id in enumerate(order)}
    reindexed = [
        replace(layer, ring_index=positions[layer.id]) if layer.id in positions else layer
        for layer in layers
    ]
    return order_layers(reindexed)


def is_activity_in_scope(activity: Activity, filters: ScopeFilters, default: bool = True) -> bool:
    """Whether ``activity`` passes the scope filter; absent layers use ``default``."""
    return bool(filters.get(activity.layer_id, default))


__all__ = [
    "DEFAULT_LAYERS",
    "apply_user_layer_order",
    "apply_visibility_overrides",
    "default_scope_filters",
    "is_activity_in_scope",
    "order_layers",
    "visible_layers",
]
