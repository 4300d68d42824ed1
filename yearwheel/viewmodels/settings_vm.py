from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..domain.locale import DEFAULT_LOCALE, SUPPORTED_LOCALES
from ..domain.time_axis import DEFAULT_WINDOW_HALF_WIDTH_DAYS
from ..utils.logging import apply_preferences, env_forces_debug

THEMES: tuple[str, ...] = ("light", "dark", "system")


@dataclass
class WheelSettings:
    """Typed user preferences that persist via the storage port."""

    locale: str = DEFAULT_LOCALE
    holiday_country: str = "NO"
    theme: str = "system"
    window_half_width_days: int = DEFAULT_WINDOW_HALF_WIDTH_DAYS
    layer_order: List[str] = field(default_factory=list)
    layer_visibility: Dict[str, bool] = field(default_factory=dict)


def _default_debug_logging() -> bool:
    return env_forces_debug()


class WheelSettingsVM:
    """Keeps wheel preference state and validation, no I/O here."""

    def __init__(
        self,
        *,
        settings: Optional[WheelSettings] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.settings = settings or WheelSettings()
        self.on_save = on_save
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed settings
    # ------------------------------------------------------------------
    @property
    def locale(self) -> str:
        return self.settings.locale

    @locale.setter
    def locale(self, value: str) -> None:
        self.settings = replace(self.settings, locale=self._coerce_locale(value))

    @property
    def layer_order(self) -> List[str]:
        return list(self.settings.layer_order)

    @layer_order.setter
    def layer_order(self, value: Any) -> None:
        self.settings = replace(self.settings, layer_order=self._coerce_id_list(value))

    @property
    def layer_visibility(self) -> Dict[str, bool]:
        return dict(self.settings.layer_visibility)

    def set_layer_visible(self, layer_id: str, visible: bool) -> None:
        visibility = dict(self.settings.layer_visibility)
        visibility[str(layer_id)] = self._coerce_bool(visible)
        self.settings = replace(self.settings, layer_visibility=visibility)

    def move_layer(self, layer_id: str, new_index: int) -> None:
        """Move ``layer_id`` to ``new_index`` in the user's ring order."""
        order = [item for item in self.settings.layer_order if item != layer_id]
        index = max(0, min(int(new_index), len(order)))
        order.insert(index, str(layer_id))
        self.settings = replace(self.settings, layer_order=order)

    def set_debug_logging(self, enabled: bool) -> int:
        self.debug_logging = self._coerce_bool(enabled)
        return apply_preferences(self.debug_logging)

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        passthrough = {"user_id", "organization_id", "updated_at"}
        allowed = {*WheelSettings.__annotations__.keys(), "debug_logging", *passthrough}
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for key in WheelSettings.__annotations__.keys():
            if key in payload:
                updates[key] = self._coerce_value(key, payload[key])
        if updates:
            self.settings = replace(self.settings, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def to_dict(self) -> dict:
        snapshot = asdict(self.settings)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    def cmd_save(self) -> None:
        if self.on_save:
            self.on_save(self.to_dict())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_value(self, key: str, raw: Any) -> Any:
        if key == "locale":
            return self._coerce_locale(raw)
        if key == "holiday_country":
            return self._coerce_country(raw)
        if key == "theme":
            return self._coerce_theme(raw)
        if key == "window_half_width_days":
            return self._coerce_int(key, raw, allow_negative=False)
        if key == "layer_order":
            return self._coerce_id_list(raw)
        if key == "layer_visibility":
            return self._coerce_visibility(raw)
        raise ValueError(f"Unhandled settings field: {key}")

    @staticmethod
    def _coerce_locale(value: Any) -> str:
        token = str(value or "").strip().lower()
        if token not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale '{token}'.")
        return token

    @staticmethod
    def _coerce_country(value: Any) -> str:
        token = str(value or "").strip().upper()
        if len(token) != 2 or not token.isalpha():
            raise ValueError("holiday_country must be a two-letter country code.")
        return token

    @staticmethod
    def _coerce_theme(value: Any) -> str:
        token = str(value or "").strip().lower()
        if token not in THEMES:
            raise ValueError(f"theme must be one of {', '.join(THEMES)}.")
        return token

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any, *, allow_negative: bool = True) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if not allow_negative and coerced < 0:
            raise ValueError(f"{name} must be non-negative.")
        return coerced

    @staticmethod
    def _coerce_id_list(value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise ValueError("layer_order must be a list of layer ids.")
        ordered: List[str] = []
        for item in value:
            token = str(item).strip()
            if token and token not in ordered:
                ordered.append(token)
        return ordered

    def _coerce_visibility(self, value: Any) -> Dict[str, bool]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("layer_visibility must be a mapping.")
        return {str(key): self._coerce_bool(flag) for key, flag in value.items()}


def default_settings_payload() -> dict:
    """Return a fresh snapshot containing the default settings payload."""
    return WheelSettingsVM().to_dict()
