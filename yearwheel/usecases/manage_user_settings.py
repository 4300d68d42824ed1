"""Use cases for loading, updating, and resetting per-user wheel settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from ..domain.ports import StoragePort, UseCaseError, UserId

UPDATABLE_KEYS = frozenset({"layer_order", "layer_visibility", "theme", "locale"})


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass
class LoadUserSettings:
    storage: StoragePort

    def __call__(self, user_id: UserId) -> Optional[Dict[str, Any]]:
        try:
            return self.storage.load_user_settings(user_id)
        except Exception as e:
            raise UseCaseError("LOAD_SETTINGS_FAILED", str(e))


@dataclass
class UpdateUserSettings:
    """Merge a partial update into the stored settings and persist the result."""

    storage: StoragePort
    clock: Callable[[], datetime] = field(default=_utc_now)

    def __call__(self, user_id: UserId, organization_id: str, **updates: Any) -> Dict[str, Any]:
        unknown = set(updates) - UPDATABLE_KEYS
        if unknown:
            raise UseCaseError(
                "INVALID_SETTINGS",
                f"Unsupported settings keys: {', '.join(sorted(unknown))}",
            )
        current = LoadUserSettings(self.storage)(user_id) or {
            "user_id": user_id,
            "organization_id": organization_id,
        }
        merged = dict(current)
        merged.update(updates)
        merged["updated_at"] = self.clock().isoformat()
        try:
            self.storage.save_user_settings(user_id, merged)
        except Exception as e:
            raise UseCaseError("SAVE_SETTINGS_FAILED", str(e))
        return merged


@dataclass
class ResetUserSettings:
    storage: StoragePort

    def __call__(self, user_id: UserId) -> None:
        try:
            self.storage.delete_user_settings(user_id)
        except Exception as e:
            raise UseCaseError("RESET_SETTINGS_FAILED", str(e))


__all__ = ["LoadUserSettings", "ResetUserSettings", "UpdateUserSettings"]
