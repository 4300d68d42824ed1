from __future__ import annotations
from typing import Any, Dict, List, Optional, Protocol

from .holidays import HolidayCountry, PublicHoliday

UserId = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta or {}


# ---- Ports (Hexagonal boundaries) ----
class HolidayPort(Protocol):
    """Remote public-holiday calendar feed."""

    def fetch_public_holidays(self, country_code: str, year: int) -> List[PublicHoliday]: ...
    def available_countries(self) -> List[HolidayCountry]: ...


class StoragePort(Protocol):
    """Persistence for per-user wheel preferences (flat JSON-able dicts)."""

    def load_user_settings(self, user_id: UserId) -> Optional[Dict[str, Any]]: ...
    def save_user_settings(self, user_id: UserId, payload: Dict[str, Any]) -> None: ...
    def delete_user_settings(self, user_id: UserId) -> None: ...
