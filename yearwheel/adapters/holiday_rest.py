"""Public-holiday feed adapter backed by the Nager.Date REST API.

Call context:
    Wired into ``LoadHolidayActivities`` as its ``HolidayPort``.

Caching:
    Results are kept per (country, year) for ``cache_ttl_s`` seconds. When a
    refresh fails and an older entry exists, the stale entry is returned.
"""

from __future__ import annotations

import logging
import time
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Tuple

from yearwheel.adapters.api_errors import FeedError, raise_for_status
from yearwheel.adapters.http_client import HttpConfig, RetryingSession
from yearwheel.domain.holidays import (
    SUPPORTED_COUNTRIES,
    HolidayCountry,
    PublicHoliday,
    is_national_holiday,
)
from yearwheel.domain.ports import HolidayPort

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://date.nager.at/api/v3"
CACHE_TTL_S = 24 * 60 * 60

CacheKey = Tuple[str, int]


class NagerHolidayAdapter(HolidayPort):
    """Fetch public holidays and available countries from Nager.Date."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        cfg: Optional[HttpConfig] = None,
        *,
        cache_ttl_s: float = CACHE_TTL_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.http = RetryingSession(cfg)
        self.cache_ttl_s = cache_ttl_s
        self.clock = clock
        self._cache: Dict[CacheKey, Tuple[List[PublicHoliday], float]] = {}

    def fetch_public_holidays(self, country_code: str, year: int) -> List[PublicHoliday]:
        """Return holidays for ``country_code`` in ``year`` (empty for unknown countries).

        Raises:
            FeedError: When the request fails and nothing is cached yet.
        """
        code = country_code.strip().upper()
        key = (code, int(year))
        cached = self._cache.get(key)
        if cached and self.clock() - cached[1] < self.cache_ttl_s:
            return list(cached[0])

        url = f"{self.base_url}/PublicHolidays/{int(year)}/{code}"
        try:
            resp = self.http.get(url)
            if resp.status_code == 404:
                log.warning("No holidays found for country %s in year %s", code, year)
                return []
            raise_for_status(resp, f"GET {url}")
            try:
                payload = resp.json()
            except ValueError as exc:
                raise FeedError(f"GET {url}: invalid JSON", status=resp.status_code) from exc
            holidays = self._parse_holidays(payload, code, int(year))
        except FeedError as exc:
            if cached:
                log.warning("Holiday refresh for %s/%s failed (%s); returning stale data.", code, year, exc)
                return list(cached[0])
            raise

        self._cache[key] = (holidays, self.clock())
        return list(holidays)

    def available_countries(self) -> List[HolidayCountry]:
        """Countries known to the feed; the built-in list when the feed is down."""
        url = f"{self.base_url}/AvailableCountries"
        try:
            resp = self.http.get(url)
            raise_for_status(resp, f"GET {url}")
            payload = resp.json()
        except (FeedError, ValueError) as exc:
            log.warning("Fetching available countries failed (%s); using built-in list.", exc)
            return list(SUPPORTED_COUNTRIES)
        return [
            HolidayCountry(code=str(item.get("countryCode", "")), name=str(item.get("name", "")))
            for item in payload
            if isinstance(item, dict) and item.get("countryCode")
        ]

    def clear_cache(self) -> None:
        self._cache.clear()

    @staticmethod
    def _parse_holidays(payload: Any, code: str, year: int) -> List[PublicHoliday]:
        if not isinstance(payload, list):
            raise FeedError(f"Unexpected holiday payload for {code}/{year}.", payload=payload)
        holidays: List[PublicHoliday] = []
        for index, item in enumerate(payload):
            if not isinstance(item, dict) or not item.get("date"):
                continue
            types = tuple(str(kind) for kind in (item.get("types") or ()))
            holidays.append(
                PublicHoliday(
                    id=f"{code.lower()}-{year}-{index}",
                    date=date.fromisoformat(str(item["date"])[:10]),
                    name=str(item.get("name") or ""),
                    local_name=str(item.get("localName") or ""),
                    country_code=str(item.get("countryCode") or code),
                    is_national=is_national_holiday(bool(item.get("global")), types),
                    types=types,
                )
            )
        return holidays


__all__ = ["CACHE_TTL_S", "DEFAULT_BASE_URL", "NagerHolidayAdapter"]
