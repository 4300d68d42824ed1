from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

import pytest
from requests import exceptions as req_exc

from yearwheel.adapters.api_errors import FeedError, FeedServerError, FeedTimeoutError
from yearwheel.adapters.holiday_rest import NagerHolidayAdapter
from yearwheel.adapters.http_client import HttpConfig
from yearwheel.domain.holidays import SUPPORTED_COUNTRIES

NO_2025 = [
    {
        "date": "2025-01-01",
        "localName": "Første nyttårsdag",
        "name": "New Year's Day",
        "countryCode": "NO",
        "global": True,
        "types": ["Public"],
    },
    "ignore-me",
    {"localName": "missing date"},
    {
        "date": "2025-05-17",
        "localName": "Grunnlovsdag",
        "name": "Constitution Day",
        "countryCode": "NO",
        "global": True,
        "types": ["Public"],
    },
]


class _ResponseStub:
    def __init__(self, payload: Any, status_code: int = 200, *, invalid_json: bool = False) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = str(payload)
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("not json")
        return self._payload


class _SessionStub:
    def __init__(self, responses: Sequence[Union[_ResponseStub, Exception]]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> _ResponseStub:
        self.calls.append({"url": url, "headers": dict(headers or {}), "timeout": timeout})
        if not self._responses:
            raise RuntimeError("No stub response configured")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def _adapter(responses, **kwargs) -> tuple:
    clock = _Clock()
    adapter = NagerHolidayAdapter("https://holidays.test/api/v3/", clock=clock, **kwargs)
    stub = _SessionStub(responses)
    adapter.http.session = stub  # type: ignore[assignment]
    return adapter, stub, clock


def test_fetch_public_holidays_parses_feed() -> None:
    adapter, stub, _ = _adapter([_ResponseStub(NO_2025)])

    holidays = adapter.fetch_public_holidays("no", 2025)

    assert stub.calls[0]["url"] == "https://holidays.test/api/v3/PublicHolidays/2025/NO"
    assert stub.calls[0]["headers"]["Accept"] == "application/json"
    assert stub.calls[0]["timeout"] == 10
    assert [holiday.id for holiday in holidays] == ["no-2025-0", "no-2025-3"]
    assert holidays[0].date == date(2025, 1, 1)
    assert holidays[0].local_name == "Første nyttårsdag"
    assert holidays[1].is_national is True


def test_unknown_country_returns_empty_list(caplog) -> None:
    adapter, _, _ = _adapter([_ResponseStub({"title": "Not Found"}, status_code=404)])

    with caplog.at_level("WARNING"):
        assert adapter.fetch_public_holidays("XX", 2025) == []

    assert "No holidays found for country XX" in caplog.text


def test_results_are_cached_until_ttl_expires() -> None:
    adapter, stub, clock = _adapter([_ResponseStub(NO_2025), _ResponseStub(NO_2025[:1])])

    first = adapter.fetch_public_holidays("NO", 2025)
    clock.now += 60
    second = adapter.fetch_public_holidays("NO", 2025)
    clock.now += 24 * 60 * 60
    third = adapter.fetch_public_holidays("NO", 2025)

    assert first == second
    assert len(stub.calls) == 2
    assert len(third) == 1


def test_stale_cache_is_served_when_refresh_fails() -> None:
    adapter, _, clock = _adapter(
        [_ResponseStub(NO_2025), _ResponseStub({"detail": "boom"}, status_code=503)]
    )

    fresh = adapter.fetch_public_holidays("NO", 2025)
    clock.now += 2 * 24 * 60 * 60
    stale = adapter.fetch_public_holidays("NO", 2025)

    assert stale == fresh


def test_server_error_without_cache_raises() -> None:
    adapter, _, _ = _adapter([_ResponseStub({"detail": "boom"}, status_code=500)])

    with pytest.raises(FeedServerError) as info:
        adapter.fetch_public_holidays("NO", 2025)

    assert info.value.status == 500
    assert "boom" in str(info.value)


def test_invalid_json_is_a_feed_error() -> None:
    adapter, _, _ = _adapter([_ResponseStub(None, invalid_json=True)])

    with pytest.raises(FeedError):
        adapter.fetch_public_holidays("NO", 2025)


def test_timeouts_are_retried_then_raised() -> None:
    adapter, stub, _ = _adapter(
        [req_exc.Timeout(), req_exc.ConnectionError()], cfg=HttpConfig(request_timeout_s=3, retries=1)
    )

    with pytest.raises(FeedTimeoutError):
        adapter.fetch_public_holidays("NO", 2025)

    assert len(stub.calls) == 2
    assert stub.calls[0]["timeout"] == 3


def test_retry_recovers_after_a_timeout() -> None:
    adapter, stub, _ = _adapter([req_exc.Timeout(), _ResponseStub(NO_2025)])

    assert len(adapter.fetch_public_holidays("NO", 2025)) == 2
    assert len(stub.calls) == 2


def test_available_countries_from_feed_and_fallback() -> None:
    adapter, _, _ = _adapter(
        [
            _ResponseStub([{"countryCode": "NO", "name": "Norway"}, {"name": "no code"}]),
            _ResponseStub({"detail": "down"}, status_code=502),
        ]
    )

    countries = adapter.available_countries()
    fallback = adapter.available_countries()

    assert [(country.code, country.name) for country in countries] == [("NO", "Norway")]
    assert fallback == list(SUPPORTED_COUNTRIES)


def test_clear_cache_forces_refetch() -> None:
    adapter, stub, _ = _adapter([_ResponseStub(NO_2025), _ResponseStub(NO_2025)])

    adapter.fetch_public_holidays("NO", 2025)
    adapter.clear_cache()
    adapter.fetch_public_holidays("NO", 2025)

    assert len(stub.calls) == 2
