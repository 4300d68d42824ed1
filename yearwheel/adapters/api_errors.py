from __future__ import annotations

from typing import Any, Optional


class FeedError(RuntimeError):
    """Base class for remote feed failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.payload = payload
        self.context = context


class FeedClientError(FeedError):
    """HTTP 4xx from the feed (other than a plain 404)."""


class FeedServerError(FeedError):
    """HTTP 5xx from the feed."""


class FeedTimeoutError(FeedError):
    """Transport level timeout or connectivity failure after all retries."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message, context=context)


def parse_error_payload(resp: Any) -> Any:
    """Best-effort extraction of an error payload without raising."""
    try:
        return resp.json()
    except ValueError:
        snippet = getattr(resp, "text", "")
        return snippet[:400] if snippet else None


def error_detail(payload: Any) -> Optional[str]:
    if isinstance(payload, str):
        return payload.strip() or None
    if isinstance(payload, dict):
        for key in ("detail", "message", "title", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    return None


def raise_for_status(resp: Any, context: str) -> None:
    """Raise the matching ``FeedError`` subclass for a non-2xx response."""
    status = int(getattr(resp, "status_code", 0) or 0)
    if 200 <= status < 300:
        return
    payload = parse_error_payload(resp)
    detail = error_detail(payload)
    message = f"{context}: {detail} (HTTP {status})" if detail else f"{context}: HTTP {status}"
    if status >= 500:
        raise FeedServerError(message, status=status, payload=payload, context=context)
    raise FeedClientError(message, status=status, payload=payload, context=context)
