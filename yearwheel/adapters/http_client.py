"""Shared HTTP transport for feed adapters.

A thin wrapper around ``requests.Session`` so adapters share timeout and
retry policy. Callers decide how to map non-2xx responses.

Dependencies:
    - ``requests`` for network I/O.
    - ``yearwheel.adapters.api_errors.FeedTimeoutError`` for transport failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from yearwheel.adapters.api_errors import FeedTimeoutError


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Timeout in seconds for each JSON request.
        retries: Number of retry attempts after the initial request.
    """
    request_timeout_s: int = 10
    retries: int = 2


class RetryingSession:
    """``requests`` session that retries GETs on timeouts and connection errors."""

    def __init__(self, cfg: Optional[HttpConfig] = None) -> None:
        self.session = requests.Session()
        self.cfg = cfg or HttpConfig()

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        accept: str = "application/json",
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a GET request, retrying ``cfg.retries`` times on transport errors.

        Raises:
            FeedTimeoutError: If every attempt times out or fails to connect.
        """
        context = f"GET {url}"
        last_err: FeedTimeoutError | None = None
        for _ in range(self.cfg.retries + 1):
            try:
                return self.session.get(
                    url,
                    params=params,
                    headers={"Accept": accept},
                    timeout=timeout or self.cfg.request_timeout_s,
                )
            except (req_exc.Timeout, req_exc.ConnectionError):
                last_err = FeedTimeoutError(f"Timeout contacting {url}", context=context)
        raise last_err


__all__ = ["HttpConfig", "RetryingSession"]
