"""
Shared HTTP session for climate API calls.

The session retries transient failures (429 and 502/503/504, dropped
connections) with exponential backoff, and every request gets a default
timeout unless the caller passes one.

Usage::

    from mosquito_suitability.services.http import session

    resp = session.get(ARCHIVE_API, params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Backoff of 0s, 6s, 12s, 24s, 48s. The archive API rate-limits bursts of
#: row requests with 429.
DEFAULT_RETRY = Retry(
    total=5,
    backoff_factor=3,
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 60.0  # seconds

USER_AGENT = "mosquito-suitability/0.1"


class TimeoutHTTPAdapter(HTTPAdapter):
    """HTTP adapter that fills in a timeout when the request has none."""

    def __init__(self, *args: Any, timeout: float = DEFAULT_TIMEOUT, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(  # type: ignore[override]
        self, request: requests.PreparedRequest, **kwargs: Any
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """Build a session with the retrying, timeout-aware adapter mounted."""
    s = requests.Session()
    adapter = TimeoutHTTPAdapter(max_retries=retry or DEFAULT_RETRY, timeout=timeout)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session, shared by all datasources.
session: requests.Session = create_session()
