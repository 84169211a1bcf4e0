"""httpx transport for the Redfish client contract.

- Standardizes timeouts, headers, auth and TLS verification.
- Can be swapped for a stub in tests (anything with `get(uri)`).
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings

logger = logging.getLogger(__name__)


def build_http_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` pointed at the configured endpoint."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "OData-Version": "4.0",
    }
    if extra_headers:
        headers.update(extra_headers)

    auth = None
    if settings.username and settings.password:
        auth = httpx.BasicAuth(settings.username, settings.password)

    return httpx.Client(
        base_url=settings.endpoint,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        auth=auth,
        verify=settings.verify_tls,
        follow_redirects=True,
        transport=transport,
    )


class RedfishHttpClient:
    """`RedfishClient` over a shared `httpx.Client`.

    `get` returns the streamed response still open; the caller closes it.
    Error statuses raise `httpx.HTTPStatusError` with the response already
    closed.
    """

    def __init__(self, http: httpx.Client | None = None, settings: AppSettings | None = None) -> None:
        self._http = http or build_http_client(settings)

    def get(self, uri: str) -> httpx.Response:
        logger.debug("GET %s", uri)
        response = self._http.send(self._http.build_request("GET", uri), stream=True)
        logger.debug("GET %s -> HTTP %s", uri, response.status_code)
        if response.is_error:
            try:
                response.read()
            finally:
                response.close()
            response.raise_for_status()
        return response

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> RedfishHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
