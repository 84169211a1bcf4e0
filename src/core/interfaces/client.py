"""Contract between the core and the HTTP transport.

The core only needs `get(uri)` returning something that can hand over its
body once and be closed. `httpx.Response` satisfies `RedfishResponse`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RedfishResponse(Protocol):
    def read(self) -> bytes:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class RedfishClient(Protocol):
    """Minimal client contract.

    Rules:
    - `get` raises on transport and HTTP-status failures; the core does not
      retry or translate those errors.
    - The returned response is owned by the caller, who must close it.
    - Implementations shared across threads must be thread-safe themselves.
    """

    def get(self, uri: str) -> RedfishResponse:
        ...
