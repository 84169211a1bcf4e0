"""Turn a `Links` block into references.

Never fetches, never raises: anything that is not a link object with a string
`@odata.id` is treated as absent.
"""

from __future__ import annotations

from typing import Any, Iterable

from core.domain.references import Reference, ReferenceList

ODATA_ID = "@odata.id"


def _link_uri(link: Any) -> str | None:
    if not isinstance(link, dict):
        return None
    uri = link.get(ODATA_ID)
    if not isinstance(uri, str):
        return None
    return uri


def extract_reference(link: Any) -> Reference:
    """Single-valued relationship; absent or malformed gives an empty reference."""

    return Reference(uri=_link_uri(link) or "")


def extract_references(links: Iterable[Any] | None) -> ReferenceList:
    """Multi-valued relationship, source order kept, malformed entries dropped."""

    if not links:
        return ReferenceList()
    uris = [uri for uri in (_link_uri(link) for link in links) if uri is not None]
    return ReferenceList(uris=tuple(uris))
