"""Fetching resources through a client.

Every fetch is independent: GET, decode, bind the client, return. No cache,
no retries, no parallelism. Errors from the client and from decoding reach the
caller unchanged.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from core.domain.common import Entity
from core.domain.processors import SubProcessor
from core.domain.references import Reference, ReferenceList
from core.interfaces.client import RedfishClient
from core.services.decoding import decode_collection, decode_subprocessor

E = TypeVar("E", bound=Entity)


def fetch(client: RedfishClient, uri: str, decoder: Callable[[bytes], E]) -> E:
    """GET `uri`, decode the body and bind `client` onto the result."""

    response = client.get(uri)
    try:
        entity = decoder(response.read())
    finally:
        response.close()

    entity.set_client(client)
    return entity


def get_subprocessor(client: RedfishClient, uri: str) -> SubProcessor:
    """Fetch the SubProcessor at `uri`."""

    return fetch(client, uri, decode_subprocessor)


def resolve(client: RedfishClient, reference: Reference, decoder: Callable[[bytes], E]) -> E | None:
    """Follow a single reference; an empty one resolves to None."""

    if not reference:
        return None
    return fetch(client, reference.uri, decoder)


def resolve_all(
    client: RedfishClient,
    references: ReferenceList,
    decoder: Callable[[bytes], E],
) -> list[E]:
    """Follow every reference of a list, one after the other, in order."""

    return [fetch(client, uri, decoder) for uri in references]


def get_connected_processors(subprocessor: SubProcessor) -> list[SubProcessor]:
    """Fetch the processors directly connected to `subprocessor`.

    Uses the client the subprocessor was fetched with.
    """

    return resolve_all(subprocessor.client, subprocessor.connected_processors, decode_subprocessor)


def list_subprocessors(client: RedfishClient, collection_uri: str) -> list[SubProcessor]:
    """Fetch a SubProcessors collection, then each member sequentially."""

    collection = fetch(client, collection_uri, decode_collection)
    return resolve_all(client, collection.members, decode_subprocessor)
