"""Errors raised by the decoding core.

Transport failures are not listed here: they come from the client
(`httpx.HTTPError` and subclasses with the shipped adapter) and reach the
caller untouched.
"""

from __future__ import annotations

from pydantic import ValidationError


class DecodeError(ValueError):
    """A resource body matched neither the strict nor the lenient shape.

    `__cause__` is always the strict pass's `ValidationError`.
    """

    def __init__(self, resource: str, error: ValidationError) -> None:
        super().__init__(f"cannot decode {resource}: {error}")
        self.resource = resource
        self.errors = error.errors()


class UnboundEntityError(RuntimeError):
    """An entity was asked to follow its references without a client."""


class EntityAlreadyBoundError(RuntimeError):
    """`set_client` was called on an entity that already has a client."""
