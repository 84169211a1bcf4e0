"""Lazy references to other resources.

A reference only carries URIs. Following one is always an explicit fetch
(`core.services.fetcher.resolve`); nothing is cached here.
"""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field


class Reference(BaseModel):
    """One-to-one relationship. An empty `uri` means "not linked"."""

    model_config = ConfigDict(frozen=True)

    uri: str = Field(default="", description="@odata.id of the target resource.")

    def __bool__(self) -> bool:
        return bool(self.uri)

    def __str__(self) -> str:
        return self.uri


class ReferenceList(BaseModel):
    """One-to-many relationship, in the order the server listed it."""

    model_config = ConfigDict(frozen=True)

    uris: tuple[str, ...] = Field(default=(), description="@odata.id of each target.")

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.uris)

    def __len__(self) -> int:
        return len(self.uris)

    def __getitem__(self, index: int) -> str:
        return self.uris[index]

    def __bool__(self) -> bool:
        return bool(self.uris)
