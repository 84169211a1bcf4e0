"""Shared pieces of every inventory resource.

- `Entity`: identity fields plus a back-reference to the client that fetched
  the resource, so the resource can later fetch what it links to.
- `Status`: health/state block, carried through as-is.
- `ResourceCollection`: a `Members` listing, members kept as references.
- `Link` parsing helpers live in `core.services.links`.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from core.domain.references import ReferenceList
from core.errors import EntityAlreadyBoundError, UnboundEntityError
from core.interfaces.client import RedfishClient


class State(str, Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"
    STANDBY_OFFLINE = "StandbyOffline"
    STANDBY_SPARE = "StandbySpare"
    IN_TEST = "InTest"
    STARTING = "Starting"
    ABSENT = "Absent"
    UNAVAILABLE_OFFLINE = "UnavailableOffline"
    DEFERRING = "Deferring"
    QUIESCED = "Quiesced"
    UPDATING = "Updating"


class Health(str, Enum):
    OK = "OK"
    WARNING = "Warning"
    CRITICAL = "Critical"


class Status(BaseModel):
    """Status block of a resource.

    Values are kept as the server sent them; `state_enum`/`health_enum` give
    the typed view when the value is a known one.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    state: str | None = Field(default=None, alias="State")
    health: str | None = Field(default=None, alias="Health")
    health_rollup: str | None = Field(default=None, alias="HealthRollup")

    @property
    def state_enum(self) -> State | None:
        try:
            return State(self.state)
        except ValueError:
            return None

    @property
    def health_enum(self) -> Health | None:
        try:
            return Health(self.health)
        except ValueError:
            return None


class Entity(BaseModel):
    """Base of every client-bound resource."""

    model_config = ConfigDict(extra="ignore", validate_by_name=True)

    odata_id: str = Field(
        default="",
        alias="@odata.id",
        description="Canonical URI of the resource.",
    )
    id: str = Field(default="", alias="Id")
    name: str = Field(default="", alias="Name")
    description: str | None = Field(default=None, alias="Description")

    _client: RedfishClient | None = PrivateAttr(default=None)

    def set_client(self, client: RedfishClient) -> None:
        """Remember the client this resource was fetched with.

        The slot is written once; binding an already bound entity raises
        `EntityAlreadyBoundError`.
        """

        if self._client is not None:
            raise EntityAlreadyBoundError(f"{type(self).__name__} {self.odata_id or '?'} is already bound")
        self._client = client

    @property
    def bound(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> RedfishClient:
        if self._client is None:
            raise UnboundEntityError(f"{type(self).__name__} {self.odata_id or '?'} has no client")
        return self._client


class ResourceCollection(Entity):
    """A `Members` collection; members stay unresolved."""

    model_config = ConfigDict(frozen=True)

    odata_type: str = Field(default="", alias="@odata.type")
    members: ReferenceList = Field(default_factory=ReferenceList, exclude=True)
