"""Tolerant decoding of resource bodies.

Some services send `MaxSpeedMHz` as a string ("3500") although the schema
declares a number. Decoding therefore runs in two passes:

1. strict: the documented shape, no string to number coercion;
2. lenient: the same shape with `MaxSpeedMHz` widened to text, then parsed.

Only the unreliable field is recovered this way. When the lenient pass fails
too, the strict error is the one reported.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.domain.common import Entity, ResourceCollection
from core.domain.processors import FLOAT32_MAX, SubProcessor, SubProcessorFields
from core.errors import DecodeError
from core.services.links import extract_reference, extract_references


class _SubProcessorLinks(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    chassis: dict[str, Any] | None = Field(default=None, alias="Chassis")
    connected_processors: list[Any] | None = Field(default=None, alias="ConnectedProcessors")


class _SubProcessorDocument(SubProcessorFields):
    model_config = ConfigDict(strict=True, validate_by_name=False)

    links: _SubProcessorLinks | None = Field(default=None, alias="Links")


class _LenientSubProcessorDocument(_SubProcessorDocument):
    max_speed_mhz: str | None = Field(default=None, alias="MaxSpeedMHz")  # type: ignore[assignment]


def parse_speed(text: str | None) -> float:
    """Best-effort float from text; anything that is not a plain, finite
    32-bit float literal gives 0.0.

    Surrounding whitespace and digit separators ("1_000") are rejected, as
    are values outside the single-precision range.
    """

    if not text or not text.isascii() or text != text.strip() or "_" in text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    if not math.isfinite(value) or abs(value) > FLOAT32_MAX:
        return 0.0
    return value


def _assemble(document: _SubProcessorDocument, max_speed_mhz: float) -> SubProcessor:
    values = {name: getattr(document, name) for name in SubProcessorFields.model_fields}
    values["max_speed_mhz"] = max_speed_mhz

    links = document.links
    return SubProcessor(
        **values,
        chassis=extract_reference(links.chassis if links else None),
        connected_processors=extract_references(links.connected_processors if links else None),
    )


def decode_subprocessor(body: bytes | str) -> SubProcessor:
    """Decode a SubProcessor body, tolerating a textual `MaxSpeedMHz`.

    Raises `DecodeError` (chained to the strict `ValidationError`) when the
    body fits neither shape.
    """

    try:
        document = _SubProcessorDocument.model_validate_json(body)
    except ValidationError as strict_error:
        try:
            lenient = _LenientSubProcessorDocument.model_validate_json(body)
        except ValidationError:
            raise DecodeError("SubProcessor", strict_error) from strict_error
        return _assemble(lenient, parse_speed(lenient.max_speed_mhz))

    return _assemble(document, document.max_speed_mhz)


class _CollectionDocument(Entity):
    model_config = ConfigDict(validate_by_name=False)

    odata_type: str = Field(default="", alias="@odata.type")
    members: list[Any] | None = Field(default=None, alias="Members")


def decode_collection(body: bytes | str) -> ResourceCollection:
    """Decode a resource collection; members become a `ReferenceList`."""

    try:
        document = _CollectionDocument.model_validate_json(body)
    except ValidationError as error:
        raise DecodeError("ResourceCollection", error) from error

    values = {name: getattr(document, name) for name in ResourceCollection.model_fields if name != "members"}
    return ResourceCollection(**values, members=extract_references(document.members))
