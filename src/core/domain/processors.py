"""Processor resources (Pydantic v2).

`SubProcessorFields` is the scalar shape shared by the public model and by the
private decode documents in `core.services.decoding`, so field mapping lives
in exactly one place.
"""

from __future__ import annotations

from enum import Enum

from pydantic import ConfigDict, Field

from core.domain.common import Entity, Status
from core.domain.references import Reference, ReferenceList

# Largest finite IEEE 754 single-precision value; MaxSpeedMHz is a 32-bit float.
FLOAT32_MAX = 3.4028234663852886e38


class ProcessorType(str, Enum):
    """Kind of processing unit, as reported in `ProcessorType`."""

    CPU = "CPU"
    GPU = "GPU"
    FPGA = "FPGA"
    DSP = "DSP"
    ACCELERATOR = "Accelerator"
    CORE = "Core"
    THREAD = "Thread"
    OEM = "OEM"


class SubProcessorFields(Entity):
    odata_context: str = Field(default="", alias="@odata.context")
    odata_type: str = Field(default="", alias="@odata.type")
    max_speed_mhz: float = Field(
        default=0.0,
        alias="MaxSpeedMHz",
        ge=-FLOAT32_MAX,
        le=FLOAT32_MAX,
        description="Maximum rated clock speed in MHz.",
    )
    processor_type: ProcessorType | None = Field(default=None, alias="ProcessorType")
    total_threads: int = Field(
        default=0,
        alias="TotalThreads",
        description="Independent execution threads supported.",
    )
    status: Status = Field(default_factory=Status, alias="Status")


class SubProcessor(SubProcessorFields):
    """A single subprocessor (core, thread...) contained within a processor.

    Relationships are kept as references and are only fetched on request, see
    `core.services.fetcher.resolve`.
    """

    model_config = ConfigDict(frozen=True)

    chassis: Reference = Field(
        default_factory=Reference,
        exclude=True,
        description="Chassis physically containing this processor.",
    )
    connected_processors: ReferenceList = Field(
        default_factory=ReferenceList,
        exclude=True,
        description="Processors directly connected to this one.",
    )
