"""Rich components for the CLI.

Kept apart from the commands so tables can be reused by several of them.
"""

from __future__ import annotations

from rich.table import Table

from core.domain.processors import SubProcessor


def _speed(value: float) -> str:
    return f"{value:g} MHz" if value else "-"


def build_subprocessor_table(subprocessor: SubProcessor) -> Table:
    """Key/value table for a single SubProcessor."""

    table = Table(title=subprocessor.name or subprocessor.odata_id or "SubProcessor")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    status = subprocessor.status
    table.add_row("URI", subprocessor.odata_id)
    table.add_row("Id", subprocessor.id)
    table.add_row("Type", subprocessor.processor_type.value if subprocessor.processor_type else "-")
    table.add_row("Max speed", _speed(subprocessor.max_speed_mhz))
    table.add_row("Threads", str(subprocessor.total_threads))
    table.add_row("State", status.state or "-")
    table.add_row("Health", status.health or "-")
    table.add_row("Chassis", subprocessor.chassis.uri or "-", style="magenta")
    for uri in subprocessor.connected_processors:
        table.add_row("Connected", uri, style="magenta")
    return table


def build_subprocessors_table() -> Table:
    """Empty table with one row per SubProcessor."""

    table = Table(title="SubProcessors")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Type", style="white")
    table.add_column("Max speed", style="white")
    table.add_column("Threads", style="white")
    table.add_column("Health", style="green")
    table.add_column("URI", style="magenta")
    return table


def add_subprocessor_row(table: Table, subprocessor: SubProcessor) -> None:
    table.add_row(
        subprocessor.id,
        subprocessor.processor_type.value if subprocessor.processor_type else "-",
        _speed(subprocessor.max_speed_mhz),
        str(subprocessor.total_threads),
        subprocessor.status.health or "-",
        subprocessor.odata_id,
    )
