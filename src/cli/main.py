"""CLI entry point (Typer).

The commands are thin: build a client from `AppSettings`, call the core
fetchers, render with Rich.
"""

from __future__ import annotations

import json
import logging
from typing import NoReturn

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from adapters.http_client import RedfishHttpClient
from cli import doctor
from cli.ui_components import add_subprocessor_row, build_subprocessor_table, build_subprocessors_table
from core.config import AppSettings, LogLevel
from core.domain.processors import SubProcessor
from core.errors import DecodeError
from core.services.fetcher import get_subprocessor, list_subprocessors

app = typer.Typer(no_args_is_help=True, help="Typed client for Redfish hardware inventory.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


@app.callback()
def main(
    log_level: LogLevel | None = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Override REDFISH_LOG_LEVEL.",
    ),
) -> None:
    settings = AppSettings()
    logging.basicConfig(
        level=(log_level or settings.log_level).value,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _client() -> RedfishHttpClient:
    return RedfishHttpClient(settings=AppSettings())


def _fail(exc: Exception) -> NoReturn:
    logger.debug("command failed", exc_info=exc)
    _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def subprocessor_payload(subprocessor: SubProcessor) -> dict[str, object]:
    payload = subprocessor.model_dump(mode="json", by_alias=True)
    payload["Links"] = {
        "Chassis": subprocessor.chassis.uri,
        "ConnectedProcessors": list(subprocessor.connected_processors),
    }
    return payload


@app.command()
def subprocessor(
    uri: str = typer.Argument(..., help="URI of the SubProcessor resource."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """Fetch a single SubProcessor."""

    with _client() as client:
        try:
            entity = get_subprocessor(client, uri)
        except (httpx.HTTPError, DecodeError) as exc:
            _fail(exc)

    if as_json:
        typer.echo(json.dumps(subprocessor_payload(entity), ensure_ascii=False, indent=2, sort_keys=True))
    else:
        _console.print(build_subprocessor_table(entity))


@app.command()
def subprocessors(
    collection_uri: str = typer.Argument(..., help="URI of a SubProcessors collection."),
) -> None:
    """Fetch every SubProcessor of a collection."""

    with _client() as client:
        try:
            entities = list_subprocessors(client, collection_uri)
        except (httpx.HTTPError, DecodeError) as exc:
            _fail(exc)

    table = build_subprocessors_table()
    for entity in entities:
        add_subprocessor_row(table, entity)
    _console.print(table)


def run() -> None:
    app()
