"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_http_client
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

SERVICE_ROOT = "/redfish/v1/"


def check_service_root(settings: AppSettings, transport: httpx.BaseTransport | None = None) -> tuple[bool, str]:
    try:
        with build_http_client(settings, transport=transport) as client:
            response = client.get(SERVICE_ROOT)
    except httpx.HTTPError as exc:
        return False, str(exc)
    if response.is_error:
        return False, f"HTTP {response.status_code}"
    return True, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="redfish-inventory doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Endpoint", "OK", settings.endpoint)
    if settings.username and settings.password:
        table.add_row("Credentials", "OK", f"basic auth as {settings.username}")
    else:
        table.add_row("Credentials", "MISSING", "Set REDFISH_USERNAME / REDFISH_PASSWORD or run `doctor setup`")
    table.add_row("TLS verification", "ON" if settings.verify_tls else "OFF", "")

    ok_root, detail_root = check_service_root(settings)
    table.add_row("Service root", "OK" if ok_root else "FAIL", detail_root)

    _console.print(table)

    if not ok_root:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    endpoint = typer.prompt("Endpoint", default="https://localhost", show_default=True).strip()
    username = typer.prompt("Username").strip()
    password = typer.prompt("Password", hide_input=True, confirmation_prompt=False).strip()

    if not endpoint or not username:
        raise typer.BadParameter("endpoint and username are required")

    env_path = write_user_env_vars(
        {
            "REDFISH_ENDPOINT": endpoint,
            "REDFISH_USERNAME": username,
            "REDFISH_PASSWORD": password,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
