"""``ocpp-validate`` command line."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from .errors import OcppError
from .messages import CATALOG, find, lookup
from .settings import configure_logging, get_settings
from .validate import validate_document

app = typer.Typer(no_args_is_help=True, help="OCPP 1.6 message catalog and validation tools.")

_console = Console()


@app.callback()
def main(log_level: Optional[str] = typer.Option(None, help="Override OCPP_VALIDATE_LOG_LEVEL.")) -> None:
    configure_logging(log_level)


@app.command(name="list")
def list_messages() -> None:
    """Show every action in the catalog with its schema resources."""

    table = Table(title="OCPP 1.6 messages")
    table.add_column("Action", style="bright_green", no_wrap=True)
    table.add_column("Profile", style="white")
    table.add_column("Request schema", style="dim")
    table.add_column("Response schema", style="dim")
    for pair in CATALOG.values():
        table.add_row(
            pair.action,
            pair.profile,
            pair.request.__schema_resource__ or "-",
            pair.response.__schema_resource__ or "-",
        )
    _console.print(table)


@app.command()
def validate(
    action: str = typer.Argument(..., help="Action name, e.g. BootNotification."),
    payload_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    response: bool = typer.Option(False, "--response", help="Validate as the action's response."),
) -> None:
    """Validate a JSON payload file against the action's schema."""

    direction = "response" if response else "request"
    try:
        cls = lookup(action, direction)
    except OcppError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2)
    try:
        payload = json.loads(payload_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"{payload_file} is not valid JSON: {exc}") from exc

    errors = validate_document(cls.__schema_resource__, payload)
    if not errors:
        _console.print(f"[bright_green]valid[/bright_green] {cls.__name__}")
        return
    _console.print(f"[red]invalid[/red] {cls.__name__}")
    for line in errors:
        _console.print(f"  {line}", markup=False)
    raise typer.Exit(code=1)


@app.command()
def builder(class_name: str = typer.Argument(..., help="Message class, e.g. ResetRequest.")) -> None:
    """Show the setters of a message class's generated builder."""

    try:
        cls = find(class_name)
    except OcppError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2)
    generated = cls.Builder
    table = Table(title=f"{generated.__name__} ({cls.__schema_resource__})")
    table.add_column("Setter", style="cyan")
    table.add_column("Wire name")
    table.add_column("Required")
    for name in generated.__fields__:
        alias = cls.model_fields[name].alias or name
        table.add_row(name, alias, "yes" if name in generated.__required__ else "")
    _console.print(table)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default from settings)."),
    port: Optional[int] = typer.Option(None, help="Port (default from settings)."),
) -> None:
    """Run the validation API with uvicorn."""

    settings = get_settings()
    uvicorn.run(
        "ocpp_validate.api:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()
