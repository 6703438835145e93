"""CLI interface for pedal-inventory."""

from pathlib import Path
from typing import List, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError as SettingsValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config.logging import setup_logging
from .config.settings import get_settings
from .constants import MSG_NO_TEMPLATES
from .exceptions import CatalogError, ValidationError
from .session import InventoryBridge, SessionState
from .storage import MemoryStore

app = typer.Typer(
    name="pedal-inventory",
    help="Track guitar pedal components, build templates and orders.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
template_app = typer.Typer(help="Manage pedal build templates.", no_args_is_help=True)
app.add_typer(template_app, name="template")

console = Console()


def _parse_pair(raw: str, what: str) -> tuple[str, str]:
    """Split a ``NAME=VALUE`` argument.

    Raises:
        ValidationError: If there is no '=' or the name part is empty.
    """
    name, sep, value = raw.rpartition("=")
    if not sep or not name.strip():
        raise ValidationError(f"Expected {what}=QTY, got '{raw}'")
    return name.strip(), value.strip()


def _parse_quantity(value: str, raw: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Quantity must be a whole number in '{raw}'") from None


def _read_mapping(path: Path) -> dict:
    """Read a JSON or YAML file holding a name -> quantity mapping."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ValidationError(f"Could not read {path}", str(e)) from e
    if not isinstance(data, dict):
        raise ValidationError(f"{path} must contain a mapping of component name to quantity")
    return data


def _bridge(ctx: typer.Context) -> InventoryBridge:
    return ctx.obj


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def _check(response: dict) -> dict:
    """Unwrap a service response or exit with its error."""
    if not response["success"]:
        _fail(response["error"])
    return response["data"]


@app.callback()
def _session(
    ctx: typer.Context,
    ephemeral: bool = typer.Option(
        False, "--ephemeral", help="Keep everything in memory; nothing is saved"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Open the inventory session shared by all commands."""
    try:
        settings = get_settings()
    except SettingsValidationError as e:
        console.print(
            "[red]Configuration error:[/red] Invalid configuration values.\n"
            "Check your PEDAL_INVENTORY_* environment variables or .env file.\n"
            f"Details: {escape(str(e))}"
        )
        raise typer.Exit(1)
    setup_logging(level="DEBUG" if verbose else settings.log_level)
    try:
        state = SessionState.from_settings(settings, store=MemoryStore() if ephemeral else None)
    except CatalogError as e:
        console.print(f"[red]Catalog error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    bridge = InventoryBridge(state)
    ctx.obj = bridge
    ctx.call_on_close(bridge.close)


@app.command()
def inventory(ctx: typer.Context) -> None:
    """Show current stock, grouped by category."""
    data = _check(_bridge(ctx).get_inventory())
    for category in data["categories"]:
        table = Table(title=category["name"], show_header=True, header_style="bold")
        table.add_column("Component", style="cyan")
        table.add_column("Qty", justify="right")
        for row in category["components"]:
            if row["low"]:
                table.add_row(
                    f"[red]{row['name']}[/red]", f"[bold red]{row['quantity']}[/bold red]"
                )
            else:
                table.add_row(row["name"], f"[bold]{row['quantity']}[/bold]")
        console.print(table)


@app.command("set")
def set_quantities(
    ctx: typer.Context,
    pairs: List[str] = typer.Argument(..., help="One or more NAME=QTY pairs, e.g. '100R=25'"),
) -> None:
    """Set the stock of individual components."""
    bridge = _bridge(ctx)
    try:
        parsed = [(_parse_pair(p, "NAME"), p) for p in pairs]
        updates = [(name, _parse_quantity(value, raw)) for (name, value), raw in parsed]
    except ValidationError as e:
        _fail(str(e))
    for name, qty in updates:
        data = _check(bridge.set_quantity(name, qty))
        console.print(f"[green]✓[/green] {data['name']}: {data['quantity']}")


@app.command()
def upload(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="JSON or YAML mapping of component name to quantity"),
) -> None:
    """Replace the whole inventory from a file (manual upload)."""
    try:
        values = _read_mapping(file)
    except ValidationError as e:
        _fail(str(e))
    data = _check(_bridge(ctx).set_manual(values))
    console.print(f"[green]✓ {data['message']}[/green]")


@template_app.command("add")
def template_add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Pedal name, e.g. 'Tube Screamer Clone'"),
    part: Optional[List[str]] = typer.Option(
        None, "--part", "-p", help="Component needed per build as NAME=QTY (repeatable)"
    ),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="JSON or YAML mapping of component name to quantity"
    ),
) -> None:
    """Save a new build template."""
    bridge = _bridge(ctx)
    try:
        components = _read_mapping(file) if file else {}
        for raw in part or []:
            comp, value = _parse_pair(raw, "NAME")
            components[comp] = _parse_quantity(value, raw)
    except ValidationError as e:
        _fail(str(e))
    unknown = [c for c in components if c not in bridge.state.catalog]
    if unknown:
        console.print(f"[yellow]Warning:[/yellow] not in catalog: {', '.join(unknown)}")
    data = _check(bridge.add_template(name, components))
    console.print(
        f"[green]✓ {data['message']}[/green]"
        f" (index {data['index']}, {data['parts']} parts)"
    )


@template_app.command("list")
def template_list(ctx: typer.Context) -> None:
    """List templates with their order index."""
    data = _check(_bridge(ctx).get_templates())
    if not data["templates"]:
        console.print(f"[dim]{MSG_NO_TEMPLATES}[/dim]")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="bold yellow")
    table.add_column("Pedal", style="cyan")
    table.add_column("Parts", justify="right")
    for t in data["templates"]:
        table.add_row(str(t["index"]), t["name"], str(t["parts"]))
    console.print(table)


@template_app.command("show")
def template_show(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Template index from 'template list'"),
) -> None:
    """Show the components a template needs per build."""
    data = _check(_bridge(ctx).get_template(index))
    table = Table(title=f"{data['name']} ({data['parts']} parts)", header_style="bold")
    table.add_column("Component", style="cyan")
    table.add_column("Qty Needed", justify="right")
    for comp in data["components"]:
        table.add_row(comp["name"], str(comp["quantity"]))
    console.print(table)


@app.command()
def order(
    ctx: typer.Context,
    pairs: List[str] = typer.Argument(..., help="INDEX=QTY pairs, e.g. '0=3 2=1'"),
) -> None:
    """Place an order: add template parts to inventory for each build."""
    request: dict[int, int] = {}
    try:
        for raw in pairs:
            idx, value = _parse_pair(raw, "INDEX")
            if not idx.isdigit():
                raise ValidationError(f"Template index must be a number in '{raw}'")
            request[int(idx)] = _parse_quantity(value, raw)
    except ValidationError as e:
        _fail(str(e))
    data = _check(_bridge(ctx).place_order(request))
    if data["placed"]:
        console.print(f"[green]✓ {data['message']}[/green]")
    else:
        console.print(f"[yellow]{data['message']}[/yellow]")


@app.command("shopping-list")
def shopping_list(ctx: typer.Context) -> None:
    """Show components at or below zero stock."""
    data = _check(_bridge(ctx).get_shopping_list())
    if data["fullyStocked"]:
        console.print(
            Panel(f"[bold green]✓ {data['message']}[/bold green]", border_style="green")
        )
        return
    table = Table(title="Shopping List", show_header=True, header_style="bold")
    table.add_column("Component", style="red")
    table.add_column("Category", style="dim")
    table.add_column("Qty", justify="right", style="bold red")
    for item in data["items"]:
        table.add_row(f"⚠️ {item['name']}", item["category"], str(item["quantity"]))
    console.print(table)


@app.command()
def catalog(ctx: typer.Context) -> None:
    """List known components by category."""
    data = _check(_bridge(ctx).get_catalog())
    for category, names in data["categories"].items():
        console.print(f"[bold cyan]{category}[/bold cyan] [dim]({len(names)})[/dim]")
        console.print("  " + ", ".join(names))


@app.command()
def status(ctx: typer.Context) -> None:
    """Show where data is stored and which catalog is in use."""
    settings = get_settings()
    state = _bridge(ctx).state
    details = Table(show_header=False, box=None)
    details.add_column("Setting", style="cyan")
    details.add_column("Value")
    details.add_row("Storage", type(state.store).__name__)
    details.add_row("Data Directory", str(settings.data_dir))
    details.add_row("Catalog", str(settings.catalog_path or "bundled"))
    details.add_row("Components", str(len(state.catalog.all_components())))
    details.add_row("Templates", str(len(state.templates)))
    details.add_row("Log Level", settings.log_level)
    console.print(Panel(details, title="[bold]Status[/bold]", border_style="blue"))


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
