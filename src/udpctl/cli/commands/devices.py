from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from udpctl.cli.common import launch_platform_or_exit
from udpctl.core import SendResult


def _report(console: Console, name: str, result: SendResult | None, done: str) -> None:
    if result is None:
        console.print(f"[yellow]![/yellow] Device '{name}' not found")
        raise typer.Exit(1)
    if not result:
        console.print(f"[red]✗[/red] {result.error}")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] {done}")


def list_devices() -> None:
    """List configured devices and their last known power state."""
    platform = launch_platform_or_exit()
    records = platform.store.list_all()

    console = Console()

    if not records:
        console.print("No devices defined.")
        console.print(
            "Use 'udpctl setup' to add devices or edit "
            f"{platform.database.devices_path}"
        )
        return

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("IP", style="green")
    table.add_column("State")
    table.add_column("Manufacturer")
    table.add_column("Model")

    for record in records:
        table.add_row(
            record.name,
            record.ip or "",
            "on" if record.state else "off",
            record.manufacturer or "",
            record.model or "",
        )

    console.print(table)


def turn_on(name: str = typer.Argument(..., help="Device name")) -> None:
    """Send the start command to a device."""
    platform = launch_platform_or_exit()
    _report(Console(), name, platform.set_power(name, True), f"{name} is turned on")


def turn_off(name: str = typer.Argument(..., help="Device name")) -> None:
    """Send the stop command to a device."""
    platform = launch_platform_or_exit()
    _report(Console(), name, platform.set_power(name, False), f"{name} is turned off")


def status(name: str = typer.Argument(..., help="Device name")) -> None:
    """Show the last commanded power state of a device."""
    platform = launch_platform_or_exit()
    state = platform.power_state(name)

    console = Console()
    if state is None:
        console.print(f"[yellow]![/yellow] Device '{name}' not found")
        raise typer.Exit(1)
    console.print(f"{name} is {'on' if state else 'off'}")


def identify(name: str = typer.Argument(..., help="Device name")) -> None:
    """Send the locate command to a device."""
    platform = launch_platform_or_exit()
    _report(Console(), name, platform.identify(name), f"{name} identify requested")


def dock(name: str = typer.Argument(..., help="Device name")) -> None:
    """Send the charge command to a device."""
    platform = launch_platform_or_exit()
    _report(Console(), name, platform.dock(name), f"{name} is returning to its dock")


def register(app: typer.Typer) -> None:
    app.command("list")(list_devices)
    app.command("on")(turn_on)
    app.command("off")(turn_off)
    app.command("status")(status)
    app.command("identify")(identify)
    app.command("dock")(dock)
