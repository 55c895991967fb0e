from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt

from udpctl.cli.common import launch_platform_or_exit
from udpctl.core import WizardSession
from udpctl.models import (
    InstructionScreen,
    ListScreen,
    Screen,
    WizardRequest,
)


def deliver_screen(console: Console, screen: Screen) -> WizardRequest:
    """Render one wizard screen and collect the operator's answer."""
    if isinstance(screen, InstructionScreen):
        console.print(Panel(screen.detail, title=screen.title))
        if screen.show_next_button and not Confirm.ask(
            "Continue?", default=True, console=console
        ):
            return WizardRequest.terminate()
        return WizardRequest()

    if isinstance(screen, ListScreen):
        console.print(f"\n[bold]{screen.title}[/bold]")
        for position, item in enumerate(screen.items, start=1):
            console.print(f"  {position}. {item}")
        choice = IntPrompt.ask(
            "Select",
            choices=[str(position) for position in range(1, len(screen.items) + 1)],
            console=console,
        )
        return WizardRequest.select(choice - 1)

    console.print(f"\n[bold]{screen.title}[/bold]")
    inputs = {
        item.id: Prompt.ask(
            f"{item.title} [dim]({item.placeholder})[/dim]",
            default="",
            show_default=False,
            console=console,
        )
        for item in screen.items
    }
    return WizardRequest.submit(**inputs)


def register(app: typer.Typer) -> None:
    @app.command()
    def setup() -> None:
        """Add, modify or remove devices interactively."""
        platform = launch_platform_or_exit()
        wizard = platform.wizard()
        console = Console()

        session = WizardSession()
        request: WizardRequest | None = None
        while True:
            session, output = wizard.advance(session, request)
            if output.finished or output.screen is None:
                break
            try:
                request = deliver_screen(console, output.screen)
            except (KeyboardInterrupt, EOFError):
                request = WizardRequest.terminate()

        if output.config is None:
            console.print("[dim]Setup cancelled, nothing saved.[/dim]")
            return

        console.print(
            f"[green]✓[/green] Saved {len(output.config.devices)} device(s) to "
            f"{platform.database.devices_path}"
        )
