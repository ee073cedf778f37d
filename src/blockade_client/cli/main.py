"""Main CLI implementation using Typer."""

from typing import Any, Callable, List, Optional

import typer
from rich.console import Console

from blockade_client.cli.commands import (
    container_command,
    destroy_blockade,
    heal_blockade,
    list_blockades,
    partition_blockade,
    random_container_command,
    shape_network,
    show_status,
    up_blockade,
)
from blockade_client.client.handler import BlockadeHandler
from blockade_client.exceptions import BlockadeError
from blockade_client.loader import load_settings
from blockade_client.models.settings import ClientSettings
from blockade_client.utils.logging import setup_logging


# Create Typer app
app = typer.Typer(
    name="blockadectl",
    help="Drive a blockade daemon: containers, partitions and network faults",
    add_completion=False,
)

# Console for rich output
console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(
        None, "--host", "-H", envvar="BLOCKADE_HOST", help="Blockade daemon URL"
    ),
    settings: Optional[str] = typer.Option(
        None, "--settings", help="YAML settings file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level"
    ),
):
    """Load settings shared by all commands."""
    try:
        ctx.obj = load_settings(settings, host=host, log_level=log_level)
    except BlockadeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    setup_logging(ctx.obj.log_level)


def _run_cli_command(handler: Callable[..., Any], settings: ClientSettings, **kwargs: Any):
    """Helper to run a CLI command with a blockade handler and error handling."""
    try:
        with BlockadeHandler(settings.host, timeout=settings.timeout) as blockade:
            handler(blockade, **kwargs)
    except BlockadeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


@app.command("list")
def list_command(ctx: typer.Context):
    """List blockades."""
    _run_cli_command(list_blockades, ctx.obj)


@app.command("status")
def status_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Blockade name"),
):
    """Show containers of a blockade."""
    _run_cli_command(show_status, ctx.obj, name=name)


@app.command("up")
def up_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Blockade name"),
    config_file: str = typer.Argument(..., help="YAML blockade definition"),
    restart: bool = typer.Option(
        False, "--restart", "-r", help="Recreate the blockade if the name is taken"
    ),
):
    """Create a blockade."""
    _run_cli_command(up_blockade, ctx.obj, name=name, config_file=config_file, restart=restart)


@app.command("destroy")
def destroy_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Blockade name"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Force removal without confirmation"
    ),
):
    """Destroy a blockade and all of its containers."""
    if not force:
        confirm = typer.confirm(f"Destroy blockade {name}?")
        if not confirm:
            raise typer.Abort()
    _run_cli_command(destroy_blockade, ctx.obj, name=name)


def _register_container_command(command: str, help_text: str):
    def _command(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Blockade name"),
        container: str = typer.Argument(..., help="Container name"),
    ):
        _run_cli_command(container_command, ctx.obj, name=name, container=container, command=command)

    _command.__doc__ = help_text
    app.command(command)(_command)


_register_container_command("start", "Start a container.")
_register_container_command("stop", "Stop a container.")
_register_container_command("restart", "Restart a container.")
_register_container_command("kill", "Kill a container.")


@app.command("kill-one")
def kill_one_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Blockade name"),
):
    """Kill a random container."""
    _run_cli_command(random_container_command, ctx.obj, name=name, command="kill")


@app.command("restart-one")
def restart_one_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Blockade name"),
):
    """Restart a random container."""
    _run_cli_command(random_container_command, ctx.obj, name=name, command="restart")


@app.command("partition")
def partition_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Blockade name"),
    groups: List[str] = typer.Argument(..., help="Comma-separated container groups"),
):
    """Split containers into partitions."""
    _run_cli_command(partition_blockade, ctx.obj, name=name, groups=groups)


@app.command("heal")
def heal_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Blockade name"),
):
    """Remove all partitions and restore the network."""
    _run_cli_command(heal_blockade, ctx.obj, name=name)


@app.command("fast")
def fast_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Blockade name"),
):
    """Make the network fast."""
    _run_cli_command(shape_network, ctx.obj, name=name, profile="fast")


@app.command("flaky")
def flaky_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Blockade name"),
):
    """Make the network unreliable."""
    _run_cli_command(shape_network, ctx.obj, name=name, profile="flaky")


def main():
    """Main entry point for CLI."""
    app()
