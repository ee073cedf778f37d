"""Command implementations for CLI."""

from typing import Any, Callable, List, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from blockade_client.client.handler import BlockadeHandler
from blockade_client.loader import load_blockade_config
from blockade_client.models.enums import ContainerStatus


console = Console()


def _run_action(
    description: str,
    action: Callable[..., Any],
    *args: Any,
    success_msg: Optional[str] = None,
    quiet: bool = False,
) -> Any:
    """Helper to run a handler action with a progress spinner."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        disable=quiet,
    ) as progress:
        task = progress.add_task(description, total=None)

        result = action(*args)

        progress.update(task, completed=True)

    if success_msg and not quiet:
        console.print(success_msg)

    return result


def list_blockades(handler: BlockadeHandler):
    """List blockades with their container counts."""
    handler.fetch_state()

    table = Table(title="Blockades")
    table.add_column("Name", style="cyan")
    table.add_column("Containers", justify="right")
    table.add_column("Up", justify="right", style="green")

    for name in handler.shadow.names():
        state = handler.get_state(name)
        containers = state.containers.values() if state else []
        up = sum(1 for c in containers if c.status is ContainerStatus.UP)
        table.add_row(name, str(len(containers)), str(up))

    console.print(table)


def show_status(handler: BlockadeHandler, name: str):
    """Show the containers of one blockade."""
    handler.get_all_containers(name)
    state = handler.get_state(name)

    table = Table(title=f"Blockade {name}")
    table.add_column("Container", style="cyan")
    table.add_column("Status")
    table.add_column("Network", style="magenta")
    table.add_column("Partition", justify="right")
    table.add_column("IP Address")
    table.add_column("Device", style="dim")
    table.add_column("Container ID", style="dim", max_width=12)

    status_colors = {
        ContainerStatus.UP: "green",
        ContainerStatus.DOWN: "yellow",
        ContainerStatus.MISSING: "red",
    }
    for container_name in handler.shadow.container_names(name):
        info = state.containers[container_name]
        color = status_colors[info.status]
        table.add_row(
            container_name,
            f"[{color}]{info.status}[/{color}]",
            str(info.network_state),
            str(info.partition),
            str(info.ip_address),
            info.device,
            info.container_id,
        )

    console.print(table)


def up_blockade(handler: BlockadeHandler, name: str, config_file: str, restart: bool = False):
    """Create a blockade from a YAML definition."""
    config = load_blockade_config(config_file)
    _run_action(
        f"Starting blockade {name}...",
        handler.start_blockade,
        name,
        config,
        restart,
        success_msg=f"[green]✓[/green] Blockade {name} started with {len(config.containers)} containers",
    )


def destroy_blockade(handler: BlockadeHandler, name: str):
    """Destroy a blockade."""
    _run_action(
        f"Destroying blockade {name}...",
        handler.destroy_blockade,
        name,
        success_msg=f"[green]✓[/green] Blockade {name} destroyed",
    )


def container_command(handler: BlockadeHandler, name: str, container: str, command: str):
    """Run start/stop/restart/kill on one container."""
    actions = {
        "start": (handler.start_container, "Starting", "started"),
        "stop": (handler.stop_container, "Stopping", "stopped"),
        "restart": (handler.restart_container, "Restarting", "restarted"),
        "kill": (handler.kill_container, "Killing", "killed"),
    }
    action, verb, done = actions[command]
    _run_action(
        f"{verb} container {container}...",
        action,
        name,
        container,
        success_msg=f"[green]✓[/green] Container {container} {done}",
    )


def random_container_command(handler: BlockadeHandler, name: str, command: str):
    """Kill or restart a randomly chosen container."""
    if command == "kill":
        container = _run_action(f"Killing a container in {name}...", handler.kill_one, name)
        console.print(f"[green]✓[/green] Container {container} killed")
    else:
        container = _run_action(f"Restarting a container in {name}...", handler.restart_one, name)
        console.print(f"[green]✓[/green] Container {container} restarted")


def partition_blockade(handler: BlockadeHandler, name: str, groups: List[str]):
    """Partition a blockade; each group is a comma-separated list of containers."""
    partitions = [
        [member.strip() for member in group.split(",") if member.strip()]
        for group in groups
    ]
    _run_action(
        f"Partitioning blockade {name}...",
        handler.make_partitions,
        name,
        partitions,
        success_msg=f"[green]✓[/green] Blockade {name} split into {len(partitions)} partitions",
    )


def heal_blockade(handler: BlockadeHandler, name: str):
    """Remove partitions and restore the network."""
    _run_action(
        f"Healing blockade {name}...",
        handler.heal_partitions,
        name,
        success_msg=f"[green]✓[/green] Blockade {name} healed",
    )


def shape_network(handler: BlockadeHandler, name: str, profile: str):
    """Make every link in a blockade fast or flaky."""
    action = handler.make_net_fast if profile == "fast" else handler.make_net_unreliable
    _run_action(
        f"Making network of {name} {profile}...",
        action,
        name,
        success_msg=f"[green]✓[/green] Network of blockade {name} is now {profile}",
    )
