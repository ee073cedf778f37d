"""Orchestration of blockade operations on top of the protocol client."""

import logging
import random
from typing import Iterable, List, Optional, Sequence

import httpx

from blockade_client.client.protocol import ProtocolClient
from blockade_client.client.shadow import StateShadow
from blockade_client.exceptions import BlockadeError, OtherError, ServerError, ServerErrorKind
from blockade_client.models.config import BlockadeConfig
from blockade_client.models.enums import Command, NetworkStatus
from blockade_client.models.state import BlockadeState


logger = logging.getLogger(__name__)


class BlockadeHandler:
    """Drives a blockade daemon and keeps a local shadow of its state.

    Every mutating operation sends its request, then re-fetches the affected
    blockade into the shadow before returning. Calls are synchronous and the
    handler holds no locks; share it across threads only behind a mutex.
    """

    def __init__(
        self,
        host: str,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize handler and pre-warm the shadow from the daemon.

        Construction never fails: if the daemon is unreachable the shadow
        starts empty and later calls surface the error.
        """
        self.host = host
        self.protocol = ProtocolClient(host, timeout=timeout, http_client=http_client)
        self.shadow = StateShadow(self.protocol)
        self.rng = rng if rng is not None else random.Random()

        try:
            names = sorted(self.protocol.list_blockades())
        except BlockadeError:
            names = []
        for name in names:
            try:
                self.shadow.refresh(name)
            except BlockadeError:
                pass

    def close(self):
        """Release the HTTP client."""
        self.protocol.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def get_state(self, name: str) -> Optional[BlockadeState]:
        """Return the cached state of a blockade without fetching."""
        return self.shadow.get_state(name)

    def get_config(self, name: str) -> Optional[BlockadeConfig]:
        """Return the config this handler created a blockade with."""
        return self.shadow.get_config(name)

    def fetch_state(self):
        """Refresh every blockade the daemon knows about."""
        self.shadow.refresh_all()

    def get_all_containers(self, name: str) -> List[str]:
        """Fetch a blockade and return its container names in sorted order."""
        self.shadow.refresh(name)
        return self.shadow.container_names(name)

    def choose_random_container(self, name: str, rng: Optional[random.Random] = None) -> str:
        """Pick a container uniformly at random from the cached state.

        Uses the shadow as-is, without fetching, so the choice may be stale.
        """
        if name not in self.shadow:
            raise OtherError("blockade not found")
        containers = self.shadow.container_names(name)
        if not containers:
            raise OtherError("no containers to choose from")
        return (rng or self.rng).choice(containers)

    def start_blockade(self, name: str, config: BlockadeConfig, restart: bool = False):
        """Create a blockade.

        With restart set, a blockade that already exists under this name is
        destroyed and created once more. Any other failure propagates.
        """
        try:
            self.protocol.create_blockade(name, config)
        except ServerError as e:
            if not restart or e.kind is not ServerErrorKind.ALREADY_EXISTS:
                raise
            logger.info(f"Blockade {name} already exists, recreating")
            self.destroy_blockade(name)
            self.protocol.create_blockade(name, config)

        self.shadow.record_config(name, config)
        logger.info(f"Blockade {name} started with {len(config.containers)} containers")
        self.shadow.refresh(name)

    def destroy_blockade(self, name: str):
        """Shut down a blockade and all of its containers."""
        self.shadow.refresh(name)
        self.protocol.delete_blockade(name)
        self.shadow.forget(name)
        logger.info(f"Blockade {name} destroyed")

    def _command(self, name: str, command: Command, container: str):
        self.protocol.run_command(name, command, [container])
        logger.info(f"Sent {command} to {container} in blockade {name}")
        self.shadow.refresh(name)

    def start_container(self, name: str, container: str):
        """Start a container by blockade name and container name."""
        self._command(name, Command.START, container)

    def stop_container(self, name: str, container: str):
        """Stop a container by blockade name and container name."""
        self._command(name, Command.STOP, container)

    def restart_container(self, name: str, container: str):
        """Restart a container by blockade name and container name."""
        self._command(name, Command.RESTART, container)

    def kill_container(self, name: str, container: str):
        """Kill a container by blockade name and container name."""
        self._command(name, Command.KILL, container)

    def restart_one(self, name: str) -> str:
        """Restart a random container. Returns the name of the restarted container."""
        container = self.choose_random_container(name)
        self.restart_container(name, container)
        return container

    def kill_one(self, name: str) -> str:
        """Kill a random container. Returns the name of the killed container."""
        container = self.choose_random_container(name)
        self.kill_container(name, container)
        return container

    def make_partitions(self, name: str, partitions: Sequence[Iterable[str]]):
        """Split containers into the given partitions."""
        self.protocol.set_partitions(name, partitions)
        logger.info(f"Partitioned blockade {name} into {len(partitions)} groups")
        self.shadow.refresh(name)

    def heal_partitions(self, name: str):
        """Put all containers in one partition and restore network quality."""
        self.protocol.heal_network(name)
        logger.info(f"Healed blockade {name}")
        self.shadow.refresh(name)

    def set_network_state(
        self,
        name: str,
        network_state: NetworkStatus,
        containers: Optional[Iterable[str]] = None,
    ):
        """Apply a network profile in one request, to all containers by default."""
        if containers is None:
            targets = self.get_all_containers(name)
        else:
            targets = list(containers)
        self.protocol.set_network_state(name, network_state, targets)
        logger.info(f"Set network of {len(targets)} containers in blockade {name} to {network_state}")
        self.shadow.refresh(name)

    def make_net_unreliable(self, name: str):
        """Make the network flaky: latency, dropped packets and some reordering."""
        self.set_network_state(name, NetworkStatus.FLAKY)

    def make_net_fast(self, name: str):
        """Make the network as good as the host allows."""
        self.set_network_state(name, NetworkStatus.FAST)
