"""Local cache of blockade state and configuration."""

import logging
from typing import Dict, List, Optional

from blockade_client.client.protocol import ProtocolClient
from blockade_client.models.config import BlockadeConfig
from blockade_client.models.state import BlockadeState


logger = logging.getLogger(__name__)


class StateShadow:
    """Last-known state and last-applied config per blockade name.

    Not safe for concurrent mutation; one owner issues calls sequentially.
    """

    def __init__(self, protocol: ProtocolClient):
        """Initialize state shadow."""
        self.protocol = protocol
        self._states: Dict[str, BlockadeState] = {}
        self._configs: Dict[str, BlockadeConfig] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._states

    def refresh(self, name: str) -> BlockadeState:
        """Fetch a blockade and replace its cached state."""
        state = self.protocol.get_blockade(name)
        self._states[name] = state
        logger.debug(f"Refreshed blockade {name}: {len(state.containers)} containers")
        return state

    def refresh_all(self):
        """Refresh every blockade the daemon lists.

        Stops at the first failure; entries refreshed before it keep their
        new state and the rest stay stale.
        """
        for name in sorted(self.protocol.list_blockades()):
            self.refresh(name)

    def forget(self, name: str):
        """Drop everything cached for a destroyed blockade."""
        self._states.pop(name, None)
        self._configs.pop(name, None)

    def names(self) -> List[str]:
        """Return the names of all cached blockades, sorted."""
        return sorted(self._states)

    def record_config(self, name: str, config: BlockadeConfig):
        """Remember the config a blockade was created with."""
        self._configs[name] = config

    def get_config(self, name: str) -> Optional[BlockadeConfig]:
        """Get the config a blockade was created with, if this client created it."""
        return self._configs.get(name)

    def get_state(self, name: str) -> Optional[BlockadeState]:
        """Get the cached state of a blockade."""
        return self._states.get(name)

    def container_names(self, name: str) -> List[str]:
        """Return the cached container names of a blockade, sorted."""
        state = self._states.get(name)
        if state is None:
            return []
        return sorted(state.containers)
