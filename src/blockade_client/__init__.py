"""
blockade-client - Python client for the blockade network fault injection daemon.

Creates and destroys blockades, runs container commands and reshapes network
partitions and link quality, keeping a local shadow of the daemon's state.
"""

__version__ = "1.0.0"

# Re-export key components for easier access
from blockade_client.client.handler import BlockadeHandler
from blockade_client.exceptions import (
    BlockadeError,
    DecodeError,
    OtherError,
    ServerError,
    TransportError,
)
from blockade_client.models.config import BlockadeConfig, ContainerSpec, NetworkConfig
from blockade_client.models.enums import Command, ContainerStatus, NetworkStatus

__all__ = [
    "BlockadeHandler",
    "BlockadeError",
    "DecodeError",
    "OtherError",
    "ServerError",
    "TransportError",
    "BlockadeConfig",
    "ContainerSpec",
    "NetworkConfig",
    "Command",
    "ContainerStatus",
    "NetworkStatus",
]
