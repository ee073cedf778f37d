"""Pydantic models for the blockade wire protocol and client settings."""

from blockade_client.models.config import BlockadeConfig, ContainerSpec, NetworkConfig
from blockade_client.models.enums import Command, ContainerStatus, NetworkStatus
from blockade_client.models.settings import ClientSettings
from blockade_client.models.state import (
    BlockadeState,
    CommandArgs,
    ContainerState,
    NetworkStateArgs,
    PartitionArgs,
)

__all__ = [
    "BlockadeConfig",
    "ContainerSpec",
    "NetworkConfig",
    "Command",
    "ContainerStatus",
    "NetworkStatus",
    "ClientSettings",
    "BlockadeState",
    "CommandArgs",
    "ContainerState",
    "NetworkStateArgs",
    "PartitionArgs",
]
