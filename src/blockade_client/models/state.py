"""Observed blockade state and request bodies.

Daemon versions disagree on how they report optional container fields: some
omit the key, some send null. Both collapse to the same default here.
"""

from ipaddress import IPv4Address
from typing import Any, Dict, List
from pydantic import BaseModel, Field, field_validator

from blockade_client.models.enums import Command, ContainerStatus, NetworkStatus


UNASSIGNED_IP = IPv4Address("0.0.0.0")


class ContainerState(BaseModel):
    """State of one container as reported by the daemon."""
    container_id: str
    device: str = ""
    ip_address: IPv4Address = UNASSIGNED_IP
    name: str
    network_state: NetworkStatus
    partition: int = Field(default=0, ge=0)
    status: ContainerStatus

    class Config:
        """Pydantic config."""
        extra = "ignore"

    @field_validator("device", mode="before")
    @classmethod
    def default_device(cls, v: Any) -> Any:
        """Null device means no device."""
        return "" if v is None else v

    @field_validator("ip_address", mode="before")
    @classmethod
    def default_ip_address(cls, v: Any) -> Any:
        """Null address means the container has no address yet."""
        return UNASSIGNED_IP if v is None else v

    @field_validator("partition", mode="before")
    @classmethod
    def default_partition(cls, v: Any) -> Any:
        """Null partition means the default partition."""
        return 0 if v is None else v

    @field_validator("network_state", mode="before")
    @classmethod
    def decode_network_state(cls, v: Any) -> NetworkStatus:
        return NetworkStatus.decode(v)

    @field_validator("status", mode="before")
    @classmethod
    def decode_status(cls, v: Any) -> ContainerStatus:
        return ContainerStatus.decode(v)


class BlockadeState(BaseModel):
    """State of a whole blockade."""
    containers: Dict[str, ContainerState] = Field(default_factory=dict)

    class Config:
        """Pydantic config."""
        extra = "ignore"

    @field_validator("containers", mode="before")
    @classmethod
    def default_containers(cls, v: Any) -> Any:
        return {} if v is None else v


class CommandArgs(BaseModel):
    """Body of an action request."""
    command: Command
    container_names: List[str] = Field(default_factory=list)

    @field_validator("command", mode="before")
    @classmethod
    def decode_command(cls, v: Any) -> Command:
        return Command.decode(v)


class NetworkStateArgs(BaseModel):
    """Body of a network_state request."""
    network_state: NetworkStatus
    container_names: List[str] = Field(default_factory=list)

    @field_validator("network_state", mode="before")
    @classmethod
    def decode_network_state(cls, v: Any) -> NetworkStatus:
        return NetworkStatus.decode(v)


class PartitionArgs(BaseModel):
    """Body of a partitions request. Each inner list is one partition."""
    partitions: List[List[str]] = Field(default_factory=list)
