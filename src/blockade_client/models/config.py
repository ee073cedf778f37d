"""Blockade configuration models (the desired topology sent on create)."""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class ContainerSpec(BaseModel):
    """Container specification."""
    image: str = Field(..., description="Image to run")
    hostname: str = Field(..., description="Hostname inside the container")
    volumes: Dict[str, str] = Field(default_factory=dict, description="Host path to container path")
    expose: List[int] = Field(default_factory=list)
    ports: Dict[int, int] = Field(default_factory=dict, description="Published port to container port")
    links: Dict[str, str] = Field(default_factory=dict, description="Alias to target container name")
    command: Optional[str] = None

    class Config:
        """Pydantic config."""
        extra = "forbid"


class NetworkConfig(BaseModel):
    """Network emulation profile parameters."""
    flaky: str = Field(default="10%")
    slow: str = Field(default="75ms 100ms distribution normal")
    driver: str = Field(default="udn")

    class Config:
        """Pydantic config."""
        extra = "forbid"


class BlockadeConfig(BaseModel):
    """Blockade configuration: containers plus network defaults."""
    containers: Dict[str, ContainerSpec] = Field(default_factory=dict)
    network: NetworkConfig = Field(default_factory=NetworkConfig)

    class Config:
        """Pydantic config."""
        extra = "ignore"
