"""Protocol client, state shadow and orchestration handler."""

from blockade_client.client.handler import BlockadeHandler
from blockade_client.client.protocol import ProtocolClient
from blockade_client.client.shadow import StateShadow

__all__ = [
    "BlockadeHandler",
    "ProtocolClient",
    "StateShadow",
]
