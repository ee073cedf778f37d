"""Wire enumerations exchanged with the blockade service."""

from enum import Enum
from typing import Dict, Union


class _WireEnum(str, Enum):
    """String enum that encodes as its lowercase value and decodes leniently."""

    @classmethod
    def _aliases(cls) -> Dict[str, "_WireEnum"]:
        return {}

    @classmethod
    def decode(cls, token: Union[str, "_WireEnum"]):
        """Decode a wire token, ignoring case.

        Raises ValueError for anything outside the accepted token set.
        """
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise ValueError(f"Invalid {cls.__name__} token: {token!r}")

        lowered = token.lower()
        for member in cls:
            if member.value == lowered:
                return member
        aliases = cls._aliases()
        if lowered in aliases:
            return aliases[lowered]
        raise ValueError(f"Invalid {cls.__name__} token: {token!r}")

    def __str__(self) -> str:
        return self.value


class Command(_WireEnum):
    """Container lifecycle command."""
    START = "start"
    STOP = "stop"
    RESTART = "restart"
    KILL = "kill"


class NetworkStatus(_WireEnum):
    """Link-quality profile applied to a container."""
    FAST = "fast"
    SLOW = "slow"
    DUPLICATE = "duplicate"
    FLAKY = "flaky"
    UNKNOWN = "unknown"

    @classmethod
    def _aliases(cls):
        # Older daemons report an unshaped link as NORMAL.
        return {"normal": cls.FAST}


class ContainerStatus(_WireEnum):
    """Container runtime status."""
    UP = "up"
    DOWN = "down"
    MISSING = "missing"
