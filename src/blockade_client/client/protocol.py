"""HTTP protocol client for the blockade daemon."""

import json
import logging
import urllib.parse
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Type

import httpx
from pydantic import BaseModel, ValidationError

from blockade_client.exceptions import DecodeError, OtherError, ServerError, TransportError
from blockade_client.models.config import BlockadeConfig
from blockade_client.models.enums import Command, NetworkStatus
from blockade_client.models.state import (
    BlockadeState,
    CommandArgs,
    NetworkStateArgs,
    PartitionArgs,
)


logger = logging.getLogger(__name__)


class ProtocolClient:
    """One method per daemon endpoint.

    Every call raises TransportError when the daemon cannot be reached,
    ServerError on a non-2xx response and DecodeError on an unparsable body.
    A command or network state outside the wire vocabulary raises OtherError
    before anything is sent.
    Nothing is retried here.
    """

    def __init__(
        self,
        host: str,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
    ):
        """Initialize protocol client."""
        self.host = host.rstrip("/")
        self._owns_client = http_client is None
        self.http = http_client if http_client is not None else httpx.Client(timeout=timeout)

    def close(self):
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _url(self, *parts: str) -> str:
        """Build an endpoint URL; each part is percent-encoded as one path segment."""
        quoted = [urllib.parse.quote(part, safe="") for part in parts]
        return "/".join([self.host, "blockade", *quoted])

    def _args(self, model: Type[BaseModel], **fields: Any) -> BaseModel:
        """Build a request body, rejecting values outside the wire vocabulary."""
        try:
            return model(**fields)
        except ValidationError as e:
            raise OtherError(f"invalid {model.__name__}: {e}") from e

    def _send(self, method: str, url: str, payload: Optional[BaseModel] = None) -> httpx.Response:
        """Send a request and return the response if its status is 2xx."""
        kwargs: Dict[str, Any] = {}
        if payload is not None:
            body = payload.model_dump(mode="json")
            logger.debug(f"Request body for {method} {url}: {body}")
            kwargs["json"] = body

        try:
            response = self.http.request(method, url, **kwargs)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug(f"{method} {url} returned status {response.status_code}")

        if not response.is_success:
            raise ServerError(response.text, response.status_code)
        return response

    def _json(self, response: httpx.Response) -> Any:
        raw_text = response.text
        logger.debug(f"Raw response from server: {raw_text!r}")
        try:
            return json.loads(raw_text)
        except ValueError as e:
            raise DecodeError(f"invalid JSON body: {e}") from e

    def list_blockades(self) -> Set[str]:
        """Return the names of all blockades known to the daemon."""
        data = self._json(self._send("GET", self._url()))
        if not isinstance(data, dict):
            raise DecodeError(f"expected an object, got {type(data).__name__}")

        names = data.get("blockades")
        if names is None:
            return set()
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise DecodeError("'blockades' must be a list of names")
        return set(names)

    def get_blockade(self, name: str) -> BlockadeState:
        """Fetch the current state of a blockade."""
        data = self._json(self._send("GET", self._url(name)))
        try:
            return BlockadeState.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"unexpected state for blockade {name}: {e}") from e

    def create_blockade(self, name: str, config: BlockadeConfig):
        """Create a blockade from a configuration."""
        self._send("POST", self._url(name), config)

    def run_command(self, name: str, command: Command, container_names: Iterable[str]):
        """Run a lifecycle command against some containers."""
        args = self._args(CommandArgs, command=command, container_names=list(container_names))
        self._send("POST", self._url(name, "action"), args)

    def set_network_state(
        self,
        name: str,
        network_state: NetworkStatus,
        container_names: Iterable[str],
    ):
        """Apply a network profile to some containers in one request."""
        args = self._args(NetworkStateArgs, network_state=network_state, container_names=list(container_names))
        self._send("POST", self._url(name, "network_state"), args)

    def set_partitions(self, name: str, partitions: Sequence[Iterable[str]]):
        """Split containers into partitions; unlisted containers stay ungrouped."""
        groups: List[List[str]] = [list(group) for group in partitions]
        self._send("POST", self._url(name, "partitions"), PartitionArgs(partitions=groups))

    def heal_network(self, name: str):
        """Remove all partitions and reset link quality."""
        self._send("DELETE", self._url(name, "partitions"))

    def delete_blockade(self, name: str):
        """Destroy a blockade and its containers."""
        self._send("DELETE", self._url(name))
