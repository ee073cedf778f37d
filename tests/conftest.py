"""Pytest configuration and fixtures for blockade client tests."""

import json

import httpx
import pytest

from blockade_client.models.config import BlockadeConfig, ContainerSpec


class FakeBlockadeService:
    """In-memory blockade daemon served through httpx.MockTransport."""

    def __init__(self):
        self.blockades = {}
        self.requests = []
        self.fail_next = []

    def add_blockade(self, name, containers):
        """Register a blockade with running containers in the default partition."""
        self.blockades[name] = {
            container: {
                "container_id": f"id-{container}",
                "device": f"veth{i}",
                "ip_address": f"172.17.0.{i + 2}",
                "name": f"{name}_{container}",
                "network_state": "NORMAL",
                "partition": None,
                "status": "UP",
            }
            for i, container in enumerate(containers)
        }

    def __call__(self, request):
        parts = request.url.path.strip("/").split("/")
        self.requests.append((request.method, request.url.path))

        if self.fail_next:
            status, body = self.fail_next.pop(0)
            return httpx.Response(status, text=body)

        body = json.loads(request.content) if request.content else None

        if parts == ["blockade"]:
            return httpx.Response(200, json={"blockades": sorted(self.blockades)})

        name = parts[1]
        if len(parts) == 2 and request.method == "POST":
            if name in self.blockades:
                return httpx.Response(400, text="Blockade name already exists")
            self.add_blockade(name, sorted(body["containers"]))
            return httpx.Response(204)

        if name not in self.blockades:
            return httpx.Response(404, text="Blockade name not found")
        containers = self.blockades[name]

        if len(parts) == 2 and request.method == "GET":
            return httpx.Response(200, json={"containers": containers})
        if len(parts) == 2 and request.method == "DELETE":
            del self.blockades[name]
            return httpx.Response(204)

        resource = parts[2]
        if resource == "action":
            status = {"start": "UP", "restart": "UP", "stop": "DOWN", "kill": "DOWN"}[body["command"]]
            for container in body["container_names"]:
                containers[container]["status"] = status
        elif resource == "network_state":
            for container in body["container_names"]:
                containers[container]["network_state"] = body["network_state"].upper()
        elif resource == "partitions" and request.method == "POST":
            for index, group in enumerate(body["partitions"], start=1):
                for container in group:
                    containers[container]["partition"] = index
        elif resource == "partitions" and request.method == "DELETE":
            for container in containers.values():
                container["partition"] = None
                container["network_state"] = "NORMAL"
        return httpx.Response(204)


@pytest.fixture
def service():
    """Fake blockade daemon."""
    return FakeBlockadeService()


@pytest.fixture
def http_client(service):
    """httpx client routed to the fake daemon."""
    with httpx.Client(transport=httpx.MockTransport(service)) as client:
        yield client


@pytest.fixture
def sample_config():
    """Blockade config with two containers."""
    return BlockadeConfig(
        containers={
            "a": ContainerSpec(image="nginx", hostname="a"),
            "b": ContainerSpec(image="redis", hostname="b", links={"web": "a"}),
        }
    )
