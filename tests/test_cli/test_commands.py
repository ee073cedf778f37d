"""Tests for CLI command implementations."""

import pytest
from unittest.mock import MagicMock, patch

from blockade_client.cli.commands import (
    list_blockades,
    random_container_command,
    shape_network,
    show_status,
    up_blockade,
)
from blockade_client.client.handler import BlockadeHandler


HOST = "http://blockade.test"


@pytest.fixture
def handler(service, http_client):
    """Handler over the fake daemon with two blockades."""
    service.add_blockade("b1", ["b", "a"])
    service.add_blockade("b2", ["c"])
    service.blockades["b2"]["c"]["status"] = "DOWN"
    return BlockadeHandler(HOST, http_client=http_client)


@patch("blockade_client.cli.commands.console")
def test_list_blockades(mock_console, handler):
    """Test that the list table has one row per blockade."""
    list_blockades(handler)

    table = mock_console.print.call_args[0][0]
    assert table.row_count == 2
    assert list(table.columns[0].cells) == ["b1", "b2"]
    assert list(table.columns[2].cells) == ["2", "0"]


@patch("blockade_client.cli.commands.console")
def test_show_status(mock_console, handler):
    """Test that status rows follow sorted container order."""
    show_status(handler, "b1")

    table = mock_console.print.call_args[0][0]
    assert list(table.columns[0].cells) == ["a", "b"]
    assert list(table.columns[2].cells) == ["fast", "fast"]
    assert list(table.columns[3].cells) == ["0", "0"]


def test_up_blockade(tmp_path):
    """Test that up loads the definition and starts the blockade."""
    path = tmp_path / "blockade.yaml"
    path.write_text("containers:\n  web:\n    image: nginx\n")
    handler = MagicMock()

    up_blockade(handler, "b9", str(path), restart=True)

    name, config, restart = handler.start_blockade.call_args[0]
    assert name == "b9"
    assert config.containers["web"].hostname == "web"
    assert restart is True


def test_random_kill_reports_choice(capsys):
    """Test that the chosen container is reported."""
    handler = MagicMock()
    handler.kill_one.return_value = "a"

    random_container_command(handler, "b1", "kill")

    handler.kill_one.assert_called_once_with("b1")
    assert "Container a killed" in capsys.readouterr().out


def test_shape_network():
    """Test fast and flaky dispatch."""
    handler = MagicMock()

    shape_network(handler, "b1", "fast")
    shape_network(handler, "b1", "flaky")

    handler.make_net_fast.assert_called_once_with("b1")
    handler.make_net_unreliable.assert_called_once_with("b1")
