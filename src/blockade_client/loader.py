"""Loading of blockade definitions and client settings from YAML files."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from blockade_client.exceptions import ConfigLoadError
from blockade_client.models.config import BlockadeConfig
from blockade_client.models.settings import ClientSettings


logger = logging.getLogger(__name__)


def _read_yaml(path: Path) -> Dict[str, Any]:
    """Read and parse a YAML mapping."""
    if not path.exists():
        raise ConfigLoadError(str(path), "file not found")

    yaml = YAML(typ="safe")
    try:
        data = yaml.load(path.read_text())
    except OSError as e:
        raise ConfigLoadError(str(path), f"cannot read file: {e}") from e
    except YAMLError as e:
        raise ConfigLoadError(str(path), f"invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(str(path), "top level must be a mapping")
    return data


def load_blockade_config(path: Union[str, Path]) -> BlockadeConfig:
    """Load a blockade definition.

    The file has a ``containers`` mapping of container name to spec and an
    optional ``network`` section. A container without a ``hostname`` gets
    its own name.
    """
    path = Path(path)
    data = _read_yaml(path)

    containers = data.get("containers") or {}
    if not isinstance(containers, dict):
        raise ConfigLoadError(str(path), "'containers' must be a mapping")

    for name, spec in containers.items():
        if isinstance(spec, dict):
            spec.setdefault("hostname", name)

    try:
        config = BlockadeConfig(containers=containers, network=data.get("network") or {})
    except ValidationError as e:
        raise ConfigLoadError(str(path), str(e)) from e

    logger.debug(f"Loaded {len(config.containers)} containers from {path}")
    return config


def load_settings(path: Optional[Union[str, Path]] = None, **overrides: Any) -> ClientSettings:
    """Load client settings from an optional YAML file.

    Keyword overrides that are not None take precedence over the file.
    """
    data: Dict[str, Any] = {}
    if path is not None:
        data = _read_yaml(Path(path))
        logger.debug(f"Loaded settings from {path}")

    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ClientSettings(**data)
    except ValidationError as e:
        raise ConfigLoadError(str(path) if path else "<settings>", str(e)) from e
