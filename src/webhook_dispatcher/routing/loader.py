"""Routing table loading from TOML, JSON or YAML files."""

import json
import logging
import tomllib
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from webhook_dispatcher.exceptions import (
    RouteFileNotFoundError,
    RouteFileParseError,
    RouteFileReadError,
    UnsupportedFormatError,
)
from webhook_dispatcher.routing.models import RouteTable

logger = logging.getLogger(__name__)


class RouteFormat(str, Enum):
    """Supported route file formats."""

    TOML = "toml"
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_path(cls, path: Path) -> "RouteFormat":
        """
        Determine the format from the file suffix.

        Raises:
            UnsupportedFormatError: If the suffix is not toml, json, yaml or yml
        """
        suffix = path.suffix.lower().lstrip(".")
        if suffix == "yml":
            suffix = "yaml"
        try:
            return cls(suffix)
        except ValueError:
            raise UnsupportedFormatError(
                f"Route file {path} is not in TOML, JSON, or YAML format"
            ) from None


def _parse_toml(content: str) -> Any:
    return tomllib.loads(content)


def _parse_json(content: str) -> Any:
    return json.loads(content)


_RESOLVED_KEY_TAGS = frozenset(
    f"tag:yaml.org,2002:{name}" for name in ("bool", "null", "int", "float", "timestamp")
)


class _RouteLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain mapping keys as written (yes, on, 1234, null)."""

    def construct_mapping(self, node, deep=False):
        for key_node, _ in node.value:
            if isinstance(key_node, yaml.ScalarNode) and key_node.tag in _RESOLVED_KEY_TAGS:
                key_node.tag = yaml.resolver.BaseResolver.DEFAULT_SCALAR_TAG
        return super().construct_mapping(node, deep=deep)


def _parse_yaml(content: str) -> Any:
    return yaml.load(content, Loader=_RouteLoader)  # noqa: S506


_PARSERS: dict[RouteFormat, Callable[[str], Any]] = {
    RouteFormat.TOML: _parse_toml,
    RouteFormat.JSON: _parse_json,
    RouteFormat.YAML: _parse_yaml,
}

_PARSE_ERRORS = (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError)


def parse_route_table(content: str, route_format: RouteFormat) -> RouteTable:
    """
    Parse route file content into the canonical table shape.

    Args:
        content: Raw file content
        route_format: Format to parse the content as

    Returns:
        Mapping of owner login to owner entry; empty documents give {}

    Raises:
        RouteFileParseError: If the content is invalid or not a mapping
    """
    try:
        data = _PARSERS[route_format](content)
    except _PARSE_ERRORS as e:
        raise RouteFileParseError(f"Invalid {route_format.value.upper()} route file: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RouteFileParseError(
            f"Route file must contain a mapping of owners, got {type(data).__name__}"
        )

    return data


def load_route_table(route_file: Path) -> RouteTable:
    """
    Read and parse the route file.

    The file is read on every call and a new table is returned each time,
    so edits take effect on the next request.

    Args:
        route_file: Path to a .toml, .json, .yaml or .yml file

    Returns:
        The parsed routing table

    Raises:
        RouteFileNotFoundError: If the file does not exist
        RouteFileReadError: If the path is a directory or cannot be read
        UnsupportedFormatError: If the suffix is not recognized
        RouteFileParseError: If the content is invalid
    """
    route_file = Path(route_file)

    if not route_file.exists():
        raise RouteFileNotFoundError(f"Route file {route_file} not found")
    if route_file.is_dir():
        raise RouteFileReadError(f"{route_file} is a directory, not a file")

    route_format = RouteFormat.from_path(route_file)

    try:
        content = route_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RouteFileReadError(f"Failed to read route file {route_file}: {e}") from e

    logger.debug(f"Loaded {route_format.value} route file {route_file}")
    return parse_route_table(content, route_format)
