"""Load the socket configuration document.

Expected document:

    sockets:
      - name: web
        host: localhost
        port: 80
        protocol: tcp   # optional, default tcp
        timeout: 2      # optional, seconds, default 5

Any read, parse or shape error raises ConfigLoadError; an invalid socket
raises the matching SocketValidationError. Both are fatal at startup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from connection_status.domain.errors.socket_config import ConfigLoadError
from connection_status.domain.models.socket import Socket, SocketSet

SOCKETS_KEY = "sockets"


def load_socket_set(path: str | Path) -> SocketSet:
    """Load and validate the socket set from a YAML file.

    Args:
        path: Path of the configuration file.

    Returns:
        The validated SocketSet.

    Raises:
        ConfigLoadError: If the file cannot be read, parsed or has the
            wrong shape.
        SocketValidationError: If a socket is invalid.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigLoadError(exc.strerror or str(exc), path=str(path)) from exc
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(f"cannot parse document: {exc}", path=str(path)) from exc

    try:
        return parse_socket_set(data)
    except ConfigLoadError as exc:
        raise ConfigLoadError(exc.reason, path=str(path)) from exc


def parse_socket_set(data: Any) -> SocketSet:
    """Build and validate a SocketSet from a parsed document.

    Args:
        data: The parsed document. None (an empty document) yields an
            empty set.

    Returns:
        The validated SocketSet.

    Raises:
        ConfigLoadError: If the document has the wrong shape.
        SocketValidationError: If a socket is invalid.
    """
    if data is None:
        return SocketSet.from_sockets([])
    if not isinstance(data, dict):
        raise ConfigLoadError(f"document must be a mapping with a '{SOCKETS_KEY}' list")

    entries = data.get(SOCKETS_KEY)
    if entries is None:
        entries = []
    if not isinstance(entries, list):
        raise ConfigLoadError(f"'{SOCKETS_KEY}' must be a list")

    sockets = [_socket_from_entry(entry, index) for index, entry in enumerate(entries)]
    return SocketSet.from_sockets(sockets)


def _socket_from_entry(entry: Any, index: int) -> Socket:
    if not isinstance(entry, dict):
        raise ConfigLoadError(f"socket #{index} must be a mapping")

    return Socket(
        name=_text_field(entry, "name", index),
        host=_text_field(entry, "host", index),
        port=_port_field(entry, index),
        protocol=_text_field(entry, "protocol", index),
        timeout=_timeout_field(entry, index),
    )


def _text_field(entry: dict[str, Any], key: str, index: int) -> str:
    value = entry.get(key)
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ConfigLoadError(f"socket #{index}: '{key}' must be a string")
    return str(value)


def _port_field(entry: dict[str, Any], index: int) -> int | str | None:
    value = entry.get("port")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ConfigLoadError(f"socket #{index}: 'port' must be an integer or a string")
    return value


def _timeout_field(entry: dict[str, Any], index: int) -> int:
    value = entry.get("timeout")
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigLoadError(f"socket #{index}: 'timeout' must be an integer")
    return value
