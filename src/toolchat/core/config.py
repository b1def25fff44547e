"""Server registry: which MCP servers the front end talks to.

Servers come either from environment variables (:func:`default_servers`) or
from a YAML/JSON file with a top-level ``servers`` list::

    servers:
      - id: gdrive
        name: Google Drive
        base_url: http://localhost:8080
      - id: gmail
        name: Gmail
        base_url: http://mail.internal:8082
        origin: http://localhost:3000
        timeout: 10
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

# PyYAML is imported on first use; JSON files never need it.
_yaml: Any = None


def _get_yaml() -> Any:
    """Return the ``yaml`` module or raise if PyYAML is not installed."""
    global _yaml
    if _yaml is None:
        try:
            import yaml

            _yaml = yaml
        except ImportError as exc:
            raise ImportError(
                "PyYAML is required for YAML server files. Install it with: pip install pyyaml"
            ) from exc
    return _yaml


class ConfigError(Exception):
    """A server registry file could not be read or validated."""


class ServerRef(BaseModel):
    """Connection details for one MCP server."""

    id: str
    name: str
    base_url: str
    path: str = "/"
    origin: str | None = None
    token: str | None = None
    timeout: float = 30.0

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            msg = f"base_url must be an http(s) URL, got {value!r}"
            raise ValueError(msg)
        return value.rstrip("/")


class ServerRegistry(BaseModel):
    """Ordered list of servers, addressable by id."""

    servers: list[ServerRef] = []

    @field_validator("servers")
    @classmethod
    def check_unique_ids(cls, value: list[ServerRef]) -> list[ServerRef]:
        seen: set[str] = set()
        for ref in value:
            if ref.id in seen:
                msg = f"duplicate server id: {ref.id}"
                raise ValueError(msg)
            seen.add(ref.id)
        return value

    @property
    def ids(self) -> list[str]:
        return [ref.id for ref in self.servers]

    def get(self, server_id: str) -> ServerRef | None:
        for ref in self.servers:
            if ref.id == server_id:
                return ref
        return None


# (id, display name, env var, default URL)
_DEFAULT_SERVERS = (
    ("gdrive", "Google Drive", "GDRIVE_SERVER_URL", "http://localhost:8080"),
    ("gforms", "Google Forms", "GFORMS_SERVER_URL", "http://localhost:8081"),
    ("gmail", "Gmail", "GMAIL_SERVER_URL", "http://localhost:8082"),
)


def default_servers(env: Mapping[str, str] | None = None) -> ServerRegistry:
    """Build the registry from environment variables.

    ``TOOLCHAT_ORIGIN`` sets the ``Origin`` header for every server.
    """
    env = os.environ if env is None else env
    origin = env.get("TOOLCHAT_ORIGIN") or None
    return ServerRegistry(
        servers=[
            ServerRef(id=sid, name=name, base_url=env.get(var) or url, origin=origin)
            for sid, name, var, url in _DEFAULT_SERVERS
        ]
    )


def _load_document(raw: str, format: str) -> Any:
    if format == "json":
        return json.loads(raw)
    yaml = _get_yaml()
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ValueError(str(exc)) from exc


def parse_servers(raw: str, *, format: str = "yaml") -> ServerRegistry:
    """Parse a raw registry document.

    Raises:
        ConfigError: malformed document or invalid server entries.
    """
    try:
        data = _load_document(raw, format)
    except ValueError as exc:
        raise ConfigError(f"invalid {format} document: {exc}") from exc

    if not isinstance(data, dict) or "servers" not in data:
        raise ConfigError("server file must contain a top-level 'servers' list")
    try:
        return ServerRegistry.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_servers(path: Path | str) -> ServerRegistry:
    """Read a ``.yaml``/``.yml``/``.json`` registry file."""
    path = Path(path)
    if path.suffix not in (".yaml", ".yml", ".json"):
        raise ConfigError(f"unsupported server file type: {path.suffix or path.name}")
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    return parse_servers(raw, format="json" if path.suffix == ".json" else "yaml")
