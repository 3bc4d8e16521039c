from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

DEFAULT_SCHEME = "http"
DEFAULT_EVENT = "didLaunchAppFromLink"
DEFAULT_PATHS = ("*",)


@dataclass(frozen=True)
class Host:
    name: str
    scheme: str = DEFAULT_SCHEME
    event: str = DEFAULT_EVENT
    paths: tuple[str, ...] = DEFAULT_PATHS


@dataclass(frozen=True)
class PluginPreferences:
    hosts: list[Host] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PluginPreferences:
        """Build preferences from a mapping like ``{"hosts": [{"name": "example.com"}]}``.

        Raises ValueError when ``hosts`` is missing or is not a sequence of mappings.
        Host names are not validated; a host without a name gets an empty one.
        """
        if not isinstance(data, Mapping) or "hosts" not in data:
            raise ValueError("Plugin preferences must define a 'hosts' sequence.")
        hosts = data["hosts"]
        if not isinstance(hosts, Sequence) or isinstance(hosts, (str, bytes)):
            raise ValueError(
                f"Plugin preferences 'hosts' must be a sequence, got {type(hosts).__name__}."
            )
        return cls(hosts=[_host_from_mapping(host) for host in hosts])


def _host_from_mapping(host: Mapping[str, Any]) -> Host:
    if not isinstance(host, Mapping):
        raise ValueError(f"Host entries must be mappings, got {host!r}.")
    name = host.get("name")
    paths = host.get("paths")
    return Host(
        name="" if name is None else str(name),
        scheme=host.get("scheme") or DEFAULT_SCHEME,
        event=host.get("event") or DEFAULT_EVENT,
        paths=tuple(paths) if paths else DEFAULT_PATHS,
    )


def load_preferences(path: Path) -> PluginPreferences:
    with open(path) as f:
        data = YAML(typ="safe").load(f)
    return PluginPreferences.from_mapping(data or {})
