"""
Generate the associated-domains entitlements files of a Cordova iOS project.

One file is written per build configuration:

    <project root>/platforms/ios/<project name>/Entitlements-<configuration>.plist

An existing file is loaded first so that entitlements added by other tools
survive; only the associated-domains key is replaced.
"""

from __future__ import annotations

import logging
import os
import plistlib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

from .context import resolve_project

if TYPE_CHECKING:
    from .context import HookContext, ProjectContext
    from .preferences import PluginPreferences

log = logging.getLogger(__name__)

ASSOCIATED_DOMAINS = "com.apple.developer.associated-domains"
APPLINKS_PREFIX = "applinks:"
CONFIGURATIONS = ("Debug", "Release")


@dataclass
class Entitlements:
    """An entitlements property list.

    ``extra`` holds every key other than the associated domains and is
    written back exactly as it was read, in the order it was read.
    """

    associated_domains: list[str] | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    key_order: tuple[str, ...] = field(default=(), compare=False, repr=False)

    @classmethod
    def from_plist(cls, data: dict[str, Any]) -> Entitlements:
        extra = dict(data)
        return cls(
            associated_domains=extra.pop(ASSOCIATED_DOMAINS, None),
            extra=extra,
            key_order=tuple(data),
        )

    def to_plist(self) -> dict[str, Any]:
        content = dict(self.extra)
        if self.associated_domains is not None:
            content[ASSOCIATED_DOMAINS] = list(self.associated_domains)
        # Keys read from the file keep their place, new keys go last
        data = {key: content.pop(key) for key in self.key_order if key in content}
        data.update(content)
        return data


@dataclass(frozen=True)
class Loaded:
    entitlements: Entitlements


@dataclass(frozen=True)
class Absent:
    path: Path


LoadResult = Union[Loaded, Absent]


def entitlements_path(project: ProjectContext, configuration: str) -> Path:
    if configuration not in CONFIGURATIONS:
        raise ValueError(
            f"Unknown build configuration '{configuration}'. "
            f"Expected one of: {', '.join(CONFIGURATIONS)}."
        )
    return project.ios_project_dir / f"Entitlements-{configuration}.plist"


def load_entitlements(path: Path) -> LoadResult:
    """Read an entitlements file.

    A file that does not exist or cannot be read is reported as ``Absent``.
    Content that is not a valid property list raises.
    """
    if not path.is_file() or not os.access(path, os.R_OK):
        return Absent(path)
    with open(path, "rb") as f:
        data = plistlib.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a dictionary at its root.")
    return Loaded(Entitlements.from_plist(data))


def _starting_entitlements(result: LoadResult) -> Entitlements:
    if isinstance(result, Loaded):
        return result.entitlements
    log.debug("No entitlements found at %s, starting from an empty file", result.path)
    return Entitlements()


def domain_link(host) -> str:
    return APPLINKS_PREFIX + host.name


def associated_domains_for(plugin_preferences: PluginPreferences) -> list[str]:
    """Build the applinks list for the configured hosts.

    Order of first occurrence is kept and duplicates are dropped.
    """
    domains = []
    for host in plugin_preferences.hosts:
        link = domain_link(host)
        if link not in domains:
            domains.append(link)
    return domains


def inject_preferences(
    entitlements: Entitlements, plugin_preferences: PluginPreferences
) -> Entitlements:
    return replace(entitlements, associated_domains=associated_domains_for(plugin_preferences))


def save_entitlements(entitlements: Entitlements, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        plistlib.dump(entitlements.to_plist(), f, fmt=plistlib.FMT_XML, sort_keys=False)


def generate_for_configuration(
    project: ProjectContext, plugin_preferences: PluginPreferences, configuration: str
) -> Path:
    path = entitlements_path(project, configuration)
    current = _starting_entitlements(load_entitlements(path))
    save_entitlements(inject_preferences(current, plugin_preferences), path)
    log.info("Wrote associated domains to %s", path)
    return path


def generate(
    context: HookContext | ProjectContext, plugin_preferences: PluginPreferences
) -> list[Path]:
    """Write the Debug and Release entitlements files, in that order.

    Any error while writing aborts the run; files already written are kept.
    """
    project = resolve_project(context)
    return [
        generate_for_configuration(project, plugin_preferences, configuration)
        for configuration in CONFIGURATIONS
    ]
