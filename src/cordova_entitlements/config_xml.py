"""
Read the Cordova project configuration (config.xml).

Only two things are needed from it: the project name, which names the
iOS project directory, and the hosts listed in the ``<universal-links>`` block:

    <widget xmlns="http://www.w3.org/ns/widgets">
        <name>HelloCordova</name>
        <universal-links>
            <host name="example.com" scheme="https" event="openNews">
                <path url="/news/*" />
            </host>
        </universal-links>
    </widget>
"""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree

from .preferences import DEFAULT_EVENT, DEFAULT_PATHS, DEFAULT_SCHEME, Host, PluginPreferences

CONFIG_XML = "config.xml"


def config_xml_path(project_root: Path) -> Path:
    return Path(project_root, CONFIG_XML)


def _local_name(tag: str) -> str:
    # Strip the "{namespace}" prefix ElementTree puts on qualified tags
    return tag.rsplit("}", 1)[-1]


def _children(element: ElementTree.Element, name: str) -> list[ElementTree.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _read_widget(project_root: Path) -> ElementTree.Element:
    return ElementTree.parse(config_xml_path(project_root)).getroot()


def read_project_name(project_root: Path) -> str:
    widget = _read_widget(project_root)
    names = _children(widget, "name")
    name = (names[0].text or "").strip() if names else ""
    if not name:
        raise ValueError(f"No project <name> found in {config_xml_path(project_root)}.")
    return name


def read_plugin_preferences(project_root: Path) -> PluginPreferences:
    widget = _read_widget(project_root)
    hosts = []
    for block in _children(widget, "universal-links"):
        for host in _children(block, "host"):
            paths = tuple(
                path.get("url") for path in _children(host, "path") if path.get("url")
            )
            hosts.append(
                Host(
                    name=host.get("name", ""),
                    scheme=host.get("scheme") or DEFAULT_SCHEME,
                    event=host.get("event") or DEFAULT_EVENT,
                    paths=paths or DEFAULT_PATHS,
                )
            )
    return PluginPreferences(hosts=hosts)
