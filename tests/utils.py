import os
import plistlib
import subprocess
import sys
from pathlib import Path

# TIP: You can point the tests at an installed executable with:
# CORDOVA_ENTITLEMENTS=cordova-entitlements pytest ...
ENTRY_POINT = os.environ.get(
    "CORDOVA_ENTITLEMENTS",
    str(Path(__file__).parents[1] / "src" / "entry_point.py"),
)


def run_entitlements(*args, **kwargs) -> subprocess.CompletedProcess:
    check = kwargs.pop("check", False)
    if ENTRY_POINT.endswith(".py"):
        cmd = [sys.executable, ENTRY_POINT]
    else:
        cmd = [ENTRY_POINT]

    process = subprocess.run([*cmd, *[str(arg) for arg in args]], **kwargs)
    if check:
        if kwargs.get("capture_output"):
            print(process.stdout)
            print(process.stderr, file=sys.stderr)
        process.check_returncode()
    return process


def write_config_xml(project_root: Path, name: str = "HelloCordova", hosts=()) -> Path:
    """Write a minimal Cordova config.xml with a <universal-links> block.

    ``hosts`` is a list of attribute dicts, with an optional ``paths`` list.
    """
    host_lines = []
    for host in hosts:
        host = dict(host)
        paths = host.pop("paths", [])
        attrs = " ".join(f'{key}="{value}"' for key, value in host.items())
        if paths:
            host_lines.append(f"        <host {attrs}>")
            host_lines.extend(f'            <path url="{url}" />' for url in paths)
            host_lines.append("        </host>")
        else:
            host_lines.append(f"        <host {attrs} />")
    content = "\n".join(
        [
            "<?xml version='1.0' encoding='utf-8'?>",
            '<widget id="io.cordova.hellocordova" version="1.0.0"'
            ' xmlns="http://www.w3.org/ns/widgets" xmlns:cdv="http://cordova.apache.org/ns/1.0">',
            f"    <name>{name}</name>",
            "    <universal-links>",
            *host_lines,
            "    </universal-links>",
            "</widget>",
            "",
        ]
    )
    config_xml = project_root / "config.xml"
    config_xml.write_text(content, encoding="utf-8")
    return config_xml


def read_plist(path: Path) -> dict:
    with open(path, "rb") as f:
        return plistlib.load(f)


def write_plist(path: Path, data: dict):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        plistlib.dump(data, f)
