from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace
    from collections.abc import Callable


def _add_project_root(parser: ArgumentParser) -> None:
    parser.add_argument(
        "--project-root",
        action="store",
        type=str,
        required=True,
        help="path to the Cordova project (the directory containing config.xml)",
    )


def _add_generate(parser: ArgumentParser) -> None:
    parser.add_argument(
        "--preferences",
        action="store",
        type=Path,
        default=None,
        metavar="FILE",
        help=(
            "YAML file with a 'hosts' list of {name: ...} entries."
            " Defaults to the <universal-links> hosts in config.xml."
        ),
    )


def configure_parser(parser: ArgumentParser) -> None:
    subparsers = parser.add_subparsers(
        title="subcommand",
        description="The following subcommands are available.",
        dest="cmd",
        required=False,
    )

    generate_parser = subparsers.add_parser(
        "generate",
        description=(
            "Writes the associated-domains entitlements for the Debug and Release"
            " configurations of the iOS platform."
        ),
    )
    _add_project_root(generate_parser)
    _add_generate(generate_parser)


def _generate(project_root: Path, preferences: Path | None = None) -> None:
    from .config_xml import read_plugin_preferences
    from .context import HookContext
    from .entitlements import generate
    from .preferences import load_preferences

    if preferences is None:
        plugin_preferences = read_plugin_preferences(project_root)
    else:
        plugin_preferences = load_preferences(preferences)
    generate(HookContext(project_root=project_root), plugin_preferences)


def execute(args: Namespace) -> None | int:
    action: Callable
    kwargs = {}
    if args.cmd == "generate":
        action = _generate
        kwargs.update({"preferences": args.preferences})
    else:
        raise NotImplementedError(f"No action available for subcommand '{args.cmd}'.")
    return action(
        project_root=Path(args.project_root).expanduser().resolve(),
        **kwargs,
    )
