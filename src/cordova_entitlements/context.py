from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config_xml import read_project_name


@dataclass(frozen=True)
class HookContext:
    """What the build tool hands to the hook: the Cordova project root."""

    project_root: Path


@dataclass(frozen=True)
class ProjectContext:
    project_root: Path
    project_name: str

    @property
    def ios_project_dir(self) -> Path:
        return self.project_root / "platforms" / "ios" / self.project_name


def resolve_project(context: HookContext | ProjectContext) -> ProjectContext:
    """
    Read the project name once and bind it to the project root.

    The result is passed explicitly to every generation pass, so config.xml
    is read at most once per run. An already resolved context is returned as is.
    """
    if isinstance(context, ProjectContext):
        return context
    project_root = Path(context.project_root)
    return ProjectContext(
        project_root=project_root,
        project_name=read_project_name(project_root),
    )
