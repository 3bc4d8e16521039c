from pathlib import Path

import pytest
from utils import write_config_xml

from cordova_entitlements.context import HookContext, ProjectContext
from cordova_entitlements.preferences import PluginPreferences

PROJECT_NAME = "HelloCordova"


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "hello-cordova"
    root.mkdir()
    write_config_xml(
        root,
        name=PROJECT_NAME,
        hosts=[
            {"name": "example.com", "scheme": "https", "paths": ["/news/*", "/profile/*"]},
            {"name": "www.example.com"},
        ],
    )
    return root


@pytest.fixture
def hook_context(project_root: Path) -> HookContext:
    return HookContext(project_root=project_root)


@pytest.fixture
def project(project_root: Path) -> ProjectContext:
    return ProjectContext(project_root=project_root, project_name=PROJECT_NAME)


@pytest.fixture
def preferences() -> PluginPreferences:
    return PluginPreferences.from_mapping(
        {"hosts": [{"name": "a.com"}, {"name": "b.com"}, {"name": "a.com"}]}
    )
