"""Shared test fixtures: isolated host stores and a fake resource tree."""

from pathlib import Path

import pytest

from svnsimple.config import Settings
from svnsimple.host.editor_prefs import EditorPrefs
from svnsimple.host.registry import registry
from svnsimple.host.resources import ResourceLoader
from svnsimple.preferences.icons import FILE_STATUS_ICONS, LOCK_STATUS_ICONS, REMOTE_CHANGES_ICON
from svnsimple.preferences.manager import PreferencesManager

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


def write_icon_resources(resources_dir: Path) -> None:
    """Create a placeholder .png for every overlay icon name."""
    names = set(FILE_STATUS_ICONS.values())
    names.update(name for name, _ in LOCK_STATUS_ICONS.values())
    names.add(REMOTE_CHANGES_ICON)
    for name in names:
        path = resources_dir / f"{name}.png"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(PNG_HEADER)


@pytest.fixture
def project_root(tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def editor_prefs_path(tmp_path):
    return tmp_path / "user" / "editor_prefs.json"


@pytest.fixture
def resources_dir(tmp_path):
    d = tmp_path / "resources"
    write_icon_resources(d)
    return d


@pytest.fixture
def settings(project_root, editor_prefs_path, resources_dir):
    return Settings(
        project_root=project_root,
        editor_prefs_path=editor_prefs_path,
        resource_dirs=[resources_dir],
    )


@pytest.fixture
def editor_prefs(editor_prefs_path):
    return EditorPrefs(editor_prefs_path)


@pytest.fixture
def manager(settings, editor_prefs):
    """A manager over the temporary stores, not yet loaded."""
    return PreferencesManager(
        settings=settings,
        editor_prefs=editor_prefs,
        resource_loader=ResourceLoader(settings.resolved_resource_dirs()),
    )


@pytest.fixture(autouse=True)
def isolated_host(monkeypatch, project_root, editor_prefs_path, resources_dir):
    """Point the process-wide manager at temporary stores and reset it per test."""
    monkeypatch.setenv("SVNSIMPLE_PROJECT_ROOT", str(project_root))
    monkeypatch.setenv("SVNSIMPLE_EDITOR_PREFS_PATH", str(editor_prefs_path))
    monkeypatch.setenv("SVNSIMPLE_RESOURCE_DIRS", f'["{resources_dir.as_posix()}"]')
    PreferencesManager.reset_instance()
    registry.clear()
    yield
    PreferencesManager.reset_instance()
    registry.clear()
