"""Preferences manager: loads, caches and persists the integration preferences."""

import logging
from pathlib import Path

from pydantic import ValidationError

from svnsimple.config import Settings, get_settings
from svnsimple.host.editor_prefs import EditorPrefs
from svnsimple.host.registry import HideFlags, ObjectRegistry, registry
from svnsimple.host.resources import ResourceLoader
from svnsimple.models.errors import PreferencesLoadError
from svnsimple.models.icons import IconContent
from svnsimple.models.preferences import ProjectPreferences, UserPreferences
from svnsimple.models.status import VCFileStatus, VCLockStatus, VCRemoteFileStatus
from svnsimple.preferences.events import PreferencesChangedEvent
from svnsimple.preferences.icons import IconCache

logger = logging.getLogger(__name__)


class PreferencesManager:
    """Owns the personal and project preferences of the SVN integration.

    Use ``PreferencesManager.instance()`` to get the process-wide manager. The
    instance is kept in the host object registry, so after the integration
    modules are reloaded it is picked up again with its data intact instead of
    being re-read from disk.
    """

    _instance: "PreferencesManager | None" = None

    def __init__(
        self,
        settings: Settings | None = None,
        editor_prefs: EditorPrefs | None = None,
        resource_loader: ResourceLoader | None = None,
    ):
        self.settings = settings or get_settings()
        self.editor_prefs = editor_prefs or EditorPrefs(self.settings.editor_prefs_path)
        self.resource_loader = resource_loader or ResourceLoader(
            self.settings.resolved_resource_dirs()
        )
        self.name = "SVNPreferencesManager"
        self.hide_flags = HideFlags.NONE

        self.personal_prefs = UserPreferences()
        self.project_prefs = ProjectPreferences()
        self.icons = IconCache()
        self.preferences_changed = PreferencesChangedEvent()

    @classmethod
    def instance(cls, object_registry: ObjectRegistry | None = None) -> "PreferencesManager":
        """Return the process-wide manager, recovering or creating it on first use."""
        if cls._instance is not None:
            return cls._instance

        object_registry = object_registry or registry
        found = object_registry.find_objects_of_type(cls)
        if found:
            # Recovered after a reload; its preferences are already populated.
            cls._instance = found[0]
            return cls._instance

        manager = cls()
        manager.hide_flags = HideFlags.HIDE_AND_DONT_SAVE
        manager.load()
        object_registry.register(manager)
        cls._instance = manager

        state = "on" if manager.personal_prefs.enabled_core_integration else "off"
        logger.info(
            f"Loaded SVN Simple Integration Preferences. The integration is turned {state}."
        )
        return manager

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the cached instance. The registry still holds it."""
        cls._instance = None

    @property
    def project_preferences_file(self) -> Path:
        return self.settings.project_root / self.settings.project_preferences_path

    def load(self) -> None:
        """Read both preference scopes and rebuild the icon caches.

        Missing data falls back to defaults. A stored payload that cannot be
        parsed raises PreferencesLoadError and leaves the current state alone.
        """
        key = self.settings.personal_preferences_key
        personal_data = self.editor_prefs.get_string(key, "")
        if personal_data:
            try:
                personal_prefs = UserPreferences.model_validate_json(personal_data)
            except ValidationError as e:
                logger.error(f"Corrupt personal preferences under key {key}: {e}")
                raise PreferencesLoadError(
                    f"Failed to parse personal preferences: {e}", source="editor_prefs"
                ) from e
        else:
            personal_prefs = UserPreferences()

        path = self.project_preferences_file
        if path.exists():
            try:
                project_prefs = ProjectPreferences.model_validate_json(path.read_bytes())
            except ValidationError as e:
                logger.error(f"Corrupt project preferences in {path}: {e}")
                raise PreferencesLoadError(
                    f"Failed to parse project preferences: {e}", source=str(path)
                ) from e
        else:
            project_prefs = ProjectPreferences()

        self.personal_prefs = personal_prefs
        self.project_prefs = project_prefs
        self.icons.populate(self.resource_loader)

    def save(self, personal_prefs: UserPreferences, project_prefs: ProjectPreferences) -> None:
        """Replace both scopes, persist them and notify listeners.

        The two writes are not transactional: if writing the project file
        fails, memory and the personal store are already updated.
        """
        self.personal_prefs = personal_prefs
        self.project_prefs = project_prefs

        self.editor_prefs.set_string(
            self.settings.personal_preferences_key,
            self.personal_prefs.model_dump_json(by_alias=True),
        )

        path = self.project_preferences_file
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            self.project_prefs.model_dump_json(by_alias=True, indent=4), encoding="utf-8"
        )
        logger.info(f"Saved SVN Simple Integration Preferences to {path}")

        self.preferences_changed.emit()

    def get_file_status_icon(self, status: VCFileStatus) -> IconContent:
        return self.icons.file_status(status)

    def get_lock_status_icon(self, status: VCLockStatus) -> IconContent:
        return self.icons.lock_status(status)

    def get_remote_status_icon(self, status: VCRemoteFileStatus) -> IconContent | None:
        return self.icons.remote_status(status)


def get_preferences_manager() -> PreferencesManager:
    """Return the process-wide preferences manager."""
    return PreferencesManager.instance()
