"""Data models for SVN Simple Integration."""

from svnsimple.models.errors import (
    PreferencesError,
    PreferencesLoadError,
    SVNIntegrationError,
)
from svnsimple.models.icons import EMPTY_ICON, IconContent
from svnsimple.models.preferences import ProjectPreferences, SVNTraceLogs, UserPreferences
from svnsimple.models.status import VCFileStatus, VCLockStatus, VCRemoteFileStatus

__all__ = [
    "EMPTY_ICON",
    "IconContent",
    "PreferencesError",
    "PreferencesLoadError",
    "ProjectPreferences",
    "SVNIntegrationError",
    "SVNTraceLogs",
    "UserPreferences",
    "VCFileStatus",
    "VCLockStatus",
    "VCRemoteFileStatus",
]
