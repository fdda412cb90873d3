"""Overlay icon caches, resolved once so redraws never hit the resource loader."""

import logging

from svnsimple.host.resources import ResourceLoader
from svnsimple.models.icons import EMPTY_ICON, IconContent
from svnsimple.models.status import VCFileStatus, VCLockStatus, VCRemoteFileStatus

logger = logging.getLogger(__name__)

ICONS_ROOT = "Editor/SVNOverlayIcons"

FILE_STATUS_ICONS: dict[VCFileStatus, str] = {
    VCFileStatus.ADDED: f"{ICONS_ROOT}/SVNAddedIcon",
    VCFileStatus.MODIFIED: f"{ICONS_ROOT}/SVNModifiedIcon",
    VCFileStatus.DELETED: f"{ICONS_ROOT}/SVNDeletedIcon",
    VCFileStatus.CONFLICTED: f"{ICONS_ROOT}/SVNConflictIcon",
    VCFileStatus.UNVERSIONED: f"{ICONS_ROOT}/SVNUnversionedIcon",
}

LOCK_STATUS_ICONS: dict[VCLockStatus, tuple[str, str]] = {
    VCLockStatus.LOCKED_HERE: (f"{ICONS_ROOT}/Locks/SVNLockedHereIcon", "You have locked this file."),
    VCLockStatus.LOCKED_OTHER: (
        f"{ICONS_ROOT}/Locks/SVNLockedOtherIcon",
        "Someone else locked this file.",
    ),
    VCLockStatus.LOCKED_BUT_STOLEN: (
        f"{ICONS_ROOT}/Locks/SVNLockedOtherIcon",
        "Your lock was stolen by someone else.",
    ),
}

REMOTE_CHANGES_ICON = f"{ICONS_ROOT}/Others/SVNRemoteChangesIcon"


class IconCache:
    """Fixed-size icon tables indexed by status ordinal."""

    def __init__(self):
        self.file_status_icons: list[IconContent] = []
        self.lock_status_icons: list[IconContent] = []
        self.remote_status_icon: IconContent | None = None

    def populate(self, loader: ResourceLoader) -> None:
        """Resolve every known icon. Replaces whatever was cached before."""
        file_icons = [EMPTY_ICON] * len(VCFileStatus)
        for status, name in FILE_STATUS_ICONS.items():
            file_icons[status] = self._resolve(loader, name)

        lock_icons = [EMPTY_ICON] * len(VCLockStatus)
        for status, (name, tooltip) in LOCK_STATUS_ICONS.items():
            lock_icons[status] = self._resolve(loader, name, tooltip)

        self.file_status_icons = file_icons
        self.lock_status_icons = lock_icons
        self.remote_status_icon = self._resolve(loader, REMOTE_CHANGES_ICON)

    @staticmethod
    def _resolve(loader: ResourceLoader, name: str, tooltip: str = "") -> IconContent:
        image = loader.load(name)
        if image is None:
            logger.warning(f"Overlay icon not found: {name}")
        return IconContent(image=image, tooltip=tooltip)

    def file_status(self, status: VCFileStatus) -> IconContent:
        return self.file_status_icons[int(status)]

    def lock_status(self, status: VCLockStatus) -> IconContent:
        return self.lock_status_icons[int(status)]

    def remote_status(self, status: VCRemoteFileStatus) -> IconContent | None:
        return self.remote_status_icon if status == VCRemoteFileStatus.MODIFIED else None
