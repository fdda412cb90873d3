"""Version control status enums used to key the overlay icon caches."""

from enum import IntEnum


class VCFileStatus(IntEnum):
    """Working copy status of a single file."""

    NORMAL = 0
    ADDED = 1
    CONFLICTED = 2
    DELETED = 3
    IGNORED = 4
    MODIFIED = 5
    REPLACED = 6
    UNVERSIONED = 7
    MISSING = 8
    EXTERNAL = 9
    EXCLUDED = 10


class VCLockStatus(IntEnum):
    """Lock state of a file as reported by the repository."""

    NO_LOCK = 0
    LOCKED_HERE = 1
    LOCKED_OTHER = 2
    LOCKED_BUT_STOLEN = 3
    BROKEN_LOCK = 4


class VCRemoteFileStatus(IntEnum):
    """Whether the repository holds newer changes than the working copy."""

    NONE = 0
    MODIFIED = 1
