"""Host object registry.

Objects registered here outlive a reload of the modules that created them.
Lookups match on the qualified class name, so an instance of the class as it
was before a reload is still found through the reloaded class.
"""

import logging
from enum import IntFlag
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HideFlags(IntFlag):
    """Lifecycle flags of a host-managed object."""

    NONE = 0
    HIDE_IN_HIERARCHY = 1 << 0
    DONT_SAVE = 1 << 1
    HIDE_AND_DONT_SAVE = HIDE_IN_HIERARCHY | DONT_SAVE


def _type_key(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class ObjectRegistry:
    """Keeps host-managed objects alive across module reloads."""

    def __init__(self):
        self._objects: list[object] = []

    def register(self, obj: object) -> None:
        if not any(existing is obj for existing in self._objects):
            self._objects.append(obj)

    def find_objects_of_type(self, cls: type[T]) -> list[T]:
        key = _type_key(cls)
        return [obj for obj in self._objects if _type_key(type(obj)) == key]

    def unload_unused(self) -> int:
        """Drop every object not flagged DONT_SAVE. Returns how many were dropped."""
        kept = [
            obj
            for obj in self._objects
            if HideFlags.DONT_SAVE in HideFlags(getattr(obj, "hide_flags", HideFlags.NONE))
        ]
        dropped = len(self._objects) - len(kept)
        self._objects = kept
        if dropped:
            logger.debug(f"Unloaded {dropped} unused host objects")
        return dropped

    def clear(self) -> None:
        self._objects.clear()


registry = ObjectRegistry()
