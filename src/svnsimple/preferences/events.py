"""Preferences change notification."""

from typing import Callable


class PreferencesChangedEvent:
    """Zero-argument broadcast fired after preferences are saved."""

    def __init__(self) -> None:
        self._listeners: list[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def emit(self) -> None:
        for callback in list(self._listeners):
            callback()
