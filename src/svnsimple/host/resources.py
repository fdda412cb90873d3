"""Image resource lookup by name."""

import logging
from pathlib import Path

from svnsimple.config import get_settings

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (".png", ".jpg")


class ResourceLoader:
    """Resolves extension-less resource names against resource directories."""

    def __init__(self, resource_dirs: list[Path] | None = None):
        self.resource_dirs = (
            resource_dirs if resource_dirs is not None else get_settings().resolved_resource_dirs()
        )

    def load(self, name: str) -> Path | None:
        """Return the first image matching ``name``, or None if there is none."""
        for base in self.resource_dirs:
            for ext in IMAGE_EXTENSIONS:
                candidate = base / f"{name}{ext}"
                if candidate.is_file():
                    return candidate
        logger.debug(f"Resource not found: {name}")
        return None
