"""Application configuration using Pydantic BaseSettings."""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """SVN Simple Integration host configuration loaded from environment variables."""

    model_config = {"env_prefix": "SVNSIMPLE_", "env_file": ".env", "extra": "ignore"}

    # Project
    project_root: Path = Path(".")
    project_preferences_path: str = "ProjectSettings/SVNSimpleIntegration.prefs"

    # Per-user key-value store
    editor_prefs_path: Path = Path.home() / ".svnsimple" / "editor_prefs.json"
    personal_preferences_key: str = "SVNSimpleIntegration"

    # Image resources (empty means <project_root>/Assets/Resources)
    resource_dirs: list[Path] = []

    def resolved_resource_dirs(self) -> list[Path]:
        if self.resource_dirs:
            return list(self.resource_dirs)
        return [self.project_root / "Assets" / "Resources"]


def get_settings() -> Settings:
    """Return a fresh settings instance."""
    return Settings()
