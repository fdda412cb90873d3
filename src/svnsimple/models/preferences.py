"""User and project preferences data models.

Field aliases are the keys the plugin has always persisted, so preference
payloads written by earlier versions keep loading.
"""

from enum import IntFlag

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class SVNTraceLogs(IntFlag):
    """Which plugin activities get traced to the log."""

    NONE = 0
    SVN_OPERATIONS = 1 << 0
    DATABASE_UPDATES = 1 << 4
    ALL = SVN_OPERATIONS | DATABASE_UPDATES


class UserPreferences(BaseModel):
    """Per-user, per-machine preferences."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    enabled_core_integration: bool = Field(
        default=True, alias="EnabledCoreIntegration", description="Master switch"
    )
    enabled_overlay_icons: bool = Field(
        default=True, alias="EnabledOverlayIcons", description="Draw status overlays"
    )
    enabled_check_locks: bool = Field(
        default=False, alias="EnabledCheckLocks", description="Query lock status"
    )
    auto_refresh_interval: int = Field(
        default=60,
        alias="AutoRefreshInterval",
        description="Seconds between status refreshes; negative disables it",
    )
    trace_logs: SVNTraceLogs = Field(
        default=SVNTraceLogs.SVN_OPERATIONS,
        alias="TraceLogs",
        description="Activities traced to the log, stored as the integer flag value",
    )

    @field_validator("trace_logs", mode="plain")
    @classmethod
    def _validate_trace_logs(cls, value) -> SVNTraceLogs:
        if isinstance(value, bool):
            raise ValueError("TraceLogs must be an integer flag value")
        if isinstance(value, str):
            if value in SVNTraceLogs.__members__:
                return SVNTraceLogs[value]
            if not value.lstrip("-").isdigit():
                raise ValueError(f"Unknown TraceLogs value: {value!r}")
            value = int(value)
        if not isinstance(value, int):
            raise ValueError(f"TraceLogs must be an integer flag value, got {value!r}")
        if value < 0:
            return SVNTraceLogs.ALL
        return SVNTraceLogs(value)

    @field_serializer("trace_logs")
    def _serialize_trace_logs(self, value: SVNTraceLogs) -> int:
        return int(value)

    def clone(self) -> "UserPreferences":
        return self.model_copy()


class ProjectPreferences(BaseModel):
    """Per-project preferences, committed alongside the project settings."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    svn_cli_path: str = Field(
        default="", alias="SvnCLIPath", description="svn executable; empty means auto-detect"
    )
    exclude: list[str] = Field(
        default_factory=list, alias="Exclude", description="Paths the integration skips"
    )

    def clone(self) -> "ProjectPreferences":
        return self.model_copy(update={"exclude": list(self.exclude)})
