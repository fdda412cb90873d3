"""Overlay icon content model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class IconContent(BaseModel):
    """A resolved overlay image plus optional tooltip text."""

    model_config = ConfigDict(frozen=True)

    image: Path | None = Field(default=None, description="Resolved image resource")
    tooltip: str = Field(default="", description="Hover text shown with the icon")


EMPTY_ICON = IconContent()
