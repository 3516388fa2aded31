"""
Configuration data models for cmdig.

These models define the structure of ~/.config/cmdig/config.json,
with validation and type safety via Pydantic.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


def default_base_dir() -> Path:
    """Directory holding per-project dashboard caches."""
    return Path.home() / ".cloudmonitoring_dig"


class DigConfig(BaseModel):
    """
    Top-level cmdig configuration.

    Built once at startup from defaults, the user config file and env vars,
    then handed to every component that needs it.

    Example:
        >>> config = DigConfig(opener_command="xdg-open")
        >>> config.console_url
        'https://console.cloud.google.com/monitoring'
    """
    base_dir: Path = Field(
        default_factory=default_base_dir,
        description="Base directory for dashboard cache files"
    )
    console_url: str = Field(
        default="https://console.cloud.google.com/monitoring",
        min_length=1,
        description="Cloud console monitoring root used to build dashboard URLs"
    )
    gcloud_command: str = Field(
        default="gcloud",
        min_length=1,
        description="Binary used to list dashboards"
    )
    opener_command: str = Field(
        default="open",
        min_length=1,
        description="Binary used to open the resolved URL"
    )

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    @field_validator('base_dir', mode='before')
    @classmethod
    def expand_base_dir(cls, v: str | Path) -> Path:
        """Expand ~ in configured base directories."""
        return Path(v).expanduser()

    @field_validator('console_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Keep URL templates free of doubled slashes."""
        return v.rstrip("/")
