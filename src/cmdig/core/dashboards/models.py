"""
Data models for dashboard entries.

The cache file written by `gcloud monitoring dashboards list --format json`
is a JSON array of dashboard resources. Only `displayName` and `name` are
used here; every other key gcloud emits (etag, gridLayout, ...) is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class DashboardEntry(BaseModel):
    """
    A dashboard the user can pick.

    Discovered entries carry a full resource path as identifier
    (projects/<number>/dashboards/<id>); built-in entries carry a
    resource-type keyword such as ``gce_instance``.

    Example:
        >>> entry = DashboardEntry.model_validate(
        ...     {"displayName": "Frontend", "name": "projects/1/dashboards/abc"}
        ... )
        >>> entry.is_builtin
        False
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    display_name: str = Field(
        ...,
        alias="displayName",
        min_length=1,
        description="Label shown in the selector",
    )
    identifier: str = Field(
        ...,
        alias="name",
        description="Resource path (discovered) or resource-type keyword (built-in)",
    )
    is_builtin: bool = Field(
        default=False,
        exclude=True,
        description="Whether this is a built-in resource-list dashboard",
    )

    def __str__(self) -> str:
        return self.display_name

    @property
    def kind(self) -> str:
        """Short label for listings."""
        return "built-in" if self.is_builtin else "custom"
