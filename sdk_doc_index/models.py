"""Pydantic models for the documentation index.

Two families of objects flow through a run:

- Inputs fetched once per run: :class:`MetadataRecord` rows from the release
  catalog and plain ``str`` artifact names from the listing endpoint.
- Derived, transient structures: the ``ArtifactServiceMap`` (artifact ->
  service) and the :class:`TocDocument` built from it by sorting.

Example catalog rows (CSV)::

    Package,ServiceName,Hide
    Azure.Storage.Blobs,Storage,
    Azure.Core.Experimental,Core,true
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

OTHER_SERVICE = "Other"
HIDE_VALUE = "true"

ArtifactServiceMap = dict[str, str]


class MetadataRecord(BaseModel):
    """One row of the package -> service release catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    package: str = Field(alias="Package")
    service_name: str = Field(default="", alias="ServiceName")
    hide: str = Field(default="", alias="Hide")

    @field_validator("package", "service_name", "hide", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        # csv.DictReader yields None for cells missing from short rows
        return "" if value is None else value

    @property
    def hidden(self) -> bool:
        # Literal comparison: "True" or "TRUE" do not hide an artifact.
        return self.hide == HIDE_VALUE


class TocService(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    slug: str
    artifacts: tuple[str, ...] = ()


class TocDocument(BaseModel):
    """Services in rendering order, each with its artifacts in sorted order."""

    model_config = ConfigDict(frozen=True)

    services: tuple[TocService, ...] = ()

    def service(self, name: str) -> TocService | None:
        for svc in self.services:
            if svc.name == name:
                return svc
        return None

    @property
    def service_names(self) -> list[str]:
        return [svc.name for svc in self.services]

    def pairs(self) -> list[tuple[str, str]]:
        """Return the sorted ``(service, artifact)`` sequence."""
        return [(svc.name, art) for svc in self.services for art in svc.artifacts]


__all__ = [
    "ArtifactServiceMap",
    "HIDE_VALUE",
    "MetadataRecord",
    "OTHER_SERVICE",
    "TocDocument",
    "TocService",
]
