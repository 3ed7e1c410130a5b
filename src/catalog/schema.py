"""Pydantic models describing the published ``metadata.yaml`` document."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class CapabilityFile(BaseModel):
    """Reference to the declaration file shipped with an extension."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="filename", min_length=1)
    description: Optional[str] = None

    @field_validator("description", mode="before")
    @classmethod
    def omit_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)


class ExtensionRecord(BaseModel):
    """One catalog entry, stamped with the run's tag."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    description: Optional[str] = None
    version: str
    min_supported_version: Optional[str] = Field(default=None, alias="minsupported")
    max_supported_version: Optional[str] = Field(default=None, alias="maxsupported")
    files: List[CapabilityFile] = Field(min_length=1)

    @field_validator("description", "min_supported_version", "max_supported_version", mode="before")
    @classmethod
    def omit_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError(f"extension name must be a single path component; got {value!r}")
        return value


class CatalogDescriptor(BaseModel):
    """Top level metadata document for a single release run."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    extensions: List[ExtensionRecord] = Field(default_factory=list)
    version: str
    source_repo: Optional[str] = Field(default=None, alias="repo")
    source_ref: Optional[str] = Field(default=None, alias="branch")

    @field_validator("source_repo", "source_ref", mode="before")
    @classmethod
    def omit_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    def as_document(self) -> Dict[str, Any]:
        """Return the mapping written to disk, using the published key names."""

        return self.model_dump(by_alias=True, exclude_none=True)

    def names(self) -> List[str]:
        return [extension.name for extension in self.extensions]


class DescriptorSummary(BaseModel):
    """Aggregate summary information of a metadata document."""

    version: str
    branch: Optional[str]
    total_extensions: int
    capability_files: Dict[str, int]

    @classmethod
    def from_descriptor(cls, descriptor: CatalogDescriptor) -> "DescriptorSummary":
        counts: Dict[str, int] = {}
        for filename in _filenames(descriptor.extensions):
            counts[filename] = counts.get(filename, 0) + 1
        return cls(
            version=descriptor.version,
            branch=descriptor.source_ref,
            total_extensions=len(descriptor.extensions),
            capability_files=counts,
        )


def _filenames(extensions: Iterable[ExtensionRecord]) -> Iterable[str]:
    for extension in extensions:
        for capability in extension.files:
            yield capability.name
