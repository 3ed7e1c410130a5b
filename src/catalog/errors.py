"""Exception hierarchy for the release metadata pipeline."""
from __future__ import annotations

from typing import Optional


class MetadataError(RuntimeError):
    """Base class for every failure that aborts a release run."""

    def __init__(self, message: str, *, stage: Optional[str] = None) -> None:
        super().__init__(message)
        self.stage = stage

    def __str__(self) -> str:
        message = super().__str__()
        if self.stage:
            return f"{self.stage}: {message}"
        return message


class PreconditionError(MetadataError):
    """Raised when a run is missing its credential or tag."""


class RemoteAccessError(MetadataError):
    """Raised when the remote catalog listing cannot be retrieved."""


class LocalIOError(MetadataError):
    """Raised on filesystem read, write, copy or mkdir failures."""


class SerializationError(MetadataError):
    """Raised when the metadata document cannot be encoded or decoded."""
