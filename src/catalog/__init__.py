"""Catalog package: descriptor models, the builder and the metadata writer."""

from .builder import MetadataBuilder
from .errors import (
    LocalIOError,
    MetadataError,
    PreconditionError,
    RemoteAccessError,
    SerializationError,
)
from .schema import CapabilityFile, CatalogDescriptor, DescriptorSummary, ExtensionRecord
from .writer import MetadataWriter, load_metadata, parse_metadata, render_metadata

__all__ = [
    "CapabilityFile",
    "CatalogDescriptor",
    "DescriptorSummary",
    "ExtensionRecord",
    "LocalIOError",
    "MetadataBuilder",
    "MetadataError",
    "MetadataWriter",
    "PreconditionError",
    "RemoteAccessError",
    "SerializationError",
    "load_metadata",
    "parse_metadata",
    "render_metadata",
]
