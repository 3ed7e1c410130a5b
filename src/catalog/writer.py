"""Serialise catalog descriptors to ``metadata.yaml`` and read them back."""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from utils.logging import get_logger
from utils.paths import ensure_directory

from .errors import LocalIOError, SerializationError
from .schema import CatalogDescriptor

LOGGER = get_logger(__name__)

METADATA_FILENAME = "metadata.yaml"


def render_metadata(descriptor: CatalogDescriptor) -> str:
    """Return the YAML document for ``descriptor`` with keys sorted."""

    try:
        return yaml.safe_dump(
            descriptor.as_document(),
            sort_keys=True,
            default_flow_style=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as exc:
        raise SerializationError(f"unable to encode metadata: {exc}") from exc


def parse_metadata(text: str) -> CatalogDescriptor:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SerializationError(f"invalid metadata document: {exc}") from exc
    if not isinstance(data, dict):
        raise SerializationError("metadata document must be a mapping")
    if data.get("extensions") is None:
        data["extensions"] = []
    try:
        return CatalogDescriptor.model_validate(data)
    except ValidationError as exc:
        raise SerializationError(f"metadata document failed validation: {exc}") from exc


def load_metadata(path: Path) -> CatalogDescriptor:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LocalIOError(f"unable to read {path}: {exc}") from exc
    return parse_metadata(text)


class MetadataWriter:
    """Persist descriptors into a partition directory, replacing prior content."""

    def __init__(self, output_dir: Path, filename: str = METADATA_FILENAME) -> None:
        self.output_dir = output_dir
        self.filename = filename

    @property
    def path(self) -> Path:
        return self.output_dir / self.filename

    def write(self, descriptor: CatalogDescriptor) -> Path:
        document = render_metadata(descriptor)
        LOGGER.debug("Rendered metadata:\n%s", document)
        try:
            ensure_directory(self.output_dir)
            with self.path.open("w", encoding="utf-8") as handle:
                handle.write(document)
        except OSError as exc:
            raise LocalIOError(f"unable to write {self.path}: {exc}") from exc
        LOGGER.info("Wrote metadata for %d extensions to %s", len(descriptor.extensions), self.path)
        return self.path
