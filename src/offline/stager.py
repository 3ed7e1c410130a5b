"""Stage capability files into the version partitioned offline mirror."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from catalog.errors import LocalIOError
from catalog.schema import CatalogDescriptor
from utils.config import partition_name
from utils.files import copy_file, file_sha1
from utils.logging import get_logger
from utils.paths import ensure_directory

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class StagedFile:
    """A capability file copied into the offline tree."""

    extension: str
    source: Path
    destination: Path
    checksum_sha1: str


class OfflineStager:
    """Copy each extension's capability files to ``<offline>/<partition>/<name>``."""

    def __init__(self, catalog_dir: Path, offline_dir: Path) -> None:
        self.catalog_dir = catalog_dir
        self.offline_dir = offline_dir

    def destination_dir(self, descriptor: CatalogDescriptor, name: str, release: bool) -> Path:
        return self.offline_dir / partition_name(descriptor.version, release) / name

    def stage(self, descriptor: CatalogDescriptor, release: bool) -> List[StagedFile]:
        staged: List[StagedFile] = []
        for extension in descriptor.extensions:
            LOGGER.info("Saving extension: %s", extension.name)
            target_dir = self.destination_dir(descriptor, extension.name, release)
            try:
                ensure_directory(target_dir)
            except OSError as exc:
                raise LocalIOError(f"unable to create {target_dir}: {exc}") from exc
            for capability in extension.files:
                source = self.catalog_dir / extension.name / capability.name
                destination = target_dir / capability.name
                try:
                    checksum = copy_file(source, destination)
                    written = file_sha1(destination)
                except OSError as exc:
                    raise LocalIOError(f"unable to copy {source} to {destination}: {exc}") from exc
                if written != checksum:
                    raise LocalIOError(
                        f"checksum mismatch staging {destination}: expected {checksum}, found {written}"
                    )
                LOGGER.debug("Copied %s -> %s (sha1 %s)", source, destination, checksum)
                staged.append(StagedFile(extension.name, source, destination, checksum))
        return staged
