"""Linear release pipeline: list, build, write, stage."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from offline.stager import OfflineStager, StagedFile
from utils.config import ReleaseConfig
from utils.logging import get_logger

from .builder import MetadataBuilder
from .errors import MetadataError, PreconditionError
from .schema import CatalogDescriptor
from .writer import MetadataWriter

if TYPE_CHECKING:  # pragma: no cover - typing only
    from remote.lister import DirectoryLister

LOGGER = get_logger(__name__)


class Stage(str, Enum):
    LISTING = "Listing"
    BUILDING = "Building"
    WRITING = "Writing"
    STAGING = "Staging"
    DONE = "Done"
    FAILED = "Failed"


@dataclass
class ReleaseResult:
    """Outcome of a completed run."""

    descriptor: CatalogDescriptor
    metadata_path: Path
    staged: List[StagedFile] = field(default_factory=list)


class ReleasePipeline:
    """Run the four stages in order, stopping at the first failure."""

    def __init__(self, config: ReleaseConfig, lister: "DirectoryLister") -> None:
        self.config = config
        self.lister = lister
        self.stage = Stage.LISTING
        self.failed_stage: Optional[Stage] = None

    def _enter(self, stage: Stage) -> None:
        LOGGER.debug("Entering stage %s", stage.value)
        self.stage = stage

    def run(self, tag: str, release: bool = False) -> ReleaseResult:
        if not tag:
            raise PreconditionError("tag is empty")
        config = self.config
        try:
            self._enter(Stage.LISTING)
            names = self.lister.list_directories(config.catalog_path)

            self._enter(Stage.BUILDING)
            builder = MetadataBuilder(
                config.local_catalog_dir(),
                primary_filename=config.primary_filename,
                secondary_filename=config.secondary_filename,
                first_release=config.first_release,
                source_repo=config.repo_slug,
            )
            descriptor = builder.build(names, tag, release)

            self._enter(Stage.WRITING)
            writer = MetadataWriter(config.metadata_output_dir(tag, release), config.metadata_filename)
            metadata_path = writer.write(descriptor)

            self._enter(Stage.STAGING)
            stager = OfflineStager(config.local_catalog_dir(), config.offline_root())
            staged = stager.stage(descriptor, release)
        except MetadataError as exc:
            self.failed_stage = self.stage
            exc.stage = self.stage.value
            self.stage = Stage.FAILED
            LOGGER.error("%s stage failed: %s", self.failed_stage.value, exc.args[0] if exc.args else exc)
            raise

        self._enter(Stage.DONE)
        return ReleaseResult(descriptor=descriptor, metadata_path=metadata_path, staged=staged)
