"""Build the in-memory catalog descriptor from a directory listing."""
from __future__ import annotations

import stat
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import ValidationError

from utils.config import FIRST_RELEASE, MAIN_BRANCH_KEYWORD
from utils.logging import get_logger

from .errors import LocalIOError, PreconditionError
from .schema import CapabilityFile, CatalogDescriptor, ExtensionRecord

LOGGER = get_logger(__name__)


class MetadataBuilder:
    """Turn extension names into a :class:`CatalogDescriptor`.

    Only the local filesystem is consulted: each extension must exist as a
    directory under ``catalog_dir`` and its capability file is chosen from
    what is found there.
    """

    def __init__(
        self,
        catalog_dir: Path,
        primary_filename: str = "extension.yaml",
        secondary_filename: str = "addon.yaml",
        first_release: str = FIRST_RELEASE,
        source_repo: Optional[str] = None,
    ) -> None:
        self.catalog_dir = catalog_dir
        self.primary_filename = primary_filename
        self.secondary_filename = secondary_filename
        self.first_release = first_release
        self.source_repo = source_repo

    def _is_file(self, path: Path) -> bool:
        try:
            mode = path.stat().st_mode
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as exc:
            raise LocalIOError(f"unable to stat {path}: {exc}") from exc
        return stat.S_ISREG(mode)

    def select_capability_file(self, name: str) -> str:
        """Return the primary filename if present, else the secondary one.

        The secondary file is used on a best-effort basis: it is selected even
        when it is missing too, and only a warning is logged.
        """

        extension_dir = self.catalog_dir / name
        if self._is_file(extension_dir / self.primary_filename):
            return self.primary_filename
        LOGGER.info("Unable to find %s for %s, using %s", self.primary_filename, name, self.secondary_filename)
        if not self._is_file(extension_dir / self.secondary_filename):
            LOGGER.warning("%s has neither %s nor %s", name, self.primary_filename, self.secondary_filename)
        return self.secondary_filename

    def build_record(self, name: str, tag: str) -> ExtensionRecord:
        extension_dir = self.catalog_dir / name
        if not extension_dir.is_dir():
            raise LocalIOError(f"extension directory {extension_dir} does not exist")
        capability = self.select_capability_file(name)
        try:
            return ExtensionRecord(
                name=name,
                version=tag,
                min_supported_version=self.first_release,
                max_supported_version=tag,
                files=[CapabilityFile(name=capability)],
            )
        except ValidationError as exc:
            raise LocalIOError(f"invalid extension directory {name!r}: {exc}") from exc

    def build(self, names: Iterable[str], tag: str, release: bool) -> CatalogDescriptor:
        if not tag:
            raise PreconditionError("tag is empty")
        records: List[ExtensionRecord] = [self.build_record(name, tag) for name in names]
        return CatalogDescriptor(
            extensions=records,
            version=tag,
            source_repo=self.source_repo,
            source_ref=tag if release else MAIN_BRANCH_KEYWORD,
        )
