"""Directory listers returning the extension names under the catalog path."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence, Union, runtime_checkable

from catalog.errors import LocalIOError
from utils.logging import get_logger

from .client import DirectoryEntry, GitHubContentsClient

LOGGER = get_logger(__name__)


@runtime_checkable
class DirectoryLister(Protocol):
    """Anything that can name the sub-directories of a catalog path."""

    def list_directories(self, path: str) -> List[str]:
        """Return directory names under ``path`` in listing order.

        Raises:
            RemoteAccessError: If the listing cannot be retrieved.
        """
        ...


def directory_names(entries: Iterable[DirectoryEntry]) -> List[str]:
    """Keep directory entries, skipping files and every other entry type."""

    names: List[str] = []
    for entry in entries:
        if not entry.is_directory:
            LOGGER.info("skip %s: %s", entry.type, entry.name)
            continue
        LOGGER.info("add extension: %s", entry.name)
        names.append(entry.name)
    return names


class GitHubDirectoryLister:
    """Production lister backed by the GitHub contents API."""

    def __init__(self, client: GitHubContentsClient, owner: str, repo: str, ref: Optional[str] = None) -> None:
        self.client = client
        self.owner = owner
        self.repo = repo
        self.ref = ref

    def list_directories(self, path: str) -> List[str]:
        entries = self.client.get_contents(self.owner, self.repo, path, ref=self.ref)
        return directory_names(entries)


class StaticDirectoryLister:
    """Serve a canned listing; used in tests and dry runs."""

    def __init__(self, entries: Sequence[Union[DirectoryEntry, dict]]) -> None:
        self.entries = [
            entry if isinstance(entry, DirectoryEntry) else DirectoryEntry.model_validate(entry)
            for entry in entries
        ]
        self.calls: List[str] = []

    def list_directories(self, path: str) -> List[str]:
        self.calls.append(path)
        return directory_names(self.entries)


class LocalDirectoryLister:
    """List extension directories from a local checkout instead of GitHub."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def list_directories(self, path: str) -> List[str]:
        target = self.root / path
        try:
            children = sorted(target.iterdir(), key=lambda child: child.name)
        except OSError as exc:
            raise LocalIOError(f"unable to list {target}: {exc}") from exc
        entries = [DirectoryEntry(name=child.name, type="dir" if child.is_dir() else "file") for child in children]
        return directory_names(entries)
