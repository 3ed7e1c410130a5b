"""Remote catalog listing: the GitHub client and directory listers."""

from .client import DirectoryEntry, GitHubContentsClient
from .lister import (
    DirectoryLister,
    GitHubDirectoryLister,
    LocalDirectoryLister,
    StaticDirectoryLister,
    directory_names,
)

__all__ = [
    "DirectoryEntry",
    "GitHubContentsClient",
    "DirectoryLister",
    "GitHubDirectoryLister",
    "LocalDirectoryLister",
    "StaticDirectoryLister",
    "directory_names",
]
