"""Utility helpers shared across the release metadata codebase."""

from .config import ReleaseConfig, load_config, partition_name
from .files import copy_file, file_sha1
from .logging import configure_logging, get_logger
from .paths import ensure_directory, normalise_path

__all__ = [
    "ReleaseConfig",
    "load_config",
    "partition_name",
    "copy_file",
    "file_sha1",
    "configure_logging",
    "get_logger",
    "ensure_directory",
    "normalise_path",
]
