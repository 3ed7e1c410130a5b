"""Configuration helpers for the release metadata generator."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field

LATEST_KEYWORD = "latest"
MAIN_BRANCH_KEYWORD = "main"
FIRST_RELEASE = "v0.1.0"
TOKEN_ENV_VAR = "GH_ACCESS_TOKEN"


class ReleaseConfig(BaseModel):
    """Run level configuration.

    Relative directories are resolved against ``workspace`` so a run can be
    pointed at any checkout of the catalog repository.
    """

    repo_owner: str = "vmware-tanzu"
    repo_name: str = "tce"
    ref: Optional[str] = None
    api_url: str = "https://api.github.com"
    timeout: float = Field(default=30.0, gt=0)
    token_env: str = TOKEN_ENV_VAR

    workspace: Path = Field(default=Path("."))
    catalog_dir: Path = Field(default=Path("extensions"))
    metadata_dir: Path = Field(default=Path("metadata"))
    offline_dir: Path = Field(default=Path("offline"))
    metadata_filename: str = "metadata.yaml"

    primary_filename: str = "extension.yaml"
    secondary_filename: str = "addon.yaml"
    first_release: str = FIRST_RELEASE

    @property
    def repo_slug(self) -> str:
        return f"{self.repo_owner}/{self.repo_name}"

    @property
    def catalog_path(self) -> str:
        """Catalog location inside the remote repository."""

        return self.catalog_dir.as_posix()

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.workspace / path

    def local_catalog_dir(self) -> Path:
        return self._resolve(self.catalog_dir)

    def offline_root(self) -> Path:
        return self._resolve(self.offline_dir)

    def metadata_output_dir(self, tag: str, release: bool) -> Path:
        """Return ``metadata/<tag>`` for releases and ``metadata/latest`` otherwise."""

        return self._resolve(self.metadata_dir) / partition_name(tag, release)


def partition_name(tag: str, release: bool) -> str:
    return tag if release else LATEST_KEYWORD


def load_config(path: Optional[Path], **overrides: Any) -> ReleaseConfig:
    """Load configuration from a YAML file, applying non-``None`` overrides."""

    data: Dict[str, Any] = {}
    if path is not None and path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a mapping of settings")
    data.update({key: value for key, value in overrides.items() if value is not None})
    return ReleaseConfig(**data)
