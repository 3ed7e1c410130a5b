"""Thin GitHub REST client exposing the repository contents listing."""
from __future__ import annotations

from typing import Any, List, Optional

import requests
from pydantic import BaseModel, ValidationError

from catalog.errors import RemoteAccessError
from utils.logging import get_logger

LOGGER = get_logger(__name__)

GITHUB_API_VERSION = "2022-11-28"


class DirectoryEntry(BaseModel):
    """One item returned by a directory listing."""

    name: str
    type: str

    @property
    def is_directory(self) -> bool:
        return self.type.lower() == "dir"


class GitHubContentsClient:
    """Query ``/repos/{owner}/{repo}/contents/{path}`` with a bearer token."""

    def __init__(self, token: str, api_url: str = "https://api.github.com", timeout: float = 30.0) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    def get_contents(self, owner: str, repo: str, path: str, ref: Optional[str] = None) -> List[DirectoryEntry]:
        url = f"{self.api_url}/repos/{owner}/{repo}/contents/{path.strip('/')}"
        params = {"ref": ref} if ref else None
        LOGGER.debug("Listing %s/%s:%s", owner, repo, path)
        try:
            response = requests.get(url, headers=self._headers, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RemoteAccessError(f"listing {owner}/{repo}/{path} failed: {exc}") from exc
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise RemoteAccessError(
                f"listing {owner}/{repo}/{path} failed with status {response.status_code}: {response.text}"
            ) from exc
        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise RemoteAccessError(f"listing {owner}/{repo}/{path} returned invalid JSON: {exc}") from exc

        if not isinstance(payload, list):
            raise RemoteAccessError(f"{owner}/{repo}/{path} is not a directory")
        try:
            return [DirectoryEntry.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise RemoteAccessError(f"unexpected listing payload for {owner}/{repo}/{path}: {exc}") from exc
