from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, Iterable, Iterator

import pytest
from loguru import logger

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
for root in (SRC_ROOT, PROJECT_ROOT):
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))

from utils.config import ReleaseConfig  # noqa: E402


@pytest.fixture(autouse=True)
def _configure_test_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("GH_ACCESS_TOKEN", raising=False)
    yield
    logger.remove()


def populate_catalog(root: Path, layout: Dict[str, Iterable[str]]) -> Path:
    """Create ``root/extensions/<name>/<file>`` for every entry in ``layout``."""

    catalog_dir = root / "extensions"
    for name, files in layout.items():
        extension_dir = catalog_dir / name
        extension_dir.mkdir(parents=True, exist_ok=True)
        for filename in files:
            (extension_dir / filename).write_text(f"name: {name}\nfile: {filename}\n", encoding="utf-8")
    catalog_dir.mkdir(parents=True, exist_ok=True)
    return catalog_dir


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    populate_catalog(tmp_path, {"foo": ["extension.yaml"], "bar": ["addon.yaml"], "baz": ["extension.yaml"]})
    (tmp_path / "extensions" / "README.md").write_text("catalog\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def config(workspace: Path) -> ReleaseConfig:
    return ReleaseConfig(workspace=workspace)
