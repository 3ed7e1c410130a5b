from __future__ import annotations

import hashlib
from pathlib import Path
from unittest.mock import patch

import pytest

from catalog import LocalIOError, MetadataBuilder
from conftest import populate_catalog
from offline import OfflineStager


def test_release_partition_uses_tag(workspace: Path) -> None:
    catalog_dir = workspace / "extensions"
    descriptor = MetadataBuilder(catalog_dir).build(["foo", "bar"], "v2.0.0", release=True)
    staged = OfflineStager(catalog_dir, workspace / "offline").stage(descriptor, release=True)

    assert (workspace / "offline" / "v2.0.0" / "foo" / "extension.yaml").is_file()
    assert (workspace / "offline" / "v2.0.0" / "bar" / "addon.yaml").is_file()
    assert [item.extension for item in staged] == ["foo", "bar"]


def test_non_release_partition_is_latest(workspace: Path) -> None:
    catalog_dir = workspace / "extensions"
    descriptor = MetadataBuilder(catalog_dir).build(["foo"], "v1.2.0", release=False)
    OfflineStager(catalog_dir, workspace / "offline").stage(descriptor, release=False)

    assert (workspace / "offline" / "latest" / "foo" / "extension.yaml").is_file()
    assert not (workspace / "offline" / "v1.2.0").exists()


def test_copies_bytes_exactly_and_overwrites(tmp_path: Path) -> None:
    catalog_dir = populate_catalog(tmp_path, {"foo": []})
    payload = bytes(range(256)) * 4
    (catalog_dir / "foo" / "extension.yaml").write_bytes(payload)
    target = tmp_path / "offline" / "latest" / "foo"
    target.mkdir(parents=True)
    (target / "extension.yaml").write_bytes(b"old content that is longer than nothing")

    descriptor = MetadataBuilder(catalog_dir).build(["foo"], "v1.0.0", release=False)
    staged = OfflineStager(catalog_dir, tmp_path / "offline").stage(descriptor, release=False)

    assert (target / "extension.yaml").read_bytes() == payload
    assert staged[0].checksum_sha1 == hashlib.sha1(payload).hexdigest()


def test_failure_stops_loop_and_keeps_earlier_copies(tmp_path: Path) -> None:
    catalog_dir = populate_catalog(tmp_path, {"first": ["extension.yaml"], "second": [], "third": ["extension.yaml"]})
    descriptor = MetadataBuilder(catalog_dir).build(["first", "second", "third"], "v1.0.0", release=True)
    offline_dir = tmp_path / "offline"

    with pytest.raises(LocalIOError, match="second"):
        OfflineStager(catalog_dir, offline_dir).stage(descriptor, release=True)

    assert (offline_dir / "v1.0.0" / "first" / "extension.yaml").is_file()
    assert not (offline_dir / "v1.0.0" / "third").exists()


def test_checksum_mismatch_aborts(workspace: Path) -> None:
    catalog_dir = workspace / "extensions"
    descriptor = MetadataBuilder(catalog_dir).build(["foo", "bar"], "v1.0.0", release=True)

    with patch("offline.stager.file_sha1", return_value="0" * 40):
        with pytest.raises(LocalIOError, match="checksum mismatch"):
            OfflineStager(catalog_dir, workspace / "offline").stage(descriptor, release=True)

    assert not (workspace / "offline" / "v1.0.0" / "bar").exists()
