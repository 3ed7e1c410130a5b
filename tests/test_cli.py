from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests
from typer.testing import CliRunner

from cli.releasecli import app

runner = CliRunner()


def test_generate_local_release(workspace: Path) -> None:
    result = runner.invoke(
        app, ["generate", "--tag", "v2.0.0", "--release", "--source", "local", "--workspace", str(workspace)]
    )

    assert result.exit_code == 0, result.output
    assert "Succeeded" in result.output
    assert (workspace / "metadata" / "v2.0.0" / "metadata.yaml").is_file()
    assert (workspace / "offline" / "v2.0.0" / "baz" / "extension.yaml").is_file()


def test_generate_requires_tag(workspace: Path) -> None:
    result = runner.invoke(app, ["generate", "--source", "local", "--workspace", str(workspace)])
    assert result.exit_code == 2
    assert "tag is empty" in result.output


def test_generate_requires_token(workspace: Path) -> None:
    result = runner.invoke(app, ["generate", "--tag", "v1.0.0", "--workspace", str(workspace)])
    assert result.exit_code == 2
    assert "GH_ACCESS_TOKEN is empty" in result.output
    assert not (workspace / "metadata").exists()


def test_generate_remote_failure_exits_nonzero(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GH_ACCESS_TOKEN", "token")
    with patch("remote.client.requests.get", side_effect=requests.ConnectionError("unreachable")):
        result = runner.invoke(app, ["generate", "--tag", "v1.0.0", "--workspace", str(workspace)])

    assert result.exit_code == 1
    assert "Listing failed" in result.output
    assert not (workspace / "metadata").exists()
    assert not (workspace / "offline").exists()


def test_generate_from_github(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GH_ACCESS_TOKEN", "token")
    response = Mock()
    response.json.return_value = [{"name": "foo", "type": "dir"}, {"name": "README.md", "type": "file"}]
    with patch("remote.client.requests.get", return_value=response):
        result = runner.invoke(app, ["generate", "--tag", "v1.0.0", "--workspace", str(workspace)])

    assert result.exit_code == 0, result.output
    assert (workspace / "metadata" / "latest" / "metadata.yaml").is_file()
    assert (workspace / "offline" / "latest" / "foo" / "extension.yaml").is_file()


def test_summarize(workspace: Path) -> None:
    runner.invoke(app, ["generate", "--tag", "v1.0.0", "--source", "local", "--workspace", str(workspace)])
    result = runner.invoke(app, ["summarize", str(workspace / "metadata" / "latest" / "metadata.yaml")])

    assert result.exit_code == 0, result.output
    summary = json.loads(result.output)
    assert summary["total_extensions"] == 3
    assert summary["branch"] == "main"
    assert summary["capability_files"] == {"addon.yaml": 1, "extension.yaml": 2}


@pytest.mark.parametrize(
    "content",
    ["repo_owner: [unclosed\n", "- not\n- a mapping\n", "timeout: -5\n"],
)
def test_generate_rejects_malformed_config(workspace: Path, content: str) -> None:
    config_path = workspace / "release.yml"
    config_path.write_text(content, encoding="utf-8")
    result = runner.invoke(
        app,
        ["generate", "--tag", "v1.0.0", "--source", "local", "--workspace", str(workspace), "--config", str(config_path)],
    )

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output
    assert not (workspace / "metadata").exists()
