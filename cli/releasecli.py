"""Typer-based command line interface for the release metadata generator."""
from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from catalog import DescriptorSummary, MetadataError, load_metadata  # type: ignore  # noqa: E402
from catalog.pipeline import ReleasePipeline  # type: ignore  # noqa: E402
from remote import GitHubContentsClient, GitHubDirectoryLister, LocalDirectoryLister  # type: ignore  # noqa: E402
from remote.lister import DirectoryLister  # type: ignore  # noqa: E402
from utils.config import ReleaseConfig, load_config  # type: ignore  # noqa: E402
from utils.logging import configure_logging  # type: ignore  # noqa: E402
from utils.paths import normalise_path  # type: ignore  # noqa: E402

app = typer.Typer(add_completion=False)
console = Console()

EXIT_FAILURE = 1
EXIT_PRECONDITION = 2


class Source(str, Enum):
    github = "github"
    local = "local"


def _fail(message: str, code: int) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=code)


def _build_lister(config: ReleaseConfig, source: Source) -> DirectoryLister:
    if source is Source.local:
        return LocalDirectoryLister(config.workspace)
    token = os.environ.get(config.token_env, "")
    if not token:
        _fail(f"{config.token_env} is empty", EXIT_PRECONDITION)
    client = GitHubContentsClient(token, api_url=config.api_url, timeout=config.timeout)
    return GitHubDirectoryLister(client, config.repo_owner, config.repo_name, ref=config.ref)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging.")) -> None:
    configure_logging("DEBUG" if verbose else "INFO")


@app.command()
def generate(
    tag: str = typer.Option("", "--tag", help="The release tag, e.g. v0.9.0."),
    release: bool = typer.Option(False, "--release/--no-release", help="Partition output by tag instead of 'latest'."),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML configuration file."),
    source: Source = typer.Option(Source.github, "--source", help="Where to list extensions from."),
    workspace: Optional[Path] = typer.Option(None, "--workspace", help="Repository checkout to read and write under."),
) -> None:
    """Write metadata.yaml for TAG and stage capability files for offline use."""

    try:
        config = load_config(config_path, workspace=normalise_path(workspace) if workspace else None)
    except (yaml.YAMLError, ValueError, OSError) as exc:
        _fail(f"Invalid configuration {config_path}: {exc}", EXIT_PRECONDITION)
    if not tag:
        _fail("tag is empty", EXIT_PRECONDITION)
    lister = _build_lister(config, source)

    try:
        result = ReleasePipeline(config, lister).run(tag, release)
    except MetadataError as exc:
        _fail(f"{exc.stage or 'Run'} failed: {exc.args[0] if exc.args else exc}", EXIT_FAILURE)

    table = Table("extension", "file", "sha1")
    for staged in result.staged:
        table.add_row(staged.extension, staged.destination.name, staged.checksum_sha1[:12])
    console.print(table)
    typer.echo(f"Wrote {result.metadata_path} with {len(result.descriptor.extensions)} extensions")
    typer.echo(f"Staged {len(result.staged)} files for offline use")
    typer.echo("Succeeded")


@app.command()
def summarize(metadata_path: Path = typer.Argument(..., help="metadata.yaml path.")) -> None:
    """Print a JSON summary of an existing metadata document."""

    if not metadata_path.exists():
        raise typer.BadParameter(f"Metadata {metadata_path} not found")
    try:
        descriptor = load_metadata(metadata_path)
    except MetadataError as exc:
        _fail(f"Unable to read {metadata_path}: {exc}", EXIT_FAILURE)
    summary = DescriptorSummary.from_descriptor(descriptor)
    typer.echo(summary.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
