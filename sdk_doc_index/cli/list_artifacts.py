"""List command: print the artifact names published for a language."""

from __future__ import annotations

from pathlib import Path

import click

from ..errors import DocIndexError
from ..listing import list_artifacts
from ._options import build_settings, settings_options


@click.command("list-artifacts")
@settings_options
def list_artifacts_cmd(
    language: str | None,
    config_path: Path | None,
    metadata_uri: str | None,
    blob_storage_url: str | None,
):
    """Print one artifact name per line, in listing order."""
    settings = build_settings(
        config_path,
        language=language,
        metadata_uri=metadata_uri,
        blob_storage_url=blob_storage_url,
    )
    try:
        artifacts = list_artifacts(
            settings.resolved_blob_storage_url,
            settings.profile.name_transform(),
            timeout=settings.http_timeout,
        )
    except DocIndexError as error:
        click.echo(f"Error: {error}", err=True)
        raise SystemExit(1)
    for name in artifacts:
        click.echo(name)


__all__ = ["list_artifacts_cmd"]
