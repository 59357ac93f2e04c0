"""Options and settings loading shared by the subcommands."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from ..settings import Settings, load_settings


def settings_options(func):
    """Attach the options every subcommand uses to build :class:`Settings`."""
    decorators = [
        click.option("--language", "-l", default=None, help="Language tag, e.g. dotnet"),
        click.option(
            "--config",
            "config_path",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            default=None,
            help="YAML settings file",
        ),
        click.option("--metadata-uri", default=None, help="Release catalog CSV URI"),
        click.option(
            "--listing-url", "blob_storage_url", default=None, help="Blob listing URL"
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def build_settings(config_path: Path | None, **overrides) -> Settings:
    try:
        return load_settings(config_path, **overrides)
    except (ValidationError, ValueError) as error:
        raise click.BadParameter(str(error)) from error


__all__ = ["build_settings", "settings_options"]
