"""Languages command: show the known language profiles."""

from __future__ import annotations

import click

from ..languages import PROFILES, resolve_handler


@click.command("languages")
def languages_cmd():
    """Show each known language tag with its listing prefix and handler."""
    for tag, profile in sorted(PROFILES.items()):
        handler = resolve_handler(tag)
        handler_name = type(handler).__name__ if handler is not None else "-"
        click.echo(f"{tag}\t{profile.title}\t{profile.blob_prefix}\t{handler_name}")


__all__ = ["languages_cmd"]
