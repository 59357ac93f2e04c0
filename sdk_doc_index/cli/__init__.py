"""CLI command group for the SDK documentation index.

Example usage:

        sdk-doc-index generate --language dotnet --no-build
        sdk-doc-index list-artifacts --language python
        sdk-doc-index languages
"""

from __future__ import annotations

import click

from ..logging_setup import configure_logging
from .generate import generate_cmd
from .languages import languages_cmd
from .list_artifacts import list_artifacts_cmd


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (default: $SDK_DOC_INDEX_LOG_LEVEL or WARNING)",
)
def doc_index(log_level: str | None):  # pragma: no cover - thin group wrapper
    """Build the SDK documentation table of contents."""
    configure_logging(log_level)


# Register subcommands
doc_index.add_command(generate_cmd)
doc_index.add_command(list_artifacts_cmd)
doc_index.add_command(languages_cmd)

__all__ = ["doc_index"]
