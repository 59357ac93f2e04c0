"""Generate command: fetch, map and render the documentation index."""

from __future__ import annotations

from pathlib import Path

import click

from ..errors import DocIndexError
from ..pipeline import run_pipeline
from ._options import build_settings, settings_options


@click.command("generate")
@settings_options
@click.option(
    "--repo-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding README.md and CONTRIBUTING.md",
)
@click.option(
    "--doc-gen-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Site project directory (default: <repo-root>/docfx_project)",
)
@click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory for the TOC tree (default: doc-gen-dir)",
)
@click.option("--no-build", is_flag=True, help="Skip the docfx init/build steps")
@click.option("--no-clean", is_flag=True, help="Keep existing files in the output")
def generate_cmd(
    language: str | None,
    config_path: Path | None,
    metadata_uri: str | None,
    blob_storage_url: str | None,
    repo_root: Path | None,
    doc_gen_dir: Path | None,
    output_dir: Path | None,
    no_build: bool,
    no_clean: bool,
):
    """Build the table of contents and service pages for one SDK language."""
    settings = build_settings(
        config_path,
        language=language,
        metadata_uri=metadata_uri,
        blob_storage_url=blob_storage_url,
        repo_root=repo_root,
        doc_gen_dir=doc_gen_dir,
        output_dir=output_dir,
        build_site=False if no_build else None,
        clean_output=False if no_clean else None,
    )
    try:
        result = run_pipeline(settings)
    except DocIndexError as error:
        click.echo(f"Error: {error}", err=True)
        raise SystemExit(1)

    if len(result.diagnostics):
        click.echo(f"{len(result.diagnostics)} diagnostic(s):")
        for diagnostic in result.diagnostics:
            click.echo(f" - {diagnostic}")
    click.echo(
        f"Indexed {len(result.service_map)} artifact(s) in "
        f"{len(result.document.services)} service(s) -> {result.output_dir}"
    )


__all__ = ["generate_cmd"]
