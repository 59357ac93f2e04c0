"""Sequence the fetch, list, map and render stages into one run.

All network input is gathered before anything is written, so a fatal
:class:`~sdk_doc_index.errors.DocIndexError` leaves the output directory
untouched. Recoverable conditions are collected into
:class:`~sdk_doc_index.diagnostics.Diagnostics` and returned with the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .diagnostics import DiagnosticKind, Diagnostics
from .languages import DOCFX_CONFIG, resolve_handler
from .listing import list_artifacts
from .mapping import build_service_map
from .metadata import fetch_metadata
from .models import ArtifactServiceMap, TocDocument
from .rendering.toc import build_toc_document, render_toc
from .settings import Settings
from .site import DocfxSiteBuilder, SiteBuilder, clean_output_dir, copy_home_pages

logger = logging.getLogger("sdk_doc_index.pipeline")


@dataclass
class PipelineResult:
    document: TocDocument
    service_map: ArtifactServiceMap
    diagnostics: Diagnostics
    output_dir: Path
    written: list[Path]


def run_pipeline(
    settings: Settings, site_builder: SiteBuilder | None = None
) -> PipelineResult:
    """Build the documentation index described by ``settings``."""
    profile = settings.profile
    diagnostics = Diagnostics()

    handler = resolve_handler(profile.tag)
    if handler is None:
        diagnostics.add(
            DiagnosticKind.UNRESOLVED_ENTRY_POINT,
            profile.tag,
            f"No site handler registered for language '{profile.tag}'; "
            "continuing without language-specific updates.",
        )

    metadata = fetch_metadata(
        settings.resolved_metadata_uri,
        attempts=settings.fetch_attempts,
        interval=settings.retry_interval,
        timeout=settings.http_timeout,
    )
    artifacts = list_artifacts(
        settings.resolved_blob_storage_url,
        profile.name_transform(),
        timeout=settings.http_timeout,
    )
    service_map, map_diagnostics = build_service_map(metadata, artifacts)
    diagnostics.extend(map_diagnostics)
    document = build_toc_document(service_map)

    doc_gen_dir = settings.resolved_doc_gen_dir
    output_dir = settings.resolved_output_dir
    if settings.build_site and site_builder is None:
        site_builder = DocfxSiteBuilder(settings.docfx_command)
    if settings.build_site:
        site_builder.init(doc_gen_dir)

    if settings.clean_output:
        clean_output_dir(output_dir)
    written = render_toc(document, output_dir, profile.display_name)
    written.extend(copy_home_pages(settings.repo_root, output_dir))

    if handler is not None:
        handler.update_site_files(doc_gen_dir, profile)
    if settings.build_site:
        site_builder.build(doc_gen_dir / DOCFX_CONFIG)

    logger.info(
        "Indexed %d artifact(s) into %d service(s) with %d diagnostic(s)",
        len(service_map),
        len(document.services),
        len(diagnostics),
    )
    return PipelineResult(document, service_map, diagnostics, output_dir, written)


__all__ = ["PipelineResult", "run_pipeline"]
