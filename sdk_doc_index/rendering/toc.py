"""Table-of-contents rendering for the static-site project.

Rendering is split in two phases: :func:`build_toc_document` sorts an
artifact -> service map into an immutable :class:`TocDocument`, and
:func:`render_toc` writes that document out in a single pass:

* ``<root>/api/toc.yml``   one ``name``/``href`` pair per service
* ``<root>/api/<slug>.md`` one ``#### <artifact>`` heading per artifact
* ``<root>/toc.yml``       the top-level navigation entry

Pages are opened for writing (not appending), but ``render_toc`` still
expects a cleared output directory so stale pages from earlier runs do not
linger next to the new ones.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path

from ..models import TocDocument, TocService

logger = logging.getLogger("sdk_doc_index.rendering")

API_DIRNAME = "api"
TOC_FILENAME = "toc.yml"
HOMEPAGE = f"{API_DIRNAME}/index.md"

_WHITESPACE = re.compile(r"\s")


def service_slug(service_name: str) -> str:
    """Return the page stem for a service: whitespace removed, lowercased."""
    return _WHITESPACE.sub("", service_name).lower().strip()


def _sort_key(pair: tuple[str, str]) -> tuple[str, str, str, str]:
    # Case-insensitive first; the raw strings keep the order total.
    service, artifact = pair
    return (service.casefold(), service, artifact.casefold(), artifact)


def build_toc_document(service_map: Mapping[str, str]) -> TocDocument:
    """Sort ``(service, artifact)`` pairs and group them per service."""
    pairs = sorted(
        ((service, artifact) for artifact, service in service_map.items()),
        key=_sort_key,
    )
    grouped: dict[str, list[str]] = {}
    for service, artifact in pairs:
        if service not in grouped:
            grouped[service] = []
        grouped[service].append(artifact)
    return TocDocument(
        services=tuple(
            TocService(name=name, slug=service_slug(name), artifacts=tuple(arts))
            for name, arts in grouped.items()
        )
    )


def _write_lines(path: Path, lines: list[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as fh:
        fh.write("".join(f"{line}\n" for line in lines))


def render_toc(
    source: TocDocument | Mapping[str, str],
    output_root: str | Path,
    language: str,
) -> list[Path]:
    """Write the API table of contents and per-service pages under ``output_root``.

    ``source`` may be a finished :class:`TocDocument` or a raw artifact ->
    service map, which is sorted first. Returns the written paths in order.
    """
    document = (
        source if isinstance(source, TocDocument) else build_toc_document(source)
    )
    root = Path(output_root)
    api_dir = root / API_DIRNAME

    toc_lines: list[str] = []
    pages: dict[str, list[str]] = {}
    owners: dict[str, str] = {}
    for service in document.services:
        toc_lines.append(f"- name: {service.name}")
        toc_lines.append(f"  href: {service.slug}.md")
        if service.slug in owners:
            # Distinct names collapsing to one slug share a page.
            logger.warning(
                "Services '%s' and '%s' share the page '%s.md'",
                owners[service.slug],
                service.name,
                service.slug,
            )
        owners.setdefault(service.slug, service.name)
        pages.setdefault(service.slug, []).extend(
            f"#### {artifact}" for artifact in service.artifacts
        )

    written: list[Path] = []
    api_toc = api_dir / TOC_FILENAME
    _write_lines(api_toc, toc_lines)
    written.append(api_toc)
    for slug, lines in pages.items():
        page = api_dir / f"{slug}.md"
        _write_lines(page, lines)
        written.append(page)
    written.append(write_root_toc(root, language))
    logger.info(
        "Rendered %d service page(s) for %d artifact(s) into %s",
        len(pages),
        sum(len(s.artifacts) for s in document.services),
        root,
    )
    return written


def write_root_toc(output_root: str | Path, language: str) -> Path:
    """Write the top-level navigation entry pointing at the API section."""
    path = Path(output_root) / TOC_FILENAME
    _write_lines(
        path,
        [
            f"- name: Azure SDK for {language} APIs",
            f"  href: {API_DIRNAME}/",
            f"  homepage: {HOMEPAGE}",
        ],
    )
    return path


__all__ = [
    "API_DIRNAME",
    "HOMEPAGE",
    "TOC_FILENAME",
    "build_toc_document",
    "render_toc",
    "service_slug",
    "write_root_toc",
]
