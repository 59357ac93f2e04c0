"""Join listed artifacts against catalog metadata to group them by service."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from .diagnostics import DiagnosticKind, Diagnostics
from .models import OTHER_SERVICE, ArtifactServiceMap, MetadataRecord


def index_metadata(
    metadata: Iterable[MetadataRecord],
) -> dict[str, list[MetadataRecord]]:
    """Group records by ``Package``, keeping catalog order within each group."""
    index: dict[str, list[MetadataRecord]] = defaultdict(list)
    for record in metadata:
        index[record.package].append(record)
    return dict(index)


def build_service_map(
    metadata: Iterable[MetadataRecord], artifacts: Iterable[str]
) -> tuple[ArtifactServiceMap, Diagnostics]:
    """Assign every visible artifact to a service name.

    Rules, applied to the records whose ``Package`` equals the artifact name:

    * no record -> ``"Other"`` plus a ``MissingServiceName`` diagnostic
    * first record hidden (``Hide == "true"``) -> artifact left out entirely
    * several records -> ``AmbiguousMetadata`` diagnostic; the first one wins
    * first record without a service name -> ``"Other"`` plus
      ``MissingServiceName``
    * otherwise the first record's whitespace-trimmed service name

    Repeated artifact names are handled once; later duplicates are no-ops, so
    the result does not depend on where duplicates appear in ``artifacts``.
    """
    index = index_metadata(metadata)
    service_map: ArtifactServiceMap = {}
    diagnostics = Diagnostics()
    seen: set[str] = set()

    for artifact in artifacts:
        if artifact in seen:
            continue
        seen.add(artifact)

        matches = index.get(artifact, [])
        if not matches:
            diagnostics.add(
                DiagnosticKind.MISSING_SERVICE_NAME,
                artifact,
                f"No metadata record for artifact '{artifact}'; grouped under "
                f"'{OTHER_SERVICE}'.",
            )
            service_map[artifact] = OTHER_SERVICE
            continue

        first = matches[0]
        if first.hidden:
            diagnostics.add(
                DiagnosticKind.HIDDEN_ARTIFACT,
                artifact,
                f"Artifact '{artifact}' is marked hidden and was not indexed.",
            )
            continue

        if len(matches) > 1:
            diagnostics.add(
                DiagnosticKind.AMBIGUOUS_METADATA,
                artifact,
                f"{len(matches)} metadata records match artifact '{artifact}'; "
                "using the first one.",
            )

        service_name = first.service_name.strip()
        if not service_name:
            diagnostics.add(
                DiagnosticKind.MISSING_SERVICE_NAME,
                artifact,
                f"Metadata for artifact '{artifact}' has no service name; grouped "
                f"under '{OTHER_SERVICE}'.",
            )
            service_name = OTHER_SERVICE
        service_map[artifact] = service_name

    return service_map, diagnostics


__all__ = ["build_service_map", "index_metadata"]
