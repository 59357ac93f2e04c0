"""Enumerate published artifact names from a paginated blob listing.

The listing endpoint returns XML shaped as::

    <EnumerationResults>
      <Blobs>
        <BlobPrefix><Name>dotnet/Azure.Storage.Blobs/</Name></BlobPrefix>
        ...
      </Blobs>
      <NextMarker>2!92!MDAwMDI...</NextMarker>
    </EnumerationResults>

A non-empty ``NextMarker`` means more pages remain; the next page is
requested by appending ``&marker=<token>`` to the base listing URL. Pages are
fetched strictly one at a time and names are accumulated in arrival order,
duplicates included.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

import requests

from .errors import ListingError

logger = logging.getLogger("sdk_doc_index.listing")

UTF8_BOM = b"\xef\xbb\xbf"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class NameTransform:
    """Regex capture rewrite turning a blob prefix into an artifact name.

    ``NameTransform(r"^dotnet/(.*)/$", r"\\1")`` maps
    ``dotnet/Azure.AI.Anomalydetector/`` to ``Azure.AI.Anomalydetector``.
    """

    pattern: str
    replacement: str = r"\1"
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", re.compile(self.pattern))

    @classmethod
    def for_prefix(cls, prefix: str) -> NameTransform:
        return cls(f"^{re.escape(prefix)}(.*)/$")

    def apply(self, name: str) -> str:
        return self._regex.sub(self.replacement, name)


def strip_bom(body: bytes) -> bytes:
    """Drop a leading UTF-8 byte-order-mark; any other input is returned as-is."""
    if len(body) >= len(UTF8_BOM) and body.startswith(UTF8_BOM):
        return body[len(UTF8_BOM) :]
    return body


def parse_listing_page(
    body: bytes, name_transform: NameTransform
) -> tuple[list[str], str | None]:
    """Return ``(artifact_names, next_marker)`` for one listing page.

    Raises ``xml.etree.ElementTree.ParseError`` for malformed XML.
    """
    root = ET.fromstring(strip_bom(body))
    names = []
    for prefix in root.iterfind("Blobs/BlobPrefix"):
        raw = prefix.findtext("Name", default="")
        if not raw:  # nameless prefix
            continue
        names.append(name_transform.apply(raw))
    marker = (root.findtext("NextMarker") or "").strip()
    return names, marker or None


def _get_page(url: str, timeout: float) -> bytes:
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as error:
        raise ListingError(url, str(error)) from error
    return response.content


def list_artifacts(
    listing_url: str,
    name_transform: NameTransform,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[str]:
    """Follow continuation markers from ``listing_url`` and collect artifact names.

    Any request or parse failure raises :class:`ListingError`; there is no
    retry and no partial result.
    """
    artifacts: list[str] = []
    url = listing_url
    pages = 0
    while True:
        body = _get_page(url, timeout)
        pages += 1
        try:
            names, marker = parse_listing_page(body, name_transform)
        except ET.ParseError as error:
            raise ListingError(url, f"invalid XML: {error}") from error
        logger.debug("Listing page %d from %s: %d artifact(s)", pages, url, len(names))
        artifacts.extend(names)
        if marker is None:
            break
        url = f"{listing_url}&marker={marker}"
    logger.info(
        "Listed %d artifact(s) across %d page(s) from %s",
        len(artifacts),
        pages,
        listing_url,
    )
    return artifacts


__all__ = [
    "NameTransform",
    "UTF8_BOM",
    "list_artifacts",
    "parse_listing_page",
    "strip_bom",
]
