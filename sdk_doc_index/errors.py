"""Fatal error kinds raised by the documentation index pipeline."""

from __future__ import annotations


class DocIndexError(RuntimeError):
    """Base class for failures that abort an index run."""


class FetchError(DocIndexError):
    """Raised when the metadata catalog cannot be retrieved."""

    def __init__(self, uri: str, attempts: int, reason: str = ""):
        self.uri = uri
        self.attempts = attempts
        message = f"Failed to fetch metadata from '{uri}' after {attempts} attempt(s)"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ListingError(DocIndexError):
    """Raised when a listing page cannot be requested or parsed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"Failed to list artifacts from '{url}': {reason}")


class SiteBuildError(DocIndexError):
    """Raised when the external site builder exits unsuccessfully."""


__all__ = ["DocIndexError", "FetchError", "ListingError", "SiteBuildError"]
