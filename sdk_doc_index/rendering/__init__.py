"""Output renderers for the documentation index."""

from .toc import build_toc_document, render_toc, service_slug, write_root_toc

__all__ = ["build_toc_document", "render_toc", "service_slug", "write_root_toc"]
