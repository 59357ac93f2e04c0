import importlib.metadata

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# In-tree execution (tests collected before the distribution is built) has no
# metadata; fall back to a neutral placeholder instead of failing at import.
try:  # pragma: no cover - trivial guard
    try:
        __version__ = importlib.metadata.version("sdk-doc-index")
    except KeyError:  # metadata object exists but lacks 'Version' key
        __version__ = "0.0.0"
except importlib.metadata.PackageNotFoundError:  # distribution not installed
    __version__ = "0.0.0"

__all__ = ["__version__"]
