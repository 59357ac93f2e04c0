"""Shared pytest fixtures for SDK documentation index tests."""

import os
from unittest.mock import Mock

import pytest
import requests

from sdk_doc_index import languages
from sdk_doc_index.settings import ENV_PREFIX

LISTING_URL = (
    "https://example.blob.core.windows.net/$web?restype=container&comp=list"
    "&prefix=dotnet/&delimiter=/"
)


def make_listing_page(prefixes, marker=None, xml_declaration=True):
    """Return an XML listing page body (bytes) for the given blob prefixes."""
    blobs = "".join(
        f"<BlobPrefix><Name>{prefix}</Name></BlobPrefix>" for prefix in prefixes
    )
    next_marker = f"<NextMarker>{marker}</NextMarker>" if marker else "<NextMarker />"
    header = '<?xml version="1.0" encoding="utf-8"?>' if xml_declaration else ""
    return (
        f'{header}<EnumerationResults ServiceEndpoint="https://example/" '
        f'ContainerName="$web"><Prefix>dotnet/</Prefix><Delimiter>/</Delimiter>'
        f"<Blobs>{blobs}</Blobs>{next_marker}</EnumerationResults>"
    ).encode("utf-8")


@pytest.fixture
def listing_page():
    """Fixture providing the make_listing_page helper function."""
    return make_listing_page


@pytest.fixture
def mock_response():
    """Create a mock HTTP response carrying the given body."""

    def _mock_response(body=b"", text=None, status_code=200):
        mock = Mock(spec=requests.Response)
        mock.status_code = status_code
        mock.content = body
        mock.text = text if text is not None else body.decode("utf-8", "replace")
        if status_code >= 400:
            mock.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Error"
            )
        return mock

    return _mock_response


@pytest.fixture
def metadata_csv():
    return (
        "Package,VersionGA,ServiceName,Hide\n"
        "Azure.Storage.Blobs,12.19.0,Storage,\n"
        "Azure.Storage.Queues,12.17.0,Storage,\n"
        "Azure.Security.KeyVault.Keys,4.5.0,  Key Vault  ,\n"
        "Azure.Core.Experimental,,Core,true\n"
        "Azure.AI.Anomalydetector,,,\n"
    )


@pytest.fixture(autouse=True)
def _restore_handlers():
    """Keep handler registry changes scoped to a single test."""
    saved = dict(languages._HANDLERS)
    yield
    languages._HANDLERS.clear()
    languages._HANDLERS.update(saved)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Run each test without ambient SDK_DOC_INDEX_* variables or .env file."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def listing_url():
    return LISTING_URL


@pytest.fixture
def metadata_uri():
    return "https://example.com/dotnet-packages.csv"
