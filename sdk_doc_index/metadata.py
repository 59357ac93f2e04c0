"""Retrieve the package -> service release catalog.

The catalog is a CSV document with (at least) the header columns
``Package``, ``ServiceName`` and ``Hide``. It is mandatory input: transient
failures are retried a fixed number of times with a fixed interval, after
which :class:`~sdk_doc_index.errors.FetchError` aborts the run.
"""

from __future__ import annotations

import csv
import io
import logging

import requests
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from .errors import FetchError
from .models import MetadataRecord

logger = logging.getLogger("sdk_doc_index.metadata")

REQUIRED_COLUMNS = ("Package",)
DEFAULT_ATTEMPTS = 3
DEFAULT_INTERVAL = 10.0
DEFAULT_TIMEOUT = 30.0


def parse_metadata(text: str) -> list[MetadataRecord]:
    """Parse CSV catalog content into records, preserving row order."""
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
    if missing:
        raise ValueError(f"Metadata CSV is missing column(s): {', '.join(missing)}")
    return [MetadataRecord.model_validate(row) for row in reader]


def _get_text(uri: str, timeout: float) -> str:
    response = requests.get(uri, timeout=timeout)
    response.raise_for_status()
    return response.text


def fetch_metadata(
    uri: str,
    *,
    attempts: int = DEFAULT_ATTEMPTS,
    interval: float = DEFAULT_INTERVAL,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[MetadataRecord]:
    """GET ``uri`` and parse the CSV body into :class:`MetadataRecord` rows.

    Network errors, timeouts and non-success statuses are retried up to
    ``attempts`` total tries, sleeping ``interval`` seconds between tries.
    """
    retrying = Retrying(
        stop=stop_after_attempt(attempts),
        wait=wait_fixed(interval),
        retry=retry_if_exception_type(requests.RequestException),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    try:
        text = retrying(_get_text, uri, timeout)
    except requests.RequestException as error:
        raise FetchError(uri, attempts, str(error)) from error
    try:
        records = parse_metadata(text)
    except ValueError as error:
        raise FetchError(uri, 1, str(error)) from error
    logger.info("Fetched %d metadata record(s) from %s", len(records), uri)
    return records


__all__ = ["fetch_metadata", "parse_metadata"]
