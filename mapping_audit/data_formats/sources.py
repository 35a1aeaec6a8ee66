"""
Entry points for acquiring a dataset.

Both entry points raise only LoadError subclasses. Unexpected exceptions
from the read/parse path are wrapped as ParseError here.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urljoin, urlparse

import requests

from mapping_audit.data_formats.errors import LoadError, ParseError
from mapping_audit.data_formats.format_detector import get_loader
from mapping_audit.data_formats.remote import DEFAULT_TIMEOUT, fetch_records

logger = logging.getLogger(__name__)

REMOTE_SCHEMES = frozenset(["http", "https"])


def is_remote(identifier: str) -> bool:
    """Check whether an identifier is an http(s) URL."""
    return urlparse(identifier).scheme.lower() in REMOTE_SCHEMES


def resolve_source(identifier: str, base_url: str | None = None) -> str:
    """Resolve a source identifier against an optional base URL.

    Absolute URLs are returned unchanged. Other identifiers are joined onto
    base_url when one is configured, and otherwise treated as local paths.

    Examples:
        >>> resolve_source("/mappings.json", "http://localhost:5173")
        'http://localhost:5173/mappings.json'
        >>> resolve_source("/mappings.json")
        '/mappings.json'
    """
    if is_remote(identifier) or not base_url:
        return identifier
    return urljoin(base_url, identifier)


def load_file(path: str) -> list[Any]:
    """Load all records from a local file.

    Args:
        path: Path to a JSON, JSONL or Parquet file.

    Returns:
        The records in file order.

    Raises:
        LoadError: If the file cannot be read, parsed, or is not a sequence.
    """
    try:
        records = get_loader(path).load_all(path)
    except LoadError:
        raise
    except Exception as e:
        raise ParseError.from_exception(e) from e
    logger.debug("Loaded %d records from %s", len(records), path)
    return records


def load_source(
    identifier: str,
    *,
    base_url: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    session: requests.Session | None = None,
) -> list[Any]:
    """Load all records from a URL or a local path.

    Args:
        identifier: URL or path of the dataset.
        base_url: Base URL that relative identifiers are resolved against.
        timeout: HTTP timeout in seconds.
        session: Optional requests session for remote sources.

    Returns:
        The records in document order.

    Raises:
        LoadError: If retrieval, parsing or the sequence check fails.
    """
    target = resolve_source(identifier, base_url)
    if not is_remote(target):
        return load_file(target)

    try:
        return fetch_records(target, timeout=timeout, session=session)
    except LoadError:
        raise
    except Exception as e:
        raise ParseError.from_exception(e) from e
