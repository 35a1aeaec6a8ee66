"""
Remote dataset retrieval over HTTP.

Fetches the whole body with a single GET and parses it with the loader
matching the URL extension (or the sniffed content).
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from mapping_audit.data_formats.errors import TransportError
from mapping_audit.data_formats.format_detector import (
    format_from_url,
    get_loader_for_format,
    sniff_format,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def fetch_records(
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    session: requests.Session | None = None,
) -> list[Any]:
    """Download and parse a dataset.

    Args:
        url: http(s) URL of the dataset.
        timeout: Request timeout in seconds.
        session: Optional requests session (a plain requests.get is used
            otherwise).

    Returns:
        The records in document order.

    Raises:
        TransportError: If the request fails or the status is not 2xx.
        ParseError: If the body cannot be parsed.
        ShapeError: If the body is not a sequence.
    """
    http = session if session is not None else requests
    logger.debug("GET %s (timeout=%ss)", url, timeout)
    try:
        response = http.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(str(e)) from e

    if not 200 <= response.status_code < 300:
        raise TransportError(
            f"Failed to load file: HTTP {response.status_code}",
            status_code=response.status_code,
        )

    data = response.content
    format_name = format_from_url(url) or sniff_format(data)
    logger.debug("Fetched %d bytes from %s, parsing as %s", len(data), url, format_name)
    return get_loader_for_format(format_name).parse(data)
