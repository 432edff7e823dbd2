"""Ingress boundary helpers for the upstream feed.

Keeps transport concerns out of the cleaning core:

- **fetch_feed**: downloads the raw feed bytes with ``httpx``, failing
  with a structured error on transport problems or non-200 responses.
- **decode_feed**: normalises a bytes/str/dict payload into a GeoJSON
  dict, raising ``FeedDecodeError`` for anything that is not a GeoJSON
  object.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from rfs_incidents.core.constants import DEFAULT_REQUEST_TIMEOUT_S
from rfs_incidents.core.exceptions import ContractError, TransientError

logger = logging.getLogger("rfs_incidents.core.ingress")

# Status codes worth retrying later (throttling and server-side failures).
_RETRYABLE_STATUS_MIN = 500
_TOO_MANY_REQUESTS = 429


class FeedFetchError(TransientError):
    """Raised when the upstream feed cannot be downloaded.

    Attributes:
        url: The feed URL that was requested.
        status_code: HTTP status code, or ``None`` for transport errors.
    """

    default_stage = "ingress"
    default_code = "FEED_FETCH_FAILED"

    def __init__(
        self, url: str, message: str, *, status_code: int | None = None, **kwargs: object
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message, **kwargs)


class FeedDecodeError(ContractError):
    """Raised when the feed payload is not a GeoJSON object."""

    default_stage = "ingress"
    default_code = "FEED_INVALID_JSON"


# ---------------------------------------------------------------------------
# Fetch
# ---------------------------------------------------------------------------


def fetch_feed(url: str, *, timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S) -> bytes:
    """Download the raw feed body.

    Args:
        url: Feed URL.
        timeout_s: Request timeout in seconds.

    Returns:
        The response body as bytes.

    Raises:
        FeedFetchError: On transport errors or any status other than 200.
            ``retryable`` is false for 4xx responses other than 429.
    """
    logger.info("Fetching feed | url=%s | timeout=%.1fs", url, timeout_s)

    try:
        with httpx.Client(timeout=timeout_s, follow_redirects=True) as client:
            response = client.get(url)
    except httpx.HTTPError as exc:
        msg = f"Request to {url} failed: {exc}"
        raise FeedFetchError(url, msg) from exc

    if response.status_code != httpx.codes.OK:
        retryable = (
            response.status_code >= _RETRYABLE_STATUS_MIN
            or response.status_code == _TOO_MANY_REQUESTS
        )
        msg = f"Feed request to {url} returned HTTP {response.status_code}"
        raise FeedFetchError(
            url,
            msg,
            status_code=response.status_code,
            retryable=retryable,
        )

    logger.debug("Fetched %d bytes from %s", len(response.content), url)
    return response.content


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------


def decode_feed(raw: bytes | str | dict[str, Any] | object) -> dict[str, Any]:
    """Normalise a raw feed payload into a GeoJSON dict.

    Args:
        raw: Response bytes, a JSON string, or an already-decoded dict.

    Returns:
        The decoded GeoJSON object.

    Raises:
        FeedDecodeError: If *raw* is not valid JSON, not a JSON object,
            or lacks a GeoJSON ``type`` member.
    """
    if isinstance(raw, bytes | str):
        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            msg = f"Feed is not valid JSON: {exc}"
            raise FeedDecodeError(msg) from exc
    elif isinstance(raw, dict):
        parsed = raw
    else:
        msg = f"Unexpected feed payload type: {type(raw).__name__}"
        raise FeedDecodeError(msg, code="FEED_INVALID_TYPE")

    if not isinstance(parsed, dict):
        msg = f"Feed JSON must be an object, got {type(parsed).__name__}"
        raise FeedDecodeError(msg, code="FEED_INVALID_TYPE")
    if "type" not in parsed:
        msg = "Feed JSON object has no GeoJSON 'type' member"
        raise FeedDecodeError(msg, code="FEED_NOT_GEOJSON")
    return parsed
