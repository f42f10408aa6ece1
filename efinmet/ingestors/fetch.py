"""Shared GET-and-decode helper for the upstream JSON feeds."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from efinmet.ingestors.errors import HttpError, NetworkError, ParseError

logger = logging.getLogger("efinmet.ingestors.fetch")


async def fetch_json(
    url: str,
    *,
    feed: str,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """GET ``url`` once and return the decoded JSON body.

    Raises ``NetworkError`` when the request fails in transit, ``HttpError``
    on a non-2xx status and ``ParseError`` when the body is not JSON.
    """

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url)
    except httpx.TimeoutException as exc:
        logger.error("%s request timed out: %s", feed, exc)
        raise NetworkError(feed, exc) from exc
    except httpx.RequestError as exc:
        logger.error("%s request failed: %s", feed, exc)
        raise NetworkError(feed, exc) from exc

    if not response.is_success:
        logger.error(
            "%s feed returned error: status=%s body=%s",
            feed,
            response.status_code,
            response.text[:200],
        )
        raise HttpError(feed, response.status_code)

    try:
        return response.json()
    except (ValueError, RecursionError) as exc:
        logger.error("Failed to decode %s JSON response: %s", feed, exc)
        raise ParseError(feed, f"invalid JSON ({exc})") from exc


__all__ = ["fetch_json"]
