"""VATSIM traffic ingestion from the public v3 data feed."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from efinmet.config import settings
from efinmet.ingestors.errors import ParseError
from efinmet.ingestors.fetch import fetch_json
from efinmet.models.traffic import TrafficFeed, TrafficRecord

logger = logging.getLogger("efinmet.ingestors.traffic")

FEED_NAME = "VATSIM"


def parse_traffic_document(payload: Any) -> list[TrafficRecord]:
    """Validate the decoded VATSIM document and return its pilots.

    A single pilot that does not match the schema fails the whole document.
    """

    try:
        feed = TrafficFeed.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        reason = f"{location}: {first.get('msg', 'invalid document')}"
        if len(errors) > 1:
            reason += f" (and {len(errors) - 1} more)"
        raise ParseError(FEED_NAME, reason) from exc
    return feed.pilots


class TrafficIngestor:
    """Fetch every pilot currently connected to VATSIM."""

    def __init__(
        self,
        *,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url or settings.traffic_url
        self.timeout = timeout or settings.traffic_timeout
        self.transport = transport

    async def get_traffic(self) -> list[TrafficRecord]:
        payload = await fetch_json(
            self.url, feed=FEED_NAME, timeout=self.timeout, transport=self.transport
        )
        try:
            pilots = parse_traffic_document(payload)
        except ParseError as exc:
            logger.error("Rejected VATSIM document: %s", exc.reason)
            raise

        logger.debug("Ingested %s pilots", len(pilots))
        return pilots


__all__ = ["TrafficIngestor", "parse_traffic_document"]
