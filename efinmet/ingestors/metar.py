"""METAR ingestion from the Finnish aviation weather backend."""

from __future__ import annotations

import logging
import math
import re
from typing import Any

import httpx

from efinmet.config import settings
from efinmet.ingestors.errors import ParseError
from efinmet.ingestors.fetch import fetch_json
from efinmet.models.weather import AirportWeather

logger = logging.getLogger("efinmet.ingestors.metar")

FEED_NAME = "METAR"
# Every top-level key in the document is the report type followed by the ICAO.
REPORT_PREFIX = "METAR_"

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def _parse_coordinate(key: str, entry: dict, field: str) -> float:
    if field not in entry:
        raise ParseError(FEED_NAME, f"{key}: missing field '{field}'")
    raw = entry[field]
    # bool is an int subclass and must not pass as a number
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise ParseError(FEED_NAME, f"{key}: field '{field}' is not a number")
    if isinstance(raw, str) and not _DECIMAL_RE.fullmatch(raw):
        raise ParseError(
            FEED_NAME, f"{key}: field '{field}' is not a number: {raw!r}"
        )
    try:
        value = float(raw)
    except OverflowError as exc:
        raise ParseError(FEED_NAME, f"{key}: field '{field}' is out of range") from exc
    if not math.isfinite(value):
        raise ParseError(FEED_NAME, f"{key}: field '{field}' is not finite")
    return value


def parse_metar_document(payload: Any) -> list[AirportWeather]:
    """Turn the decoded weather document into airport records.

    The whole document is rejected with ``ParseError`` if any entry is
    malformed. Records keep the document's key order.
    """

    if not isinstance(payload, dict):
        raise ParseError(FEED_NAME, "top-level value is not an object")

    airports: list[AirportWeather] = []
    for key, entry in payload.items():
        if not key.startswith(REPORT_PREFIX):
            raise ParseError(FEED_NAME, f"key {key!r} lacks prefix {REPORT_PREFIX!r}")
        icao = key[len(REPORT_PREFIX):]
        if not icao:
            raise ParseError(FEED_NAME, f"key {key!r} has no airport identifier")
        if not isinstance(entry, dict):
            raise ParseError(FEED_NAME, f"{key}: entry is not an object")

        latitude = _parse_coordinate(key, entry, "lat")
        longitude = _parse_coordinate(key, entry, "lon")
        report = entry.get("p1")
        if not isinstance(report, str):
            raise ParseError(FEED_NAME, f"{key}: missing report text 'p1'")

        airports.append(
            AirportWeather(
                icao=icao, latitude=latitude, longitude=longitude, report=report
            )
        )
    return airports


class MetarIngestor:
    """Fetch the current METARs for the Finnish region."""

    def __init__(
        self,
        *,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url or settings.metar_url
        self.timeout = timeout or settings.metar_timeout
        self.transport = transport

    async def get_airports(self) -> list[AirportWeather]:
        payload = await fetch_json(
            self.url, feed=FEED_NAME, timeout=self.timeout, transport=self.transport
        )
        try:
            airports = parse_metar_document(payload)
        except ParseError as exc:
            logger.error("Rejected METAR document: %s", exc.reason)
            raise

        logger.debug("Ingested METARs for %s airports", len(airports))
        return airports


__all__ = ["MetarIngestor", "REPORT_PREFIX", "parse_metar_document"]
