"""Fetch both feeds and reduce them to the METARs worth displaying."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from efinmet.ingestors import FetchError, MetarIngestor, TrafficIngestor
from efinmet.services.correlator import relevant_airports

logger = logging.getLogger("efinmet.pipeline")


class MetarPipeline:
    """Runs one fetch-parse-correlate cycle over the weather and traffic feeds."""

    def __init__(
        self,
        metar_ingestor: Optional[MetarIngestor] = None,
        traffic_ingestor: Optional[TrafficIngestor] = None,
    ) -> None:
        self.metar_ingestor = metar_ingestor or MetarIngestor()
        self.traffic_ingestor = traffic_ingestor or TrafficIngestor()

    async def fetch_relevant_reports(self) -> list[str]:
        """Return the relevant reports or raise the first ``FetchError``.

        Both feeds are awaited to completion before either outcome is
        inspected; a weather failure takes precedence over a traffic one.
        """

        airports, traffic = await asyncio.gather(
            self.metar_ingestor.get_airports(),
            self.traffic_ingestor.get_traffic(),
            return_exceptions=True,
        )
        for outcome in (airports, traffic):
            if isinstance(outcome, BaseException):
                raise outcome

        relevant = relevant_airports(airports, traffic)
        logger.info(
            "Selected %s of %s METARs from %s pilots",
            len(relevant),
            len(airports),
            len(traffic),
        )
        return [airport.report for airport in relevant]

    async def fetch_metars(self) -> list[str] | str:
        """Relevant reports on success, otherwise a human-readable error message."""

        try:
            return await self.fetch_relevant_reports()
        except FetchError as exc:
            logger.warning("METAR refresh failed: %s", exc)
            return str(exc)


_default_pipeline: MetarPipeline | None = None


async def fetch_metars() -> list[str] | str:
    """Convenience wrapper using the default pipeline."""

    global _default_pipeline
    if _default_pipeline is None:
        _default_pipeline = MetarPipeline()
    return await _default_pipeline.fetch_metars()


__all__ = ["MetarPipeline", "fetch_metars"]
