"""Periodic refresh of the METAR board."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
import logging

from efinmet.config import settings
from efinmet.models.board import MetarBoardResponse
from efinmet.services.pipeline import MetarPipeline

logger = logging.getLogger("efinmet.refresher")

BOARD_TITLE = "EFIN Metars"
ERROR_TEMPLATE = "Error (will retry shortly): {}"
_DISPLAY_PREFIX = "METAR "


class MetarBoard:
    """Holds the outcome of the most recent refresh for the presentation layer."""

    def __init__(self) -> None:
        self.reports: list[str] = []
        self.error: str | None = None
        self.updated_at: datetime | None = None

    def update_reports(self, reports: list[str]) -> None:
        self.reports = list(reports)
        self.error = None
        self.updated_at = datetime.now(tz=timezone.utc)

    def set_error(self, message: str) -> None:
        # Previous reports are kept so a recovering display has something to show.
        self.error = ERROR_TEMPLATE.format(message)

    def reset_error(self) -> None:
        self.error = None

    def display_lines(self) -> list[str]:
        return [
            report[len(_DISPLAY_PREFIX):] if report.startswith(_DISPLAY_PREFIX) else report
            for report in self.reports
        ]

    def snapshot(self) -> MetarBoardResponse:
        return MetarBoardResponse(
            title=BOARD_TITLE,
            reports=self.display_lines(),
            error=self.error,
            updated_at=self.updated_at,
        )


class MetarRefresher:
    """Call the pipeline on a fixed interval and publish results to a board."""

    def __init__(
        self,
        *,
        board: MetarBoard,
        pipeline: MetarPipeline | None = None,
        interval: float | None = None,
    ) -> None:
        self.board = board
        self.pipeline = pipeline or MetarPipeline()
        self.interval = interval or settings.refresh_interval_seconds

    async def refresh_once(self) -> None:
        """Run one full cycle and record its outcome on the board."""

        result = await self.pipeline.fetch_metars()
        if isinstance(result, str):
            self.board.set_error(result)
            return

        self.board.update_reports(result)
        logger.info("METAR board updated with %s reports", len(result))

    async def run(self) -> None:
        """Refresh until cancelled; cycles never overlap."""

        while True:
            try:
                await self.refresh_once()
            except asyncio.CancelledError:
                logger.info("METAR refresher cancelled")
                raise
            except Exception as exc:  # pragma: no cover - defensive logging
                logger.exception("Unexpected METAR refresh failure")
                self.board.set_error(str(exc))
            await asyncio.sleep(self.interval)


__all__ = ["BOARD_TITLE", "ERROR_TEMPLATE", "MetarBoard", "MetarRefresher"]
