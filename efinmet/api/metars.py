"""Read-only view of the latest METAR board."""

from __future__ import annotations

from fastapi import APIRouter, Request

from efinmet.models.board import MetarBoardResponse
from efinmet.services.refresher import MetarBoard

router = APIRouter(prefix="/api/v1", tags=["metars"])


@router.get(
    "/metars",
    response_model=MetarBoardResponse,
    summary="Latest METARs relevant to traffic in Finnish airspace",
)
async def get_metars(request: Request) -> MetarBoardResponse:
    """Return the reports and error state from the most recent refresh."""

    board: MetarBoard = request.app.state.board
    return board.snapshot()
