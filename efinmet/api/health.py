"""Health check endpoint."""

from fastapi import APIRouter, Request

from efinmet.config import settings
from efinmet.models.board import HealthResponse

router = APIRouter()


@router.get("/healthz", response_model=HealthResponse, summary="Health check")
def health_check(request: Request) -> HealthResponse:
    board = request.app.state.board
    return HealthResponse(
        status="ok" if board.error is None else "degraded",
        env=settings.efinmet_env,
        refresher_enabled=settings.enable_refresher,
        last_refresh=board.updated_at,
    )
