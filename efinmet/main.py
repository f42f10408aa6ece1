from __future__ import annotations

import asyncio
import contextlib
import logging
import time

from fastapi import FastAPI, Request

from efinmet.api import api_router
from efinmet.config import settings
from efinmet.services.refresher import BOARD_TITLE, MetarBoard, MetarRefresher

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("efinmet")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the board and run the refresher for the app's lifetime."""

    app.state.board = MetarBoard()

    if settings.enable_refresher:
        refresher = MetarRefresher(board=app.state.board)
        app.state.refresher_task = asyncio.create_task(refresher.run())
        logger.info(
            "METAR refresher started (every %.0f s)", refresher.interval
        )
    else:
        logger.info("METAR refresher disabled")

    try:
        yield
    finally:
        task = getattr(app.state, "refresher_task", None)
        if task:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task


app = FastAPI(title="EFIN METARs", lifespan=lifespan)


QUIET_PATHS = {"/healthz"}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    # Health checks log at DEBUG.
    level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
    logger.log(
        level,
        "%s %s -> %s in %.1f ms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


app.include_router(api_router)


@app.get("/", summary="Service index")
def read_root() -> dict[str, str]:
    """Point clients at the board endpoint."""

    return {"service": BOARD_TITLE, "metars": "/api/v1/metars"}
