"""Response models for the METAR board endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class MetarBoardResponse(BaseModel):
    """Latest refresh outcome, ready for display."""

    title: str = Field(..., description="Heading shown above the reports")
    reports: list[str] = Field(
        default_factory=list, description="Relevant METARs, one line each"
    )
    error: Optional[str] = Field(
        default=None, description="Message from the last failed refresh, if any"
    )
    updated_at: Optional[datetime] = Field(
        default=None, description="When the reports were last refreshed (UTC)"
    )


class HealthResponse(BaseModel):
    """Service liveness plus the state of the refresh loop."""

    status: Literal["ok", "degraded"] = Field(
        ..., description="degraded while the last refresh ended in an error"
    )
    env: str = Field(..., description="Deployment environment name")
    refresher_enabled: bool = Field(..., description="Whether the refresh loop runs")
    last_refresh: Optional[datetime] = Field(
        default=None, description="Time of the last successful refresh (UTC)"
    )


__all__ = ["HealthResponse", "MetarBoardResponse"]
