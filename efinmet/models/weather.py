"""Airport weather report models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AirportWeather(BaseModel):
    """Latest METAR for one airport, as published by the weather feed."""

    icao: str = Field(..., min_length=1, description="ICAO airport identifier")
    latitude: float = Field(..., description="Airport latitude in decimal degrees")
    longitude: float = Field(..., description="Airport longitude in decimal degrees")
    report: str = Field(..., description="Raw METAR report text")

    model_config = ConfigDict(frozen=True)


__all__ = ["AirportWeather"]
