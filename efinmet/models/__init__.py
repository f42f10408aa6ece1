"""Pydantic models for the EFIN METAR service."""

from .board import HealthResponse, MetarBoardResponse
from .traffic import FlightPlan, TrafficFeed, TrafficRecord
from .weather import AirportWeather

__all__ = [
    "AirportWeather",
    "FlightPlan",
    "HealthResponse",
    "MetarBoardResponse",
    "TrafficFeed",
    "TrafficRecord",
]
