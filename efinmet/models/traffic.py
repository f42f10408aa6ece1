"""Models for VATSIM pilot positions and their filed flight plans."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FlightPlan(BaseModel):
    """Flight plan filed by a pilot; only the endpoints drive correlation."""

    aircraft_short: str = Field(..., description="Short aircraft type designator")
    departure: str = Field(..., description="Departure airport, usually ICAO")
    arrival: str = Field(..., description="Arrival airport, usually ICAO")
    alternate: str = Field(..., description="Alternate airport")
    flight_rules: str = Field(..., description="I for IFR, V for VFR")
    remarks: str = Field(..., description="Free-form remarks")
    route: str = Field(..., description="Filed route string")

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)


class TrafficRecord(BaseModel):
    """Position report for a single connected pilot."""

    callsign: str = Field(..., description="Flight callsign")
    id: int = Field(..., alias="cid", description="VATSIM member id")
    name: str = Field(..., description="Pilot name")
    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")
    altitude: int = Field(..., description="Altitude in feet")
    ground_speed: int = Field(
        ..., alias="groundspeed", description="Ground speed in knots"
    )
    heading: int = Field(..., description="Heading in degrees")
    flight_plan: Optional[FlightPlan] = Field(
        ..., description="Filed flight plan, null when none has been filed"
    )

    model_config = ConfigDict(
        extra="ignore", frozen=True, populate_by_name=True, strict=True
    )


class TrafficFeed(BaseModel):
    """The subset of the VATSIM data document used by the service."""

    pilots: list[TrafficRecord] = Field(..., description="Connected pilots")

    model_config = ConfigDict(extra="ignore")


__all__ = ["FlightPlan", "TrafficFeed", "TrafficRecord"]
