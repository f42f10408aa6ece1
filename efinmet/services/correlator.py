"""Select the METARs that matter to traffic flying in or near Finnish airspace."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from efinmet.models.traffic import TrafficRecord
from efinmet.models.weather import AirportWeather

REGION_PREFIX = "EF"
MAX_DISTANCE_KM = 300.0
EARTH_RADIUS_KM = 6371.0


def distance_km(lat_a: float, lon_a: float, lat_b: float, lon_b: float) -> float:
    """Equirectangular distance between two points in kilometres.

    The cosine term takes the sum of the latitudes, not their mean; the
    300 km relevance threshold is defined against this exact formula.
    """

    x = (
        (lon_a - lon_b)
        * (math.pi / 180.0)
        * math.cos((lat_a + lat_b) * (math.pi / 180.0))
    )
    y = (lat_a - lat_b) * (math.pi / 180.0)
    return EARTH_RADIUS_KM * math.sqrt(x * x + y * y)


def _endpoints_start_with(record: TrafficRecord, prefix: str) -> bool:
    plan = record.flight_plan
    if plan is None:
        return False
    return plan.departure.startswith(prefix) or plan.arrival.startswith(prefix)


def in_region(record: TrafficRecord) -> bool:
    """True when the record departs from or arrives in the target region."""
    return _endpoints_start_with(record, REGION_PREFIX)


def is_associated(airport: AirportWeather, record: TrafficRecord) -> bool:
    """True when the airport ICAO prefixes the record's departure or arrival."""
    return _endpoints_start_with(record, airport.icao)


def _first_associated(
    airports: Sequence[AirportWeather], record: TrafficRecord
) -> Optional[AirportWeather]:
    return next((airport for airport in airports if is_associated(airport, record)), None)


def _nearby_traffic(
    airports: Sequence[AirportWeather], traffic: Iterable[TrafficRecord]
) -> list[TrafficRecord]:
    survivors: list[TrafficRecord] = []
    for record in traffic:
        if not in_region(record):
            continue
        airport = _first_associated(airports, record)
        if airport is None:
            continue
        distance = distance_km(
            airport.latitude, airport.longitude, record.latitude, record.longitude
        )
        if distance < MAX_DISTANCE_KM:
            survivors.append(record)
    return survivors


def relevant_airports(
    airports: Sequence[AirportWeather], traffic: Iterable[TrafficRecord]
) -> list[AirportWeather]:
    """Airports with at least one associated flight within range, in input order."""

    survivors = _nearby_traffic(airports, traffic)
    return [
        airport
        for airport in airports
        if any(is_associated(airport, record) for record in survivors)
    ]


def correlate(
    airports: Sequence[AirportWeather], traffic: Iterable[TrafficRecord]
) -> list[str]:
    """Report texts of the relevant airports, in input order."""
    return [airport.report for airport in relevant_airports(airports, traffic)]


__all__ = [
    "EARTH_RADIUS_KM",
    "MAX_DISTANCE_KM",
    "REGION_PREFIX",
    "correlate",
    "distance_km",
    "in_region",
    "is_associated",
    "relevant_airports",
]
