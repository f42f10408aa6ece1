"""Service-layer helpers for the EFIN METAR service."""

from .correlator import correlate, distance_km, relevant_airports
from .pipeline import MetarPipeline, fetch_metars
from .refresher import MetarBoard, MetarRefresher

__all__ = [
    "MetarBoard",
    "MetarPipeline",
    "MetarRefresher",
    "correlate",
    "distance_km",
    "fetch_metars",
    "relevant_airports",
]
