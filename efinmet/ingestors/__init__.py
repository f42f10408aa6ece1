"""Feed ingestors for the EFIN METAR service."""

from .errors import FetchError, HttpError, NetworkError, ParseError
from .metar import MetarIngestor, parse_metar_document
from .traffic import TrafficIngestor, parse_traffic_document

__all__ = [
    "FetchError",
    "HttpError",
    "MetarIngestor",
    "NetworkError",
    "ParseError",
    "TrafficIngestor",
    "parse_metar_document",
    "parse_traffic_document",
]
