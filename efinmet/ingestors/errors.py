"""Errors raised when an upstream feed cannot be fetched or understood."""

from __future__ import annotations


class FetchError(Exception):
    """Base class for feed failures; ``str(exc)`` is the display message."""


class HttpError(FetchError):
    """Upstream answered with a non-success status code."""

    def __init__(self, feed: str, status_code: int):
        super().__init__(f"Failed to fetch {feed} data: HTTP {status_code}")
        self.feed = feed
        self.status_code = status_code


class NetworkError(FetchError):
    """The request could not be sent or the response could not be read."""

    def __init__(self, feed: str, cause: Exception):
        super().__init__(f"Failed to fetch {feed} data: {cause}")
        self.feed = feed
        self.cause = cause


class ParseError(FetchError):
    """The response body did not match the expected document shape."""

    def __init__(self, feed: str, reason: str):
        super().__init__(f"Failed to parse {feed} data: {reason}")
        self.feed = feed
        self.reason = reason


__all__ = ["FetchError", "HttpError", "NetworkError", "ParseError"]
