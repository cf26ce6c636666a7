"""Error types raised by the DexView pipeline."""

from __future__ import annotations

from typing import Optional


class NetworkError(ValueError):
    """Base error for a failed PokeAPI fetch."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(NetworkError):
    """The request never produced a usable response (DNS, refused, timeout, bad JSON)."""


class HttpStatusError(NetworkError):
    """The server answered with a non-success status code."""

    def __init__(self, status: int, reason: str, url: Optional[str] = None) -> None:
        super().__init__(f"Network response was not ok: {status} {reason}", url=url)
        self.status = status
        self.reason = reason


class InvalidInputError(ValueError):
    """A batch was requested with something other than a list of identifiers."""
