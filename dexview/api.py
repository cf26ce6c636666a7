"""Shared API helpers for PokeAPI access."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

import requests

from .errors import HttpStatusError, TransportError
from .logging_utils import create_logger

POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
POKEMON_URL_TEMPLATE = POKEAPI_BASE_URL + "/pokemon/{id}"

# Seconds before a single GET is abandoned as a transport failure.
REQUEST_TIMEOUT = 10

# Display names are only ever taken in this language.
TARGET_LANGUAGE = "en"
UNKNOWN_NAME = "Unknown"

logger = create_logger("dexview.api")


def fetch_json(url: str) -> Any:
    """Fetch JSON data from a URL.

    Args:
        url: PokeAPI URL to request.

    Returns:
        Parsed JSON response data.

    Raises:
        HttpStatusError: If the server answers with a non-success status.
        TransportError: If the request fails or the body is not valid JSON.
    """
    # Every failure is logged here once, then surfaced unchanged to the caller.
    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        error = TransportError(f"Request to {url} failed: {exc}", url=url)
        logger.error("Error fetching data", url=url, error=str(error))
        raise error from exc

    if not response.ok:
        error = HttpStatusError(response.status_code, response.reason or "", url=url)
        logger.error("Error fetching data", url=url, error=str(error))
        raise error

    try:
        return response.json()
    except ValueError as exc:
        error = TransportError(f"Invalid JSON from {url}: {exc}", url=url)
        logger.error("Error fetching data", url=url, error=str(error))
        raise error from exc


async def fetch(url: str) -> Any:
    """Fetch JSON data without blocking the event loop.

    Args:
        url: PokeAPI URL to request.

    Returns:
        Parsed JSON response data.
    """
    # requests is blocking; run it in a worker thread so many fetches overlap.
    return await asyncio.to_thread(fetch_json, url)


def pokemon_url(entity_id: int | str) -> str:
    """Build the primary resource URL for a Pokemon identifier."""
    return POKEMON_URL_TEMPLATE.format(id=entity_id)


def _extract_localized_name(
    entries: List[Dict], language: str = TARGET_LANGUAGE
) -> Optional[str]:
    """Extract the display name for a language.

    Args:
        entries: List of localized name entries from PokeAPI.
        language: Language code to match.

    Returns:
        Localized name text, if available.
    """
    for entry in entries:
        if (entry.get("language") or {}).get("name") == language:
            return entry.get("name")
    return None
