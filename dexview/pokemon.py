"""Primary Pokemon lookup: fetch /pokemon/{id} and project it."""

from __future__ import annotations

from typing import Any, Dict, Optional

from . import api
from .models import EntityId, RawEntity, Reference


def _project_entity(data: Dict[str, Any]) -> RawEntity:
    """Convert a raw /pokemon payload into a RawEntity.

    Args:
        data: Decoded JSON for a single Pokemon.

    Returns:
        Normalized record with reference lists left unresolved.
    """
    # Types arrive wrapped as [{"slot": 1, "type": {"name": ...}}, ...].
    return RawEntity(
        name=data["name"],
        img=(data.get("sprites") or {}).get("front_default"),
        height=data["height"],
        weight=data["weight"],
        types=[entry["type"]["name"] for entry in data.get("types", [])],
        abilities=[Reference(**entry["ability"]) for entry in data.get("abilities", [])],
        moves=[Reference(**entry["move"]) for entry in data.get("moves", [])],
    )


async def load_entity(entity_id: EntityId) -> Optional[RawEntity]:
    """Look up a Pokemon by name or dex number.

    Args:
        entity_id: Pokemon name (e.g., "pikachu") or dex number (e.g., 25).

    Returns:
        The projected record, or None when the API returned no data.
    """
    data = await api.fetch(api.pokemon_url(entity_id))
    if not data:
        return None
    return _project_entity(data)
