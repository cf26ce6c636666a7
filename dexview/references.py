"""Resolve ability and move references into display names."""

from __future__ import annotations

import asyncio
from typing import List, Sequence

from . import api
from .models import EntityWithAbilities, RawEntity, Reference, ResolvedEntity

# Only the first few moves are shown on a card.
MOVE_DISPLAY_LIMIT = 5


async def _resolve_name(reference: Reference) -> str:
    """Fetch one referenced resource and pick its English display name."""
    data = await api.fetch(reference.url)
    name = api._extract_localized_name(data.get("names", []))
    return name if name else api.UNKNOWN_NAME


async def resolve_names(references: Sequence[Reference]) -> List[str]:
    """Resolve every reference concurrently, keeping input order.

    Args:
        references: Ability or move references from a Pokemon record.

    Returns:
        Display names in the same order as ``references``.

    Raises:
        NetworkError: If any single fetch fails.
    """
    # All fetches start before any is awaited; gather preserves argument order.
    return list(await asyncio.gather(*(_resolve_name(ref) for ref in references)))


async def resolve_abilities(entity: RawEntity) -> EntityWithAbilities:
    """Replace ability references with display names."""
    abilities = await resolve_names(entity.abilities)
    return EntityWithAbilities(**entity.model_dump(exclude={"abilities"}), abilities=abilities)


async def resolve_moves(entity: EntityWithAbilities) -> ResolvedEntity:
    """Replace move references with display names, keeping the first few.

    Args:
        entity: Pokemon with abilities already resolved.

    Returns:
        Fully resolved Pokemon with at most ``MOVE_DISPLAY_LIMIT`` moves.
    """
    moves = await resolve_names(entity.moves)
    return ResolvedEntity(
        **entity.model_dump(exclude={"moves"}),
        moves=moves[:MOVE_DISPLAY_LIMIT],
    )
