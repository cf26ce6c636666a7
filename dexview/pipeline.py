"""Batch orchestration: load, resolve and render each requested Pokemon."""

from __future__ import annotations

import asyncio
import random
from typing import Any, Callable, List, Optional, Sequence

from structlog.contextvars import bound_contextvars

from .errors import InvalidInputError
from .logging_utils import create_logger
from .models import BatchReport, EntityId, FailedLookup
from .pokemon import load_entity
from .references import resolve_abilities, resolve_moves
from .render import OutputSink, render_entity

# The Random button asks for this many Pokemon from the national dex range.
RANDOM_BATCH_SIZE = 4
RANDOM_ID_RANGE = (1, 1010)

logger = create_logger("dexview.pipeline")


def parse_search_value(value: str) -> List[str]:
    """Split the search field into identifiers.

    Args:
        value: Comma-separated names or dex numbers, e.g. "pikachu, 25".

    Returns:
        Lower-cased identifiers; empty when the field is blank.
    """
    if not value.strip():
        return []
    # PokeAPI names are lower-case; normalise like the name lookups do.
    return [part.strip().lower() for part in value.split(",") if part.strip()]


def random_ids(
    count: int = RANDOM_BATCH_SIZE,
    low: int = RANDOM_ID_RANGE[0],
    high: int = RANDOM_ID_RANGE[1],
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Draw dex numbers for a random batch.

    Draws are independent, so the same number can appear more than once.
    """
    rng = rng or random.Random()
    return [rng.randint(low, high) for _ in range(count)]


class BatchRenderer:
    """Run the per-identifier pipeline for a batch and write cards to a sink."""

    def __init__(
        self,
        sink: Optional[OutputSink] = None,
        loader: Callable[..., Any] = load_entity,
    ) -> None:
        self.sink = sink if sink is not None else OutputSink()
        self._loader = loader

    async def render_batch(self, ids: Sequence[EntityId]) -> BatchReport:
        """Clear the sink and render every identifier concurrently.

        Args:
            ids: Pokemon names or dex numbers. Duplicates render twice.

        Returns:
            Which identifiers rendered, were missing, failed or went stale.

        Raises:
            InvalidInputError: If ``ids`` is not a list or tuple.
        """
        if not isinstance(ids, (list, tuple)):
            logger.warning("Not a valid array", received=type(ids).__name__)
            raise InvalidInputError(f"Expected a list of identifiers, got {type(ids).__name__}")

        generation = self.sink.clear()
        report = BatchReport(generation=generation, requested=list(ids))
        # Each identifier's chain handles its own failures, so gather never raises.
        await asyncio.gather(*(self._render_one(entity_id, generation, report) for entity_id in ids))
        return report

    async def _render_one(self, entity_id: EntityId, generation: int, report: BatchReport) -> None:
        with bound_contextvars(entity_id=str(entity_id), generation=generation):
            try:
                entity = await self._loader(entity_id)
                if entity is None:
                    logger.info("Pokemon not found", entity_id=entity_id)
                    report.not_found.append(entity_id)
                    return
                with_abilities = await resolve_abilities(entity)
                resolved = await resolve_moves(with_abilities)
                card = render_entity(resolved, entity_id)
            except Exception as exc:
                logger.error("Error fetching Pokemon", entity_id=entity_id, error=str(exc))
                report.failed.append(FailedLookup(entity_id=entity_id, error=str(exc)))
                return

            if self.sink.append(card, generation):
                report.rendered.append(entity_id)
            else:
                logger.info("Discarding stale result", current_generation=self.sink.generation)
                report.stale.append(entity_id)

    def clear(self) -> None:
        """Empty the sink without running any pipeline."""
        self.sink.clear()
