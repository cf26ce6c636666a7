"""Expose FastMCP tools for batch Pokemon lookups."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .errors import InvalidInputError
from .logging_utils import configure_logging, create_logger
from .models import BatchView
from .pipeline import RANDOM_BATCH_SIZE, BatchRenderer, random_ids

# Each decorated function becomes a structured tool discoverable by MCP hosts.
mcp = FastMCP("DexView Server")

logger = create_logger("dexview.server")


async def _run_batch(ids: list) -> BatchView:
    # Tool calls are independent, so each one gets its own sink.
    renderer = BatchRenderer()
    try:
        report = await renderer.render_batch(ids)
    except InvalidInputError as exc:
        logger.warning("Rejected batch", error=str(exc))
        return BatchView(cards=[])
    return BatchView(cards=renderer.sink.cards, report=report)


@mcp.tool()
async def lookup_pokemon(names_or_dexes: list[str]) -> BatchView:
    """Look up Pokemon and return their rendered cards.

    Args:
        names_or_dexes: Pokemon names or national dex numbers.

    Returns:
        Cards with name, sprite, height, weight, types, abilities and first moves,
        plus a report of identifiers that were missing or failed.
    """
    ids = [entry.strip().lower() for entry in names_or_dexes if entry.strip()]
    return await _run_batch(ids)


@mcp.tool()
async def random_pokemon(count: int = RANDOM_BATCH_SIZE) -> BatchView:
    """Render a batch of random Pokemon.

    Args:
        count: How many random dex numbers to draw.

    Returns:
        Cards in arrival order plus the batch report.
    """
    return await _run_batch(random_ids(count))


if __name__ == "__main__":
    # stdio transport owns stdout; logs go to stderr.
    configure_logging()
    mcp.run()
