"""Tests for DexView MCP tool wrappers.

The tools are plain coroutines under the decorator, so they are driven
directly with asyncio.run.
"""

from __future__ import annotations

import asyncio
import runpy
import sys

import pytest
from structlog.testing import capture_logs

import dexview.server as server


def test_lookup_pokemon_returns_cards_and_report() -> None:
    # Act
    view = asyncio.run(server.lookup_pokemon(["Garchomp", " ", "99999"]))
    # Assert
    assert [card.entity_id for card in view.cards] == ["garchomp"]
    assert view.report.requested == ["garchomp", "99999"]
    assert [failure.entity_id for failure in view.report.failed] == ["99999"]


def test_run_batch_rejects_non_list_input() -> None:
    """A bare string yields an empty view and a log entry, not an exception."""
    with capture_logs() as logs:
        view = asyncio.run(server._run_batch("pikachu"))
    assert view.cards == []
    assert view.report is None
    assert any(entry["event"] == "Rejected batch" for entry in logs)


def test_random_pokemon_respects_count(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(server, "random_ids", lambda count: [25] * count)
    view = asyncio.run(server.random_pokemon(2))
    assert [card.entity_id for card in view.cards] == [25, 25]


def test_server_main_invokes_run(monkeypatch: pytest.MonkeyPatch) -> None:
    """Invoke the __main__ path without starting a real server."""
    called = {"run": False}

    def fake_run(self) -> None:
        called["run"] = True

    # Ensure a clean import path so runpy doesn't warn about reusing the module.
    sys.modules.pop("dexview.server", None)
    monkeypatch.setattr("mcp.server.fastmcp.FastMCP.run", fake_run)
    monkeypatch.setattr("dexview.logging_utils.configure_logging", lambda *args, **kwargs: None)
    runpy.run_module("dexview.server", run_name="__main__")
    assert called["run"]
