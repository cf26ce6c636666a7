from typing import Any, Dict, List, Optional

import pytest

import dexview.api as api
from dexview.errors import HttpStatusError

BASE = "https://pokeapi.co/api/v2"


def names_payload(en: Optional[str], **others: str) -> Dict[str, Any]:
    """Build a secondary resource with localized names."""
    names: List[Dict[str, Any]] = [
        {"name": value, "language": {"name": language}} for language, value in others.items()
    ]
    if en is not None:
        names.append({"name": en, "language": {"name": "en"}})
    return {"names": names}


def pokemon_payload(
    name: str,
    types: List[str],
    abilities: List[str],
    moves: List[str],
    height: int,
    weight: int,
) -> Dict[str, Any]:
    """Build a /pokemon payload shaped like PokeAPI's."""
    return {
        "name": name,
        "height": height,
        "weight": weight,
        "sprites": {"front_default": f"https://img.poke/{name}/front.png", "back_default": None},
        "types": [{"slot": i + 1, "type": {"name": t, "url": f"{BASE}/type/{t}/"}} for i, t in enumerate(types)],
        "abilities": [
            {"ability": {"name": a, "url": f"{BASE}/ability/{a}/"}, "is_hidden": False, "slot": i + 1}
            for i, a in enumerate(abilities)
        ],
        "moves": [{"move": {"name": m, "url": f"{BASE}/move/{m}/"}, "version_group_details": []} for m in moves],
    }


PIKACHU_MOVES = [
    "mega-punch",
    "pay-day",
    "thunder-punch",
    "slam",
    "double-kick",
    "mega-kick",
    "headbutt",
]


@pytest.fixture
def api_responses() -> Dict[str, Any]:
    pikachu = pokemon_payload(
        "pikachu",
        types=["electric"],
        abilities=["static", "lightning-rod"],
        moves=PIKACHU_MOVES,
        height=4,
        weight=60,
    )
    garchomp = pokemon_payload(
        "garchomp",
        types=["dragon", "ground"],
        abilities=["sand-veil", "rough-skin"],
        moves=["dragon-claw", "earthquake"],
        height=19,
        weight=950,
    )
    # Hidden-language fixture: no English entry for this ability.
    missingno = pokemon_payload(
        "missingno",
        types=["bird"],
        abilities=["glitch"],
        moves=["water-gun"],
        height=10,
        weight=100,
    )

    responses: Dict[str, Any] = {
        f"{BASE}/pokemon/pikachu": pikachu,
        f"{BASE}/pokemon/25": pikachu,
        f"{BASE}/pokemon/garchomp": garchomp,
        f"{BASE}/pokemon/445": garchomp,
        f"{BASE}/pokemon/missingno": missingno,
        f"{BASE}/ability/static/": names_payload("Static", ja="せいでんき"),
        f"{BASE}/ability/lightning-rod/": names_payload("Lightning Rod", fr="Paratonnerre"),
        f"{BASE}/ability/sand-veil/": names_payload("Sand Veil"),
        f"{BASE}/ability/rough-skin/": names_payload("Rough Skin"),
        f"{BASE}/ability/glitch/": names_payload(None, ja="バグ"),
        f"{BASE}/move/dragon-claw/": names_payload("Dragon Claw"),
        f"{BASE}/move/earthquake/": names_payload("Earthquake"),
        f"{BASE}/move/water-gun/": names_payload("Water Gun"),
    }
    for move in PIKACHU_MOVES:
        responses[f"{BASE}/move/{move}/"] = names_payload(move.replace("-", " ").title())
    return responses


@pytest.fixture(autouse=True)
def stubbed_pokeapi(monkeypatch: pytest.MonkeyPatch, api_responses: Dict[str, Any]) -> List[str]:
    """Serve PokeAPI payloads from memory; unknown URLs answer 404."""
    requested: List[str] = []

    def fake_fetch_json(url: str) -> Any:
        requested.append(url)
        if url in api_responses:
            return api_responses[url]
        raise HttpStatusError(404, "Not Found", url=url)

    monkeypatch.setattr(api, "fetch_json", fake_fetch_json)
    return requested
