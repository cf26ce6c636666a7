"""Card rendering and the output sink that holds displayed cards."""

from __future__ import annotations

from html import escape
from typing import List

from .models import EntityId, Fragment, PokemonCard, ResolvedEntity


def render_entity(entity: ResolvedEntity, entity_id: EntityId) -> PokemonCard:
    """Project a resolved Pokemon into its display fragments.

    Args:
        entity: Fully resolved Pokemon.
        entity_id: Identifier the batch requested, kept for reporting.

    Returns:
        Card with heading, image and the labelled attribute lines in display order.
    """
    fragments = [
        Fragment(kind="heading", value=entity.name),
        Fragment(kind="image", value=entity.img),
        Fragment(kind="field", label="Height", value=str(entity.height)),
        Fragment(kind="field", label="Weight", value=str(entity.weight)),
        Fragment(kind="field", label="Types", value=", ".join(entity.types)),
        Fragment(kind="field", label="Abilities", value=", ".join(entity.abilities)),
        Fragment(kind="field", label="Moves", value=", ".join(entity.moves)),
    ]
    return PokemonCard(entity_id=entity_id, fragments=fragments)


def card_to_html(card: PokemonCard) -> str:
    """Render one card as an HTML ``div``."""
    parts: List[str] = []
    for fragment in card.fragments:
        value = escape(fragment.value or "")
        if fragment.kind == "heading":
            parts.append(f"<h3>{value}</h3>")
        elif fragment.kind == "image":
            parts.append(f'<img src="{value}">')
        else:
            parts.append(f"<p><b>{escape(fragment.label or '')}:</b> {value}</p>")
    return "<div>" + "".join(parts) + "</div>"


class OutputSink:
    """Container of rendered cards for one page.

    ``clear`` and ``append`` are the only mutations. Each ``clear`` starts a
    new generation; cards appended for an older generation are dropped so a
    superseded batch cannot leak into the current one.
    """

    def __init__(self) -> None:
        self._cards: List[PokemonCard] = []
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def cards(self) -> List[PokemonCard]:
        return list(self._cards)

    def clear(self) -> int:
        """Drop all cards and return the new generation number."""
        self._cards.clear()
        self._generation += 1
        return self._generation

    def append(self, card: PokemonCard, generation: int) -> bool:
        """Add a card if it belongs to the current generation.

        Returns:
            True when the card was kept, False when it was stale.
        """
        if generation != self._generation:
            return False
        self._cards.append(card)
        return True

    def to_html(self) -> str:
        return "".join(card_to_html(card) for card in self._cards)
