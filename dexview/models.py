"""Pydantic models for DexView pipeline stages and rendered output."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Identifier used as the /pokemon/{id} path segment: a dex number or a name.
EntityId = Union[int, str]


class _Frozen(BaseModel):
    """Immutable base: every pipeline stage returns a new value."""

    model_config = ConfigDict(frozen=True)


# --- Pipeline stage models ---


class Reference(_Frozen):
    """Name/URL pointer to an ability or move resource."""

    name: str
    url: str


class RawEntity(_Frozen):
    """Primary Pokemon record projected from /pokemon/{id}."""

    name: str
    img: Optional[str] = Field(description="Default front sprite URL (may be None)")
    # Raw API units: decimeters and hectograms.
    height: int
    weight: int
    types: List[str]
    abilities: List[Reference]
    moves: List[Reference]


class EntityWithAbilities(_Frozen):
    """Pokemon whose ability references have been resolved to display names."""

    name: str
    img: Optional[str]
    height: int
    weight: int
    types: List[str]
    abilities: List[str]
    moves: List[Reference]


class ResolvedEntity(_Frozen):
    """Fully resolved Pokemon ready for rendering."""

    name: str
    img: Optional[str]
    height: int
    weight: int
    types: List[str]
    abilities: List[str]
    moves: List[str] = Field(description="First moves by display name, original order")


# --- Rendered output ---


class Fragment(_Frozen):
    """Single display fragment of a rendered card."""

    kind: str = Field(description="one of: heading, image, field")
    label: Optional[str] = None
    value: Optional[str]


class PokemonCard(_Frozen):
    """Ordered display fragments for one rendered Pokemon."""

    entity_id: EntityId
    fragments: List[Fragment]


class FailedLookup(_Frozen):
    """Identifier whose pipeline failed, with the error text."""

    entity_id: EntityId
    error: str


class BatchReport(BaseModel):
    """Outcome of one batch run; duplicate identifiers appear once per request."""

    generation: int
    requested: List[EntityId]
    rendered: List[EntityId] = Field(default_factory=list)
    not_found: List[EntityId] = Field(default_factory=list)
    failed: List[FailedLookup] = Field(default_factory=list)
    stale: List[EntityId] = Field(
        default_factory=list, description="Identifiers whose cards arrived after a newer batch"
    )


class BatchView(BaseModel):
    """Cards shown after a batch together with its report."""

    cards: List[PokemonCard]
    report: Optional[BatchReport] = None
