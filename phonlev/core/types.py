"""Core type definitions for distance computation.

Symbols are Unicode code points; sequences are ordered, read-only collections
of them. Results crossing the public API are frozen Pydantic models.
"""

from typing import Optional, Sequence, Union
from pydantic import BaseModel, Field, ConfigDict


Symbol = int
SymbolSequence = Sequence[Symbol]

# Raw text, or code points decoded once and reused across comparisons
TextOrSymbols = Union[str, SymbolSequence]

HomophoneGroup = frozenset[str]

EMPTY_GROUP: HomophoneGroup = frozenset()


class DistanceResult(BaseModel):
    """Distance between a source and one candidate."""
    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    distance: int = Field(ge=0)
    max_distance: Optional[int] = Field(default=None, ge=0)
    bounded: bool = False  # Cap reached; distance is max_distance, not exact
