"""Core distance engines, cost functions and types.

Barrel export for clean imports across the package.
"""

from .types import (
    Symbol,
    SymbolSequence,
    TextOrSymbols,
    HomophoneGroup,
    EMPTY_GROUP,
    DistanceResult,
)
from .contracts import CostFunction, HomophoneLookup
from .costs import VOICING_PAIRS, identity_cost, phonetic_cost, paired_consonant
from .levenshtein import (
    to_symbols,
    distance,
    distance_with_maximum,
    distance_without_maximum,
    batch_distance,
    validate_max_distance,
)

__all__ = [
    "Symbol",
    "SymbolSequence",
    "TextOrSymbols",
    "HomophoneGroup",
    "EMPTY_GROUP",
    "DistanceResult",
    "CostFunction",
    "HomophoneLookup",
    "VOICING_PAIRS",
    "identity_cost",
    "phonetic_cost",
    "paired_consonant",
    "to_symbols",
    "distance",
    "distance_with_maximum",
    "distance_without_maximum",
    "batch_distance",
    "validate_max_distance",
]
