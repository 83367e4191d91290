"""Service contracts and interfaces.

Defines protocols for dependency injection and testing.
"""

from typing import Protocol
from .types import Symbol, HomophoneGroup


class CostFunction(Protocol):
    """Substitution cost between two symbols.

    Must be pure and total over the symbols it is given. Returns 0 or 1.
    """

    def __call__(self, a: Symbol, b: Symbol) -> int:
        ...


class HomophoneLookup(Protocol):
    """Keyed access to a homophone-group dataset."""

    def lookup(self, word: str) -> HomophoneGroup:
        """Return the homophone group of word, or an empty group."""
        ...
