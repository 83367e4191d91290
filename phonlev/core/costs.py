"""Substitution cost functions.

Voiced and voiceless consonant pairs follow English phonology:
http://en.wikipedia.org/wiki/English_phonology
"""

from types import MappingProxyType
from typing import Mapping, Optional

from .types import Symbol


VOICING_PAIRS: Mapping[Symbol, Symbol] = MappingProxyType({
    ord(voiceless): ord(voiced)
    for voiceless, voiced in (
        ("p", "b"),
        ("t", "d"),
        ("k", "g"),
        ("f", "v"),
        ("s", "z"),
    )
})

_VOICED_TO_VOICELESS: Mapping[Symbol, Symbol] = MappingProxyType({
    voiced: voiceless for voiceless, voiced in VOICING_PAIRS.items()
})


def identity_cost(a: Symbol, b: Symbol) -> int:
    return 0 if a == b else 1


def paired_consonant(symbol: Symbol) -> Optional[Symbol]:
    """Voicing counterpart of symbol in either direction, or None."""
    paired = VOICING_PAIRS.get(symbol)
    if paired is None:
        paired = _VOICED_TO_VOICELESS.get(symbol)
    return paired


def phonetic_cost(a: Symbol, b: Symbol) -> int:
    """Free substitution between equal symbols and voicing pairs."""
    if a == b:
        return 0
    if paired_consonant(a) == b or paired_consonant(b) == a:
        return 0
    return 1
