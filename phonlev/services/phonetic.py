"""Phonetic distance service.

Voiced/voiceless consonant substitutions cost nothing, and words listed in
the same homophone group are at distance 0 without running the distance
engine at all.
"""

from functools import lru_cache
from typing import Iterable, Optional

from phonlev.config import Settings, get_settings
from phonlev.core import (
    EMPTY_GROUP,
    DistanceResult,
    HomophoneGroup,
    HomophoneLookup,
    TextOrSymbols,
    distance,
    phonetic_cost,
    to_symbols,
    validate_max_distance,
)
from phonlev.observ import get_logger
from phonlev.storage import load_homophone_lookup

logger = get_logger(__name__)


def _as_text(word: TextOrSymbols) -> str:
    if isinstance(word, str):
        return word
    return "".join(chr(symbol) for symbol in to_symbols(word))


class PhoneticService:
    """Homophone gate in front of the phonetic-cost distance engine."""

    def __init__(
        self,
        lookup: Optional[HomophoneLookup] = None,
        settings: Optional[Settings] = None
    ):
        settings = settings or get_settings()
        self._lookup = lookup if lookup is not None else load_homophone_lookup(settings)
        self._symmetric = settings.symmetric_homophones

        logger.debug(
            "phonetic_service_initialized",
            lookup=type(self._lookup).__name__,
            symmetric=self._symmetric
        )

    def homophone_group(self, word: str) -> HomophoneGroup:
        """Group of word; lookup failures count as no group."""
        try:
            return self._lookup.lookup(word) or EMPTY_GROUP
        except Exception as e:
            logger.warning(
                "homophone_lookup_failed",
                word=word,
                error=str(e),
                error_type=type(e).__name__,
                fallback=True
            )
            return EMPTY_GROUP

    def _shares_group(self, key: str, other: str) -> bool:
        """Whether the group looked up by key holds both words."""
        group = self.homophone_group(key)
        return key in group and other in group

    def are_homophones(self, word1: str, word2: str) -> bool:
        if self._shares_group(word1, word2):
            return True
        if self._symmetric and word1 != word2:
            return self._shares_group(word2, word1)
        return False

    def distance(
        self,
        word1: TextOrSymbols,
        word2: TextOrSymbols,
        max_distance: Optional[int] = None
    ) -> int:
        """Phonetic distance between two words.

        Returns 0 for homophones, otherwise the edit distance in which
        voiced/voiceless consonant substitutions are free, capped at
        max_distance when given.
        """
        if max_distance is not None:
            validate_max_distance(max_distance)

        if self.are_homophones(_as_text(word1), _as_text(word2)):
            logger.debug("homophone_match", word1=_as_text(word1), word2=_as_text(word2))
            return 0

        return distance(word1, word2, max_distance, phonetic_cost)

    def batch_distance(
        self,
        source: TextOrSymbols,
        candidates: Iterable[TextOrSymbols],
        max_distance: Optional[int] = None
    ) -> list[DistanceResult]:
        """Phonetic distance from one source to many candidates."""
        if max_distance is not None:
            validate_max_distance(max_distance)

        symbols = to_symbols(source)
        label = _as_text(source)
        group = self.homophone_group(label)

        results = []
        for candidate in candidates:
            target = _as_text(candidate)
            if label in group and target in group:
                value = 0
            elif self._symmetric and target != label and self._shares_group(target, label):
                value = 0
            else:
                value = distance(symbols, target, max_distance, phonetic_cost)
            results.append(DistanceResult(
                source=label,
                target=target,
                distance=value,
                max_distance=max_distance,
                bounded=max_distance is not None and value >= max_distance
            ))

        logger.debug("phonetic_batch_completed", source=label, num_candidates=len(results))
        return results


@lru_cache
def get_phonetic_service() -> PhoneticService:
    """Get shared phonetic service built from settings."""
    return PhoneticService()


def phonetic_distance(
    word1: TextOrSymbols,
    word2: TextOrSymbols,
    max_distance: Optional[int] = None
) -> int:
    """Phonetic distance using the shared service."""
    return get_phonetic_service().distance(word1, word2, max_distance)
