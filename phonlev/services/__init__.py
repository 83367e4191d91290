"""Service layer implementations.

Barrel export for distance services.
"""

from .phonetic import PhoneticService, get_phonetic_service, phonetic_distance

__all__ = [
    "PhoneticService",
    "get_phonetic_service",
    "phonetic_distance",
]
