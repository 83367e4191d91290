"""Homophone data sources."""

from .homophones import HomophoneIndex, NullHomophoneLookup, load_homophone_lookup

__all__ = [
    "HomophoneIndex",
    "NullHomophoneLookup",
    "load_homophone_lookup",
]
